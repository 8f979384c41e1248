from dataclasses import fields

from .models import Beneficiary, BoletoRecord, Payer

_CAMPOS_BOLETO = {f.name for f in fields(BoletoRecord) if f.init}


def _montar(cls, dados):
    if isinstance(dados, cls):
        return dados
    dados = dados or {}
    if not isinstance(dados, dict):
        raise ValueError(f"Formato inválido para {cls.__name__.lower()}")
    conhecidos = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in dados.items() if k in conhecidos})


def criar_boleto(dados: dict) -> BoletoRecord:
    """Build a :class:`BoletoRecord` from a JSON-like mapping.

    Unknown keys are ignored; ``payer`` and ``beneficiary`` may be nested
    mappings. Dates may be ISO strings.
    """
    if not isinstance(dados, dict):
        raise ValueError("Dados do boleto devem ser um objeto")

    valores = {k: v for k, v in dados.items() if k in _CAMPOS_BOLETO}
    for obrigatorio in ("bank_code", "due_date", "amount", "our_number"):
        valores.setdefault(obrigatorio, None)
    valores["payer"] = _montar(Payer, dados.get("payer"))
    valores["beneficiary"] = _montar(Beneficiary, dados.get("beneficiary"))
    return BoletoRecord(**valores)
