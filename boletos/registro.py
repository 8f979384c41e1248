"""
Tabela de códigos bancários (COMPE) para nomes das instituições.

A tabela é montada na importação e não é alterada depois, podendo ser lida
por várias threads sem sincronização.
"""

from dataclasses import dataclass
from types import MappingProxyType

from .checksum import RAW, digits, modulo11

BANCOS = MappingProxyType({
    "001": "Banco do Brasil S.A.",
    "033": "Banco Santander (Brasil) S.A.",
    "077": "Banco Inter S.A.",
    "085": "Cooperativa Central de Crédito - Ailos",
    "104": "Caixa Econômica Federal",
    "136": "Confederação Nacional das Cooperativas Centrais Unicred",
    "208": "Banco BTG Pactual S.A.",
    "212": "Banco Original S.A.",
    "237": "Banco Bradesco S.A.",
    "246": "Banco ABC Brasil S.A.",
    "260": "Nu Pagamentos S.A.",
    "290": "PagSeguro Internet S.A.",
    "336": "Banco C6 S.A.",
    "341": "Itaú Unibanco S.A.",
    "422": "Banco Safra S.A.",
    "623": "Banco Pan S.A.",
    "655": "Banco Votorantim S.A.",
    "748": "Banco Cooperativo Sicredi S.A.",
    "756": "Banco Cooperativo do Brasil S.A. - Bancoob",
})

# Bancos que imprimem 0 no lugar de X no dígito do código do banco
_SEM_X = ("104", "085")


@dataclass(frozen=True)
class BankInfo:
    code: str
    name: str


def normalize_bank_code(bank_code) -> str:
    return digits(bank_code).zfill(3)


def get_bank_info(bank_code) -> BankInfo:
    codigo = normalize_bank_code(bank_code)
    return BankInfo(codigo, BANCOS.get(codigo, f"Banco {codigo}"))


def bank_code_with_dv(bank_code) -> str:
    """Bank code as printed on the slip header, e.g. ``033-7``."""
    codigo = normalize_bank_code(bank_code)
    dv = (modulo11(codigo, mode=RAW) * 10) % 11
    if dv == 10:
        dv = "0" if codigo in _SEM_X else "X"
    return f"{codigo}-{dv}"
