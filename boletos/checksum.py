import re
from itertools import cycle

BANKING = "banking"
RAW = "raw"


def digits(value) -> str:
    """Return only numeric characters from value."""
    return re.sub(r"\D", "", str(value) if value is not None else "")


def modulo10(numero) -> int:
    """Modulo 10 check digit, weights 2 and 1 from the rightmost digit."""
    soma = 0
    peso = 2
    for digito in reversed(digits(numero)):
        parcial = int(digito) * peso
        soma += parcial // 10 + parcial % 10
        peso = 1 if peso == 2 else 2
    return (10 - (soma % 10)) % 10


def modulo11(numero, base: int = 9, mode: str = BANKING, substitute: int = 0) -> int:
    """Modulo 11 with weights cycling from 2 up to ``base``.

    In ``BANKING`` mode the result is ``11 - sum % 11``, with 0, 10 and 11
    replaced by ``substitute``. In ``RAW`` mode the bare remainder
    ``sum % 11`` is returned, which may be 10.
    """
    if mode not in (BANKING, RAW):
        raise ValueError(f"Modo de módulo 11 inválido: {mode}")
    pesos = cycle(range(2, base + 1))
    soma = 0
    for digito, peso in zip(reversed(digits(numero)), pesos):
        soma += int(digito) * peso
    resto = soma % 11
    if mode == RAW:
        return resto
    dv = 11 - resto
    if dv in (0, 10, 11):
        return substitute
    return dv
