"""Montagem do código de barras (44 posições) e da linha digitável (47).

Layout FEBRABAN do código de barras::

    banco(3) moeda(1) DV(1) fator(4) valor(10) campo livre(25)
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

from . import config
from .checksum import digits, modulo10, modulo11
from .exceptions import InvalidCheckDigitError, InvalidLengthError, MissingRequiredFieldError

DateLike = Union[date, datetime]

BARCODE_LENGTH = 44
DIGITABLE_LINE_LENGTH = 47
FREE_FIELD_LENGTH = 25


def due_date_factor(vencimento: DateLike | None, epoch: date | None = None) -> str:
    """Days between ``epoch`` and the due date, as four digits."""
    if not vencimento:
        return "0000"

    if isinstance(vencimento, datetime):
        vencimento = vencimento.date()

    base = epoch or config.DUE_DATE_EPOCH
    dias = max((vencimento - base).days, 0)
    # A partir de 22/02/2025 o fator volta a 1000
    if dias > 9999:
        dias = (dias - 1000) % 9000 + 1000
    return f"{dias:04d}"


def format_amount(centavos) -> str:
    """Amount in cents as the ten-digit barcode value."""
    valor = int(centavos or 0)
    if valor < 0:
        raise InvalidLengthError(f"Valor negativo não pode ser codificado: {valor}")
    return _fixed(str(valor), 10, "valor")


def _fixed(numero: str, largura: int, nome: str) -> str:
    if len(numero) > largura:
        raise InvalidLengthError(
            f"{nome} excede {largura} dígitos: {numero}"
        )
    return numero.zfill(largura)


def build_barcode(bank_code, due_factor, amount, free_field, currency_code=None) -> str:
    """Return the 44-digit barcode for the given components.

    ``amount`` is the already formatted value field (or cents). Only the free
    field is silently truncated to 25 digits; every other component that does
    not fit its slot raises :class:`InvalidLengthError`.
    """
    banco = digits(bank_code)
    if not banco:
        raise MissingRequiredFieldError("bank_code")
    banco = _fixed(banco, 3, "banco")
    moeda = _fixed(digits(currency_code or config.CURRENCY_CODE) or "9", 1, "moeda")
    fator = _fixed(digits(due_factor), 4, "fator de vencimento")
    valor = _fixed(digits(amount), 10, "valor")
    campo_livre = digits(free_field)[:FREE_FIELD_LENGTH].ljust(FREE_FIELD_LENGTH, "0")

    parcial = banco + moeda + fator + valor + campo_livre
    dv = str(modulo11(parcial))
    return banco + moeda + dv + fator + valor + campo_livre


def _campo(numero: str) -> str:
    return f"{numero[:5]}.{numero[5:]}{modulo10(numero)}"


def build_digitable_line(codigo_barras) -> str:
    """Generate the "linha digitável" string from a 44-digit barcode."""

    codigo = digits(codigo_barras)
    if len(codigo) != BARCODE_LENGTH:
        raise InvalidLengthError(
            f"Código de barras deve ter {BARCODE_LENGTH} dígitos (recebido {len(codigo)})"
        )
    banco_moeda = codigo[:4]
    fator_valor = codigo[5:19]
    campo_livre = codigo[19:]

    campo1 = _campo(banco_moeda + campo_livre[:5])
    campo2 = _campo(campo_livre[5:15])
    campo3 = _campo(campo_livre[15:25])

    return f"{campo1} {campo2} {campo3} {codigo[4]} {fator_valor}"


def barcode_from_digitable_line(linha) -> str:
    """Rebuild the 44-digit barcode from a digitable line.

    The three modulo 10 digits are checked before the fields are reassembled.
    """
    numeros = digits(linha)
    if len(numeros) != DIGITABLE_LINE_LENGTH:
        raise InvalidLengthError(
            f"Linha digitável deve ter {DIGITABLE_LINE_LENGTH} dígitos (recebido {len(numeros)})"
        )

    campos = (numeros[:9], numeros[10:20], numeros[21:31])
    verificadores = (numeros[9], numeros[20], numeros[31])
    for posicao, (campo, dv) in enumerate(zip(campos, verificadores), start=1):
        if str(modulo10(campo)) != dv:
            raise InvalidCheckDigitError(f"Dígito verificador do campo {posicao} inválido")

    campo1, campo2, campo3 = campos
    dv_geral = numeros[32]
    fator_valor = numeros[33:]
    return campo1[:4] + dv_geral + fator_valor + campo1[4:] + campo2 + campo3
