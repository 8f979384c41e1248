"""Interleaved 2 of 5 (ITF) encoding of the boleto barcode.

Only geometry is computed here: the renderer decides how to paint each
element. Widths are given in modules (narrow = 1, wide = 3).
"""

from __future__ import annotations

from dataclasses import dataclass

from . import config
from .checksum import digits

NARROW = 1
WIDE = 3

PATTERNS = {
    "0": "nnwwn",
    "1": "wnnnw",
    "2": "nwnnw",
    "3": "wwnnn",
    "4": "nnwnw",
    "5": "wnwnn",
    "6": "nwwnn",
    "7": "nnnww",
    "8": "wnnwn",
    "9": "nwnwn",
}

START = "nnnn"
STOP = "wnn"


@dataclass(frozen=True)
class ItfElement:
    is_bar: bool
    width: int


@dataclass(frozen=True)
class ItfRectangle:
    x: float
    y: float
    width: float
    height: float
    is_bar: bool


def _largura(simbolo: str) -> int:
    return NARROW if simbolo == "n" else WIDE


def _normalizar(numero) -> str:
    numero = digits(numero)
    if len(numero) % 2:
        numero = "0" + numero
    return numero


def _simbolos(numero: str):
    """Yield (is_bar, symbol) for start, data pairs and stop."""
    for idx, ch in enumerate(START):
        yield not idx % 2, ch

    for i in range(0, len(numero), 2):
        barras = PATTERNS[numero[i]]
        espacos = PATTERNS[numero[i + 1]]
        for b, e in zip(barras, espacos):
            yield True, b
            yield False, e

    for idx, ch in enumerate(STOP):
        yield not idx % 2, ch


def encode_itf(numero) -> list[ItfElement]:
    """Encode a digit string as a sequence of bars and spaces."""
    return [ItfElement(is_bar, _largura(ch)) for is_bar, ch in _simbolos(_normalizar(numero))]


def itf_width(numero, module_width: float | None = None) -> float:
    module_width = config.ITF_MODULE_WIDTH if module_width is None else module_width
    return sum(el.width for el in encode_itf(numero)) * module_width


def itf_rectangles(
    numero,
    x: float = 0,
    y: float = 0,
    height: float | None = None,
    module_width: float | None = None,
) -> list[ItfRectangle]:
    """Lay the encoded elements out from ``(x, y)`` in absolute units."""
    height = config.ITF_HEIGHT if height is None else height
    module_width = config.ITF_MODULE_WIDTH if module_width is None else module_width

    retangulos = []
    cursor = x
    for elemento in encode_itf(numero):
        largura = elemento.width * module_width
        retangulos.append(ItfRectangle(cursor, y, largura, height, elemento.is_bar))
        cursor += largura
    return retangulos


def itf_html(numero) -> str:
    """Generate the ITF barcode spans used by the HTML preview."""

    def span_bar(largura: str, espaco: bool = False) -> str:
        classe = largura
        if espaco:
            classe += " s"
        return f"<span class='{classe}'></span>"

    return "".join(
        span_bar(ch, espaco=not is_bar) for is_bar, ch in _simbolos(_normalizar(numero))
    )
