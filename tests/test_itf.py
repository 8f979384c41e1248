import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from boletos.itf import NARROW, PATTERNS, WIDE, ItfElement, encode_itf, itf_html, itf_rectangles, itf_width


def _e(is_bar, simbolo):
    return ItfElement(is_bar, NARROW if simbolo == 'n' else WIDE)


START = [_e(True, 'n'), _e(False, 'n'), _e(True, 'n'), _e(False, 'n')]
PAIR12 = [
    _e(True, 'w'), _e(False, 'n'),
    _e(True, 'n'), _e(False, 'w'),
    _e(True, 'n'), _e(False, 'n'),
    _e(True, 'n'), _e(False, 'n'),
    _e(True, 'w'), _e(False, 'w'),
]
STOP = [_e(True, 'w'), _e(False, 'n'), _e(True, 'n')]


def test_patterns_table():
    assert PATTERNS['0'] == 'nnwwn'
    assert PATTERNS['1'] == 'wnnnw'
    assert PATTERNS['9'] == 'nwnwn'
    for padrao in PATTERNS.values():
        assert len(padrao) == 5
        assert padrao.count('w') == 2


def test_encode_pair():
    elementos = encode_itf('12')
    assert len(elementos) == 17
    assert elementos == START + PAIR12 + STOP


def test_odd_length_is_left_padded():
    assert encode_itf('2') == encode_itf('02')
    assert encode_itf('1.2') == encode_itf('12')


def test_full_barcode_element_count():
    elementos = encode_itf('0' * 44)
    assert len(elementos) == 4 + 22 * 10 + 3
    # cada par ocupa 18 módulos
    assert sum(el.width for el in elementos) == 4 + 22 * 18 + 5


def test_rectangles_are_contiguous():
    retangulos = itf_rectangles('12', x=10, y=5, height=20, module_width=0.5)
    assert len(retangulos) == 17
    assert retangulos[0].x == 10
    for anterior, atual in zip(retangulos, retangulos[1:]):
        assert atual.x == anterior.x + anterior.width
    assert all(r.y == 5 and r.height == 20 for r in retangulos)
    assert [r.is_bar for r in retangulos] == [el.is_bar for el in encode_itf('12')]
    final = retangulos[-1].x + retangulos[-1].width
    assert final - 10 == itf_width('12', 0.5) == 27 * 0.5


def test_itf_html():
    start = (
        "<span class='n'></span><span class='n s'></span>"
        "<span class='n'></span><span class='n s'></span>"
    )
    pair12 = (
        "<span class='w'></span><span class='n s'></span>"
        "<span class='n'></span><span class='w s'></span>"
        "<span class='n'></span><span class='n s'></span>"
        "<span class='n'></span><span class='n s'></span>"
        "<span class='w'></span><span class='w s'></span>"
    )
    stop = "<span class='w'></span><span class='n s'></span><span class='n'></span>"
    assert itf_html('12') == start + pair12 + stop
