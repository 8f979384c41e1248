import random
import sys
from datetime import date, datetime
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from boletos.checksum import digits, modulo10, modulo11
from boletos.codigo_barras import (
    barcode_from_digitable_line,
    build_barcode,
    build_digitable_line,
    due_date_factor,
    format_amount,
)
from boletos.exceptions import (
    InvalidCheckDigitError,
    InvalidLengthError,
    MissingRequiredFieldError,
)

CAMPO_LIVRE = '9382452700000002014800101'
CODIGO = '03399126800004950009382452700000002014800101'
LINHA = '03399.38243 52700.000004 20148.001017 9 12680000495000'


def test_due_date_factor_febraban_cycle():
    assert due_date_factor(date(2000, 7, 3)) == '1000'
    assert due_date_factor(date(2025, 2, 21)) == '9999'
    assert due_date_factor(date(2025, 2, 22)) == '1000'
    assert due_date_factor(date(2025, 11, 17)) == '1268'
    assert due_date_factor(datetime(2025, 11, 17, 15, 30)) == '1268'


def test_due_date_factor_custom_epoch_and_edges():
    assert due_date_factor(date(2025, 3, 25), epoch=date(2025, 3, 22)) == '0003'
    assert due_date_factor(date(1990, 1, 1)) == '0000'
    assert due_date_factor(None) == '0000'


def test_format_amount():
    assert format_amount(495000) == '0000495000'
    assert format_amount(0) == '0000000000'
    with pytest.raises(InvalidLengthError):
        format_amount(10 ** 10)
    with pytest.raises(InvalidLengthError):
        format_amount(-1)


def test_build_barcode():
    codigo = build_barcode(
        bank_code='033',
        due_factor='1268',
        amount='0000495000',
        free_field=CAMPO_LIVRE,
    )
    assert codigo == CODIGO
    assert len(codigo) == 44


def test_build_barcode_pads_components():
    codigo = build_barcode(bank_code='33', due_factor=1268, amount=495000, free_field=CAMPO_LIVRE)
    assert codigo == CODIGO


def test_build_barcode_check_digit_covers_all_other_digits():
    codigo = build_barcode(bank_code='748', due_factor='1000', amount='1', free_field='1')
    assert codigo[4] == str(modulo11(codigo[:4] + codigo[5:]))
    assert codigo[19:] == '1' + '0' * 24


def test_build_barcode_truncates_only_the_free_field():
    longo = CAMPO_LIVRE + '999'
    assert build_barcode('033', '1268', '0000495000', longo) == CODIGO
    with pytest.raises(InvalidLengthError):
        build_barcode('0330', '1268', '0000495000', CAMPO_LIVRE)
    with pytest.raises(InvalidLengthError):
        build_barcode('033', '12680', '0000495000', CAMPO_LIVRE)
    with pytest.raises(InvalidLengthError):
        build_barcode('033', '1268', '100000495000', CAMPO_LIVRE)
    with pytest.raises(InvalidLengthError):
        build_barcode('033', '1268', '0000495000', CAMPO_LIVRE, currency_code='99')


def test_build_barcode_requires_bank_code():
    with pytest.raises(MissingRequiredFieldError) as exc:
        build_barcode('', '1268', '0000495000', CAMPO_LIVRE)
    assert exc.value.field == 'bank_code'


def test_build_digitable_line():
    assert build_digitable_line(CODIGO) == LINHA
    assert len(digits(LINHA)) == 47


def test_build_digitable_line_requires_44_digits():
    with pytest.raises(InvalidLengthError):
        build_digitable_line(CODIGO[:-1])
    with pytest.raises(InvalidLengthError):
        build_digitable_line('')


def test_digitable_line_fields_verify():
    numeros = digits(build_digitable_line(CODIGO))
    assert str(modulo10(numeros[:9])) == numeros[9]
    assert str(modulo10(numeros[10:20])) == numeros[20]
    assert str(modulo10(numeros[21:31])) == numeros[31]
    assert numeros[32] == CODIGO[4]
    assert numeros[33:] == CODIGO[5:19]


def test_barcode_from_digitable_line_round_trip():
    assert barcode_from_digitable_line(LINHA) == CODIGO
    outro = build_barcode('748', '1000', '12345', '1125200001307100312345107')
    assert barcode_from_digitable_line(build_digitable_line(outro)) == outro


def test_barcode_from_digitable_line_rejects_bad_check_digit():
    adulterada = LINHA.replace('03399.38243', '03399.38244')
    with pytest.raises(InvalidCheckDigitError):
        barcode_from_digitable_line(adulterada)
    with pytest.raises(InvalidLengthError):
        barcode_from_digitable_line(LINHA[:-1])


def test_digitable_line_verifies_for_random_barcodes():
    rnd = random.Random(2025)
    for _ in range(300):
        banco = f"{rnd.randint(1, 999):03d}"
        fator = f"{rnd.randint(0, 9999):04d}"
        valor = rnd.randint(0, 10 ** 10 - 1)
        campo_livre = ''.join(rnd.choice('0123456789') for _ in range(25))

        codigo = build_barcode(banco, fator, valor, campo_livre)
        assert len(codigo) == 44
        assert codigo[4] == str(modulo11(codigo[:4] + codigo[5:]))

        linha = build_digitable_line(codigo)
        numeros = digits(linha)
        assert len(numeros) == 47
        assert str(modulo10(numeros[:9])) == numeros[9]
        assert str(modulo10(numeros[10:20])) == numeros[20]
        assert str(modulo10(numeros[21:31])) == numeros[31]
        assert barcode_from_digitable_line(linha) == codigo
