import io

from flask import Blueprint, current_app, jsonify, render_template_string, request, send_file

from .codigo_barras import barcode_from_digitable_line, build_digitable_line
from .exceptions import BoletoError
from .itf import itf_html
from .pdf import format_currency, render_pdf
from .services import criar_boleto

bp = Blueprint('boletos', __name__)

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html lang="pt-br">
<head>
<meta charset="utf-8">
<title>Boleto Bancário</title>
<style>
#barcode span {display: inline-block; height: 50px;}
.n {border-left: 1px solid}
.w {border-left: 3px solid}
.s {border-color: #fff}
</style>
</head>
<body>
<h1>Boleto Bancário</h1>
<p><strong>{{ codigo_banco }}</strong> {{ boleto.bank_info.name }}</p>
<p>Linha Digitável: <strong>{{ boleto.digitable_line }}</strong></p>
<table>
<tr><th>Local de Pagamento</th><td>{{ boleto.place_of_payment }}</td></tr>
<tr><th>Vencimento</th><td>{{ boleto.due_date.strftime('%d/%m/%Y') }}</td></tr>
<tr><th>Valor</th><td>{{ valor }}</td></tr>
<tr><th>Beneficiário</th><td>{{ boleto.beneficiary.name }}</td></tr>
<tr><th>Pagador</th><td>{{ boleto.payer.name }}</td></tr>
<tr><th>Nosso Número</th><td>{{ boleto.our_number_with_dv }}</td></tr>
<tr><th>Número do Documento</th><td>{{ boleto.document_number }}</td></tr>
</table>
{% if boleto.instructions %}
<ul>{% for instrucao in boleto.instructions %}<li>{{ instrucao }}</li>{% endfor %}</ul>
{% endif %}
<div id="barcode">{{ barcode|safe }}</div>
</body>
</html>
"""


def _criar_boleto_da_requisicao():
    data = request.get_json(silent=True)
    if data is None:
        raise ValueError('corpo JSON obrigatorio')
    return criar_boleto(data)


def _erro(exc):
    if isinstance(exc, (BoletoError, ValueError)):
        current_app.logger.warning('Boleto invalido: %s', exc)
        return jsonify({'error': str(exc)}), 400
    current_app.logger.exception('Erro ao gerar boleto: %s', exc)
    return jsonify({'error': str(exc)}), 500


@bp.post('/boletos')
def gerar_boleto():
    try:
        boleto = _criar_boleto_da_requisicao()
        return jsonify(boleto.to_dict())
    except Exception as e:
        return _erro(e)


@bp.post('/boletos/preview')
def visualizar_boleto():
    try:
        boleto = _criar_boleto_da_requisicao()
        return render_template_string(
            PREVIEW_TEMPLATE,
            boleto=boleto,
            codigo_banco=boleto.bank_code_with_dv,
            valor=format_currency(boleto.amount),
            barcode=itf_html(boleto.barcode),
        )
    except Exception as e:
        return _erro(e)


@bp.post('/boletos/pdf')
def baixar_boleto_pdf():
    try:
        boleto = _criar_boleto_da_requisicao()
        conteudo = render_pdf(boleto)
    except Exception as e:
        return _erro(e)
    return send_file(
        io.BytesIO(conteudo),
        mimetype='application/pdf',
        as_attachment=True,
        download_name=f"boleto_{boleto.our_number_with_dv}.pdf",
    )


@bp.post('/boletos/linha-digitavel')
def converter_linha_digitavel():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'corpo JSON deve ser um objeto'}), 400
    codigo = data.get('codigo_barras')
    linha = data.get('linha_digitavel')
    if not codigo and not linha:
        return jsonify({'error': 'codigo_barras ou linha_digitavel obrigatorio'}), 400
    try:
        if codigo:
            return jsonify({'codigo_barras': codigo, 'linha_digitavel': build_digitable_line(codigo)})
        return jsonify({'codigo_barras': barcode_from_digitable_line(linha), 'linha_digitavel': linha})
    except Exception as e:
        return _erro(e)
