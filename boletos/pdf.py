"""Renderização do boleto em PDF com fpdf2.

O PDF é devolvido em bytes; gravar em disco ou enviar na resposta HTTP é
responsabilidade de quem chama.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from . import config
from .itf import itf_rectangles, itf_width
from .models import BoletoRecord

logger = logging.getLogger(__name__)

_MARGEM = 12


def format_currency(centavos) -> str:
    """Formata centavos no padrão brasileiro: R$ 1.234,56."""
    valor = int(centavos or 0) / 100
    return f"R$ {valor:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def to_latin(texto) -> str:
    """As fontes padrão do PDF só aceitam latin-1."""
    return str(texto or "").encode("latin-1", "replace").decode("latin-1")


class BoletoPDF(FPDF):
    def linha(self, texto, altura=5, estilo=""):
        self.set_font("Helvetica", estilo, 9)
        self.cell(0, altura, to_latin(texto), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def campo(self, rotulo, valor):
        self.set_font("Helvetica", "B", 8)
        self.cell(45, 5, to_latin(rotulo))
        self.set_font("Helvetica", "", 9)
        self.cell(0, 5, to_latin(valor), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def codigo_barras(self, numero, x, y, altura=None, modulo=None):
        for ret in itf_rectangles(numero, x=x, y=y, height=altura, module_width=modulo):
            if ret.is_bar:
                self.rect(ret.x, ret.y, ret.width, ret.height, style="F")


def _logo(pdf: BoletoPDF, caminho) -> None:
    if not caminho:
        return
    arquivo = Path(caminho)
    if not arquivo.is_file():
        logger.warning("Logo do beneficiário não encontrado: %s", caminho)
        return
    pdf.image(str(arquivo), x=pdf.w - _MARGEM - 35, y=_MARGEM, w=35)


def render_pdf(boleto: BoletoRecord) -> bytes:
    """Render the slip (header, data fields and ITF barcode) as PDF bytes."""
    pdf = BoletoPDF(format="A4", unit="mm")
    pdf.set_margins(_MARGEM, _MARGEM, _MARGEM)
    pdf.set_auto_page_break(False)
    pdf.add_page()
    pdf.set_fill_color(0, 0, 0)

    _logo(pdf, boleto.beneficiary.logo_path)

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "Boleto Bancario", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.linha(f"{boleto.bank_code_with_dv} - {boleto.bank_info.name}", 6, "B")
    pdf.linha(f"Linha Digitavel: {boleto.digitable_line}", 6, "B")
    pdf.ln(2)

    pdf.campo("Local de Pagamento", boleto.place_of_payment)
    pdf.campo("Vencimento", boleto.due_date.strftime("%d/%m/%Y"))
    pdf.campo("Valor do Documento", format_currency(boleto.amount))
    pdf.campo("Data do Processamento", boleto.processing_date.strftime("%d/%m/%Y"))
    pdf.campo("Numero do Documento", boleto.document_number)
    pdf.campo("Especie Doc. / Aceite", f"{boleto.document_species} / {boleto.acceptance}")
    pdf.campo("Nosso Numero", boleto.our_number_with_dv)
    pdf.ln(2)

    beneficiario = boleto.beneficiary
    pdf.campo("Beneficiario", beneficiario.name)
    if beneficiario.document:
        pdf.campo("CPF/CNPJ", beneficiario.document)
    if beneficiario.bank_branch or beneficiario.bank_account:
        pdf.campo("Agencia/Codigo", f"{beneficiario.bank_branch}/{beneficiario.bank_account}")
    if beneficiario.address:
        pdf.campo("Endereco", f"{beneficiario.address} {beneficiario.address_complement}".strip())
    pdf.ln(2)

    pagador = boleto.payer
    pdf.campo("Pagador", pagador.name)
    if pagador.document:
        pdf.campo("CPF/CNPJ", pagador.document)
    if pagador.address:
        pdf.campo("Endereco", f"{pagador.address} {pagador.address_complement}".strip())

    if boleto.instructions:
        pdf.ln(2)
        pdf.linha("Instrucoes:", estilo="B")
        for instrucao in boleto.instructions:
            pdf.linha(f"- {instrucao}")

    altura = config.ITF_HEIGHT
    y = pdf.h - _MARGEM - altura - 10
    pdf.line(_MARGEM, y - 4, pdf.w - _MARGEM, y - 4)
    pdf.codigo_barras(boleto.barcode, _MARGEM, y, altura=altura)
    pdf.set_xy(_MARGEM, y + altura + 2)
    pdf.set_font("Helvetica", "", 8)
    pdf.cell(itf_width(boleto.barcode), 4, boleto.barcode, align="C")

    return bytes(pdf.output())
