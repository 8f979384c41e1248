"""Geração de boletos: nosso número, campo livre, código de barras e linha digitável."""

from .bancos import BankProfile, SantanderProfile, SicrediProfile, get_profile, register_profile
from .checksum import BANKING, RAW, digits, modulo10, modulo11
from .codigo_barras import (
    barcode_from_digitable_line,
    build_barcode,
    build_digitable_line,
    due_date_factor,
    format_amount,
)
from .exceptions import (
    BoletoError,
    InvalidCheckDigitError,
    InvalidLengthError,
    MissingRequiredFieldError,
    UnsupportedBankError,
)
from .itf import encode_itf, itf_html, itf_rectangles, itf_width
from .models import Beneficiary, BoletoRecord, Payer
from .registro import bank_code_with_dv, get_bank_info
from .services import criar_boleto


def init_app(app):
    """Registra as rotas de boletos na aplicação Flask."""
    # Importa o blueprint apenas aqui para não exigir Flask no uso como biblioteca
    from .routes import bp as boletos_bp
    app.register_blueprint(boletos_bp, url_prefix='/api')
