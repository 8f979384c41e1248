from ..checksum import digits, modulo11
from .base import BankProfile


class SantanderProfile(BankProfile):
    """Banco Santander (033)."""

    bank_code = "033"
    name = "Santander"
    required_fields = ("agency", "account", "wallet")
    valid_wallets = ("101", "102", "121", "150", "175")
    default_range = "101"

    def compute_our_number(self, boleto) -> str:
        # 12 posições + DV
        nosso_numero = self.raw_our_number(boleto).zfill(12)[-12:]
        return nosso_numero + str(modulo11(nosso_numero, base=9))

    def compute_free_field(self, boleto) -> str:
        # 9 + código do cliente(7) + nosso número com DV(13) + IOF(1) + carteira(3)
        codigo_cliente = digits(boleto.client_code)[:7].zfill(7)
        carteira = digits(boleto.wallet)[:3].zfill(3)
        campo_livre = "9" + codigo_cliente + self.compute_our_number(boleto) + "0" + carteira
        return self.fit_free_field(campo_livre)

    def details(self, boleto) -> dict:
        return {
            **super().details(boleto),
            "range": boleto.range or self.default_range,
            "client_code": boleto.client_code,
        }
