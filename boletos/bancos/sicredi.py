from ..checksum import RAW, digits, modulo11
from .base import BankProfile


def _dv_sicredi(numero: str) -> str:
    # Resto 10 não cabe em uma posição
    resto = modulo11(numero, base=9, mode=RAW)
    return "0" if resto == 10 else str(resto)


class SicrediProfile(BankProfile):
    """Banco Cooperativo Sicredi (748).

    Nosso número: ano(2) + byte(1) + sequencial(5) + DV(1). O DV é calculado
    sobre cooperativa + posto + código do beneficiário + ano + byte +
    sequencial.
    """

    bank_code = "748"
    name = "Sicredi"
    required_fields = ("agency", "account", "wallet", "posto", "client_code")
    valid_wallets = ("1", "3")
    default_byte = "2"
    default_registry_flag = 1

    def _byte(self, boleto) -> str:
        return (digits(boleto.byte) or self.default_byte)[:1]

    def _registry_flag(self, boleto) -> str:
        flag = self.default_registry_flag if boleto.registry_flag is None else boleto.registry_flag
        return "1" if int(flag) else "0"

    def compute_our_number(self, boleto) -> str:
        sequencial = self.raw_our_number(boleto).zfill(5)[-5:]
        ano = f"{boleto.due_date.year % 100:02d}"
        byte = self._byte(boleto)
        base = (
            digits(boleto.agency).zfill(4)[-4:]
            + digits(boleto.posto).zfill(2)[-2:]
            + digits(boleto.client_code).zfill(5)[-5:]
            + ano
            + byte
            + sequencial
        )
        return ano + byte + sequencial + _dv_sicredi(base)

    def compute_free_field(self, boleto) -> str:
        campo_livre = (
            self._registry_flag(boleto)
            + digits(boleto.wallet)[:1].zfill(1)
            + self.compute_our_number(boleto)
            + digits(boleto.agency).zfill(4)[-4:]
            + digits(boleto.posto).zfill(2)[-2:]
            + digits(boleto.client_code).zfill(5)[-5:]
            + "10"
        )
        return self.fit_free_field(campo_livre + _dv_sicredi(campo_livre))

    def details(self, boleto) -> dict:
        return {
            **super().details(boleto),
            "posto": boleto.posto,
            "byte": self._byte(boleto),
            "client_code": boleto.client_code,
            "registry_flag": int(self._registry_flag(boleto)),
        }
