import logging
from abc import ABC, abstractmethod

from ..checksum import digits
from ..exceptions import MissingRequiredFieldError

logger = logging.getLogger(__name__)

FREE_FIELD_LENGTH = 25


def _vazio(valor) -> bool:
    return valor is None or (isinstance(valor, str) and not valor.strip())


class BankProfile(ABC):
    """Regras de um banco emissor: nosso número e campo livre.

    Os perfis não guardam estado; cada operação recebe o boleto com os dados
    informados pelo chamador.
    """

    bank_code: str = ""
    name: str = ""
    required_fields: tuple = ()
    valid_wallets: tuple = ()

    def validate(self, boleto) -> None:
        """Fail on the first missing required field; warn on unknown wallets."""
        for campo in self.required_fields:
            if _vazio(getattr(boleto, campo, None)):
                raise MissingRequiredFieldError(
                    campo, f"Campo obrigatório para {self.name} não informado: {campo}"
                )

        carteira = digits(boleto.wallet)
        if self.valid_wallets and carteira and carteira not in self.valid_wallets:
            logger.warning(
                "Carteira %s pode não ser válida para o %s (esperado: %s)",
                carteira,
                self.name,
                ", ".join(self.valid_wallets),
            )

    def raw_our_number(self, boleto) -> str:
        numero = digits(boleto.our_number)
        if not numero:
            raise MissingRequiredFieldError(
                "our_number", f"Nosso número deve ser informado para o {self.name}"
            )
        return numero

    @staticmethod
    def fit_free_field(campo: str) -> str:
        """Zero-fill on the left and cut to exactly 25 digits."""
        return digits(campo).zfill(FREE_FIELD_LENGTH)[:FREE_FIELD_LENGTH]

    @abstractmethod
    def compute_our_number(self, boleto) -> str:
        """Return the bank formatted "nosso número" with its check digit."""

    @abstractmethod
    def compute_free_field(self, boleto) -> str:
        """Return the 25-digit "campo livre"."""

    def details(self, boleto) -> dict:
        return {
            "bank_code": self.bank_code,
            "bank_name": self.name,
            "agency": boleto.agency,
            "account": boleto.account,
            "wallet": boleto.wallet,
        }
