"""Erros levantados pela geração de boletos."""


class BoletoError(ValueError):
    """Base para qualquer falha de codificação do boleto."""


class MissingRequiredFieldError(BoletoError):
    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Campo obrigatório não informado: {field}")


class InvalidLengthError(BoletoError):
    pass


class InvalidCheckDigitError(BoletoError):
    pass


class UnsupportedBankError(BoletoError):
    def __init__(self, bank_code):
        self.bank_code = bank_code
        super().__init__(f"Banco não suportado: {bank_code}")
