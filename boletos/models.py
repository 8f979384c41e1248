from __future__ import annotations

import threading
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import List, Optional

from . import config
from .bancos import BankProfile, get_profile
from .checksum import digits
from .codigo_barras import build_barcode, build_digitable_line, due_date_factor, format_amount
from .exceptions import BoletoError, InvalidLengthError, MissingRequiredFieldError
from .registro import BankInfo, bank_code_with_dv, get_bank_info

REQUIRED_FIELDS = ("bank_code", "due_date", "amount", "our_number")


@dataclass
class Payer:
    name: str = ""
    document: str = ""
    address: str = ""
    address_complement: str = ""


@dataclass
class Beneficiary:
    name: str = ""
    document: str = ""
    bank_branch: str = ""
    bank_account: str = ""
    address: str = ""
    address_complement: str = ""
    logo_path: Optional[str] = None


def _to_date(valor, campo: str):
    if isinstance(valor, datetime):
        return valor.date()
    if valor is None or isinstance(valor, date):
        return valor
    if isinstance(valor, str):
        return date.fromisoformat(valor[:10])
    raise BoletoError(f"Data inválida para {campo}: {valor!r}")


@dataclass
class BoletoRecord:
    """Dados de um boleto e os campos derivados (calculados uma única vez).

    Os campos informados não devem ser alterados depois da construção: nosso
    número, campo livre, código de barras e linha digitável ficam em cache.
    """

    bank_code: str
    due_date: date
    amount: int  # centavos
    our_number: str
    agency: str = ""
    account: str = ""
    wallet: str = ""
    document_number: str = ""
    document_species: str = "DM"
    acceptance: str = "N"
    processing_date: Optional[date] = None
    place_of_payment: str = field(default_factory=lambda: config.PLACE_OF_PAYMENT)
    instructions: List[str] = field(default_factory=list)
    payer: Payer = field(default_factory=Payer)
    beneficiary: Beneficiary = field(default_factory=Beneficiary)
    currency_code: str = field(default_factory=lambda: config.CURRENCY_CODE)
    # Santander
    range: Optional[str] = None
    # Santander e Sicredi
    client_code: Optional[str] = None
    # Sicredi
    posto: Optional[str] = None
    byte: Optional[str] = None
    registry_flag: Optional[int] = None

    profile: BankProfile = field(init=False, repr=False, compare=False)
    _our_number_with_dv: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _free_field: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _barcode: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _digitable_line: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def __post_init__(self):
        for campo in REQUIRED_FIELDS:
            valor = getattr(self, campo)
            if valor is None or (isinstance(valor, str) and not valor.strip()):
                raise MissingRequiredFieldError(campo)

        banco = digits(self.bank_code)
        if len(banco) > 3:
            raise InvalidLengthError(f"Código do banco excede 3 dígitos: {self.bank_code}")
        self.bank_code = banco.zfill(3)
        self.due_date = _to_date(self.due_date, "due_date")
        self.processing_date = _to_date(self.processing_date, "processing_date") or date.today()
        self.amount = int(self.amount)
        self.currency_code = self.currency_code or config.CURRENCY_CODE
        self.instructions = list(self.instructions or [])

        self.profile = get_profile(self.bank_code)
        self.profile.validate(self)

    def _cached(self, nome: str, calcular):
        valor = getattr(self, nome)
        if valor is None:
            with self._lock:
                valor = getattr(self, nome)
                if valor is None:
                    valor = calcular()
                    setattr(self, nome, valor)
        return valor

    @property
    def our_number_with_dv(self) -> str:
        return self._cached("_our_number_with_dv", lambda: self.profile.compute_our_number(self))

    @property
    def free_field(self) -> str:
        return self._cached("_free_field", lambda: self.profile.compute_free_field(self))

    @property
    def due_factor(self) -> str:
        return due_date_factor(self.due_date)

    @property
    def barcode(self) -> str:
        return self._cached(
            "_barcode",
            lambda: build_barcode(
                bank_code=self.bank_code,
                due_factor=self.due_factor,
                amount=format_amount(self.amount),
                free_field=self.free_field,
                currency_code=self.currency_code,
            ),
        )

    @property
    def digitable_line(self) -> str:
        return self._cached("_digitable_line", lambda: build_digitable_line(self.barcode))

    @property
    def bank_info(self) -> BankInfo:
        return get_bank_info(self.bank_code)

    @property
    def bank_code_with_dv(self) -> str:
        return bank_code_with_dv(self.bank_code)

    def to_dict(self) -> dict:
        """JSON-ready view of the slip, derived fields included."""
        return {
            "bank_code": self.bank_code,
            "bank_name": self.bank_info.name,
            "currency_code": self.currency_code,
            "due_date": self.due_date.isoformat(),
            "processing_date": self.processing_date.isoformat(),
            "amount": self.amount,
            "our_number": self.our_number_with_dv,
            "document_number": self.document_number,
            "document_species": self.document_species,
            "acceptance": self.acceptance,
            "barcode": self.barcode,
            "digitable_line": self.digitable_line,
            "free_field": self.free_field,
            "payer": asdict(self.payer),
            "beneficiary": asdict(self.beneficiary),
            "place_of_payment": self.place_of_payment,
            "instructions": list(self.instructions),
            self.profile.name.lower(): self.profile.details(self),
        }
