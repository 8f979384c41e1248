"""Perfis dos bancos emissores suportados."""

from types import MappingProxyType

from ..exceptions import UnsupportedBankError
from ..registro import normalize_bank_code
from .base import BankProfile
from .santander import SantanderProfile
from .sicredi import SicrediProfile

_PROFILES = {}
PROFILES = MappingProxyType(_PROFILES)


def register_profile(cls):
    """Register a :class:`BankProfile` subclass under its bank code."""
    _PROFILES[cls.bank_code] = cls()
    return cls


def get_profile(bank_code) -> BankProfile:
    codigo = normalize_bank_code(bank_code) if bank_code else ""
    try:
        return _PROFILES[codigo]
    except KeyError:
        raise UnsupportedBankError(codigo or bank_code) from None


register_profile(SantanderProfile)
register_profile(SicrediProfile)

__all__ = [
    "BankProfile",
    "PROFILES",
    "SantanderProfile",
    "SicrediProfile",
    "get_profile",
    "register_profile",
]
