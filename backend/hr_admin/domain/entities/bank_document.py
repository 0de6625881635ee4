"""Domain entity for bank document records kept by the data manager."""

from dataclasses import dataclass
from enum import Enum


class BankDocumentStatus(str, Enum):
    VALID = "Valid"
    EXPIRED = "Expired"
    PENDING = "Pending"


BANK_DOCUMENT_TYPES = ("Bank Statement", "Bank Guarantee", "Bank Certificate")


@dataclass
class BankDocument:
    id: int
    document_type: str
    bank_name: str
    account_number: str
    date: str
    status: BankDocumentStatus | str
