"""Pydantic wire schemas for bank document records."""

from typing import Literal

from pydantic import Field, field_validator

from hr_admin.application.schemas.base import EntityCodec, WireModel, WireRecord, known_member
from hr_admin.domain.dates import normalize_date
from hr_admin.domain.entities import BankDocument, BankDocumentStatus


class BankDocumentRecord(WireRecord):
    id: int
    document_type: str
    bank_name: str
    account_number: str
    date: str
    status: str | None

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, value: object) -> str:
        return normalize_date(value)

    def to_entity(self) -> BankDocument:
        return BankDocument(
            id=self.id,
            document_type=self.document_type,
            bank_name=self.bank_name,
            account_number=self.account_number,
            date=self.date,
            status=known_member(BankDocumentStatus, self.status or ""),
        )


class BankDocumentPayload(WireModel):
    document_type: Literal["Bank Statement", "Bank Guarantee", "Bank Certificate"]
    bank_name: str = Field(min_length=1)
    account_number: str = Field(min_length=1)
    date: str
    status: BankDocumentStatus

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, value: object) -> str:
        return normalize_date(value)


class BankDocumentCodec(EntityCodec[BankDocument]):
    record_model = BankDocumentRecord
    payload_model = BankDocumentPayload
