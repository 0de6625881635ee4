"""Pydantic wire schemas for salary expense entries.

Unlike the other resources, salaries are *sent* with the date in tuple
form, and updates repeat the id inside the body.
"""

from typing import Any

from pydantic import Field, field_validator

from hr_admin.application.schemas.base import EntityCodec, WireModel, WireRecord
from hr_admin.domain.dates import date_from_string, normalize_date
from hr_admin.domain.entities import SalaryExpense


class SalaryExpenseRecord(WireRecord):
    id: int
    employee_name: str
    date: str
    amount: float
    description: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, value: object) -> str:
        return normalize_date(value)

    def to_entity(self) -> SalaryExpense:
        return SalaryExpense(
            id=self.id,
            employee_name=self.employee_name,
            date=self.date,
            amount=self.amount,
            description=self.description,
        )


class SalaryExpensePayload(WireModel):
    id: int | None = None
    employee_name: str = Field(min_length=1)
    date: tuple[int, int, int]
    amount: float
    description: str = Field(min_length=1)

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, value: object) -> tuple[int, int, int]:
        return date_from_string(normalize_date(value))


class SalaryExpenseCodec(EntityCodec[SalaryExpense]):
    record_model = SalaryExpenseRecord
    payload_model = SalaryExpensePayload

    def prepare_payload(self, values: dict[str, Any], entity_id: int | str | None) -> dict[str, Any]:
        prepared = dict(values)
        if entity_id is not None:
            prepared["id"] = entity_id
        return prepared
