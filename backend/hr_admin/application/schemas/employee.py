"""Pydantic wire schemas for the employees resource."""

from pydantic import Field, field_validator

from hr_admin.application.schemas.base import EntityCodec, WireModel, WireRecord, known_member
from hr_admin.domain.dates import normalize_date
from hr_admin.domain.entities import Employee, EmployeeStatus


class EmployeeRecord(WireRecord):
    """An employee as listed by ``GET /api/employees``."""

    id: int | str
    employee_id: str
    employee_name: str
    email: str
    phone_number: str
    position: str
    department: str
    joining_date: str
    password: str | None = None
    status: str = EmployeeStatus.ACTIVE.value
    blood_group: str | None = None
    current_address: str | None = None
    permanent_address: str | None = None
    profile_photo_url: str | None = None

    @field_validator("joining_date", mode="before")
    @classmethod
    def _joining_date(cls, value: object) -> str:
        return normalize_date(value)

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: object) -> object:
        return value or EmployeeStatus.ACTIVE.value

    def to_entity(self) -> Employee:
        return Employee(
            id=str(self.id),
            employee_id=self.employee_id,
            employee_name=self.employee_name,
            email=self.email,
            password=self.password or "",
            phone_number=self.phone_number,
            position=self.position,
            department=self.department,
            joining_date=self.joining_date,
            status=known_member(EmployeeStatus, self.status),
            blood_group=self.blood_group or "",
            current_address=self.current_address or "",
            permanent_address=self.permanent_address or "",
            profile_photo_url=self.profile_photo_url or None,
        )


class EmployeePayload(WireModel):
    """The ``employee`` JSON part of a create/update multipart request.

    The full field set is always sent; the backend does not accept patches.
    """

    employee_id: str = Field(min_length=1)
    employee_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    position: str = Field(min_length=1)
    department: str = Field(min_length=1)
    joining_date: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    blood_group: str = ""
    current_address: str = ""
    permanent_address: str = ""
    profile_photo_url: str | None = None

    @field_validator("joining_date", mode="before")
    @classmethod
    def _joining_date(cls, value: object) -> str:
        return normalize_date(value)

    @field_validator("profile_photo_url", mode="before")
    @classmethod
    def _blank_photo(cls, value: object) -> object:
        return value or None


class EmployeeCodec(EntityCodec[Employee]):
    record_model = EmployeeRecord
    payload_model = EmployeePayload
