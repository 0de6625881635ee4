"""Domain entity — an employee record as shown on the joining screen."""

from dataclasses import dataclass
from enum import Enum


class EmployeeStatus(str, Enum):
    """Lifecycle status of an employee."""

    ACTIVE = "Active"
    JOINING = "Joining"
    RELIEVING = "Relieving"


@dataclass
class Employee:
    """An employee as confirmed by the backend.

    ``joining_date`` is always the ISO form (``YYYY-MM-DD``).
    ``profile_photo_url`` is a server-relative path; the backend owns the file.
    """

    id: str
    employee_id: str
    employee_name: str
    email: str
    password: str
    phone_number: str
    position: str
    department: str
    joining_date: str
    status: EmployeeStatus | str = EmployeeStatus.ACTIVE
    blood_group: str = ""
    current_address: str = ""
    permanent_address: str = ""
    profile_photo_url: str | None = None
