from .auth import (
    LoginRequest,
    NotificationResponse,
    RegisterRequest,
    RegisterResponse,
    SessionResponse,
)
from .bank_document import BankDocumentCodec
from .base import EntityCodec, WireModel, WireRecord
from .employee import EmployeeCodec
from .hr_document import HrDocumentCodec
from .salary_expense import SalaryExpenseCodec

__all__ = [
    "LoginRequest",
    "NotificationResponse",
    "RegisterRequest",
    "RegisterResponse",
    "SessionResponse",
    "BankDocumentCodec",
    "EntityCodec",
    "WireModel",
    "WireRecord",
    "EmployeeCodec",
    "HrDocumentCodec",
    "SalaryExpenseCodec",
]
