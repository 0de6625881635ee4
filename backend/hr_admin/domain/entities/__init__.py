from .bank_document import BANK_DOCUMENT_TYPES, BankDocument, BankDocumentStatus
from .employee import Employee, EmployeeStatus
from .form_field import Attachment, Facet, FieldDescriptor, FieldKind, FieldSet
from .hr_document import DocumentCategory, DocumentStatus, HrDocument
from .notification import Notification, NotificationLevel
from .salary_expense import SalaryExpense
from .session import (
    DEFAULT_LANDING_PAGE,
    REGISTRABLE_ROLES,
    AuthSession,
    Role,
    landing_page_for,
)

__all__ = [
    "BANK_DOCUMENT_TYPES",
    "BankDocument",
    "BankDocumentStatus",
    "Employee",
    "EmployeeStatus",
    "Attachment",
    "Facet",
    "FieldDescriptor",
    "FieldKind",
    "FieldSet",
    "DocumentCategory",
    "DocumentStatus",
    "HrDocument",
    "Notification",
    "NotificationLevel",
    "SalaryExpense",
    "DEFAULT_LANDING_PAGE",
    "REGISTRABLE_ROLES",
    "AuthSession",
    "Role",
    "landing_page_for",
]
