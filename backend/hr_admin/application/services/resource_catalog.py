"""Resource catalog — the schema instances of the generic list editor.

Each resource is declared, not implemented: endpoint configuration, field
descriptors, wire codec, searchable attributes and facets.
"""

from hr_admin.application.interfaces import PayloadStyle, ReconcileMode, ResourceEndpoint
from hr_admin.application.schemas.bank_document import BankDocumentCodec
from hr_admin.application.schemas.employee import EmployeeCodec
from hr_admin.application.schemas.hr_document import HrDocumentCodec
from hr_admin.application.schemas.salary_expense import SalaryExpenseCodec
from hr_admin.application.services.resource_definition import ResourceDefinition
from hr_admin.domain.entities import (
    BANK_DOCUMENT_TYPES,
    BankDocumentStatus,
    DocumentCategory,
    EmployeeStatus,
    Facet,
    FieldDescriptor,
    FieldKind,
    FieldSet,
)

EMPLOYEES = "employees"
DOCUMENTS = "documents"
BANK = "bank"
SALARIES = "salaries"


def _values(enum_type) -> tuple[str, ...]:
    return tuple(member.value for member in enum_type)


EMPLOYEE_RESOURCE = ResourceDefinition(
    name=EMPLOYEES,
    title="Employee Onboarding",
    entity_label="Employee",
    endpoint=ResourceEndpoint(
        collection_path="/api/employees",
        payload_style=PayloadStyle.MULTIPART_ENTITY,
        entity_part="employee",
        attachment_part="photo",
    ),
    fields=FieldSet([
        FieldDescriptor("employee_id", "Employee ID", required=True),
        FieldDescriptor("employee_name", "Full Name", required=True),
        FieldDescriptor("email", "Email", required=True),
        FieldDescriptor("password", "Password", required=True, secret=True),
        FieldDescriptor("phone_number", "Phone Number", required=True),
        FieldDescriptor("blood_group", "Blood Group"),
        FieldDescriptor("current_address", "Current Address"),
        FieldDescriptor("permanent_address", "Permanent Address"),
        FieldDescriptor("position", "Position", required=True),
        FieldDescriptor("department", "Department", required=True),
        FieldDescriptor("joining_date", "Joining Date", FieldKind.DATE, required=True),
        FieldDescriptor(
            "status", "Status", FieldKind.SELECT,
            options=_values(EmployeeStatus), default=EmployeeStatus.ACTIVE.value,
        ),
        FieldDescriptor("profile_photo", "Profile Photo", FieldKind.FILE),
    ]),
    codec=EmployeeCodec(),
    searchable=("employee_id", "employee_name", "position", "department"),
    facets=(
        Facet("department", "Department", "department"),
        Facet("status", "Status", "status", options=_values(EmployeeStatus)),
    ),
    delete_prompt="Are you sure you want to delete this employee record?",
)

DOCUMENT_RESOURCE = ResourceDefinition(
    name=DOCUMENTS,
    title="HR Document Management",
    entity_label="Document",
    endpoint=ResourceEndpoint(
        collection_path="/api/hr/documents",
        payload_style=PayloadStyle.UPLOAD,
        create_path="/api/hr/upload/{documentType}/{employeeId}",
        download_path="/api/hr/download/{employeeId}/{documentType}",
        attachment_part="file",
        supports_update=False,
        reconcile=ReconcileMode.RELOAD,
    ),
    fields=FieldSet([
        FieldDescriptor("employee_id", "Employee ID", required=True),
        FieldDescriptor(
            "document_type", "Document Type", FieldKind.SELECT,
            required=True, options=_values(DocumentCategory),
        ),
        FieldDescriptor("file", "File", FieldKind.FILE, required=True),
    ]),
    codec=HrDocumentCodec(),
    searchable=("file_name", "employee_id"),
    facets=(
        Facet("category", "Category", "document_type",
              options=_values(DocumentCategory), case_insensitive=True),
    ),
    delete_prompt="Are you sure you want to delete this document?",
)

BANK_RESOURCE = ResourceDefinition(
    name=BANK,
    title="Bank Documents",
    entity_label="Document",
    endpoint=ResourceEndpoint(collection_path="/api/bankdocuments"),
    fields=FieldSet([
        FieldDescriptor(
            "document_type", "Document Type", FieldKind.SELECT,
            required=True, options=BANK_DOCUMENT_TYPES,
        ),
        FieldDescriptor("bank_name", "Bank Name", required=True),
        FieldDescriptor("account_number", "Account Number", required=True),
        FieldDescriptor("date", "Date", FieldKind.DATE, required=True),
        FieldDescriptor(
            "status", "Status", FieldKind.SELECT,
            required=True, options=_values(BankDocumentStatus),
        ),
    ]),
    codec=BankDocumentCodec(),
    searchable=("document_type", "bank_name", "account_number"),
    facets=(Facet("status", "Status", "status", options=_values(BankDocumentStatus)),),
    announce_success=True,
    delete_prompt="Are you sure you want to delete {document_type} for {bank_name}?",
)

SALARY_RESOURCE = ResourceDefinition(
    name=SALARIES,
    title="Salary Expenses",
    entity_label="Salary Entry",
    endpoint=ResourceEndpoint(collection_path="/api/salaries"),
    fields=FieldSet([
        FieldDescriptor("employee_name", "Employee Name", required=True),
        FieldDescriptor("date", "Date", FieldKind.DATE, required=True),
        FieldDescriptor("amount", "Amount", FieldKind.NUMBER, required=True),
        FieldDescriptor("description", "Description / Pay Period", required=True),
    ]),
    codec=SalaryExpenseCodec(),
    searchable=("employee_name", "description"),
)


def build_catalog() -> dict[str, ResourceDefinition]:
    """All resources served by the console, keyed by screen name."""
    return {
        definition.name: definition
        for definition in (EMPLOYEE_RESOURCE, DOCUMENT_RESOURCE, BANK_RESOURCE, SALARY_RESOURCE)
    }
