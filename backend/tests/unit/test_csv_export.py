"""Unit tests for CSV export."""

from hr_admin.application.services import export_csv
from hr_admin.application.services.resource_catalog import BANK_RESOURCE, EMPLOYEE_RESOURCE
from hr_admin.domain.entities import BankDocument, BankDocumentStatus, Employee


def test_bank_export_header_and_rows():
    docs = [
        BankDocument(1, "Bank Statement", "First Bank", "00112233", "2024-01-15", BankDocumentStatus.VALID),
        BankDocument(2, "Bank Guarantee", "Acme, Ltd", "9988", "2023-12-01", BankDocumentStatus.EXPIRED),
    ]
    lines = export_csv(docs, BANK_RESOURCE.fields).splitlines()
    assert lines[0] == "Document Type,Bank Name,Account Number,Date,Status"
    assert lines[1] == "Bank Statement,First Bank,00112233,2024-01-15,Valid"
    assert lines[2] == 'Bank Guarantee,"Acme, Ltd",9988,2023-12-01,Expired'


def test_secret_and_file_fields_are_not_exported():
    employee = Employee(
        id="1",
        employee_id="E001",
        employee_name="Alice",
        email="alice@example.com",
        password="S3cret!pw",
        phone_number="555",
        position="Engineer",
        department="IT",
        joining_date="2024-01-01",
    )
    output = export_csv([employee], EMPLOYEE_RESOURCE.fields)
    header = output.splitlines()[0]
    assert "Password" not in header
    assert "Profile Photo" not in header
    assert "S3cret!pw" not in output


def test_empty_list_exports_header_only():
    assert export_csv([], BANK_RESOURCE.fields) == "Document Type,Bank Name,Account Number,Date,Status\n"
