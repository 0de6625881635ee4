"""Unit tests for the per-resource wire codecs."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from hr_admin.application.schemas import (
    BankDocumentCodec,
    EmployeeCodec,
    HrDocumentCodec,
    SalaryExpenseCodec,
)
from hr_admin.domain.entities import BankDocumentStatus, EmployeeStatus
from hr_admin.domain.exceptions import ValidationError


def test_employee_decode_coerces_ids_and_numbers():
    employee = EmployeeCodec().decode({
        "id": 7,
        "employeeId": "E007",
        "employeeName": "Alice",
        "email": "alice@example.com",
        "phoneNumber": 5550100,
        "position": "Engineer",
        "department": "IT",
        "joiningDate": [2024, 2, 1],
    })
    assert employee.id == "7"
    assert employee.phone_number == "5550100"
    assert employee.joining_date == "2024-02-01"
    assert employee.status is EmployeeStatus.ACTIVE
    assert employee.blood_group == ""
    assert employee.profile_photo_url is None


def test_employee_decode_rejects_missing_fields():
    with pytest.raises(PydanticValidationError):
        EmployeeCodec().decode({"id": 1, "employeeName": "No email"})


def test_employee_encode_sends_full_camel_case_body():
    payload = EmployeeCodec().encode({
        "employee_id": "E008",
        "employee_name": "Bob",
        "email": "bob@example.com",
        "password": "An0ther!pw",
        "phone_number": "555",
        "position": "Analyst",
        "department": "Finance",
        "joining_date": "2024-05-20",
        "status": "Joining",
        "profile_photo_url": "",
    })
    assert payload == {
        "employeeId": "E008",
        "employeeName": "Bob",
        "email": "bob@example.com",
        "password": "An0ther!pw",
        "phoneNumber": "555",
        "position": "Analyst",
        "department": "Finance",
        "joiningDate": "2024-05-20",
        "status": "Joining",
        "bloodGroup": "",
        "currentAddress": "",
        "permanentAddress": "",
    }


def test_document_decode_lowercases_category():
    document = HrDocumentCodec().decode({"id": 3, "employeeId": "E1", "documentType": "RESUME"})
    assert document.document_type == "resume"
    assert document.file_name == ""
    assert document.size == 0


def test_document_encode_uppercases_category():
    params = HrDocumentCodec().encode({"employee_id": "E2", "document_type": "Offer"})
    assert params == {"employeeId": "E2", "documentType": "OFFER"}


def test_document_encode_rejects_unknown_category():
    with pytest.raises(ValidationError) as exc_info:
        HrDocumentCodec().encode({"employee_id": "E2", "document_type": "payslip"})
    assert "document_type" in exc_info.value.errors


def test_bank_document_type_is_restricted():
    values = {
        "document_type": "Bank Loan",
        "bank_name": "First Bank",
        "account_number": "1",
        "date": "2024-01-01",
        "status": "Valid",
    }
    with pytest.raises(ValidationError) as exc_info:
        BankDocumentCodec().encode(values)
    assert set(exc_info.value.errors) == {"document_type"}


def test_bank_to_values_flattens_enums():
    codec = BankDocumentCodec()
    entity = codec.decode({
        "id": 1,
        "documentType": "Bank Guarantee",
        "bankName": "First Bank",
        "accountNumber": "42",
        "date": "2024-01-15",
        "status": "Pending",
    })
    assert entity.status is BankDocumentStatus.PENDING
    values = codec.to_values(entity)
    assert values["status"] == "Pending"
    assert "id" not in values


def test_salary_encode_sends_date_tuple_and_id():
    payload = SalaryExpenseCodec().encode(
        {"employee_name": "Carol", "date": "2024-04-30", "amount": "6200.50", "description": "April"},
        entity_id=3,
    )
    assert payload == {
        "id": 3,
        "employeeName": "Carol",
        "date": [2024, 4, 30],
        "amount": 6200.5,
        "description": "April",
    }


def test_salary_encode_without_id_omits_it():
    payload = SalaryExpenseCodec().encode(
        {"employee_name": "Carol", "date": "2024-04-30", "amount": 1, "description": "April"}
    )
    assert "id" not in payload


def test_salary_encode_reports_every_bad_field():
    with pytest.raises(ValidationError) as exc_info:
        SalaryExpenseCodec().encode(
            {"employee_name": "", "date": "2024-02-30", "amount": "x", "description": "April"}
        )
    assert set(exc_info.value.errors) == {"employee_name", "date", "amount"}


def test_bank_decode_keeps_unlisted_status():
    codec = BankDocumentCodec()
    entity = codec.decode({
        "id": 4,
        "documentType": "Bank Statement",
        "bankName": "First Bank",
        "accountNumber": "42",
        "date": [2024, 1, 15],
        "status": "Active",
    })
    assert entity.status == "Active"
    assert codec.to_values(entity)["status"] == "Active"


def test_bank_decode_still_requires_status_key():
    with pytest.raises(PydanticValidationError):
        BankDocumentCodec().decode({
            "id": 4,
            "documentType": "Bank Statement",
            "bankName": "First Bank",
            "accountNumber": "42",
            "date": [2024, 1, 15],
        })


@pytest.mark.parametrize("status, expected", [(None, EmployeeStatus.ACTIVE), ("On Leave", "On Leave")])
def test_employee_decode_tolerates_status(status, expected):
    employee = EmployeeCodec().decode({
        "id": 3,
        "employeeId": "E003",
        "employeeName": "Cara",
        "email": "cara@example.com",
        "phoneNumber": "557",
        "position": "Designer",
        "department": "UX",
        "joiningDate": "2024-02-02",
        "status": status,
    })
    assert employee.status == expected
