"""Domain entity for HR documents uploaded against an employee."""

from dataclasses import dataclass
from enum import Enum


class DocumentCategory(str, Enum):
    """Known document categories; the wire form is the upper-cased value."""

    RESUME = "resume"
    MARKS = "marks"
    ID = "id"
    OFFER = "offer"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    DocumentCategory.RESUME: "Resume",
    DocumentCategory.MARKS: "Marks Card",
    DocumentCategory.ID: "ID Proof",
    DocumentCategory.OFFER: "Offer Letter",
}


class DocumentStatus(str, Enum):
    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"


@dataclass
class HrDocument:
    """A stored HR document. The binary itself lives on the backend."""

    id: int
    employee_id: str
    document_type: str = ""
    file_name: str = ""
    file_download_uri: str = ""
    file_type: str = ""
    size: int = 0
    status: DocumentStatus = DocumentStatus.APPROVED
