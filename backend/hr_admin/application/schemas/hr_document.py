"""Pydantic wire schemas for HR documents."""

from pydantic import Field, field_serializer, field_validator

from hr_admin.application.schemas.base import EntityCodec, WireModel, WireRecord
from hr_admin.domain.entities import DocumentCategory, HrDocument


class HrDocumentRecord(WireRecord):
    """A document as listed by ``GET /api/hr/documents``.

    Only ``id`` and ``employeeId`` are guaranteed; the backend sends no status.
    """

    id: int
    employee_id: str
    document_type: str | None = None
    file_name: str | None = None
    file_download_uri: str | None = None
    file_type: str | None = None
    size: int | None = None

    def to_entity(self) -> HrDocument:
        return HrDocument(
            id=self.id,
            employee_id=self.employee_id,
            document_type=(self.document_type or "").lower(),
            file_name=self.file_name or "",
            file_download_uri=self.file_download_uri or "",
            file_type=self.file_type or "",
            size=self.size or 0,
        )


class DocumentUploadParams(WireModel):
    """Path parameters of ``POST /api/hr/upload/{documentType}/{employeeId}``."""

    employee_id: str = Field(min_length=1)
    document_type: DocumentCategory

    @field_validator("document_type", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_serializer("document_type")
    def _upper(self, value: DocumentCategory) -> str:
        return value.value.upper()


class HrDocumentCodec(EntityCodec[HrDocument]):
    record_model = HrDocumentRecord
    payload_model = DocumentUploadParams
