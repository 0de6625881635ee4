"""Field descriptors — the declarative schema behind every form and view modal."""

from dataclasses import dataclass, field
from enum import Enum


class FieldKind(str, Enum):
    """Input widget a field is collected with."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    DATE = "date"
    FILE = "file"


@dataclass(frozen=True)
class FieldDescriptor:
    """Describes one editable field of an entity.

    ``name`` is the entity attribute the field maps to. ``secret`` fields are
    masked in View mode until the operator reveals them. A FILE field is the
    entity's attachment and is never part of the JSON field set.
    """

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: tuple[str, ...] = ()
    default: str = ""
    secret: bool = False

    @property
    def is_attachment(self) -> bool:
        return self.kind is FieldKind.FILE


@dataclass(frozen=True)
class Facet:
    """A discrete filter dimension over one entity attribute.

    When ``options`` is empty the choices are derived from the loaded list.
    """

    name: str
    label: str
    attribute: str
    options: tuple[str, ...] = ()
    case_insensitive: bool = False


@dataclass
class Attachment:
    """A file read fully into memory before upload."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class FieldSet:
    """Ordered group of descriptors with lookup helpers."""

    fields: list[FieldDescriptor] = field(default_factory=list)

    def __iter__(self):
        return iter(self.fields)

    def get(self, name: str) -> FieldDescriptor | None:
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None

    @property
    def data_fields(self) -> list[FieldDescriptor]:
        return [f for f in self.fields if not f.is_attachment]

    @property
    def attachment_field(self) -> FieldDescriptor | None:
        return next((f for f in self.fields if f.is_attachment), None)

    def blank_values(self) -> dict[str, str]:
        return {f.name: f.default for f in self.data_fields}
