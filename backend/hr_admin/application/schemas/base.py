"""Shared pieces of the wire schemas: camelCase models and the entity codec base."""

import dataclasses
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from hr_admin.domain.exceptions import ValidationError

E = TypeVar("E")
S = TypeVar("S", bound=Enum)


class WireModel(BaseModel):
    """Base for every backend payload: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class WireRecord(WireModel, ABC):
    """A record as returned by a list/create/update endpoint."""

    @abstractmethod
    def to_entity(self) -> Any:
        ...


def known_member(enum_type: type[S], value: str) -> S | str:
    """The enum member for ``value``, or ``value`` itself when the backend sent something else."""
    try:
        return enum_type(value)
    except ValueError:
        return value


def field_errors(exc: PydanticValidationError, model: type[BaseModel]) -> dict[str, str]:
    """Flatten pydantic errors into ``{field_name: message}`` keyed by Python name."""
    by_alias = {info.alias or name: name for name, info in model.model_fields.items()}
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = str(err["loc"][0]) if err["loc"] else "__root__"
        errors.setdefault(by_alias.get(loc, loc), err["msg"])
    return errors


class EntityCodec(ABC, Generic[E]):
    """Converts between raw backend JSON, domain entities, and form values.

    ``decode`` validates a single raw record against ``record_model`` and
    raises pydantic's ``ValidationError`` when it does not fit. ``encode``
    builds the request body from form values and raises the domain
    ``ValidationError`` instead, since that error reaches the operator.
    """

    record_model: ClassVar[type[WireRecord]]
    payload_model: ClassVar[type[WireModel]]

    def decode(self, raw: Any) -> E:
        return self.record_model.model_validate(raw).to_entity()

    def encode(self, values: dict[str, Any], entity_id: int | str | None = None) -> dict[str, Any]:
        try:
            payload = self.payload_model.model_validate(self.prepare_payload(values, entity_id))
        except PydanticValidationError as exc:
            errors = field_errors(exc, self.payload_model)
            raise ValidationError(
                "Invalid value for: " + ", ".join(sorted(errors)), errors=errors
            ) from exc
        return payload.model_dump(by_alias=True, mode="json", exclude_none=True)

    def prepare_payload(self, values: dict[str, Any], entity_id: int | str | None) -> dict[str, Any]:
        """Hook for resources whose request body differs from the form values."""
        return dict(values)

    def to_values(self, entity: E) -> dict[str, Any]:
        """Form values for pre-populating an Edit/View modal (id excluded)."""
        values: dict[str, Any] = {}
        for f in dataclasses.fields(entity):  # type: ignore[arg-type]
            if f.name == "id":
                continue
            value = getattr(entity, f.name)
            if isinstance(value, Enum):
                value = value.value
            values[f.name] = "" if value is None else value
        return values
