"""Filter/Search view — a pure projection over a screen's in-memory list."""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E")

ALL = "all"


def field_text(entity: Any, attribute: str) -> str:
    """Read an attribute (or mapping key) as display text."""
    if isinstance(entity, Mapping):
        value = entity.get(attribute)
    else:
        value = getattr(entity, attribute, None)
    if isinstance(value, Enum):
        value = value.value
    return "" if value is None else str(value)


def matches_query(entity: Any, query: str, searchable: Iterable[str]) -> bool:
    """Case-insensitive substring match on any searchable field; blank matches all."""
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in field_text(entity, name).lower() for name in searchable)


def matches_facets(
    entity: Any,
    facets: Mapping[str, str],
    case_insensitive: Iterable[str] = (),
) -> bool:
    """Exact match on every selected facet; the sentinel ``"all"`` disables one."""
    folded = set(case_insensitive)
    for attribute, selected in facets.items():
        if not selected or selected == ALL:
            continue
        actual = field_text(entity, attribute)
        if attribute in folded:
            if actual.lower() != selected.lower():
                return False
        elif actual != selected:
            return False
    return True


def filter_entities(
    entities: Sequence[E],
    query: str = "",
    facets: Mapping[str, str] | None = None,
    *,
    searchable: Iterable[str] = (),
    case_insensitive: Iterable[str] = (),
) -> list[E]:
    """Return the entities matching ``query`` and ``facets``, original order kept.

    Never mutates ``entities``.
    """
    searchable = tuple(searchable)
    case_insensitive = tuple(case_insensitive)
    facets = facets or {}
    return [
        entity
        for entity in entities
        if matches_query(entity, query, searchable)
        and matches_facets(entity, facets, case_insensitive)
    ]


def facet_options(entities: Iterable[Any], attribute: str) -> list[str]:
    """Distinct non-empty values of ``attribute`` in first-seen order, prefixed by ``"all"``."""
    seen: dict[str, None] = {}
    for entity in entities:
        value = field_text(entity, attribute)
        if value:
            seen.setdefault(value, None)
    return [ALL, *seen]
