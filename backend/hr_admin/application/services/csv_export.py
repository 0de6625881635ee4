"""CSV export of a screen's loaded list."""

import csv
import io
from collections.abc import Iterable
from typing import Any

from hr_admin.application.services.record_filter import field_text
from hr_admin.domain.entities import FieldSet


def export_csv(entities: Iterable[Any], fields: FieldSet) -> str:
    """Render entities as CSV, one column per plain data field.

    Attachments and secret fields are never exported.
    """
    columns = [f for f in fields.data_fields if not f.secret]
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([f.label for f in columns])
    for entity in entities:
        writer.writerow([field_text(entity, f.name) for f in columns])
    return buffer.getvalue()
