"""Build UPDATE assignments from a sparse request.

A request model's fields are all optional; the ones the caller actually
supplied (pydantic's ``fields_set``) become ``column = value`` pairs in
declaration order, followed by ``updated_at``. An empty request therefore
still produces one assignment and degenerates to a timestamp touch.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

UPDATED_AT = "updated_at"

Assignment = tuple[str, Any]


def build_assignments(request: BaseModel, now: datetime) -> list[Assignment]:
    """Return ordered (column, value) pairs for the fields present in request."""
    present = request.model_dump(exclude_unset=True)
    assignments: list[Assignment] = []
    for name in type(request).model_fields:
        if name not in present:
            continue
        value = present[name]
        if isinstance(value, Enum):
            value = value.value
        assignments.append((name, value))
    assignments.append((UPDATED_AT, now))
    return assignments
