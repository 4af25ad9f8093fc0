"""Convert ORM rows to the camelCase "attrs" dicts the frontend consumes.

Fixtures are written in camelCase (``startTime``, ``typeId``) while the
ORM uses snake_case attributes; these helpers translate both ways.
"""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy import inspect

from cms_mock.models.tables import Base

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(name: str) -> str:
    """``studentCourseIds`` → ``student_course_ids``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def to_camel(name: str) -> str:
    """``max_students`` → ``maxStudents``."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_attrs(record: Base) -> dict[str, Any]:
    """Serialize a row's columns, foreign keys included.

    hasMany relations are emitted as ``<relation>Ids`` lists
    (``studentCourseIds``), matching the fixture format.
    """
    mapper = inspect(record).mapper
    attrs = {to_camel(column.key): getattr(record, column.key) for column in mapper.column_attrs}

    for rel in mapper.relationships:
        if rel.uselist:
            singular = rel.key[:-1] if rel.key.endswith("s") else rel.key
            attrs[f"{to_camel(singular)}Ids"] = [child.id for child in getattr(record, rel.key)]

    return attrs
