"""fixtures.py — Static seed data loader.

Each model has one JSON file (a list of records, camelCase keys) under
``mock/fixtures/``. Records reference each other by id: ``typeId``,
``teacherId``, ``courseId`` for belongsTo, ``studentCourseIds`` for hasMany.

Called by: mock/seed.py
Depends on: Nothing
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Model name → fixture file, in the order records must be created.
FIXTURE_FILES: dict[str, str] = {
    "user": "user.json",
    "teacher": "teacher.json",
    "courseType": "course_type.json",
    "sales": "sales.json",
    "process": "process.json",
    "course": "course.json",
    "studentCourse": "student_course.json",
    "studentType": "student_type.json",
    "student": "student.json",
    "studentProfile": "student-profile.json",
}


class FixtureError(Exception):
    """A fixture file is missing, unreadable, or has the wrong shape."""


def load_fixture(fixtures_dir: Path, filename: str) -> list[dict[str, Any]]:
    """Read one fixture file.

    Args:
        fixtures_dir: Directory holding the JSON files.
        filename: File name, e.g. ``student.json``.

    Returns:
        The list of records in the file.

    Raises:
        FixtureError: If the file is missing, is not valid JSON, or is not
            a list of objects.
    """
    path = Path(fixtures_dir) / filename
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise FixtureError(f"Fixture file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise FixtureError(f"Fixture file {path} is not valid JSON: {exc}") from exc

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise FixtureError(f"Fixture file {path} must contain a list of objects.")
    return records
