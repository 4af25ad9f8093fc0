"""seed.py — Populate the in-memory store from fixture files.

Called by: models/database.py (``MockDatabase.setup()``)
Depends on: mock/fixtures.py, models/tables.py, models/serializers.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from cms_mock.mock.fixtures import FIXTURE_FILES, FixtureError, load_fixture
from cms_mock.models.serializers import to_snake
from cms_mock.models.tables import (
    Base,
    Course,
    CourseType,
    Process,
    Sales,
    Student,
    StudentCourse,
    StudentProfile,
    StudentType,
    Teacher,
    User,
)

logger = logging.getLogger(__name__)

MODELS: dict[str, type[Base]] = {
    "user": User,
    "teacher": Teacher,
    "courseType": CourseType,
    "sales": Sales,
    "process": Process,
    "course": Course,
    "studentCourse": StudentCourse,
    "studentType": StudentType,
    "student": Student,
    "studentProfile": StudentProfile,
}


async def _build_record(
    session: AsyncSession, model: type[Base], raw: dict[str, Any]
) -> Base:
    fields = {to_snake(key): value for key, value in raw.items()}
    enrollment_ids = fields.pop("student_course_ids", None)

    record = model(**fields)
    if enrollment_ids is not None:
        enrollments = []
        for enrollment_id in enrollment_ids:
            enrollment = await session.get(StudentCourse, enrollment_id)
            if enrollment is None:
                raise FixtureError(
                    f"{model.__name__} {raw.get('id')} references unknown studentCourse {enrollment_id}"
                )
            enrollments.append(enrollment)
        record.student_courses = enrollments
    return record


async def seed_database(session: AsyncSession, fixtures_dir: Path) -> dict[str, int]:
    """Create every fixture record, model by model, in ``FIXTURE_FILES`` order.

    Args:
        session: Open session; the caller commits.
        fixtures_dir: Directory holding the JSON fixture files.

    Returns:
        Mapping of model name → number of records created.

    Raises:
        FixtureError: If a file is unreadable or a record does not fit its model.
    """
    counts: dict[str, int] = {}
    for name, filename in FIXTURE_FILES.items():
        model = MODELS[name]
        records = load_fixture(fixtures_dir, filename)
        for raw in records:
            try:
                record = await _build_record(session, model, raw)
            except TypeError as exc:
                raise FixtureError(f"{filename}: {exc}") from exc
            session.add(record)
        # Flush per model so later models can resolve references by id.
        await session.flush()
        counts[name] = len(records)

    logger.info("Seeded mock store: %s", ", ".join(f"{k}={v}" for k, v in counts.items()))
    return counts
