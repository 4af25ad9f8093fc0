"""students.py — Student listing, CRUD and profile endpoints.

Endpoints:
    GET    /api/students          → Search + paginate students
    POST   /api/students/add      → Create a student
    POST   /api/students/update   → Update a student
    DELETE /api/students/delete   → Delete a student
    GET    /api/student           → Student profile with enrolled courses

Called by: main.py (mounted under API_NAMESPACE)
Depends on: deps.py (DBSession), tables.py, serializers.py, core/pagination.py
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cms_mock.api.deps import DBSession
from cms_mock.api.errors import MockApiError
from cms_mock.core.pagination import paginate
from cms_mock.mock.factory import timestamp
from cms_mock.models.schemas import StudentCreate, StudentUpdate
from cms_mock.models.serializers import to_attrs
from cms_mock.models.tables import Student, StudentProfile, StudentType

router = APIRouter(tags=["students"])
logger = logging.getLogger(__name__)


def _not_found(student_id: int) -> MockApiError:
    return MockApiError(400, f"can't find student by id {student_id} ")


async def _get_student_type(db: AsyncSession, type_id: int) -> StudentType:
    student_type = await db.get(StudentType, type_id)
    if student_type is None:
        raise MockApiError(400, f"can't find student type by id {type_id} ")
    return student_type


def _student_payload(student: Student) -> dict[str, Any]:
    """Attrs + ``courses`` ({name, id} per enrollment) + ``typeName``."""
    attrs = to_attrs(student)
    attrs["courses"] = [
        {"name": enrollment.course.name if enrollment.course else None, "id": enrollment.id}
        for enrollment in student.student_courses
    ]
    attrs["typeName"] = student.type.name if student.type else None
    return attrs


def _profile_payload(profile: StudentProfile) -> dict[str, Any]:
    """Attrs + full enrollment records (with course name and type) + ``typeName``."""
    attrs = to_attrs(profile)
    courses = []
    for enrollment in profile.student_courses:
        course = enrollment.course
        courses.append(
            {
                **to_attrs(enrollment),
                "name": course.name if course else None,
                "type": course.type.name if course and course.type else None,
            }
        )
    attrs["courses"] = courses
    attrs["typeName"] = profile.type.name if profile.type else None
    return attrs


# ─── List ──────────────────────────────────────────────────────────────────────


@router.get("/students")
async def list_students(
    db: DBSession,
    query: str | None = None,
    limit: int | None = None,
    page: int | None = None,
):
    """List students, optionally filtered by name and paginated.

    Args:
        query: Case-sensitive substring of the student name.
        limit: Page size. Pagination applies only with both limit and page.
        page: 1-based page number.

    Returns:
        Envelope with ``{total, students, paginator?}``.
    """
    result = await db.execute(select(Student).order_by(Student.id))
    students = [s for s in result.scalars().all() if not query or query in s.name]

    page_items, paginator = paginate(students, page, limit)
    data: dict[str, Any] = {
        "total": len(students),
        "students": [_student_payload(s) for s in page_items],
    }
    if paginator:
        data["paginator"] = paginator

    logger.debug(
        "GET /students → %d of %d (query=%s, page=%s, limit=%s)",
        len(page_items), len(students), query, page, limit,
    )
    return {"data": data, "msg": "success", "code": 200}


# ─── Create / Update / Delete ──────────────────────────────────────────────────


@router.post("/students/add")
async def add_student(body: StudentCreate, db: DBSession):
    """Create a student.

    Raises:
        MockApiError: 400 if ``type`` is not a known student type.
    """
    student_type = await _get_student_type(db, body.type)
    student = Student(
        name=body.name,
        email=body.email,
        area=body.area,
        ctime=timestamp(),
        update_at=None,
        type=student_type,
        student_courses=[],
    )
    db.add(student)
    await db.flush()

    logger.info("POST /students/add → created student %d '%s'", student.id, student.name)
    return {"msg": "success", "code": 200, "data": _student_payload(student)}


@router.post("/students/update")
async def update_student(body: StudentUpdate, db: DBSession):
    """Update a student's name, email, area and type.

    Raises:
        MockApiError: 400 if the student or the student type is unknown.
    """
    student = await db.get(Student, body.id)
    if student is None:
        raise _not_found(body.id)

    student.type = await _get_student_type(db, body.type)
    student.name = body.name
    student.email = body.email
    student.area = body.area
    student.update_at = timestamp()
    await db.flush()

    logger.info("POST /students/update → updated student %d", student.id)
    return {"msg": "success", "code": 200, "data": _student_payload(student)}


@router.delete("/students/delete")
async def delete_student(id: int, db: DBSession):  # noqa: A002
    """Delete a student. Shared enrollment records are left in place.

    Raises:
        MockApiError: 400 if the student is unknown.
    """
    student = await db.get(Student, id)
    if student is None:
        raise _not_found(id)

    await db.delete(student)
    await db.flush()

    logger.info("DELETE /students/delete → removed student %d", id)
    return {"data": True, "msg": "success", "code": 200}


# ─── Profile ───────────────────────────────────────────────────────────────────


@router.get("/student")
async def get_student_profile(id: int, db: DBSession):  # noqa: A002
    """Return one student profile with enrolled course details.

    Raises:
        MockApiError: 400 if no profile has this id.
    """
    profile = await db.get(StudentProfile, id)
    if profile is None:
        raise _not_found(id)
    return {"msg": "success", "code": 200, "data": _profile_payload(profile)}
