"""courses.py — Course listing and detail endpoints.

Endpoints:
    GET /api/courses   → All courses (paginated when page + limit are given)
    GET /api/course    → One course with teacher, sales, type and process

Called by: main.py (mounted under API_NAMESPACE)
Depends on: deps.py (DBSession), tables.py (Course), serializers.py
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from sqlalchemy import select

from cms_mock.api.deps import DBSession
from cms_mock.api.errors import MockApiError
from cms_mock.core.pagination import paginate
from cms_mock.models.serializers import to_attrs
from cms_mock.models.tables import Course

router = APIRouter(tags=["courses"])
logger = logging.getLogger(__name__)


@router.get("/courses")
async def list_courses(
    db: DBSession,
    page: int | None = None,
    limit: int | None = None,
):
    """List courses with their teacher's name.

    Args:
        page: 1-based page number.
        limit: Page size. Without both page and limit every course is returned.

    Returns:
        Envelope with ``{total, courses, paginator?}``; total counts all courses.
    """
    result = await db.execute(select(Course).order_by(Course.id))
    courses = list(result.scalars().all())

    page_items, paginator = paginate(courses, page, limit)
    payload = []
    for course in page_items:
        attrs = to_attrs(course)
        attrs["teacher"] = course.teacher.name if course.teacher else None
        payload.append(attrs)

    data: dict[str, Any] = {"total": len(courses), "courses": payload}
    if paginator:
        data["paginator"] = paginator

    logger.debug("GET /courses → %d of %d (page=%s, limit=%s)", len(payload), len(courses), page, limit)
    return {"msg": "success", "code": 200, "data": data}


@router.get("/course")
async def get_course(id: int, db: DBSession):  # noqa: A002
    """Return one course with its related records inlined.

    ``teacher`` is the teacher's name, ``sales`` and ``process`` are the
    full related records, ``typeName`` is the course type name.

    Raises:
        MockApiError: 400 if no course has this id.
    """
    course = await db.get(Course, id)
    if course is None:
        raise MockApiError(400, f"can't find course by id {id} ")

    data = to_attrs(course)
    data["teacher"] = course.teacher.name if course.teacher else None
    data["sales"] = to_attrs(course.sales) if course.sales else None
    data["typeName"] = course.type.name if course.type else None
    data["process"] = to_attrs(course.process) if course.process else None
    return {"msg": "success", "code": 200, "data": data}
