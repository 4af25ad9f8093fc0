"""Tests for request body schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cms_mock.models.schemas import StudentCreate, StudentUpdate


def test_student_create_defaults():
    student = StudentCreate(name="Grace", email="grace@cms.local", type=1)
    assert student.area == ""


def test_student_create_coerces_numeric_type():
    assert StudentCreate(name="Grace", email="g@cms.local", type="2").type == 2


@pytest.mark.parametrize(
    "body",
    [
        {"email": "g@cms.local", "type": 1},
        {"name": "", "email": "g@cms.local", "type": 1},
        {"name": "Grace", "email": "g@cms.local"},
        {"name": "Grace", "email": "g@cms.local", "type": "developer"},
        {"name": "x" * 101, "email": "g@cms.local", "type": 1},
    ],
)
def test_student_create_rejects_invalid(body):
    with pytest.raises(ValidationError):
        StudentCreate(**body)


def test_student_update_requires_id():
    with pytest.raises(ValidationError):
        StudentUpdate(name="Grace", email="g@cms.local", type=1)
    assert StudentUpdate(id=3, name="Grace", email="g@cms.local", type=1).id == 3
