"""SQLAlchemy ORM models for the in-memory CMS store.

Relations follow the frontend's data model:
    belongsTo → foreign key column on the owner (``type_id``, ``teacher_id``...)
    hasMany   → association table holding the owner's ordered child ids

Every relationship is loaded with ``selectin`` so handlers can walk
``student.student_courses[0].course.type.name`` without lazy IO.
"""

from __future__ import annotations

from sqlalchemy import JSON, Column, Float, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


# ─── Accounts ──────────────────────────────────────────────────────────────────


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String, nullable=False)
    password: Mapped[str] = mapped_column(String, nullable=False)
    # "student" | "teacher" | "manager"
    type: Mapped[str] = mapped_column(String, nullable=False)


# ─── Lookup Tables ─────────────────────────────────────────────────────────────


class StudentType(Base):
    __tablename__ = "student_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)


class CourseType(Base):
    __tablename__ = "course_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)


class Teacher(Base):
    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    country: Mapped[str | None] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)
    email: Mapped[str | None] = mapped_column(String)
    skills: Mapped[list | None] = mapped_column(JSON)
    course_amount: Mapped[int | None] = mapped_column(Integer)
    profile_id: Mapped[int | None] = mapped_column(Integer)


class Sales(Base):
    __tablename__ = "sales"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    price: Mapped[int | None] = mapped_column(Integer)
    batches: Mapped[int | None] = mapped_column(Integer)
    paid_amount: Mapped[int | None] = mapped_column(Integer)
    paid_ids: Mapped[list | None] = mapped_column(JSON)
    study_amount: Mapped[int | None] = mapped_column(Integer)
    earnings: Mapped[list | None] = mapped_column(JSON)


class Process(Base):
    __tablename__ = "processes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    status: Mapped[int | None] = mapped_column(Integer)
    current: Mapped[int | None] = mapped_column(Integer)
    chapters: Mapped[list | None] = mapped_column(JSON)
    class_time: Mapped[list | None] = mapped_column(JSON)


# ─── Courses ───────────────────────────────────────────────────────────────────


class Course(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    uid: Mapped[str | None] = mapped_column(String)
    detail: Mapped[str | None] = mapped_column(Text)
    start_time: Mapped[str | None] = mapped_column(String)
    price: Mapped[int | None] = mapped_column(Integer)
    max_students: Mapped[int | None] = mapped_column(Integer)
    star: Mapped[float | None] = mapped_column(Float)
    status: Mapped[int | None] = mapped_column(Integer)
    duration: Mapped[int | None] = mapped_column(Integer)
    duration_unit: Mapped[int | None] = mapped_column(Integer)
    cover: Mapped[str | None] = mapped_column(String)
    ctime: Mapped[str | None] = mapped_column(String)

    type_id: Mapped[int | None] = mapped_column(ForeignKey("course_types.id"))
    teacher_id: Mapped[int | None] = mapped_column(ForeignKey("teachers.id"))
    sales_id: Mapped[int | None] = mapped_column(ForeignKey("sales.id"))
    process_id: Mapped[int | None] = mapped_column(ForeignKey("processes.id"))

    type: Mapped[CourseType | None] = relationship(lazy="selectin")
    teacher: Mapped[Teacher | None] = relationship(lazy="selectin")
    sales: Mapped[Sales | None] = relationship(lazy="selectin")
    process: Mapped[Process | None] = relationship(lazy="selectin")


class StudentCourse(Base):
    """One enrollment record; shared by a student and their profile."""

    __tablename__ = "student_courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    ctime: Mapped[str | None] = mapped_column(String)
    course_id: Mapped[int | None] = mapped_column(ForeignKey("courses.id"))

    course: Mapped[Course | None] = relationship(lazy="selectin")


# ─── Students ──────────────────────────────────────────────────────────────────

student_enrollments = Table(
    "student_enrollments",
    Base.metadata,
    Column("student_id", ForeignKey("students.id", ondelete="CASCADE"), primary_key=True),
    Column("student_course_id", ForeignKey("student_courses.id"), primary_key=True),
)

profile_enrollments = Table(
    "profile_enrollments",
    Base.metadata,
    Column("profile_id", ForeignKey("student_profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("student_course_id", ForeignKey("student_courses.id"), primary_key=True),
)


class Student(Base):
    __tablename__ = "students"
    # AUTOINCREMENT: ids of deleted students are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str | None] = mapped_column(String)
    area: Mapped[str | None] = mapped_column(String)
    ctime: Mapped[str | None] = mapped_column(String)
    update_at: Mapped[str | None] = mapped_column(String)

    type_id: Mapped[int | None] = mapped_column(ForeignKey("student_types.id"))

    type: Mapped[StudentType | None] = relationship(lazy="selectin")
    student_courses: Mapped[list[StudentCourse]] = relationship(
        secondary=student_enrollments,
        order_by=StudentCourse.id,
        lazy="selectin",
    )


class StudentProfile(Base):
    """Detailed student record served by the profile page."""

    __tablename__ = "student_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    country: Mapped[str | None] = mapped_column(String)
    email: Mapped[str | None] = mapped_column(String)
    address: Mapped[str | None] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)
    gender: Mapped[int | None] = mapped_column(Integer)
    education: Mapped[str | None] = mapped_column(String)
    age: Mapped[int | None] = mapped_column(Integer)
    interest: Mapped[list | None] = mapped_column(JSON)
    avatar: Mapped[str | None] = mapped_column(String)
    member_start_at: Mapped[str | None] = mapped_column(String)
    member_end_at: Mapped[str | None] = mapped_column(String)
    description: Mapped[str | None] = mapped_column(Text)
    ctime: Mapped[str | None] = mapped_column(String)
    update_at: Mapped[str | None] = mapped_column(String)

    type_id: Mapped[int | None] = mapped_column(ForeignKey("student_types.id"))

    type: Mapped[StudentType | None] = relationship(lazy="selectin")
    student_courses: Mapped[list[StudentCourse]] = relationship(
        secondary=profile_enrollments,
        order_by=StudentCourse.id,
        lazy="selectin",
    )
