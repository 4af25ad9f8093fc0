from . import auth, courses, health, students

__all__ = [
    "auth",
    "courses",
    "health",
    "students",
]
