# PATH: apps/domains/students/services/__init__.py
from .accounts import (
    build_student_id,
    create_student_with_user,
    update_student_profile,
    delete_student_with_user,
)

__all__ = [
    "build_student_id",
    "create_student_with_user",
    "update_student_profile",
    "delete_student_with_user",
]
