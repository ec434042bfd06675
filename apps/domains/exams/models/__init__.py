# apps/domains/exams/models/__init__.py
from .exam import Exam
from .assigned_exam import AssignedExam

__all__ = [
    "Exam",
    "AssignedExam",
]
