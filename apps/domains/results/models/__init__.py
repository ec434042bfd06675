# apps/domains/results/models/__init__.py

from .result import Result, QuestionAnswer
from .exam_result import ExamResult
from .wrong_answer import WrongAnswer

__all__ = [
    "Result",
    "QuestionAnswer",
    "ExamResult",
    "WrongAnswer",
]
