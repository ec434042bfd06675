# PATH: apps/domains/questions/services.py
import logging

from rest_framework.exceptions import NotFound

from apps.api.common.numbers import round_half_up
from apps.domains.passages.models import Passage
from apps.domains.results.models import QuestionAnswer
from .models import Question

logger = logging.getLogger(__name__)

RECENT_ANSWER_LIMIT = 10


def _resolve_passage(passage_id):
    if not passage_id:
        return None
    passage = Passage.objects.filter(pk=passage_id).first()
    if passage is None:
        raise NotFound("존재하지 않는 지문입니다.")
    return passage


def save_question(data: dict, instance: Question = None) -> Question:
    """등록 / 수정 공용. 빈 값은 null 로 저장."""
    question = instance or Question()
    question.passage = _resolve_passage(data.get("passage_id"))
    question.type = data["type"]
    question.text = data["text"]
    question.options = data.get("options") or None
    question.answers = data["answers"]
    question.explanation = data.get("explanation") or None
    question.wrong_answer_explanations = data.get("wrong_answer_explanations") or None
    question.save()

    logger.info(
        "question %s id=%s type=%s passage=%s",
        "updated" if instance else "created",
        question.id, question.type, question.passage_id,
    )
    return question


def recent_answer_stats(question: Question):
    """
    최근 답변 10건 + 정답률 (최근 10건 기준, 소수 첫째 자리)
    """
    recent = list(
        QuestionAnswer.objects
        .filter(question=question)
        .select_related("result__student")
        .order_by("-result__submitted_at", "-id")[:RECENT_ANSWER_LIMIT]
    )
    total = len(recent)
    correct = sum(1 for a in recent if a.is_correct)
    rate = round_half_up(correct / total * 100, 1) if total else 0

    answers = [
        {
            "id": a.id,
            "answer": a.answer,
            "is_correct": a.is_correct,
            "submitted_at": a.result.submitted_at,
            "student": {
                "name": a.result.student.name,
                "grade": a.result.student.grade,
                "class_no": a.result.student.class_no,
                "number": a.result.student.number,
            },
        }
        for a in recent
    ]
    stats = {
        "total_answers": total,
        "correct_answers": correct,
        "correct_rate": rate,
    }
    return answers, stats
