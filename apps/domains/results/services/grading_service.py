# apps/domains/results/services/grading_service.py
"""
학생 제출 채점 (문법 문제 / 지문 독해 / 시험지)

- 채점 규칙은 grader.py 단일 진실
- 오답은 WrongAnswer 로 남긴다
  * 문법 / 지문: 오답마다 추가 (중복 제거 없음)
  * 시험지: 문항 위치(item_index, question_index) 당 1건
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from django.db import transaction
from rest_framework.exceptions import ValidationError

from apps.api.common.numbers import round_half_up, ratio_percent
from apps.core.context import RequestContext
from apps.domains.students.models import Student
from apps.domains.results.models import Result, QuestionAnswer, ExamResult, WrongAnswer
from apps.domains.results.services import grader

logger = logging.getLogger(__name__)

ANSWER_JOINER = " / "


def join_answers(answers) -> str:
    return ANSWER_JOINER.join(str(a) for a in (answers or []))


# ============================================================
# 문법 / 개념 문제
# ============================================================

def grade_grammar_question(ctx: RequestContext, question, answer: Optional[str]) -> Dict[str, Any]:
    """
    독립 문제 1건 채점
    - 오답이면 WrongAnswer 추가 (같은 문제를 여러 번 틀리면 여러 건)
    """
    answer = answer if answer is not None else ""
    correct = grader.is_correct(question.type, question.answers, answer)

    if not correct:
        wa = WrongAnswer.objects.create(
            student=ctx.student,
            question=question,
            question_text=question.text,
            question_type=question.type,
            student_answer=answer,
            correct_answer=join_answers(question.answers),
            explanation=question.explanation,
            category=None,
        )
        logger.info(
            "wrong answer created id=%s student=%s question=%s (grammar)",
            wa.id, ctx.student.id, question.id,
        )

    return {
        "is_correct": correct,
        "correct_answer": list(question.answers or []),
        "explanation": question.explanation,
        "wrong_answer_explanations": question.wrong_answer_explanations,
    }


# ============================================================
# 지문 독해
# ============================================================

def passage_score(paragraph_correct: int, paragraph_total: int,
                  question_correct: int, question_total: int) -> float:
    """
    문단 50점 + 문제 50점, 소수 첫째 자리
    - 한쪽 항목이 없으면 다른 쪽이 100점 전체를 가진다
    """
    if paragraph_total and question_total:
        raw = (paragraph_correct / paragraph_total) * 50 + (question_correct / question_total) * 50
    elif paragraph_total:
        raw = (paragraph_correct / paragraph_total) * 100
    elif question_total:
        raw = (question_correct / question_total) * 100
    else:
        raw = 0
    return round_half_up(raw, 1)


@transaction.atomic
def submit_passage_reading(
    ctx: RequestContext,
    passage,
    *,
    reading_time: int,
    paragraph_answers: List[str],
    question_answers: Mapping[str, Any],
) -> Dict[str, Any]:
    blocks = passage.content_blocks or []

    # 1) 문단 요약 채점 (블록 기준, 제출 없는 문단은 빈 답안)
    paragraph_results = []
    for index, block in enumerate(blocks):
        answer = paragraph_answers[index] if index < len(paragraph_answers) else ""
        answer = answer if isinstance(answer, str) else str(answer or "")
        paragraph_results.append({
            "q": block.get("q"),
            "answer": answer,
            "correct_answer": block.get("a"),
            "is_correct": grader.is_paragraph_correct(answer, block.get("a")),
            "explanation": block.get("explanation"),
        })
    paragraph_correct = sum(1 for r in paragraph_results if r["is_correct"])

    # 2) 문제 채점
    questions = list(passage.questions.all().order_by("id"))
    question_rows = []
    for q in questions:
        raw = question_answers.get(str(q.id), question_answers.get(q.id))
        answer = "" if raw is None else str(raw)
        question_rows.append((q, answer, grader.is_correct(q.type, q.answers, answer)))
    question_correct = sum(1 for _, _, ok in question_rows if ok)

    score = passage_score(
        paragraph_correct, len(paragraph_results),
        question_correct, len(questions),
    )

    # 3) 저장
    result = Result.objects.create(
        student=ctx.student,
        passage=passage,
        reading_time=reading_time,
        score=score,
        paragraph_answers=paragraph_results,
        submitted_at=ctx.now,
    )
    QuestionAnswer.objects.bulk_create([
        QuestionAnswer(result=result, question=q, answer=answer, is_correct=ok)
        for q, answer, ok in question_rows
    ])

    wrong = [
        WrongAnswer(
            student=ctx.student,
            question=q,
            result=result,
            question_text=q.text,
            question_type=q.type,
            student_answer=answer,
            correct_answer=join_answers(q.answers),
            explanation=q.explanation,
            category=passage.category,
        )
        for q, answer, ok in question_rows
        if not ok
    ]
    if wrong:
        WrongAnswer.objects.bulk_create(wrong)

    logger.info(
        "passage result created id=%s student=%s passage=%s score=%s wrong=%s",
        result.id, ctx.student.id, passage.id, score, len(wrong),
    )

    return {
        "result_id": result.id,
        "score": score,
        "paragraph_score": paragraph_correct,
        "question_score": question_correct,
    }


# ============================================================
# 시험지
# ============================================================

def _answer_map(answers: List[dict]) -> Dict[tuple, List[str]]:
    out: Dict[tuple, List[str]] = {}
    for a in answers:
        key = (a["item_index"], a["question_index"])
        # 같은 위치가 여러 번 오면 첫 답안 사용
        out.setdefault(key, list(a.get("answer") or []))
    return out


@transaction.atomic
def submit_exam(
    ctx: RequestContext,
    exam,
    *,
    answers: List[dict],
    elapsed_time: int,
) -> Dict[str, Any]:
    """
    시험지 제출 + 채점
    - 학생당 1회 (이미 응시했으면 400)
    - 오답 문항마다 WrongAnswer 1건
    - score = round_half_up(정답 수 / 전체 문항 수 * 100)
    """
    # 같은 학생의 동시 제출 직렬화
    Student.objects.select_for_update().filter(pk=ctx.student.pk).first()

    if ExamResult.objects.filter(exam=exam, student=ctx.student).exists():
        raise ValidationError("이미 완료한 시험입니다.")

    submitted = _answer_map(answers)

    graded = []
    for item_index, item in enumerate(exam.items or []):
        for question_index, question in enumerate(item.get("questions") or []):
            student_answer = submitted.get((item_index, question_index), [])
            ok = grader.check_exam_answer(
                question.get("type"),
                question.get("answers") or [],
                student_answer,
            )
            graded.append((item_index, question_index, question, student_answer, ok))

    total = len(graded)
    correct = sum(1 for g in graded if g[4])
    score = ratio_percent(correct, total)

    exam_result = ExamResult.objects.create(
        exam=exam,
        student=ctx.student,
        score=score,
        answers=answers,
        total_time=elapsed_time,
        submitted_at=ctx.now,
    )

    WrongAnswer.objects.bulk_create([
        build_exam_wrong_answer(exam_result, item_index, question_index, question, student_answer)
        for item_index, question_index, question, student_answer, ok in graded
        if not ok
    ])

    logger.info(
        "exam result created id=%s exam=%s student=%s score=%s (%s/%s)",
        exam_result.id, exam.id, ctx.student.id, score, correct, total,
    )

    return {
        "message": "시험이 제출되었습니다.",
        "score": score,
        "correct_count": correct,
        "total_questions": total,
        "result_id": exam_result.id,
    }


def build_exam_wrong_answer(exam_result, item_index, question_index, question, student_answer) -> WrongAnswer:
    """시험지 문항 스냅샷으로 WrongAnswer 인스턴스 생성 (저장은 호출자)"""
    return WrongAnswer(
        student_id=exam_result.student_id,
        exam_result=exam_result,
        item_index=item_index,
        question_index=question_index,
        question_text=question.get("text") or "",
        question_type=question.get("type") or "",
        student_answer=join_answers(student_answer),
        correct_answer=join_answers(question.get("answers")),
        explanation=question.get("explanation"),
        category=exam_result.exam.category,
    )
