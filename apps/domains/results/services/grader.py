# apps/domains/results/services/grader.py
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from django.conf import settings

# ============================================================
# 자유 서술 채점 정책 (Results 도메인 책임)
# ============================================================

MULTIPLE_CHOICE = "객관식"
SHORT_ANSWER = "단답형"
FREE_RESPONSE = "서술형"

SUBSTRING_SIMILARITY = 0.7

_WS = re.compile(r"\s+")


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def similarity(answer: Optional[str], correct: Optional[str]) -> float:
    """
    제출 답안과 허용 답안의 유사도 (0.0 ~ 1.0)

    1) 소문자 + 앞뒤 공백 제거 후 완전 일치 → 1.0
    2) 한쪽이 다른 쪽을 포함 → 0.7 (빈 문자열은 모든 문자열에 포함된다)
    3) 공백 단위 토큰: 제출 토큰 중 허용 답안에 있는 개수 / max(토큰 수)
    4) 겹치는 토큰 없음 → 0
    """
    a = _norm(answer)
    c = _norm(correct)

    if a == c:
        return 1.0

    if c in a or a in c:
        return SUBSTRING_SIMILARITY

    a_words = a.split()
    c_words = set(c.split())
    match_count = sum(1 for w in a_words if w in c_words)
    if match_count == 0:
        return 0.0

    return match_count / max(len(a_words), len(c.split()))


def max_similarity(answer: Optional[str], accepted: Iterable[str]) -> float:
    return max((similarity(answer, c) for c in accepted), default=0.0)


def is_correct(question_type: str, accepted: List[str], submission: Optional[str]) -> bool:
    """
    문제 유형별 정답 판정
    - 객관식: answers[0] 과 정확히 일치
    - 단답형: 허용 답안 중 하나와 유사도 >= 0.9
    - 서술형: 최대 유사도 >= 0.7
    """
    accepted = list(accepted or [])

    if question_type == MULTIPLE_CHOICE:
        if not accepted:
            return False
        return (submission or "") == accepted[0]

    if question_type == SHORT_ANSWER:
        threshold = settings.READING_SIMILARITY_SHORT_ANSWER
        return any(similarity(submission, c) >= threshold for c in accepted)

    if question_type == FREE_RESPONSE:
        if not accepted:
            return False
        return max_similarity(submission, accepted) >= settings.READING_SIMILARITY_FREE_RESPONSE

    return False


def is_paragraph_correct(answer: Optional[str], model_answer: Optional[str]) -> bool:
    """문단 요약: 모범 답안과 유사도 >= 0.7"""
    return similarity(answer, model_answer) >= settings.READING_SIMILARITY_FREE_RESPONSE


def _squash(s: str) -> str:
    return _WS.sub("", (s or "").lower())


def check_exam_answer(question_type: str, accepted: List[str], submitted: List[str]) -> bool:
    """
    시험지 문항 판정
    - 빈 제출 → 오답
    - 객관식: 정답 목록과 제출 목록이 (순서 무관) 동일
    - 그 외: 첫 제출값을 소문자 + 공백 제거 후 허용 답안 중 하나와 일치
    """
    accepted = [str(a) for a in (accepted or [])]
    submitted = [str(s) for s in (submitted or [])]

    if not submitted:
        return False

    if question_type == MULTIPLE_CHOICE:
        return sorted(accepted) == sorted(submitted)

    first = _squash(submitted[0])
    return any(first == _squash(c) for c in accepted)
