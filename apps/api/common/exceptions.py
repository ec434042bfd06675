# apps/api/common/exceptions.py
"""
DRF EXCEPTION_HANDLER

모든 실패 응답을 {"error": "<message>"} 한 가지 형태로 맞춘다.
- ValidationError: 첫 번째 필드 메시지만 노출
- NotAuthenticated / AuthenticationFailed: 401
- PermissionDenied: 403
- NotFound / Http404: 404
- 그 밖의 예외: None 반환 → UnhandledExceptionMiddleware 에서 500 처리
"""
from __future__ import annotations

import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(data) -> str:
    if isinstance(data, dict):
        for key in ("error", "detail"):
            if key in data:
                return _first_message(data[key])
        values = data.values()
    elif isinstance(data, (list, tuple)):
        values = data
    else:
        return str(data)

    # 중첩 목록 오류는 통과한 항목이 빈 값으로 섞여 있다
    for value in values:
        message = _first_message(value)
        if message:
            return message
    return ""


def error_envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    message = _first_message(response.data)
    if response.status_code >= 500:
        logger.error("API error %s: %s", response.status_code, message)

    response.data = {"error": message}
    return response
