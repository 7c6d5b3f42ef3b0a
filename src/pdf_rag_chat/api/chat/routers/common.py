"""
목적: Chat 라우터 공통 유틸을 제공한다.
설명: 도메인 예외를 HTTP 예외로 변환하는 헬퍼와 서비스 의존성 함수를 제공한다.
디자인 패턴: 유틸리티 모듈
참조: src/pdf_rag_chat/api/chat/routers/chat.py, src/pdf_rag_chat/api/health/routers/server.py
"""

from __future__ import annotations

from fastapi import HTTPException, status

from pdf_rag_chat.api.chat.services import ChatAPIService, get_chat_api_service
from pdf_rag_chat.shared.exceptions import BaseAppException


def to_http_exception(error: BaseAppException) -> HTTPException:
    """도메인 예외를 HTTP 예외로 변환한다."""

    code = error.detail.code
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if code in {"CHAT_MESSAGE_EMPTY"}:
        status_code = status.HTTP_400_BAD_REQUEST
    if code in {"ORCHESTRATION_FAILED"}:
        status_code = status.HTTP_502_BAD_GATEWAY
    if code in {"ORCHESTRATION_TIMEOUT"}:
        status_code = status.HTTP_504_GATEWAY_TIMEOUT
    if code in {"CHAT_RUNTIME_NOT_READY"}:
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HTTPException(status_code=status_code, detail=error.to_dict())


def resolve_chat_api_service() -> ChatAPIService:
    """FastAPI Depends 경유로 서비스 싱글턴을 반환한다."""

    try:
        return get_chat_api_service()
    except BaseAppException as error:
        raise to_http_exception(error) from error
