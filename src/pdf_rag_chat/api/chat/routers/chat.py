"""
목적: Chat API 라우터를 제공한다.
설명: 메시지 전송(POST /chat)과 이력 조회(GET /chat/history) 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/pdf_rag_chat/api/chat/services/chat_service.py
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from pdf_rag_chat.api.chat.models import ChatRequest, ChatResponse, HistoryResponse
from pdf_rag_chat.api.chat.routers.common import resolve_chat_api_service, to_http_exception
from pdf_rag_chat.api.chat.services import ChatAPIService
from pdf_rag_chat.api.const import (
    CHAT_API_HISTORY_PATH,
    CHAT_API_PREFIX,
    CHAT_API_SEND_PATH,
    CHAT_API_TAG,
)
from pdf_rag_chat.shared.exceptions import BaseAppException

router = APIRouter(prefix=CHAT_API_PREFIX, tags=[CHAT_API_TAG])


@router.post(
    CHAT_API_SEND_PATH,
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
    summary="문서 기반 답변을 생성합니다.",
)
def send_message(
    request: ChatRequest,
    service: ChatAPIService = Depends(resolve_chat_api_service),
) -> ChatResponse:
    """사용자 메시지에 대한 답변을 반환한다."""

    try:
        return service.chat(request)
    except BaseAppException as error:
        raise to_http_exception(error) from error


@router.get(
    CHAT_API_HISTORY_PATH,
    response_model=HistoryResponse,
    summary="대화 이력을 조회합니다.",
)
def list_history(
    turns: Optional[int] = Query(default=None, ge=1),
    service: ChatAPIService = Depends(resolve_chat_api_service),
) -> HistoryResponse:
    """대화 이력을 순번 오름차순으로 조회한다."""

    try:
        return service.list_history(turns=turns)
    except BaseAppException as error:
        raise to_http_exception(error) from error
