"""
목적: Chat 메시지 API 모델을 정의한다.
설명: 메시지 전송 요청/응답과 이력 조회 응답 모델을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/pdf_rag_chat/api/chat/routers/chat.py
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from pdf_rag_chat.api.const import MAX_MESSAGE_CHARS
from pdf_rag_chat.core.chat.models import ChatRole


class ChatRequest(BaseModel):
    """메시지 전송 요청 모델."""

    message: str = Field(
        ...,
        min_length=1,
        max_length=MAX_MESSAGE_CHARS,
        description="사용자 메시지 본문",
    )


class ChatResponse(BaseModel):
    """메시지 전송 응답 모델."""

    response: str


class HistoryMessageResponse(BaseModel):
    """이력 메시지 응답 모델."""

    role: ChatRole
    content: str
    sequence: int
    created_at: datetime


class HistoryResponse(BaseModel):
    """이력 조회 응답 모델."""

    messages: list[HistoryMessageResponse]
    total: int
