"""
목적: Chat API 모델 공개 API를 제공한다.
설명: 메시지 요청/응답과 이력 응답 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/api/chat/models/message.py
"""

from pdf_rag_chat.api.chat.models.message import (
    ChatRequest,
    ChatResponse,
    HistoryMessageResponse,
    HistoryResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "HistoryMessageResponse",
    "HistoryResponse",
]
