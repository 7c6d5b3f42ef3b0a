"""
목적: Chat 도메인 모델 공개 API를 제공한다.
설명: 엔티티와 턴 결과 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/core/chat/models/entities.py, src/pdf_rag_chat/core/chat/models/turn_result.py
"""

from pdf_rag_chat.core.chat.models.entities import (
    ChatMessage,
    ChatRole,
    DocumentChunk,
    ScoredChunk,
    utc_now,
)
from pdf_rag_chat.core.chat.models.turn_result import TurnResult, TurnStage

__all__ = [
    "ChatMessage",
    "ChatRole",
    "DocumentChunk",
    "ScoredChunk",
    "TurnResult",
    "TurnStage",
    "utc_now",
]
