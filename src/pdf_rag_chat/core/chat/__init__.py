"""
목적: Chat 코어 모듈 공개 API를 제공한다.
설명: 코어 도메인 모델을 외부에 노출한다. 오케스트레이터는 services 하위 모듈에서 가져온다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/core/chat/models/entities.py, src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from pdf_rag_chat.core.chat.models import (
    ChatMessage,
    ChatRole,
    DocumentChunk,
    ScoredChunk,
    TurnResult,
    TurnStage,
)

__all__ = [
    "ChatMessage",
    "ChatRole",
    "DocumentChunk",
    "ScoredChunk",
    "TurnResult",
    "TurnStage",
]
