"""
목적: Chat/RAG 도메인 엔티티 모델을 정의한다.
설명: 메시지/역할 타입, 문서 청크, 검색 결과를 Pydantic 기반으로 제공한다.
디자인 패턴: 엔티티 패턴
참조: src/pdf_rag_chat/shared/chat/history.py, src/pdf_rag_chat/core/rag/vector_index.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """UTC 기준 timezone-aware 현재 시각을 반환한다."""

    return datetime.now(timezone.utc)


class ChatRole(str, Enum):
    """대화 메시지 역할 타입."""

    HUMAN = "human"
    AI = "ai"


class ChatMessage(BaseModel):
    """대화 메시지 엔티티."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str
    sequence: int = Field(ge=1)
    created_at: datetime = Field(default_factory=utc_now)

    def to_langchain(self) -> BaseMessage:
        """프롬프트 주입용 LangChain 메시지로 변환한다."""

        if self.role == ChatRole.HUMAN:
            return HumanMessage(content=self.content)
        return AIMessage(content=self.content)


class DocumentChunk(BaseModel):
    """문서 청크 엔티티.

    source_offset은 청크가 속한 페이지 텍스트 안에서의 문자 오프셋이다.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    source_offset: int = Field(ge=0)
    page_num: int = Field(ge=1)
    index: int = Field(ge=0)


class ScoredChunk(BaseModel):
    """유사도 점수가 붙은 검색 결과."""

    model_config = ConfigDict(frozen=True)

    chunk: DocumentChunk
    score: float
