"""
목적: Chat 턴 처리 결과 모델을 정의한다.
설명: 사용자 입력 1턴 처리의 산출물(답변/재작성 질의/검색 청크/단계 기록)을 묶어 제공한다.
디자인 패턴: DTO 패턴
참조: src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from pdf_rag_chat.core.chat.models.entities import ScoredChunk


class TurnStage(str, Enum):
    """대화 1턴 처리 단계."""

    RECEIVED = "received"
    QUERY_REWRITTEN = "query_rewritten"
    RETRIEVED = "retrieved"
    ANSWERED = "answered"
    HISTORY_UPDATED = "history_updated"


class TurnResult(BaseModel):
    """사용자 1턴 처리 결과 모델."""

    answer: str
    rewritten_query: str
    retrieved_chunks: list[ScoredChunk] = Field(default_factory=list)
    stages: list[TurnStage] = Field(default_factory=list)
