"""
목적: Chat API 서비스 계층을 제공한다.
설명: 라우터 요청을 검증한 뒤 오케스트레이터를 호출하고, 결과를 API 응답 모델로 변환한다.
디자인 패턴: 서비스 계층 패턴
참조: src/pdf_rag_chat/api/chat/routers/chat.py, src/pdf_rag_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

from typing import Optional

from pdf_rag_chat.api.chat.models import (
    ChatRequest,
    ChatResponse,
    HistoryMessageResponse,
    HistoryResponse,
)
from pdf_rag_chat.api.chat.services.runtime import ChatRuntime
from pdf_rag_chat.shared.exceptions import BaseAppException, ExceptionDetail


class ChatAPIService:
    """Chat API 서비스."""

    def __init__(self, runtime: ChatRuntime) -> None:
        self._runtime = runtime

    def chat(self, request: ChatRequest) -> ChatResponse:
        """메시지 1건을 처리해 답변을 반환한다."""

        if not request.message.strip():
            detail = ExceptionDetail(code="CHAT_MESSAGE_EMPTY", hint="공백이 아닌 메시지를 입력하세요.")
            raise BaseAppException("메시지가 비어 있습니다.", detail)
        result = self._runtime.orchestrator.run_turn(self._runtime.history, request.message)
        return ChatResponse(response=result.answer)

    def list_history(self, turns: Optional[int] = None) -> HistoryResponse:
        """대화 이력을 조회한다. turns를 주면 최근 턴만 반환한다."""

        history = self._runtime.history
        messages = history.snapshot() if turns is None else history.recent_turns(turns)
        return HistoryResponse(
            messages=[
                HistoryMessageResponse(
                    role=message.role,
                    content=message.content,
                    sequence=message.sequence,
                    created_at=message.created_at,
                )
                for message in messages
            ],
            total=len(history),
        )

    def health(self) -> dict:
        """인덱스/이력 크기를 포함한 상태를 반환한다."""

        return {
            "status": "ok",
            "chunks": len(self._runtime.index),
            "history": len(self._runtime.history),
        }

    def close(self) -> None:
        self._runtime.close()
