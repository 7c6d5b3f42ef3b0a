"""
목적: 프로세스 단위 대화 이력 세션을 제공한다.
설명: 메시지를 순서대로 보관하며, 사용자/어시스턴트 메시지 한 쌍을 잠금 아래 원자적으로 추가한다.
      스냅샷은 복사본을 반환하므로 호출자가 이력을 변경할 수 없다.
디자인 패턴: 저장소 패턴
참조: src/pdf_rag_chat/core/chat/services/orchestrator.py, src/pdf_rag_chat/core/chat/models/entities.py
"""

from __future__ import annotations

import threading
from typing import Optional

from langchain_core.messages import BaseMessage

from pdf_rag_chat.core.chat.models import ChatMessage, ChatRole
from pdf_rag_chat.shared.logging import Logger, create_default_logger


class ChatHistory:
    """추가 전용 대화 이력 세션."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ChatHistory")
        self._lock = threading.Lock()
        self._messages: list[ChatMessage] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def snapshot(self) -> list[ChatMessage]:
        """현재 이력의 복사본을 반환한다."""

        with self._lock:
            return list(self._messages)

    def recent_turns(self, turns: int) -> list[ChatMessage]:
        """최근 `turns`개 턴(사용자+어시스턴트 메시지 쌍)을 반환한다."""

        if turns <= 0:
            return []
        with self._lock:
            return list(self._messages[-turns * 2 :])

    def append_turn(self, human: str, ai: str) -> tuple[ChatMessage, ChatMessage]:
        """사용자/어시스턴트 메시지 쌍을 함께 추가한다."""

        with self._lock:
            next_sequence = len(self._messages) + 1
            human_message = ChatMessage(role=ChatRole.HUMAN, content=human, sequence=next_sequence)
            ai_message = ChatMessage(role=ChatRole.AI, content=ai, sequence=next_sequence + 1)
            self._messages.extend((human_message, ai_message))
            size = len(self._messages)
        self._logger.debug(f"대화 이력 추가: size={size}")
        return human_message, ai_message


def to_langchain_messages(messages: list[ChatMessage]) -> list[BaseMessage]:
    """엔티티 목록을 프롬프트 주입용 메시지 목록으로 변환한다."""

    return [message.to_langchain() for message in messages]
