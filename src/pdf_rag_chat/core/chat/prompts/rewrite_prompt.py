"""
목적: 대화 이력 기반 검색 질의 재작성 프롬프트를 정의한다.
설명: 이력 + 현재 입력을 보고 독립적으로 검색 가능한 질의를 생성하도록 지시한다.
디자인 패턴: 모듈 싱글턴
참조: src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from __future__ import annotations

import textwrap

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

_REWRITE_INSTRUCTION = textwrap.dedent(
    """
    Given the above conversation, generate a search query to look up to get information relevant to the conversation.
    """
).strip()

REWRITE_PROMPT = ChatPromptTemplate.from_messages(
    [
        MessagesPlaceholder(variable_name="chat_history"),
        ("user", "{input}"),
        ("user", _REWRITE_INSTRUCTION),
    ]
)
