"""
목적: 검색 문맥 기반 답변 생성 프롬프트를 정의한다.
설명: 검색된 청크를 system 메시지 문맥으로 넣고, 이력과 사용자 입력을 이어 붙인다.
디자인 패턴: 모듈 싱글턴
참조: src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from __future__ import annotations

import textwrap

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

_ANSWER_SYSTEM_PROMPT = textwrap.dedent(
    """
    Answer the user's question based on the following context: {context}.
    """
).strip()

ANSWER_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", _ANSWER_SYSTEM_PROMPT),
        MessagesPlaceholder(variable_name="chat_history"),
        ("user", "{input}"),
    ]
)
