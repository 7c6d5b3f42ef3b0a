"""
목적: Chat 프롬프트 공개 API를 제공한다.
설명: 질의 재작성/답변 프롬프트와 필수 자리표시자 목록, 검증 함수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/core/chat/prompts/rewrite_prompt.py, src/pdf_rag_chat/core/chat/prompts/answer_prompt.py
"""

from pdf_rag_chat.core.chat.prompts.answer_prompt import ANSWER_PROMPT
from pdf_rag_chat.core.chat.prompts.rewrite_prompt import REWRITE_PROMPT
from pdf_rag_chat.core.chat.prompts.validation import validate_prompt

REWRITE_PROMPT_VARIABLES = ("chat_history", "input")
ANSWER_PROMPT_VARIABLES = ("context", "chat_history", "input")

__all__ = [
    "ANSWER_PROMPT",
    "REWRITE_PROMPT",
    "ANSWER_PROMPT_VARIABLES",
    "REWRITE_PROMPT_VARIABLES",
    "validate_prompt",
]
