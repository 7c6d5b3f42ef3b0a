"""
목적: API 상수 공개 API를 제공한다.
설명: Chat/헬스 라우팅 상수와 CORS 헤더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/api/const/chat.py
"""

from pdf_rag_chat.api.const.chat import (
    CHAT_API_HISTORY_PATH,
    CHAT_API_PREFIX,
    CHAT_API_SEND_PATH,
    CHAT_API_TAG,
    CORS_HEADERS,
    HEALTH_PATH,
    MAX_MESSAGE_CHARS,
)

__all__ = [
    "CHAT_API_PREFIX",
    "CHAT_API_TAG",
    "CHAT_API_SEND_PATH",
    "CHAT_API_HISTORY_PATH",
    "CORS_HEADERS",
    "HEALTH_PATH",
    "MAX_MESSAGE_CHARS",
]
