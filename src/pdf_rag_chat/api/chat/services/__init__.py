"""
목적: Chat API 서비스 공개 API를 제공한다.
설명: 서비스 싱글턴 설치/접근/종료 함수를 외부에 노출한다. 설치는 앱 lifespan에서 수행한다.
디자인 패턴: 싱글턴 패턴
참조: src/pdf_rag_chat/api/chat/services/chat_service.py, src/pdf_rag_chat/api/main.py
"""

from __future__ import annotations

import threading
from typing import Optional

from pdf_rag_chat.api.chat.services.chat_service import ChatAPIService
from pdf_rag_chat.api.chat.services.runtime import ChatRuntime, build_chat_runtime
from pdf_rag_chat.shared.exceptions import BaseAppException, ExceptionDetail

_chat_service: Optional[ChatAPIService] = None
_chat_service_lock = threading.RLock()


def install_chat_api_service(runtime: ChatRuntime) -> ChatAPIService:
    """런타임으로 Chat API 서비스 싱글턴을 설치한다."""

    global _chat_service
    with _chat_service_lock:
        if _chat_service is not None:
            _chat_service.close()
        _chat_service = ChatAPIService(runtime)
        return _chat_service


def get_chat_api_service() -> ChatAPIService:
    """Chat API 서비스 싱글턴을 반환한다."""

    service = _chat_service
    if service is None:
        detail = ExceptionDetail(code="CHAT_RUNTIME_NOT_READY", hint="서버 기동이 끝난 뒤 다시 시도하세요.")
        raise BaseAppException("Chat 런타임이 준비되지 않았습니다.", detail)
    return service


def shutdown_chat_api_service() -> None:
    """Chat API 서비스 싱글턴을 종료한다."""

    global _chat_service
    with _chat_service_lock:
        if _chat_service is None:
            return
        _chat_service.close()
        _chat_service = None


__all__ = [
    "ChatRuntime",
    "ChatAPIService",
    "build_chat_runtime",
    "install_chat_api_service",
    "get_chat_api_service",
    "shutdown_chat_api_service",
]
