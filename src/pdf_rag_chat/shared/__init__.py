"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 하위 공통 모듈(예외/로깅/호출 정책)에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/shared/exceptions, src/pdf_rag_chat/shared/logging, src/pdf_rag_chat/shared/runtime
"""

from __future__ import annotations

from pdf_rag_chat.shared.exceptions import BaseAppException, ExceptionDetail
from pdf_rag_chat.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)
from pdf_rag_chat.shared.runtime import ExternalCallPolicy

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "InMemoryLogger",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "create_default_logger",
    "ExternalCallPolicy",
]
