"""
목적: 로깅에 필요한 공통 모델을 정의한다.
설명: 로그 레벨, 컨텍스트, 레코드 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/pdf_rag_chat/shared/logging/logger.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """로그 레벨 열거형."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARNING: 30,
    LogLevel.ERROR: 40,
    LogLevel.CRITICAL: 50,
}


class LogContext(BaseModel):
    """로그 컨텍스트 모델이다.

    Args:
        request_id: HTTP 요청 식별자.
        stage: 대화 처리 단계 이름.
        tags: 자유형 태그.
    """

    request_id: Optional[str] = None
    stage: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogRecord(BaseModel):
    """로그 레코드 모델이다."""

    level: LogLevel
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    logger_name: str
    context: Optional[LogContext] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
