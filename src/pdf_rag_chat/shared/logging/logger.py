"""
목적: 로거 인터페이스와 기본 구현체를 제공한다.
설명: 용량 제한이 있는 인메모리 저장소 기반 로거이며, 필요 시 JSON 라인으로 표준 출력에 기록한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/pdf_rag_chat/shared/logging/models.py
"""

from __future__ import annotations

import json
import os
import threading
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime, timezone
from typing import List, Optional

from pdf_rag_chat.shared.logging.models import LogContext, LogLevel, LogRecord

_DEFAULT_MAX_RECORDS = 5000
_emit_stdout_override: Optional[bool] = None


class LogRepository(ABC):
    """로그 저장소 인터페이스."""

    @abstractmethod
    def add(self, record: LogRecord) -> None:
        """로그 레코드를 저장한다."""

    @abstractmethod
    def list(self) -> List[LogRecord]:
        """저장된 로그를 반환한다."""

    def find(
        self,
        min_level: Optional[LogLevel] = None,
        request_id: Optional[str] = None,
        stage: Optional[str] = None,
    ) -> List[LogRecord]:
        """조건에 맞는 레코드만 저장 순서대로 반환한다."""

        threshold = min_level.severity if min_level else 0
        matched: List[LogRecord] = []
        for record in self.list():
            if record.level.severity < threshold:
                continue
            context = record.context or LogContext()
            if request_id is not None and context.request_id != request_id:
                continue
            if stage is not None and context.stage != stage:
                continue
            matched.append(record)
        return matched


class InMemoryLogRepository(LogRepository):
    """최근 레코드만 보관하는 인메모리 로그 저장소."""

    def __init__(self, max_records: int = _DEFAULT_MAX_RECORDS) -> None:
        self._records: deque[LogRecord] = deque(maxlen=max(1, max_records))
        self._lock = threading.Lock()

    def add(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list(self) -> List[LogRecord]:
        with self._lock:
            return list(self._records)


class Logger(ABC):
    """로거 인터페이스."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        """로그를 기록한다."""

    @abstractmethod
    def with_context(self, context: LogContext) -> "Logger":
        """컨텍스트가 합쳐진 새 로거를 반환한다."""

    def debug(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.DEBUG, message, context, metadata)

    def info(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.INFO, message, context, metadata)

    def warning(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.WARNING, message, context, metadata)

    def error(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.ERROR, message, context, metadata)

    def critical(self, message: str, context: Optional[LogContext] = None, metadata: Optional[dict] = None) -> None:
        self.log(LogLevel.CRITICAL, message, context, metadata)


class InMemoryLogger(Logger):
    """인메모리 로거 구현체."""

    def __init__(
        self,
        name: str,
        repository: Optional[LogRepository] = None,
        base_context: Optional[LogContext] = None,
        emit_stdout: Optional[bool] = None,
    ) -> None:
        self._name = name
        self._repository = repository or InMemoryLogRepository()
        self._base_context = base_context
        self._emit_stdout = emit_stdout

    @property
    def name(self) -> str:
        return self._name

    @property
    def repository(self) -> LogRepository:
        """저장소를 반환한다."""

        return self._repository

    def log(
        self,
        level: LogLevel,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        record = LogRecord(
            level=level,
            message=message,
            timestamp=datetime.now(timezone.utc),
            logger_name=self._name,
            context=self._merge_context(context),
            metadata=metadata or {},
        )
        self._repository.add(record)
        if self._should_emit_stdout():
            self._write_stdout(record)

    def with_context(self, context: LogContext) -> "Logger":
        return InMemoryLogger(
            name=self._name,
            repository=self._repository,
            base_context=self._merge_context(context),
            emit_stdout=self._emit_stdout,
        )

    def _should_emit_stdout(self) -> bool:
        if self._emit_stdout is not None:
            return self._emit_stdout
        if _emit_stdout_override is not None:
            return _emit_stdout_override
        return _read_emit_stdout_env()

    def _merge_context(self, context: Optional[LogContext]) -> Optional[LogContext]:
        if self._base_context is None:
            return context
        if context is None:
            return self._base_context
        return LogContext(
            request_id=context.request_id or self._base_context.request_id,
            stage=context.stage or self._base_context.stage,
            tags={**self._base_context.tags, **context.tags},
        )

    def _write_stdout(self, record: LogRecord) -> None:
        payload: dict[str, object] = {
            "timestamp": record.timestamp.astimezone(timezone.utc).isoformat(),
            "level": record.level.value,
            "logger": record.logger_name,
            "message": record.message,
        }
        if record.context is not None:
            payload["context"] = record.context.model_dump(exclude_none=True)
        if record.metadata:
            payload["metadata"] = record.metadata
        print(json.dumps(payload, ensure_ascii=False, default=str), flush=True)


def _read_emit_stdout_env() -> bool:
    raw = os.getenv("LOG_STDOUT")
    if raw is None:
        return False
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def set_default_emit_stdout(enabled: Optional[bool]) -> None:
    """emit_stdout을 지정하지 않은 로거들의 표준 출력 여부를 일괄 설정한다.

    None을 넘기면 다시 `LOG_STDOUT` 환경 변수를 따른다.
    """

    global _emit_stdout_override
    _emit_stdout_override = enabled


def create_default_logger(name: str) -> InMemoryLogger:
    """기본 인메모리 로거를 생성한다."""

    return InMemoryLogger(name=name)
