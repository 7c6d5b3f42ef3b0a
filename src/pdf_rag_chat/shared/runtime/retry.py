"""
목적: 외부 모델 호출 정책(재시도 + 시간 제한)을 제공한다.
설명: 호출 1회마다 제한 시간을 적용하고, 실패 시 지수 백오프로 정해진 횟수만큼 재시도한다.
      재시도는 tenacity, 동기 시간 제한은 전용 스레드 풀의 future 대기, 비동기 시간 제한은 asyncio.wait_for로 구현한다.
디자인 패턴: 정책 객체, 데코레이터
참조: src/pdf_rag_chat/integrations/embedding/client.py, src/pdf_rag_chat/integrations/llm/client.py
"""

from __future__ import annotations

import asyncio
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import AsyncRetrying, Retrying, stop_after_attempt, wait_exponential

from pdf_rag_chat.shared.exceptions import ExceptionDetail, ExternalCallTimeout
from pdf_rag_chat.shared.logging import Logger, create_default_logger

T = TypeVar("T")

_DEFAULT_MAX_WORKERS = 8
# HTTP 클라이언트 제한 시간은 정책 제한 시간보다 이만큼 길게 잡는다.
_TRANSPORT_TIMEOUT_MARGIN_SECONDS = 5.0


class ExternalCallPolicy:
    """외부 호출 정책 구현체이다.

    Args:
        max_attempts: 최대 시도 횟수. 1이면 재시도하지 않는다.
        backoff_seconds: 첫 재시도 대기 시간(초).
        backoff_max_seconds: 재시도 대기 시간 상한(초).
        timeout_seconds: 시도 1회의 제한 시간(초). None이면 제한하지 않는다.
        logger: 재시도/시간 초과 로깅에 사용할 로거.
    """

    def __init__(
        self,
        max_attempts: int = 1,
        backoff_seconds: float = 1.0,
        backoff_max_seconds: float = 10.0,
        timeout_seconds: Optional[float] = 60.0,
        logger: Optional[Logger] = None,
        max_workers: int = _DEFAULT_MAX_WORKERS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts는 1 이상이어야 합니다.")
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError("timeout_seconds는 0보다 커야 합니다.")
        self._max_attempts = max_attempts
        self._backoff_seconds = max(0.0, backoff_seconds)
        self._backoff_max_seconds = max(self._backoff_seconds, backoff_max_seconds)
        self._timeout_seconds = timeout_seconds
        self._logger = logger or create_default_logger("ExternalCallPolicy")
        self._max_workers = max(1, max_workers)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def timeout_seconds(self) -> Optional[float]:
        return self._timeout_seconds

    @property
    def transport_timeout_seconds(self) -> Optional[float]:
        """모델 HTTP 클라이언트에 줄 제한 시간. 정책 쪽 시간 초과가 먼저 발생해야 분류가 유지된다."""

        if self._timeout_seconds is None:
            return None
        return self._timeout_seconds + _TRANSPORT_TIMEOUT_MARGIN_SECONDS

    def call(self, operation: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """정책을 적용해 함수를 호출한다.

        마지막 시도의 예외를 그대로 다시 던진다. 시간 초과는 ExternalCallTimeout이다.
        """

        for attempt in Retrying(**self._retry_options(operation)):
            with attempt:
                return self._call_once(operation, fn, *args, **kwargs)
        raise RuntimeError("재시도 루프가 결과 없이 종료되었습니다.")

    async def acall(
        self,
        operation: str,
        fn: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """비동기 함수에 같은 정책을 적용한다. 시도마다 새 코루틴을 만든다."""

        async for attempt in AsyncRetrying(**self._retry_options(operation)):
            with attempt:
                start = time.monotonic()
                try:
                    return await asyncio.wait_for(fn(*args, **kwargs), timeout=self._timeout_seconds)
                except asyncio.TimeoutError as error:
                    raise self._timeout_error(operation, start, error) from error
        raise RuntimeError("재시도 루프가 결과 없이 종료되었습니다.")

    def close(self) -> None:
        """타임아웃용 스레드 풀을 정리한다. 진행 중인 호출은 기다리지 않는다."""

        with self._executor_lock:
            if self._executor is None:
                return
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def _call_once(self, operation: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        if self._timeout_seconds is None:
            return fn(*args, **kwargs)
        start = time.monotonic()
        future = self._get_executor().submit(fn, *args, **kwargs)
        try:
            return future.result(timeout=self._timeout_seconds)
        except FutureTimeoutError as error:
            future.cancel()
            raise self._timeout_error(operation, start, error) from error

    def _retry_options(self, operation: str) -> dict[str, Any]:
        return {
            "reraise": True,
            "stop": stop_after_attempt(self._max_attempts),
            "wait": wait_exponential(
                multiplier=self._backoff_seconds,
                min=self._backoff_seconds,
                max=self._backoff_max_seconds,
            ),
            "before_sleep": lambda state: self._log_retry(operation, state),
        }

    def _timeout_error(self, operation: str, start: float, error: Exception) -> ExternalCallTimeout:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        self._logger.warning(
            f"외부 호출 시간 초과: {operation}",
            metadata={"operation": operation, "timeout_seconds": self._timeout_seconds, "duration_ms": elapsed_ms},
        )
        detail = ExceptionDetail(
            code="EXTERNAL_CALL_TIMEOUT",
            cause=f"{operation} 호출이 {self._timeout_seconds}초 안에 끝나지 않았습니다.",
            metadata={"operation": operation, "timeout_seconds": self._timeout_seconds},
        )
        return ExternalCallTimeout("외부 호출 시간이 초과되었습니다.", detail, error)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="external-call",
                )
            return self._executor

    def _log_retry(self, operation: str, state: Any) -> None:
        outcome = state.outcome
        error = outcome.exception() if outcome is not None else None
        self._logger.warning(
            f"외부 호출 재시도: {operation} ({state.attempt_number}/{self._max_attempts})",
            metadata={
                "operation": operation,
                "attempt": state.attempt_number,
                "error_type": type(error).__name__ if error else None,
            },
        )
