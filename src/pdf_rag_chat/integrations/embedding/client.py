"""
목적: LangChain Embeddings 기반 임베딩 클라이언트를 제공한다.
설명: 원본 임베딩 모델 호출에 호출 정책(시간 제한/재시도)과 로깅을 적용하고,
      응답 벡터 개수/차원을 검증해 문제가 있으면 EmbeddingError로 변환한다.
디자인 패턴: 프록시
참조: src/pdf_rag_chat/integrations/llm/client.py, src/pdf_rag_chat/shared/runtime/retry.py
"""

from __future__ import annotations

import time
from typing import Optional

from langchain_core.embeddings import Embeddings

from pdf_rag_chat.shared.exceptions import BaseAppException, EmbeddingError, ExceptionDetail
from pdf_rag_chat.shared.logging import Logger, create_default_logger
from pdf_rag_chat.shared.runtime import ExternalCallPolicy


class EmbeddingClient(Embeddings):
    """검증/로깅을 포함한 임베딩 클라이언트 래퍼이다."""

    def __init__(
        self,
        model: Embeddings,
        name: str = "embedding-client",
        logger: Optional[Logger] = None,
        policy: Optional[ExternalCallPolicy] = None,
    ) -> None:
        self._model = model
        self._name = name
        self._policy = policy
        self._logger = logger or create_default_logger(name)
        self._dimension: Optional[int] = None

    @property
    def wrapped_model(self) -> Embeddings:
        return self._model

    @property
    def dimension(self) -> Optional[int]:
        """처음 관측된 벡터 차원을 반환한다. 호출 전에는 None이다."""

        return self._dimension

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """문서 텍스트 목록을 입력 순서대로 임베딩한다."""

        if not texts:
            return []
        vectors = self._invoke("embed_documents", self._model.embed_documents, list(texts))
        if not isinstance(vectors, list) or len(vectors) != len(texts):
            count = len(vectors) if isinstance(vectors, list) else None
            detail = ExceptionDetail(
                code="EMBEDDING_COUNT_MISMATCH",
                cause=f"expected={len(texts)}, actual={count}",
            )
            raise EmbeddingError("임베딩 결과 개수가 입력과 다릅니다.", detail)
        return [self._validate_vector(vector) for vector in vectors]

    def embed_query(self, text: str) -> list[float]:
        """질의 텍스트 하나를 임베딩한다."""

        vector = self._invoke("embed_query", self._model.embed_query, text)
        return self._validate_vector(vector)

    def _invoke(self, action: str, fn, payload):
        start = time.monotonic()
        size = len(payload) if isinstance(payload, list) else 1
        self._logger.debug(
            f"임베딩 {action} 호출 시작",
            metadata={"action": action, "model_name": self._name, "input_count": size},
        )
        try:
            if self._policy is None:
                result = fn(payload)
            else:
                result = self._policy.call(f"{self._name}.{action}", fn, payload)
        except BaseAppException as error:
            self._log_error(action, error, start)
            if isinstance(error, EmbeddingError):
                raise
            detail = ExceptionDetail(code=error.code, cause=error.message, metadata=error.detail.metadata)
            raise EmbeddingError("임베딩 호출에 실패했습니다.", detail, error) from error
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
            self._log_error(action, error, start)
            detail = ExceptionDetail(code="EMBEDDING_INVOKE_ERROR", cause=str(error))
            raise EmbeddingError("임베딩 호출에 실패했습니다.", detail, error) from error
        self._logger.debug(
            f"임베딩 {action} 호출 성공",
            metadata={
                "action": action,
                "model_name": self._name,
                "input_count": size,
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return result

    def _validate_vector(self, vector) -> list[float]:
        try:
            values = [float(value) for value in vector]
        except (TypeError, ValueError) as error:
            detail = ExceptionDetail(code="EMBEDDING_VECTOR_INVALID", cause=str(error))
            raise EmbeddingError("임베딩 벡터 형식이 올바르지 않습니다.", detail, error) from error
        if not values:
            detail = ExceptionDetail(code="EMBEDDING_VECTOR_EMPTY")
            raise EmbeddingError("빈 임베딩 벡터가 반환되었습니다.", detail)
        if self._dimension is None:
            self._dimension = len(values)
        elif len(values) != self._dimension:
            detail = ExceptionDetail(
                code="EMBEDDING_DIMENSION_MISMATCH",
                cause=f"expected={self._dimension}, actual={len(values)}",
            )
            raise EmbeddingError("임베딩 벡터 차원이 일관되지 않습니다.", detail)
        return values

    def _log_error(self, action: str, error: Exception, start: float) -> None:
        self._logger.error(
            f"임베딩 {action} 호출 실패: {error}",
            metadata={
                "action": action,
                "model_name": self._name,
                "duration_ms": int((time.monotonic() - start) * 1000),
                "error_type": type(error).__name__,
            },
        )
