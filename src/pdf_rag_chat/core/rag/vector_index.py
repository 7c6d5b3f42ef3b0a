"""
목적: 인메모리 벡터 인덱스를 제공한다.
설명: 기동 시 한 번만 적재하고 이후에는 읽기 전용으로 코사인 유사도 top-k 질의를 처리한다.
      동점은 적재 순서로 정렬한다.
디자인 패턴: 저장소 패턴
참조: src/pdf_rag_chat/core/rag/ingest.py, src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from pdf_rag_chat.core.chat.models import DocumentChunk, ScoredChunk
from pdf_rag_chat.shared.exceptions import BaseAppException, EmptyIndexError, ExceptionDetail
from pdf_rag_chat.shared.logging import Logger, create_default_logger


@dataclass(frozen=True)
class IndexEntry:
    """벡터와 원본 청크 쌍."""

    vector: tuple[float, ...]
    chunk: DocumentChunk


class InMemoryVectorIndex:
    """코사인 유사도 기반 인메모리 벡터 인덱스."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("InMemoryVectorIndex")
        self._lock = threading.Lock()
        self._built = False
        self._chunks: tuple[DocumentChunk, ...] = ()
        self._matrix: Optional[np.ndarray] = None
        self._norms: Optional[np.ndarray] = None

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def dimension(self) -> Optional[int]:
        if self._matrix is None:
            return None
        return int(self._matrix.shape[1])

    def build(self, entries: Sequence[IndexEntry]) -> None:
        """엔트리를 적재한다. 두 번째 호출은 VECTOR_INDEX_ALREADY_BUILT 오류이다."""

        with self._lock:
            if self._built:
                detail = ExceptionDetail(code="VECTOR_INDEX_ALREADY_BUILT")
                raise BaseAppException("벡터 인덱스는 한 번만 적재할 수 있습니다.", detail)
            if entries:
                dimensions = {len(entry.vector) for entry in entries}
                if len(dimensions) != 1 or 0 in dimensions:
                    detail = ExceptionDetail(
                        code="VECTOR_DIMENSION_MISMATCH",
                        cause=f"dimensions={sorted(dimensions)}",
                    )
                    raise BaseAppException("벡터 차원이 일관되지 않습니다.", detail)
                matrix = np.asarray([entry.vector for entry in entries], dtype=np.float64)
                matrix.setflags(write=False)
                norms = np.linalg.norm(matrix, axis=1)
                norms.setflags(write=False)
                self._matrix = matrix
                self._norms = norms
            self._chunks = tuple(entry.chunk for entry in entries)
            self._built = True
        self._logger.info(
            "벡터 인덱스 적재 완료",
            metadata={"size": len(self._chunks), "dimension": self.dimension},
        )

    def query(self, vector: Sequence[float], k: int) -> list[ScoredChunk]:
        """질의 벡터와 가장 가까운 k개 청크를 가까운 순서로 반환한다."""

        if not self._built or self._matrix is None:
            detail = ExceptionDetail(code="VECTOR_INDEX_EMPTY", cause=f"built={self._built}")
            raise EmptyIndexError("벡터 인덱스가 비어 있습니다.", detail)
        if k <= 0:
            return []
        query = np.asarray(vector, dtype=np.float64)
        if query.ndim != 1 or query.shape[0] != self._matrix.shape[1]:
            detail = ExceptionDetail(
                code="VECTOR_DIMENSION_MISMATCH",
                cause=f"expected={self._matrix.shape[1]}, actual={query.shape[-1] if query.ndim else 0}",
            )
            raise BaseAppException("질의 벡터 차원이 인덱스와 다릅니다.", detail)

        scores = self._cosine_scores(query)
        order = np.argsort(-scores, kind="stable")[: min(k, len(self._chunks))]
        return [
            ScoredChunk(chunk=self._chunks[position], score=float(scores[position]))
            for position in order
        ]

    def _cosine_scores(self, query: np.ndarray) -> np.ndarray:
        query_norm = float(np.linalg.norm(query))
        scores = np.full(len(self._chunks), -np.inf)
        if query_norm == 0:
            return scores
        valid = self._norms > 0
        scores[valid] = (self._matrix[valid] @ query) / (self._norms[valid] * query_norm)
        return scores
