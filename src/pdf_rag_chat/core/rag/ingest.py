"""
목적: 단일 PDF 문서 적재 파이프라인을 제공한다.
설명: 로드 -> 청킹 -> 임베딩 -> 인덱스 적재 순서로 실행하며, 어떤 단계의 실패도 기동 실패로 전파한다.
디자인 패턴: 파이프라인 패턴
참조: src/pdf_rag_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from langchain_core.embeddings import Embeddings

from pdf_rag_chat.core.rag.chunking import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE, split_pages
from pdf_rag_chat.core.rag.vector_index import IndexEntry, InMemoryVectorIndex
from pdf_rag_chat.integrations.pdf import load_pdf_pages
from pdf_rag_chat.shared.exceptions import EmbeddingError, ExceptionDetail
from pdf_rag_chat.shared.logging import LogContext, Logger, create_default_logger


def ingest_document(
    path: str | Path,
    embedder: Embeddings,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    logger: Optional[Logger] = None,
) -> InMemoryVectorIndex:
    """문서를 적재해 조회 가능한 벡터 인덱스를 반환한다."""

    logger = (logger or create_default_logger("DocumentIngestion")).with_context(
        LogContext(stage="ingest")
    )
    start = time.monotonic()

    pages = load_pdf_pages(path, logger=logger)
    chunks = split_pages(pages, chunk_size=chunk_size, chunk_overlap=chunk_overlap)
    logger.info(
        "문서 청킹 완료",
        metadata={"page_count": len(pages), "chunk_count": len(chunks)},
    )
    if not chunks:
        logger.warning("추출된 텍스트가 없어 빈 인덱스로 시작합니다.", metadata={"path": str(path)})

    vectors = embedder.embed_documents([chunk.text for chunk in chunks]) if chunks else []
    if len(vectors) != len(chunks):
        detail = ExceptionDetail(
            code="EMBEDDING_COUNT_MISMATCH",
            cause=f"expected={len(chunks)}, actual={len(vectors)}",
        )
        raise EmbeddingError("임베딩 결과 개수가 청크 수와 다릅니다.", detail)

    index = InMemoryVectorIndex(logger=logger)
    index.build(
        [IndexEntry(vector=tuple(vector), chunk=chunk) for vector, chunk in zip(vectors, chunks)]
    )
    logger.info(
        "문서 적재 완료",
        metadata={
            "path": str(path),
            "chunk_count": len(chunks),
            "duration_ms": int((time.monotonic() - start) * 1000),
        },
    )
    return index
