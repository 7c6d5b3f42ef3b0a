"""
목적: 문서 적재 파이프라인을 검증한다.
설명: PDF 로드부터 인덱스 적재까지의 정상 흐름과 단계별 실패 전파를 확인한다.
디자인 패턴: 파이프라인 단위 테스트
참조: src/pdf_rag_chat/core/rag/ingest.py
"""

from __future__ import annotations

import pytest

from pdf_rag_chat.core.rag import ingest_document
from pdf_rag_chat.integrations.embedding import EmbeddingClient
from pdf_rag_chat.shared.exceptions import EmbeddingError, EmptyIndexError, LoadError


def test_ingest_builds_index_from_pdf(sample_pdf, keyword_embeddings) -> None:
    index = ingest_document(sample_pdf, keyword_embeddings, chunk_size=60, chunk_overlap=10)

    assert len(keyword_embeddings.document_calls) == 1
    assert len(index) == len(keyword_embeddings.document_calls[0])
    assert len(index) >= 2
    top = index.query(keyword_embeddings.embed_query("louvre museum"), k=1)
    assert "Louvre" in top[0].chunk.text
    assert top[0].chunk.page_num == 2


def test_ingest_missing_document_fails(tmp_path, keyword_embeddings) -> None:
    with pytest.raises(LoadError) as captured:
        ingest_document(tmp_path / "missing.pdf", keyword_embeddings)

    assert captured.value.code == "DOCUMENT_NOT_FOUND"
    assert keyword_embeddings.document_calls == []


def test_ingest_embedding_failure_is_fatal(sample_pdf, failing_embeddings_factory) -> None:
    embedder = EmbeddingClient(model=failing_embeddings_factory())

    with pytest.raises(EmbeddingError):
        ingest_document(sample_pdf, embedder, chunk_size=60, chunk_overlap=10)


def test_ingest_blank_document_yields_empty_index(pdf_factory, keyword_embeddings) -> None:
    """텍스트가 없는 문서는 빈 인덱스로 적재되고 질의 시 EmptyIndexError가 난다."""

    path = pdf_factory([""], name="blank.pdf")

    index = ingest_document(path, keyword_embeddings)

    assert len(index) == 0
    assert keyword_embeddings.document_calls == []
    with pytest.raises(EmptyIndexError):
        index.query([0.0] * 10, k=2)
