"""
목적: RAG 코어 모듈 공개 API를 제공한다.
설명: 청킹, 벡터 인덱스, 문서 적재 파이프라인을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/core/rag/chunking.py, src/pdf_rag_chat/core/rag/vector_index.py, src/pdf_rag_chat/core/rag/ingest.py
"""

from pdf_rag_chat.core.rag.chunking import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SEPARATORS,
    split_pages,
    split_text,
)
from pdf_rag_chat.core.rag.ingest import ingest_document
from pdf_rag_chat.core.rag.vector_index import IndexEntry, InMemoryVectorIndex

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_CHUNK_OVERLAP",
    "DEFAULT_SEPARATORS",
    "split_pages",
    "split_text",
    "IndexEntry",
    "InMemoryVectorIndex",
    "ingest_document",
]
