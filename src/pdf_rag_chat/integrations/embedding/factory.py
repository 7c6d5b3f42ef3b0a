"""
목적: 설정 기반 임베딩 모델 생성기를 제공한다.
설명: Ollama 임베딩 모델을 만들고 EmbeddingClient로 감싼다.
디자인 패턴: 팩토리 메서드
참조: src/pdf_rag_chat/integrations/embedding/client.py, tests/conftest.py
"""

from __future__ import annotations

from typing import Optional

from langchain_ollama import OllamaEmbeddings

from pdf_rag_chat.integrations.embedding.client import EmbeddingClient
from pdf_rag_chat.shared.config import EmbeddingSettings
from pdf_rag_chat.shared.logging import Logger
from pdf_rag_chat.shared.runtime import ExternalCallPolicy


def build_embeddings(
    settings: EmbeddingSettings,
    policy: Optional[ExternalCallPolicy] = None,
    logger: Optional[Logger] = None,
) -> EmbeddingClient:
    """Ollama 임베딩 클라이언트를 생성한다."""

    client_kwargs: dict = {}
    if policy is not None and policy.transport_timeout_seconds is not None:
        client_kwargs["timeout"] = policy.transport_timeout_seconds
    model = OllamaEmbeddings(
        model=settings.model,
        base_url=settings.base_url,
        client_kwargs=client_kwargs,
    )
    return EmbeddingClient(model=model, name=f"ollama:{settings.model}", logger=logger, policy=policy)
