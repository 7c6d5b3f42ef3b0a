"""
목적: 설정 기반 대화 모델 생성기를 제공한다.
설명: Ollama 대화 모델을 만들고 LLMClient로 감싸 호출 정책과 로깅을 적용한다.
디자인 패턴: 팩토리 메서드
참조: src/pdf_rag_chat/integrations/llm/client.py, src/pdf_rag_chat/shared/config/settings.py
"""

from __future__ import annotations

from typing import Optional

from langchain_ollama import ChatOllama

from pdf_rag_chat.integrations.llm.client import LLMClient
from pdf_rag_chat.shared.config import LLMSettings
from pdf_rag_chat.shared.logging import Logger
from pdf_rag_chat.shared.runtime import ExternalCallPolicy


def build_chat_model(
    settings: LLMSettings,
    policy: Optional[ExternalCallPolicy] = None,
    logger: Optional[Logger] = None,
) -> LLMClient:
    """Ollama 대화 모델 클라이언트를 생성한다."""

    client_kwargs: dict = {}
    if policy is not None and policy.transport_timeout_seconds is not None:
        client_kwargs["timeout"] = policy.transport_timeout_seconds
    model = ChatOllama(
        model=settings.model,
        base_url=settings.base_url,
        temperature=settings.temperature,
        client_kwargs=client_kwargs,
    )
    return LLMClient(model=model, name=f"ollama:{settings.model}", logger=logger, policy=policy)
