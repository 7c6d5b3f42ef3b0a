"""
목적: Chat API 런타임 조립 기능을 제공한다.
설명: 설정으로 호출 정책/모델/인덱스/이력/오케스트레이터를 조립한다. 프롬프트 검증과 문서 적재가
      여기서 수행되므로 조립 실패는 곧 서버 기동 실패이다.
디자인 패턴: 모듈 조립 + 팩토리
참조: src/pdf_rag_chat/api/main.py, src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel

from pdf_rag_chat.core.chat.prompts import (
    ANSWER_PROMPT,
    ANSWER_PROMPT_VARIABLES,
    REWRITE_PROMPT,
    REWRITE_PROMPT_VARIABLES,
    validate_prompt,
)
from pdf_rag_chat.core.chat.services import ConversationOrchestrator
from pdf_rag_chat.core.rag import InMemoryVectorIndex, ingest_document
from pdf_rag_chat.integrations.embedding import EmbeddingClient, build_embeddings
from pdf_rag_chat.integrations.llm import LLMClient, build_chat_model
from pdf_rag_chat.shared.chat import ChatHistory
from pdf_rag_chat.shared.config import AppSettings
from pdf_rag_chat.shared.logging import Logger, create_default_logger
from pdf_rag_chat.shared.runtime import ExternalCallPolicy


@dataclass
class ChatRuntime:
    """요청 처리에 필요한 프로세스 단위 구성 요소 묶음."""

    settings: AppSettings
    history: ChatHistory
    index: InMemoryVectorIndex
    orchestrator: ConversationOrchestrator
    policy: ExternalCallPolicy

    def close(self) -> None:
        """호출 정책이 소유한 스레드 풀을 정리한다."""

        self.policy.close()


def build_chat_runtime(
    settings: AppSettings,
    llm: Optional[BaseChatModel] = None,
    embeddings: Optional[Embeddings] = None,
    logger: Optional[Logger] = None,
) -> ChatRuntime:
    """설정으로 ChatRuntime을 조립한다.

    llm/embeddings를 주입하면 Ollama 대신 해당 모델을 호출 정책으로 감싸 사용한다.
    """

    logger = logger or create_default_logger("ChatRuntime")
    validate_prompt(REWRITE_PROMPT, REWRITE_PROMPT_VARIABLES)
    validate_prompt(ANSWER_PROMPT, ANSWER_PROMPT_VARIABLES)

    call_policy = settings.call_policy
    policy = ExternalCallPolicy(
        max_attempts=call_policy.max_attempts,
        backoff_seconds=call_policy.backoff_seconds,
        backoff_max_seconds=call_policy.backoff_max_seconds,
        timeout_seconds=call_policy.timeout_seconds,
    )
    try:
        if llm is None:
            chat_model: BaseChatModel = build_chat_model(settings.llm, policy=policy)
        else:
            chat_model = LLMClient(model=llm, name="injected-llm", policy=policy)
        if embeddings is None:
            embedder: Embeddings = build_embeddings(settings.embedding, policy=policy)
        else:
            embedder = EmbeddingClient(model=embeddings, name="injected-embeddings", policy=policy)

        index = ingest_document(
            settings.document.path,
            embedder,
            chunk_size=settings.chunking.chunk_size,
            chunk_overlap=settings.chunking.chunk_overlap,
        )
    except Exception:
        policy.close()
        raise

    orchestrator = ConversationOrchestrator(
        llm=chat_model,
        embedder=embedder,
        index=index,
        top_k=settings.retrieval.top_k,
        rewrite_window_turns=settings.history.rewrite_window_turns,
    )
    logger.info(
        "Chat 런타임 조립 완료",
        metadata={
            "document": settings.document.path,
            "chunks": len(index),
            "top_k": settings.retrieval.top_k,
        },
    )
    return ChatRuntime(
        settings=settings,
        history=ChatHistory(),
        index=index,
        orchestrator=orchestrator,
        policy=policy,
    )
