"""
목적: 설정 로더 공개 API를 제공한다.
설명: 설정 병합 로더, 런타임 환경 로더, 타입 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/shared/config/loader.py, src/pdf_rag_chat/shared/config/settings.py
"""

from pdf_rag_chat.shared.config.loader import ConfigLoader
from pdf_rag_chat.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from pdf_rag_chat.shared.config.settings import (
    AppSettings,
    CallPolicySettings,
    ChunkingSettings,
    DocumentSettings,
    EmbeddingSettings,
    HistorySettings,
    LLMSettings,
    RetrievalSettings,
    ServerSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "RuntimeEnvironmentLoader",
    "AppSettings",
    "DocumentSettings",
    "LLMSettings",
    "EmbeddingSettings",
    "ChunkingSettings",
    "RetrievalSettings",
    "HistorySettings",
    "CallPolicySettings",
    "ServerSettings",
    "load_settings",
]
