"""
목적: 타입이 지정된 애플리케이션 설정을 제공한다.
설명: ConfigLoader가 병합한 사전(기본값 <- JSON 파일 <- PDF_CHAT_ 환경 변수)을 Pydantic 모델로 검증한다.
디자인 패턴: 설정 객체 패턴
참조: src/pdf_rag_chat/shared/config/loader.py, src/pdf_rag_chat/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, model_validator

from pdf_rag_chat.shared.config.loader import ConfigLoader
from pdf_rag_chat.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from pdf_rag_chat.shared.const import SharedConst

_DEFAULT_OLLAMA_URL = "http://172.17.0.1:11434"


class DocumentSettings(BaseModel):
    """적재 대상 문서 설정."""

    path: str = "./pdf-document/renseignements.pdf"


class LLMSettings(BaseModel):
    """대화 모델 설정."""

    model: str = "llama3.2"
    base_url: str = _DEFAULT_OLLAMA_URL
    temperature: Optional[float] = None


class EmbeddingSettings(BaseModel):
    """임베딩 모델 설정."""

    model: str = "llama3.2"
    base_url: str = _DEFAULT_OLLAMA_URL


class ChunkingSettings(BaseModel):
    """청킹 설정. 단위는 문자 수이다."""

    chunk_size: int = Field(default=250, gt=0)
    chunk_overlap: int = Field(default=50, ge=0)

    @model_validator(mode="after")
    def _check_overlap(self) -> "ChunkingSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap은 chunk_size보다 작아야 합니다.")
        return self


class RetrievalSettings(BaseModel):
    """검색 설정."""

    top_k: int = Field(default=2, ge=1)


class HistorySettings(BaseModel):
    """대화 이력 설정."""

    rewrite_window_turns: int = Field(default=2, ge=1)


class CallPolicySettings(BaseModel):
    """외부 모델 호출 정책 설정."""

    timeout_seconds: Optional[float] = Field(default=60.0, gt=0)
    max_attempts: int = Field(default=1, ge=1)
    backoff_seconds: float = Field(default=1.0, ge=0)
    backoff_max_seconds: float = Field(default=10.0, ge=0)


class ServerSettings(BaseModel):
    """HTTP 서버 설정."""

    host: str = "0.0.0.0"
    port: int = Field(default=8989, gt=0, lt=65536)
    static_dir: str = "."
    log_stdout: bool = True


class AppSettings(BaseModel):
    """애플리케이션 전체 설정."""

    document: DocumentSettings = Field(default_factory=DocumentSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    call_policy: CallPolicySettings = Field(default_factory=CallPolicySettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    load_env_files: bool = True,
) -> AppSettings:
    """설정 소스를 병합해 AppSettings를 생성한다.

    Args:
        overrides: 마지막에 덮어쓸 설정 사전(CLI 인자 등).
        environ: 환경 변수 대체 매핑. 테스트에서 주입한다.
        load_env_files: `.env` 파일 로딩 여부.
    """

    if load_env_files and environ is None:
        RuntimeEnvironmentLoader().load()
    source = os.environ if environ is None else environ
    loader = ConfigLoader()
    loader.add_json_file(source.get(SharedConst.CONFIG_FILE_ENV_KEY))
    loader.add_env(
        prefix=SharedConst.ENV_PREFIX,
        delimiter=SharedConst.ENV_NESTED_DELIMITER,
        environ=source,
        exclude=(SharedConst.CONFIG_FILE_ENV_KEY,),
    )
    return AppSettings.model_validate(loader.build(overrides))
