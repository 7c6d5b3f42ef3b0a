"""
목적: 타입 설정 로딩을 검증한다.
설명: 기본값, 환경 변수/설정 파일/덮어쓰기 우선순위, 검증 오류를 확인한다.
디자인 패턴: 설정 객체 단위 테스트
참조: src/pdf_rag_chat/shared/config/settings.py
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from pdf_rag_chat.shared.config import AppSettings, load_settings


def test_defaults_match_reference_deployment() -> None:
    """설정이 없으면 기본 배포 값을 사용하는지 확인한다."""

    settings = load_settings(environ={})

    assert settings.server.port == 8989
    assert settings.server.host == "0.0.0.0"
    assert settings.llm.model == "llama3.2"
    assert settings.llm.base_url == "http://172.17.0.1:11434"
    assert settings.chunking.chunk_size == 250
    assert settings.chunking.chunk_overlap == 50
    assert settings.retrieval.top_k == 2
    assert settings.history.rewrite_window_turns == 2
    assert settings.call_policy.max_attempts == 1
    assert settings.document.path == "./pdf-document/renseignements.pdf"


def test_env_file_and_overrides_priority(tmp_path) -> None:
    """파일 <- 환경 변수 <- 덮어쓰기 순서로 적용되는지 확인한다."""

    config_path = tmp_path / "settings.json"
    config_path.write_text(
        json.dumps({"retrieval": {"top_k": 4}, "server": {"port": 7000}}),
        encoding="utf-8",
    )
    environ = {
        "PDF_CHAT_CONFIG_FILE": str(config_path),
        "PDF_CHAT_SERVER__PORT": "7100",
        "PDF_CHAT_EMBEDDING__MODEL": "nomic-embed-text",
    }

    settings = load_settings({"server": {"host": "127.0.0.1"}}, environ=environ)

    assert settings.retrieval.top_k == 4
    assert settings.server.port == 7100
    assert settings.server.host == "127.0.0.1"
    assert settings.embedding.model == "nomic-embed-text"


def test_overlap_must_be_smaller_than_chunk_size() -> None:
    with pytest.raises(ValidationError):
        AppSettings.model_validate({"chunking": {"chunk_size": 50, "chunk_overlap": 50}})


def test_top_k_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        load_settings(environ={"PDF_CHAT_RETRIEVAL__TOP_K": "0"})
