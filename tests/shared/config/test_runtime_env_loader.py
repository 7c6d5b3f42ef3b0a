"""
목적: 런타임 환경별 `.env` 로딩을 검증한다.
설명: 기본 local 판별, 별칭 정규화, 환경별 파일 추가 로딩, 지원하지 않는 값 거부를 확인한다.
디자인 패턴: 전략 패턴 단위 테스트
참조: src/pdf_rag_chat/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os

import pytest

from pdf_rag_chat.shared.config import RuntimeEnvironmentLoader


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("ENV", "APP_ENV", "env", "app_env", "PDF_CHAT_SERVER__PORT"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_to_local_and_loads_root_env(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("PDF_CHAT_SERVER__PORT=9001\n", encoding="utf-8")

    runtime_env = RuntimeEnvironmentLoader(project_root=tmp_path).load()

    assert runtime_env == "local"
    assert os.environ["ENV"] == "local"
    assert os.environ["PDF_CHAT_SERVER__PORT"] == "9001"


def test_alias_loads_environment_specific_file(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    (tmp_path / ".env.prod").write_text("PDF_CHAT_SERVER__PORT=9002\n", encoding="utf-8")

    runtime_env = RuntimeEnvironmentLoader(project_root=tmp_path).load()

    assert runtime_env == "prod"
    assert os.environ["PDF_CHAT_SERVER__PORT"] == "9002"


def test_unsupported_env_is_rejected(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("ENV", "staging-eu")

    with pytest.raises(ValueError):
        RuntimeEnvironmentLoader(project_root=tmp_path).load()
