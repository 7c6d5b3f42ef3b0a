"""
목적: 설정 로더 병합 규칙을 검증한다.
설명: dict/JSON 파일/환경 변수의 우선순위, 중첩 키 해석, 값 파싱을 확인한다.
디자인 패턴: 빌더 패턴 단위 테스트
참조: src/pdf_rag_chat/shared/config/loader.py
"""

from __future__ import annotations

import json

import pytest

from pdf_rag_chat.shared.config import ConfigLoader


def test_later_sources_override_earlier_ones(tmp_path) -> None:
    """나중에 추가된 소스가 키 단위로 덮어쓰는지 확인한다."""

    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"llm": {"model": "mistral", "base_url": "http://a"}}), encoding="utf-8")

    merged = (
        ConfigLoader()
        .add_dict({"llm": {"model": "llama3.2", "temperature": 0.1}})
        .add_json_file(str(config_path))
        .add_env(prefix="PDF_CHAT_", environ={"PDF_CHAT_LLM__BASE_URL": "http://b"})
        .build()
    )

    assert merged == {"llm": {"model": "mistral", "base_url": "http://b", "temperature": 0.1}}


def test_env_values_are_parsed() -> None:
    """환경 변수 문자열이 bool/int/float/None으로 해석되는지 확인한다."""

    merged = (
        ConfigLoader()
        .add_env(
            prefix="PDF_CHAT_",
            environ={
                "PDF_CHAT_SERVER__PORT": "9000",
                "PDF_CHAT_SERVER__LOG_STDOUT": "false",
                "PDF_CHAT_LLM__TEMPERATURE": "0.5",
                "PDF_CHAT_CALL_POLICY__TIMEOUT_SECONDS": "none",
                "OTHER_KEY": "ignored",
            },
        )
        .build()
    )

    assert merged["server"] == {"port": 9000, "log_stdout": False}
    assert merged["llm"] == {"temperature": 0.5}
    assert merged["call_policy"] == {"timeout_seconds": None}
    assert "other_key" not in merged


def test_missing_optional_json_file_is_skipped(tmp_path) -> None:
    merged = ConfigLoader().add_json_file(str(tmp_path / "absent.json")).build()

    assert merged == {}


def test_required_json_file_must_exist(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        ConfigLoader().add_json_file(str(tmp_path / "absent.json"), required=True)


def test_json_file_must_be_object(tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigLoader().add_json_file(str(config_path))


def test_excluded_env_keys_are_not_merged() -> None:
    loader = ConfigLoader().add_env(
        environ={
            "PDF_CHAT_CONFIG_FILE": "/etc/pdf-chat.json",
            "PDF_CHAT_RETRIEVAL__TOP_K": "4",
        },
        exclude=("PDF_CHAT_CONFIG_FILE",),
    )

    assert loader.build() == {"retrieval": {"top_k": 4}}
    assert loader.layer_names == ["env:PDF_CHAT_"]


def test_overrides_win_over_every_layer() -> None:
    merged = (
        ConfigLoader()
        .add_dict({"server": {"host": "0.0.0.0", "port": 8989}}, name="defaults")
        .add_env(environ={"PDF_CHAT_SERVER__PORT": "9000"})
        .build({"server": {"port": 7000}})
    )

    assert merged == {"server": {"host": "0.0.0.0", "port": 7000}}
