"""
목적: 서버 실행 CLI 인자 해석을 검증한다.
설명: 지정된 인자만 설정 덮어쓰기로 변환되고, 실행 시 uvicorn에 설정값이 전달되는지 확인한다.
디자인 패턴: 엔트리 포인트 테스트
참조: src/pdf_rag_chat/__main__.py
"""

from __future__ import annotations

import importlib

from pdf_rag_chat import __main__ as cli


def test_overrides_include_only_given_arguments() -> None:
    args = cli.build_parser().parse_args(["--port", "9090", "--document", "doc.pdf"])

    assert cli.build_overrides(args) == {"server": {"port": 9090}, "document": {"path": "doc.pdf"}}
    assert cli.build_overrides(cli.build_parser().parse_args([])) == {}


def test_main_runs_uvicorn_with_settings(monkeypatch, tmp_path) -> None:
    captured: dict = {}

    def _fake_run(app, host, port, log_level):
        captured.update({"app": app, "host": host, "port": port})

    monkeypatch.setattr(cli.uvicorn, "run", _fake_run)
    monkeypatch.chdir(tmp_path)

    cli.main(["--host", "127.0.0.1", "--port", "9191"])

    assert captured["host"] == "127.0.0.1"
    assert captured["port"] == 9191
    assert captured["app"].state.settings.server.port == 9191


def test_cli_arguments_apply_when_module_is_imported_with_broken_env(monkeypatch, tmp_path) -> None:
    """앱 모듈 임포트는 설정을 읽지 않으므로 잘못된 환경 변수도 CLI 인자로 덮어쓸 수 있다."""

    captured: dict = {}

    def _fake_run(app, host, port, log_level):
        captured["port"] = port

    monkeypatch.setattr(cli.uvicorn, "run", _fake_run)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PDF_CHAT_SERVER__PORT", "not-a-port")
    importlib.reload(importlib.import_module("pdf_rag_chat.api.main"))

    cli.main(["--port", "9292"])

    assert captured["port"] == 9292
