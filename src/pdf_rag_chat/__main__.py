"""
목적: 서버 실행 CLI를 제공한다.
설명: 설정을 로드하고 CLI 인자로 host/port/문서 경로를 덮어쓴 뒤 uvicorn으로 앱을 실행한다.
디자인 패턴: 엔트리 포인트
참조: src/pdf_rag_chat/api/main.py, src/pdf_rag_chat/shared/config/settings.py
"""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

import uvicorn

from pdf_rag_chat.api.main import create_app
from pdf_rag_chat.shared.config import load_settings


def build_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서를 생성한다."""

    parser = argparse.ArgumentParser(
        prog="pdf-rag-chat",
        description="단일 PDF 문서 기반 RAG 대화 API 서버를 실행합니다.",
    )
    parser.add_argument("--host", default=None, help="바인딩 호스트 (기본: 설정값 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="바인딩 포트 (기본: 설정값 8989)")
    parser.add_argument("--document", default=None, help="적재할 PDF 경로")
    return parser


def build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """지정된 CLI 인자만 설정 덮어쓰기 사전으로 변환한다."""

    overrides: dict[str, Any] = {}
    server: dict[str, Any] = {}
    if args.host:
        server["host"] = args.host
    if args.port is not None:
        server["port"] = args.port
    if server:
        overrides["server"] = server
    if args.document:
        overrides["document"] = {"path": args.document}
    return overrides


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI 엔트리 포인트."""

    args = build_parser().parse_args(argv)
    settings = load_settings(build_overrides(args))
    app = create_app(settings)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_level="info")


if __name__ == "__main__":
    main()
