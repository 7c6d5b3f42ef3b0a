"""
목적: FastAPI 앱을 구성하는 엔트리 포인트 제공
설명: 기동 시 문서를 적재해 Chat 런타임을 설치하고, CORS 헤더/Chat API/헬스체크/정적 파일 제공을 묶는다.
      모듈 전역 app 객체는 두지 않는다. 직접 띄울 때는 `uvicorn --factory pdf_rag_chat.api.main:create_app`을 쓴다.
디자인 패턴: 애플리케이션 팩토리
참조: src/pdf_rag_chat/api/chat/services/runtime.py, src/pdf_rag_chat/__main__.py
"""
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response, status

from pdf_rag_chat.api.chat.routers import router as chat_router
from pdf_rag_chat.api.chat.services import (
    ChatRuntime,
    build_chat_runtime,
    install_chat_api_service,
    shutdown_chat_api_service,
)
from pdf_rag_chat.api.const import CORS_HEADERS
from pdf_rag_chat.api.health.routers.server import router as health_router
from pdf_rag_chat.api.static import PublicStaticFiles
from pdf_rag_chat.shared.config import AppSettings, load_settings
from pdf_rag_chat.shared.logging import create_default_logger, set_default_emit_stdout

RuntimeFactory = Callable[[AppSettings], ChatRuntime]

_logger = create_default_logger("ChatAPI")


def create_app(
    settings: Optional[AppSettings] = None,
    runtime_factory: Optional[RuntimeFactory] = None,
) -> FastAPI:
    """설정으로 FastAPI 앱을 생성한다. 문서 적재는 lifespan 시작 시점에 수행한다."""

    settings = settings or load_settings()
    factory = runtime_factory or build_chat_runtime

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """기동 시 런타임을 설치하고 종료 시 정리한다. 기동 실패는 그대로 전파한다."""
        set_default_emit_stdout(settings.server.log_stdout)
        try:
            runtime = factory(settings)
        except Exception as error:
            _logger.critical(f"Chat 런타임 기동 실패: {error}", metadata={"error_type": type(error).__name__})
            raise
        install_chat_api_service(runtime)
        _logger.info(
            "Chat API 준비 완료",
            metadata={"host": settings.server.host, "port": settings.server.port},
        )
        try:
            yield
        finally:
            shutdown_chat_api_service()

    app = FastAPI(title="PDF RAG Chat", lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        """모든 응답에 CORS 헤더를 붙이고 OPTIONS 요청은 바로 200으로 응답한다."""
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    app.include_router(health_router)
    app.include_router(chat_router)
    # 정적 파일 마운트는 API 경로보다 뒤에 둔다.
    app.mount("/", PublicStaticFiles(directory=settings.server.static_dir, html=True), name="static")
    return app
