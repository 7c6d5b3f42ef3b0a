"""
목적: 테스트 공통 픽스처/로깅 훅을 단일화해 제공한다.
설명: 결정적 임베딩/대화 모델 대역, PyMuPDF 기반 PDF 생성기, 테스트 설정 픽스처를 함께 제공한다.
디자인 패턴: 테스트 픽스처 + 테스트 훅
참조: pyproject.toml, src/pdf_rag_chat/api/main.py
"""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Any, Callable, Iterator, Sequence

import fitz
import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.language_models.chat_models import SimpleChatModel
from langchain_core.messages import BaseMessage
from pydantic import Field

from pdf_rag_chat.shared.config import AppSettings
from pdf_rag_chat.shared.logging import set_default_emit_stdout

_LOGGER = logging.getLogger("tests")

# 키워드 빈도 기반 임베딩 어휘. 마지막 차원은 영벡터 방지용 상수이다.
_VOCABULARY = ("paris", "capital", "france", "river", "seine", "museum", "louvre", "tax", "form")
_TOKEN_PATTERN = re.compile(r"[a-z]+")


class KeywordEmbeddings(Embeddings):
    """어휘 빈도로 벡터를 만드는 결정적 임베딩 대역."""

    def __init__(self) -> None:
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self._vectorize(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self._vectorize(text)

    def _vectorize(self, text: str) -> list[float]:
        tokens = _TOKEN_PATTERN.findall(text.lower())
        return [float(tokens.count(word)) for word in _VOCABULARY] + [0.1]


class FailingEmbeddings(Embeddings):
    """항상 연결 오류를 던지는 임베딩 대역."""

    def __init__(self, fail_documents: bool = True) -> None:
        self._fail_documents = fail_documents
        self._delegate = KeywordEmbeddings()

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        if self._fail_documents:
            raise ConnectionError("embedding server unreachable")
        return self._delegate.embed_documents(texts)

    def embed_query(self, text: str) -> list[float]:
        raise ConnectionError("embedding server unreachable")


class RecordingChatModel(FakeListChatModel):
    """응답 목록을 순서대로 돌려주고 받은 메시지를 기록하는 대화 모델 대역."""

    recorded: list[list[BaseMessage]] = Field(default_factory=list)

    def _call(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> str:
        self.recorded.append(list(messages))
        return super()._call(messages, stop=stop, run_manager=run_manager, **kwargs)


class FailingChatModel(SimpleChatModel):
    """항상 연결 오류를 던지는 대화 모델 대역."""

    @property
    def _llm_type(self) -> str:
        return "failing-fake"

    def _call(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> str:
        raise ConnectionError("llm server unreachable")


class SlowChatModel(SimpleChatModel):
    """지정 시간만큼 지연 후 응답하는 대화 모델 대역."""

    delay_seconds: float = 1.0

    @property
    def _llm_type(self) -> str:
        return "slow-fake"

    def _call(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> str:
        time.sleep(self.delay_seconds)
        return "late answer"


@pytest.fixture(autouse=True)
def _quiet_stdout_logging() -> Iterator[None]:
    """테스트 중 JSON 로그의 표준 출력을 끈다."""

    set_default_emit_stdout(False)
    yield
    set_default_emit_stdout(None)


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    return KeywordEmbeddings()


@pytest.fixture
def failing_embeddings_factory() -> Callable[..., FailingEmbeddings]:
    return FailingEmbeddings


@pytest.fixture
def chat_model_factory() -> Callable[[Sequence[str]], RecordingChatModel]:
    """응답 목록으로 기록형 대화 모델을 만드는 팩토리를 반환한다."""

    def _build(responses: Sequence[str]) -> RecordingChatModel:
        return RecordingChatModel(responses=list(responses))

    return _build


@pytest.fixture
def failing_chat_model() -> FailingChatModel:
    return FailingChatModel()


@pytest.fixture
def slow_chat_model() -> SlowChatModel:
    return SlowChatModel(delay_seconds=1.0)


@pytest.fixture
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    """페이지 텍스트 목록으로 PDF 파일을 생성하는 팩토리를 반환한다."""

    def _build(pages: Sequence[str], name: str = "document.pdf") -> Path:
        path = tmp_path / name
        document = fitz.open()
        for text in pages:
            page = document.new_page()
            if text:
                page.insert_text((72, 72), text, fontsize=11)
        document.save(str(path))
        document.close()
        return path

    return _build


@pytest.fixture
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    """두 페이지짜리 예시 문서."""

    return pdf_factory(
        [
            "Paris is the capital of France.\nThe river Seine crosses Paris.",
            "The Louvre museum is in Paris.\nThe tax form is due in May.",
        ]
    )


@pytest.fixture
def app_settings_factory(tmp_path: Path) -> Callable[..., AppSettings]:
    """테스트용 AppSettings를 생성하는 팩토리를 반환한다."""

    def _build(document_path: Path, **sections: Any) -> AppSettings:
        payload: dict[str, Any] = {
            "document": {"path": str(document_path)},
            "chunking": {"chunk_size": 60, "chunk_overlap": 10},
            "call_policy": {"timeout_seconds": 5, "max_attempts": 1, "backoff_seconds": 0},
            "server": {"static_dir": str(tmp_path), "log_stdout": False},
        }
        payload.update(sections)
        return AppSettings.model_validate(payload)

    return _build


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
