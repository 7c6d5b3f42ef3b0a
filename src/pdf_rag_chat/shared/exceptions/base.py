"""
목적: 공통 예외 베이스 클래스와 도메인 예외 분류를 제공한다.
설명: 메시지/상세 모델/원본 예외를 보관하는 베이스 예외 위에 문서 적재, 임베딩,
      인덱스, 대화 처리 단계별 예외 타입을 정의한다.
디자인 패턴: 도메인 예외 객체
참조: src/pdf_rag_chat/shared/exceptions/models.py
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pdf_rag_chat.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """애플리케이션 공통 예외 클래스이다.

    Args:
        message: 사용자 또는 시스템에 전달할 메시지.
        detail: 예외 상세 정보 모델. 생략하면 클래스 기본 코드로 생성한다.
        original: 원본 예외 객체.
    """

    default_code: ClassVar[str] = "APP_ERROR"

    def __init__(
        self,
        message: str,
        detail: Optional[ExceptionDetail] = None,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._detail = detail or ExceptionDetail(code=self.default_code)
        self._original = original

    @property
    def message(self) -> str:
        """주입된 메시지를 반환한다."""

        return self._message

    @property
    def detail(self) -> ExceptionDetail:
        """예외 상세 모델을 반환한다."""

        return self._detail

    @property
    def code(self) -> str:
        """에러 코드를 반환한다."""

        return self._detail.code

    @property
    def original(self) -> Optional[Exception]:
        """원본 예외를 반환한다."""

        return self._original

    def to_dict(self) -> dict:
        """예외 정보를 사전으로 변환한다."""

        return {
            "message": self._message,
            "detail": self._detail.model_dump(),
            "original": repr(self._original) if self._original else None,
        }


class LoadError(BaseAppException):
    """문서 적재 실패. 서버 기동 단계에서 치명적이다."""

    default_code = "DOCUMENT_LOAD_ERROR"


class EmbeddingError(BaseAppException):
    """임베딩 모델 호출 또는 응답 검증 실패."""

    default_code = "EMBEDDING_ERROR"


class EmptyIndexError(BaseAppException):
    """비어 있는 벡터 인덱스에 질의했을 때 발생한다."""

    default_code = "VECTOR_INDEX_EMPTY"


class ExternalCallTimeout(BaseAppException):
    """외부 모델 호출이 제한 시간을 넘겼을 때 발생한다."""

    default_code = "EXTERNAL_CALL_TIMEOUT"


class OrchestrationError(BaseAppException):
    """대화 1턴 처리 실패. 요청 범위에서 복구 가능하다."""

    default_code = "ORCHESTRATION_FAILED"
