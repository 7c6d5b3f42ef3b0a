"""
목적: 질의 재작성과 답변 생성에 쓰는 대화 모델 래퍼를 제공한다.
설명: 원본 BaseChatModel을 감싸 invoke/ainvoke 호출에 시간 제한과 재시도 정책을 적용하고,
    호출마다 시작/성공/실패 로그와 프롬프트 크기, 토큰 사용량을 남긴다.
    시간 초과는 ExternalCallTimeout 그대로, 그 밖의 오류는 BaseAppException으로 올린다.
디자인 패턴: 프록시
참조: src/pdf_rag_chat/shared/runtime/retry.py, src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from __future__ import annotations

import time
from typing import Any, Optional, Sequence

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.outputs import ChatResult
from pydantic import ConfigDict, PrivateAttr

from pdf_rag_chat.shared.exceptions import BaseAppException, ExceptionDetail, ExternalCallTimeout
from pdf_rag_chat.shared.logging import Logger, create_default_logger
from pdf_rag_chat.shared.runtime import ExternalCallPolicy

_ERROR_CODES = {"invoke": "LLM_INVOKE_ERROR", "ainvoke": "LLM_AINVOKE_ERROR"}


def _prompt_chars(messages: Sequence[BaseMessage]) -> int:
    return sum(len(message.content) if isinstance(message.content, str) else 0 for message in messages)


def _usage_of(result: ChatResult) -> Optional[dict]:
    for generation in result.generations:
        usage = getattr(generation.message, "usage_metadata", None)
        if usage:
            return dict(usage)
    llm_output = result.llm_output or {}
    usage = llm_output.get("usage_metadata")
    return usage if isinstance(usage, dict) else None


class LLMClient(BaseChatModel):
    """정책과 로깅을 덧씌운 대화 모델 프록시이다."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _model: BaseChatModel = PrivateAttr()
    _logger: Logger = PrivateAttr()
    _name: str = PrivateAttr()
    _policy: Optional[ExternalCallPolicy] = PrivateAttr(default=None)

    def __init__(
        self,
        model: BaseChatModel,
        name: str = "llm-client",
        logger: Optional[Logger] = None,
        policy: Optional[ExternalCallPolicy] = None,
    ) -> None:
        super().__init__()
        self._model = model
        self._name = name
        self._policy = policy
        self._logger = logger or create_default_logger(name)

    @property
    def wrapped_model(self) -> BaseChatModel:
        return self._model

    @property
    def _llm_type(self) -> str:
        return f"logged-{getattr(self._model, '_llm_type', 'chat-model')}"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = self._started("invoke", messages)
        try:
            if self._policy is None:
                result = self._model._generate(messages, stop=stop, run_manager=run_manager, **kwargs)
            else:
                result = self._policy.call(
                    f"{self._name}.invoke",
                    self._model._generate,
                    messages,
                    stop=stop,
                    run_manager=run_manager,
                    **kwargs,
                )
        except ExternalCallTimeout as error:
            self._failed("invoke", start, error)
            raise
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 변환
            self._failed("invoke", start, error)
            raise self._wrap("invoke", error) from error
        self._succeeded("invoke", start, result)
        return result

    async def _agenerate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        start = self._started("ainvoke", messages)
        try:
            if self._policy is None:
                result = await self._model._agenerate(messages, stop=stop, run_manager=run_manager, **kwargs)
            else:
                result = await self._policy.acall(
                    f"{self._name}.ainvoke",
                    self._model._agenerate,
                    messages,
                    stop=stop,
                    run_manager=run_manager,
                    **kwargs,
                )
        except ExternalCallTimeout as error:
            self._failed("ainvoke", start, error)
            raise
        except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 변환
            self._failed("ainvoke", start, error)
            raise self._wrap("ainvoke", error) from error
        self._succeeded("ainvoke", start, result)
        return result

    def _started(self, action: str, messages: Sequence[BaseMessage]) -> float:
        self._logger.info(
            f"LLM {action} 호출 시작",
            metadata={
                "action": action,
                "model_name": self._name,
                "message_count": len(messages),
                "prompt_chars": _prompt_chars(messages),
            },
        )
        return time.monotonic()

    def _succeeded(self, action: str, start: float, result: ChatResult) -> None:
        metadata = {
            "action": action,
            "model_name": self._name,
            "duration_ms": int((time.monotonic() - start) * 1000),
            "success": True,
        }
        usage = _usage_of(result)
        if usage:
            metadata["usage_metadata"] = usage
        self._logger.info(f"LLM {action} 호출 성공", metadata=metadata)

    def _failed(self, action: str, start: float, error: Exception) -> None:
        self._logger.error(
            f"LLM {action} 호출 실패: {error}",
            metadata={
                "action": action,
                "model_name": self._name,
                "duration_ms": int((time.monotonic() - start) * 1000),
                "error_type": type(error).__name__,
                "success": False,
            },
        )

    def _wrap(self, action: str, error: Exception) -> BaseAppException:
        detail = ExceptionDetail(code=_ERROR_CODES[action], cause=str(error))
        return BaseAppException("LLM 호출에 실패했습니다.", detail, error)
