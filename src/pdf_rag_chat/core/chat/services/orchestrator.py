"""
목적: 대화 1턴 처리 오케스트레이터를 제공한다.
설명: 이력 스냅샷 -> (이력이 있으면) 검색 질의 재작성 -> 임베딩/검색 -> 답변 생성 -> 이력 추가 순서로
      실행한다. 2~4 단계의 어떤 실패도 OrchestrationError로 변환하며, 이때 이력은 변경되지 않는다.
디자인 패턴: 오케스트레이터(파이프라인) 패턴
참조: src/pdf_rag_chat/shared/chat/history.py, src/pdf_rag_chat/core/rag/vector_index.py,
      src/pdf_rag_chat/core/chat/prompts/__init__.py
"""

from __future__ import annotations

import time
from typing import Optional
from uuid import uuid4

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from pdf_rag_chat.core.chat.models import ChatMessage, ScoredChunk, TurnResult, TurnStage
from pdf_rag_chat.core.chat.prompts import ANSWER_PROMPT, REWRITE_PROMPT
from pdf_rag_chat.core.rag import InMemoryVectorIndex
from pdf_rag_chat.shared.chat import ChatHistory, to_langchain_messages
from pdf_rag_chat.shared.exceptions import (
    BaseAppException,
    EmptyIndexError,
    ExceptionDetail,
    ExternalCallTimeout,
    OrchestrationError,
)
from pdf_rag_chat.shared.logging import LogContext, Logger, create_default_logger

CONTEXT_JOINER = "\n\n"
_TIMEOUT_CODE = "EXTERNAL_CALL_TIMEOUT"


class ConversationOrchestrator:
    """RAG 대화 1턴 처리기.

    Args:
        llm: 질의 재작성/답변 생성에 사용할 대화 모델.
        embedder: 질의 임베딩 모델. 인덱스 적재에 쓴 모델과 같아야 한다.
        index: 적재가 끝난 벡터 인덱스.
        top_k: 검색할 청크 수.
        rewrite_window_turns: 질의 재작성에 넘길 최근 턴 수. 답변 생성에는 전체 이력을 넘긴다.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        embedder: Embeddings,
        index: InMemoryVectorIndex,
        top_k: int = 2,
        rewrite_window_turns: int = 2,
        rewrite_prompt: ChatPromptTemplate = REWRITE_PROMPT,
        answer_prompt: ChatPromptTemplate = ANSWER_PROMPT,
        logger: Optional[Logger] = None,
    ) -> None:
        if top_k < 1:
            raise ValueError("top_k는 1 이상이어야 합니다.")
        if rewrite_window_turns < 1:
            raise ValueError("rewrite_window_turns는 1 이상이어야 합니다.")
        self._embedder = embedder
        self._index = index
        self._top_k = top_k
        self._rewrite_window_turns = rewrite_window_turns
        self._rewrite_chain = rewrite_prompt | llm | StrOutputParser()
        self._answer_chain = answer_prompt | llm | StrOutputParser()
        self._logger = logger or create_default_logger("ConversationOrchestrator")

    def run_turn(
        self,
        history: ChatHistory,
        user_message: str,
        request_id: Optional[str] = None,
    ) -> TurnResult:
        """사용자 메시지 1건을 처리해 답변을 반환하고 이력에 추가한다."""

        logger = self._logger.with_context(LogContext(request_id=request_id or str(uuid4())))
        start = time.monotonic()
        stages = [TurnStage.RECEIVED]
        snapshot = history.snapshot()
        logger.info("대화 턴 수신", metadata={"history_size": len(snapshot)})

        stage = TurnStage.QUERY_REWRITTEN
        try:
            rewritten = self._rewrite_query(snapshot, user_message, logger)
            stages.append(stage)

            stage = TurnStage.RETRIEVED
            retrieved = self._retrieve(rewritten, logger)
            stages.append(stage)

            stage = TurnStage.ANSWERED
            answer = self._answer_chain.invoke(
                {
                    "context": CONTEXT_JOINER.join(item.chunk.text for item in retrieved),
                    "chat_history": to_langchain_messages(snapshot),
                    "input": user_message,
                }
            )
            stages.append(stage)
        except Exception as error:  # noqa: BLE001 - 단계 실패를 요청 단위 오류로 변환
            raise self._to_orchestration_error(stage, error, logger) from error

        history.append_turn(user_message, answer)
        stages.append(TurnStage.HISTORY_UPDATED)
        logger.info(
            "대화 턴 완료",
            metadata={
                "retrieved": len(retrieved),
                "history_size": len(history),
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return TurnResult(
            answer=answer,
            rewritten_query=rewritten,
            retrieved_chunks=retrieved,
            stages=stages,
        )

    def _rewrite_query(
        self,
        snapshot: list[ChatMessage],
        user_message: str,
        logger: Logger,
    ) -> str:
        if not snapshot:
            return user_message
        window = snapshot[-self._rewrite_window_turns * 2 :]
        rewritten = self._rewrite_chain.invoke(
            {"chat_history": to_langchain_messages(window), "input": user_message}
        ).strip()
        if not rewritten:
            logger.warning("재작성 질의가 비어 있어 원문 입력을 사용합니다.")
            return user_message
        logger.debug("검색 질의 재작성 완료", metadata={"rewritten_query": rewritten})
        return rewritten

    def _retrieve(self, query: str, logger: Logger) -> list[ScoredChunk]:
        vector = self._embedder.embed_query(query)
        try:
            retrieved = self._index.query(vector, self._top_k)
        except EmptyIndexError:
            logger.warning("인덱스가 비어 있어 빈 문맥으로 답변합니다.")
            return []
        logger.debug(
            "문맥 검색 완료",
            metadata={"chunk_indexes": [item.chunk.index for item in retrieved]},
        )
        return retrieved

    def _to_orchestration_error(
        self,
        stage: TurnStage,
        error: Exception,
        logger: Logger,
    ) -> OrchestrationError:
        timed_out = _is_timeout(error)
        code = "ORCHESTRATION_TIMEOUT" if timed_out else "ORCHESTRATION_FAILED"
        logger.error(
            f"대화 턴 처리 실패: stage={stage.value}, error={error}",
            metadata={"stage": stage.value, "code": code, "error_type": type(error).__name__},
        )
        cause = error.message if isinstance(error, BaseAppException) else str(error)
        detail = ExceptionDetail(
            code=code,
            cause=cause,
            metadata={"stage": stage.value},
        )
        message = "외부 모델 호출 시간이 초과되었습니다." if timed_out else "대화 처리에 실패했습니다."
        return OrchestrationError(message, detail, error)


def _is_timeout(error: Optional[BaseException]) -> bool:
    """예외 체인 안에 외부 호출 시간 초과가 있는지 확인한다."""

    seen: set[int] = set()
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        if isinstance(error, ExternalCallTimeout):
            return True
        if isinstance(error, BaseAppException):
            if error.code == _TIMEOUT_CODE:
                return True
            error = error.original or error.__cause__
            continue
        error = error.__cause__
    return False
