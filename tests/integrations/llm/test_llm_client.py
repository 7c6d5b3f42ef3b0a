"""
목적: LLM 클라이언트 로깅/예외 처리 동작을 검증한다.
설명: 위임 호출 결과, 시작/성공/실패 로그 기록, 원본 오류 변환, 시간 초과 전파를 확인한다.
디자인 패턴: 프록시 패턴 테스트
참조: src/pdf_rag_chat/integrations/llm/client.py
"""

from __future__ import annotations

import asyncio

import pytest
from langchain_core.messages import HumanMessage

from pdf_rag_chat.integrations.llm import LLMClient, build_chat_model
from pdf_rag_chat.shared.config import LLMSettings
from pdf_rag_chat.shared.exceptions import BaseAppException, ExternalCallTimeout
from pdf_rag_chat.shared.logging import InMemoryLogger
from pdf_rag_chat.shared.runtime import ExternalCallPolicy


def test_llm_client_delegates_and_logs(chat_model_factory) -> None:
    logger = InMemoryLogger(name="llm-test")
    model = chat_model_factory(["bonjour"])
    client = LLMClient(model=model, name="fake-model", logger=logger)

    result = client.invoke("hello")

    assert result.content == "bonjour"
    assert len(model.recorded) == 1
    records = logger.repository.list()
    assert [record.message for record in records] == ["LLM invoke 호출 시작", "LLM invoke 호출 성공"]
    assert records[-1].metadata["success"] is True
    assert records[-1].metadata["model_name"] == "fake-model"


def test_llm_client_wraps_model_errors(failing_chat_model) -> None:
    logger = InMemoryLogger(name="llm-test")
    client = LLMClient(model=failing_chat_model, logger=logger)

    with pytest.raises(BaseAppException) as captured:
        client.invoke("hello")

    assert captured.value.code == "LLM_INVOKE_ERROR"
    assert isinstance(captured.value.original, ConnectionError)
    assert logger.repository.list()[-1].metadata["success"] is False


def test_llm_client_propagates_timeout(slow_chat_model) -> None:
    policy = ExternalCallPolicy(timeout_seconds=0.05)
    client = LLMClient(model=slow_chat_model, policy=policy)
    try:
        with pytest.raises(ExternalCallTimeout):
            client.invoke("hello")
    finally:
        policy.close()


def test_llm_client_start_log_counts_prompt_chars(chat_model_factory) -> None:
    logger = InMemoryLogger(name="llm-test")
    client = LLMClient(model=chat_model_factory(["ok"]), logger=logger)

    client.invoke([HumanMessage(content="abc"), HumanMessage(content="de")])

    start_record = logger.repository.list()[0]
    assert start_record.metadata["message_count"] == 2
    assert start_record.metadata["prompt_chars"] == 5


def test_llm_client_async_timeout_keeps_classification(slow_chat_model) -> None:
    logger = InMemoryLogger(name="llm-test")
    policy = ExternalCallPolicy(timeout_seconds=0.05)
    client = LLMClient(model=slow_chat_model, logger=logger, policy=policy)

    with pytest.raises(ExternalCallTimeout):
        asyncio.run(client.ainvoke("hello"))

    assert logger.repository.list()[-1].metadata["action"] == "ainvoke"
    assert logger.repository.list()[-1].metadata["success"] is False


def test_ollama_transport_timeout_outlasts_policy_timeout() -> None:
    """HTTP 클라이언트 제한 시간이 정책보다 길어야 시간 초과가 504로 분류된다."""

    policy = ExternalCallPolicy(timeout_seconds=2.0)
    client = build_chat_model(LLMSettings(model="llama3.2"), policy=policy)

    transport_timeout = client.wrapped_model.client_kwargs["timeout"]
    assert transport_timeout == policy.transport_timeout_seconds
    assert transport_timeout > policy.timeout_seconds
