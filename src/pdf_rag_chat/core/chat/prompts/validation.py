"""
목적: 프롬프트 템플릿 자리표시자 검증을 제공한다.
설명: 기동 시 필수 자리표시자가 모두 선언됐는지 확인하고, 누락 시 기동을 중단시킨다.
디자인 패턴: 유틸리티 모듈
참조: src/pdf_rag_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

from typing import Iterable

from langchain_core.prompts import BasePromptTemplate

from pdf_rag_chat.shared.exceptions import BaseAppException, ExceptionDetail


def validate_prompt(prompt: BasePromptTemplate, required: Iterable[str]) -> None:
    """필수 자리표시자 누락 시 PROMPT_PLACEHOLDER_MISSING 오류를 던진다."""

    declared = set(prompt.input_variables) | set(getattr(prompt, "optional_variables", []) or [])
    missing = sorted(set(required) - declared)
    if missing:
        detail = ExceptionDetail(
            code="PROMPT_PLACEHOLDER_MISSING",
            cause=f"missing={missing}",
            metadata={"missing": missing, "declared": sorted(declared)},
        )
        raise BaseAppException("프롬프트 필수 자리표시자가 없습니다.", detail)
