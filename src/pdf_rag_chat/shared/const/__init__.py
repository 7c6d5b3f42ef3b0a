"""
목적: 공통 상수를 정의한다.
설명: 설정 로딩에 쓰이는 인코딩/환경 변수 규칙을 한곳에서 관리한다.
디자인 패턴: 상수 객체 패턴
참조: src/pdf_rag_chat/shared/config/loader.py, src/pdf_rag_chat/shared/config/settings.py
"""

from __future__ import annotations


class SharedConst:
    """공통 상수 모음."""

    DEFAULT_ENCODING = "utf-8"
    ENV_PREFIX = "PDF_CHAT_"
    ENV_NESTED_DELIMITER = "__"
    CONFIG_FILE_ENV_KEY = "PDF_CHAT_CONFIG_FILE"


__all__ = ["SharedConst"]
