"""
목적: LLM 통합 모듈 공개 API를 제공한다.
설명: LLM 클라이언트와 생성 팩토리를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/integrations/llm/client.py
"""

from .client import LLMClient
from .factory import build_chat_model

__all__ = ["LLMClient", "build_chat_model"]
