"""
목적: 런타임 유틸 공개 API를 제공한다.
설명: 외부 호출 정책을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/shared/runtime/retry.py
"""

from pdf_rag_chat.shared.runtime.retry import ExternalCallPolicy

__all__ = ["ExternalCallPolicy"]
