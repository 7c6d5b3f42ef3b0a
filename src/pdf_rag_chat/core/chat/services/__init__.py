"""
목적: Chat 코어 서비스 공개 API를 제공한다.
설명: 대화 1턴 오케스트레이터를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/core/chat/services/orchestrator.py
"""

from pdf_rag_chat.core.chat.services.orchestrator import CONTEXT_JOINER, ConversationOrchestrator

__all__ = ["CONTEXT_JOINER", "ConversationOrchestrator"]
