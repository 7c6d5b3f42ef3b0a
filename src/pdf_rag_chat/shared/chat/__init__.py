"""
목적: Chat 공통 모듈의 공개 API를 제공한다.
설명: 대화 이력 세션과 메시지 변환 헬퍼를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/shared/chat/history.py
"""

from pdf_rag_chat.shared.chat.history import ChatHistory, to_langchain_messages

__all__ = ["ChatHistory", "to_langchain_messages"]
