"""
목적: 코어 모듈 패키지이다.
설명: RAG 적재/검색과 Chat 턴 처리 도메인 로직을 담는다.
디자인 패턴: 패키지 모듈
참조: src/pdf_rag_chat/core/rag, src/pdf_rag_chat/core/chat
"""
