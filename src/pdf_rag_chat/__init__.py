"""
목적: pdf_rag_chat 패키지 루트를 정의한다.
설명: 단일 PDF 문서를 근거로 질문에 답하는 RAG 대화 서버 패키지이다.
디자인 패턴: 패키지 루트
참조: src/pdf_rag_chat/api/main.py
"""

__version__ = "0.1.0"
