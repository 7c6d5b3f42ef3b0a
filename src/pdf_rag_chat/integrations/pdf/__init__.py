"""
목적: PDF 통합 모듈 공개 API를 제공한다.
설명: 페이지 텍스트 로더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/pdf_rag_chat/integrations/pdf/loader.py
"""

from pdf_rag_chat.integrations.pdf.loader import PageText, load_pdf_pages

__all__ = ["PageText", "load_pdf_pages"]
