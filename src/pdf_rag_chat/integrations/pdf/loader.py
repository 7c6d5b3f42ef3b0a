"""
목적: PDF 문서에서 페이지별 텍스트를 추출한다.
설명: PyMuPDF로 문서를 열어 페이지 순서대로 텍스트를 반환한다. 파일 누락/열기 실패/형식 오류는
      모두 LoadError로 변환하며, 서버 기동 단계에서 치명적 오류로 취급한다.
디자인 패턴: 어댑터 패턴
참조: src/pdf_rag_chat/core/rag/ingest.py
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import fitz

from pdf_rag_chat.shared.exceptions import ExceptionDetail, LoadError
from pdf_rag_chat.shared.logging import Logger, create_default_logger

_PDF_MAGIC = b"%PDF-"
_MAGIC_SCAN_BYTES = 1024


@dataclass(frozen=True)
class PageText:
    """페이지 텍스트. page_num은 1부터 시작한다."""

    page_num: int
    text: str


def load_pdf_pages(path: str | Path, logger: Optional[Logger] = None) -> list[PageText]:
    """PDF 파일의 페이지 텍스트 목록을 반환한다."""

    logger = logger or create_default_logger("PdfLoader")
    source = Path(path)
    if not source.is_file():
        detail = ExceptionDetail(
            code="DOCUMENT_NOT_FOUND",
            cause=f"path={source}",
            hint="document.path 설정 또는 --document 인자를 확인하세요.",
        )
        raise LoadError("문서 파일을 찾을 수 없습니다.", detail)

    _ensure_pdf_signature(source)

    try:
        with fitz.open(str(source), filetype="pdf") as document:
            if not document.is_pdf:
                detail = ExceptionDetail(code="DOCUMENT_FORMAT_INVALID", cause=f"path={source}")
                raise LoadError("PDF 형식의 문서가 아닙니다.", detail)
            if document.needs_pass:
                detail = ExceptionDetail(
                    code="DOCUMENT_OPEN_FAILED",
                    cause=f"path={source}",
                    hint="암호가 걸린 PDF는 지원하지 않습니다.",
                )
                raise LoadError("PDF 문서를 열 수 없습니다.", detail)
            if document.page_count == 0:
                detail = ExceptionDetail(
                    code="DOCUMENT_OPEN_FAILED",
                    cause=f"path={source}",
                    hint="페이지가 없는 PDF입니다.",
                )
                raise LoadError("PDF 문서를 열 수 없습니다.", detail)
            pages = [
                PageText(page_num=page.number + 1, text=page.get_text("text"))
                for page in document
            ]
    except LoadError:
        raise
    except Exception as error:  # noqa: BLE001 - 외부 라이브러리 오류 캡처
        detail = ExceptionDetail(code="DOCUMENT_OPEN_FAILED", cause=f"path={source}: {error}")
        raise LoadError("PDF 문서를 열 수 없습니다.", detail, error) from error

    logger.info(
        f"PDF 로드 완료: {source.name}",
        metadata={"path": str(source), "page_count": len(pages)},
    )
    return pages


def _ensure_pdf_signature(source: Path) -> None:
    try:
        with source.open("rb") as handle:
            head = handle.read(_MAGIC_SCAN_BYTES)
    except OSError as error:
        detail = ExceptionDetail(code="DOCUMENT_OPEN_FAILED", cause=f"path={source}: {error}")
        raise LoadError("문서 파일을 읽을 수 없습니다.", detail, error) from error
    if _PDF_MAGIC not in head:
        detail = ExceptionDetail(
            code="DOCUMENT_FORMAT_INVALID",
            cause=f"path={source}",
            hint="PDF 시그니처(%PDF-)가 없습니다.",
        )
        raise LoadError("PDF 형식의 문서가 아닙니다.", detail)
