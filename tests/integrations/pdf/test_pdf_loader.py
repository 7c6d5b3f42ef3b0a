"""
목적: PDF 로더 동작을 검증한다.
설명: 정상 PDF의 페이지 순서 추출과 누락/형식 오류/손상 파일의 오류 코드를 확인한다.
디자인 패턴: 어댑터 단위 테스트
참조: src/pdf_rag_chat/integrations/pdf/loader.py
"""

from __future__ import annotations

import pytest

from pdf_rag_chat.integrations.pdf import load_pdf_pages
from pdf_rag_chat.shared.exceptions import LoadError


def test_load_pdf_pages_in_order(sample_pdf) -> None:
    pages = load_pdf_pages(sample_pdf)

    assert [page.page_num for page in pages] == [1, 2]
    assert "capital of France" in pages[0].text
    assert "Louvre" in pages[1].text


def test_missing_file_raises_not_found(tmp_path) -> None:
    with pytest.raises(LoadError) as captured:
        load_pdf_pages(tmp_path / "nope.pdf")

    assert captured.value.code == "DOCUMENT_NOT_FOUND"


def test_directory_path_raises_not_found(tmp_path) -> None:
    with pytest.raises(LoadError) as captured:
        load_pdf_pages(tmp_path)

    assert captured.value.code == "DOCUMENT_NOT_FOUND"


def test_non_pdf_file_raises_format_invalid(tmp_path) -> None:
    path = tmp_path / "notes.pdf"
    path.write_text("just some plain text", encoding="utf-8")

    with pytest.raises(LoadError) as captured:
        load_pdf_pages(path)

    assert captured.value.code == "DOCUMENT_FORMAT_INVALID"


def test_corrupted_pdf_raises_open_failed(tmp_path) -> None:
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"%PDF-1.7\n" + b"\x00garbage" * 10)

    with pytest.raises(LoadError) as captured:
        load_pdf_pages(path)

    assert captured.value.code == "DOCUMENT_OPEN_FAILED"
