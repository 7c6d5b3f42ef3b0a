"""
목적: 페이지 텍스트를 겹침이 있는 청크로 분할한다.
설명: 구분자 우선순위(문단 -> 줄 -> 공백)에 따라 재귀적으로 나눈 뒤, 조각을 chunk_size 이하로
      탐욕적으로 병합한다. 새 청크는 직전 청크의 끝 조각을 chunk_overlap 이내에서 이어받는다.
      더 이상 나눌 수 없는 단위(단어 하나)는 chunk_size를 넘을 수 있다.
디자인 패턴: 함수형 변환 모듈
참조: src/pdf_rag_chat/core/rag/ingest.py, src/pdf_rag_chat/integrations/pdf/loader.py
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pdf_rag_chat.core.chat.models import DocumentChunk
from pdf_rag_chat.integrations.pdf import PageText

DEFAULT_CHUNK_SIZE = 250
DEFAULT_CHUNK_OVERLAP = 50
DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", " ")


def split_pages(
    pages: Iterable[PageText],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    separators: Sequence[str] = DEFAULT_SEPARATORS,
) -> list[DocumentChunk]:
    """페이지 목록을 청크 목록으로 변환한다. index는 문서 전체 기준 순번이다."""

    _validate_sizes(chunk_size, chunk_overlap)
    chunks: list[DocumentChunk] = []
    for page in pages:
        texts = split_text(page.text, chunk_size, chunk_overlap, separators)
        for text, offset in zip(texts, _locate_offsets(page.text, texts, chunk_overlap)):
            chunks.append(
                DocumentChunk(
                    text=text,
                    source_offset=offset,
                    page_num=page.page_num,
                    index=len(chunks),
                )
            )
    return chunks


def split_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    separators: Sequence[str] = DEFAULT_SEPARATORS,
) -> list[str]:
    """텍스트 하나를 청크 문자열 목록으로 분할한다. 공백뿐인 입력은 빈 목록이다."""

    _validate_sizes(chunk_size, chunk_overlap)
    if not separators:
        raise ValueError("separators는 비어 있을 수 없습니다.")
    if not text or not text.strip():
        return []
    return _split_recursive(text, list(separators), chunk_size, chunk_overlap)


def _validate_sizes(chunk_size: int, chunk_overlap: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size는 0보다 커야 합니다.")
    if chunk_overlap < 0:
        raise ValueError("chunk_overlap은 음수일 수 없습니다.")
    if chunk_overlap >= chunk_size:
        raise ValueError("chunk_overlap은 chunk_size보다 작아야 합니다.")


def _split_recursive(
    text: str,
    separators: list[str],
    chunk_size: int,
    chunk_overlap: int,
) -> list[str]:
    separator = separators[-1]
    remaining: list[str] = []
    for position, candidate in enumerate(separators):
        if candidate in text:
            separator = candidate
            remaining = separators[position + 1 :]
            break

    pieces = [piece for piece in text.split(separator) if piece]
    results: list[str] = []
    pending: list[str] = []
    for piece in pieces:
        if len(piece) < chunk_size:
            pending.append(piece)
            continue
        if pending:
            results.extend(_merge_pieces(pending, separator, chunk_size, chunk_overlap))
            pending = []
        if remaining:
            results.extend(_split_recursive(piece, remaining, chunk_size, chunk_overlap))
        else:
            stripped = piece.strip()
            if stripped:
                results.append(stripped)
    if pending:
        results.extend(_merge_pieces(pending, separator, chunk_size, chunk_overlap))
    return results


def _merge_pieces(
    pieces: list[str],
    separator: str,
    chunk_size: int,
    chunk_overlap: int,
) -> list[str]:
    separator_len = len(separator)
    merged: list[str] = []
    window: list[str] = []
    total = 0
    for piece in pieces:
        piece_len = len(piece)
        if total + piece_len + (separator_len if window else 0) > chunk_size:
            if window:
                _append_joined(merged, window, separator)
                # 겹침 한도 안으로 들어오고 다음 조각이 들어갈 때까지 앞에서부터 버린다.
                while total > chunk_overlap or (
                    total + piece_len + (separator_len if window else 0) > chunk_size and total > 0
                ):
                    total -= len(window[0]) + (separator_len if len(window) > 1 else 0)
                    window = window[1:]
        window.append(piece)
        total += piece_len + (separator_len if len(window) > 1 else 0)
    _append_joined(merged, window, separator)
    return merged


def _append_joined(target: list[str], window: list[str], separator: str) -> None:
    joined = separator.join(window).strip()
    if joined:
        target.append(joined)


def _locate_offsets(text: str, chunks: list[str], chunk_overlap: int) -> list[int]:
    offsets: list[int] = []
    index = 0
    previous_len = 0
    for chunk in chunks:
        start = max(0, index + previous_len - chunk_overlap)
        found = text.find(chunk, start)
        if found < 0:
            # 연속 구분자가 합쳐진 청크는 원문에 그대로 없으므로 첫 단어 위치로 대신한다.
            head = chunk.split(None, 1)[0]
            found = text.find(head, start)
        if found < 0:
            found = min(start, len(text))
        offsets.append(found)
        index = found
        previous_len = len(chunk)
    return offsets
