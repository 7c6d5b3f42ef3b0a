"""
목적: 정적 파일 경로 필터를 검증한다.
설명: 점으로 시작하는 경로 조각만 숨김 경로로 판정하는지 확인한다.
디자인 패턴: 단위 테스트
참조: src/pdf_rag_chat/api/static.py
"""

from __future__ import annotations

import pytest

from pdf_rag_chat.api.static import is_hidden_path


@pytest.mark.parametrize(
    ("path", "hidden"),
    [
        (".env", True),
        (".git/config", True),
        ("assets/.secret.txt", True),
        ("assets\\.env", True),
        ("index.html", False),
        ("assets/app.v1.js", False),
        ("", False),
    ],
)
def test_is_hidden_path(path: str, hidden: bool) -> None:
    assert is_hidden_path(path) is hidden
