"""
목적: 정적 파일 제공 앱을 제공한다.
설명: 작업 디렉터리를 그대로 공개하므로 `.env`, `.git` 같은 점으로 시작하는 경로 조각은 404로 막는다.
디자인 패턴: 어댑터
참조: src/pdf_rag_chat/api/main.py
"""

from __future__ import annotations

import re

from fastapi import Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.types import Scope

_SEGMENT_SEPARATORS = re.compile(r"[\\/]")


def is_hidden_path(path: str) -> bool:
    """경로 조각 중 하나라도 점으로 시작하면 True를 반환한다."""

    return any(segment.startswith(".") for segment in _SEGMENT_SEPARATORS.split(path) if segment)


class PublicStaticFiles(StaticFiles):
    """숨김 파일과 숨김 디렉터리를 노출하지 않는 StaticFiles이다."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        if is_hidden_path(path):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
