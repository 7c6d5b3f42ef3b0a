"""
목적: 설정 소스 병합기를 제공한다.
설명: 기본값 사전, JSON 설정 파일, `PDF_CHAT_` 환경 변수를 추가한 순서대로 겹쳐 하나의 중첩 사전을 만든다.
디자인 패턴: 빌더 패턴
참조: src/pdf_rag_chat/shared/config/settings.py, src/pdf_rag_chat/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from pdf_rag_chat.shared.const import SharedConst
from pdf_rag_chat.shared.logging import Logger, create_default_logger

_BOOL_LITERALS = {"true": True, "false": False}
_NULL_LITERALS = {"null", "none"}


def deep_merge(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """두 사전을 병합한다. 양쪽이 모두 사전인 키만 재귀 병합하고 나머지는 incoming 값이 이긴다."""

    merged = dict(base)
    for key, value in incoming.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def coerce_env_value(raw: str) -> Any:
    """환경 변수 문자열을 bool/None/int/float/JSON 값으로 해석한다. 해석할 수 없으면 원문을 반환한다."""

    text = raw.strip()
    lowered = text.lower()
    if lowered in _BOOL_LITERALS:
        return _BOOL_LITERALS[lowered]
    if lowered in _NULL_LITERALS:
        return None
    for caster in (int, float):
        try:
            return caster(text)
        except ValueError:
            continue
    if text[:1] in "{[" and text[-1:] in "}]":
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return raw
    return raw


class ConfigLoader:
    """설정 소스를 쌓아 두었다가 `build` 시점에 병합한다."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._layers: list[tuple[str, Dict[str, Any]]] = []

    @property
    def layer_names(self) -> list[str]:
        return [name for name, _ in self._layers]

    def add_dict(self, data: Optional[Mapping[str, Any]], name: str = "dict") -> "ConfigLoader":
        if data:
            self._layers.append((name, dict(data)))
        return self

    def add_json_file(
        self,
        path: Optional[str],
        required: bool = False,
        encoding: str = SharedConst.DEFAULT_ENCODING,
    ) -> "ConfigLoader":
        """JSON 설정 파일을 추가한다.

        경로가 비었거나 파일이 없으면 `required=False`일 때 건너뛴다.
        최상위가 객체가 아니거나 파싱에 실패하면 ValueError를 던진다.
        """

        if not path:
            if required:
                raise ValueError("설정 파일 경로가 비어 있습니다.")
            return self
        file_path = Path(path)
        if not file_path.is_file():
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        try:
            payload = json.loads(file_path.read_text(encoding=encoding))
        except json.JSONDecodeError as exc:
            raise ValueError(f"설정 파일이 올바른 JSON이 아닙니다: {path}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"설정 파일 최상위는 객체여야 합니다: {path}")
        self._layers.append((f"file:{file_path.name}", payload))
        return self

    def add_env(
        self,
        prefix: str = SharedConst.ENV_PREFIX,
        delimiter: str = SharedConst.ENV_NESTED_DELIMITER,
        environ: Optional[Mapping[str, str]] = None,
        exclude: Iterable[str] = (),
    ) -> "ConfigLoader":
        """접두사가 붙은 환경 변수를 섹션 사전으로 바꿔 추가한다.

        `PDF_CHAT_LLM__MODEL=x`는 `{"llm": {"model": "x"}}`가 된다.
        """

        source = os.environ if environ is None else environ
        skipped = set(exclude)
        layer: Dict[str, Any] = {}
        for key, value in source.items():
            if key in skipped or not key.startswith(prefix):
                continue
            path = [part.lower() for part in key[len(prefix) :].split(delimiter) if part]
            if not path:
                continue
            node = layer
            for part in path[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = node[part] = {}
                node = child
            node[path[-1]] = coerce_env_value(value)
        if layer:
            self._layers.append((f"env:{prefix}", layer))
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for _, layer in self._layers:
            merged = deep_merge(merged, layer)
        if overrides:
            merged = deep_merge(merged, overrides)
        self._logger.debug(
            "설정 병합 완료",
            metadata={"layers": self.layer_names, "overrides": bool(overrides)},
        )
        return merged
