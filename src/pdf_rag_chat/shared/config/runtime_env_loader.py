"""
목적: 런타임 환경별 `.env` 로딩을 제공한다.
설명: 작업 디렉터리의 `.env`를 로드한 뒤 `ENV` 값(local/dev/prod)에 맞는 `.env.<env>` 파일을 추가로 로드한다.
디자인 패턴: 전략 패턴
참조: src/pdf_rag_chat/shared/config/settings.py, src/pdf_rag_chat/api/main.py
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from pdf_rag_chat.shared.logging import Logger, create_default_logger


class RuntimeEnvironmentLoader:
    """런타임 환경별 `.env` 로더이다.

    동작 순서:
    1. `project_root/.env`가 있으면 로드한다.
    2. `ENV`(또는 후보 키) 값으로 런타임 환경을 결정한다. 비어 있으면 `local`이다.
    3. `local`이 아니면 `project_root/.env.<env>`가 있을 때 추가로 로드한다.
    """

    _SUPPORTED_ENVS = {"local", "dev", "prod"}
    _ENV_ALIASES = {
        "development": "dev",
        "production": "prod",
    }
    _DEFAULT_ENV_KEY_CANDIDATES = ("ENV", "APP_ENV")

    def __init__(
        self,
        logger: Optional[Logger] = None,
        project_root: Optional[Path] = None,
        env_key_candidates: Optional[Sequence[str]] = None,
    ) -> None:
        self._project_root = Path(project_root or Path.cwd())
        self._env_key_candidates = tuple(env_key_candidates or self._DEFAULT_ENV_KEY_CANDIDATES)
        self._logger = logger or create_default_logger("RuntimeEnvironmentLoader")

    @property
    def project_root(self) -> Path:
        return self._project_root

    def load(self, override_root_env: bool = False) -> str:
        """런타임 환경을 판별하고 관련 `.env`를 로드한다.

        Returns:
            판별된 런타임 환경 문자열(`local/dev/prod`).
        """

        root_env_path = self._project_root / ".env"
        if root_env_path.exists():
            load_dotenv(dotenv_path=root_env_path, override=override_root_env)
        else:
            self._logger.debug(f"프로젝트 루트 .env 파일이 없어 건너뜁니다: {root_env_path}")

        runtime_env = self._resolve_runtime_env()
        os.environ["ENV"] = runtime_env
        if runtime_env != "local":
            env_file = self._project_root / f".env.{runtime_env}"
            if env_file.exists():
                load_dotenv(dotenv_path=env_file, override=False)
            else:
                self._logger.warning(f"환경 파일이 없어 건너뜁니다: {env_file}")
        self._logger.info(f"런타임 환경 로드 완료: env={runtime_env}, root={self._project_root}")
        return runtime_env

    def _resolve_runtime_env(self) -> str:
        raw_value = None
        for key in self._env_key_candidates:
            value = os.getenv(key) or os.getenv(key.lower())
            if value and value.strip():
                raw_value = value
                break
        if raw_value is None:
            return "local"
        normalized = raw_value.strip().lower()
        normalized = self._ENV_ALIASES.get(normalized, normalized)
        if normalized not in self._SUPPORTED_ENVS:
            supported_values = ", ".join(sorted(self._SUPPORTED_ENVS))
            raise ValueError(f"지원하지 않는 ENV 값입니다: {raw_value}. 허용값: {supported_values}")
        return normalized
