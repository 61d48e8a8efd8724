"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from fx_cur.cache import DEFAULT_CACHE_PATH
from fx_cur.ingestion.ecb_requests import ECB_DAILY_URL

ENV_CACHE_PATH = "FX_CUR_CACHE_PATH"
ENV_SOURCE_URL = "FX_CUR_SOURCE_URL"
ENV_TIMEOUT = "FX_CUR_TIMEOUT"
ENV_LOG_LEVEL = "FX_CUR_LOG_LEVEL"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Where the cache lives and how the ECB document is fetched."""

    cache_path: Path = DEFAULT_CACHE_PATH
    source_url: str = ECB_DAILY_URL
    timeout: float = 30.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``FX_CUR_*`` variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        defaults = cls()

        timeout = defaults.timeout
        raw_timeout = env.get(ENV_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from None
            if timeout <= 0:
                raise ValueError(f"{ENV_TIMEOUT} must be positive")

        log_level = env.get(ENV_LOG_LEVEL, defaults.log_level).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(
                f"{ENV_LOG_LEVEL} must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )

        return cls(
            cache_path=Path(env.get(ENV_CACHE_PATH) or defaults.cache_path),
            source_url=env.get(ENV_SOURCE_URL) or defaults.source_url,
            timeout=timeout,
            log_level=log_level,
        )


__all__ = [
    "ENV_CACHE_PATH",
    "ENV_LOG_LEVEL",
    "ENV_SOURCE_URL",
    "ENV_TIMEOUT",
    "Settings",
]
