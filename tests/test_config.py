from __future__ import annotations

from pathlib import Path

import pytest

from fx_cur.cache import DEFAULT_CACHE_PATH
from fx_cur.config import Settings
from fx_cur.ingestion.ecb_requests import ECB_DAILY_URL


def test_settings_defaults() -> None:
    settings = Settings.from_env({})

    assert settings.cache_path == DEFAULT_CACHE_PATH
    assert settings.source_url == ECB_DAILY_URL
    assert settings.timeout == 30.0
    assert settings.log_level == "WARNING"


def test_settings_read_environment(tmp_path: Path) -> None:
    settings = Settings.from_env(
        {
            "FX_CUR_CACHE_PATH": str(tmp_path / "rates.xml"),
            "FX_CUR_SOURCE_URL": "https://example.test/rates.xml",
            "FX_CUR_TIMEOUT": "2.5",
            "FX_CUR_LOG_LEVEL": "debug",
        }
    )

    assert settings.cache_path == tmp_path / "rates.xml"
    assert settings.source_url == "https://example.test/rates.xml"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_settings_default_to_os_environ(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FX_CUR_CACHE_PATH", str(tmp_path / "env.xml"))

    assert Settings.from_env().cache_path == tmp_path / "env.xml"


@pytest.mark.parametrize(
    "env",
    [
        {"FX_CUR_TIMEOUT": "soon"},
        {"FX_CUR_TIMEOUT": "-1"},
        {"FX_CUR_LOG_LEVEL": "LOUD"},
    ],
)
def test_settings_reject_invalid_values(env: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        Settings.from_env(env)
