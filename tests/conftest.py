"""
Pytest configuration for the Round Score Resolver.

Provides fixtures for:
- Settings isolated from the developer's environment and .env file
- Sample game logs written to temporary files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from score_resolver.config import Settings, get_settings

SCENARIO_A = "2\n10 5\n3 20"
SCENARIO_B = "1\n7 7"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Clear resolver env vars and the settings cache around every test.

    Runs from an empty temp directory so a local .env file cannot leak in.
    """
    for name in (
        "APP_ENV",
        "LOG_LEVEL",
        "LOG_JSON",
        "MAX_DECLARED_ROUNDS",
        "OUTPUT_DIR",
        "OUTPUT_FILENAME",
        "TEXT_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings fixture writing results into a per-test directory.
    """
    return Settings(
        log_level="DEBUG",
        output_dir=tmp_path / "results",
    )


@pytest.fixture
def write_log(tmp_path: Path):
    """
    Factory writing a log text to a file and returning its path.
    """

    def _write(text: str, name: str = "game.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def scenario_a_file(write_log) -> Path:
    return write_log(SCENARIO_A)
