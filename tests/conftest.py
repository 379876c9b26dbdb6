"""
Pytest configuration for popgrowth.

Provides fixtures for:
- Isolated settings (environment cleared, cache reset per test)
- Sample dataset files written to tmp_path
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable

import pytest

from popgrowth.config import Settings, get_settings

SAMPLE_LINES = [
    "集計年,都道府県名,10〜14歳の人口,15〜19歳の人口",
    "2010,Akita,X,100",
    "2010,Tokyo,X,100",
    "2015,Akita,X,80",
    "2015,Tokyo,X,300",
    "2020,Tokyo,X,900",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Strip configuration env vars and reset the settings cache around each test.
    """
    for name in list(os.environ):
        if name.startswith("POPGROWTH_") or name in {"LOG_LEVEL", "LOG_JSON"}:
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(year_a=2010, year_b=2015, log_level="WARNING")


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """
    Factory writing the given lines to a fresh CSV file and returning its path.
    """
    counter = 0

    def _write(lines: Iterable[str], name: str | None = None) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / (name or f"dataset-{counter}.csv")
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv) -> Path:
    return write_csv(SAMPLE_LINES, name="popu-pref.csv")
