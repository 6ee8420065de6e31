"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENVIRONMENT", "test")

from app.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402

LLM_URL = "https://llm.example/v1/completions"


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the tests."""

    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("MY_LLM_API_URL", raising=False)
    monkeypatch.delenv("MY_LLM_API_KEY", raising=False)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        MY_LLM_API_URL=LLM_URL,
        MY_LLM_API_KEY="test-key",
        STATIC_DIR=str(tmp_path / "missing-public"),
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)
