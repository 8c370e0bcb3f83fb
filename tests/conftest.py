"""Shared test fixtures for the content validator plugin."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from validator_plugin.config import Settings
from validator_plugin.models.requests import ValidateRequest
from validator_plugin.plugin import ValidationPlugin
from validator_plugin.validators.engine import ValidationEngine

CONTENT_INPUT = "contentToValidate"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_content(tmp_path: Path) -> Callable[[int], Path]:
    """Write a JSON-ish file of exactly ``size`` bytes and return its path."""

    def _make(size: int, name: str | None = None) -> Path:
        path = tmp_path / (name or f"content_{size}.json")
        path.write_bytes(b"x" * size)
        return path

    return _make


@pytest.fixture
def engine(settings: Settings) -> ValidationEngine:
    return ValidationEngine(settings=settings)


@pytest.fixture
def plugin(settings: Settings) -> ValidationPlugin:
    return ValidationPlugin(settings=settings)


@pytest.fixture
def content_request() -> Callable[[Path | str], ValidateRequest]:
    """Build a request carrying only the content input."""

    def _request(path: Path | str) -> ValidateRequest:
        return ValidateRequest.from_pairs([(CONTENT_INPUT, str(path))])

    return _request
