"""Tests for settings loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from validator_plugin.config import Settings


def test_defaults(settings: Settings) -> None:
    assert settings.PLUGIN_ID == "SamplePlugin"
    assert settings.INPUT_CONTENT_TO_VALIDATE == "contentToValidate"
    assert settings.SIZE_WARNING_THRESHOLD == 1024
    assert settings.SIZE_ERROR_THRESHOLD == 10240


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VALIDATOR_PLUGIN_SIZE_WARNING_THRESHOLD", "100")
    monkeypatch.setenv("VALIDATOR_PLUGIN_SIZE_ERROR_THRESHOLD", "200")
    monkeypatch.setenv("VALIDATOR_PLUGIN_INPUT_CONTENT_TO_VALIDATE", "payload")
    settings = Settings(_env_file=None)
    assert settings.SIZE_WARNING_THRESHOLD == 100
    assert settings.SIZE_ERROR_THRESHOLD == 200
    assert settings.INPUT_CONTENT_TO_VALIDATE == "payload"


@pytest.mark.parametrize(
    "overrides",
    [
        {"SIZE_WARNING_THRESHOLD": 2048, "SIZE_ERROR_THRESHOLD": 1024},
        {"SIZE_WARNING_THRESHOLD": 1024, "SIZE_ERROR_THRESHOLD": 1024},
        {"SIZE_WARNING_THRESHOLD": -1},
        {"INPUT_CONTENT_TO_VALIDATE": ""},
    ],
)
def test_invalid_settings_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
