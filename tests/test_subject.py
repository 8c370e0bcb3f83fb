"""Tests for subject resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from validator_plugin.validators.errors import PluginError, SubjectUnreadableError
from validator_plugin.validators.subject import resolve_subject


def test_resolves_size(tmp_path: Path) -> None:
    path = tmp_path / "content.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    subject = resolve_subject("contentToValidate", str(path))
    assert subject.size == 8
    assert subject.path == path
    assert subject.input_name == "contentToValidate"


def test_missing_file(tmp_path: Path) -> None:
    reference = str(tmp_path / "absent.json")
    with pytest.raises(SubjectUnreadableError) as exc_info:
        resolve_subject("contentToValidate", reference)
    err = exc_info.value
    assert err.reference == reference
    assert isinstance(err.cause, OSError)
    assert err.__cause__ is err.cause
    assert err.reason == "subject_unreadable"
    assert isinstance(err, PluginError)


def test_directory_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(SubjectUnreadableError):
        resolve_subject("contentToValidate", str(tmp_path))


def test_empty_reference_is_unreadable() -> None:
    with pytest.raises(SubjectUnreadableError):
        resolve_subject("contentToValidate", "")


def test_permission_denied_is_unreadable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "locked.json"
    path.write_text("{}", encoding="utf-8")
    monkeypatch.setattr("validator_plugin.validators.subject.os.access", lambda *args, **kwargs: False)
    with pytest.raises(SubjectUnreadableError) as exc_info:
        resolve_subject("contentToValidate", str(path))
    assert isinstance(exc_info.value.cause, PermissionError)
    assert exc_info.value.__cause__ is exc_info.value.cause
