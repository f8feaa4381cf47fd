"""Unit tests for environment configuration."""

import logging

import pytest

from declsig.config import get_log_level, get_source_root


def test_default_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DECLSIG_LOG_LEVEL", raising=False)
    assert get_log_level() == logging.WARNING


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECLSIG_LOG_LEVEL", " debug ")
    assert get_log_level() == logging.DEBUG


def test_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECLSIG_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="CHATTY"):
        get_log_level()


def test_source_root_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DECLSIG_SOURCE_ROOT", raising=False)
    assert get_source_root() is None


def test_source_root_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECLSIG_SOURCE_ROOT", "/work/src")
    assert get_source_root() == "/work/src"
