"""Tests for environment configuration and logging setup."""

from __future__ import annotations

import logging

from vectorpath import config
from vectorpath.config import Settings, configure_logging


def test_defaults(monkeypatch):
    for name in ("VECTORPATH_LOG_LEVEL", "VECTORPATH_SVG_PRECISION", "VECTORPATH_DEFAULT_FONT"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.vectorpath_log_level == "info"
    assert s.vectorpath_svg_precision == 6
    assert s.vectorpath_default_font == "DejaVu Sans"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VECTORPATH_SVG_PRECISION", "3")
    monkeypatch.setenv("VECTORPATH_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.vectorpath_svg_precision == 3
    assert s.vectorpath_log_level == "debug"


def test_configure_logging_uses_setting(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setattr(config.settings, "vectorpath_log_level", "warning")
    configure_logging()
    assert calls[0]["level"] == logging.WARNING


def test_configure_logging_explicit_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("debug")
    assert calls[0]["level"] == logging.DEBUG


def test_configure_logging_unknown_level_falls_back(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("chatty")
    assert calls[0]["level"] == logging.INFO
