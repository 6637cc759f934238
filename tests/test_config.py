"""Tests for settings and logging setup."""

from __future__ import annotations

import logging

from pnmkit import Format, Grid
from pnmkit.config import Settings, configure_logging, settings


def test_settings_defaults():
    s = Settings()
    assert s.pnmkit_default_max_value == 255
    assert s.pnmkit_log_level == "info"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PNMKIT_DEFAULT_MAX_VALUE", "15")
    monkeypatch.setenv("PNMKIT_LOG_LEVEL", "warning")
    s = Settings()
    assert s.pnmkit_default_max_value == 15
    assert s.pnmkit_log_level == "warning"


def test_blank_grid_uses_default_max_value(monkeypatch):
    monkeypatch.setattr(settings, "pnmkit_default_max_value", 15)
    grid = Grid.blank(Format.P2, 2, 2)
    assert grid.max_value == 15


def test_explicit_max_value_wins(monkeypatch):
    monkeypatch.setattr(settings, "pnmkit_default_max_value", 15)
    grid = Grid.blank(Format.P3, 2, 2, max_value=1000)
    assert grid.max_value == 1000


def test_configure_logging_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("debug")
    configure_logging("not-a-level")
    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.INFO
    assert "%(name)s" in calls[0]["format"]
