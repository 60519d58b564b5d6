"""Tests for render settings loading."""
from __future__ import annotations

import logging

import pytest

from tankgame.config import DEFAULT_PRECISION, RenderSettings, load_render_settings


# //1.- Without overrides the loader falls back to six digits.
def test_load_render_settings_uses_defaults(monkeypatch):
    monkeypatch.delenv("TANKGAME_VECTOR_PRECISION", raising=False)
    settings = load_render_settings()
    assert settings == RenderSettings()
    assert settings.precision == DEFAULT_PRECISION == 6


# //2.- An explicit mapping wins over the environment.
def test_mapping_takes_precedence_over_environment(monkeypatch):
    monkeypatch.setenv("TANKGAME_VECTOR_PRECISION", "9")
    assert load_render_settings({"precision": 2}).precision == 2
    assert load_render_settings({}).precision == DEFAULT_PRECISION


# //3.- Environment prefixes can be customised for embedding applications.
def test_environment_prefix_is_configurable(monkeypatch, caplog):
    monkeypatch.setenv("ARENA_VECTOR_PRECISION", " 4 ")
    with caplog.at_level(logging.DEBUG, logger="tankgame.config"):
        settings = load_render_settings(env_prefix="ARENA")
    assert settings.precision == 4
    assert "overridden from environment" in caplog.text


@pytest.mark.parametrize("value", ["-2", "six", "1.5"])
def test_invalid_precision_is_rejected(value):
    with pytest.raises(ValueError):
        RenderSettings.from_mapping({"precision": value})
