"""
Tests for environment-driven settings.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from docsign_api.config import load_settings


class TestLoadSettings:
    """DOCSIGN_* environment variables and their defaults."""

    def test_defaults(self, monkeypatch):
        for name in ("DOCSIGN_CORS_ORIGINS", "DOCSIGN_SEED_SAMPLES", "DOCSIGN_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        s = load_settings()
        assert s.cors_origins == ["*"]
        assert s.seed_samples is True
        assert s.log_level == "INFO"

    def test_origin_list(self, monkeypatch):
        monkeypatch.setenv("DOCSIGN_CORS_ORIGINS", "https://a.example, https://b.example,")
        assert load_settings().cors_origins == ["https://a.example", "https://b.example"]

    def test_blank_origins_fall_back_to_any(self, monkeypatch):
        monkeypatch.setenv("DOCSIGN_CORS_ORIGINS", " , ")
        assert load_settings().cors_origins == ["*"]

    def test_seed_flag(self, monkeypatch):
        monkeypatch.setenv("DOCSIGN_SEED_SAMPLES", "false")
        assert load_settings().seed_samples is False
        monkeypatch.setenv("DOCSIGN_SEED_SAMPLES", "Yes")
        assert load_settings().seed_samples is True

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("DOCSIGN_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"
