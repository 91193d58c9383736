"""
test_logging.py - 로그 레벨 결정 테스트
"""

import logging

import pytest

from src.core.logging import configure_logging, resolve_log_level


class TestResolveLogLevel:
    """resolve_log_level 함수 테스트."""

    def test_default_info(self, monkeypatch: pytest.MonkeyPatch):
        """설정/환경 변수 없음 → INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert resolve_log_level({}) == logging.INFO

    def test_from_config(self, monkeypatch: pytest.MonkeyPatch):
        """logging.level 사용."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert resolve_log_level({"logging": {"level": "debug"}}) == logging.DEBUG

    def test_env_overrides_config(self, monkeypatch: pytest.MonkeyPatch):
        """LOG_LEVEL 환경 변수 우선."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        assert resolve_log_level({"logging": {"level": "DEBUG"}}) == logging.WARNING

    def test_unknown_level_falls_back(self, monkeypatch: pytest.MonkeyPatch):
        """알 수 없는 이름 → INFO."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert resolve_log_level({}) == logging.INFO


class TestConfigureLogging:
    """configure_logging 함수 테스트."""

    def test_sets_package_logger_level(self, monkeypatch: pytest.MonkeyPatch):
        """src 로거 레벨 적용."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        level = configure_logging({"logging": {"level": "DEBUG"}})

        assert level == logging.DEBUG
        assert logging.getLogger("src").level == logging.DEBUG
