"""
配置的单元测试.
"""

import logging

import pytest
from pydantic import ValidationError

from deck_of_cards.core.config import (
    DisplayConfig, LoggingConfig, RemainderPolicy, configure_logging,
)


@pytest.mark.unit
class TestDisplayConfig:
    """显示配置测试"""

    def test_defaults(self):
        """测试默认配置"""
        config = DisplayConfig()
        assert config.description == "Current Deck"
        assert config.rows == 4
        assert config.remainder is RemainderPolicy.TRUNCATE
        assert config.separator == "------------------"

    def test_rows_must_be_positive(self):
        """测试行数校验"""
        with pytest.raises(ValidationError):
            DisplayConfig(rows=0)

    def test_frozen(self):
        """测试配置不可修改"""
        config = DisplayConfig()
        with pytest.raises(Exception):
            config.rows = 2


@pytest.mark.unit
class TestLoggingConfig:
    """日志配置测试"""

    def test_level_normalized(self):
        """测试日志级别转为大写"""
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_level(self):
        """测试无效的日志级别"""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="verbose")

    def test_configure_logging(self, monkeypatch):
        """测试按配置调用basicConfig"""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(LoggingConfig(log_level="info"))

        assert calls == [{
            "level": "INFO",
            "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        }]
