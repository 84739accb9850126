"""
牌组显示与日志配置.

使用Pydantic dataclass确保配置数据的验证一致性.
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass


DEFAULT_DESCRIPTION = "Current Deck"
DEFAULT_ROWS = 4
SEPARATOR = "------------------"


class RemainderPolicy(Enum):
    """不能整除行数时剩余卡牌的处理方式"""
    TRUNCATE = "truncate"  # 丢弃剩余的牌
    CARRY = "carry"        # 剩余的牌追加到最后一行


@pydantic_dataclass(frozen=True)
class DisplayConfig:
    """牌组显示配置.

    每行的牌数由整除计算得出，剩余卡牌按remainder策略处理。
    """
    description: Optional[str] = Field(DEFAULT_DESCRIPTION, description="描述行，None表示不输出")
    rows: int = Field(DEFAULT_ROWS, gt=0, description="输出行数")
    remainder: RemainderPolicy = Field(RemainderPolicy.TRUNCATE, description="剩余卡牌处理策略")
    separator: str = Field(SEPARATOR, description="分隔线")


@pydantic_dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = Field('WARNING', description="日志级别")
    log_format: str = Field('%(asctime)s - %(name)s - %(levelname)s - %(message)s', description="日志格式")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别名称."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"无效的日志级别: {v}")
        return level


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按配置初始化根日志器.

    只在程序入口调用，库代码本身不修改日志配置。

    Args:
        config: 日志配置，为None时使用默认配置
    """
    config = config or LoggingConfig()
    logging.basicConfig(level=config.log_level, format=config.log_format)
