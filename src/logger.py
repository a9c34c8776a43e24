"""统一的日志配置：级别来自环境变量 LOG_LEVEL，默认 INFO。"""
import logging
import os
import sys
from typing import Optional

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _resolve_level() -> int:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    # Fall back to INFO on unknown names.
    if level not in VALID_LOG_LEVELS:
        level = "INFO"
    return getattr(logging, level)


def configure_logging(level: Optional[int] = None) -> None:
    """为脚本入口配置根 logger；库模块只取 logger，不做配置。"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(
        level=level if level is not None else _resolve_level(),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger named after the last component of the module path."""
    return logging.getLogger(name.split(".")[-1])


__all__ = ["configure_logging", "get_logger"]
