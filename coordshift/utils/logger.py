"""
日志管理模块
使用loguru库提供统一的日志功能
"""

import sys
from loguru import logger
from typing import Any, Dict, Optional


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    format_string: Optional[str] = None,
    sink: Any = None
):
    """
    设置日志系统

    Args:
        log_level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: 日志文件路径，如果为None则不保存到文件
        rotation: 日志文件轮转规则
        retention: 日志保留时间
        format_string: 自定义日志格式
        sink: 控制台输出目标，默认sys.stderr
    """
    logger.remove()

    format_string = format_string or DEFAULT_FORMAT
    log_level = log_level.upper()

    logger.add(
        sink if sink is not None else sys.stderr,
        format=format_string,
        level=log_level,
        colorize=sink is None,
        backtrace=True,
        diagnose=False
    )

    if log_file:
        logger.add(
            log_file,
            format=format_string,
            level=log_level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=False,
            encoding="utf-8"
        )

    logger.debug(f"日志系统初始化完成 - 级别: {log_level}")
    if log_file:
        logger.debug(f"日志文件: {log_file}")

    return logger


def setup_logger_from_config(logging_config: Optional[Dict[str, Any]], level_override: Optional[str] = None):
    """
    按配置文件中的 logging 段设置日志

    Args:
        logging_config: {'level': ..., 'file': ..., 'rotation': ..., 'retention': ...}
        level_override: 命令行指定的日志级别，优先于配置
    """
    logging_config = logging_config or {}
    return setup_logger(
        log_level=level_override or logging_config.get('level') or 'INFO',
        log_file=logging_config.get('file'),
        rotation=logging_config.get('rotation', '10 MB'),
        retention=logging_config.get('retention', '7 days'),
    )
