"""
工具模块
包括日志和配置加载
"""

from .logger import setup_logger, setup_logger_from_config
from .config_loader import ConfigLoader, load_config, merge_config, DEFAULT_CONVERT_CONFIG

__all__ = ['setup_logger', 'setup_logger_from_config', 'ConfigLoader', 'load_config', 'merge_config', 'DEFAULT_CONVERT_CONFIG']
