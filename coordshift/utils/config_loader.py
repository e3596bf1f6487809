"""
配置文件加载器
支持YAML格式配置文件的加载、默认值合并和嵌套键读取
"""

import copy
import os
import yaml
from loguru import logger
from typing import Dict, Any, Optional


# 配置文件缺失时使用的内置默认值，与 config/convert_config.yaml 保持一致
DEFAULT_CONVERT_CONFIG: Dict[str, Any] = {
    'conversion': {
        'source': 'WGS84',
        'target': 'GCJ02',
        'exact_inverse': False,
        'precision': 6,
        'exact': {
            'epsilon': 1e-7,
            'max_rounds': 10,
        },
    },
    'logging': {
        'level': 'INFO',
        'file': None,
    },
}


def merge_config(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    递归合并配置字典，override中的值覆盖base

    Args:
        base: 默认配置
        override: 用户配置

    Returns:
        合并后的新字典 (不修改输入)
    """
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """配置加载器类"""

    def __init__(self, config_dir: str = "./config"):
        """
        初始化配置加载器

        Args:
            config_dir: 配置文件目录路径
        """
        self.config_dir = config_dir
        self._configs = {}

    def path_of(self, config_name: str) -> str:
        """配置文件完整路径"""
        return os.path.join(self.config_dir, f"{config_name}.yaml")

    def load(self, config_name: str) -> Dict[str, Any]:
        """
        加载指定的配置文件

        Args:
            config_name: 配置文件名 (不含.yaml后缀)

        Returns:
            配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            ValueError: YAML解析失败
        """
        if config_name in self._configs:
            return self._configs[config_name]

        config_path = self.path_of(config_name)
        config = load_config(config_path)

        self._configs[config_name] = config
        logger.debug(f"已加载配置: {config_path}")
        return config

    def load_with_defaults(self, config_name: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
        """
        加载配置并与默认值合并，文件不存在时直接返回默认值

        Args:
            config_name: 配置文件名
            defaults: 默认配置

        Returns:
            合并后的配置字典
        """
        try:
            config = self.load(config_name)
        except FileNotFoundError:
            logger.warning(f"配置文件不存在: {self.path_of(config_name)}，使用内置默认配置")
            return copy.deepcopy(defaults)
        return merge_config(defaults, config)

    def get(self, config_name: str, key_path: str, default: Any = None) -> Any:
        """
        获取配置中的某个值 (支持嵌套路径)

        Args:
            config_name: 配置文件名
            key_path: 键路径，使用.分隔，例如 "conversion.source"
            default: 默认值

        Returns:
            配置值

        Example:
            >>> loader = ConfigLoader()
            >>> source = loader.get('convert_config', 'conversion.source')
        """
        value = self.load(config_name)

        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def reload(self, config_name: str) -> Dict[str, Any]:
        """重新加载配置文件 (清除缓存并重新读取)"""
        self._configs.pop(config_name, None)
        return self.load(config_name)

    def clear_cache(self):
        """清除所有配置缓存"""
        self._configs.clear()


def load_config(config_path: str) -> Dict[str, Any]:
    """
    快捷函数：直接加载配置文件

    Args:
        config_path: 配置文件完整路径

    Returns:
        配置字典，空文件返回空字典
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"配置文件不存在: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"配置文件解析失败: {config_path}\n错误: {e}")

    return config or {}
