"""Rhymer 配置管理模块

基于Box的配置管理，支持TOML格式配置文件。
配置文件中的值覆盖内置默认值。
"""

import copy
import tomllib
from pathlib import Path
from box import Box
from typing import Optional

DEFAULT_CONFIG = {
    "api": {
        "base_url": "https://api.datamuse.com/words",
        "timeout": 10,
        "max_results": 100,
        "max_retries": 3,
        "retry_delay": 1.0,
        "rate_limit_per_minute": 100,
        "user_agent": "rhymer/0.1.0",
    },
    "saved_words": {
        "path": "saved_words.json",
    },
}

# 全局配置对象缓存
_config_cache = {}
_default_config_path = Path.cwd() / "config.toml"


def load_config(config_path: Optional[Path] = None) -> Box:
    """从指定路径加载配置文件

    Args:
        config_path: 配置文件路径，如果为 None 则使用默认路径；
            默认路径下没有配置文件时只使用内置默认值

    Returns:
        Box: 配置对象

    Raises:
        FileNotFoundError: 显式指定的配置文件不存在
        ValueError: 配置文件不是合法的 TOML
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = _default_config_path
    config_path = Path(config_path)

    # 转换为绝对路径作为缓存键
    cache_key = str(config_path.resolve())
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    config = Box(copy.deepcopy(DEFAULT_CONFIG))
    if config_path.exists():
        try:
            with config_path.open("rb") as f:
                config.merge_update(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"配置文件格式错误 {config_path}: {e}")
    elif explicit:
        raise FileNotFoundError(f"配置文件不存在: {config_path}")

    _config_cache[cache_key] = config
    return config


def get_config(config_path: Optional[Path] = None) -> Box:
    """获取配置对象

    Args:
        config_path: 配置文件路径，如果为 None 则使用默认路径

    Returns:
        Box: 配置对象
    """
    return load_config(config_path)


def clear_config_cache():
    """清空配置缓存"""
    _config_cache.clear()
