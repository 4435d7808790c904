"""中心化的应用引导模块

创建、配置并装配唯一的容器实例。
"""

from pathlib import Path
from typing import Optional

from .config import get_config
from .containers import AppContainer

# 创建全局唯一的容器实例
container = AppContainer()
container.config.from_dict(get_config().to_dict())


def configure(config_path: Optional[Path] = None) -> AppContainer:
    """用指定配置文件重新装配容器

    已创建的单例会被重置，下次获取时按新配置创建。
    """
    container.config.from_dict(get_config(config_path).to_dict())
    container.reset_singletons()
    return container
