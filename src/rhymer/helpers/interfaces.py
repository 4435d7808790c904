"""接口定义模块

定义项目中使用的各种接口协议。
"""

from abc import ABC, abstractmethod

from pyrate_limiter import Limiter


class IRateLimitManager(ABC):
    """速率限制管理器接口

    负责管理pyrate-limiter实例的生命周期，包括创建、获取和销毁限制器。
    """

    @abstractmethod
    def get_limiter(self, relation: str) -> Limiter:
        """获取指定关系类型的速率限制器"""
        pass

    @abstractmethod
    def apply_rate_limiting(self, relation: str) -> None:
        """对指定关系类型应用速率限制"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """清理所有速率限制器资源"""
        pass

    @abstractmethod
    def get_rate_limit_config(self, relation: str) -> int:
        """获取指定关系类型每分钟允许的请求数"""
        pass
