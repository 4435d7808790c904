"""速率限制管理器实现

负责管理pyrate-limiter实例的生命周期。"""

import logging
import threading
from typing import Dict
from pyrate_limiter import Limiter, InMemoryBucket, Rate, Duration

from rhymer.config import get_config
from .interfaces import IRateLimitManager

logger = logging.getLogger(__name__)

DEFAULT_RATE_LIMIT = 100


class RateLimitManager(IRateLimitManager):
    """速率限制管理器实现

    每种关系类型一个独立的限制器，按需创建并缓存。
    """

    def __init__(self, config=None):
        """初始化速率限制管理器

        Args:
            config: 配置对象，为 None 时使用全局配置
        """
        self.config = config if config is not None else get_config()
        self.rate_limiters: Dict[str, Limiter] = {}
        self._lock = threading.Lock()

    def get_limiter(self, relation: str) -> Limiter:
        """获取指定关系类型的速率限制器

        Args:
            relation: 关系类型

        Returns:
            Limiter: 对应的速率限制器实例
        """
        with self._lock:
            if relation not in self.rate_limiters:
                rate_limit = self.get_rate_limit_config(relation)
                self.rate_limiters[relation] = Limiter(
                    InMemoryBucket([Rate(rate_limit, Duration.MINUTE)]),
                    raise_when_fail=False,
                    max_delay=Duration.MINUTE * 2,
                )
                logger.debug(
                    f"Created rate limiter for relation {relation} with {rate_limit} requests/minute"
                )
            return self.rate_limiters[relation]

    def apply_rate_limiting(self, relation: str) -> None:
        """对指定关系类型应用速率限制，超出配额时阻塞等待"""
        logger.debug(f"Rate limiting check for relation: {relation}")
        self.get_limiter(relation).try_acquire(relation, 1)

    def get_rate_limit_config(self, relation: str) -> int:
        """获取指定关系类型的速率限制配置

        优先读取 [api.rate_limits] 下的单独配置，其次是 api.rate_limit_per_minute。
        """
        api_config = self.config.get("api", {})
        per_relation = api_config.get("rate_limits", {})
        if relation in per_relation:
            rate_limit = per_relation[relation]
        else:
            rate_limit = api_config.get("rate_limit_per_minute", DEFAULT_RATE_LIMIT)

        if not isinstance(rate_limit, int) or rate_limit <= 0:
            logger.warning(
                f"Invalid rate limit {rate_limit!r} for relation {relation}, using default {DEFAULT_RATE_LIMIT}"
            )
            return DEFAULT_RATE_LIMIT
        return rate_limit

    def cleanup(self) -> None:
        """清理所有速率限制器资源"""
        logger.debug(f"Cleaning up {len(self.rate_limiters)} rate limiters")
        with self._lock:
            self.rate_limiters.clear()

