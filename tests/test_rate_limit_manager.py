from unittest.mock import Mock

from pyrate_limiter import Limiter

from rhymer.helpers.rate_limit_manager import (
    DEFAULT_RATE_LIMIT,
    RateLimitManager,
)


class TestRateLimitManager:
    """RateLimitManager 测试类"""

    def test_limiter_created_once_per_relation(self, settings):
        """测试每种关系类型只创建一个限制器"""
        manager = RateLimitManager(config=settings)

        first = manager.get_limiter("rhymes")
        second = manager.get_limiter("rhymes")
        other = manager.get_limiter("synonyms")

        assert isinstance(first, Limiter)
        assert first is second
        assert first is not other

    def test_rate_limit_from_config(self, settings):
        """测试读取全局和按关系类型的速率配置"""
        settings.api.rate_limit_per_minute = 30
        settings.api.rate_limits = {"synonyms": 5}
        manager = RateLimitManager(config=settings)

        assert manager.get_rate_limit_config("rhymes") == 30
        assert manager.get_rate_limit_config("synonyms") == 5

    def test_invalid_rate_limit_falls_back(self, settings):
        """测试非法配置使用默认值"""
        settings.api.rate_limit_per_minute = 0
        manager = RateLimitManager(config=settings)

        assert manager.get_rate_limit_config("rhymes") == DEFAULT_RATE_LIMIT

    def test_apply_rate_limiting(self, settings):
        """测试应用速率限制时向限制器申请配额"""
        manager = RateLimitManager(config=settings)
        limiter = Mock()
        manager.rate_limiters["rhymes"] = limiter

        manager.apply_rate_limiting("rhymes")

        limiter.try_acquire.assert_called_once_with("rhymes", 1)

    def test_cleanup(self, settings):
        """测试清理限制器缓存"""
        manager = RateLimitManager(config=settings)
        manager.get_limiter("rhymes")

        manager.cleanup()

        assert manager.rate_limiters == {}

