"""简单下载器实现

提供基础的数据下载功能，支持速率限制。
"""

import logging
from typing import Any, Dict, List, Optional

from rhymer.helpers.interfaces import IRateLimitManager
from rhymer.downloader.query_builder import QueryBuilder
from rhymer.downloader.interfaces import IDownloader

logger = logging.getLogger(__name__)


class SimpleDownloader(IDownloader):
    """简化的下载器实现

    专注于网络IO和数据获取，不处理业务逻辑。
    """

    def __init__(
        self,
        query_builder: QueryBuilder,
        rate_limit_manager: IRateLimitManager,
    ):
        """初始化下载器

        Args:
            query_builder: 查询构建工具
            rate_limit_manager: 速率限制管理器
        """
        self.rate_limit_manager = rate_limit_manager
        self.query_builder = query_builder

    def download(
        self, relation: str, word: str, **kwargs
    ) -> Optional[List[Dict[str, Any]]]:
        """下载指定关系类型和单词的数据

        Args:
            relation: 关系类型
            word: 查询的单词
            **kwargs: 额外的查询参数，如 max

        Returns:
            下载的记录列表，或在失败时返回 None
        """
        try:
            self.rate_limit_manager.apply_rate_limiting(relation)

            fetcher = self.query_builder.build_by_relation(relation, word, **kwargs)
            return fetcher()
        except Exception as e:
            logger.error(f"下载器执行失败 - 关系: {relation}, 单词: {word}, 错误: {e}")
            return None

    def cleanup(self):
        """清理下载器资源"""
        self.rate_limit_manager.cleanup()
        logger.debug("SimpleDownloader cleanup completed")
