"""Rhymer包：基于 Datamuse API 的押韵词/同义词查询工具

分层结构：
- helpers: 分组、限流、重试、已保存单词等通用工具
- downloader: 下载器层，专注网络IO和数据获取
- services: 服务层，组合下载与分组
- render: 纯文本渲染
"""

from .helpers.grouping import group_by, group_by_field, label_sort_key, resolve_selector
from .helpers.saved_words import SavedWords
from .downloader import IDownloader, SimpleDownloader, QueryBuilder, RelationType
from .services import LookupResult, WordService
from .config import get_config

__version__ = "0.1.0"

__all__ = [
    # 分组
    "group_by",
    "group_by_field",
    "label_sort_key",
    "resolve_selector",
    # 下载器
    "IDownloader",
    "SimpleDownloader",
    "QueryBuilder",
    "RelationType",
    # 服务
    "LookupResult",
    "WordService",
    # 应用状态和配置
    "SavedWords",
    "get_config",
]
