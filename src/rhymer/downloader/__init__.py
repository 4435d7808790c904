"""Rhymer 下载器子模块

提供数据下载相关的接口、类型定义和实现类。"""

from .interfaces import IDownloader
from .simple_downloader import SimpleDownloader
from .types import RelationType, RelationTemplate, RelationTemplateRegistry
from .query_builder import QueryBuilder, DatamuseSessionManager

__all__ = [
    "IDownloader",
    "SimpleDownloader",
    "RelationType",
    "RelationTemplate",
    "RelationTemplateRegistry",
    "QueryBuilder",
    "DatamuseSessionManager",
]
