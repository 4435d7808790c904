"""单词查询服务

负责一次完整的查询流程：标准化输入、下载记录、按模板分组。
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from rhymer.downloader.interfaces import IDownloader
from rhymer.downloader.types import RelationType, RelationTemplateRegistry
from rhymer.helpers.grouping import Label, group_by_field
from rhymer.helpers.utils import normalize_word

logger = logging.getLogger(__name__)


@dataclass
class LookupResult:
    """一次查询的结果"""

    word: str
    relation: str
    title: str
    records: Optional[List[Dict[str, Any]]]
    groups: Optional[Dict[Label, List[Dict[str, Any]]]] = None

    @property
    def failed(self) -> bool:
        return self.records is None

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def words(self) -> List[str]:
        """结果中的全部单词，按分组顺序（如有）排列"""
        if self.groups is not None:
            return [r.get("word") for group in self.groups.values() for r in group]
        return [r.get("word") for r in self.records or []]


class WordService:
    """单词查询服务"""

    def __init__(self, downloader: IDownloader):
        self.downloader = downloader

    def lookup(self, word: str, relation: str) -> LookupResult:
        """查询单词的相关词

        Args:
            word: 用户输入的单词，会被去除空白并转为小写
            relation: 关系类型

        Returns:
            LookupResult: 查询结果；下载失败时 records 为 None

        Raises:
            ValueError: 单词为空或关系类型不支持
        """
        normalized = normalize_word(word)
        if not normalized:
            raise ValueError("word must not be empty")

        try:
            template = RelationTemplateRegistry.get_template(relation)
        except KeyError:
            raise ValueError(f"不支持的关系类型: {relation}")

        title = template.format_title(normalized)
        records = self.downloader.download(relation, normalized)
        if records is None:
            logger.warning(f"查询失败 - 关系: {relation}, 单词: {normalized}")
            return LookupResult(normalized, relation, title, None)

        groups = None
        if template.grouped_by and records:
            groups = group_by_field(records, template.grouped_by)

        logger.info(
            f"查询完成 - 关系: {relation}, 单词: {normalized}, 结果数: {len(records)}"
        )
        return LookupResult(normalized, relation, title, records, groups)

    def rhymes(self, word: str) -> LookupResult:
        return self.lookup(word, RelationType.rhymes)

    def synonyms(self, word: str) -> LookupResult:
        return self.lookup(word, RelationType.synonyms)
