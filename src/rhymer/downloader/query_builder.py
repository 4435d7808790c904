"""查询构建器模块

基于函数构建器模式，把关系类型模板和运行时参数组合成
可直接执行的 Datamuse 查询函数。
"""

import logging
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

import requests
from box import Box

from rhymer.config import get_config
from rhymer.downloader.types import RelationTemplateRegistry
from rhymer.helpers.simple_retry import simple_retry
from rhymer.helpers.utils import normalize_word

logger = logging.getLogger(__name__)


class DatamuseSessionManager:
    """Datamuse HTTP 会话管理器（单例模式）"""

    _instance: Optional["DatamuseSessionManager"] = None
    _lock = Lock()

    def __init__(self):
        if DatamuseSessionManager._instance is not None:
            raise RuntimeError(
                "DatamuseSessionManager 是单例类，请使用 get_instance() 方法"
            )
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def get_instance(cls, user_agent: str = "rhymer") -> "DatamuseSessionManager":
        """获取单例实例，并把 User-Agent 更新为当前配置的值"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        cls._instance.session.headers["User-Agent"] = user_agent
        return cls._instance


class QueryBuilder:
    """Datamuse 查询构建器"""

    def __init__(
        self,
        config: Optional[Box] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config if config is not None else get_config()
        if session is None:
            session = DatamuseSessionManager.get_instance(
                self.config.api.get("user_agent", "rhymer")
            ).session
        self.session = session

    def build_params(self, relation: str, word: str, **overrides: Any) -> Dict[str, Any]:
        """合并查询参数：模板默认参数 + 关系参数 + 结果数上限 + 运行时覆盖"""
        try:
            template = RelationTemplateRegistry.get_template(relation)
        except KeyError:
            raise ValueError(f"不支持的关系类型: {relation}")

        params: Dict[str, Any] = {}
        params.update(template.default_params)
        params[template.query_param] = normalize_word(word)
        params["max"] = self.config.api.max_results
        params.update(overrides)
        return params

    def build_by_relation(
        self, relation: str, word: str, **overrides: Any
    ) -> Callable[[], List[Dict[str, Any]]]:
        """构建指定关系类型的查询函数

        Args:
            relation: 关系类型，如 rhymes、synonyms
            word: 查询的单词
            **overrides: 运行时参数，覆盖模板中的同名参数

        Returns:
            可执行的查询函数，返回 Datamuse 记录列表
        """
        params = self.build_params(relation, word, **overrides)
        url = self.config.api.base_url
        timeout = self.config.api.timeout

        @simple_retry(
            max_retries=self.config.api.max_retries,
            delay=self.config.api.retry_delay,
            task_name=f"{relation}({normalize_word(word)})",
        )
        def execute() -> List[Dict[str, Any]]:
            """执行查询"""
            response = self.session.get(url, params=params, timeout=timeout)
            response.raise_for_status()
            records = response.json()
            if not isinstance(records, list):
                raise ValueError(
                    f"Datamuse 返回了非列表数据 - 关系: {relation}, 类型: {type(records).__name__}"
                )
            logger.debug(
                f"成功获取 {len(records)} 条记录 - 关系: {relation}, 参数: {params}"
            )
            return records

        return execute
