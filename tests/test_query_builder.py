import pytest
import requests
from threading import Lock
from unittest.mock import Mock, patch

from rhymer.downloader.query_builder import DatamuseSessionManager, QueryBuilder
from rhymer.downloader.types import (
    RelationTemplate,
    RelationTemplateRegistry,
    RelationType,
)


def _response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} error", response=response
        )
    return response


class TestRelationTemplate:
    """测试 RelationTemplate 数据类"""

    def test_template_without_default_params(self):
        """测试没有默认参数的模板"""
        template = RelationTemplate(query_param="rel_syn", title="Similar to {word}:")
        assert template.default_params == {}
        assert template.grouped_by is None
        assert template.format_title("happy") == "Similar to happy:"

    def test_registry(self):
        """测试注册表中的内置模板"""
        rhymes = RelationTemplateRegistry.get_template(RelationType.rhymes)
        assert rhymes.query_param == "rel_rhy"
        assert rhymes.grouped_by == "numSyllables"
        assert RelationTemplateRegistry.get_template("synonyms").query_param == "rel_syn"

        with pytest.raises(KeyError):
            RelationTemplateRegistry.get_template("homophones")

    def test_relation_type_validation(self):
        """测试关系类型校验"""
        assert RelationType.is_valid_relation("rhymes")
        assert not RelationType.is_valid_relation("homophones")


class TestDatamuseSessionManager:
    """测试 DatamuseSessionManager 单例类"""

    def teardown_method(self):
        """测试后清理单例状态"""
        DatamuseSessionManager._instance = None
        DatamuseSessionManager._lock = Lock()

    def test_singleton_pattern(self):
        """测试单例模式"""
        DatamuseSessionManager._instance = None
        manager1 = DatamuseSessionManager.get_instance("agent")
        manager2 = DatamuseSessionManager.get_instance("agent")
        assert manager1 is manager2
        assert manager1.session.headers["User-Agent"] == "agent"

    def test_user_agent_follows_latest_config(self):
        """测试单例已存在时，新的 User-Agent 仍然生效"""
        DatamuseSessionManager._instance = None
        DatamuseSessionManager.get_instance("rhymer/0.1.0")

        manager = DatamuseSessionManager.get_instance("rhymer-test/2.0")

        assert manager.session.headers["User-Agent"] == "rhymer-test/2.0"

    def test_query_builder_uses_configured_user_agent(self, settings):
        """测试 QueryBuilder 按配置设置共享会话的 User-Agent"""
        DatamuseSessionManager._instance = None
        QueryBuilder(config=settings)
        settings.api.user_agent = "custom-agent"

        builder = QueryBuilder(config=settings)

        assert builder.session.headers["User-Agent"] == "custom-agent"

    def test_direct_construction_rejected(self):
        """测试单例创建后不能直接实例化"""
        DatamuseSessionManager._instance = None
        DatamuseSessionManager.get_instance()
        with pytest.raises(RuntimeError):
            DatamuseSessionManager()


class TestQueryBuilder:
    """测试 QueryBuilder"""

    def test_build_params_for_rhymes(self, settings):
        """测试押韵查询参数包含 md=s 和 max"""
        builder = QueryBuilder(config=settings, session=Mock())

        params = builder.build_params(RelationType.rhymes, "  Cat ")

        assert params == {"md": "s", "rel_rhy": "cat", "max": 100}

    def test_build_params_overrides(self, settings):
        """测试运行时参数覆盖模板参数"""
        builder = QueryBuilder(config=settings, session=Mock())

        params = builder.build_params(RelationType.synonyms, "happy", max=5)

        assert params == {"rel_syn": "happy", "max": 5}

    def test_unknown_relation(self, settings):
        """测试不支持的关系类型"""
        builder = QueryBuilder(config=settings, session=Mock())
        with pytest.raises(ValueError, match="不支持的关系类型"):
            builder.build_by_relation("homophones", "cat")

    def test_execute_returns_records(self, settings, rhyme_records):
        """测试执行查询返回记录列表"""
        session = Mock()
        session.get.return_value = _response(rhyme_records)
        builder = QueryBuilder(config=settings, session=session)

        fetcher = builder.build_by_relation(RelationType.rhymes, "cat")
        session.get.assert_not_called()

        assert fetcher() == rhyme_records
        session.get.assert_called_once_with(
            "https://api.datamuse.com/words",
            params={"md": "s", "rel_rhy": "cat", "max": 100},
            timeout=10,
        )

    def test_non_list_payload(self, settings):
        """测试返回非列表数据时报错"""
        session = Mock()
        session.get.return_value = _response({"error": "nope"})
        builder = QueryBuilder(config=settings, session=session)

        with pytest.raises(ValueError, match="非列表数据"):
            builder.build_by_relation(RelationType.synonyms, "cat")()
        session.get.assert_called_once()

    @patch("rhymer.helpers.simple_retry.time.sleep")
    def test_retries_transient_errors(self, mock_sleep, settings, synonym_records):
        """测试网络错误时重试"""
        session = Mock()
        session.get.side_effect = [
            requests.ConnectionError("reset"),
            _response([], status_code=502),
            _response(synonym_records),
        ]
        builder = QueryBuilder(config=settings, session=session)

        assert builder.build_by_relation(RelationType.synonyms, "happy")() == synonym_records
        assert session.get.call_count == 3

    def test_client_error_not_retried(self, settings):
        """测试 4xx 不重试"""
        session = Mock()
        session.get.return_value = _response([], status_code=400)
        builder = QueryBuilder(config=settings, session=session)

        with pytest.raises(requests.HTTPError):
            builder.build_by_relation(RelationType.rhymes, "cat")()
        session.get.assert_called_once()
