"""词语关系相关类型定义

定义下载器与服务层共享的关系类型和查询模板。"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class RelationTemplate:
    """关系查询模板配置"""

    query_param: str
    title: str
    grouped_by: Optional[str] = None
    default_params: Dict[str, Any] = None

    def __post_init__(self):
        if self.default_params is None:
            object.__setattr__(self, "default_params", {})

    def format_title(self, word: str) -> str:
        return self.title.format(word=word)


class RelationType:
    """关系类型常量

    纯粹的关系类型标识，不包含具体的查询配置。
    配置信息由 RelationTemplateRegistry 管理。
    """

    # 押韵词
    rhymes = "rhymes"

    # 近似押韵词
    near_rhymes = "near_rhymes"

    # 同义词
    synonyms = "synonyms"

    # 反义词
    antonyms = "antonyms"

    # 意思相近的词
    means_like = "means_like"

    @classmethod
    def is_valid_relation(cls, relation: str) -> bool:
        """验证关系类型是否有效"""
        return relation in cls.get_all_relations()

    @classmethod
    def get_all_relations(cls) -> list[str]:
        """获取所有关系类型名称"""
        return [
            cls.rhymes,
            cls.near_rhymes,
            cls.synonyms,
            cls.antonyms,
            cls.means_like,
        ]


class RelationTemplateRegistry:
    """关系模板配置注册表

    管理关系类型与其对应的 RelationTemplate 配置的映射关系。
    押韵类查询附带 md=s，让 Datamuse 返回 numSyllables 字段。
    """

    _templates = {
        RelationType.rhymes: RelationTemplate(
            query_param="rel_rhy",
            title="Words that rhyme with {word}:",
            grouped_by="numSyllables",
            default_params={"md": "s"},
        ),
        RelationType.near_rhymes: RelationTemplate(
            query_param="rel_nry",
            title="Words that almost rhyme with {word}:",
            grouped_by="numSyllables",
            default_params={"md": "s"},
        ),
        RelationType.synonyms: RelationTemplate(
            query_param="rel_syn",
            title="Words with a meaning similar to {word}:",
        ),
        RelationType.antonyms: RelationTemplate(
            query_param="rel_ant",
            title="Words with a meaning opposite to {word}:",
        ),
        RelationType.means_like: RelationTemplate(
            query_param="ml",
            title="Words that mean something like {word}:",
        ),
    }

    @classmethod
    def get_template(cls, relation: str) -> RelationTemplate:
        """获取指定关系类型的模板配置

        Args:
            relation: 关系类型

        Returns:
            RelationTemplate: 对应的查询模板配置

        Raises:
            KeyError: 当关系类型不存在时
        """
        if relation not in cls._templates:
            raise KeyError(f"不支持的关系类型: {relation}")
        return cls._templates[relation]


__all__ = [
    "RelationType",
    "RelationTemplate",
    "RelationTemplateRegistry",
]
