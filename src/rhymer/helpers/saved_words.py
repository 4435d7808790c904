"""已保存单词列表

应用状态对象：有序、不重复的单词列表，可选地持久化为 JSON 文件。
"""

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = "(none)"


class SavedWords:
    """已保存单词列表

    按保存顺序记录单词，同一个单词只保存一次。
    指定 path 时可通过 load()/save() 读写 ``{"words": [...]}`` 格式的文件。
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self._words: List[str] = []

    def add(self, word: str) -> bool:
        """保存单词

        Returns:
            bool: 新增返回 True，已存在返回 False
        """
        if word in self._words:
            return False
        self._words.append(word)
        logger.debug(f"Saved word: {word}")
        return True

    def remove(self, word: str) -> bool:
        if word not in self._words:
            return False
        self._words.remove(word)
        return True

    def clear(self) -> None:
        self._words.clear()

    @property
    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def render(self) -> str:
        """渲染为逗号分隔的字符串，列表为空时返回 "(none)" """
        if not self._words:
            return EMPTY_PLACEHOLDER
        return ", ".join(self._words)

    def load(self) -> "SavedWords":
        """从文件加载单词列表

        文件不存在时得到空列表。

        Raises:
            ValueError: 文件内容不是合法的单词列表
        """
        if self.path is None:
            raise ValueError("未指定保存文件路径")

        if not self.path.exists():
            logger.debug(f"Saved words file not found, starting empty: {self.path}")
            self._words = []
            return self

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"无法解析保存文件 {self.path}: {e}")

        words = data.get("words") if isinstance(data, dict) else None
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ValueError(f"保存文件格式错误: {self.path}")

        self._words = []
        for word in words:
            self.add(word)
        logger.debug(f"Loaded {len(self._words)} saved words from {self.path}")
        return self

    def save(self) -> None:
        """把单词列表写回文件"""
        if self.path is None:
            raise ValueError("未指定保存文件路径")

        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True)

        with self.path.open("w", encoding="utf-8") as f:
            json.dump({"words": self._words}, f, ensure_ascii=False, indent=2)
        logger.debug(f"Wrote {len(self._words)} saved words to {self.path}")
