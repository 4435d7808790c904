"""下载器接口定义

定义下载器相关的接口规范。"""

from typing import Any, Dict, List, Optional, Protocol


class IDownloader(Protocol):
    """下载器接口

    专注于网络I/O和数据获取，不处理业务逻辑。
    """

    def download(
        self, relation: str, word: str, **kwargs
    ) -> Optional[List[Dict[str, Any]]]:
        """执行下载任务

        Args:
            relation: 关系类型字符串
            word: 查询的单词

        Returns:
            Optional[List[Dict[str, Any]]]: Datamuse 记录列表，失败时返回 None
        """
        ...
