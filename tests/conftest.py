import pytest
from unittest.mock import MagicMock
from box import Box
import sys
import os
import copy

# 确保测试环境下可以直接从 src 导入包
_SRC_ROOT = os.path.join(os.path.dirname(os.path.dirname(__file__)), "src")
if _SRC_ROOT not in sys.path:
    sys.path.insert(0, _SRC_ROOT)

from rhymer.config import DEFAULT_CONFIG, clear_config_cache  # noqa: E402


@pytest.fixture
def rhyme_records():
    """Datamuse rel_rhy&md=s 接口返回的样例数据"""
    return [
        {"word": "cat", "score": 4000, "numSyllables": 1},
        {"word": "acrobat", "score": 3000, "numSyllables": 3},
        {"word": "hat", "score": 2500, "numSyllables": 1},
        {"word": "combat", "score": 2000, "numSyllables": 2},
        {"word": "democrat", "score": 1500, "numSyllables": 3},
    ]


@pytest.fixture
def synonym_records():
    """Datamuse rel_syn 接口返回的样例数据"""
    return [
        {"word": "glad", "score": 1200},
        {"word": "felicitous", "score": 900},
    ]


@pytest.fixture
def settings():
    """测试用配置：不等待重试，便于断言"""
    config = Box(copy.deepcopy(DEFAULT_CONFIG))
    config.api.retry_delay = 0
    return config


@pytest.fixture
def mock_downloader(rhyme_records):
    """一个可供所有测试使用的、模拟的下载器实例。"""
    downloader = MagicMock()
    downloader.download.return_value = rhyme_records
    return downloader


@pytest.fixture(autouse=True)
def isolated_config_cache():
    """每个测试前后清空配置缓存"""
    clear_config_cache()
    yield
    clear_config_cache()
