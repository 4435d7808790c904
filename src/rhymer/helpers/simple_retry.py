"""简化的重试机制

基于KISS原则，只处理两种核心场景：
1. 网络抖动（连接错误、超时、5xx）: 固定延迟后重试
2. 其他错误（4xx、数据格式错误等）: 不重试，直接抛出
"""

import time
import logging
from functools import wraps
from typing import Callable, Any

import requests

logger = logging.getLogger(__name__)


def is_retryable(error: Exception) -> bool:
    """判断错误是否值得重试"""
    if isinstance(error, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(error, requests.HTTPError):
        response = error.response
        return response is not None and response.status_code >= 500
    return False


def simple_retry(
    max_retries: int = 3, delay: float = 1.0, task_name: str = "Unknown Task"
):
    """简化的重试装饰器

    Args:
        max_retries: 最大重试次数（不含首次调用）
        delay: 每次重试前的等待秒数
        task_name: 任务名称，用于日志
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as error:
                    if not is_retryable(error):
                        logger.warning(f"[不可重试] {task_name} - 错误: {error}")
                        raise

                    if attempt >= max_retries:
                        logger.error(
                            f"[重试失败] {task_name} 超过最大重试次数 - 最后错误: {error}"
                        )
                        raise

                    logger.warning(
                        f"[重试] {task_name} 第{attempt + 1}次失败，准备重试 - 错误: {error}"
                    )
                    time.sleep(delay)

        return wrapper

    return decorator
