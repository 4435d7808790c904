import os
import logging
import warnings
from typing import Optional


def normalize_word(word: Optional[str]) -> str:
    """
    将用户输入的单词标准化：去掉首尾空白并转为小写。

    - `"  Orange "` -> `"orange"`
    - `None` -> `""`
    """
    if word is None:
        return ""
    if not isinstance(word, str):
        raise TypeError(f"单词必须是字符串，而不是 {type(word)}")
    return word.strip().lower()


def plural_suffix(count: int) -> str:
    """数量为 1 时返回空串，否则返回 "s" """
    return "" if count == 1 else "s"


def _setup_file_handler(log_type: str, log_level: str) -> None:
    """配置文件日志处理器"""
    # 如果 log_type 为空，则不配置文件处理器
    if not log_type:
        return

    log_dir = "logs"
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    log_filename = f"{log_type}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 清除现有处理器
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # 覆盖写入，每次运行只保留本次会话的日志
    file_handler = logging.FileHandler(
        filename=os.path.join(log_dir, log_filename),
        mode="w",
        encoding="utf-8",
    )
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # 添加会话分隔符
    log_file_path = os.path.join(log_dir, log_filename)
    try:
        with open(log_file_path, "a", encoding="utf-8") as f:
            f.write("\n==== new start here ====\n")
    except OSError:
        raise ValueError(f"无法写入日志文件: {log_file_path}")


def _configure_third_party_loggers(log_level: str) -> None:
    """配置第三方库的日志级别"""
    # 屏蔽第三方库的噪音日志
    for logger_name in ["urllib3", "requests", "charset_normalizer"]:
        logging.getLogger(logger_name).setLevel(logging.CRITICAL)

    # 限流器只保留警告以上
    logging.getLogger("pyrate_limiter").setLevel(logging.WARNING)

    warnings.filterwarnings("ignore", category=DeprecationWarning, module="dependency_injector")


def setup_logging(log_type: str, log_level: str = "INFO"):
    """配置日志记录

    Args:
        log_type: 日志类型，将作为日志文件名 (e.g., 'lookup', 'saved')
        log_level: 日志级别，支持 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'
    """
    _setup_file_handler(log_type, log_level.upper())
    _configure_third_party_loggers(log_level.upper())
