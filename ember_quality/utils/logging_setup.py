"""日志配置

库本身不在导入时配置日志，由调用方（脚本、服务入口）显式调用。
"""

import logging
import os
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """
    配置根日志

    Args:
        level: 日志级别名称，默认读取 LOG_LEVEL 环境变量（INFO）

    Returns:
        实际生效的日志级别数值
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    return level_value
