"""评分与校验流水线配置

从环境变量读取，首次访问后缓存；修改环境变量后需调用
get_pipeline_settings.cache_clear() 或 load_env_file()。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, TypeVar

from dotenv import load_dotenv


NumberT = TypeVar("NumberT", int, float)


def _read_env(
    name: str,
    default: NumberT,
    parse: Callable[[str], NumberT],
    *,
    floor: NumberT | None = None,
) -> NumberT:
    """读取数值环境变量；缺失或无法解析时用默认值，低于 floor 时取 floor"""
    raw = (os.getenv(name) or "").strip()
    try:
        value = parse(raw) if raw else default
    except ValueError:
        value = default
    if floor is None:
        return value
    return max(floor, value)


@dataclass(frozen=True)
class PipelineSettings:
    publish_threshold: float  # Ember Score 发布门槛
    numeric_tolerance: float  # 非分数格式的比较误差
    max_batch_size: int
    batch_concurrency: int


def load_env_file(path: str | None = None) -> bool:
    """加载 .env 文件并清空已缓存的配置"""
    loaded = load_dotenv(path) if path else load_dotenv()
    get_pipeline_settings.cache_clear()
    return loaded


@lru_cache(maxsize=1)
def get_pipeline_settings() -> PipelineSettings:
    return PipelineSettings(
        publish_threshold=_read_env("EMBER_PUBLISH_THRESHOLD", 60.0, float, floor=0.0),
        numeric_tolerance=_read_env("EMBER_NUMERIC_TOLERANCE", 0.0001, float, floor=0.0),
        max_batch_size=_read_env("EMBER_MAX_BATCH_SIZE", 100, int, floor=1),
        batch_concurrency=_read_env("EMBER_BATCH_CONCURRENCY", 8, int, floor=1),
    )
