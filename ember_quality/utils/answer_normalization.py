"""答案字符串规范化

选项与计算答案在比较前统一经过 normalize_answer。
"""

import re
from typing import Iterable, List, Optional


_WHITESPACE_RE = re.compile(r"\s+")
_MIXED_NUMBER_SPACING_RE = re.compile(r"(\d+)\s+(\d+/\d+)")
_TRAILING_DECIMAL_ZEROS_RE = re.compile(r"(\.\d*?)0+$")
_TRAILING_DOT_RE = re.compile(r"\.$")


def normalize_answer(answer: Optional[str]) -> str:
    """
    规范化答案字符串

    规则（顺序固定）：
    1. 转小写
    2. 连续空白折叠为单个空格
    3. 去除首尾空白
    4. 带分数整数部分与分数部分之间保留单个空格（"1  5/35" -> "1 5/35"）
    5. 去除小数末尾的 0（"2.50" -> "2.5"）
    6. 去除末尾孤立的小数点（"3." -> "3"）

    Args:
        answer: 原始答案，None 视为空串

    Returns:
        规范化后的字符串
    """
    if answer is None:
        return ""
    text = _WHITESPACE_RE.sub(" ", str(answer).lower()).strip()
    text = _MIXED_NUMBER_SPACING_RE.sub(r"\1 \2", text)
    text = _TRAILING_DECIMAL_ZEROS_RE.sub(r"\1", text, count=1)
    text = _TRAILING_DOT_RE.sub("", text, count=1)
    return text


def answers_equal(left: Optional[str], right: Optional[str]) -> bool:
    """规范化后比较两个答案"""
    return normalize_answer(left) == normalize_answer(right)


def find_duplicates(values: Iterable[str]) -> List[str]:
    """返回重复出现的值（按首次重复的顺序，去重）"""
    seen = set()
    duplicates: List[str] = []
    for item in values:
        if item in seen and item not in duplicates:
            duplicates.append(item)
        seen.add(item)
    return duplicates
