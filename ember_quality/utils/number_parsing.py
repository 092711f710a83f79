"""数值与分数解析工具

将答案字符串按声明的格式解析为 Fraction，并提供约分、带分数转换等辅助函数。
"""

import math
import re
from fractions import Fraction
from typing import Optional, Tuple, Union

from ..models.enums import AnswerFormat, ResultFormat


MIXED_NUMBER_RE = re.compile(r"(-?\d+)\s+(\d+)/(\d+)")
FRACTION_RE = re.compile(r"(-?\d+)/(\d+)")
FRACTION_CALL_RE = re.compile(r"Fraction\((-?\d+),\s*(-?\d+)\)")
RATIO_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*:\s*(-?\d+(?:\.\d+)?)\s*$")
_THOUSANDS_RE = re.compile(r"(?<=\d),(?=\d{3}(?:\D|$))")


class NumberParseError(ValueError):
    """答案字符串无法解析为数值"""

    pass


def greatest_common_divisor(a: int, b: int) -> int:
    """最大公约数（非负）"""
    return math.gcd(a, b)


def simplify_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    约分到最简形式

    Returns:
        (分子, 分母)，分母始终为正

    Raises:
        ValueError: 分母为 0
    """
    if denominator == 0:
        raise ValueError("denominator must not be zero")
    value = Fraction(numerator, denominator)
    return value.numerator, value.denominator


def to_mixed_number(numerator: int, denominator: int) -> Tuple[int, int, int]:
    """
    假分数转带分数

    负数按绝对值拆分后整体取负号，例如 -7/2 -> (-3, 1, 2)。

    Returns:
        (整数部分, 分子, 分母)
    """
    if denominator == 0:
        raise ValueError("denominator must not be zero")
    sign = -1 if (numerator < 0) != (denominator < 0) else 1
    num, den = abs(numerator), abs(denominator)
    return sign * (num // den), num % den, den


def _fraction(numerator: str, denominator: str) -> Fraction:
    try:
        return Fraction(int(numerator), int(denominator))
    except ZeroDivisionError as e:
        raise NumberParseError(f"Zero denominator in {numerator}/{denominator}") from e


def parse_number(text: Optional[str]) -> Fraction:
    """
    解析普通数值（整数、小数、a/b），忽略千分位逗号

    Raises:
        NumberParseError: 无法解析
    """
    if text is None:
        raise NumberParseError("No value")
    cleaned = _THOUSANDS_RE.sub("", str(text).strip())
    if not cleaned:
        raise NumberParseError("Empty value")
    try:
        return Fraction(cleaned)
    except (ValueError, ZeroDivisionError) as e:
        raise NumberParseError(f'Cannot parse "{text}" as a number') from e


def parse_mixed_number(text: str) -> Optional[Fraction]:
    """解析带分数 "1 5/35"，不匹配时返回 None"""
    match = MIXED_NUMBER_RE.search(text)
    if not match:
        return None
    whole, numerator, denominator = (int(g) for g in match.groups())
    if denominator == 0:
        raise NumberParseError(f'Zero denominator in "{text}"')
    magnitude = abs(whole) * denominator + numerator
    sign = -1 if match.group(1).startswith("-") else 1
    return Fraction(sign * magnitude, denominator)


def parse_expected_result(result: Optional[str], result_format: Union[ResultFormat, str, None]) -> Fraction:
    """
    解析生成阶段给出的期望结果

    分数格式支持 "Fraction(8, 7)" 与 "8/7" 两种写法，其余按普通数值解析。
    """
    text = (result or "").strip()
    if result_format == ResultFormat.FRACTION:
        match = FRACTION_CALL_RE.search(text) or FRACTION_RE.search(text)
        if match:
            return _fraction(match.group(1), match.group(2))
    return parse_number(text)


def parse_display_answer(answer: Optional[str], answer_format: Union[AnswerFormat, str, None]) -> Fraction:
    """
    按答案格式解析展示答案

    Raises:
        NumberParseError: 无法解析
    """
    text = (answer or "").strip()

    if answer_format in (AnswerFormat.MIXED_NUMBER, AnswerFormat.MIXED_NUMBER_UNSIMPLIFIED):
        mixed = parse_mixed_number(text)
        if mixed is not None:
            return mixed
    elif answer_format == AnswerFormat.FRACTION:
        match = FRACTION_RE.search(text)
        if match:
            return _fraction(match.group(1), match.group(2))
    elif answer_format == AnswerFormat.PERCENTAGE:
        return parse_number(text.replace("%", ""))
    elif answer_format == AnswerFormat.RATIO:
        match = RATIO_RE.match(text)
        if match:
            right = parse_number(match.group(2))
            if right == 0:
                raise NumberParseError(f'Zero right-hand side in ratio "{text}"')
            return parse_number(match.group(1)) / right

    return parse_number(text)


def values_match(left: Fraction, right: Fraction, *, exact: bool, tolerance: float) -> bool:
    """比较两个数值：exact 时要求完全相等，否则允许绝对误差"""
    if exact:
        return left == right
    return abs(left - right) < Fraction(tolerance)


def round_half_up(value: float) -> int:
    """四舍五入到整数（0.5 向上进位，不使用银行家舍入）"""
    return int(math.floor(value + 0.5))
