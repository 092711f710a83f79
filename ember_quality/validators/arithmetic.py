"""算术校验（第 2 层）

复算 computational_verification.expression：
- 复算结果与生成阶段的 expected_result 对比
- 复算结果与展示答案 computed_answer 对比（按 answer_format 解析）

数值不一致为 error；表达式无法求值、除以零或期望结果无法解析为 critical。
"""

import logging
from fractions import Fraction
from typing import List, Optional

from ..config.pipeline_settings import get_pipeline_settings
from ..models.enums import FRACTION_FORMATS, ResultFormat, Severity
from ..models.question import MathQuestion
from ..models.validation import CheckResult
from ..utils.expression import ExpressionError, evaluate_expression
from ..utils.number_parsing import (
    NumberParseError,
    parse_display_answer,
    parse_expected_result,
    values_match,
)


logger = logging.getLogger(__name__)


# 详情中单个整数的最大显示位数
MAX_DISPLAY_DIGITS = 40


def _digits(number: int) -> str:
    text = str(number)
    if len(text) > MAX_DISPLAY_DIGITS:
        return f"{text[:12]}...({len(text)} digits)"
    return text


def format_value(value: Fraction) -> str:
    """Fraction 的可读形式：整数直接输出，其余输出 a/b (≈小数)，超长数字截断"""
    if value.denominator == 1:
        return _digits(value.numerator)
    text = f"{_digits(value.numerator)}/{_digits(value.denominator)}"
    try:
        return f"{text} (≈{float(value):.6g})"
    except OverflowError:
        return text


def validate_arithmetic(question: MathQuestion, tolerance: Optional[float] = None) -> List[CheckResult]:
    """
    校验数学题的计算正确性

    Args:
        question: 待校验题目
        tolerance: 非分数格式比较的绝对误差，默认读取 EMBER_NUMERIC_TOLERANCE

    Returns:
        检查结果列表
    """
    results: List[CheckResult] = []
    verification = question.computational_verification

    if verification is None or not verification.expression.strip():
        results.append(
            CheckResult(
                check_name="has_verification_expression",
                passed=False,
                details="No computational_verification.expression provided",
                severity=Severity.ERROR,
            )
        )
        return results

    if tolerance is None:
        tolerance = get_pipeline_settings().numeric_tolerance

    expression = verification.expression
    try:
        computed = evaluate_expression(expression)
        expected = parse_expected_result(verification.expected_result, verification.result_format)
    except (ExpressionError, NumberParseError) as e:
        logger.info(f"[Arithmetic] question={question.question_id} 无法复算: {e}")
        results.append(
            CheckResult(
                check_name="computation_execution",
                passed=False,
                details=f"Failed to evaluate expression: {e}",
                severity=Severity.CRITICAL,
            )
        )
        return results

    # 表达式结果 vs 生成阶段期望结果
    computation_matches = values_match(
        computed,
        expected,
        exact=verification.result_format == ResultFormat.FRACTION,
        tolerance=tolerance,
    )
    results.append(
        CheckResult(
            check_name="computation_verification",
            passed=computation_matches,
            details=(
                f'Expression "{expression}" = {format_value(computed)}'
                if computation_matches
                else f'Expression "{expression}" = {format_value(computed)}, '
                f"but expected result is {verification.expected_result}"
            ),
            severity=Severity.ERROR,
        )
    )

    # 表达式结果 vs 展示答案
    display_answer = question.computed_answer
    try:
        displayed = parse_display_answer(display_answer, question.answer_format)
        display_matches = values_match(
            computed,
            displayed,
            exact=question.answer_format in FRACTION_FORMATS,
            tolerance=tolerance,
        )
        display_details = (
            f'Computed result matches displayed answer "{display_answer}"'
            if display_matches
            else f'Computed {format_value(computed)} but displayed answer is "{display_answer}"'
        )
    except NumberParseError as e:
        display_matches = False
        display_details = f'Cannot interpret displayed answer "{display_answer}": {e}'

    results.append(
        CheckResult(
            check_name="display_answer_verification",
            passed=display_matches,
            details=display_details,
            severity=Severity.ERROR,
        )
    )

    return results
