"""分数校验（第 2 层）

仅对 fraction / mixed_number / mixed_number_unsimplified 格式生效：
- 假分数 -> 带分数的转换是否正确
- 约分状态是否符合格式要求
"""

import re
from typing import List

from ..models.enums import AnswerFormat, MIXED_NUMBER_FORMATS, FRACTION_FORMATS, Severity
from ..models.question import MathQuestion
from ..models.validation import CheckResult
from ..utils.number_parsing import (
    FRACTION_RE,
    MIXED_NUMBER_RE,
    greatest_common_divisor,
    to_mixed_number,
)


_IMPROPER_FRACTION_RE = re.compile(r"(\d+)/(\d+)")


def validate_fractions(question: MathQuestion) -> List[CheckResult]:
    """
    校验分数运算与格式

    Args:
        question: 待校验题目

    Returns:
        检查结果列表（非分数题返回空列表）
    """
    results: List[CheckResult] = []
    answer_format = question.answer_format

    if answer_format not in FRACTION_FORMATS:
        return results

    if answer_format in MIXED_NUMBER_FORMATS:
        results.append(validate_mixed_number_conversion(question.working.computed_result, question.computed_answer))

    if answer_format == AnswerFormat.MIXED_NUMBER_UNSIMPLIFIED:
        results.append(validate_unsimplified(question.computed_answer))
    else:
        results.append(validate_simplified(question.computed_answer))

    return results


def validate_mixed_number_conversion(computed: str, displayed: str) -> CheckResult:
    """校验假分数到带分数的转换"""
    mixed_match = MIXED_NUMBER_RE.search(displayed or "")

    if not mixed_match:
        return CheckResult(
            check_name="mixed_number_format",
            passed=False,
            details=f'Cannot parse mixed number format: "{displayed}"',
            severity=Severity.ERROR,
        )

    whole, numerator, denominator = (int(g) for g in mixed_match.groups())

    improper_match = _IMPROPER_FRACTION_RE.search(computed or "")
    if not improper_match:
        return CheckResult(
            check_name="mixed_number_conversion",
            passed=True,
            details="Could not fully verify conversion, format appears correct",
            severity=Severity.WARNING,
        )

    original_num, original_den = int(improper_match.group(1)), int(improper_match.group(2))
    if original_den == 0:
        return CheckResult(
            check_name="mixed_number_conversion",
            passed=False,
            details=f"Working result {computed} has a zero denominator",
            severity=Severity.CRITICAL,
        )

    reconstructed = abs(whole) * denominator + numerator
    valid = reconstructed == original_num and denominator == original_den

    if valid:
        details = f"{computed} correctly converts to {displayed}"
    else:
        expected_whole, expected_num, expected_den = to_mixed_number(original_num, original_den)
        details = (
            f"Conversion error: {computed} should be {expected_whole} {expected_num}/{expected_den}, "
            f"got {displayed}"
        )

    return CheckResult(
        check_name="mixed_number_conversion",
        passed=valid,
        details=details,
        severity=Severity.ERROR,
    )


def validate_unsimplified(answer: str) -> CheckResult:
    """未约分格式：仅提示，不判失败"""
    match = FRACTION_RE.search(answer or "")

    if not match:
        return CheckResult(
            check_name="simplification_status",
            passed=True,
            details="No fraction component to check",
            severity=Severity.WARNING,
        )

    num, den = abs(int(match.group(1))), int(match.group(2))
    gcd = greatest_common_divisor(num, den)

    return CheckResult(
        check_name="simplification_status",
        passed=True,
        details=(
            f"Fraction {num}/{den} is unsimplified (GCD={gcd}), as expected for this format"
            if gcd > 1
            else f"Fraction {num}/{den} is already in simplest form (might not be intentional for unsimplified format)"
        ),
        severity=Severity.WARNING,
    )


def validate_simplified(answer: str) -> CheckResult:
    """fraction / mixed_number 格式：分数部分必须是最简形式"""
    match = FRACTION_RE.search(answer or "")

    if not match:
        return CheckResult(
            check_name="simplification_status",
            passed=True,
            details="No fraction to check",
            severity=Severity.WARNING,
        )

    num, den = abs(int(match.group(1))), int(match.group(2))
    if den == 0:
        return CheckResult(
            check_name="simplification_status",
            passed=False,
            details=f"Fraction {num}/{den} has a zero denominator",
            severity=Severity.CRITICAL,
        )

    gcd = greatest_common_divisor(num, den)
    if gcd == 1:
        return CheckResult(
            check_name="simplification_status",
            passed=True,
            details=f"Fraction {num}/{den} is properly simplified",
            severity=Severity.WARNING,
        )

    return CheckResult(
        check_name="simplification_status",
        passed=False,
        details=f"Fraction {num}/{den} can be simplified further (GCD={gcd}). Should be {num // gcd}/{den // gcd}",
        severity=Severity.ERROR,
    )
