"""题目校验流水线

协调各校验层：
- 第 3 层：一致性校验（答案与选项匹配），始终执行
- 第 2 层：计算校验（算术、分数），仅数学题执行

汇总检查结果为 errors / warnings，尝试自动修正，并支持批量校验。
所有函数只依赖入参，没有共享状态，可被调用方任意并发。
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..config.pipeline_settings import get_pipeline_settings
from ..models.enums import BLOCKING_SEVERITIES, Severity
from ..models.question import MathQuestion
from ..models.validation import (
    BatchValidationResult,
    CheckResult,
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
)
from ..validators.arithmetic import validate_arithmetic
from ..validators.consistency import find_option_for_answer, validate_consistency
from ..validators.fractions import validate_fractions


logger = logging.getLogger(__name__)


MATHEMATICS_SUBJECT = "Mathematics"

# 检查项 -> 题目字段
CHECK_FIELD_MAP: Dict[str, str] = {
    "answer_exists_in_options": "options",
    "correct_option_matches_computed": "correct_option",
    "suggested_correction": "correct_option",
    "computation_verification": "computational_verification.expression",
    "display_answer_verification": "computed_answer",
    "mixed_number_conversion": "computed_answer",
    "required_fields_present": "multiple",
    "has_verification_expression": "computational_verification",
}

AUTO_FIXABLE_CHECKS = frozenset({"suggested_correction", "correct_option_matches_computed"})


# ==================== 严重程度汇总 ====================


def is_blocking(severity: Severity) -> bool:
    """该严重程度的失败是否阻止通过"""
    return Severity(severity) in BLOCKING_SEVERITIES


def reduce_passed(checks: Iterable[CheckResult]) -> bool:
    """没有任何阻塞性失败时才算通过"""
    return not any(not c.passed and is_blocking(c.severity) for c in checks)


def map_check_to_field(check_name: str) -> str:
    """检查项名称映射到字段，未知名称原样返回"""
    return CHECK_FIELD_MAP.get(check_name, check_name)


def is_auto_fixable(check: CheckResult) -> bool:
    """
    失败项是否可自动修正

    suggested_correction 始终可修正；correct_option_matches_computed
    仅在答案存在于其他选项（带有 suggested_option_key）时可修正。
    """
    if check.check_name == "suggested_correction":
        return True
    return check.check_name in AUTO_FIXABLE_CHECKS and check.suggested_option_key is not None


def suggested_fix_for(check: CheckResult) -> Optional[str]:
    if check.suggested_option_key is None:
        return None
    return f'Set correct_option to "{check.suggested_option_key}"'


def _to_issue(check: CheckResult) -> ValidationIssue:
    return ValidationIssue(
        code=check.check_name.upper(),
        message=check.details,
        field=map_check_to_field(check.check_name),
        auto_fixable=is_auto_fixable(check),
        suggested_fix=suggested_fix_for(check),
    )


# ==================== 自动修正 ====================


def attempt_auto_correction(question: MathQuestion, errors: Sequence[ValidationIssue]) -> Optional[Dict[str, Any]]:
    """
    根据可修正错误生成补丁

    目前只有 correct_option 一条修正规则：改为值与计算答案一致的选项键。

    Returns:
        补丁字典；没有可落地的修正时返回 None（而不是空字典）
    """
    corrections: Dict[str, Any] = {}

    for error in errors:
        if error.auto_fixable and error.field == "correct_option" and "correct_option" not in corrections:
            correct_key = find_option_for_answer(question)
            if correct_key is not None:
                corrections["correct_option"] = correct_key

    return corrections or None


def apply_corrections(question: MathQuestion, corrected_data: Dict[str, Any]) -> MathQuestion:
    """浅合并补丁（补丁字段优先）"""
    return question.model_copy(update=corrected_data)


# ==================== 单题校验 ====================


def run_checks(question: MathQuestion) -> List[CheckResult]:
    """按顺序执行适用的校验器"""
    checks: List[CheckResult] = list(validate_consistency(question))

    if question.subject == MATHEMATICS_SUBJECT:
        checks.extend(validate_arithmetic(question))
        checks.extend(validate_fractions(question))

    return checks


def validate_question_sync(question: MathQuestion) -> ValidationResult:
    """同步版本的 validate_question"""
    checks = run_checks(question)

    # critical 在前，error 在后
    failures = [c for c in checks if not c.passed and c.severity == Severity.CRITICAL]
    failures += [c for c in checks if not c.passed and c.severity == Severity.ERROR]
    errors = [_to_issue(c) for c in failures]

    warnings = [
        ValidationWarning(code=c.check_name, message=c.details)
        for c in checks
        if not c.passed and not is_blocking(c.severity)
    ]

    corrected_data = None
    if any(e.auto_fixable for e in errors):
        corrected_data = attempt_auto_correction(question, errors)

    passed = reduce_passed(checks)

    if passed:
        logger.debug(f"[ValidationPipeline] question={question.question_id} 通过")
    else:
        logger.info(
            f"[ValidationPipeline] question={question.question_id} 未通过: "
            f"errors={[e.code for e in errors]} auto_fix={corrected_data is not None}"
        )

    return ValidationResult(
        question_id=question.question_id,
        passed=passed,
        checks=checks,
        errors=errors,
        warnings=warnings,
        corrected_data=corrected_data,
    )


async def validate_question(question: MathQuestion) -> ValidationResult:
    """
    单题全流程校验

    Args:
        question: 待校验题目

    Returns:
        ValidationResult
    """
    return validate_question_sync(question)


# ==================== 批量校验 ====================


async def validate_batch(
    questions: Sequence[MathQuestion],
    max_concurrency: Optional[int] = None,
) -> BatchValidationResult:
    """
    批量校验

    通过的题目原样加入 passed；可自动修正的题目合并补丁后加入 passed 并计数；
    其余题目的校验结果加入 failed。输出顺序与输入一致，只做一次修正，不重新校验。

    Args:
        questions: 题目列表
        max_concurrency: 并发上限，默认读取 EMBER_BATCH_CONCURRENCY

    Returns:
        BatchValidationResult
    """
    if max_concurrency is None:
        max_concurrency = get_pipeline_settings().batch_concurrency
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def validate_one(question: MathQuestion) -> ValidationResult:
        async with semaphore:
            return await validate_question(question)

    logger.info(f"[ValidationPipeline] 开始批量校验: total={len(questions)}")

    # gather 按输入顺序返回
    results = await asyncio.gather(*(validate_one(q) for q in questions))

    passed: List[MathQuestion] = []
    failed: List[ValidationResult] = []
    auto_corrected = 0

    for question, result in zip(questions, results):
        if result.passed:
            passed.append(question)
        elif result.corrected_data:
            passed.append(apply_corrections(question, result.corrected_data))
            auto_corrected += 1
        else:
            failed.append(result)

    logger.info(
        f"[ValidationPipeline] 批量校验完成: total={len(questions)} "
        f"passed={len(passed)} auto_corrected={auto_corrected} failed={len(failed)}"
    )

    return BatchValidationResult(
        total=len(questions),
        passed=passed,
        failed=failed,
        auto_corrected=auto_corrected,
    )
