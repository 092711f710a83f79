"""一致性校验（第 3 层）

检查生成阶段自检结果是否与题目数据一致：
- 计算答案存在于选项中
- correct_option 指向计算答案
- 答案在其他选项时给出修正建议
- 自检状态
- 选项无重复
- 必填字段齐全

所有检查都会执行，与学科无关。
"""

import logging
from typing import List, Optional

from ..models.enums import Severity, VerificationStatus
from ..models.question import OPTION_KEYS, MathQuestion
from ..models.validation import CheckResult
from ..utils.answer_normalization import find_duplicates, normalize_answer


logger = logging.getLogger(__name__)


REQUIRED_OPTION_COUNT = 5


def find_option_for_answer(question: MathQuestion) -> Optional[str]:
    """返回值与计算答案一致的第一个选项键，没有则返回 None"""
    target = normalize_answer(question.computed_answer)
    for key, value in question.options.items():
        if normalize_answer(value) == target:
            return key
    return None


def validate_consistency(question: MathQuestion) -> List[CheckResult]:
    """
    校验答案、选项与 correct_option 之间的一致性

    Args:
        question: 待校验题目

    Returns:
        检查结果列表
    """
    results: List[CheckResult] = []
    option_values = list(question.options.values())
    computed = question.computed_answer

    # 检查 1: 计算答案存在于选项中
    matching_key = find_option_for_answer(question)
    answer_in_options = matching_key is not None

    results.append(
        CheckResult(
            check_name="answer_exists_in_options",
            passed=answer_in_options,
            details=(
                f'Computed answer "{computed}" found in options'
                if answer_in_options
                else f'Computed answer "{computed}" NOT found in options: [{", ".join(option_values)}]'
            ),
            severity=Severity.CRITICAL,
        )
    )

    # 检查 2: correct_option 指向计算答案
    selected_value = question.option_value(question.correct_option)
    option_matches_answer = selected_value is not None and normalize_answer(selected_value) == normalize_answer(
        computed
    )
    suggested_key = matching_key if answer_in_options and not option_matches_answer else None

    results.append(
        CheckResult(
            check_name="correct_option_matches_computed",
            passed=option_matches_answer,
            details=(
                f'Option {question.correct_option} ("{selected_value}") matches computed answer'
                if option_matches_answer
                else f'MISMATCH: Option {question.correct_option} is "{selected_value}" '
                f'but computed answer is "{computed}"'
            ),
            severity=Severity.CRITICAL,
            suggested_option_key=suggested_key,
        )
    )

    # 检查 3: 答案在其他选项中，给出修正建议
    if suggested_key is not None:
        results.append(
            CheckResult(
                check_name="suggested_correction",
                passed=False,
                details=f'correct_option should be "{suggested_key}" not "{question.correct_option}"',
                severity=Severity.ERROR,
                suggested_option_key=suggested_key,
            )
        )

    # 检查 4: 自检状态；非 VERIFIED 视为 error，会阻止通过
    status = question.verification.verification_status
    self_verified = status == VerificationStatus.VERIFIED
    status_text = status.value if status is not None else "MISSING"

    results.append(
        CheckResult(
            check_name="self_verification_status",
            passed=self_verified,
            details="Self-verification passed" if self_verified else f"Self-reported status: {status_text}",
            severity=Severity.WARNING if self_verified else Severity.ERROR,
        )
    )

    # 检查 5: 选项无重复
    normalized_options = [normalize_answer(v) for v in option_values]
    duplicates = find_duplicates(normalized_options)

    results.append(
        CheckResult(
            check_name="no_duplicate_options",
            passed=not duplicates,
            details=(
                "All options are unique"
                if not duplicates
                else f"Duplicate options detected: {', '.join(duplicates)}"
            ),
            severity=Severity.ERROR,
        )
    )

    # 检查 6: 必填字段齐全
    missing = [
        name
        for name in ("question_id", "subject", "topic", "question_text", "computed_answer", "correct_option")
        if not str(getattr(question, name) or "").strip()
    ]
    option_count = len(question.options)
    unknown_keys = [key for key in question.options if key not in OPTION_KEYS]
    empty_options = [key for key, value in question.options.items() if not str(value or "").strip()]
    has_required_fields = (
        not missing and option_count == REQUIRED_OPTION_COUNT and not unknown_keys and not empty_options
    )

    if has_required_fields:
        fields_details = "All required fields present"
    else:
        problems = [f"missing: {', '.join(missing)}"] if missing else []
        if option_count != REQUIRED_OPTION_COUNT:
            problems.append(f"expected {REQUIRED_OPTION_COUNT} options, got {option_count}")
        if unknown_keys:
            problems.append(f"unexpected option keys: {', '.join(unknown_keys)}")
        if empty_options:
            problems.append(f"empty options: {', '.join(empty_options)}")
        fields_details = f"Missing required fields ({'; '.join(problems)})"

    results.append(
        CheckResult(
            check_name="required_fields_present",
            passed=has_required_fields,
            details=fields_details,
            severity=Severity.CRITICAL,
        )
    )

    failed = [r.check_name for r in results if not r.passed]
    if failed:
        logger.debug(f"[Consistency] question={question.question_id} 未通过: {failed}")

    return results
