"""校验报告生成

输出供人工审阅的纯文本汇总。
"""

import logging
from typing import List, Sequence

from ..models.validation import BatchValidationResult, ValidationResult
from ..utils.number_parsing import round_half_up


logger = logging.getLogger(__name__)


def _percentage(count: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(count / total * 100)


def _render(total: int, passed: int, auto_corrected: int, failed_results: Sequence[ValidationResult]) -> str:
    failed = total - passed
    lines: List[str] = [
        "Validation Report",
        "================",
        f"Total Questions: {total}",
        f"Passed: {passed} ({_percentage(passed, total)}%)",
        f"Failed: {failed} ({_percentage(failed, total)}%)",
        f"Auto-Corrected: {auto_corrected}",
        "",
        "Failed Questions:",
    ]

    for result in failed_results:
        lines.append("")
        lines.append(f"Question ID: {result.question_id}")
        lines.append("Errors:")
        for error in result.errors:
            lines.append(f"  - [{error.code}] {error.message}")
            if error.suggested_fix:
                lines.append(f"    Fix: {error.suggested_fix}")

    return "\n".join(lines)


def generate_validation_report(results: Sequence[ValidationResult]) -> str:
    """
    生成校验汇总报告

    Args:
        results: 校验结果列表（可为空）

    Returns:
        多行文本报告
    """
    failed_results = [r for r in results if not r.passed]
    return _render(
        total=len(results),
        passed=len(results) - len(failed_results),
        auto_corrected=sum(1 for r in results if r.corrected_data),
        failed_results=failed_results,
    )


def generate_batch_report(batch: BatchValidationResult) -> str:
    """
    基于批量结果生成报告

    passed 中的题目（含已自动修正的）按通过计入，自动修正数取 batch.auto_corrected。
    """
    logger.debug(f"[ValidationReport] 批量报告: total={batch.total} failed={len(batch.failed)}")
    return _render(
        total=batch.total,
        passed=batch.total - len(batch.failed),
        auto_corrected=batch.auto_corrected,
        failed_results=batch.failed,
    )
