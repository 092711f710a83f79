"""服务层"""

from .curriculum_reference import (
    CurriculumMatch,
    classify_curriculum_reference,
    is_key_stage_reference,
    is_year_group_reference,
)
from .ember_score import (
    calculate_ember_score,
    calculate_curriculum_score,
    calculate_expert_score,
    calculate_community_score,
    get_score_tier,
    get_tier_info,
    format_score_breakdown,
    is_publishable,
)
from .validation_pipeline import (
    validate_question,
    validate_question_sync,
    validate_batch,
    run_checks,
    reduce_passed,
    is_blocking,
    map_check_to_field,
    attempt_auto_correction,
    apply_corrections,
)
from .validation_report import generate_validation_report, generate_batch_report

__all__ = [
    "CurriculumMatch",
    "classify_curriculum_reference",
    "is_key_stage_reference",
    "is_year_group_reference",
    "calculate_ember_score",
    "calculate_curriculum_score",
    "calculate_expert_score",
    "calculate_community_score",
    "get_score_tier",
    "get_tier_info",
    "format_score_breakdown",
    "is_publishable",
    "validate_question",
    "validate_question_sync",
    "validate_batch",
    "run_checks",
    "reduce_passed",
    "is_blocking",
    "map_check_to_field",
    "attempt_auto_correction",
    "apply_corrections",
    "generate_validation_report",
    "generate_batch_report",
]
