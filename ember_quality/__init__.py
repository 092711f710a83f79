"""Ember 题目质量核心

- Ember Score 计算（课程对齐 / 专家审核 / 社区反馈）
- 题目校验流水线（一致性、算术、分数校验，自动修正与批量报告）
"""

from .models import (
    Severity,
    ReviewStatus,
    ScoreTier,
    AnswerFormat,
    ScoringInput,
    ScoreBreakdown,
    ScoreResult,
    MathQuestion,
    CheckResult,
    ValidationIssue,
    ValidationWarning,
    ValidationResult,
    BatchValidationResult,
)
from .services import (
    calculate_ember_score,
    get_score_tier,
    get_tier_info,
    format_score_breakdown,
    is_publishable,
    validate_question,
    validate_question_sync,
    validate_batch,
    generate_validation_report,
    generate_batch_report,
)
from .utils import (
    normalize_answer,
    parse_question,
    parse_questions,
    parse_scoring_input,
    PayloadValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "Severity",
    "ReviewStatus",
    "ScoreTier",
    "AnswerFormat",
    "ScoringInput",
    "ScoreBreakdown",
    "ScoreResult",
    "MathQuestion",
    "CheckResult",
    "ValidationIssue",
    "ValidationWarning",
    "ValidationResult",
    "BatchValidationResult",
    "calculate_ember_score",
    "get_score_tier",
    "get_tier_info",
    "format_score_breakdown",
    "is_publishable",
    "validate_question",
    "validate_question_sync",
    "validate_batch",
    "generate_validation_report",
    "generate_batch_report",
    "normalize_answer",
    "parse_question",
    "parse_questions",
    "parse_scoring_input",
    "PayloadValidationError",
]
