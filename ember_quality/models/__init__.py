"""数据模型包"""

from .enums import (
    Severity,
    BLOCKING_SEVERITIES,
    ReviewStatus,
    ScoreTier,
    AnswerFormat,
    FRACTION_FORMATS,
    MIXED_NUMBER_FORMATS,
    VerificationStatus,
    ResultFormat,
)
from .scoring import (
    ScoringInput,
    ScoreBreakdown,
    ScoreResult,
    TierInfo,
    BreakdownEntry,
    CURRICULUM_MAX,
    EXPERT_MAX,
    COMMUNITY_MAX,
    TOTAL_MAX,
)
from .question import (
    OPTION_KEYS,
    WorkingSteps,
    Verification,
    ComputationalVerification,
    MathQuestion,
)
from .validation import (
    CheckResult,
    ValidationIssue,
    ValidationWarning,
    ValidationResult,
    BatchValidationResult,
)

__all__ = [
    # 枚举
    "Severity",
    "BLOCKING_SEVERITIES",
    "ReviewStatus",
    "ScoreTier",
    "AnswerFormat",
    "FRACTION_FORMATS",
    "MIXED_NUMBER_FORMATS",
    "VerificationStatus",
    "ResultFormat",
    # 评分
    "ScoringInput",
    "ScoreBreakdown",
    "ScoreResult",
    "TierInfo",
    "BreakdownEntry",
    "CURRICULUM_MAX",
    "EXPERT_MAX",
    "COMMUNITY_MAX",
    "TOTAL_MAX",
    # 题目
    "OPTION_KEYS",
    "WorkingSteps",
    "Verification",
    "ComputationalVerification",
    "MathQuestion",
    # 校验结果
    "CheckResult",
    "ValidationIssue",
    "ValidationWarning",
    "ValidationResult",
    "BatchValidationResult",
]
