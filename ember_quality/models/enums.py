"""枚举类型定义"""

from enum import Enum


class Severity(str, Enum):
    """校验项严重程度

    CRITICAL / ERROR 失败会阻止题目通过，WARNING 仅提示。
    """

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"


# 失败时会阻止 passed 的严重程度
BLOCKING_SEVERITIES = frozenset({Severity.CRITICAL, Severity.ERROR})


class ReviewStatus(str, Enum):
    """专家审核状态"""

    REVIEWED = "reviewed"  # 专家完整审核
    SPOT_CHECKED = "spot_checked"  # 抽查
    AI_ONLY = "ai_only"  # 仅 AI 生成
    UNREVIEWED = "unreviewed"


class ScoreTier(str, Enum):
    """Ember Score 等级"""

    VERIFIED = "verified"
    CONFIDENT = "confident"
    DRAFT = "draft"


class AnswerFormat(str, Enum):
    """答案格式"""

    INTEGER = "integer"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    MIXED_NUMBER = "mixed_number"
    MIXED_NUMBER_UNSIMPLIFIED = "mixed_number_unsimplified"
    PERCENTAGE = "percentage"
    RATIO = "ratio"


# 需要做分数校验的格式
FRACTION_FORMATS = frozenset(
    {AnswerFormat.FRACTION, AnswerFormat.MIXED_NUMBER, AnswerFormat.MIXED_NUMBER_UNSIMPLIFIED}
)
MIXED_NUMBER_FORMATS = frozenset({AnswerFormat.MIXED_NUMBER, AnswerFormat.MIXED_NUMBER_UNSIMPLIFIED})


class VerificationStatus(str, Enum):
    """生成阶段的自检状态"""

    VERIFIED = "VERIFIED"
    MISMATCH = "MISMATCH"
    ANSWER_NOT_IN_OPTIONS = "ANSWER_NOT_IN_OPTIONS"


class ResultFormat(str, Enum):
    """计算校验结果格式"""

    FRACTION = "fraction"
    DECIMAL = "decimal"
    INTEGER = "integer"
