"""Ember Score 计算服务

Ember Score (0-100) 衡量题目内容质量与可信度：
- 90-100: verified（专家审核 + 社区验证充分）
- 75-89: confident（已审核或社区验证较好）
- <75: draft（AI 生成，验证较少）

分项构成：
1. 课程对齐 (0-40)
   - 可识别的课程标准引用: 40
   - 其他非空引用: 20
   - 无引用: 0
2. 专家审核 (0-40)
   - reviewed: 40
   - spot_checked: 25
   - ai_only / 缺省 / 其他: 10
3. 社区反馈 (0-20)
   - 基础分 16
   - 有用投票: +0.5/票，上限 +4
   - 错误报告: -2/条
   - 无错误报告时按作答量加分: +0.1/100 次，上限 +4
   - 最终截断到 [0, 20]

等级与发布门槛是两回事：get_score_tier 只按 75 / 90 分档，
发布门槛（默认 60）由 is_publishable 单独判断。
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..config.pipeline_settings import get_pipeline_settings
from ..models.enums import ReviewStatus, ScoreTier
from ..models.scoring import (
    COMMUNITY_MAX,
    CURRICULUM_MAX,
    EXPERT_MAX,
    TOTAL_MAX,
    BreakdownEntry,
    ScoreBreakdown,
    ScoreResult,
    ScoringInput,
    TierInfo,
)
from ..utils.number_parsing import round_half_up
from .curriculum_reference import CurriculumMatch, classify_curriculum_reference


logger = logging.getLogger(__name__)


# 分项常量
PARTIAL_CURRICULUM_SCORE = 20
EXPERT_SCORES = {
    ReviewStatus.REVIEWED.value: 40,
    ReviewStatus.SPOT_CHECKED.value: 25,
    ReviewStatus.AI_ONLY.value: 10,
}
DEFAULT_EXPERT_SCORE = 10

COMMUNITY_BASE = 16
HELPFUL_VOTE_POINTS = 0.5
HELPFUL_BONUS_MAX = 4
ERROR_REPORT_PENALTY = 2
USAGE_POINTS_PER_100_ATTEMPTS = 0.1
USAGE_BONUS_MAX = 4

VERIFIED_THRESHOLD = 90
CONFIDENT_THRESHOLD = 75


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def calculate_curriculum_score(curriculum_reference: Optional[str]) -> int:
    """课程对齐分 (0 / 20 / 40)"""
    match = classify_curriculum_reference(curriculum_reference)
    if match == CurriculumMatch.RECOGNIZED:
        return CURRICULUM_MAX
    if match == CurriculumMatch.PARTIAL:
        return PARTIAL_CURRICULUM_SCORE
    return 0


def calculate_expert_score(review_status: Optional[str]) -> int:
    """专家审核分 (10 / 25 / 40)，未知状态按 ai_only 处理"""
    if isinstance(review_status, ReviewStatus):
        review_status = review_status.value
    return EXPERT_SCORES.get(review_status or "", DEFAULT_EXPERT_SCORE)


def calculate_community_score(
    total_attempts: int = 0,
    error_report_count: int = 0,
    helpful_votes: int = 0,
) -> float:
    """
    社区反馈分 (0-20)

    按顺序调整：有用投票加分 -> 错误报告扣分 -> 作答量加分。
    只要存在错误报告（error_report_count != 0），作答量加分整体取消。

    Args:
        total_attempts: 累计作答次数
        error_report_count: 错误报告数（负数视为数据异常，仍按公式计算后截断）
        helpful_votes: 有用投票数

    Returns:
        float: 截断到 [0, 20] 的分数，保留两位小数
    """
    score = float(COMMUNITY_BASE)

    score += _clamp(helpful_votes * HELPFUL_VOTE_POINTS, 0, HELPFUL_BONUS_MAX)

    score -= error_report_count * ERROR_REPORT_PENALTY

    if error_report_count == 0 and total_attempts > 0:
        usage_bonus = (total_attempts / 100) * USAGE_POINTS_PER_100_ATTEMPTS
        score += min(USAGE_BONUS_MAX, usage_bonus)

    return round(_clamp(score, 0, COMMUNITY_MAX), 2)


def calculate_ember_score(question: ScoringInput) -> ScoreResult:
    """
    计算题目的 Ember Score

    纯函数，不会抛异常；缺省字段按"无信号"处理。

    Args:
        question: 评分输入

    Returns:
        ScoreResult: 总分、分项、等级与计算时间

    Example:
        >>> result = calculate_ember_score(ScoringInput(
        ...     id="q123",
        ...     curriculum_reference="KS2 English Y5 Vocabulary",
        ...     review_status="reviewed",
        ...     total_attempts=500,
        ...     helpful_votes=10,
        ... ))
        >>> result.tier
        <ScoreTier.VERIFIED: 'verified'>
    """
    breakdown = ScoreBreakdown(
        curriculum_alignment=calculate_curriculum_score(question.curriculum_reference),
        expert_verification=calculate_expert_score(question.review_status),
        community_feedback=calculate_community_score(
            total_attempts=question.total_attempts,
            error_report_count=question.error_report_count,
            helpful_votes=question.helpful_votes,
        ),
    )

    score = round(_clamp(breakdown.total, 0, TOTAL_MAX), 2)
    tier = get_score_tier(score)

    logger.debug(
        f"[EmberScore] question={question.id} score={score} tier={tier.value} "
        f"breakdown={breakdown.model_dump()}"
    )

    return ScoreResult(
        score=score,
        breakdown=breakdown,
        tier=tier,
        last_calculated=datetime.now(timezone.utc),
    )


def get_score_tier(score: float) -> ScoreTier:
    """按总分分档：>=90 verified，>=75 confident，其余 draft"""
    if score >= VERIFIED_THRESHOLD:
        return ScoreTier.VERIFIED
    if score >= CONFIDENT_THRESHOLD:
        return ScoreTier.CONFIDENT
    return ScoreTier.DRAFT


_TIER_INFO = {
    ScoreTier.VERIFIED: TierInfo(
        label="Verified",
        description="Expert reviewed with strong community validation",
        color="blue",
        flames=3,
    ),
    ScoreTier.CONFIDENT: TierInfo(
        label="Confident",
        description="Reviewed or well-validated by the community",
        color="green",
        flames=2,
    ),
    ScoreTier.DRAFT: TierInfo(
        label="Draft",
        description="AI-generated, meets quality threshold",
        color="gray",
        flames=1,
    ),
}


def get_tier_info(tier: ScoreTier) -> TierInfo:
    """等级展示信息"""
    return _TIER_INFO[ScoreTier(tier)].model_copy()


def format_score_breakdown(breakdown: ScoreBreakdown) -> List[BreakdownEntry]:
    """分项得分转为展示列表，百分比四舍五入到整数"""
    components = [
        ("Curriculum Alignment", breakdown.curriculum_alignment, CURRICULUM_MAX),
        ("Expert Verification", breakdown.expert_verification, EXPERT_MAX),
        ("Community Feedback", breakdown.community_feedback, COMMUNITY_MAX),
    ]
    return [
        BreakdownEntry(
            component=name,
            score=score,
            max_score=max_score,
            percentage=round_half_up(score / max_score * 100),
        )
        for name, score, max_score in components
    ]


def is_publishable(result: ScoreResult, threshold: Optional[float] = None) -> bool:
    """
    是否达到发布门槛

    Args:
        result: 评分结果
        threshold: 门槛分，默认读取 EMBER_PUBLISH_THRESHOLD（60）
    """
    if threshold is None:
        threshold = get_pipeline_settings().publish_threshold
    return result.score >= threshold
