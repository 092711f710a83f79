"""Ember Score 属性测试

使用 Hypothesis 验证评分的取值范围、等级一致性与单调性。
"""

import pytest
from hypothesis import given, settings, strategies as st

from ember_quality.models import ScoreTier, ScoringInput
from ember_quality.services.ember_score import (
    calculate_community_score,
    calculate_ember_score,
    get_score_tier,
)


TIER_RANK = {ScoreTier.DRAFT: 0, ScoreTier.CONFIDENT: 1, ScoreTier.VERIFIED: 2}


# ===== 策略定义 =====

curriculum_reference_strategy = st.one_of(
    st.none(),
    st.sampled_from(["KS2 English Y5 Vocabulary", "Year 6 Fractions", "Y3 Maths", "Maths", "KS5", ""]),
    st.text(max_size=30),
)

review_status_strategy = st.one_of(
    st.none(),
    st.sampled_from(["reviewed", "spot_checked", "ai_only", "unreviewed"]),
    st.text(max_size=12),
)


@st.composite
def scoring_input_strategy(draw) -> ScoringInput:
    """生成任意评分输入（计数允许为负，模拟脏数据）"""
    return ScoringInput(
        id=draw(st.text(min_size=1, max_size=8)),
        curriculum_reference=draw(curriculum_reference_strategy),
        review_status=draw(review_status_strategy),
        total_attempts=draw(st.integers(min_value=-1000, max_value=10_000_000)),
        error_report_count=draw(st.integers(min_value=-50, max_value=50)),
        helpful_votes=draw(st.integers(min_value=-100, max_value=1000)),
    )


# ===== 属性测试 =====


class TestEmberScoreProperties:
    """评分属性"""

    @given(question=scoring_input_strategy())
    @settings(max_examples=200)
    def test_score_within_bounds(self, question: ScoringInput):
        """任意输入的总分都在 [0, 100]，各分项在各自范围内"""
        result = calculate_ember_score(question)

        assert 0 <= result.score <= 100
        assert 0 <= result.breakdown.curriculum_alignment <= 40
        assert 0 <= result.breakdown.expert_verification <= 40
        assert 0 <= result.breakdown.community_feedback <= 20

    @given(question=scoring_input_strategy())
    @settings(max_examples=200)
    def test_tier_matches_score(self, question: ScoringInput):
        """等级由总分唯一决定，总分等于分项之和"""
        result = calculate_ember_score(question)

        assert result.tier == get_score_tier(result.score)
        assert result.score == pytest.approx(result.breakdown.total, abs=0.01)

    @given(
        low=st.floats(min_value=0, max_value=100, allow_nan=False),
        high=st.floats(min_value=0, max_value=100, allow_nan=False),
    )
    @settings(max_examples=200)
    def test_tier_is_monotonic(self, low: float, high: float):
        """分数越高，等级不会更低"""
        if low > high:
            low, high = high, low

        assert TIER_RANK[get_score_tier(low)] <= TIER_RANK[get_score_tier(high)]

    @given(
        attempts=st.integers(min_value=0, max_value=1_000_000),
        errors=st.integers(min_value=0, max_value=30),
        votes=st.integers(min_value=0, max_value=100),
    )
    @settings(max_examples=200)
    def test_error_reports_never_raise_community_score(self, attempts: int, errors: int, votes: int):
        """多一条错误报告，社区分不会上升"""
        more = calculate_community_score(total_attempts=attempts, error_report_count=errors + 1, helpful_votes=votes)
        fewer = calculate_community_score(total_attempts=attempts, error_report_count=errors, helpful_votes=votes)

        assert more <= fewer
