"""Ember Score 数据模型

题目评分的输入与输出。字段使用 snake_case，同时接受 camelCase 别名，
方便直接传入题库查询得到的记录。
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import ScoreTier


# 各分项满分
CURRICULUM_MAX = 40
EXPERT_MAX = 40
COMMUNITY_MAX = 20
TOTAL_MAX = 100


class ScoringInput(BaseModel):
    """评分输入（题目的评分视图）"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "q123",
                "curriculumReference": "KS2 English Y5 Vocabulary",
                "reviewStatus": "reviewed",
                "totalAttempts": 500,
                "errorReportCount": 0,
                "helpfulVotes": 10,
            }
        },
    )

    id: str = Field(..., description="题目 ID")
    curriculum_reference: Optional[str] = Field(
        None, alias="curriculumReference", description="国家课程标准引用"
    )
    review_status: Optional[str] = Field(None, alias="reviewStatus", description="审核状态")
    total_attempts: int = Field(0, alias="totalAttempts", description="累计作答次数")
    error_report_count: int = Field(0, alias="errorReportCount", description="未解决的错误报告数")
    helpful_votes: int = Field(0, alias="helpfulVotes", description="有用投票数")
    not_helpful_votes: int = Field(0, alias="notHelpfulVotes", description="无用投票数（不计分）")

    @field_validator(
        "total_attempts",
        "error_report_count",
        "helpful_votes",
        "not_helpful_votes",
        mode="before",
    )
    @classmethod
    def _none_as_zero(cls, value):
        # 统计视图缺行时为 null
        return 0 if value is None else value


class ScoreBreakdown(BaseModel):
    """分项得分"""

    model_config = ConfigDict(populate_by_name=True)

    curriculum_alignment: float = Field(
        ..., alias="curriculumAlignment", ge=0, le=CURRICULUM_MAX, description="课程对齐 (0-40)"
    )
    expert_verification: float = Field(
        ..., alias="expertVerification", ge=0, le=EXPERT_MAX, description="专家审核 (0-40)"
    )
    community_feedback: float = Field(
        ..., alias="communityFeedback", ge=0, le=COMMUNITY_MAX, description="社区反馈 (0-20)"
    )

    @property
    def total(self) -> float:
        return self.curriculum_alignment + self.expert_verification + self.community_feedback


class ScoreResult(BaseModel):
    """评分结果"""

    model_config = ConfigDict(populate_by_name=True)

    score: float = Field(..., ge=0, le=TOTAL_MAX, description="Ember Score (0-100)")
    breakdown: ScoreBreakdown
    tier: ScoreTier
    last_calculated: datetime = Field(..., alias="lastCalculated", description="计算时间")


class TierInfo(BaseModel):
    """等级展示信息"""

    label: str
    description: str
    color: str
    flames: int = Field(..., ge=1, le=3)


class BreakdownEntry(BaseModel):
    """分项展示条目"""

    model_config = ConfigDict(populate_by_name=True)

    component: str
    score: float
    max_score: int = Field(..., alias="maxScore")
    percentage: int
