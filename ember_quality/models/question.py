"""题目校验视图数据模型

描述生成阶段产出的数学选择题（五个选项 a-e）。
字符串字段缺省为空串、嵌套块可缺省：缺失的数据由校验器作为失败项报告，
而不是在解析时抛异常。
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import AnswerFormat, ResultFormat, VerificationStatus


OPTION_KEYS = ("a", "b", "c", "d", "e")


class WorkingSteps(BaseModel):
    """解题步骤

    除 final_calculation / computed_result 外，允许任意 step_N 字段。
    """

    model_config = ConfigDict(extra="allow")

    final_calculation: str = ""
    computed_result: str = ""


class Verification(BaseModel):
    """生成阶段的自检结果"""

    computed_answer_matches_option: bool = False
    matched_option_value: str = ""
    verification_status: Optional[VerificationStatus] = None


class ComputationalVerification(BaseModel):
    """可机器复算的表达式"""

    expression: str = ""
    expected_result: str = ""
    result_format: Optional[ResultFormat] = None


class MathQuestion(BaseModel):
    """数学题（校验视图）"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "question_id": "frac-001",
                "subject": "Mathematics",
                "topic": "Fractions",
                "subtopic": "Adding fractions",
                "difficulty": "Standard",
                "year_group": "Year 6",
                "question_text": "What is 3/5 + 4/7?",
                "working": {
                    "step_1": "Common denominator 35",
                    "final_calculation": "21/35 + 20/35",
                    "computed_result": "41/35",
                },
                "answer_format": "mixed_number_unsimplified",
                "computed_answer": "1 6/35",
                "options": {"a": "1 6/35", "b": "7/12", "c": "1 1/35", "d": "41/70", "e": "6/35"},
                "correct_option": "a",
                "verification": {
                    "computed_answer_matches_option": True,
                    "matched_option_value": "1 6/35",
                    "verification_status": "VERIFIED",
                },
                "computational_verification": {
                    "expression": "Fraction(3, 5) + Fraction(4, 7)",
                    "expected_result": "Fraction(41, 35)",
                    "result_format": "fraction",
                },
            }
        }
    )

    question_id: str = ""
    subject: str = ""
    topic: str = ""
    subtopic: str = ""
    difficulty: Optional[str] = None  # Foundation / Standard / Challenge
    year_group: Optional[str] = None  # Year 3 - Year 6
    question_text: str = ""
    working: WorkingSteps = Field(default_factory=WorkingSteps)
    answer_format: Optional[AnswerFormat] = None
    computed_answer: str = ""
    options: Dict[str, str] = Field(default_factory=dict)
    correct_option: str = ""
    verification: Verification = Field(default_factory=Verification)
    computational_verification: Optional[ComputationalVerification] = None

    def option_value(self, key: str) -> Optional[str]:
        """按键取选项值，键不存在时返回 None"""
        return self.options.get(key)
