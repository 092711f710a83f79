"""
测试配置和共享 fixtures
"""

import copy
from typing import Any, Dict

import pytest

from ember_quality.config import get_pipeline_settings
from ember_quality.models import MathQuestion


VALID_QUESTION: Dict[str, Any] = {
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


def build_question(**overrides: Any) -> MathQuestion:
    """基于合法题目构造 MathQuestion，顶层字段可覆盖"""
    data = copy.deepcopy(VALID_QUESTION)
    data.update(overrides)
    return MathQuestion.model_validate(data)


@pytest.fixture
def clean_settings():
    """测试前后清空配置缓存"""
    get_pipeline_settings.cache_clear()
    yield
    get_pipeline_settings.cache_clear()


@pytest.fixture
def valid_question() -> MathQuestion:
    """全部检查通过的分数题"""
    return build_question()


@pytest.fixture
def question_factory():
    """题目构造函数"""
    return build_question


@pytest.fixture
def correctable_question() -> MathQuestion:
    """correct_option 指错，但答案在选项 c 中"""
    return build_question(
        options={"a": "7/12", "b": "41/70", "c": "1 6/35", "d": "6/35", "e": "1 1/35"},
        correct_option="a",
    )


@pytest.fixture
def integer_question() -> MathQuestion:
    """整数题"""
    return build_question(
        question_id="int-001",
        topic="Multiplication",
        subtopic="Two-digit by one-digit",
        question_text="What is 12 × 4 - 5?",
        working={"final_calculation": "48 - 5", "computed_result": "43"},
        answer_format="integer",
        computed_answer="43",
        options={"a": "43", "b": "53", "c": "38", "d": "48", "e": "42"},
        correct_option="a",
        verification={
            "computed_answer_matches_option": True,
            "matched_option_value": "43",
            "verification_status": "VERIFIED",
        },
        computational_verification={
            "expression": "12 × 4 - 5",
            "expected_result": "43",
            "result_format": "integer",
        },
    )
