"""工具函数包"""

from .answer_normalization import normalize_answer, answers_equal, find_duplicates
from .expression import ExpressionError, evaluate_expression
from .number_parsing import (
    NumberParseError,
    simplify_fraction,
    to_mixed_number,
    parse_display_answer,
    parse_expected_result,
    round_half_up,
)
from .validation import PayloadValidationError, parse_question, parse_questions, parse_scoring_input
from .logging_setup import configure_logging

__all__ = [
    "normalize_answer",
    "answers_equal",
    "find_duplicates",
    "ExpressionError",
    "evaluate_expression",
    "NumberParseError",
    "simplify_fraction",
    "to_mixed_number",
    "parse_display_answer",
    "parse_expected_result",
    "round_half_up",
    "PayloadValidationError",
    "parse_question",
    "parse_questions",
    "parse_scoring_input",
    "configure_logging",
]
