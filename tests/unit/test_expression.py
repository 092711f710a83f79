"""表达式求值单元测试"""

from fractions import Fraction

import pytest

from ember_quality.utils.expression import (
    MAX_RESULT_BITS,
    ExpressionError,
    evaluate_expression,
    prepare_expression,
    round_half_away_from_zero,
)


class TestEvaluateExpression:
    """合法表达式"""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("Fraction(3, 5) + Fraction(4, 7)", Fraction(41, 35)),
            ("12 × 4 - 5", Fraction(43)),
            ("20 ÷ 8", Fraction(5, 2)),
            ("2^3", Fraction(8)),
            ("−3 + 5", Fraction(2)),
            ("0.1 + 0.2", Fraction(3, 10)),
            ("(2 + 3) * 4", Fraction(20)),
            ("7 // 2", Fraction(3)),
            ("7 % 3", Fraction(1)),
            ("2 ** -2", Fraction(1, 4)),
            ("abs(-3)", Fraction(3)),
            ("max(1, 5, 2)", Fraction(5)),
            ("min(4, Fraction(1, 2))", Fraction(1, 2)),
            ("round(2.567, 2)", Fraction(257, 100)),
            ("round(5/2)", Fraction(3)),
            ("round(-5/2)", Fraction(-3)),
            ("round(0.125, 2)", Fraction(13, 100)),
            ("round(1250, -2)", Fraction(1300)),
            ("(2**64)**2", Fraction(2**128)),
            ("Fraction(6)", Fraction(6)),
        ],
    )
    def test_exact_result(self, expression, expected):
        assert evaluate_expression(expression) == expected

    def test_prepare_expression_replaces_symbols(self):
        assert prepare_expression(" 3 × 4 ÷ 2 − 1 ") == "3 * 4 / 2 - 1"


class TestExpressionErrors:
    """非法表达式"""

    @pytest.mark.parametrize(
        "expression",
        [
            "",
            "   ",
            "1 +",
            "1 / 0",
            "Fraction(1, 0)",
            "0 ** -1",
            "x + 1",
            "__import__('os')",
            "'a' * 3",
            "True + 1",
            "2 ** 0.5",
            "2 ** 100",
            "abs(x=1)",
            "Fraction(1, 2, 3)",
            "max()",
            "1e309",
            "round(1, 10**60)",
            "round(1, 0.5)",
            "(10**64)**64",
            "9" * 2000,
            "1" + "+1" * 5000,
        ],
    )
    def test_raises_expression_error(self, expression):
        with pytest.raises(ExpressionError):
            evaluate_expression(expression)

    def test_division_by_zero_message(self):
        with pytest.raises(ExpressionError, match="Division by zero"):
            evaluate_expression("5 / (2 - 2)")

    def test_expression_error_is_value_error(self):
        assert issubclass(ExpressionError, ValueError)


class TestRoundHalfAwayFromZero:
    """round 的进位规则"""

    def test_halves_round_away_from_zero(self):
        assert round_half_away_from_zero(Fraction(5, 2)) == 3
        assert round_half_away_from_zero(Fraction(-5, 2)) == -3
        assert round_half_away_from_zero(Fraction(7, 2)) == 4

    def test_digits(self):
        assert round_half_away_from_zero(Fraction("0.125"), 2) == Fraction(13, 100)
        assert round_half_away_from_zero(Fraction("-0.125"), 2) == Fraction(-13, 100)
        assert round_half_away_from_zero(Fraction(1249), -2) == 1200


def test_result_size_limit():
    # 恰好在上限内的值可以求出
    assert evaluate_expression("2**64 * 2**64") == 2**128

    with pytest.raises(ExpressionError, match=str(MAX_RESULT_BITS)):
        evaluate_expression("(2**64)**64 * 2**64")
