"""精确有理数表达式求值

用于复算 computational_verification.expression。只允许算术语法，
所有数值以 fractions.Fraction 表示，避免浮点误差。

支持：
- 整数 / 小数字面量（小数按字符串精确转换）
- + - * / // % 与一元正负号、括号
- ** 或 ^ 乘方（仅整数指数）
- × ÷ − 等排版符号
- Fraction(a, b)、abs、min、max、round（0.5 远离零进位）

任何中间结果的分子或分母超过 MAX_RESULT_BITS 位都会被拒绝。
"""

import ast
import logging
import math
from fractions import Fraction
from typing import Callable, Dict


logger = logging.getLogger(__name__)


# 乘方指数与 round 位数上限
MAX_EXPONENT = 64
# 中间结果分子 / 分母的最大二进制位数
MAX_RESULT_BITS = 4096

_HALF = Fraction(1, 2)

_SYMBOL_REPLACEMENTS = {
    "×": "*",
    "÷": "/",
    "−": "-",
    "^": "**",
}


class ExpressionError(ValueError):
    """表达式无法求值"""

    pass


def _bit_size(value: Fraction) -> int:
    return max(abs(value.numerator).bit_length(), value.denominator.bit_length())


def _bounded(value: Fraction) -> Fraction:
    if _bit_size(value) > MAX_RESULT_BITS:
        raise ExpressionError(f"Intermediate result exceeds {MAX_RESULT_BITS} bits")
    return value


def _integer_argument(value: Fraction, name: str) -> int:
    if value.denominator != 1:
        raise ExpressionError(f"{name} must be an integer")
    if abs(value) > MAX_EXPONENT:
        raise ExpressionError(f"{name} {value} exceeds limit {MAX_EXPONENT}")
    return int(value)


def round_half_away_from_zero(value: Fraction, ndigits: int = 0) -> Fraction:
    """
    按位数四舍五入，0.5 远离零进位

    round(5/2) -> 3，round(-5/2) -> -3，round(0.125, 2) -> 0.13
    """
    scale = Fraction(10) ** ndigits
    magnitude = Fraction(math.floor(abs(value) * scale + _HALF)) / scale
    return -magnitude if value < 0 else magnitude


def _fraction_call(*args: Fraction) -> Fraction:
    if len(args) == 1:
        return Fraction(args[0])
    if len(args) == 2:
        if args[1] == 0:
            raise ExpressionError("Fraction denominator is zero")
        return Fraction(args[0]) / Fraction(args[1])
    raise ExpressionError("Fraction() takes one or two arguments")


def _round_call(*args: Fraction) -> Fraction:
    if len(args) == 1:
        return round_half_away_from_zero(args[0])
    if len(args) == 2:
        return round_half_away_from_zero(args[0], _integer_argument(args[1], "round() digits"))
    raise ExpressionError("round() takes one or two arguments")


def _variadic(func: Callable[..., Fraction], name: str) -> Callable[..., Fraction]:
    def call(*args: Fraction) -> Fraction:
        if not args:
            raise ExpressionError(f"{name}() needs at least one argument")
        return func(*args)

    return call


def _abs_call(*args: Fraction) -> Fraction:
    if len(args) != 1:
        raise ExpressionError("abs() takes exactly one argument")
    return abs(args[0])


_FUNCTIONS: Dict[str, Callable[..., Fraction]] = {
    "Fraction": _fraction_call,
    "fraction": _fraction_call,
    "abs": _abs_call,
    "min": _variadic(min, "min"),
    "max": _variadic(max, "max"),
    "round": _round_call,
}


def prepare_expression(expression: str) -> str:
    """将排版符号替换为 Python 运算符"""
    text = expression.strip()
    for symbol, replacement in _SYMBOL_REPLACEMENTS.items():
        text = text.replace(symbol, replacement)
    return text


def evaluate_expression(expression: str) -> Fraction:
    """
    精确求值算术表达式

    Args:
        expression: 表达式字符串，例如 "Fraction(3, 5) + Fraction(4, 7)" 或 "12 × 4 - 5"

    Returns:
        Fraction: 求值结果

    Raises:
        ExpressionError: 语法错误、包含不支持的语法、除以零、嵌套过深或数值过大
    """
    if not expression or not expression.strip():
        raise ExpressionError("Empty expression")

    source = prepare_expression(expression)
    logger.debug(f"[Expression] 求值: {source[:200]}")
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError as e:
        raise ExpressionError(f"Invalid syntax: {e.msg}") from e
    except (ValueError, RecursionError, MemoryError) as e:
        raise ExpressionError(f"Expression cannot be parsed: {type(e).__name__}") from e

    try:
        return _evaluate(tree.body)
    except ZeroDivisionError as e:
        raise ExpressionError("Division by zero") from e
    except (RecursionError, MemoryError, OverflowError) as e:
        raise ExpressionError(f"Expression too complex: {type(e).__name__}") from e


def _evaluate(node: ast.AST) -> Fraction:
    return _bounded(_evaluate_node(node))


def _power(base: Fraction, exponent: Fraction) -> Fraction:
    if exponent.denominator != 1:
        raise ExpressionError("Only integer exponents are supported")
    if abs(exponent) > MAX_EXPONENT:
        raise ExpressionError(f"Exponent {exponent} exceeds limit {MAX_EXPONENT}")
    # 先估算结果位数，再真正计算
    if (_bit_size(base) - 1) * abs(int(exponent)) > MAX_RESULT_BITS:
        raise ExpressionError(f"Intermediate result exceeds {MAX_RESULT_BITS} bits")
    return base ** int(exponent)


def _evaluate_node(node: ast.AST) -> Fraction:
    if isinstance(node, ast.Constant):
        value = node.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ExpressionError(f"Unsupported literal: {value!r}")
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ExpressionError(f"Non-finite literal: {value!r}")
            # 小数用 repr 转换，保持十进制精确值
            return Fraction(repr(value))
        return Fraction(value)

    if isinstance(node, ast.UnaryOp):
        operand = _evaluate(node.operand)
        if isinstance(node.op, ast.USub):
            return -operand
        if isinstance(node.op, ast.UAdd):
            return operand
        raise ExpressionError(f"Unsupported unary operator: {type(node.op).__name__}")

    if isinstance(node, ast.BinOp):
        left = _evaluate(node.left)
        right = _evaluate(node.right)
        op = node.op
        if isinstance(op, ast.Add):
            return left + right
        if isinstance(op, ast.Sub):
            return left - right
        if isinstance(op, ast.Mult):
            return left * right
        if isinstance(op, ast.Div):
            return left / right
        if isinstance(op, ast.FloorDiv):
            return Fraction(left // right)
        if isinstance(op, ast.Mod):
            return left % right
        if isinstance(op, ast.Pow):
            return _power(left, right)
        raise ExpressionError(f"Unsupported operator: {type(op).__name__}")

    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name) or node.func.id not in _FUNCTIONS:
            name = getattr(node.func, "id", type(node.func).__name__)
            raise ExpressionError(f"Unsupported function: {name}")
        if node.keywords:
            raise ExpressionError("Keyword arguments are not supported")
        args = [_evaluate(arg) for arg in node.args]
        return _FUNCTIONS[node.func.id](*args)

    raise ExpressionError(f"Unsupported syntax: {type(node).__name__}")
