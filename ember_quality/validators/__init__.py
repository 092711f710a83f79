"""题目校验器"""

from .consistency import validate_consistency, find_option_for_answer
from .arithmetic import validate_arithmetic
from .fractions import validate_fractions

__all__ = [
    "validate_consistency",
    "find_option_for_answer",
    "validate_arithmetic",
    "validate_fractions",
]
