"""国家课程标准引用分类

三档规则：
- 空 / None：NONE（0 分）
- 关键阶段前缀（KS1-KS4）或年级前缀（Y3-Y6 / Year 3-Year 6）：RECOGNIZED（40 分）
- 其他非空字符串：PARTIAL（20 分）
"""

import re
from enum import Enum
from typing import Optional


_KEY_STAGE_RE = re.compile(r"^KS[1-4]", re.IGNORECASE)
_YEAR_GROUP_RE = re.compile(r"^(?:Y[3-6]|Year [3-6])", re.IGNORECASE)


class CurriculumMatch(str, Enum):
    """课程引用匹配结果"""

    NONE = "none"
    PARTIAL = "partial"
    RECOGNIZED = "recognized"


def is_key_stage_reference(reference: str) -> bool:
    """是否为 "KS2 English Y5 ..." 形式的关键阶段引用"""
    return bool(_KEY_STAGE_RE.match(reference.strip()))


def is_year_group_reference(reference: str) -> bool:
    """是否为 "Y6 Maths ..." 或 "Year 6 ..." 形式的年级引用"""
    return bool(_YEAR_GROUP_RE.match(reference.strip()))


def classify_curriculum_reference(reference: Optional[str]) -> CurriculumMatch:
    """对课程引用分档"""
    if reference is None or not reference.strip():
        return CurriculumMatch.NONE
    if is_key_stage_reference(reference) or is_year_group_reference(reference):
        return CurriculumMatch.RECOGNIZED
    return CurriculumMatch.PARTIAL
