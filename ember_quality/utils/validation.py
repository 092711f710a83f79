"""入参结构校验工具

在进入评分 / 校验流水线之前，把外部传入的原始字典解析为类型化模型。
结构错误在这里抛出；语义问题交给流水线以检查项形式报告。
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from ..config.pipeline_settings import get_pipeline_settings
from ..models.question import MathQuestion
from ..models.scoring import ScoringInput


logger = logging.getLogger(__name__)


class PayloadValidationError(ValueError):
    """入参结构校验错误"""

    def __init__(self, message: str, issues: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.issues = issues or []


def _describe(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": ".".join(str(part) for part in err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


def parse_question(data: Mapping[str, Any]) -> MathQuestion:
    """
    解析单道题目

    Args:
        data: 原始题目字典

    Returns:
        MathQuestion

    Raises:
        PayloadValidationError: 不是字典或字段类型不合法
    """
    if isinstance(data, MathQuestion):
        return data
    if not isinstance(data, Mapping):
        raise PayloadValidationError(f"题目必须是对象，实际为 {type(data).__name__}")
    try:
        return MathQuestion.model_validate(dict(data))
    except ValidationError as e:
        issues = _describe(e)
        logger.warning(f"[PayloadValidation] 题目结构不合法: {issues}")
        raise PayloadValidationError("题目结构不合法", issues) from e


def parse_questions(items: Iterable[Mapping[str, Any]], max_size: Optional[int] = None) -> List[MathQuestion]:
    """
    解析一批题目

    Args:
        items: 原始题目列表
        max_size: 批量上限（默认读取 EMBER_MAX_BATCH_SIZE）

    Raises:
        PayloadValidationError: 批次为空、超过上限或任一题目结构不合法
    """
    raw = list(items)
    limit = max_size if max_size is not None else get_pipeline_settings().max_batch_size

    if not raw:
        raise PayloadValidationError("批次为空")
    if len(raw) > limit:
        raise PayloadValidationError(f"批次超出上限。最大允许: {limit}，实际数量: {len(raw)}")

    questions: List[MathQuestion] = []
    for index, item in enumerate(raw):
        try:
            questions.append(parse_question(item))
        except PayloadValidationError as e:
            issues = [{**issue, "index": index} for issue in e.issues]
            raise PayloadValidationError(f"第 {index} 道题目结构不合法", issues) from e
    return questions


def parse_scoring_input(row: Mapping[str, Any]) -> ScoringInput:
    """
    解析评分输入（支持 snake_case 与 camelCase 字段）

    Raises:
        PayloadValidationError: 字段类型不合法
    """
    if isinstance(row, ScoringInput):
        return row
    if not isinstance(row, Mapping):
        raise PayloadValidationError(f"评分输入必须是对象，实际为 {type(row).__name__}")
    try:
        return ScoringInput.model_validate(dict(row))
    except ValidationError as e:
        raise PayloadValidationError("评分输入结构不合法", _describe(e)) from e
