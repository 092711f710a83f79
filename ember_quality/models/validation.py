"""校验结果数据模型"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .enums import Severity
from .question import MathQuestion


class CheckResult(BaseModel):
    """单项检查结果"""

    check_name: str = Field(..., description="检查项名称")
    passed: bool
    details: str = ""
    severity: Severity
    # 结构化的修正提示：答案存在于其他选项时给出应选的键
    suggested_option_key: Optional[str] = None


class ValidationIssue(BaseModel):
    """阻塞性错误（critical / error 失败项）"""

    code: str
    message: str
    field: str
    expected: Optional[str] = None
    received: Optional[str] = None
    auto_fixable: bool = False
    suggested_fix: Optional[str] = None


class ValidationWarning(BaseModel):
    """非阻塞提示"""

    code: str
    message: str


class ValidationResult(BaseModel):
    """单题校验结果"""

    question_id: str
    passed: bool
    checks: List[CheckResult] = Field(default_factory=list)
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationWarning] = Field(default_factory=list)
    corrected_data: Optional[Dict[str, Any]] = None

    @property
    def auto_corrected(self) -> bool:
        return self.corrected_data is not None

    def to_record(self) -> Dict[str, Any]:
        """转为 question_validations 表的行结构"""
        return {
            "question_id": self.question_id,
            "passed": self.passed,
            "checks": [c.model_dump(mode="json") for c in self.checks],
            "errors": [e.model_dump(mode="json") for e in self.errors],
            "warnings": [w.model_dump(mode="json") for w in self.warnings],
            "auto_corrected": self.auto_corrected,
            "corrections_applied": self.corrected_data,
        }


class BatchValidationResult(BaseModel):
    """批量校验结果"""

    total: int = Field(..., ge=0)
    passed: List[MathQuestion] = Field(default_factory=list)
    failed: List[ValidationResult] = Field(default_factory=list)
    auto_corrected: int = Field(0, ge=0)
