"""eventmodeling.schema 异常体系

校验失败分为判别标签错误、结构错误，以及保留的约束错误；
schema 导出失败属于致命配置错误。
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """单条结构违规"""

    path: str = Field(description="文档路径，如 slices[2].trigger.source，根为空串")
    kind: str = Field(description="违规类别（missing、string_type、union_tag_invalid 等）")
    message: str = Field(description="可读描述")


def _display(path: str) -> str:
    return path or "<root>"


class EventModelingError(Exception):
    """eventmodeling 包基础异常"""


class ModelValidationError(EventModelingError):
    """文档校验失败基础异常

    异常本身描述按遍历顺序遇到的第一条违规，
    violations 保存本次校验发现的全部违规。
    """

    def __init__(
        self,
        message: str,
        path: str = "",
        violations: Iterable[Violation] = (),
    ) -> None:
        """
        Args:
            message: 错误描述
            path: 第一条违规的文档路径
            violations: 全部违规
        """
        super().__init__(message)
        self.path = path
        self.violations: tuple[Violation, ...] = tuple(violations)


class DiscriminatorError(ModelValidationError):
    """type 标签缺失或不在可选值内

    标签先于其他字段检查，结构完整但标签未知的切片同样失败。
    """

    def __init__(
        self,
        path: str,
        value: object,
        accepted: Iterable[str],
        violations: Iterable[Violation] = (),
        missing: bool = False,
    ) -> None:
        """
        Args:
            path: 标签所在对象的路径
            value: 出错的标签值，缺失时为 None
            accepted: 可接受的标签字面量
            violations: 全部违规
            missing: 标签键不存在（区别于显式的 null 标签）
        """
        self.value = value
        self.missing = missing
        self.accepted: tuple[str, ...] = tuple(accepted)
        if missing:
            detail = "缺少 type 标签"
        else:
            detail = f"未知的 type 标签 {value!r}"
        super().__init__(
            f"{_display(path)}: {detail}，可选值: {', '.join(self.accepted)}",
            path=path,
            violations=violations,
        )


class ShapeError(ModelValidationError):
    """必填字段缺失、原始类型不符或枚举值越界"""

    def __init__(
        self,
        path: str,
        kind: str,
        detail: str,
        violations: Iterable[Violation] = (),
    ) -> None:
        """
        Args:
            path: 违规字段路径
            kind: 违规类别
            detail: 可读描述
            violations: 全部违规
        """
        self.kind = kind
        super().__init__(f"{_display(path)}: {detail}", path=path, violations=violations)


class ConstraintError(ModelValidationError):
    """领域不变量违规（保留）

    invariants 列表中的自由文本只作为文档声明，本引擎从不抛出此异常；
    留给在此之上执行不变量的扩展使用。
    """

    def __init__(self, path: str, invariant: str) -> None:
        self.invariant = invariant
        super().__init__(f"{_display(path)}: 违反不变量 -- {invariant}", path=path)


class SchemaExportError(EventModelingError):
    """交换 schema 导出失败

    属于致命配置错误：实体定义集合是静态的，不存在按调用恢复的路径。
    """

    def __init__(self, definition: str, reason: str) -> None:
        """
        Args:
            definition: 出错的定义名称
            reason: 失败原因
        """
        super().__init__(f"无法导出定义 {definition}: {reason}")
        self.definition = definition
        self.reason = reason
