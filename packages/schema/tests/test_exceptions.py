"""异常体系单元测试"""

from eventmodeling.schema.exceptions import (
    ConstraintError,
    DiscriminatorError,
    EventModelingError,
    ModelValidationError,
    SchemaExportError,
    ShapeError,
    Violation,
)


class TestExceptionHierarchy:
    """异常继承关系与携带的信息"""

    def test_validation_errors_share_base(self):
        """三类校验异常都继承 ModelValidationError"""
        for cls in (DiscriminatorError, ShapeError, ConstraintError):
            assert issubclass(cls, ModelValidationError)
            assert issubclass(cls, EventModelingError)

    def test_export_error_is_not_validation_error(self):
        """导出失败不属于文档校验失败"""
        assert issubclass(SchemaExportError, EventModelingError)
        assert not issubclass(SchemaExportError, ModelValidationError)

    def test_discriminator_error_message(self):
        """DiscriminatorError 描述出错的标签与可选值"""
        error = DiscriminatorError("slices[2]", "query", ("stateChange", "stateView"))
        assert error.path == "slices[2]"
        assert error.value == "query"
        assert error.accepted == ("stateChange", "stateView")
        assert "'query'" in str(error)
        assert "stateChange, stateView" in str(error)

    def test_discriminator_error_missing_tag(self):
        """标签缺失时 value 为 None"""
        error = DiscriminatorError("", None, ("command",), missing=True)
        assert error.value is None
        assert error.missing is True
        assert str(error).startswith("<root>:")
        assert "缺少 type 标签" in str(error)

    def test_discriminator_error_null_tag(self):
        """显式 null 标签按未知值描述"""
        error = DiscriminatorError("slices[0]", None, ("stateChange",))
        assert error.missing is False
        assert "未知的 type 标签 None" in str(error)

    def test_shape_error_carries_violations(self):
        """ShapeError 保存全部违规"""
        violations = [
            Violation(path="command", kind="missing", message="Field required"),
            Violation(path="stream", kind="missing", message="Field required"),
        ]
        error = ShapeError("command", "missing", "Field required", violations)
        assert error.kind == "missing"
        assert len(error.violations) == 2
        assert str(error) == "command: Field required"

    def test_constraint_error(self):
        """ConstraintError 保存不变量文本"""
        error = ConstraintError("slices[0].invariants[0]", "Email must be unique")
        assert error.invariant == "Email must be unique"
        assert error.violations == ()

    def test_schema_export_error(self):
        """SchemaExportError 保存定义名称与原因"""
        error = SchemaExportError("broken", "unsupported type")
        assert error.definition == "broken"
        assert error.reason == "unsupported type"
        assert "broken" in str(error)
