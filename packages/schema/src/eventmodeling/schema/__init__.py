"""Event Modeling Schema -- 实体定义、文档校验与交换 schema 导出

packages/schema 的公开接口导出。
"""

# 异常
from .exceptions import (
    ConstraintError,
    DiscriminatorError,
    EventModelingError,
    ModelValidationError,
    SchemaExportError,
    ShapeError,
    Violation,
)

# 导出
from .exporter import SCHEMA_DEFINITIONS, export_schema, render_schema_json

# 数据模型
from .models import (
    Automation,
    Command,
    Event,
    EventModel,
    GivenWhenThen,
    Message,
    MessageField,
    Slice,
    State,
    StateChange,
    StateView,
    Translation,
)

# 校验
from .validation import (
    dump_event_model,
    validate_event_model,
    validate_event_model_json,
    validate_given_when_then,
    validate_message,
    validate_slice,
)

__all__ = [
    "MessageField",
    "Command",
    "Event",
    "State",
    "Message",
    "GivenWhenThen",
    "StateChange",
    "StateView",
    "Automation",
    "Translation",
    "Slice",
    "EventModel",
    "validate_message",
    "validate_given_when_then",
    "validate_slice",
    "validate_event_model",
    "validate_event_model_json",
    "dump_event_model",
    "SCHEMA_DEFINITIONS",
    "export_schema",
    "render_schema_json",
    "EventModelingError",
    "ModelValidationError",
    "DiscriminatorError",
    "ShapeError",
    "ConstraintError",
    "SchemaExportError",
    "Violation",
]
