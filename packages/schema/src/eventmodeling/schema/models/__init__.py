"""Event Modeling Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .base import DocumentModel
from .enums import (
    MESSAGE_TYPES,
    SLICE_TYPES,
    AutomationTriggerType,
    EventSource,
    MessageType,
    OutcomeType,
    SliceType,
    TriggerSource,
)
from .event_model import EventModel, EventModelMetadata
from .message import (
    Command,
    Event,
    Message,
    MessageBase,
    MessageField,
    MessageMetadata,
    State,
)
from .rule import GivenEntry, GivenWhenThen, ThenEntry, WhenClause
from .slice import (
    Automation,
    AutomationTrigger,
    Slice,
    SliceBase,
    SliceTrigger,
    StateChange,
    StateView,
    Translation,
)

__all__ = [
    # 枚举
    "MessageType",
    "SliceType",
    "EventSource",
    "TriggerSource",
    "AutomationTriggerType",
    "OutcomeType",
    "MESSAGE_TYPES",
    "SLICE_TYPES",
    # 基类
    "DocumentModel",
    # Message
    "MessageField",
    "MessageMetadata",
    "MessageBase",
    "Command",
    "Event",
    "State",
    "Message",
    # Business Rule
    "GivenEntry",
    "WhenClause",
    "ThenEntry",
    "GivenWhenThen",
    # Slice
    "SliceTrigger",
    "AutomationTrigger",
    "SliceBase",
    "StateChange",
    "StateView",
    "Automation",
    "Translation",
    "Slice",
    # EventModel
    "EventModelMetadata",
    "EventModel",
]
