"""枚举定义 -- Event Modeling 文档中的受限取值

包含消息类型、切片类型两个判别标签集合，
以及触发来源、自动化触发类型、事件来源、结果类型等字段枚举。
"""

from enum import StrEnum


class MessageType(StrEnum):
    """消息判别标签"""

    COMMAND = "command"
    EVENT = "event"
    STATE = "state"


class SliceType(StrEnum):
    """切片判别标签 -- 仅以下四种，不存在第五种变体"""

    STATE_CHANGE = "stateChange"
    STATE_VIEW = "stateView"
    AUTOMATION = "automation"
    TRANSLATION = "translation"


class EventSource(StrEnum):
    """事件来源"""

    INTERNAL = "internal"
    EXTERNAL = "external"


class TriggerSource(StrEnum):
    """StateChange / StateView 的触发来源"""

    UI = "ui"
    API = "api"
    AUTOMATION = "automation"


class AutomationTriggerType(StrEnum):
    """Automation 的触发方式"""

    EVENT = "event"
    TIMER = "timer"
    SCHEDULE = "schedule"


class OutcomeType(StrEnum):
    """业务规则 then 条目的结果类型"""

    EVENT = "event"
    STATE = "state"


# 判别标签的可选值，按声明顺序
MESSAGE_TYPES: tuple[str, ...] = tuple(t.value for t in MessageType)
SLICE_TYPES: tuple[str, ...] = tuple(t.value for t in SliceType)
