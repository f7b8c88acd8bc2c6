"""Message Domain Model -- Command / Event / State

消息由 type 字面量判别为三种变体，字段列表保持声明顺序。
同一消息内字段名不做唯一性约束。
"""

from typing import Annotated, Any, Literal

from pydantic import Field

from ..config import DEFAULT_MESSAGE_VERSION
from .base import DocumentModel
from .enums import EventSource


class MessageField(DocumentModel):
    """消息字段定义"""

    name: str = Field(min_length=1, description="字段名")
    type: str = Field(
        min_length=1,
        description="字段类型标签（如 string、number、Date、UUID）",
    )
    required: bool = Field(default=True, strict=True, description="是否必填")
    description: str | None = Field(default=None, description="字段说明")
    default_value: Any = Field(default=None, description="可选字段的默认值")


class MessageMetadata(DocumentModel):
    """消息元数据"""

    version: int = Field(
        default=DEFAULT_MESSAGE_VERSION,
        strict=True,
        description="Schema 演进版本号",
    )


class MessageBase(DocumentModel):
    """三种消息共享的字段"""

    name: str = Field(description="消息名称（如 CustomerRegistered、RegisterCustomer）")
    fields: list[MessageField] = Field(description="字段列表，保持声明顺序")
    description: str | None = Field(default=None, description="消息说明")
    metadata: MessageMetadata | None = Field(default=None, description="元数据")


class Command(MessageBase):
    """触发状态变更的命令"""

    type: Literal["command"] = Field(description="消息类型")


class Event(MessageBase):
    """已经发生的事实"""

    type: Literal["event"] = Field(description="消息类型")
    source: EventSource = Field(default=EventSource.INTERNAL, description="事件来源")


class State(MessageBase):
    """读模型（State View）"""

    type: Literal["state"] = Field(description="消息类型")


Message = Annotated[Command | Event | State, Field(discriminator="type")]
