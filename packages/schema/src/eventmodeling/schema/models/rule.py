"""Business Rule Domain Model -- Given/When/Then

业务规则是一次具体的示例推演：已有事件、一个触发命令、预期结果。
仅用于说明，不会被执行。exampleData 为开放的键值映射，
不与被引用消息的字段声明做比对。
"""

from typing import Any, Literal

from pydantic import Field

from .base import DocumentModel
from .enums import OutcomeType


class GivenEntry(DocumentModel):
    """前置事件"""

    event_name: str = Field(description="事件名称（弱引用）")
    example_data: dict[str, Any] | None = Field(default=None, description="示例数据")


class WhenClause(DocumentModel):
    """触发动作

    业务规则总是由命令进入，与所在切片的模式无关，
    因此这里只接受 command，即使 Automation 触发器允许 event/timer/schedule。
    """

    type: Literal["command"] = Field(description="触发类型，固定为 command")
    name: str = Field(description="命令名称（弱引用）")
    example_data: dict[str, Any] | None = Field(default=None, description="示例数据")


class ThenEntry(DocumentModel):
    """预期结果"""

    type: OutcomeType = Field(description="结果类型：event / state")
    name: str = Field(description="事件或状态名称（弱引用）")
    example_data: dict[str, Any] | None = Field(default=None, description="示例数据")


class GivenWhenThen(DocumentModel):
    """Given/When/Then 格式的业务规则"""

    given: list[GivenEntry] = Field(
        default_factory=list,
        description="前置事件（已有状态）",
    )
    when: WhenClause = Field(description="触发动作")
    then: list[ThenEntry] = Field(description="预期结果")
