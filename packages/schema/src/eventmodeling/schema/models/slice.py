"""Slice Domain Model -- 四种行为模式的判别联合

| 变体         | 模式                               |
|--------------|------------------------------------|
| StateChange  | Command -> Event(s)，写入指定 stream |
| StateView    | Event(s) -> State（读模型）          |
| Automation   | Event / 定时 -> Command(s)          |
| Translation  | 外部事件 -> 内部事件                  |

判别只看 type 标签，不根据字段推断变体。
其他变体的字段出现在候选文档中时被忽略，不参与校验，也不进入结果。
切片与消息之间只以名称弱引用，不做解析。
"""

from typing import Annotated, Literal

from pydantic import Field

from .base import DocumentModel
from .enums import AutomationTriggerType, TriggerSource
from .rule import GivenWhenThen


class SliceTrigger(DocumentModel):
    """StateChange / StateView 的触发器"""

    source: TriggerSource = Field(description="触发来源：ui / api / automation")
    description: str | None = Field(default=None, description="触发说明")


class AutomationTrigger(DocumentModel):
    """Automation 的触发器"""

    type: AutomationTriggerType = Field(description="触发方式：event / timer / schedule")
    events: list[str] | None = Field(
        default=None,
        description="构建待办列表的事件",
    )
    schedule: str | None = Field(default=None, description="Cron 表达式或间隔")


class SliceBase(DocumentModel):
    """四种切片共享的字段"""

    name: str = Field(description="面向业务的名称")
    context: str | None = Field(default=None, description="补充业务背景")
    business_rules: list[GivenWhenThen] = Field(
        default_factory=list,
        description="业务规则示例",
    )


class StateChange(SliceBase):
    """状态变更模式（Command -> Event）"""

    type: Literal["stateChange"] = Field(description="切片类型")
    trigger: SliceTrigger = Field(description="触发器")
    stream: str = Field(description="写入的 stream")
    command: str = Field(description="触发本次状态变更的命令名称")
    events: list[str] = Field(description="产生的事件")
    # 不变量仅作为文档声明，本引擎不执行
    invariants: list[str] | None = Field(
        default=None,
        description="需要维持的业务不变量",
    )


class StateView(SliceBase):
    """读取模式（Event -> State）"""

    type: Literal["stateView"] = Field(description="切片类型")
    trigger: SliceTrigger = Field(description="触发器")
    events: list[str] = Field(description="更新该视图的事件")


class Automation(SliceBase):
    """自动化流程模式（Event -> Command）"""

    type: Literal["automation"] = Field(description="切片类型")
    trigger: AutomationTrigger = Field(description="触发器")
    commands: list[str] = Field(description="自动化触发的命令")


class Translation(SliceBase):
    """外部系统集成模式（External Event -> Internal Event）"""

    type: Literal["translation"] = Field(description="切片类型")
    source: str = Field(description="外部系统名称")
    external_event: str = Field(description="外部事件名称")
    internal_events: list[str] = Field(description="产生的内部事件")


Slice = Annotated[
    StateChange | StateView | Automation | Translation,
    Field(discriminator="type"),
]
