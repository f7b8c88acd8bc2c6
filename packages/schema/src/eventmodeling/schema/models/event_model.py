"""EventModel Domain Model -- 校验与导出的根单元

根对象独占其切片，切片独占其业务规则；
业务规则只以名称引用消息。
"""

from pydantic import Field

from ..config import DEFAULT_MODEL_VERSION
from .base import DocumentModel
from .slice import Slice


class EventModelMetadata(DocumentModel):
    """EventModel 元数据"""

    authors: list[str] | None = Field(default=None, description="作者列表")


class EventModel(DocumentModel):
    """完整系统的 Event Model"""

    name: str = Field(description="模型名称")
    version: str = Field(default=DEFAULT_MODEL_VERSION, description="模型版本")
    description: str | None = Field(default=None, description="模型说明")
    slices: list[Slice] = Field(description="切片列表，允许为空")
    metadata: EventModelMetadata | None = Field(default=None, description="元数据")
