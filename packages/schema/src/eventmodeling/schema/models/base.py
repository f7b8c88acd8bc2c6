"""文档模型基类

文档键使用 camelCase（businessRules、exampleData），Python 属性使用 snake_case。
文档校验只接受 camelCase 键，snake_case 仅用于 Python 代码直接构造；
校验后的值不可变。

可选字段以省略表达，显式 null 被拒绝，与导出 schema 一致；
defaultValue 除外，其值可为任意 JSON。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class DocumentModel(BaseModel):
    """所有 Event Modeling 实体的公共基类"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null_optional(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if field.default is None and field.annotation is not Any:
                raise PydanticCustomError("null_forbidden", "可选字段应省略，不能为 null")
        return value
