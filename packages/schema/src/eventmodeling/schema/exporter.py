"""交换 schema 导出 -- 实体定义 -> JSON Schema draft-7 兼容文档

每个定义导出为：
    {
      "$ref": "#/definitions/<Name>",
      "definitions": {<Name>: ..., <共享子 schema>: ...},
      "$schema": "http://json-schema.org/draft-07/schema#"
    }

- <Name> 为定义键首字母大写（stateChange -> StateChange）
- 共享子结构（枚举、嵌套模型、变体）只在 definitions 侧表出现一次，通过 $ref 引用
- 可选字段只体现为不在 required 中，不输出 null 分支
- 自引用定义通过 $ref 断开，不会无限展开

导出是纯函数：描述类型而不是实例，不依赖任何 EventModel 文档。
"""

import json
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import PydanticUserError, TypeAdapter
from pydantic.json_schema import GenerateJsonSchema, JsonSchemaValue
from pydantic_core import core_schema

from .config import DEFINITIONS_PATH, JSON_SCHEMA_DIALECT, SCHEMA_JSON_INDENT
from .exceptions import SchemaExportError
from .models import (
    Automation,
    Command,
    Event,
    EventModel,
    GivenWhenThen,
    Message,
    MessageBase,
    MessageField,
    Slice,
    SliceBase,
    State,
    StateChange,
    StateView,
    Translation,
)

log = structlog.get_logger()

REF_TEMPLATE = f"#/{DEFINITIONS_PATH}/{{model}}"

# 固定的导出定义集合（启动时确定，运行期间不变）
SCHEMA_DEFINITIONS: dict[str, Any] = {
    "messageField": MessageField,
    "baseMessage": MessageBase,
    "command": Command,
    "event": Event,
    "state": State,
    "message": Message,
    "givenWhenThen": GivenWhenThen,
    "baseSlice": SliceBase,
    "stateChange": StateChange,
    "stateView": StateView,
    "automation": Automation,
    "translation": Translation,
    "slice": Slice,
    "eventModel": EventModel,
}


class InterchangeJsonSchema(GenerateJsonSchema):
    """交换 schema 生成器

    可选字段以缺省表达：去掉 null 分支和 null 缺省值。
    """

    def nullable_schema(self, schema: core_schema.NullableSchema) -> JsonSchemaValue:
        return self.generate_inner(schema["schema"])

    def default_schema(self, schema: core_schema.WithDefaultSchema) -> JsonSchemaValue:
        json_schema = super().default_schema(schema)
        if "default" in json_schema and json_schema["default"] is None:
            del json_schema["default"]
        return json_schema


def definition_name(key: str) -> str:
    """定义键 -> 根名称（首字母大写）"""
    return key[:1].upper() + key[1:]


def _export_definition(key: str, definition: Any) -> dict[str, Any]:
    name = definition_name(key)
    try:
        schema = TypeAdapter(definition).json_schema(
            by_alias=True,
            ref_template=REF_TEMPLATE,
            schema_generator=InterchangeJsonSchema,
            mode="validation",
        )
    except PydanticUserError as exc:
        log.error("schema_definition_failed", definition=key, error=str(exc))
        raise SchemaExportError(key, str(exc)) from exc

    shared: dict[str, Any] = schema.pop("$defs", {})
    root_ref = REF_TEMPLATE.format(model=name)

    if schema == {"$ref": root_ref}:
        # 自引用定义，根已在侧表中
        pass
    elif name in shared and shared[name] != schema:
        log.error("schema_definition_failed", definition=key, error="name_collision")
        raise SchemaExportError(key, f"根名称 {name} 与共享子 schema 冲突")
    else:
        shared[name] = schema

    return {
        "$ref": root_ref,
        DEFINITIONS_PATH: dict(sorted(shared.items())),
        "$schema": JSON_SCHEMA_DIALECT,
    }


def export_schema(definitions: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """导出交换 schema

    Args:
        definitions: 定义键 -> 实体类型（pydantic 模型或带判别的联合）

    Returns:
        定义键 -> 交换 schema 文档，保持输入顺序

    Raises:
        SchemaExportError: 定义无法生成 schema，或根名称冲突
    """
    exported = {
        key: _export_definition(key, definition) for key, definition in definitions.items()
    }
    log.debug("schema_exported", definition_count=len(exported))
    return exported


def render_schema_json(definitions: Mapping[str, Any] = SCHEMA_DEFINITIONS) -> str:
    """导出并渲染为缩进 JSON 文本（输出确定，重复调用字节一致）"""
    return json.dumps(
        export_schema(definitions),
        indent=SCHEMA_JSON_INDENT,
        ensure_ascii=False,
    )
