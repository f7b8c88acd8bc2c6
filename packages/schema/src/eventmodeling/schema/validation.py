"""文档校验 -- 候选文档 -> 填充缺省值的不可变模型

校验策略：
- 一次深度优先遍历（根 -> slices -> businessRules -> given/then）收集全部违规
- 抛出单个异常，类型、路径、描述对应遍历中遇到的第一条违规
- 全部违规保存在异常的 violations 上
- 同一对象上 type 标签先于其他字段检查

整份文档要么完全通过，要么整体失败，不存在部分接受。
输入不会被修改，结果是新构造的值。
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from .exceptions import DiscriminatorError, ModelValidationError, ShapeError, Violation
from .models import (
    MESSAGE_TYPES,
    SLICE_TYPES,
    Command,
    Event,
    EventModel,
    GivenWhenThen,
    Message,
    Slice,
    State,
)

log = structlog.get_logger()

_MESSAGE_ADAPTER: TypeAdapter[Command | Event | State] = TypeAdapter(Message)
_GIVEN_WHEN_THEN_ADAPTER = TypeAdapter(GivenWhenThen)
_SLICE_ADAPTER = TypeAdapter(Slice)
_EVENT_MODEL_ADAPTER = TypeAdapter(EventModel)

_TAG_ERROR_TYPES = frozenset({"union_tag_invalid", "union_tag_not_found"})


def format_path(loc: Sequence[str | int], candidate: Any) -> str:
    """把 pydantic 错误位置渲染为文档路径

    例如 ("slices", 2, "stateChange", "trigger", "source")
    渲染为 slices[2].trigger.source。
    判别联合会在位置中插入所选变体的标签，这一段不属于文档路径，
    通过对照候选文档识别并跳过。

    Args:
        loc: pydantic 错误位置
        candidate: 原始候选文档

    Returns:
        文档路径，根为空串
    """
    path = ""
    node: Any = candidate
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
            in_range = isinstance(node, Sequence) and 0 <= segment < len(node)
            node = node[segment] if in_range and not isinstance(node, str) else None
            continue

        if isinstance(node, Mapping) and segment not in node and node.get("type") == segment:
            # 变体标签段
            continue

        path = f"{path}.{segment}" if path else segment
        node = node.get(segment) if isinstance(node, Mapping) else None
    return path


def _tag_value(error: Mapping[str, Any]) -> object:
    """取出出错的标签值，缺失时为 None"""
    if error["type"] == "union_tag_not_found":
        return None
    obj = error.get("input")
    if isinstance(obj, Mapping):
        return obj.get("type")
    return error.get("ctx", {}).get("tag")


def _build_error(
    exc: ValidationError,
    candidate: Any,
    accepted: tuple[str, ...],
) -> ModelValidationError:
    """将 pydantic ValidationError 转换为本包的异常体系"""
    errors = exc.errors(include_url=False)
    violations = [
        Violation(
            path=format_path(error["loc"], candidate),
            kind=error["type"],
            message=error["msg"],
        )
        for error in errors
    ]

    first_error, first = errors[0], violations[0]
    if first.kind in _TAG_ERROR_TYPES:
        return DiscriminatorError(
            first.path,
            _tag_value(first_error),
            accepted,
            violations,
            missing=first.kind == "union_tag_not_found",
        )
    return ShapeError(first.path, first.kind, first.message, violations)


def _validate(
    adapter: TypeAdapter,
    candidate: Any,
    entity: str,
    accepted: tuple[str, ...] = SLICE_TYPES,
) -> Any:
    try:
        return adapter.validate_python(candidate, by_name=False)
    except ValidationError as exc:
        error = _build_error(exc, candidate, accepted)
        log.info(
            "validation_failed",
            entity=entity,
            error=type(error).__name__,
            path=error.path,
            violation_count=len(error.violations),
        )
        raise error from exc


def validate_message(candidate: Any) -> Command | Event | State:
    """校验单条消息

    Raises:
        DiscriminatorError: type 缺失或不是 command/event/state
        ShapeError: 其他结构违规
    """
    return _validate(_MESSAGE_ADAPTER, candidate, "message", MESSAGE_TYPES)


def validate_given_when_then(candidate: Any) -> GivenWhenThen:
    """校验单条业务规则

    Raises:
        ShapeError: 结构违规（包括 when.type 不是 command）
    """
    return _validate(_GIVEN_WHEN_THEN_ADAPTER, candidate, "givenWhenThen")


def validate_slice(candidate: Any) -> Slice:
    """校验单个切片

    Raises:
        DiscriminatorError: type 缺失或不是四种切片标签之一
        ShapeError: 所选变体的结构违规
    """
    return _validate(_SLICE_ADAPTER, candidate, "slice")


def validate_event_model(candidate: Any) -> EventModel:
    """校验完整的 EventModel 文档

    Raises:
        DiscriminatorError: 某个切片的 type 标签无效（且为第一条违规）
        ShapeError: 其他结构违规
    """
    model = _validate(_EVENT_MODEL_ADAPTER, candidate, "eventModel")
    log.debug(
        "event_model_validated",
        name=model.name,
        version=model.version,
        slice_count=len(model.slices),
    )
    return model


def validate_event_model_json(raw: str | bytes) -> EventModel:
    """校验跨进程边界传入的 JSON 文档

    Raises:
        ShapeError: JSON 无法解析（路径为根），或结构违规
        DiscriminatorError: 切片标签无效
    """
    try:
        candidate = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        violation = Violation(path="", kind="json_invalid", message=str(exc))
        log.info("validation_failed", entity="eventModel", error="ShapeError", path="")
        raise ShapeError("", "json_invalid", f"无效的 JSON: {exc}", [violation]) from exc
    return validate_event_model(candidate)


def dump_event_model(model: EventModel) -> dict[str, Any]:
    """把已校验的模型渲染回 JSON 兼容的文档

    使用 camelCase 键；未提供且无缺省值的可选字段（如 invariants）不输出。
    """
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
