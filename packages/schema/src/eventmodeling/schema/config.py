"""配置常量模块 -- 交换 schema 常量 + 日志配置

日志配置可通过环境变量覆盖，只影响 stderr 上的诊断输出，
不改变校验结果和 schema 导出内容。
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

# 交换 schema 方言（draft-7）
JSON_SCHEMA_DIALECT: str = "http://json-schema.org/draft-07/schema#"

# 共享子 schema 的侧表路径
DEFINITIONS_PATH: str = "definitions"

# 导出 JSON 的缩进
SCHEMA_JSON_INDENT: int = 2

# EventModel.version 缺省值
DEFAULT_MODEL_VERSION: str = "1.0.0"

# MessageMetadata.version 缺省值
DEFAULT_MESSAGE_VERSION: int = 1

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("dev", "json")


class LoggingConfig(BaseModel):
    """日志配置 -- 从环境变量加载

    环境变量:
        EVENTMODELING_LOG_LEVEL: 日志级别（默认 WARNING）
        EVENTMODELING_LOG_FORMAT: 渲染模式 dev / json（默认 dev）
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="日志级别",
    )
    log_format: Literal["dev", "json"] = Field(
        default="dev",
        description="渲染模式：dev（pretty print）/ json",
    )


def load_logging_config() -> LoggingConfig:
    """从环境变量加载日志配置

    无效取值记录 warning 并回退到默认值，不阻塞启动。

    Returns:
        LoggingConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("EVENTMODELING_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            kwargs["log_level"] = val.upper()
        else:
            log.warning(
                "invalid_log_level_config",
                env_var="EVENTMODELING_LOG_LEVEL",
                value=val,
                fallback="WARNING",
            )

    if val := os.environ.get("EVENTMODELING_LOG_FORMAT"):
        if val.lower() in LOG_FORMATS:
            kwargs["log_format"] = val.lower()
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="EVENTMODELING_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    return LoggingConfig(**kwargs)
