"""structlog 配置模块

dev 模式：pretty print 可读输出
json 模式：结构化 JSON 输出
日志统一写到 stderr，stdout 留给 schema 导出内容。
库代码只获取 logger，不主动配置；由 CLI 入口调用 setup_logging()。
"""

import logging
import sys

import structlog

from .config import LoggingConfig, load_logging_config

# 基础处理器链
_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _build_formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def setup_logging(config: LoggingConfig | None = None) -> None:
    """初始化 structlog 配置

    Args:
        config: 日志配置，None 时从环境变量加载
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    # 先以默认格式接管，环境变量解析时的告警同样写到 stderr
    handler.setFormatter(_build_formatter("dev"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    if config is None:
        config = load_logging_config()

    handler.setFormatter(_build_formatter(config.log_format))
    root_logger.setLevel(getattr(logging, config.log_level))
