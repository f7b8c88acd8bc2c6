"""CLI 入口模块 -- python -m eventmodeling.schema

把全部实体定义导出为交换 schema，以缩进 JSON 输出到 stdout。
无参数、无子命令，用于重定向到文件：
  python -m eventmodeling.schema > event-modeling.schema.json

EVENTMODELING_LOG_LEVEL / EVENTMODELING_LOG_FORMAT 只影响 stderr 上的诊断日志，
stdout 输出不受任何环境变量影响。
"""

import sys

import structlog

from .exceptions import SchemaExportError
from .exporter import SCHEMA_DEFINITIONS, render_schema_json
from .logging_config import setup_logging


def main() -> None:
    """CLI 主入口"""
    setup_logging()

    try:
        output = render_schema_json(SCHEMA_DEFINITIONS)
    except SchemaExportError as exc:
        structlog.get_logger().error(
            "schema_export_aborted",
            definition=exc.definition,
            reason=exc.reason,
        )
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
