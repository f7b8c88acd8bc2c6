"""CLI 入口测试 -- python -m eventmodeling.schema

测试内容：
1. stdout 输出完整的交换 schema（缩进 JSON）
2. 正常退出码为 0
3. 导出失败时以退出码 1 结束
"""

import json
import os
import subprocess
import sys

import pytest
from eventmodeling.schema import SchemaExportError
from eventmodeling.schema import __main__ as cli
from eventmodeling.schema.exporter import SCHEMA_DEFINITIONS, render_schema_json


class TestCli:
    """schema 导出 CLI 测试"""

    def test_main_prints_schema(self, capsys, monkeypatch):
        """main() 把全部定义输出到 stdout"""
        monkeypatch.delenv("EVENTMODELING_LOG_LEVEL", raising=False)
        cli.main()
        captured = capsys.readouterr()
        schemas = json.loads(captured.out)
        assert list(schemas) == list(SCHEMA_DEFINITIONS)

    def test_main_output_matches_render(self, capsys):
        """输出与 render_schema_json() 一致"""
        cli.main()
        captured = capsys.readouterr()
        assert captured.out == render_schema_json() + "\n"

    def test_log_env_does_not_change_stdout(self, capsys, monkeypatch):
        """日志环境变量只影响 stderr，stdout 保持不变"""
        monkeypatch.setenv("EVENTMODELING_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EVENTMODELING_LOG_FORMAT", "json")
        cli.main()
        captured = capsys.readouterr()
        assert captured.out == render_schema_json() + "\n"

    def test_export_failure_exits_1(self, capsys, monkeypatch):
        """导出失败时退出码为 1，stdout 无输出"""

        def broken(definitions):
            raise SchemaExportError("broken", "无法生成")

        monkeypatch.setattr(cli, "render_schema_json", broken)
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_module_entrypoint(self):
        """python -m 直接运行，退出码 0，stdout 为纯 JSON"""
        result = subprocess.run(
            [sys.executable, "-m", "eventmodeling.schema"],
            capture_output=True,
            env={**os.environ, "PYTHONIOENCODING": "utf-8"},
            text=True,
            encoding="utf-8",
            check=False,
        )
        assert result.returncode == 0
        schemas = json.loads(result.stdout)
        assert "eventModel" in schemas
        assert schemas["eventModel"]["$ref"] == "#/definitions/EventModel"
