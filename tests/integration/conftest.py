"""集成测试共享 fixture"""

import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def ecommerce_json() -> str:
    """电商 Event Model 原始 JSON 文本"""
    return (FIXTURES_DIR / "ecommerce_model.json").read_text(encoding="utf-8")


@pytest.fixture
def ecommerce_document(ecommerce_json: str) -> dict[str, Any]:
    """电商 Event Model 文档"""
    return json.loads(ecommerce_json)
