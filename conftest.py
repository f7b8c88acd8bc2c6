"""全局 pytest 配置 -- 日志状态隔离"""

import logging
from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """每个测试结束后恢复 structlog 与标准库 logging 的初始状态

    CLI 会调用 setup_logging() 替换根 logger 的 handler。
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
