"""
描述: MCP Kit Server 日志工具库
主要功能:
    - JSON 格式化输出
    - 统一日志配置初始化 (控制台 stderr + 可选滚动文件)
"""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from mcp_kit.config import LoggingSettings


# LogRecord 自带属性, 其余视为 extra 字段
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


# region 日志 Formatter
class JsonFormatter(logging.Formatter):
    """简单 JSON 日志格式化器"""
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)
# endregion


# region 日志初始化
def setup_logging(settings: LoggingSettings) -> None:
    """
    初始化日志系统

    参数:
        settings: 日志配置对象

    说明:
        控制台输出固定写入 stderr, stdout 留给 MCP stdio 协议
    """
    level = getattr(logging, settings.level.upper(), logging.INFO)
    formatter: logging.Formatter
    if settings.format == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    handlers: list[logging.Handler] = []
    if settings.output.console:
        handlers.append(logging.StreamHandler())
    file_settings = settings.output.file
    if file_settings.enabled:
        path = Path(file_settings.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path,
                maxBytes=file_settings.max_size_mb * 1024 * 1024,
                backupCount=file_settings.backup_count,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)
# endregion
