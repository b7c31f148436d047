"""
描述: MCP Kit Server 全局配置加载器
主要功能:
    - 统一管理 MCP Server 配置
    - 支持 YAML 文件加载与环境变量覆盖
    - 提供 Kit API 凭证与工具开关配置模型
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")

DEFAULT_API_BASE = "https://api.kit.com/v4"


# region 基础配置模型
class ServerSettings(BaseModel):
    """HTTP 服务监听配置"""
    host: str = "0.0.0.0"
    port: int = 8081


class KitSettings(BaseModel):
    """Kit 开放平台配置"""
    api_key: str = ""
    api_base: str = DEFAULT_API_BASE


class ToolsSettings(BaseModel):
    # 为空表示全部启用
    enabled: list[str] = Field(default_factory=list)

    def is_enabled(self, name: str) -> bool:
        return not self.enabled or name in self.enabled


class LoggingFileSettings(BaseModel):
    enabled: bool = False
    path: str = "logs/mcp-kit.log"
    max_size_mb: int = 100
    backup_count: int = 5


class LoggingOutputSettings(BaseModel):
    console: bool = True
    file: LoggingFileSettings = Field(default_factory=LoggingFileSettings)


class LoggingSettings(BaseModel):
    """日志系统配置"""
    level: str = "INFO"
    format: Literal["json", "text"] = "json"
    output: LoggingOutputSettings = Field(default_factory=LoggingOutputSettings)


class Settings(BaseModel):
    """MCP Server 配置聚合根"""
    server: ServerSettings = Field(default_factory=ServerSettings)
    kit: KitSettings = Field(default_factory=KitSettings)
    tools: ToolsSettings = Field(default_factory=ToolsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
# endregion


# region 配置加载逻辑
def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            expr = match.group(1)
            if ":-" in expr:
                key, default = expr.split(":-", 1)
                return os.getenv(key, default)
            return os.getenv(expr, "")

        return _ENV_PATTERN.sub(replace, value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return _expand_env(data)


def _set_nested(data: dict[str, Any], keys: list[str], value: Any) -> None:
    current = data
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    mapping = {
        "KIT_API_KEY": ["kit", "api_key"],
        "KIT_API_BASE": ["kit", "api_base"],
        "MCP_HOST": ["server", "host"],
        "MCP_PORT": ["server", "port"],
        "LOG_LEVEL": ["logging", "level"],
        "LOG_FORMAT": ["logging", "format"],
    }
    for env_key, path in mapping.items():
        env_value = os.getenv(env_key)
        if env_value is not None and env_value != "":
            _set_nested(data, path, env_value)
    return data


def load_settings(config_path: str | None = None) -> Settings:
    path = Path(config_path or os.getenv("CONFIG_PATH", "config.yaml"))
    data = _load_yaml(path)
    data = _apply_env_overrides(data)
    return Settings.model_validate(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取单例配置对象"""
    return load_settings()
# endregion
