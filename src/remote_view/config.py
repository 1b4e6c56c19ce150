"""配置管理模块

支持从 JSON 配置文件、环境变量等多种来源加载配置
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import RemoteViewConfig


class Settings(BaseSettings):
    """应用设置类，继承自 Pydantic BaseSettings"""

    # 配置文件
    config_file: Optional[str] = None

    # 覆盖配置文件中的值
    remote_delimiter: Optional[str] = None
    view_folder: Optional[str] = None

    # 网络配置
    timeout: Optional[float] = None
    connect_timeout: Optional[float] = None

    def overrides(self) -> Dict[str, Any]:
        """返回环境变量中显式设置的覆盖项"""
        overrides: Dict[str, Any] = {}
        if self.remote_delimiter is not None:
            overrides["remote_delimiter"] = self.remote_delimiter
        if self.view_folder is not None:
            overrides["view_folder"] = self.view_folder
        return overrides

    def http_overrides(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        if self.timeout is not None:
            overrides["timeout"] = self.timeout
            overrides["read_timeout"] = self.timeout
        if self.connect_timeout is not None:
            overrides["connect_timeout"] = self.connect_timeout
        return overrides

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_VIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_config(path: Union[str, Path]) -> RemoteViewConfig:
    """从 JSON 文件加载配置

    Args:
        path: 配置文件路径

    Returns:
        验证后的配置对象

    Raises:
        ConfigurationError: 文件不存在、JSON 无效或验证失败时
    """
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigurationError(
            "Configuration file not found", config_key="config_file", config_value=str(path)
        )
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to read configuration: {e}",
            config_key="config_file",
            config_value=str(path),
        )

    return parse_config(raw)


def parse_config(raw: Any) -> RemoteViewConfig:
    """验证原始配置字典"""
    if not isinstance(raw, dict):
        raise ConfigurationError("Configuration root must be an object")
    try:
        return RemoteViewConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Failed to validate configuration: {e}")


def save_config(config: RemoteViewConfig, path: Union[str, Path]) -> None:
    """将配置写回 JSON 文件，使用连字符形式的键名"""
    data = config.model_dump(by_alias=True, mode="json")
    try:
        Path(path).write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to write configuration: {e}",
            config_key="config_file",
            config_value=str(path),
        )


class ConfigManager:
    """配置管理器"""

    def __init__(self):
        self._config: Optional[RemoteViewConfig] = None

    def get_config(self) -> RemoteViewConfig:
        """获取配置，先读配置文件，再应用环境变量覆盖"""
        if self._config is not None:
            return self._config

        settings = Settings()
        if settings.config_file:
            config = load_config(settings.config_file)
        else:
            config = RemoteViewConfig()

        overrides = settings.overrides()
        http_overrides = settings.http_overrides()
        if http_overrides:
            overrides["http"] = config.http.model_copy(update=http_overrides)

        try:
            self._config = config.model_copy(update=overrides)
            # model_copy 不做验证，这里重新校验一遍
            self._config = RemoteViewConfig.model_validate(
                self._config.model_dump(by_alias=True)
            )
            return self._config
        except ValidationError as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}")

    def set_config(self, config: RemoteViewConfig) -> None:
        self._config = config

    def reset(self) -> None:
        self._config = None


# 全局配置管理器实例
config_manager = ConfigManager()


def get_config() -> RemoteViewConfig:
    """获取全局配置"""
    return config_manager.get_config()

