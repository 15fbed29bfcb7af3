"""
Pydantic схемы для валидации config.yaml.

Валидация происходит при загрузке конфигурации.
Ошибки валидации выбрасывают ConfigError.

Пример использования:
    from ifname_sort.core.config_schema import validate_config

    config_dict = yaml.safe_load(open("config.yaml"))
    validated = validate_config(config_dict)  # raises ConfigError on failure
"""

import re
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from .constants import (
    DEFAULT_NAME_PATTERN,
    DEFAULT_NAME_PREFIX,
    DEFAULT_LISTER_COMMAND,
    DEFAULT_INTROSPECT_COMMAND,
    DEFAULT_RULES_DIR,
    DEFAULT_IFCFG_DIR,
)
from .exceptions import ConfigError


class CollectorConfig(BaseModel):
    """Настройки сбора (ifconfig/ethtool)."""
    pattern: str = DEFAULT_NAME_PATTERN
    lister_command: List[str] = Field(default_factory=lambda: list(DEFAULT_LISTER_COMMAND))
    introspect_command: str = DEFAULT_INTROSPECT_COMMAND
    address_flag: str = "-P"
    driver_flag: str = "-i"
    timeout: Optional[float] = Field(default=None, gt=0)
    # per_adapter: запись целиком или ошибка; positional: три списка + склейка по индексу
    mode: str = Field(default="per_adapter", pattern="^(per_adapter|positional)$")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Проверяет что regex компилируется."""
        try:
            re.compile(v)
        except re.error as e:
            raise PydanticCustomError(
                "invalid_pattern",
                "Некорректный regex имён интерфейсов: {error}",
                {"error": str(e)},
            )
        return v

    @field_validator("lister_command")
    @classmethod
    def validate_lister_command(cls, v: List[str]) -> List[str]:
        if not v:
            raise PydanticCustomError("empty_command", "Команда перечисления пуста")
        return v


class OrderingConfig(BaseModel):
    """Настройки сортировки и переименования."""
    comparator: str = Field(default="lexical", pattern="^(lexical|numeric)$")
    prefix: str = Field(default=DEFAULT_NAME_PREFIX, min_length=1)


class PolicyConfig(BaseModel):
    """Что делать с адаптером, который не удалось собрать."""
    on_failure: str = Field(default="abort", pattern="^(abort|skip)$")


class OutputConfig(BaseModel):
    """Куда писать файлы."""
    rules_dir: str = DEFAULT_RULES_DIR
    ifcfg_dir: str = DEFAULT_IFCFG_DIR
    encoding: str = "utf-8"


class LoggingConfig(BaseModel):
    """Настройки логирования."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: str = Field(default="size", pattern="^(size|time|none)$")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # min 1KB
    backup_count: int = Field(default=5, ge=1, le=100)
    when: str = "midnight"

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        # IFNAME_SORT_LOG_LEVEL=debug
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    collector: CollectorConfig = Field(default_factory=CollectorConfig)
    ordering: OrderingConfig = Field(default_factory=OrderingConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict, config_file: str = "config.yaml") -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML
        config_file: Имя файла для сообщения об ошибке

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: При ошибке валидации
    """
    try:
        return AppConfig(**config_dict)
    except Exception as e:
        # Форматируем ошибку Pydantic в читаемый вид
        error_msg = str(e)
        key = None
        if hasattr(e, "errors"):
            errors = e.errors()
            if errors:
                first_error = errors[0]
                key = ".".join(str(x) for x in first_error.get("loc", []))
                msg = first_error.get("msg", "Unknown error")
                error_msg = f"{key}: {msg}"

        raise ConfigError(
            message=f"Ошибка валидации конфигурации: {error_msg}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    """Возвращает конфигурацию по умолчанию."""
    return AppConfig()
