"""
Загрузчик конфигурации из config.yaml.

Приоритет: значения по умолчанию < YAML файл < переменные окружения.
Аргументы CLI перекрывают всё это в cli/commands.

Предоставляет доступ к настройкам через точку:
    config.collector.pattern
    config.output.rules_dir
    config.ordering.comparator

Пример config.yaml:
    collector:
      pattern: "eth[0-9]+"
      timeout: 10
    ordering:
      comparator: numeric
    output:
      rules_dir: /etc/udev/rules.d
      ifcfg_dir: /etc/sysconfig/network-scripts
"""

import os
import logging
from typing import Any, Optional

import yaml

from .core.config_schema import AppConfig, get_default_config, validate_config
from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Где искать файл, если не указан явно
CONFIG_SEARCH_PATHS = [
    "config.yaml",
    "config.yml",
    "ifname_sort.yaml",
    "/etc/ifname_sort/config.yaml",
]

# Переменная окружения -> (секция, ключ)
ENV_OVERRIDES = {
    "IFNAME_SORT_RULES_DIR": ("output", "rules_dir"),
    "IFNAME_SORT_IFCFG_DIR": ("output", "ifcfg_dir"),
    "IFNAME_SORT_LOG_LEVEL": ("logging", "level"),
}


class ConfigSection:
    """Секция конфигурации с доступом через точку."""

    def __init__(self, data: dict = None):
        self._data = data or {}

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return super().__getattribute__(name)
        value = self._data.get(name)
        if isinstance(value, dict):
            return ConfigSection(value)
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Получить значение с дефолтом."""
        return self._data.get(key, default)

    def __repr__(self) -> str:
        return f"ConfigSection({self._data})"


class Config:
    """
    Главный класс конфигурации.

    Загружает настройки из YAML и окружения, валидирует через pydantic.

    Пример:
        config.collector.pattern    # "eth[0-9]+"
        config.output.rules_dir     # "/etc/udev/rules.d"
        config.validated            # AppConfig
    """

    def __init__(self):
        self.config_file: Optional[str] = None
        self._data = self._get_defaults()
        self._validated: AppConfig = get_default_config()

    def _get_defaults(self) -> dict:
        """Значения по умолчанию из pydantic схемы."""
        return get_default_config().model_dump()

    def _find_config_file(self) -> Optional[str]:
        for path in CONFIG_SEARCH_PATHS:
            if os.path.exists(path):
                return path
        return None

    def _load_yaml(self, config_file: Optional[str] = None) -> None:
        """
        Загружает настройки из YAML файла.

        Явно указанный файл обязан существовать и читаться,
        найденный автоматически только с предупреждением.
        """
        explicit = config_file is not None
        if not explicit:
            config_file = self._find_config_file()
            if not config_file:
                return

        if not os.path.exists(config_file):
            raise ConfigError("Файл конфигурации не найден", config_file=config_file)

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            if explicit:
                raise ConfigError(
                    f"Ошибка чтения конфигурации: {e}",
                    config_file=config_file,
                ) from e
            logger.warning(f"Ошибка чтения {config_file}: {e}")
            return

        if not isinstance(yaml_data, dict):
            raise ConfigError(
                "Корень конфигурации должен быть словарём",
                config_file=config_file,
            )

        self._merge_dict(self._data, yaml_data)
        self.config_file = config_file
        logger.debug(f"Конфигурация загружена из {config_file}")

    def _load_env(self) -> None:
        """Загружает настройки из переменных окружения."""
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                self._data.setdefault(section, {})[key] = value

    def _merge_dict(self, base: dict, override: dict) -> None:
        """Рекурсивно мержит словари."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_dict(base[key], value)
            else:
                base[key] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            return super().__getattribute__(name)
        value = self._data.get(name)
        if isinstance(value, dict):
            return ConfigSection(value)
        return value

    @property
    def validated(self) -> AppConfig:
        """Последняя валидированная конфигурация."""
        return self._validated

    def reload(self, config_file: Optional[str] = None) -> AppConfig:
        """
        Перезагружает и валидирует конфигурацию.

        Raises:
            ConfigError: Файл не читается или значения невалидны
        """
        self.config_file = None
        self._data = self._get_defaults()
        self._load_yaml(config_file)
        self._load_env()
        self._validated = validate_config(
            self._data,
            config_file=self.config_file or "<defaults>",
        )
        return self._validated


# Глобальный экземпляр
config = Config()


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """
    Загружает конфигурацию из файла.

    Args:
        config_file: Путь к YAML файлу (опционально)

    Returns:
        AppConfig: Валидированная конфигурация
    """
    return config.reload(config_file)
