"""
Утилиты CLI.

Общие функции для команд show и generate.
"""

import logging
from typing import Any, Dict

from ..config import config
from ..core.config_schema import AppConfig, validate_config

logger = logging.getLogger(__name__)

# Аргумент CLI -> (секция, ключ) в AppConfig
ARG_OVERRIDES = {
    "pattern": ("collector", "pattern"),
    "comparator": ("ordering", "comparator"),
    "on_failure": ("policy", "on_failure"),
    "rules_dir": ("output", "rules_dir"),
    "ifcfg_dir": ("output", "ifcfg_dir"),
}


def build_settings(args) -> AppConfig:
    """
    Применяет аргументы CLI поверх загруженной конфигурации.

    Приоритет: config.yaml < окружение < аргументы CLI.
    Результат валидируется той же схемой, что и config.yaml.

    Raises:
        ConfigError: Аргумент не прошёл валидацию (например, битый --pattern)
    """
    data: Dict[str, Any] = config.validated.model_dump()

    for arg_name, (section, key) in ARG_OVERRIDES.items():
        value = getattr(args, arg_name, None)
        if value is not None:
            logger.debug(f"CLI override: {section}.{key}={value}")
            data[section][key] = value

    return validate_config(data, config_file="<cli>")


def print_renames(result) -> None:
    """Таблица переименований в stdout."""
    renames = result.renames
    if not renames:
        print("Интерфейсы не найдены")
        return

    print(f"\n{'Old':<10} {'New':<10} {'MAC':<19} PCI")
    print("-" * 60)
    for entry in renames:
        mark = "" if entry.changed else "  (без изменений)"
        print(f"{entry.old_name:<10} {entry.new_name:<10} {entry.mac:<19} {entry.bus}{mark}")

    if result.skipped:
        print(f"\nПропущено адаптеров: {len(result.skipped)}")
        for failure in result.skipped:
            print(f"  ✗ {failure.name}: {failure.error}")

    print(f"\nTotal: {len(renames)} interface(s)")
