"""
CLI модуль ifname_sort.

Структура:
- utils.py: общие утилиты (build_settings, print_renames)
- commands/: обработчики команд
  - show.py: show
  - generate.py: generate

Примеры использования:
    python -m ifname_sort show
    python -m ifname_sort show --format json --comparator numeric
    python -m ifname_sort generate --dry-run
    python -m ifname_sort generate --rules-dir /tmp/rules --ifcfg-dir /tmp/ifcfg
"""

import argparse
import logging
import sys
from typing import List, Optional

from .utils import build_settings, print_renames
from .commands import cmd_show, cmd_generate

logger = logging.getLogger(__name__)


def _add_collect_arguments(parser: argparse.ArgumentParser) -> None:
    """Аргументы сбора и сортировки, общие для show и generate."""
    parser.add_argument(
        "--pattern",
        default=None,
        help="Regex имён интерфейсов (default: из config.yaml, eth[0-9]+)",
    )
    parser.add_argument(
        "--comparator",
        choices=["lexical", "numeric"],
        default=None,
        help="Сравнение PCI адресов (default: lexical)",
    )
    parser.add_argument(
        "--on-failure",
        dest="on_failure",
        choices=["abort", "skip"],
        default=None,
        help="Адаптер не собран: прервать запуск или пропустить (default: abort)",
    )


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="ifname-sort",
        description="Переименование сетевых интерфейсов в eth<N> по порядку PCI адресов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s show
  %(prog)s show --format json
  %(prog)s generate --dry-run
  %(prog)s generate --comparator numeric --on-failure skip
        """,
    )

    # Общие аргументы
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к файлу конфигурации YAML (default: config.yaml)",
    )

    # Подкоманды
    subparsers = parser.add_subparsers(dest="command", help="Команды")

    # === SHOW ===
    show_parser = subparsers.add_parser(
        "show",
        help="Показать новый порядок интерфейсов (без записи файлов)",
    )
    show_parser.add_argument(
        "--format",
        "-f",
        choices=["table", "json"],
        default="table",
        help="Формат вывода",
    )
    _add_collect_arguments(show_parser)

    # === GENERATE ===
    generate_parser = subparsers.add_parser(
        "generate",
        help="Сгенерировать 70-persistent-net.rules и ifcfg-<name>",
    )
    generate_parser.add_argument(
        "--rules-dir",
        dest="rules_dir",
        default=None,
        help="Папка для 70-persistent-net.rules (default: /etc/udev/rules.d)",
    )
    generate_parser.add_argument(
        "--ifcfg-dir",
        dest="ifcfg_dir",
        default=None,
        help="Папка для ifcfg-<name> (default: /etc/sysconfig/network-scripts)",
    )
    generate_parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Только показать содержимое файлов, ничего не записывать",
    )
    _add_collect_arguments(generate_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Главная функция CLI."""
    from ..config import load_config
    from ..core.context import RunContext, set_current_context
    from ..core.exceptions import ConfigError
    from ..core.logging import LogConfig, setup_logging_from_config

    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # Загружаем конфигурацию из YAML (если есть)
    try:
        settings = load_config(args.config)
    except ConfigError as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        sys.exit(1)

    # Создаём контекст выполнения
    dry_run = getattr(args, "dry_run", False)
    ctx = RunContext.create(dry_run=dry_run, command=args.command)
    set_current_context(ctx)

    # Приоритет: -v флаг > config.yaml > INFO по умолчанию
    log_config = LogConfig.from_dict(settings.logging.model_dump())
    if args.verbose:
        log_config.level = logging.DEBUG
    setup_logging_from_config(log_config)

    logger.info(f"Run started (command={args.command}, dry_run={dry_run})")

    # Выбор команды
    if args.command == "show":
        cmd_show(args, ctx)
    elif args.command == "generate":
        cmd_generate(args, ctx)

    logger.info(f"Run completed: {ctx.run_id} (elapsed={ctx.elapsed_human})")


__all__ = [
    # Utils
    "build_settings",
    "print_renames",
    # Commands
    "cmd_show",
    "cmd_generate",
    # Entry points
    "setup_parser",
    "main",
]
