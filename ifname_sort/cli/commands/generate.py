"""
Команда generate.

Полный pipeline: сбор -> порядок -> 70-persistent-net.rules + ifcfg-<name>.
"""

import sys
import logging

from ..utils import build_settings, print_renames
from ...core.exceptions import IfnameSortError, format_error_for_log

logger = logging.getLogger(__name__)


def cmd_generate(args, ctx=None) -> None:
    """
    Обработчик команды generate.

    Ошибка сбора: ни один файл не записан, код выхода 1.
    Ошибки записи отдельных файлов только логируются.
    """
    from ...core.pipeline import run_pipeline

    dry_run = ctx.dry_run if ctx else getattr(args, "dry_run", False)

    try:
        settings = build_settings(args)
        result = run_pipeline(settings, dry_run=dry_run)
    except IfnameSortError as e:
        logger.error(f"Генерация прервана, файлы не записаны: {format_error_for_log(e)}")
        sys.exit(1)

    print_renames(result)

    if dry_run:
        print("\n[dry-run] Файлы не записаны")
        for path in result.planned:
            print(f"  - {path}")
        return

    for path in result.written:
        print(f"  ✓ {path}")
    for path in result.failed_writes:
        print(f"  ✗ {path}")
