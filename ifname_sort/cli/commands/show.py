"""
Команда show.

Сбор и канонический порядок без записи файлов.
"""

import sys
import logging

from ..utils import build_settings, print_renames
from ...core.exceptions import IfnameSortError, format_error_for_log

logger = logging.getLogger(__name__)


def cmd_show(args, ctx=None) -> None:
    """Обработчик команды show."""
    from ...core.pipeline import discover
    from ...exporters import RawExporter

    try:
        settings = build_settings(args)
        result = discover(settings)
    except IfnameSortError as e:
        logger.error(f"Сбор прерван: {format_error_for_log(e)}")
        sys.exit(1)

    if args.format == "json":
        RawExporter().export(result.to_dict())
        return

    print_renames(result)
