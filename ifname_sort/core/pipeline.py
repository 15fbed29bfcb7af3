"""
Pipeline: сбор -> реестр -> канонический порядок -> файлы.

Этапы строго последовательные, каждый целиком до начала следующего.
Ошибка сбора прерывает запуск до записи любого файла.
Ошибки записи изолированы по файлам и попадают в PipelineResult.

Пример использования:
    settings = load_config()
    result = run_pipeline(settings)
    for entry in result.renames:
        print(entry.old_name, "->", entry.new_name)
"""

from typing import Optional

from .config_schema import AppConfig
from .constants import ADDRESS_MODE, DRIVER_MODE
from .domain import (
    build_registry,
    registry_from_results,
    canonicalize_with_report,
    get_comparator,
)
from .logging import get_logger
from .models import InterfaceRegistry, PipelineResult

logger = get_logger(__name__)


def build_tool(settings: AppConfig):
    """Создаёт ShellInterfaceTool из секции collector."""
    from ..collectors import ShellInterfaceTool

    cfg = settings.collector
    return ShellInterfaceTool(
        lister_command=cfg.lister_command,
        introspect_command=cfg.introspect_command,
        flags={ADDRESS_MODE: cfg.address_flag, DRIVER_MODE: cfg.driver_flag},
        timeout=cfg.timeout,
    )


def build_collector(settings: AppConfig, tool=None):
    """Создаёт InterfaceCollector (по умолчанию поверх ifconfig/ethtool)."""
    from ..collectors import InterfaceCollector

    if tool is None:
        tool = build_tool(settings)
    return InterfaceCollector(tool, pattern=settings.collector.pattern)


def discover(settings: AppConfig, tool=None) -> PipelineResult:
    """
    Собирает интерфейсы и приводит их к каноническому порядку.

    Файлы не пишутся.

    Args:
        settings: Конфигурация
        tool: InterfaceTool (None = реальные утилиты)

    Returns:
        PipelineResult: Реестр, переименования, пропущенные адаптеры

    Raises:
        CollectorError: Сбор прерван (ifconfig, ethtool, policy=abort)
        AssemblyError: positional режим, списки разной длины
    """
    collector = build_collector(settings, tool)
    skipped = []

    if settings.collector.mode == "positional":
        names = collector.list_interface_names()
        registry = build_registry(
            names,
            collector.collect_hardware_addresses(names),
            collector.collect_bus_locations(names),
        )
    else:
        results = collector.collect()
        registry = registry_from_results(results, policy=settings.policy.on_failure)
        skipped = [r for r in results if not r.ok]

    renames = canonicalize_with_report(
        registry,
        comparator=get_comparator(settings.ordering.comparator),
        prefix=settings.ordering.prefix,
    )

    return PipelineResult(registry=registry, renames=renames, skipped=skipped)


def render(
    result: PipelineResult,
    settings: AppConfig,
    rules_dir: Optional[str] = None,
    ifcfg_dir: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """
    Записывает 70-persistent-net.rules и ifcfg-<name> файлы.

    Две независимые операции: ошибка одной не отменяет другую.
    В dry-run пути попадают в planned, written остаётся пустым.
    """
    from ..exporters import PersistentNetRulesExporter, IfcfgExporter

    registry: InterfaceRegistry = result.registry
    encoding = settings.output.encoding
    done = result.planned if dry_run else result.written

    rules_exporter = PersistentNetRulesExporter(
        rules_dir or settings.output.rules_dir,
        encoding=encoding,
        dry_run=dry_run,
    )
    rules_path = rules_exporter.export(registry)
    if rules_path is None:
        result.failed_writes.append(str(rules_exporter.file_path))
    else:
        done.append(str(rules_path))

    ifcfg_exporter = IfcfgExporter(
        ifcfg_dir or settings.output.ifcfg_dir,
        encoding=encoding,
        dry_run=dry_run,
    )
    done.extend(str(p) for p in ifcfg_exporter.export(registry))
    result.failed_writes.extend(str(p) for p in ifcfg_exporter.failed)

    return result


def run_pipeline(
    settings: AppConfig,
    tool=None,
    rules_dir: Optional[str] = None,
    ifcfg_dir: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """
    Полный запуск: discover() + render().

    Returns:
        PipelineResult: Итог с записанными и не записанными файлами
    """
    result = discover(settings, tool)

    if not len(result.registry):
        logger.warning("Интерфейсы не найдены, файлы не генерируются")
        return result

    render(result, settings, rules_dir=rules_dir, ifcfg_dir=ifcfg_dir, dry_run=dry_run)

    if result.has_write_errors:
        logger.error(f"Не записано файлов: {len(result.failed_writes)}")
    return result
