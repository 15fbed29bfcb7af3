"""
Domain logic для канонического порядка интерфейсов.

canonicalize() сортирует реестр по PCI адресу и переименовывает
интерфейсы в eth0, eth1, ... по позиции. Имя зависит только от места
адаптера на шине, а не от того, как его назвало ядро при загрузке.

Сравнение PCI адресов:
    lexical (по умолчанию): обычное сравнение строк.
        Корректно, пока у всех адресов одинаковая ширина полей
        (0000:04:00.0 и 0000:0a:00.1), для 0000:100:00.0 нет.
    numeric: domain/bus/device/function разбираются как hex числа.

Example:
    registry = build_registry(names, macs, buses)
    canonicalize(registry)
    registry[0].name  # "eth0": адаптер с наименьшим PCI адресом
"""

from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..constants import (
    COMPARATOR_LEXICAL,
    COMPARATOR_NUMERIC,
    DEFAULT_NAME_PREFIX,
    PCI_ADDRESS_PATTERN,
)
from ..exceptions import ConfigError, IncompleteRecordError, InvalidBusLocationError
from ..logging import get_logger
from ..models import InterfaceRecord, InterfaceRegistry, RenameEntry

logger = get_logger(__name__)

SortKey = Callable[[InterfaceRecord], object]


def parse_pci_address(bus: str) -> Tuple[int, int, int, int]:
    """
    Разбирает PCI адрес domain:bus:device.function в кортеж чисел.

    Args:
        bus: PCI адрес (0000:04:00.1)

    Returns:
        Tuple[int, int, int, int]: (domain, bus, device, function)

    Raises:
        InvalidBusLocationError: Адрес не в формате domain:bus:device.function
    """
    match = PCI_ADDRESS_PATTERN.match(bus.strip())
    if not match:
        raise InvalidBusLocationError("Не удалось разобрать PCI адрес", bus=bus)
    return (
        int(match.group("domain"), 16),
        int(match.group("bus"), 16),
        int(match.group("device"), 16),
        int(match.group("function"), 16),
    )


def lexical_bus_key(record: InterfaceRecord) -> str:
    """Ключ сортировки: PCI адрес как строка."""
    return record.bus


def numeric_bus_key(record: InterfaceRecord) -> Tuple[int, int, int, int]:
    """Ключ сортировки: PCI адрес как (domain, bus, device, function)."""
    return parse_pci_address(record.bus)


COMPARATORS: Dict[str, SortKey] = {
    COMPARATOR_LEXICAL: lexical_bus_key,
    COMPARATOR_NUMERIC: numeric_bus_key,
}


def get_comparator(name: str) -> SortKey:
    """
    Возвращает ключ сортировки по имени стратегии.

    Raises:
        ConfigError: Неизвестная стратегия
    """
    try:
        return COMPARATORS[name]
    except KeyError:
        raise ConfigError(
            f"Неизвестная стратегия сравнения PCI адресов: {name}",
            key="ordering.comparator",
        ) from None


def _check_complete(registry: InterfaceRegistry) -> None:
    """Запись без MAC или PCI адреса не участвует в сортировке."""
    for record in registry:
        missing = record.missing_fields()
        if missing:
            raise IncompleteRecordError(
                "Запись интерфейса заполнена не полностью",
                interface=record.name,
                missing=missing,
            )


def canonicalize(
    registry: InterfaceRegistry,
    comparator: Optional[SortKey] = None,
    prefix: str = DEFAULT_NAME_PREFIX,
) -> InterfaceRegistry:
    """
    Сортирует реестр по PCI адресу и переименовывает интерфейсы по позиции.

    Сортировка стабильная: при одинаковых PCI адресах сохраняется
    порядок перечисления, повторный запуск даёт тот же результат.

    Args:
        registry: Реестр (изменяется на месте)
        comparator: Ключ сортировки (по умолчанию lexical_bus_key)
        prefix: Префикс нового имени

    Returns:
        InterfaceRegistry: Тот же реестр

    Raises:
        IncompleteRecordError: У записи нет MAC или PCI адреса
    """
    _check_complete(registry)
    key = comparator or lexical_bus_key

    registry.records.sort(key=key)
    for index, record in enumerate(registry.records):
        record.name = f"{prefix}{index}"

    return registry


def rename_map(
    before: Sequence[InterfaceRecord],
    after: InterfaceRegistry,
) -> List[Tuple[str, str]]:
    """
    Пары (старое имя, новое имя) в каноническом порядке.

    Записи сопоставляются по (mac, bus), а не по позиции: после
    сортировки позиции другие. Записи с одинаковыми (mac, bus)
    сопоставляются по порядку, сортировка стабильная.

    Args:
        before: Копии записей до canonicalize()
        after: Реестр после canonicalize()

    Raises:
        ValueError: В after есть запись, которой не было в before

    Example:
        before = [replace(r) for r in registry]
        canonicalize(registry)
        rename_map(before, registry)  # [("eth1", "eth0"), ("eth0", "eth1")]
    """
    pending: Dict[Tuple[str, str], List[str]] = {}
    for record in before:
        pending.setdefault((record.mac, record.bus), []).append(record.name)

    pairs = []
    for record in after:
        names = pending.get((record.mac, record.bus))
        if not names:
            raise ValueError(f"Запись {record.mac} {record.bus} отсутствует до переименования")
        pairs.append((names.pop(0), record.name))
    return pairs


def canonicalize_with_report(
    registry: InterfaceRegistry,
    comparator: Optional[SortKey] = None,
    prefix: str = DEFAULT_NAME_PREFIX,
) -> List[RenameEntry]:
    """
    canonicalize() + список переименований для лога и отчёта.

    Returns:
        List[RenameEntry]: В каноническом порядке
    """
    before = [replace(record) for record in registry]
    canonicalize(registry, comparator=comparator, prefix=prefix)

    renames = []
    for (old_name, new_name), record in zip(rename_map(before, registry), registry):
        entry = RenameEntry(
            old_name=old_name,
            new_name=new_name,
            mac=record.mac,
            bus=record.bus,
        )
        if entry.changed:
            logger.info(
                f"{entry.old_name} -> {entry.new_name}",
                interface=entry.new_name,
                mac=entry.mac,
                bus=entry.bus,
            )
        renames.append(entry)
    return renames
