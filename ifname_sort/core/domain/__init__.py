"""
Domain Layer для ifname_sort.

Бизнес-логика отделена от сбора данных (collectors).
Collectors только запускают ifconfig/ethtool и разбирают вывод,
Domain собирает реестр и задаёт порядок имён.

- registry: сборка InterfaceRegistry из собранных атрибутов
- ordering: сортировка по PCI адресу и переименование в eth<N>

Использование:
    from ifname_sort.core.domain import build_registry, canonicalize

    registry = build_registry(names, macs, buses)
    canonicalize(registry)
"""

from .registry import build_registry, registry_from_results, split_results
from .ordering import (
    canonicalize,
    canonicalize_with_report,
    get_comparator,
    lexical_bus_key,
    numeric_bus_key,
    parse_pci_address,
    rename_map,
)

__all__ = [
    "build_registry",
    "registry_from_results",
    "split_results",
    "canonicalize",
    "canonicalize_with_report",
    "get_comparator",
    "lexical_bus_key",
    "numeric_bus_key",
    "parse_pci_address",
    "rename_map",
]
