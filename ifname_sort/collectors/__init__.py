"""
Коллекторы атрибутов сетевых интерфейсов.

- InterfaceTool: источник вывода ifconfig/ethtool (абстракция)
- ShellInterfaceTool: запуск утилит через subprocess
- InterfaceCollector: имена, MAC и PCI адреса интерфейсов

Пример использования:
    from ifname_sort.collectors import InterfaceCollector, ShellInterfaceTool

    collector = InterfaceCollector(ShellInterfaceTool(timeout=10))
    results = collector.collect()
"""

from .base import InterfaceTool, ShellInterfaceTool
from .interfaces import (
    InterfaceCollector,
    find_hardware_address,
    find_bus_location,
    extract_hardware_address,
    extract_bus_location,
)

__all__ = [
    "InterfaceTool",
    "ShellInterfaceTool",
    "InterfaceCollector",
    "find_hardware_address",
    "find_bus_location",
    "extract_hardware_address",
    "extract_bus_location",
]
