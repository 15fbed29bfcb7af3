"""
Генерация конфигурационных файлов из реестра интерфейсов.

Форматы:
- 70-persistent-net.rules (udev) - PersistentNetRulesExporter
- ifcfg-<name> (network-scripts) - IfcfgExporter
- JSON в stdout - RawExporter

Пример использования:
    from ifname_sort.exporters import PersistentNetRulesExporter, IfcfgExporter

    PersistentNetRulesExporter("/etc/udev/rules.d").export(registry)
    IfcfgExporter("/etc/sysconfig/network-scripts").export(registry)
"""

from .base import BaseExporter
from .udev_rules import PersistentNetRulesExporter
from .ifcfg import IfcfgExporter
from .raw import RawExporter

__all__ = [
    "BaseExporter",
    "PersistentNetRulesExporter",
    "IfcfgExporter",
    "RawExporter",
]
