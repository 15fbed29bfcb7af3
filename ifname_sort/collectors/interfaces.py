"""
Коллектор атрибутов сетевых интерфейсов хоста.

Собирает для каждого интерфейса:
- имя (из ifconfig -a по regex, например eth[0-9]+)
- MAC-адрес (первое совпадение в выводе ethtool -P)
- PCI адрес (первое совпадение 0000:... в выводе ethtool -i)

Разбор regex, а не структурный: формат вывода утилит не считается
стабильным. Берётся первое совпадение, поэтому при необычном выводе
может быть выбран не тот токен. Это известное ограничение.

Два режима сбора:
- три списка (list_interface_names + collect_hardware_addresses +
  collect_bus_locations) и позиционная склейка через build_registry
- по адаптерам (collect): Collected | CollectionFailure на каждый интерфейс

Пример использования:
    collector = InterfaceCollector(ShellInterfaceTool())
    results = collector.collect()
    registry = registry_from_results(results, policy="abort")
"""

import re
from typing import List, Optional, Union, Pattern

from .base import InterfaceTool
from ..core.constants import (
    ADDRESS_MODE,
    DRIVER_MODE,
    DEFAULT_NAME_PATTERN,
    MAC_ADDRESS_PATTERN,
    BUS_LOCATION_PATTERN,
)
from ..core.exceptions import (
    CollectorError,
    NoAddressFoundError,
    NoBusLocationFoundError,
)
from ..core.logging import get_logger
from ..core.models import (
    InterfaceRecord,
    Collected,
    CollectionFailure,
    CollectionResult,
)

logger = get_logger(__name__)


def find_hardware_address(output: str) -> Optional[str]:
    """
    Первый MAC-адрес (6 пар hex через двоеточие) в выводе ethtool -P.

    Args:
        output: Сырой вывод

    Returns:
        str или None если совпадений нет
    """
    match = MAC_ADDRESS_PATTERN.search(output or "")
    return match.group(0) if match else None


def find_bus_location(output: str) -> Optional[str]:
    """
    Первый PCI адрес в выводе ethtool -i.

    Совпадение начинается с "0000:" и идёт до конца строки.

    Args:
        output: Сырой вывод

    Returns:
        str или None если совпадений нет
    """
    match = BUS_LOCATION_PATTERN.search(output or "")
    return match.group(0) if match else None


def extract_hardware_address(output: str, interface: str = "") -> str:
    """
    Как find_hardware_address, но отсутствие MAC считается ошибкой.

    Raises:
        NoAddressFoundError: В выводе нет MAC-адреса
    """
    mac = find_hardware_address(output)
    if mac is None:
        raise NoAddressFoundError(
            "В выводе ethtool нет MAC-адреса",
            interface=interface or None,
        )
    return mac


def extract_bus_location(output: str, interface: str = "") -> str:
    """
    Как find_bus_location, но отсутствие PCI адреса считается ошибкой.

    Raises:
        NoBusLocationFoundError: В выводе нет PCI адреса
    """
    bus = find_bus_location(output)
    if bus is None:
        raise NoBusLocationFoundError(
            "В выводе ethtool нет PCI адреса",
            interface=interface or None,
        )
    return bus


class InterfaceCollector:
    """
    Сборщик имён, MAC и PCI адресов интерфейсов.

    Все вызовы утилит последовательные, по одному на интерфейс и режим.

    Attributes:
        tool: Источник вывода ifconfig/ethtool
        pattern: Regex имён интерфейсов-кандидатов

    Example:
        collector = InterfaceCollector(tool, pattern=r"eth[0-9]+")
        names = collector.list_interface_names()
        # ["eth0", "eth1", ...] в порядке вывода ifconfig
    """

    def __init__(
        self,
        tool: InterfaceTool,
        pattern: Union[str, Pattern] = DEFAULT_NAME_PATTERN,
    ):
        self.tool = tool
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _compile(self, pattern: Union[str, Pattern, None]) -> Pattern:
        if pattern is None:
            return self.pattern
        return re.compile(pattern) if isinstance(pattern, str) else pattern

    def list_interface_names(
        self,
        pattern: Union[str, Pattern, None] = None,
    ) -> List[str]:
        """
        Имена интерфейсов из вывода ifconfig -a.

        Все непересекающиеся совпадения, порядок как в выводе
        утилиты, без сортировки.

        Args:
            pattern: Regex имён (по умолчанию self.pattern)

        Returns:
            List[str]: Имена интерфейсов

        Raises:
            CollectorExecutionError: ifconfig не запустился или упал
        """
        output = self.tool.list_interfaces()
        regex = self._compile(pattern)

        # group(0): в пользовательском паттерне могут быть группы
        names = [m.group(0) for m in regex.finditer(output)]

        logger.info(f"Найдено интерфейсов: {len(names)}")
        return names

    def collect_hardware_addresses(self, names: List[str]) -> List[str]:
        """
        MAC-адреса по списку имён (ethtool -P).

        Упавший запуск ethtool логируется и пропускается: результат
        тогда короче names и позиционная склейка невозможна
        (build_registry выбросит AssemblyError).

        Raises:
            NoAddressFoundError: ethtool отработал, но MAC в выводе нет
        """
        addresses = []
        for name in names:
            try:
                output = self.tool.introspect(name, ADDRESS_MODE)
            except CollectorError as e:
                logger.error(f"ethtool -P: {e}", interface=name)
                continue
            addresses.append(extract_hardware_address(output, name))
        return addresses

    def collect_bus_locations(self, names: List[str]) -> List[str]:
        """
        PCI адреса по списку имён (ethtool -i).

        Упавший запуск ethtool логируется и пропускается, как
        в collect_hardware_addresses.

        Raises:
            NoBusLocationFoundError: ethtool отработал, но PCI адреса в выводе нет
        """
        locations = []
        for name in names:
            try:
                output = self.tool.introspect(name, DRIVER_MODE)
            except CollectorError as e:
                logger.error(f"ethtool -i: {e}", interface=name)
                continue
            locations.append(extract_bus_location(output, name))
        return locations

    def collect_interface(self, name: str) -> CollectionResult:
        """
        Собирает MAC и PCI адрес одного интерфейса.

        Returns:
            Collected: Запись заполнена полностью
            CollectionFailure: Запуск ethtool упал или в выводе нет нужного токена
        """
        try:
            mac = extract_hardware_address(
                self.tool.introspect(name, ADDRESS_MODE), name
            )
            bus = extract_bus_location(
                self.tool.introspect(name, DRIVER_MODE), name
            )
        except CollectorError as e:
            return CollectionFailure(name=name, error=e)

        logger.debug("Интерфейс собран", interface=name, mac=mac, bus=bus)
        return Collected(InterfaceRecord(name=name, mac=mac, bus=bus))

    def collect(
        self,
        pattern: Union[str, Pattern, None] = None,
    ) -> List[CollectionResult]:
        """
        Перечисляет интерфейсы и собирает каждый.

        Ошибка перечисления (ifconfig) фатальна и пробрасывается,
        ошибки отдельных адаптеров возвращаются как CollectionFailure.

        Returns:
            List[CollectionResult]: В порядке перечисления
        """
        names = self.list_interface_names(pattern)
        results = [self.collect_interface(name) for name in names]

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Собрано адаптеров: {len(results) - failed}, с ошибками: {failed}")
        return results
