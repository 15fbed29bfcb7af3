"""
Типизированные исключения для ifname_sort.

Иерархия:
    IfnameSortError (базовый)
    ├── CollectorError (сбор атрибутов интерфейсов)
    │   ├── CollectorExecutionError (запуск ifconfig/ethtool)
    │   ├── NoAddressFoundError (в выводе нет MAC-адреса)
    │   ├── NoBusLocationFoundError (в выводе нет PCI адреса)
    │   └── PartialCollectionError (часть адаптеров не собрана)
    ├── RegistryError (сборка и сортировка реестра)
    │   ├── AssemblyError (списки разной длины)
    │   ├── IncompleteRecordError (у записи нет MAC или PCI)
    │   └── InvalidBusLocationError (PCI адрес не парсится)
    ├── RenderError (генерация файлов)
    │   └── FileWriteError (ошибка записи файла)
    └── ConfigError (конфигурация)

Пример использования:
    from ifname_sort.core.exceptions import CollectorError, FileWriteError

    try:
        registry = run_discovery(collector, settings)
    except CollectorError as e:
        logger.error(f"Сбор прерван: {e}")
"""

from typing import Optional, Any, List


class IfnameSortError(Exception):
    """
    Базовое исключение для всех ошибок ifname_sort.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# === Collector Errors ===

class CollectorError(IfnameSortError):
    """
    Ошибка при сборе атрибутов интерфейса.

    Attributes:
        interface: Имя интерфейса (eth0), если ошибка относится к адаптеру
    """

    def __init__(
        self,
        message: str,
        interface: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.interface = interface
        details = details or {}
        if interface:
            details["interface"] = interface
        super().__init__(message, details)


class CollectorExecutionError(CollectorError):
    """
    Внешняя утилита не запустилась или завершилась с ошибкой.

    Attributes:
        command: Команда (argv строкой)
        returncode: Код возврата (None если процесс не стартовал)
        stderr: Вывод stderr (если есть)

    Пример:
        raise CollectorExecutionError("ethtool failed", command="ethtool -P eth0", returncode=1)
    """

    def __init__(
        self,
        message: str,
        interface: Optional[str] = None,
        command: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        details = details or {}
        if command:
            details["command"] = command
        if returncode is not None:
            details["returncode"] = returncode
        if stderr:
            details["stderr"] = stderr.strip()[:200]  # Ограничиваем размер
        super().__init__(message, interface, details)


class NoAddressFoundError(CollectorError):
    """
    ethtool -P отработал, но в выводе нет MAC-адреса.

    Пример:
        raise NoAddressFoundError("No MAC address in output", interface="eth0")
    """
    pass


class NoBusLocationFoundError(CollectorError):
    """
    ethtool -i отработал, но в выводе нет PCI адреса (0000:...).

    Пример:
        raise NoBusLocationFoundError("No PCI bus location in output", interface="eth0")
    """
    pass


class PartialCollectionError(CollectorError):
    """
    Часть адаптеров не удалось собрать, политика требует прервать запуск.

    Attributes:
        failures: Список (interface, error) по упавшим адаптерам
    """

    def __init__(
        self,
        message: str,
        failures: Optional[List[Any]] = None,
        details: Optional[dict] = None,
    ):
        self.failures = failures or []
        details = details or {}
        if self.failures:
            details["interfaces"] = [f.name for f in self.failures]
            details["errors"] = [
                f"{f.name}: {f.error.__class__.__name__}" for f in self.failures
            ]
        super().__init__(message, details=details)


# === Registry Errors ===

class RegistryError(IfnameSortError):
    """Базовая ошибка сборки/упорядочивания реестра интерфейсов."""
    pass


class AssemblyError(RegistryError):
    """
    Списки имён, MAC и PCI адресов разной длины.

    Attributes:
        lengths: (len(names), len(addresses), len(locations))

    Пример:
        raise AssemblyError("Length mismatch", lengths=(3, 2, 3))
    """

    def __init__(
        self,
        message: str,
        lengths: Optional[tuple] = None,
        details: Optional[dict] = None,
    ):
        self.lengths = lengths
        details = details or {}
        if lengths:
            details["names"], details["addresses"], details["locations"] = lengths
        super().__init__(message, details)


class IncompleteRecordError(RegistryError):
    """
    У записи не заполнены MAC или PCI адрес.

    Attributes:
        interface: Имя интерфейса
        missing: Список незаполненных полей
    """

    def __init__(
        self,
        message: str,
        interface: Optional[str] = None,
        missing: Optional[List[str]] = None,
        details: Optional[dict] = None,
    ):
        self.interface = interface
        self.missing = missing or []
        details = details or {}
        if interface:
            details["interface"] = interface
        if self.missing:
            details["missing"] = self.missing
        super().__init__(message, details)


class InvalidBusLocationError(RegistryError):
    """
    PCI адрес не соответствует формату domain:bus:device.function.

    Пример:
        raise InvalidBusLocationError("Cannot parse PCI address", bus="0000:zz")
    """

    def __init__(
        self,
        message: str,
        bus: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.bus = bus
        details = details or {}
        if bus is not None:
            details["bus"] = bus
        super().__init__(message, details)


# === Render Errors ===

class RenderError(IfnameSortError):
    """Базовая ошибка генерации файлов конфигурации."""
    pass


class FileWriteError(RenderError):
    """
    Файл не удалось создать или записать.

    Attributes:
        path: Путь к файлу

    Пример:
        raise FileWriteError("No space left on device", path="/etc/sysconfig/network-scripts/ifcfg-eth0")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.path = path
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details)


# === Config Errors ===

class ConfigError(IfnameSortError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Unknown comparator", config_file="config.yaml", key="ordering.comparator")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


# === Utility Functions ===

def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, IfnameSortError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
