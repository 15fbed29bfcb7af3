"""
Data Models для ifname_sort.

Типизированные dataclasses вместо параллельных списков строк.

Использование:
    from ifname_sort.core.models import InterfaceRecord, InterfaceRegistry

    record = InterfaceRecord(name="eth0", mac="cc:46:d6:4e:d6:68", bus="0000:04:00.0")
    registry = InterfaceRegistry()
    registry.append(record)

    # Сериализация в dict/JSON
    data = registry.to_dicts()
"""

from dataclasses import dataclass, asdict, field
from typing import List, Any, Dict, Iterator, Union


@dataclass
class InterfaceRecord:
    """
    Один физический сетевой адаптер.

    Attributes:
        name: Логическое имя. Сначала то, что сообщила ОС,
            после canonicalize() eth<позиция по PCI>
        mac: MAC-адрес (cc:46:d6:4e:d6:68), регистр как в выводе ethtool
        bus: PCI адрес domain:bus:device.function (0000:04:00.0)
    """
    name: str
    mac: str = ""
    bus: str = ""

    def missing_fields(self) -> List[str]:
        """Возвращает список незаполненных полей."""
        return [k for k in ("name", "mac", "bus") if not getattr(self, k)]

    def is_complete(self) -> bool:
        """Все три поля заполнены, запись можно сортировать и рендерить."""
        return not self.missing_fields()

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь."""
        return asdict(self)


@dataclass
class InterfaceRegistry:
    """
    Упорядоченный набор записей, по одной на адаптер.

    Создаётся пустым, заполняется в порядке перечисления ifconfig,
    затем сортируется и переименовывается на месте.
    """
    records: List[InterfaceRecord] = field(default_factory=list)

    def append(self, record: InterfaceRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[InterfaceRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> InterfaceRecord:
        return self.records[index]

    @property
    def names(self) -> List[str]:
        return [r.name for r in self.records]

    def to_dicts(self) -> List[Dict[str, Any]]:
        """Конвертирует в List[Dict] для экспорта."""
        return [r.to_dict() for r in self.records]


# === Результат сбора одного адаптера ===

@dataclass
class Collected:
    """Адаптер собран полностью."""
    record: InterfaceRecord

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def ok(self) -> bool:
        return True


@dataclass
class CollectionFailure:
    """
    Адаптер не собран.

    Attributes:
        name: Имя интерфейса на момент перечисления
        error: Исключение, из-за которого запись не собрана
    """
    name: str
    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "error_type": self.error.__class__.__name__,
            "error": str(self.error),
        }


CollectionResult = Union[Collected, CollectionFailure]


@dataclass
class RenameEntry:
    """Пара старое/новое имя для отчёта о переименовании."""
    old_name: str
    new_name: str
    mac: str
    bus: str

    @property
    def changed(self) -> bool:
        return self.old_name != self.new_name

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PipelineResult:
    """
    Результат запуска pipeline.

    Attributes:
        registry: Итоговый (отсортированный, переименованный) реестр
        renames: Старое -> новое имя по каждому адаптеру
        skipped: Адаптеры, пропущенные по политике skip
        written: Записанные файлы
        failed_writes: Файлы, которые не удалось записать
        planned: Файлы, которые были бы записаны (dry-run)
    """
    registry: InterfaceRegistry
    renames: List[RenameEntry] = field(default_factory=list)
    skipped: List[CollectionFailure] = field(default_factory=list)
    written: List[str] = field(default_factory=list)
    failed_writes: List[str] = field(default_factory=list)
    planned: List[str] = field(default_factory=list)

    @property
    def has_write_errors(self) -> bool:
        return bool(self.failed_writes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "interfaces": self.registry.to_dicts(),
            "renames": [r.to_dict() for r in self.renames],
            "skipped": [s.to_dict() for s in self.skipped],
            "written": self.written,
            "failed_writes": self.failed_writes,
            "planned": self.planned,
        }
