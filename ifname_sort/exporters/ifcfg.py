"""
Экспорт ifcfg-<name> файлов (network-scripts).

По файлу на интерфейс:
    DEVICE=eth0
    HWADDR=cc:46:d6:4e:d6:68
    TYPE=Ethernet
    ONBOOT=yes
    BOOTPROTO=none
"""

from pathlib import Path
from typing import List, Tuple

from .base import BaseExporter
from ..core.constants import IFCFG_FILENAME_PREFIX
from ..core.exceptions import FileWriteError
from ..core.logging import get_logger
from ..core.models import InterfaceRecord, InterfaceRegistry

logger = get_logger(__name__)


class IfcfgExporter(BaseExporter):
    """
    Генератор ifcfg-<name>.

    Каждый файл пишется независимо: ошибка записи одного
    логируется, остальные всё равно записываются.

    Example:
        exporter = IfcfgExporter("/etc/sysconfig/network-scripts")
        written = exporter.export(registry)
        exporter.failed  # пути, которые не удалось записать
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.failed: List[Path] = []

    def file_path_for(self, record: InterfaceRecord) -> Path:
        return self.output_folder / f"{IFCFG_FILENAME_PREFIX}{record.name}"

    def render_record(self, record: InterfaceRecord) -> str:
        """Текст ifcfg файла для одной записи."""
        return self.render_template("ifcfg.j2", iface=record)

    def render(self, registry: InterfaceRegistry) -> List[Tuple[Path, str]]:
        """Пары (путь, текст) для всех записей реестра."""
        self._check_registry(registry)
        return [(self.file_path_for(r), self.render_record(r)) for r in registry]

    def export(self, registry: InterfaceRegistry) -> List[Path]:
        """
        Записывает <output_folder>/ifcfg-<name> для каждой записи.

        Returns:
            List[Path]: Успешно записанные файлы
        """
        written: List[Path] = []
        self.failed = []

        for path, content in self.render(registry):
            try:
                written.append(self._write_file(path, content))
            except FileWriteError as e:
                logger.error(f"ifcfg не записан: {e}", path=str(path))
                self.failed.append(path)

        logger.info(f"ifcfg файлов записано: {len(written)} из {len(registry)}")
        return written
