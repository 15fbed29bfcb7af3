"""
Экспорт udev правил постоянных имён интерфейсов.

Один файл 70-persistent-net.rules, по правилу на интерфейс:
    SUBSYSTEM=="net", ACTION=="add", DRIVERS=="?*", ATTR{address}=="<mac>",
    ATTR{type}=="1", KERNEL=="eth*", NAME="<name>"

Правила идут в порядке реестра (канонический порядок по PCI),
разделены пустой строкой.

Пример использования:
    exporter = PersistentNetRulesExporter("/etc/udev/rules.d")
    path = exporter.export(registry)
"""

from pathlib import Path
from typing import Optional

from .base import BaseExporter
from ..core.constants import PERSISTENT_NET_RULES_FILENAME
from ..core.exceptions import FileWriteError
from ..core.logging import get_logger
from ..core.models import InterfaceRegistry

logger = get_logger(__name__)


class PersistentNetRulesExporter(BaseExporter):
    """
    Генератор 70-persistent-net.rules.

    Ошибка записи прерывает только эту операцию: логируется,
    export() возвращает None. Генерацию ifcfg она не затрагивает.
    """

    filename = PERSISTENT_NET_RULES_FILENAME

    @property
    def file_path(self) -> Path:
        return self.output_folder / self.filename

    def render(self, registry: InterfaceRegistry) -> str:
        """Текст файла правил для реестра."""
        self._check_registry(registry)
        return self.render_template(
            "70-persistent-net.rules.j2",
            interfaces=list(registry),
        )

    def export(self, registry: InterfaceRegistry) -> Optional[Path]:
        """
        Записывает <output_folder>/70-persistent-net.rules.

        Returns:
            Path: Путь к файлу или None при ошибке записи
        """
        content = self.render(registry)
        try:
            path = self._write_file(self.file_path, content)
        except FileWriteError as e:
            logger.error(f"Файл правил не записан: {e}", path=str(self.file_path))
            return None

        logger.info(f"udev правил: {len(registry)}", path=str(path))
        return path
