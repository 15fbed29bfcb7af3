"""
Базовый класс экспортера конфигурационных файлов.

Определяет общий интерфейс для генерации файлов из реестра интерфейсов.
Все экспортеры должны наследоваться от BaseExporter.

Пример создания кастомного экспортера:
    class NetworkdLinkExporter(BaseExporter):
        def export(self, registry):
            for iface in registry:
                text = self.render_template("link.j2", iface=iface)
                self._write_file(self.output_folder / f"10-{iface.name}.link", text)
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

from .templates import get_environment
from ..core.exceptions import FileWriteError, IncompleteRecordError
from ..core.logging import get_logger
from ..core.models import InterfaceRegistry

logger = get_logger(__name__)


class BaseExporter(ABC):
    """
    Абстрактный базовый класс для экспортеров.

    Папка назначения должна существовать: /etc/udev/rules.d и
    /etc/sysconfig/network-scripts создаёт пакет ОС, не мы.
    Файлы перезаписываются целиком, без транзакций.

    Attributes:
        output_folder: Папка для файлов
        encoding: Кодировка файлов
        dry_run: Только логировать содержимое, не писать файлы
    """

    def __init__(
        self,
        output_folder: Union[str, Path],
        encoding: str = "utf-8",
        dry_run: bool = False,
    ):
        self.output_folder = Path(output_folder)
        self.encoding = encoding
        self.dry_run = dry_run
        self._env = get_environment()

    @abstractmethod
    def export(self, registry: InterfaceRegistry) -> Any:
        """
        Генерирует и записывает файлы для реестра.

        Абстрактный метод, должен быть реализован в наследниках.
        """

    def render_template(self, template_name: str, **context: Any) -> str:
        """Рендерит шаблон из templates.TEMPLATES."""
        return self._env.get_template(template_name).render(**context)

    def _check_registry(self, registry: InterfaceRegistry) -> None:
        """В файлы попадают только полностью заполненные записи."""
        for record in registry:
            missing = record.missing_fields()
            if missing:
                raise IncompleteRecordError(
                    "Запись интерфейса заполнена не полностью",
                    interface=record.name,
                    missing=missing,
                )

    def _write_file(self, file_path: Path, content: str) -> Path:
        """
        Записывает файл целиком (перезапись).

        Raises:
            FileWriteError: Папки нет, нет прав, нет места и т.п.
        """
        if self.dry_run:
            logger.info(
                f"[dry-run] файл не записан:\n{content}",
                path=str(file_path),
            )
            return file_path

        if not self.output_folder.is_dir():
            raise FileWriteError(
                "Папка назначения не существует",
                path=str(file_path),
            )

        try:
            with open(file_path, "w", encoding=self.encoding) as f:
                f.write(content)
        except OSError as e:
            raise FileWriteError(
                f"Ошибка записи: {e.strerror or e}",
                path=str(file_path),
            ) from e

        logger.info("Файл записан", path=str(file_path))
        return file_path
