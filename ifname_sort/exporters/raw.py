"""
Raw экспортер.

Выводит данные в JSON формате напрямую в stdout.
Без метаданных, без сохранения в файл.

Пример использования:
    RawExporter().export(result.to_dict())

    # В командной строке:
    # python -m ifname_sort show --format json | jq '.interfaces[].mac'
"""

import json
import sys
from typing import Any, Optional, TextIO


class RawExporter:
    """
    Экспортер данных в stdout (raw JSON).

    Attributes:
        indent: Отступ JSON (2 для читаемости, None для компактного)
        stream: Поток вывода (по умолчанию sys.stdout)
    """

    def __init__(self, indent: Optional[int] = 2, stream: Optional[TextIO] = None):
        self.indent = indent
        self.stream = stream

    def export(self, data: Any) -> None:
        """Выводит данные в поток как JSON."""
        stream = self.stream or sys.stdout
        json_str = json.dumps(
            data,
            indent=self.indent,
            ensure_ascii=False,
            default=self._json_serializer,
        )
        print(json_str, file=stream)

    @staticmethod
    def _json_serializer(obj: Any) -> Any:
        """Сериализатор для нестандартных типов."""
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if hasattr(obj, "__fspath__"):
            return str(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
