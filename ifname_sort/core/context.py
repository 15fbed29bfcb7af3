"""
Контекст выполнения для отслеживания запусков.

RunContext создаётся CLI один раз и прокидывается в pipeline:
- run_id: идентификатор запуска (попадает в каждую строку лога)
- started_at: время начала
- dry_run: режим симуляции (файлы не записываются)
- command: команда CLI (show / generate)

Пример использования:
    ctx = RunContext.create(dry_run=True, command="generate")
    set_current_context(ctx)
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """
    Контекст выполнения операции.

    Attributes:
        run_id: Идентификатор запуска (timestamp)
        started_at: Время начала выполнения
        dry_run: Режим симуляции (без записи файлов)
        command: Команда CLI которая была вызвана
        extra: Дополнительные данные контекста
    """

    run_id: str
    started_at: datetime
    dry_run: bool = False
    command: str = ""
    extra: dict = field(default_factory=dict)

    @classmethod
    def create(cls, dry_run: bool = False, command: str = "") -> "RunContext":
        """
        Создаёт новый контекст выполнения.

        Args:
            dry_run: Режим симуляции
            command: Название команды CLI

        Returns:
            RunContext: Новый контекст
        """
        started_at = datetime.now()
        # Формат: 2026-10-19T12-30-22
        run_id = started_at.strftime("%Y-%m-%dT%H-%M-%S")

        ctx = cls(
            run_id=run_id,
            started_at=started_at,
            dry_run=dry_run,
            command=command,
        )

        logger.debug(f"Created RunContext: {ctx.run_id} (dry_run={dry_run})")
        return ctx

    @property
    def elapsed_seconds(self) -> float:
        """Время выполнения в секундах."""
        return (datetime.now() - self.started_at).total_seconds()

    @property
    def elapsed_human(self) -> str:
        """Время выполнения в человекочитаемом формате."""
        elapsed = self.elapsed_seconds
        if elapsed < 60:
            return f"{elapsed:.1f}s"
        minutes = int(elapsed // 60)
        seconds = int(elapsed % 60)
        return f"{minutes}m {seconds}s"

    def to_dict(self) -> dict:
        """Сериализует контекст в словарь для JSON вывода."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat(),
            "dry_run": self.dry_run,
            "command": self.command,
            "elapsed_seconds": self.elapsed_seconds,
            "extra": self.extra,
        }


# Текущий контекст запуска (один процесс = один запуск)
_current_context: Optional[RunContext] = None


def get_current_context() -> Optional[RunContext]:
    """Возвращает текущий контекст выполнения (или None)."""
    return _current_context


def set_current_context(ctx: Optional[RunContext]) -> None:
    """Устанавливает текущий контекст выполнения."""
    global _current_context
    _current_context = ctx
