"""
Core модули ifname_sort.

- models: InterfaceRecord, InterfaceRegistry, результаты сбора
- domain: сборка реестра и канонический порядок имён
- pipeline: сбор -> реестр -> порядок -> файлы
- RunContext: Контекст выполнения для отслеживания запусков
- Structured Logging: JSON/Human-readable логирование
- exceptions: Типизированные исключения
- constants: Паттерны, имена файлов, значения по умолчанию
"""

from .context import RunContext, get_current_context, set_current_context
from .logging import (
    get_logger,
    setup_logging,
    setup_logging_from_config,
    StructuredLogger,
    JSONFormatter,
    HumanFormatter,
    LogConfig,
    RotationType,
)
from .exceptions import (
    IfnameSortError,
    CollectorError,
    CollectorExecutionError,
    NoAddressFoundError,
    NoBusLocationFoundError,
    PartialCollectionError,
    RegistryError,
    AssemblyError,
    IncompleteRecordError,
    InvalidBusLocationError,
    RenderError,
    FileWriteError,
    ConfigError,
    format_error_for_log,
)
from .models import (
    InterfaceRecord,
    InterfaceRegistry,
    Collected,
    CollectionFailure,
    RenameEntry,
    PipelineResult,
)

__all__ = [
    # Context
    "RunContext",
    "get_current_context",
    "set_current_context",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    "StructuredLogger",
    "JSONFormatter",
    "HumanFormatter",
    "LogConfig",
    "RotationType",
    # Exceptions
    "IfnameSortError",
    "CollectorError",
    "CollectorExecutionError",
    "NoAddressFoundError",
    "NoBusLocationFoundError",
    "PartialCollectionError",
    "RegistryError",
    "AssemblyError",
    "IncompleteRecordError",
    "InvalidBusLocationError",
    "RenderError",
    "FileWriteError",
    "ConfigError",
    "format_error_for_log",
    # Models
    "InterfaceRecord",
    "InterfaceRegistry",
    "Collected",
    "CollectionFailure",
    "RenameEntry",
    "PipelineResult",
]
