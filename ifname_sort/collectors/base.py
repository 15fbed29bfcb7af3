"""
Источник сырых данных об интерфейсах.

InterfaceTool: абстракция над двумя внешними утилитами:
- list_interfaces(): список интерфейсов (ifconfig -a)
- introspect(name, mode): данные одного интерфейса
    mode="address" -> ethtool -P <name> (MAC-адрес)
    mode="driver"  -> ethtool -i <name> (драйвер и PCI адрес)

Коллектор получает InterfaceTool в конструкторе, поэтому в тестах
вместо реальных утилит подставляется вывод из файлов.

Пример создания своего источника:
    class SysfsTool(InterfaceTool):
        def list_interfaces(self):
            return "\\n".join(os.listdir("/sys/class/net"))

        def introspect(self, name, mode):
            ...
"""

import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..core.constants import (
    ADDRESS_MODE,
    DRIVER_MODE,
    DEFAULT_LISTER_COMMAND,
    DEFAULT_INTROSPECT_COMMAND,
    DEFAULT_INTROSPECT_FLAGS,
)
from ..core.exceptions import CollectorExecutionError

logger = logging.getLogger(__name__)


class InterfaceTool(ABC):
    """
    Абстрактный источник вывода утилит ifconfig/ethtool.

    Обе операции возвращают сырой текст или выбрасывают
    CollectorExecutionError.
    """

    @abstractmethod
    def list_interfaces(self) -> str:
        """Возвращает вывод утилиты перечисления интерфейсов."""

    @abstractmethod
    def introspect(self, name: str, mode: str) -> str:
        """
        Возвращает вывод утилиты для одного интерфейса.

        Args:
            name: Имя интерфейса (eth0)
            mode: address (MAC) или driver (PCI адрес)
        """


class ShellInterfaceTool(InterfaceTool):
    """
    Запуск ifconfig/ethtool через subprocess.

    Attributes:
        lister_command: argv утилиты перечисления (["ifconfig", "-a"])
        introspect_command: утилита для интерфейса ("ethtool")
        flags: {mode: flag} для introspect_command
        timeout: Таймаут одного запуска в секундах (None = без таймаута)

    Example:
        tool = ShellInterfaceTool(timeout=10)
        output = tool.introspect("eth0", "address")
        # Permanent address: cc:46:d6:4e:d6:68
    """

    def __init__(
        self,
        lister_command: Optional[List[str]] = None,
        introspect_command: str = DEFAULT_INTROSPECT_COMMAND,
        flags: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        self.lister_command = list(lister_command or DEFAULT_LISTER_COMMAND)
        self.introspect_command = introspect_command
        self.flags = {**DEFAULT_INTROSPECT_FLAGS, **(flags or {})}
        self.timeout = timeout

    def list_interfaces(self) -> str:
        return self._run(self.lister_command)

    def introspect(self, name: str, mode: str) -> str:
        if mode not in (ADDRESS_MODE, DRIVER_MODE):
            raise ValueError(f"Unknown introspect mode: {mode}")
        argv = [self.introspect_command, self.flags[mode], name]
        return self._run(argv, interface=name)

    def _run(self, argv: List[str], interface: Optional[str] = None) -> str:
        """
        Запускает команду и возвращает stdout.

        Raises:
            CollectorExecutionError: Команда не запустилась, упала по
                таймауту или вернула ненулевой код
        """
        command = shlex.join(argv)
        logger.debug(f"Запуск: {command}")

        try:
            result = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise CollectorExecutionError(
                f"Таймаут {self.timeout}s",
                interface=interface,
                command=command,
            ) from None
        except OSError as e:
            raise CollectorExecutionError(
                f"Не удалось запустить команду: {e}",
                interface=interface,
                command=command,
            ) from e

        if result.returncode != 0:
            raise CollectorExecutionError(
                "Команда завершилась с ошибкой",
                interface=interface,
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return result.stdout
