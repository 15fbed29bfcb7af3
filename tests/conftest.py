"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- load_fixture: Загрузка вывода ifconfig/ethtool из файлов
- FakeInterfaceTool / fake_tool: InterfaceTool с заранее заданным выводом
- settings: AppConfig с папками вывода в tmp_path
- scenario_registry: Реестр из двух интерфейсов с перепутанным порядком
"""

import logging

import pytest
from pathlib import Path
from typing import Dict, Tuple, Union

from ifname_sort.collectors.base import InterfaceTool
from ifname_sort.core.config_schema import AppConfig
from ifname_sort.core.context import set_current_context
from ifname_sort.core.domain import build_registry
from ifname_sort.core.exceptions import CollectorExecutionError

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(platform: str, filename: str) -> str:
    return (FIXTURES_DIR / platform / filename).read_text(encoding="utf-8")


class FakeInterfaceTool(InterfaceTool):
    """
    InterfaceTool без subprocess.

    outputs: {(name, mode): текст или исключение}.
    Нет ключа -> CollectorExecutionError, как у упавшего ethtool.
    """

    def __init__(
        self,
        listing: Union[str, Exception],
        outputs: Dict[Tuple[str, str], Union[str, Exception]],
    ):
        self.listing = listing
        self.outputs = outputs
        self.calls = []

    def list_interfaces(self) -> str:
        self.calls.append(("list", None))
        if isinstance(self.listing, Exception):
            raise self.listing
        return self.listing

    def introspect(self, name: str, mode: str) -> str:
        self.calls.append((name, mode))
        value = self.outputs.get((name, mode))
        if value is None:
            raise CollectorExecutionError(
                "Команда завершилась с ошибкой",
                interface=name,
                command=f"ethtool {mode} {name}",
                returncode=71,
            )
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fixtures_dir() -> Path:
    """Возвращает путь к директории fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """
    Fixture для загрузки тестовых данных из файлов.

    Usage:
        output = load_fixture("linux", "ifconfig_a.txt")
    """
    def _load(platform: str, filename: str) -> str:
        fixture_path = FIXTURES_DIR / platform / filename
        if not fixture_path.exists():
            pytest.skip(f"Fixture не найден: {fixture_path}")
        return fixture_path.read_text(encoding="utf-8")
    return _load


@pytest.fixture
def host_outputs() -> Dict[Tuple[str, str], str]:
    """
    Вывод ethtool для хоста из трёх адаптеров.

    eth0 -> 0000:04:00.1 / cc:46:d6:4e:d6:69
    eth1 -> 0000:04:00.0 / cc:46:d6:4e:d6:68
    eth2 -> 0000:03:00.0 / cc:46:d6:4e:d6:6a
    """
    outputs = {}
    for name in ("eth0", "eth1", "eth2"):
        outputs[(name, "address")] = read_fixture("linux", f"ethtool_address_{name}.txt")
        outputs[(name, "driver")] = read_fixture("linux", f"ethtool_driver_{name}.txt")
    return outputs


@pytest.fixture
def fake_tool(host_outputs) -> FakeInterfaceTool:
    """FakeInterfaceTool для хоста из трёх адаптеров."""
    return FakeInterfaceTool(read_fixture("linux", "ifconfig_a.txt"), host_outputs)


@pytest.fixture
def output_dirs(tmp_path) -> Tuple[Path, Path]:
    """Существующие папки для rules и ifcfg."""
    rules_dir = tmp_path / "rules.d"
    ifcfg_dir = tmp_path / "network-scripts"
    rules_dir.mkdir()
    ifcfg_dir.mkdir()
    return rules_dir, ifcfg_dir


@pytest.fixture
def settings(output_dirs) -> AppConfig:
    """Конфигурация по умолчанию, вывод в tmp_path."""
    rules_dir, ifcfg_dir = output_dirs
    return AppConfig(output={"rules_dir": str(rules_dir), "ifcfg_dir": str(ifcfg_dir)})


@pytest.fixture
def scenario_registry():
    """Два адаптера, ядро назвало их в обратном порядке PCI."""
    return build_registry(
        ["eth0", "eth1"],
        ["cc:46:d6:4e:d6:69", "cc:46:d6:4e:d6:68"],
        ["0000:04:00.1", "0000:04:00.0"],
    )


@pytest.fixture(autouse=True)
def reset_run_context():
    """Контекст запуска и handlers root логгера не утекают между тестами."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    set_current_context(None)
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
