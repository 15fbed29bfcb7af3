"""
Тесты ShellInterfaceTool: subprocess замокан, кроме проверки декодирования вывода.
"""

import subprocess
import sys

import pytest
from unittest.mock import patch, MagicMock

from ifname_sort.collectors import InterfaceCollector, ShellInterfaceTool, extract_bus_location
from ifname_sort.core.exceptions import CollectorExecutionError
from ifname_sort.core.models import Collected


def _completed(stdout="", stderr="", returncode=0):
    return MagicMock(stdout=stdout, stderr=stderr, returncode=returncode)


class TestShellInterfaceTool:
    """Тесты запуска ifconfig/ethtool."""

    def test_defaults(self):
        tool = ShellInterfaceTool()
        assert tool.lister_command == ["ifconfig", "-a"]
        assert tool.introspect_command == "ethtool"
        assert tool.flags == {"address": "-P", "driver": "-i"}
        assert tool.timeout is None

    def test_list_interfaces(self):
        with patch("subprocess.run", return_value=_completed("eth0: flags\n")) as run:
            output = ShellInterfaceTool().list_interfaces()

        assert output == "eth0: flags\n"
        args, kwargs = run.call_args
        assert args[0] == ["ifconfig", "-a"]
        assert kwargs["check"] is False
        assert kwargs["timeout"] is None
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"

    @pytest.mark.parametrize("mode, flag", [("address", "-P"), ("driver", "-i")])
    def test_introspect_argv(self, mode, flag):
        with patch("subprocess.run", return_value=_completed("x")) as run:
            ShellInterfaceTool().introspect("eth3", mode)

        assert run.call_args[0][0] == ["ethtool", flag, "eth3"]

    def test_custom_flags_and_timeout(self):
        tool = ShellInterfaceTool(flags={"address": "--show-permaddr"}, timeout=5)
        with patch("subprocess.run", return_value=_completed("x")) as run:
            tool.introspect("eth0", "address")

        assert run.call_args[0][0] == ["ethtool", "--show-permaddr", "eth0"]
        assert run.call_args[1]["timeout"] == 5
        assert tool.flags["driver"] == "-i"

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            ShellInterfaceTool().introspect("eth0", "stats")

    def test_nonzero_exit(self):
        result = _completed(stderr="Cannot get driver information: No such device\n", returncode=71)
        with patch("subprocess.run", return_value=result):
            with pytest.raises(CollectorExecutionError) as exc_info:
                ShellInterfaceTool().introspect("eth9", "driver")

        error = exc_info.value
        assert error.returncode == 71
        assert error.interface == "eth9"
        assert error.details["command"] == "ethtool -i eth9"
        assert error.details["stderr"] == "Cannot get driver information: No such device"

    def test_command_not_found(self):
        with patch("subprocess.run", side_effect=FileNotFoundError(2, "No such file", "ifconfig")):
            with pytest.raises(CollectorExecutionError) as exc_info:
                ShellInterfaceTool().list_interfaces()

        assert exc_info.value.returncode is None
        assert exc_info.value.command == "ifconfig -a"

    def test_timeout(self):
        expired = subprocess.TimeoutExpired(cmd=["ethtool", "-P", "eth0"], timeout=2)
        with patch("subprocess.run", side_effect=expired):
            with pytest.raises(CollectorExecutionError) as exc_info:
                ShellInterfaceTool(timeout=2).introspect("eth0", "address")

        assert "2" in exc_info.value.message

    def test_invalid_bytes_replaced(self):
        """Не-UTF-8 байты в выводе ethtool не мешают разбору PCI адреса."""
        script = (
            "import sys; sys.stdout.buffer.write("
            "b'driver: ixgbe\\nfirmware-version: \\xff\\xfe\\nbus-info: 0000:04:00.0\\n')"
        )
        tool = ShellInterfaceTool(lister_command=[sys.executable, "-c", script])

        output = tool.list_interfaces()

        assert "\ufffd" in output
        assert extract_bus_location(output) == "0000:04:00.0"

    def test_invalid_bytes_collected_per_adapter(self, tmp_path):
        """Адаптер с мусором в firmware-version собирается как Collected."""
        script = tmp_path / "ethtool"
        script.write_text(
            f"#!{sys.executable}\n"
            "import sys\n"
            "if sys.argv[1] == '-P':\n"
            "    sys.stdout.write('Permanent address: cc:46:d6:4e:d6:68\\n')\n"
            "else:\n"
            "    sys.stdout.buffer.write(b'firmware-version: \\xff\\xfe\\nbus-info: 0000:04:00.0\\n')\n",
            encoding="utf-8",
        )
        script.chmod(0o755)

        result = InterfaceCollector(ShellInterfaceTool(introspect_command=str(script))).collect_interface("eth0")

        assert isinstance(result, Collected)
        assert result.record.to_dict() == {
            "name": "eth0",
            "mac": "cc:46:d6:4e:d6:68",
            "bus": "0000:04:00.0",
        }
