"""
Тесты типизированных исключений.
"""

import pytest

from ifname_sort.core.exceptions import (
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
from ifname_sort.core.models import CollectionFailure


class TestHierarchy:
    """Иерархия наследования."""

    @pytest.mark.parametrize("cls, parent", [
        (CollectorExecutionError, CollectorError),
        (NoAddressFoundError, CollectorError),
        (NoBusLocationFoundError, CollectorError),
        (PartialCollectionError, CollectorError),
        (AssemblyError, RegistryError),
        (IncompleteRecordError, RegistryError),
        (InvalidBusLocationError, RegistryError),
        (FileWriteError, RenderError),
        (CollectorError, IfnameSortError),
        (RegistryError, IfnameSortError),
        (RenderError, IfnameSortError),
        (ConfigError, IfnameSortError),
    ])
    def test_subclass(self, cls, parent):
        assert issubclass(cls, parent)


class TestDetails:
    """details, __str__, to_dict."""

    def test_str_without_details(self):
        assert str(IfnameSortError("boom")) == "boom"

    def test_str_with_details(self):
        error = NoAddressFoundError("No MAC", interface="eth0")
        assert str(error) == "No MAC (interface='eth0')"

    def test_to_dict(self):
        error = FileWriteError("No space left on device", path="/etc/udev/rules.d/70-persistent-net.rules")
        assert error.to_dict() == {
            "error_type": "FileWriteError",
            "message": "No space left on device",
            "details": {"path": "/etc/udev/rules.d/70-persistent-net.rules"},
        }

    def test_execution_error_stderr_truncated(self):
        error = CollectorExecutionError("failed", command="ethtool -i eth0", returncode=1, stderr="x" * 500)
        assert len(error.details["stderr"]) == 200
        assert error.details["returncode"] == 1

    def test_assembly_error_lengths(self):
        error = AssemblyError("mismatch", lengths=(3, 2, 3))
        assert error.details == {"names": 3, "addresses": 2, "locations": 3}

    def test_partial_collection_names(self):
        failures = [
            CollectionFailure("eth1", NoAddressFoundError("No MAC", interface="eth1")),
            CollectionFailure("eth4", NoBusLocationFoundError("No PCI", interface="eth4")),
        ]
        error = PartialCollectionError("2 failed", failures=failures)
        assert error.details["interfaces"] == ["eth1", "eth4"]
        assert error.failures == failures

    def test_partial_collection_error_types(self):
        """Тип ошибки каждого адаптера попадает в строку лога."""
        failures = [
            CollectionFailure("eth1", NoAddressFoundError("No MAC", interface="eth1")),
            CollectionFailure("eth4", NoBusLocationFoundError("No PCI", interface="eth4")),
        ]
        error = PartialCollectionError("2 failed", failures=failures)

        assert error.details["errors"] == [
            "eth1: NoAddressFoundError",
            "eth4: NoBusLocationFoundError",
        ]
        assert "NoAddressFoundError" in format_error_for_log(error)

    def test_incomplete_record(self):
        error = IncompleteRecordError("incomplete", interface="eth0", missing=["bus"])
        assert error.details == {"interface": "eth0", "missing": ["bus"]}

    def test_config_error(self):
        error = ConfigError("bad", config_file="config.yaml", key="ordering.comparator")
        assert error.details == {"config_file": "config.yaml", "key": "ordering.comparator"}


class TestFormatErrorForLog:
    def test_own_error(self):
        assert format_error_for_log(InvalidBusLocationError("bad", bus="zz")) == "bad (bus='zz')"

    def test_foreign_error(self):
        assert format_error_for_log(OSError("disk")) == "OSError: disk"
