"""
Тесты конфигурации.

Проверяет:
- Pydantic схема: значения по умолчанию и валидация
- Config: YAML + переменные окружения, ошибки чтения
"""

import pytest

from ifname_sort.config import Config, ENV_OVERRIDES
from ifname_sort.core.config_schema import AppConfig, validate_config, get_default_config
from ifname_sort.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Переменные окружения хоста не влияют на тесты."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


class TestConfigSchema:
    """Тесты pydantic схемы."""

    def test_defaults(self):
        cfg = get_default_config()
        assert cfg.collector.pattern == "eth[0-9]+"
        assert cfg.collector.lister_command == ["ifconfig", "-a"]
        assert cfg.collector.timeout is None
        assert cfg.collector.mode == "per_adapter"
        assert cfg.ordering.comparator == "lexical"
        assert cfg.ordering.prefix == "eth"
        assert cfg.policy.on_failure == "abort"
        assert cfg.output.rules_dir == "/etc/udev/rules.d"
        assert cfg.output.ifcfg_dir == "/etc/sysconfig/network-scripts"

    def test_valid_overrides(self):
        cfg = validate_config({
            "collector": {"timeout": 5, "mode": "positional"},
            "ordering": {"comparator": "numeric"},
        })
        assert cfg.collector.timeout == 5
        assert cfg.ordering.comparator == "numeric"

    def test_bad_comparator(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config({"ordering": {"comparator": "natural"}})
        assert exc_info.value.key == "ordering.comparator"

    def test_bad_pattern(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config({"collector": {"pattern": "eth[0-9"}})
        assert exc_info.value.key == "collector.pattern"

    @pytest.mark.parametrize("section, values", [
        ("collector", {"timeout": 0}),
        ("collector", {"lister_command": []}),
        ("collector", {"mode": "parallel"}),
        ("policy", {"on_failure": "retry"}),
        ("ordering", {"prefix": ""}),
        ("logging", {"rotation": "weekly"}),
    ])
    def test_invalid_values(self, section, values):
        with pytest.raises(ConfigError):
            validate_config({section: values}, config_file="test.yaml")

    def test_log_level_case_insensitive(self):
        assert validate_config({"logging": {"level": "debug"}}).logging.level == "DEBUG"


class TestConfigLoader:
    """Тесты Config (YAML + env)."""

    def test_no_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cfg = Config()

        settings = cfg.reload()

        assert settings == AppConfig()
        assert cfg.config_file is None
        assert cfg.output.rules_dir == "/etc/udev/rules.d"

    def test_yaml_merged_with_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "ordering:\n  comparator: numeric\noutput:\n  rules_dir: /tmp/rules\n",
            encoding="utf-8",
        )
        cfg = Config()

        settings = cfg.reload(str(path))

        assert settings.ordering.comparator == "numeric"
        assert settings.ordering.prefix == "eth"
        assert settings.output.rules_dir == "/tmp/rules"
        assert settings.output.ifcfg_dir == "/etc/sysconfig/network-scripts"
        assert cfg.ordering.comparator == "numeric"
        assert cfg.validated is settings

    def test_autodiscovered_file(self, tmp_path, monkeypatch):
        (tmp_path / "ifname_sort.yaml").write_text("policy:\n  on_failure: skip\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert Config().reload().policy.on_failure == "skip"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  ifcfg_dir: /from/yaml\n", encoding="utf-8")
        monkeypatch.setenv("IFNAME_SORT_IFCFG_DIR", "/from/env")
        monkeypatch.setenv("IFNAME_SORT_LOG_LEVEL", "debug")

        settings = Config().reload(str(path))

        assert settings.output.ifcfg_dir == "/from/env"
        assert settings.logging.level == "DEBUG"

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            Config().reload(str(tmp_path / "nope.yaml"))

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("ordering: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config().reload(str(path))

    def test_root_not_dict(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config().reload(str(path))

    def test_invalid_value_reports_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("ordering:\n  comparator: natural\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            Config().reload(str(path))
        assert exc_info.value.config_file == str(path)

    def test_reload_resets_previous_file(self, tmp_path):
        path = tmp_path / "a.yaml"
        path.write_text("ordering:\n  prefix: lan\n", encoding="utf-8")
        cfg = Config()
        cfg.reload(str(path))

        path.write_text("{}\n", encoding="utf-8")
        assert cfg.reload(str(path)).ordering.prefix == "eth"
