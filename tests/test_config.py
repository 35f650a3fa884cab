"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from weather_report.config import Config, load_config, load_config_or_exit
from weather_report.errors import ConfigError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    @pytest.mark.parametrize(
        "api_key",
        ["abc123", "", "  spaced key  ", "ключ-ü"],
    )
    def test_api_key_returned_exactly(self, tmp_path: Path, api_key: str) -> None:
        path = _write(tmp_path, json.dumps({"api_key": api_key}))

        config = load_config(path)

        assert config.api_key == api_key

    def test_extra_keys_preserved(self, tmp_path: Path) -> None:
        data = {"api_key": "abc123", "note": "personal", "nested": {"a": [1, 2]}}
        path = _write(tmp_path, json.dumps(data))

        config = load_config(path)

        assert config.raw == data

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"api_key": "abc123"}')

        assert load_config(str(path)).api_key == "abc123"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "absent.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "{api_key: abc123")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_non_object_root_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '["abc123"]')

        with pytest.raises(ConfigError, match="JSON object"):
            load_config(path)

    def test_missing_api_key_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"key": "abc123"}')

        with pytest.raises(ConfigError, match="api_key"):
            load_config(path)

    def test_non_string_api_key_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"api_key": 12345}')

        with pytest.raises(ConfigError, match="must be a string"):
            load_config(path)


class TestConfig:
    """Tests for the Config dataclass."""

    def test_config_is_frozen(self) -> None:
        config = Config.from_dict({"api_key": "abc123"})

        with pytest.raises(AttributeError):
            config.api_key = "other"  # type: ignore[misc]


class TestLoadConfigOrExit:
    """Tests for the process-terminating loader."""

    def test_success_returns_config(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"api_key": "abc123"}')

        assert load_config_or_exit(path).api_key == "abc123"

    def test_missing_file_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            load_config_or_exit(tmp_path / "absent.json")

        assert exc_info.value.code == 1
        assert "Error loading config:" in capsys.readouterr().err

    def test_invalid_json_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(tmp_path, "not json")

        with pytest.raises(SystemExit) as exc_info:
            load_config_or_exit(path)

        assert exc_info.value.code == 1
        assert "Invalid JSON" in capsys.readouterr().err
