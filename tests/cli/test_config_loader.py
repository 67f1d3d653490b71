from __future__ import annotations

from pathlib import Path
import textwrap

import pytest
import yaml

from sysfile.core.config import (
    DEFAULT_CONFIG_PATH,
    Settings,
    load_config,
    load_settings,
)
from sysfile.core.errors import ConfigError


def _write_config(tmp_path: Path, content: str, filename: str = "config.yaml") -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_bundled_config_exists_and_loads() -> None:
    assert DEFAULT_CONFIG_PATH.is_file()
    settings = load_settings()
    assert settings == Settings()


def test_load_config_without_path_is_empty() -> None:
    assert load_config(None) == {}


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.yaml")


def test_load_settings_overrides(tmp_path: Path) -> None:
    cfg_path = _write_config(
        tmp_path,
        f"""
        logging:
          level: debug
          use_rich: "no"
          log_dir: '{tmp_path / "logs"}'
        defaults:
          precision: 3
        """,
    )

    settings = load_settings(cfg_path)

    assert settings.level == "DEBUG"
    assert settings.use_rich is False
    assert settings.log_dir == tmp_path / "logs"
    assert settings.file_prefix == "sysfile"
    assert settings.precision == 3
    assert settings.max_attempts == 100


def test_load_settings_from_written_yaml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "written.yaml"
    payload = {"logging": {"use_rich": "auto"}, "defaults": {"max_attempts": "5"}}
    cfg_path.write_text(yaml.safe_dump(payload), encoding="utf-8")

    settings = load_settings(cfg_path)

    assert settings.use_rich is None
    assert settings.max_attempts == 5


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, "")
    assert load_settings(cfg_path) == Settings()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "extras:\n  key: 1\n",
        "logging:\n  colour: true\n",
        "logging: verbose\n",
        "logging:\n  level: LOUD\n",
        "logging:\n  use_rich: maybe\n",
        "defaults:\n  precision: -1\n",
        "defaults:\n  precision: one\n",
        "defaults:\n  max_attempts: 0\n",
        "defaults:\n  max_attempts: true\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    cfg_path = _write_config(tmp_path, content)
    with pytest.raises(ConfigError):
        load_settings(cfg_path)
