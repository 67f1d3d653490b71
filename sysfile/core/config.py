"""
sysfile.core.config

Configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `load_settings`: validated settings merged over the bundled defaults
 - `Settings`: typed view over the validated values
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from sysfile.core.errors import ConfigError
from sysfile.core.file_io import read_yaml


ConfigDict = Dict[str, Any]

DEFAULT_CONFIG_FILENAME = "config.yaml"
CONFIGS_DIR = Path(__file__).resolve().parents[1] / "configs"
DEFAULT_CONFIG_PATH = CONFIGS_DIR / DEFAULT_CONFIG_FILENAME

LOGGING_SECTION_KEY = "logging"
DEFAULTS_SECTION_KEY = "defaults"

LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}
DEFAULTS_ALLOWED_KEYS = {"precision", "max_attempts"}
SECTION_KEYS = {
    LOGGING_SECTION_KEY: LOGGING_ALLOWED_KEYS,
    DEFAULTS_SECTION_KEY: DEFAULTS_ALLOWED_KEYS,
}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

BUILTIN_CONFIG: ConfigDict = {
    LOGGING_SECTION_KEY: {
        "level": "WARNING",
        "use_rich": None,
        "log_dir": None,
        "file_prefix": "sysfile",
    },
    DEFAULTS_SECTION_KEY: {
        "precision": 1,
        "max_attempts": 100,
    },
}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}
AUTO_VALUES = {"", "auto", "default"}


@dataclass(frozen=True)
class Settings:
    level: str = "WARNING"
    use_rich: Optional[bool] = None
    log_dir: Optional[Path] = None
    file_prefix: str = "sysfile"
    precision: int = 1
    max_attempts: int = 100


def load_config(path: str | Path | None) -> Mapping[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    data = read_yaml(cfg_path)
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration root must be a mapping in {cfg_path}")
    return data


def _coerce_bool(value: Any, key: str) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in AUTO_VALUES:
            return None
        if lowered in YES_VALUES:
            return True
        if lowered in NO_VALUES:
            return False
    raise ConfigError(f"'{key}' must be a boolean or 'auto', got {value!r}")


def _coerce_int(value: Any, key: str, *, minimum: int) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{key}' must be an integer, got {value!r}") from exc
    if number < minimum:
        raise ConfigError(f"'{key}' must be >= {minimum}, got {number}")
    return number


def _coerce_level(value: Any) -> str:
    if isinstance(value, str) and value.strip().upper() in LOG_LEVELS:
        return value.strip().upper()
    raise ConfigError(f"'level' must be one of {sorted(LOG_LEVELS)}, got {value!r}")


def _merge(raw: Mapping[str, Any], source: str) -> ConfigDict:
    merged = deepcopy(BUILTIN_CONFIG)
    unknown_sections = set(raw) - set(SECTION_KEYS)
    if unknown_sections:
        raise ConfigError(f"Unknown configuration section(s) in {source}: {', '.join(sorted(unknown_sections))}")

    for section, allowed in SECTION_KEYS.items():
        block = raw.get(section)
        if block is None:
            continue
        if not isinstance(block, Mapping):
            raise ConfigError(f"Section '{section}' must be a mapping in {source}")
        unknown = set(block) - allowed
        if unknown:
            raise ConfigError(f"Unknown key(s) in '{section}' of {source}: {', '.join(sorted(unknown))}")
        merged[section].update(block)
    return merged


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings from ``path`` (or the bundled config.yaml) over built-in defaults.

    Raises:
        FileNotFoundError: If an explicit ``path`` does not exist.
        ConfigError: If the file holds unknown keys or invalid values.
    """
    cfg_path = Path(path).expanduser() if path else DEFAULT_CONFIG_PATH
    raw = load_config(cfg_path) if path or cfg_path.exists() else {}
    merged = _merge(raw, str(cfg_path))

    logging_block = merged[LOGGING_SECTION_KEY]
    defaults_block = merged[DEFAULTS_SECTION_KEY]
    log_dir = logging_block.get("log_dir")
    file_prefix = logging_block.get("file_prefix") or "sysfile"

    return Settings(
        level=_coerce_level(logging_block.get("level")),
        use_rich=_coerce_bool(logging_block.get("use_rich"), "use_rich"),
        log_dir=Path(str(log_dir)).expanduser() if log_dir else None,
        file_prefix=str(file_prefix),
        precision=_coerce_int(defaults_block.get("precision"), "precision", minimum=0),
        max_attempts=_coerce_int(defaults_block.get("max_attempts"), "max_attempts", minimum=1),
    )


__all__ = [
    "Settings",
    "load_config",
    "load_settings",
    "BUILTIN_CONFIG",
    "DEFAULT_CONFIG_PATH",
]
