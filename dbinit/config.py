"""Bootstrap settings: defaults, optional dbinit.yaml, then CLI overrides."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_NAME = "dbinit.yaml"

# YAML types accepted per key; db_dir is read as a string path.
CONFIG_TYPES: Dict[str, type] = {
    "client": str,
    "db_dir": str,
    "db_name": str,
    "trace": bool,
}


@dataclass(frozen=True)
class Settings:
    """Where the database lives and which client opens it.

    Config format:
        client: sqlite3
        db_dir: db
        db_name: games.db
        trace: true
    """

    client: str = "sqlite3"
    db_dir: Path = Path("db")
    db_name: str = "games.db"
    trace: bool = True

    @property
    def db_path(self) -> Path:
        return self.db_dir / self.db_name


def _read_config(config_path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {config_path}: expected a mapping")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown keys in {config_path}: {', '.join(unknown)}")

    for key, value in data.items():
        expected = CONFIG_TYPES[key]
        if not isinstance(value, expected):
            raise ValueError(
                f"Invalid value for '{key}' in {config_path}: "
                f"expected {expected.__name__}, got {value!r}"
            )
        if expected is str and not value.strip():
            raise ValueError(f"Invalid value for '{key}' in {config_path}: must not be empty")
    return data


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(values)
    if "db_dir" in result:
        result["db_dir"] = Path(result["db_dir"])
    if "client" in result:
        result["client"] = str(result["client"])
    if "db_name" in result:
        result["db_name"] = str(result["db_name"])
    if "trace" in result:
        result["trace"] = bool(result["trace"])
    return result


def load_settings(config_path: Optional[Path] = None, **overrides: Any) -> Settings:
    """Build settings from the config file (if any) and non-None overrides.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the config file is malformed or has unknown keys
    """
    settings = Settings()

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    elif Path(DEFAULT_CONFIG_NAME).exists():
        config_path = Path(DEFAULT_CONFIG_NAME)

    if config_path is not None:
        settings = replace(settings, **_coerce(_read_config(config_path)))

    given = {k: v for k, v in overrides.items() if v is not None}
    return replace(settings, **_coerce(given))
