"""Settings for the record tools and loading them from a config file."""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import RecordError

CONFIG_FILE_NAME = "config"
CONFIG_EXTENSIONS = (".yaml", ".yml", ".toml", ".json")

# Settings that may come from a config file; the others are command line only.
FILE_KEYS = ("file_type", "template_dir", "adr_dir", "tdr_dir")


@dataclass
class Config:
    """Settings the record commands run with."""

    file_type: str = "adoc"
    template_dir: str = "./templates"
    adr_dir: str = "./architecture-decision-record"
    tdr_dir: str = "./technical-debt-records"
    record_type: str = ""
    superseded: str = ""
    dry_run: bool = False
    commands: list[str] = field(default_factory=list)


def find_config_file(directory: str | os.PathLike) -> Path | None:
    """Return the first config file found in *directory* or its parents."""
    start = Path(directory).resolve()
    for folder in (start, *start.parents):
        for extension in CONFIG_EXTENSIONS:
            candidate = folder / f"{CONFIG_FILE_NAME}{extension}"
            if candidate.is_file():
                return candidate
    return None


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix == ".json":
        return json.loads(text)
    raise RecordError(f"Unsupported config file format: {path}")


def load_config_file(path: str | os.PathLike) -> dict[str, str]:
    """Read the file-settable values from a YAML, TOML or JSON config file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordError(f"Failed to read config file: {path}") from exc

    try:
        data = _parse(path, text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise RecordError(f"Failed to parse config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RecordError(f"Config file {path} does not hold a mapping")

    values = {}
    for key, value in data.items():
        name = str(key).replace("-", "_")
        if name in FILE_KEYS and value is not None:
            values[name] = str(value)
    return values


def sanity_checks(config: Config) -> None:
    """Raise RecordError unless every configured directory exists."""
    checks = (
        ("Template", config.template_dir),
        ("ADR", config.adr_dir),
        ("TDR", config.tdr_dir),
    )
    for label, directory in checks:
        if not Path(directory).exists():
            raise RecordError(f"{label} directory {directory} does not exist")