"""Helpers for inspecting record directories and record files."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .errors import RecordError

_NUMBER_PREFIX_LEN = 4
_U16_MAX = 0xFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u16(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise RecordError(f"invalid record number: {text!r}")
    value = int(text)
    if value > _U16_MAX:
        raise RecordError(f"record number out of range: {text!r}")
    return value


def find_next_num(path: str | os.PathLike) -> int:
    """Return the number following the highest-numbered record file in *path*.

    The file whose name sorts last is taken as the latest record; its first
    four characters are its number. An empty directory yields 1.
    """
    with os.scandir(path) as entries:
        names = [entry.name for entry in entries if entry.is_file(follow_symlinks=False)]

    if not names:
        return 1

    last = max(names)
    return _parse_u16(last[:_NUMBER_PREFIX_LEN]) + 1


def extract_field(path: str | os.PathLike, name: str) -> str:
    """Return the value written after ``<name>:`` in the record file at *path*."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordError(f"Failed to open template file: {os.fspath(path)}") from exc

    print(content)

    try:
        pattern = re.compile(f"{name}:[ |](.*)")
    except re.error as exc:
        raise RecordError(f"Invalid field name: {name}") from exc

    match = pattern.search(content)
    if match is None:
        raise RecordError("Couldn't find field")
    return match.group(1)