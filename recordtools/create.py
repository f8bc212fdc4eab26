"""Creating a new record from a template."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from pathlib import Path

from slugify import slugify

from .config import Config
from .errors import RecordError
from .file_utils import find_next_num

_PLACEHOLDER = re.compile(r"\$\{\s*([^}]*?)\s*\}")

INITIAL_STATUS = "drafted"


def render_template(text: str, values: Mapping[str, str]) -> str:
    """Replace every ``${NAME}`` in *text*; unknown names become empty."""
    return _PLACEHOLDER.sub(lambda match: values.get(match.group(1), ""), text)


def execute(title: str, config: Config, today: date | None = None) -> str:
    """Create the next numbered record titled *title*; return its path."""
    if not title:
        raise RecordError("Title cannot be empty")

    source_path = f"{config.template_dir}/{config.record_type}-template.{config.file_type}"
    try:
        template = Path(source_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordError(f"Failed to open template file: {source_path}") from exc

    next_num = find_next_num(config.adr_dir)
    today = today or date.today()

    result = render_template(
        template,
        {
            "NUMBER": str(next_num),
            "TITLE": title,
            "DATE": today.strftime("%Y-%m-%d"),
            "STATUS": INITIAL_STATUS,
        },
    )

    target_path = f"{config.adr_dir}/{next_num:04}-{slugify(title)}.{config.file_type}"

    if config.dry_run:
        print(f"Dry-run: {target_path}:\n{result}")
    else:
        try:
            with open(target_path, "x", encoding="utf-8") as handle:
                handle.write(result)
        except OSError as exc:
            raise RecordError(f"Failed to create new file: {target_path}") from exc

    dry_run = str(config.dry_run).lower()
    superseded = str(bool(config.superseded)).lower()
    print(
        f"Created new decision record {target_path} "
        f"(dry-run: {dry_run}, superseded: {superseded})"
    )
    return target_path