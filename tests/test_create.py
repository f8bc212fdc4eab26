from datetime import date
from pathlib import Path

import pytest

from recordtools.config import Config
from recordtools.create import execute, render_template
from recordtools.errors import RecordError

TEMPLATE = "= ${NUMBER}. ${TITLE}\nDate: ${DATE}\nStatus: ${STATUS}\n"


@pytest.fixture
def config(tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "adr-template.adoc").write_text(TEMPLATE, encoding="utf-8")
    adr_dir = tmp_path / "adr"
    adr_dir.mkdir()
    return Config(
        template_dir=str(templates),
        adr_dir=str(adr_dir),
        tdr_dir=str(tmp_path),
        record_type="adr",
    )


def test_render_template_fills_values():
    assert render_template("Title: ${TITLE}", {"TITLE": "Test ADR"}) == "Title: Test ADR"


def test_render_template_unknown_names_become_empty():
    assert render_template("Status: ${STATUS}", {}) == "Status: "


def test_render_template_keeps_plain_text():
    text = "no placeholders $ here {}"
    assert render_template(text, {"TITLE": "x"}) == text


def test_creates_numbered_record(config):
    target = execute("Test ADR", config, date(2025, 6, 1))
    assert Path(target).name == "0001-test-adr.adoc"
    content = Path(target).read_text(encoding="utf-8")
    assert "= 1. Test ADR" in content
    assert "Date: 2025-06-01" in content
    assert "Status: drafted" in content


def test_numbers_follow_existing_records(config):
    first = execute("Test ADR", config, date(2025, 6, 1))
    second = execute("Another one", config, date(2025, 6, 1))
    assert Path(first).name.startswith("0001-")
    assert Path(second).name.startswith("0002-")


def test_dry_run_writes_nothing(config, capsys):
    target = execute("Test ADR", config.__class__(**{**vars(config), "dry_run": True}))
    out = capsys.readouterr().out
    assert "Dry-run" in out
    assert "Created new decision record" in out
    assert "dry-run: true" in out
    assert not Path(target).exists()
    assert list(Path(config.adr_dir).iterdir()) == []


def test_superseded_is_reported(config, capsys):
    config.superseded = "0001"
    execute("Test ADR", config)
    assert "superseded: true" in capsys.readouterr().out


def test_empty_title_is_rejected(config):
    with pytest.raises(RecordError, match="Title cannot be empty"):
        execute("", config)


def test_missing_template(config):
    config.record_type = "tdr"
    with pytest.raises(RecordError, match="Failed to open template file"):
        execute("Test ADR", config)


def test_existing_target_is_not_overwritten(config):
    (Path(config.adr_dir) / "0001-test-adr.adoc").mkdir()
    with pytest.raises(RecordError, match="Failed to create new file"):
        execute("Test ADR", config)