# recordtools

`recordtools` creates numbered record files, such as Architecture Decision
Records, by filling in a template.

## Installation

```
pip install .
```

The package installs the `rtrs` command.

## Usage

```
rtrs [OPTIONS] [commands]...
```

Options:

- `--config-file` reads settings from a YAML, TOML or JSON file.
- `--file-type` sets the record file extension. The default is `adoc`.
- `--template-dir` sets the directory that holds the templates. The default is `./templates`.
- `--adr-dir` sets the directory that new records are numbered from and written to. The default is `./architecture-decision-record`.
- `--tdr-dir` sets the directory for Technical Debt Records. The default is `./technical-debt-records`.
- `-t`, `--record-type` selects the template. It is the `<type>` part of `<type>-template.<file-type>`, for example `adr`.
- `-s`, `--superseded` names an old decision record that the new one supersedes.
- `--dry-run` prints the rendered record and writes no file.

Options and positional arguments may be given in any order.

Before running a command, `rtrs` prints the config file it loaded, the
settings, and the positional arguments. It then checks that the template
directory, the ADR directory and the TDR directory all exist. If one is
missing, it prints an error and exits with status 1.

### Config file

If `--config-file` is not given, `rtrs` searches the current directory and
then each parent directory. In each directory it looks for `config.yaml`,
`config.yml`, `config.toml` and `config.json`, in that order, and uses the
first file it finds. If `--config-file` names a file that does not exist,
`rtrs` exits with status 1.

A config file may set only `file_type`, `template_dir`, `adr_dir` and
`tdr_dir`. Keys written with hyphens, such as `adr-dir`, are accepted too.
Other keys are ignored. Options given on the command line take precedence
over the config file. `--record-type`, `--superseded` and `--dry-run` are
accepted only on the command line.

```toml
file_type = "adoc"
template_dir = "./templates"
adr_dir = "./docs/architecture-decision-records"
tdr_dir = "./docs/technical-debt-records"
```

### Creating a record

```
rtrs -t adr create "Use PostgreSQL for persistence"
```

The words after `create` are joined by spaces to form the title. The title
must not be empty.

The command reads `<template-dir>/adr-template.adoc` and replaces these
placeholders:

- `${NUMBER}` becomes the new record number.
- `${TITLE}` becomes the title.
- `${DATE}` becomes today's date as `YYYY-MM-DD`.
- `${STATUS}` becomes `drafted`.

Whitespace inside the braces is allowed, as in `${ TITLE }`. Any other
`${...}` placeholder is replaced with an empty string.

The result is written to a new file in the ADR directory. The file is named
after the zero-padded number and the slugified title, for example
`<adr-dir>/0004-use-postgresql-for-persistence.adoc`. An existing file is
never overwritten; in that case `rtrs` reports an error.

The new number is one more than the first four characters of the file name
that sorts last in the ADR directory. If the directory holds no files,
numbering starts at 1.

To see the result without writing anything, add `--dry-run`:

```
rtrs -t adr --dry-run create "Use PostgreSQL for persistence"
```

Errors raised while a command runs are printed to standard error. The exit
status stays 0 in that case.

### What it does not do

- `init` is accepted as a command but does nothing.
- Every other command name is rejected with "Command not implemented yet".
- Records are always numbered from, and written to, the ADR directory. The
  TDR directory is only checked for existence.
- `--superseded` is only reported in the closing message. No existing record
  is changed.

## Library use

The building blocks can be called directly:

```python
from datetime import date
from recordtools.config import Config
from recordtools.create import execute, render_template
from recordtools.file_utils import extract_field, find_next_num

find_next_num("docs/architecture-decision-records")
extract_field("docs/architecture-decision-records/0001-first.adoc", "Status")
render_template("= ${NUMBER}. ${TITLE}", {"NUMBER": "1", "TITLE": "First"})

config = Config(record_type="adr", adr_dir="docs/architecture-decision-records", dry_run=True)
execute("First decision", config, today=date(2025, 1, 1))
```

- `find_next_num(path)` returns the next record number for a directory.
- `extract_field(path, name)` prints the file's contents and returns the text
  that follows `<name>:` and one space or `|` character.
- `execute(title, config, today)` creates a record and returns its path.

Failures raise `recordtools.errors.RecordError`.