[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recordtools"
version = "0.1.0"
description = "Create numbered architecture decision records from templates"
requires-python = ">=3.11"
keywords = ["adr", "architecture-decision-records", "technical-debt", "documentation", "templates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]
dependencies = [
    "python-slugify",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rtrs = "recordtools.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["recordtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
