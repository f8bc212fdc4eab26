"""Create numbered decision records from templates."""

__version__ = "0.1.0"