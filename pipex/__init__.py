"""Run command pipelines between files, with here-document input, plus small C-style helpers."""

__version__ = "0.1.0"