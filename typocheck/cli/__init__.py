"""Command-line interface for typocheck."""

from typocheck.cli.parser import create_parser

__all__ = ["create_parser"]
