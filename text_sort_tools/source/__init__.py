"""Source module - Read accepted lines from input files."""

from .line_source import read_lines

__all__ = ["read_lines"]
