"""Utility modules for shared functionality."""

from .json_loader import load_json_file, write_json_file
from .output_formatters import OutputFormatter, flatten_analysis

__all__ = [
    'load_json_file',
    'write_json_file',
    'OutputFormatter',
    'flatten_analysis',
]
