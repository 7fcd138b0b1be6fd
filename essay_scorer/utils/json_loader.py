"""JSON file helpers shared by the storage layer."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_json_file(file_path: Path) -> Any:
    """Parse a JSON file.

    ``FileNotFoundError`` and ``json.JSONDecodeError`` propagate unlogged;
    callers decide whether a missing or unreadable file is an error.
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    logger.debug(f"Loaded JSON from {file_path}")
    return data


def write_json_file(file_path: Path, data: Any) -> None:
    """Write data as indented JSON, creating parent directories."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_suffix(file_path.suffix + '.tmp')
    with open(tmp_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, default=str)
    tmp_path.replace(file_path)
