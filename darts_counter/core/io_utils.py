"""
YAML helpers for settings files.
"""
import os
import tempfile
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

logger = logging.getLogger(__name__)


def atomic_write_yaml(filepath: Path, data: Dict[str, Any]) -> None:
    """
    Dump data to YAML without ever exposing a partially written file.

    The document goes to a sibling temp file first and is then moved over
    the target with os.replace(), which is atomic on the same filesystem.

    Raises:
        IOError: If the file could not be written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=filepath.parent,
        prefix=f".{filepath.stem}_",
        suffix=".tmp",
        delete=False,
    )
    try:
        with tmp:
            yaml.safe_dump(data, tmp, default_flow_style=False, sort_keys=False)
        os.replace(tmp.name, filepath)
    except (OSError, yaml.YAMLError) as e:
        Path(tmp.name).unlink(missing_ok=True)
        logger.error(f"Could not save {filepath}: {e}")
        raise IOError(f"Atomic write failed: {e}") from e

    logger.debug(f"Saved {filepath}")


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Read a YAML mapping from disk.

    Returns:
        Parsed dictionary ({} for an empty document)

    Raises:
        FileNotFoundError: If file does not exist
        yaml.YAMLError: If file is malformed
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        data = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse {filepath}: {e}")
        raise

    return data or {}
