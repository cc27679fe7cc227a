# ABOUTME: Reads raw media property sets from JSON documents.
# ABOUTME: Also parses "source=dest" correspondence pairs given on the command line.

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class MediaLoadError(Exception):
    """Raised when a raw property set or correspondence pair cannot be read."""


def load_raw_properties(path: Path) -> dict[str, Any]:
    """Load a raw property set from a JSON file.

    The document must hold a single JSON object; its keys become property
    names and its values are kept as decoded.

    Raises:
        MediaLoadError: If the file is unreadable, not JSON, or not an object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        raise MediaLoadError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Invalid JSON in %s: %s", path, exc)
        raise MediaLoadError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise MediaLoadError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data


def parse_mapping_options(pairs: tuple[str, ...] | list[str]) -> dict[str, str]:
    """Turn "source=dest" strings into an ordered correspondence table.

    Raises:
        MediaLoadError: If a pair has no "=" or an empty side.
    """
    table: dict[str, str] = {}
    for pair in pairs:
        source, sep, destination = pair.partition("=")
        source, destination = source.strip(), destination.strip()
        if not sep or not source or not destination:
            raise MediaLoadError(f"Invalid mapping {pair!r}, expected SOURCE=DEST")
        table[source] = destination
    return table
