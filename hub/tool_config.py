"""
Per-tool metadata. Structured JSON configs are read first; the legacy
js/chatooly-config.js is scraped for quoted string values only when no
structured config can be read.
"""

import json
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

METADATA_KEYS = ("name", "description", "author", "category", "version")
STRUCTURED_FILES = ("tool.json", "js/chatooly-config.json")
LEGACY_FILE = "js/chatooly-config.js"

_LEGACY_PATTERNS = {
    key: re.compile(r"\b" + key + r"\s*:\s*['\"`]([^'\"`]+)['\"`]")
    for key in METADATA_KEYS
}


def _pick(data: dict) -> dict:
    """Known keys with non-empty string values."""
    out = {}
    for key in METADATA_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            out[key] = value.strip()
    return out


def read_structured(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("top-level value is not an object")
    return _pick(data)


def read_legacy(path: Path) -> dict:
    text = Path(path).read_text(encoding="utf-8")
    found = {}
    for key, pattern in _LEGACY_PATTERNS.items():
        m = pattern.search(text)
        if m:
            found[key] = m.group(1)
    return _pick(found)


def read_tool_config(tool_dir: Path) -> dict:
    """Metadata overrides for one tool directory; {} when nothing usable is found."""
    tool_dir = Path(tool_dir)
    for rel in STRUCTURED_FILES:
        path = tool_dir / rel
        if not path.is_file():
            continue
        try:
            return read_structured(path)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s for %s: %s", rel, tool_dir.name, e)
    path = tool_dir / LEGACY_FILE
    if path.is_file():
        try:
            return read_legacy(path)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s for %s: %s", LEGACY_FILE, tool_dir.name, e)
    return {}
