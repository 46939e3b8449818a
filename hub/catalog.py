"""Tool discovery: every published directory under the tools root that has an index.html."""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from hub.slug import RESERVED
from hub.tool_config import read_tool_config

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def iso_utc(ts: float) -> str:
    """Epoch seconds -> '2024-01-02T03:04:05.678Z'."""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    return iso_utc(datetime.now(tz=timezone.utc).timestamp())


def title_from_slug(slug: str) -> str:
    """'my-cool-tool' -> 'My Cool Tool'."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), slug.replace("-", " "))


def default_metadata(slug: str, brand: str = "Chatooly") -> dict:
    return {
        "name": title_from_slug(slug),
        "slug": slug,
        "description": f"A {brand} design tool",
        "author": "Anonymous",
        "category": "tools",
        "version": "1.0.0",
        "url": f"/tools/{slug}",
        "createdAt": now_iso(),
    }


def created_at(path: Path) -> float:
    """Birth time where the platform records it, else ctime."""
    st = path.stat()
    return getattr(st, "st_birthtime", st.st_ctime)


def is_tool_dir(path: Path) -> bool:
    name = path.name
    if name.startswith(".") or name in RESERVED:
        return False
    return path.is_dir() and (path / INDEX_FILE).is_file()


def read_tool_metadata(tool_dir: Path, brand: str = "Chatooly") -> tuple[dict, float]:
    """(metadata, creation timestamp) for one tool directory."""
    slug = tool_dir.name
    meta = default_metadata(slug, brand)
    meta.update(read_tool_config(tool_dir))
    meta["slug"] = slug
    meta["url"] = f"/tools/{slug}"
    try:
        ts = created_at(tool_dir / INDEX_FILE)
        meta["createdAt"] = iso_utc(ts)
    except OSError as e:
        logger.warning("Could not stat %s for %s: %s", INDEX_FILE, slug, e)
        ts = 0.0
    return meta, ts


def discover_tools(tools_dir: Path | str, brand: str = "Chatooly") -> list[dict]:
    """Metadata for every tool, newest first. Empty when the directory is missing."""
    tools_dir = Path(tools_dir)
    if not tools_dir.is_dir():
        logger.warning("Tools directory not found: %s", tools_dir)
        return []
    found = []
    for entry in sorted(tools_dir.iterdir()):
        if is_tool_dir(entry):
            found.append(read_tool_metadata(entry, brand))
    found.sort(key=lambda pair: pair[1], reverse=True)
    return [meta for meta, _ in found]
