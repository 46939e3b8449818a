"""URL-safe tool names and collision-free tool directories."""

import re
from pathlib import Path

# Directory names the catalog never lists; a slug may not claim them.
RESERVED = frozenset({"staging", "live"})

_NOT_SLUG = re.compile(r"[^a-z0-9-]")
_HYPHENS = re.compile(r"-+")


def slugify(name: str) -> str:
    """'My Cool Tool!' -> 'my-cool-tool'. May return '' when nothing usable remains."""
    s = _NOT_SLUG.sub("-", (name or "").lower())
    s = _HYPHENS.sub("-", s)
    return s.strip("-")


def is_taken(tools_dir: Path, slug: str) -> bool:
    return slug in RESERVED or slug.startswith(".") or (tools_dir / slug).exists()


def unique_slug(base: str, tools_dir: Path) -> str:
    """base, or base-2, base-3, ... for the first name not present under tools_dir."""
    tools_dir = Path(tools_dir)
    slug = base
    counter = 2
    while is_taken(tools_dir, slug):
        slug = f"{base}-{counter}"
        counter += 1
    return slug
