"""
Publishing: validate a {toolName, metadata, files} submission, pick a free slug,
and write the files under tools_dir/<slug>. Every file is decoded before the
directory is created, so a rejected submission leaves nothing behind.
"""

import base64
import binascii
import json
import logging
import re
from pathlib import Path, PurePosixPath

from hub.catalog import INDEX_FILE, now_iso
from hub.errors import HubError
from hub.slug import slugify, unique_slug

logger = logging.getLogger(__name__)

METADATA_FILE = "tool.json"
DATA_URI = re.compile(r"^data:([^;,]+);base64,(.+)$", re.DOTALL)


def decode_content(name: str, content) -> bytes | str:
    """base64 data: URIs become bytes; any other string is kept as text."""
    if not isinstance(content, str):
        raise HubError(f"File content for {name} must be a string")
    m = DATA_URI.match(content)
    if m is None:
        return content
    try:
        return base64.b64decode(m.group(2), validate=True)
    except (binascii.Error, ValueError):
        raise HubError(f"Invalid base64 data for {name}")


def safe_relpath(name) -> PurePosixPath:
    """A relative path that stays inside the tool directory."""
    if not isinstance(name, str) or not name.strip():
        raise HubError("File names must be non-empty strings")
    rel = PurePosixPath(name.replace("\\", "/"))
    if not rel.parts or rel.is_absolute() or ".." in rel.parts or ":" in rel.parts[0]:
        raise HubError(f"Invalid file name: {name}")
    return rel


def collect_files(files: dict) -> dict[PurePosixPath, bytes | str]:
    """Decoded contents keyed by relative path. Every path must be distinct and none may also be a directory."""
    decoded = {}
    for name, content in files.items():
        rel = safe_relpath(name)
        if rel in decoded:
            raise HubError(f"Duplicate file name: {name}")
        decoded[rel] = decode_content(name, content)
    dirs = {parent for rel in decoded for parent in rel.parents if parent.parts}
    clash = sorted(str(rel) for rel in decoded if rel in dirs)
    if clash:
        raise HubError(f"File name is also used as a directory: {clash[0]}")
    return decoded


def validate(body) -> tuple[str, dict, dict]:
    """(toolName, metadata, files) or HubError with the first problem found."""
    if not isinstance(body, dict):
        raise HubError("Request body must be JSON")
    name = body.get("toolName")
    if not isinstance(name, str) or not name.strip():
        raise HubError("Tool name is required")
    files = body.get("files")
    if not files or not isinstance(files, dict):
        raise HubError("Tool files are required")
    if not files.get(INDEX_FILE):
        raise HubError("index.html file is required")
    metadata = body.get("metadata")
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise HubError("Tool metadata must be an object")
    return name, metadata, files


def write_files(tool_path: Path, decoded: dict[PurePosixPath, bytes | str]) -> None:
    tool_path.mkdir(parents=True, exist_ok=True)
    for rel, content in decoded.items():
        target = tool_path.joinpath(*rel.parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")


def publish_tool(tools_dir: Path | str, body, base_url: str = "") -> dict:
    """Persist a submission and return the response payload."""
    tools_dir = Path(tools_dir)
    requested, metadata, files = validate(body)
    logger.info("Publishing tool: %s (files: %s)", requested, ", ".join(files))

    decoded = collect_files(files)

    base = slugify(requested)
    if not base:
        raise HubError("Tool name must contain letters or digits")
    slug = unique_slug(base, tools_dir)
    meta = {**metadata, "slug": slug}
    metadata_path = PurePosixPath(METADATA_FILE)
    if metadata_path not in decoded and not any(metadata_path in rel.parents for rel in decoded):
        decoded[metadata_path] = json.dumps(meta, indent=2)

    tool_path = tools_dir / slug
    write_files(tool_path, decoded)
    logger.info("Tool published as %s at %s", slug, tool_path)

    if slug != requested:
        message = f'Tool published as "{slug}" (name was adjusted for availability)'
    else:
        message = "Tool published successfully!"
    return {
        "success": True,
        "url": f"{base_url.rstrip('/')}/tools/{slug}",
        "actualName": slug,
        "requestedName": requested,
        "publishedAt": now_iso(),
        "message": message,
        "metadata": meta,
    }
