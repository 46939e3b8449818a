"""API blueprint: catalog, publish and echo endpoints plus static serving of published tools."""

import logging
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request, send_from_directory
from werkzeug.exceptions import NotFound

from hub.catalog import discover_tools, now_iso
from hub.errors import HubError
from hub.publish import publish_tool
from hub.slug import RESERVED

logger = logging.getLogger(__name__)

bp = Blueprint("hub", __name__)

# Every verb is routed to the views so unsupported ones get the JSON 405.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOWED = {
    "hub.catalog": "GET",
    "hub.publish": "POST",
    "hub.echo": "POST",
}
ALLOW_HEADERS = "Content-Type, X-Chatooly-Source"
PATH_ALLOWED = {
    "/api/catalog": "GET",
    "/api/publish": "POST",
    "/api/test": "POST",
}


def _tools_dir() -> Path:
    return Path(current_app.config["TOOLS_DIR"])


def _gate(allowed: str):
    """Empty 200 for preflight, JSON 405 for anything but the allowed verb, else None."""
    if request.method == "OPTIONS":
        return "", 200
    if request.method != allowed and not (allowed == "GET" and request.method == "HEAD"):
        return jsonify({"success": False, "message": f"Method not allowed. Use {allowed}."}), 405
    return None


def _cors(response, allowed: str):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = f"{allowed}, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    return response


@bp.after_request
def add_cors(response):
    allowed = ALLOWED.get(request.endpoint)
    if allowed is not None:
        _cors(response, allowed)
    return response


def method_not_allowed(e):
    """Verbs rejected during routing. JSON with CORS on API paths, the stock page elsewhere."""
    allowed = PATH_ALLOWED.get(request.path.rstrip("/"))
    if allowed is None:
        return e
    response = jsonify({"success": False, "message": f"Method not allowed. Use {allowed}."})
    response.status_code = 405
    return _cors(response, allowed)


# ---------- catalog ----------
@bp.route("/api/catalog", methods=ALL_METHODS)
def catalog():
    gated = _gate("GET")
    if gated is not None:
        return gated
    logger.info("Discovering tools in %s", _tools_dir())
    tools = discover_tools(_tools_dir(), current_app.config["BRAND"])
    logger.info("Found %d tools: %s", len(tools), [t["slug"] for t in tools])
    return jsonify({
        "success": True,
        "tools": tools,
        "count": len(tools),
        "lastUpdated": now_iso(),
    })


# ---------- publish ----------
@bp.route("/api/publish", methods=ALL_METHODS)
def publish():
    gated = _gate("POST")
    if gated is not None:
        return gated
    body = request.get_json(silent=True)
    result = publish_tool(_tools_dir(), body, current_app.config["BASE_URL"])
    return jsonify(result)


# ---------- echo ----------
@bp.route("/api/test", methods=ALL_METHODS)
def echo():
    gated = _gate("POST")
    if gated is not None:
        return gated
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise HubError("Request body must be JSON")
    files = body.get("files")
    return jsonify({
        "success": True,
        "message": "API is working!",
        "received": {
            "toolName": body.get("toolName"),
            "metadata": body.get("metadata"),
            "fileCount": len(files) if isinstance(files, dict) else 0,
        },
    })


# ---------- published tools ----------
@bp.route("/tools/<path:filename>")
def tool_file(filename):
    first = filename.split("/", 1)[0]
    if first.startswith(".") or first in RESERVED:
        raise NotFound()
    if (_tools_dir() / filename).is_dir():
        filename = filename.rstrip("/") + "/index.html"
    return send_from_directory(_tools_dir(), filename)
