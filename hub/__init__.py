"""
Tool hub: Flask app serving the tool catalog, publishing, and published tools.
Client errors are HubError (4xx JSON); anything unexpected becomes a 500 JSON body.
"""

import logging

from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed

import config
from hub.errors import HubError
from hub.routes import bp, method_not_allowed

logger = logging.getLogger(__name__)


def _hub_error(e: HubError):
    logger.info("Rejected request: %s", e.message)
    return jsonify(e.to_dict()), e.status


def _unexpected(e: Exception):
    if isinstance(e, HTTPException):
        return e
    logger.exception("Unhandled error")
    body = {"success": False, "message": "Internal server error"}
    if current_app.debug:
        body["error"] = str(e)
    return jsonify(body), 500


def create_app(cfg: dict | None = None) -> Flask:
    cfg = cfg or config.load_config()
    hub = cfg["hub"]
    app = Flask(__name__)
    app.config.update(
        TOOLS_DIR=hub["tools_dir"],
        BASE_URL=hub.get("base_url", ""),
        BRAND=hub.get("brand", "Chatooly"),
    )
    app.register_blueprint(bp)
    app.register_error_handler(HubError, _hub_error)
    app.register_error_handler(MethodNotAllowed, method_not_allowed)
    app.register_error_handler(Exception, _unexpected)
    return app


__all__ = ["create_app", "HubError"]
