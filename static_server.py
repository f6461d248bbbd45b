# static_server.py
"""Static file server for the review page, mounted on the Flask app."""
import logging
import os

from flask import Blueprint, current_app, make_response
from werkzeug.security import safe_join

import config

logger = logging.getLogger(__name__)

static_bp = Blueprint("static_server", __name__)

INDEX_DOCUMENT = "index.html"

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".woff2": "font/woff2",
    ".woff": "font/woff",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


class ForbiddenPath(Exception):
    pass


# =========================
# Helpers
# =========================
def resolve_public_path(root, url_path):
    """Map a request path to (file path, extension) under `root`.

    Raises ForbiddenPath when the path escapes the root, ValueError when it
    cannot name a file at all (embedded NUL). Extensionless paths are HTML
    documents.
    """
    url_path = url_path.split("?", 1)[0].lstrip("/") or INDEX_DOCUMENT
    if "\x00" in url_path:
        raise ValueError("embedded null byte")
    resolved = safe_join(root, url_path)
    if resolved is None:
        raise ForbiddenPath(url_path)

    ext = os.path.splitext(resolved)[1].lower()
    if not ext:
        resolved += ".html"
        ext = ".html"
    return resolved, ext


def cache_control_for(ext):
    if ext == ".html":
        return "no-cache"
    return f"public, max-age={config.STATIC_MAX_AGE}"


def _plain(code, text):
    resp = make_response(text, code)
    resp.headers["Content-Type"] = "text/plain; charset=utf-8"
    return resp


# =========================
# Routes
# =========================
@static_bp.route("/", defaults={"url_path": ""})
@static_bp.route("/<path:url_path>")
def serve(url_path):
    root = current_app.config["PUBLIC_DIR"]
    try:
        file_path, ext = resolve_public_path(root, url_path)
    except ForbiddenPath:
        logger.warning("Blocked path outside public dir: %r", url_path)
        return _plain(403, "Forbidden")
    except ValueError:
        return _plain(404, "Not found")

    try:
        with open(file_path, "rb") as fh:
            data = fh.read()
    except (FileNotFoundError, NotADirectoryError):
        return _plain(404, "Not found")
    except OSError as exc:
        logger.error("Failed to read %s: %s", file_path, exc)
        return _plain(500, "Server error")

    resp = make_response(data, 200)
    resp.headers["Content-Type"] = MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)
    resp.headers["Cache-Control"] = cache_control_for(ext)
    return resp
