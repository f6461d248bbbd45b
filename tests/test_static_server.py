import os

import pytest

import config
from static_server import ForbiddenPath, resolve_public_path


def test_root_serves_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.data == b"<h1>Roy Review</h1>"
    assert resp.headers["Content-Type"] == "text/html"
    assert resp.headers["Cache-Control"] == "no-cache"


def test_css_gets_short_lived_cache(client):
    resp = client.get("/styles.css?v=3")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"] == "text/css"
    assert resp.headers["Cache-Control"] == f"public, max-age={config.STATIC_MAX_AGE}"


def test_binary_asset(client):
    resp = client.get("/logo.png")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"] == "image/png"
    assert resp.data == b"\x89PNG\r\n"


def test_unknown_extension_is_octet_stream(client):
    resp = client.get("/notes.xyz")
    assert resp.headers["Content-Type"] == "application/octet-stream"


def test_extensionless_path_is_html_document(client):
    resp = client.get("/about")
    assert resp.status_code == 200
    assert resp.data == b"<p>About Roy</p>"
    assert resp.headers["Content-Type"] == "text/html"
    assert resp.headers["Cache-Control"] == "no-cache"


def test_missing_file_is_not_found(client):
    resp = client.get("/missing.js")
    assert resp.status_code == 404
    assert resp.data == b"Not found"
    assert resp.mimetype == "text/plain"


def test_traversal_is_forbidden(client):
    resp = client.get("/..%2F..%2Fetc%2Fpasswd")
    assert resp.status_code == 403
    assert resp.data == b"Forbidden"


def test_null_byte_path_is_plain_not_found(client):
    resp = client.get("/index%00.html")
    assert resp.status_code == 404
    assert resp.data == b"Not found"
    assert resp.mimetype == "text/plain"


def test_resolve_rejects_null_byte(tmp_path):
    with pytest.raises(ValueError):
        resolve_public_path(str(tmp_path), "index\x00.html")


def test_read_failure_is_server_error(client, public_dir):
    (public_dir / "broken.css").mkdir()
    resp = client.get("/broken.css")
    assert resp.status_code == 500
    assert resp.data == b"Server error"


@pytest.mark.parametrize("url_path", ["../../etc/passwd", "/../secret.txt", "a/../../x.css"])
def test_resolve_rejects_escape(tmp_path, url_path):
    with pytest.raises(ForbiddenPath):
        resolve_public_path(str(tmp_path), url_path)


@pytest.mark.parametrize("url_path, name, ext", [
    ("", "index.html", ".html"),
    ("/", "index.html", ".html"),
    ("css/site.CSS", os.path.join("css", "site.CSS"), ".css"),
    ("a/../about", "about.html", ".html"),
])
def test_resolve_inside_root(tmp_path, url_path, name, ext):
    path, found_ext = resolve_public_path(str(tmp_path), url_path)
    assert path == os.path.join(str(tmp_path), name)
    assert found_ext == ext


def test_bundled_page_exists():
    for name in ("index.html", "styles.css", "script.js"):
        assert os.path.isfile(os.path.join(config.PUBLIC_DIR, name))
