import pytest
from fastapi.testclient import TestClient

from sentinelguard.main import app
from sentinelguard.routes.frontend import resolve_static_file

client = TestClient(app)


@pytest.fixture
def public_dir(monkeypatch, tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>index</h1>")
    (root / "app.js").write_text("console.log('ok');")
    monkeypatch.setenv("PUBLIC_DIR", str(root))
    return root


@pytest.mark.api
def test_serves_existing_asset(public_dir):
    response = client.get("/app.js")

    assert response.status_code == 200
    assert response.text == "console.log('ok');"


@pytest.mark.api
@pytest.mark.parametrize("path", ["/", "/dashboard", "/alerts/history"])
def test_unknown_paths_fall_back_to_index(public_dir, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.text == "<h1>index</h1>"


@pytest.mark.api
def test_missing_index_returns_404(monkeypatch, tmp_path):
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path))

    response = client.get("/dashboard")

    assert response.status_code == 404


@pytest.mark.api
def test_resolve_static_file_rejects_traversal(public_dir, tmp_path):
    (tmp_path / "secret.txt").write_text("hidden")

    assert resolve_static_file(public_dir, "../secret.txt") is None
    assert resolve_static_file(public_dir, "app.js") == (public_dir / "app.js").resolve()
    assert resolve_static_file(public_dir, "missing.css") is None
