import importlib

from fastapi.testclient import TestClient

from app.main import create_app


def test_create_app_reads_greeting_from_env(monkeypatch):
    monkeypatch.setenv("GREETING_MESSAGE", "from the environment")
    with TestClient(create_app()) as c:
        assert c.get("/").text == "from the environment"


def test_create_app_reads_greeting_from_toml(tmp_path):
    (tmp_path / "greeting.toml").write_text('[greeting]\nmessage = "from the file"\n')
    with TestClient(create_app()) as c:
        assert c.get("/").text == "from the file"
        assert c.get("/health/ready").status_code == 200


def test_asgi_module_serves_configured_greeting(monkeypatch):
    monkeypatch.setenv("GREETING_MESSAGE", "asgi entry point")
    import app.asgi

    asgi = importlib.reload(app.asgi)
    with TestClient(asgi.app) as c:
        assert c.get("/").text == "asgi entry point"
