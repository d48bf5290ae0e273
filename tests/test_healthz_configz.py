from fastapi.testclient import TestClient

from user_registry import deps
from user_registry.main import create_app
from user_registry.settings import Settings


def test_healthz_reports_user_count():
    client = TestClient(create_app(settings=Settings(seed_demo_users=False)))
    r = client.get("/healthz")
    assert r.status_code == 200
    data = r.json()
    assert data["ok"] is True
    assert data["service"] == "user-registry"
    assert data["users"] == 0


def test_seed_demo_users():
    client = TestClient(create_app(settings=Settings(seed_demo_users=True)))
    users = client.get("/api/users").json()
    assert [u["id"] for u in users] == [1, 2]
    assert client.get("/healthz").json()["users"] == 2


def test_configz_uses_settings_dependency():
    app = create_app(settings=Settings(seed_demo_users=False))

    def fake_get_settings_dep() -> Settings:
        return Settings(app_title="Test", log_level="debug", seed_demo_users=True)

    app.dependency_overrides[deps.get_settings_dep] = fake_get_settings_dep
    try:
        r = TestClient(app).get("/configz")
        assert r.status_code == 200
        assert r.json() == {"app_title": "Test", "log_level": "DEBUG", "seed_demo_users": True}
    finally:
        app.dependency_overrides.clear()


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("APP_TITLE", "From Env")
    monkeypatch.setenv("SEED_DEMO_USERS", "true")
    s = Settings()
    assert s.app_title == "From Env"
    assert s.seed_demo_users is True


def test_unexpected_error_returns_500():
    app = create_app(settings=Settings(seed_demo_users=False))

    class _BrokenRegistry:
        def list(self):
            raise RuntimeError("boom")

    app.dependency_overrides[deps.get_registry] = lambda: _BrokenRegistry()
    try:
        r = TestClient(app, raise_server_exceptions=False).get("/api/users")
        assert r.status_code == 500
        assert r.json()["detail"] == "Internal server error: RuntimeError"
    finally:
        app.dependency_overrides.clear()
