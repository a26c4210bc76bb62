import config
from config import DatabaseConfig


def test_from_env_uses_module_constants(monkeypatch):
    monkeypatch.setattr(config, "DB_HOST", "pg.example")
    monkeypatch.setattr(config, "DB_NAME", "companies")
    monkeypatch.setattr(config, "DB_USER", "ro")
    monkeypatch.setattr(config, "DB_PASS", "pw")
    monkeypatch.setattr(config, "DB_PORT", 5433)
    monkeypatch.setattr(config, "DB_CONNECT_TIMEOUT", None)

    cfg = DatabaseConfig.from_env()
    assert cfg == DatabaseConfig(host="pg.example", database="companies", username="ro", password="pw", port=5433)


def test_dsn_hides_password():
    cfg = DatabaseConfig(host="localhost", database="records", username="ro", password="hunter2")
    assert cfg.dsn == "postgresql://ro@localhost:5432/records"
    assert "hunter2" not in cfg.dsn


def test_connect_kwargs_omits_unset_timeout():
    cfg = DatabaseConfig(host="localhost", database="records", username="ro", password="pw")
    assert "connect_timeout" not in cfg.connect_kwargs()
    assert cfg.connect_kwargs()["dbname"] == "records"
