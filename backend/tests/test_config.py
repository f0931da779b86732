from todo_scheduler.core.config import _env_bool, _env_list


def test_env_list_strips_and_drops_blanks(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test ,,")
    assert _env_list("CORS_ORIGINS", "") == ["http://a.test", "http://b.test"]


def test_env_list_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert _env_list("CORS_ORIGINS", "http://localhost:5173") == ["http://localhost:5173"]


def test_env_bool(monkeypatch):
    monkeypatch.setenv("COOKIE_SECURE", " True ")
    assert _env_bool("COOKIE_SECURE") is True
    monkeypatch.setenv("COOKIE_SECURE", "0")
    assert _env_bool("COOKIE_SECURE") is False
