from v2ex.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("V2EX_TIMEOUT", raising=False)
    s = Settings(_env_file=None)
    assert s.timeout == 30.0


def test_env_override(monkeypatch):
    monkeypatch.setenv("V2EX_TIMEOUT", "5")
    s = Settings(_env_file=None)
    assert s.timeout == 5.0


def test_base_url_not_configurable(monkeypatch):
    monkeypatch.setenv("V2EX_API_BASE_URL", "http://elsewhere.test")
    s = Settings(_env_file=None)
    assert not hasattr(s, "api_base_url")
