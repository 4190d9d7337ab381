from unittest.mock import MagicMock, patch

import serve_auth_api
from utils import config


@patch("utils.config.st")
def test_get_secret_prefers_streamlit_secrets(mock_st, monkeypatch):
    mock_st.secrets = {"AUTH_API_URL": "http://from-secrets"}
    monkeypatch.setenv("AUTH_API_URL", "http://from-env")
    assert config.get_secret("AUTH_API_URL") == "http://from-secrets"


@patch("utils.config.st")
def test_get_secret_falls_back_to_env_without_secrets_file(mock_st, monkeypatch):
    mock_st.secrets = MagicMock()
    mock_st.secrets.get.side_effect = FileNotFoundError
    monkeypatch.setenv("AUTH_API_URL", "http://from-env/")
    assert config.get_secret("AUTH_API_URL") == "http://from-env/"
    assert config.auth_api_url() == "http://from-env"


@patch("utils.config.get_secret", return_value=None)
def test_defaults(_mock_secret):
    assert config.auth_api_url() == "http://localhost:8888"
    assert config.auth_db_path() == "users.db"
    assert config.auth_http_timeout() is None


def test_http_timeout_parsing():
    with patch("utils.config.get_secret", return_value="3.5"):
        assert config.auth_http_timeout() == 3.5
    with patch("utils.config.get_secret", return_value="soon"):
        assert config.auth_http_timeout() is None


def test_serve_config_reads_secrets_toml(tmp_path, monkeypatch):
    secrets_file = tmp_path / "secrets.toml"
    secrets_file.write_text('AUTH_DB_PATH = "custom.db"\nAUTH_API_PORT = 9000\n', encoding="utf-8")
    monkeypatch.setattr(serve_auth_api, "SECRETS_FILE", str(secrets_file))
    monkeypatch.delenv("AUTH_API_HOST", raising=False)

    cfg = serve_auth_api.load_config()

    assert cfg == {"db_path": "custom.db", "host": "127.0.0.1", "port": 9000}


def test_serve_config_without_secrets_uses_env(tmp_path, monkeypatch):
    monkeypatch.setattr(serve_auth_api, "SECRETS_FILE", str(tmp_path / "missing.toml"))
    monkeypatch.setenv("AUTH_API_PORT", "8123")
    monkeypatch.delenv("AUTH_DB_PATH", raising=False)
    monkeypatch.delenv("AUTH_API_HOST", raising=False)

    cfg = serve_auth_api.load_config()

    assert cfg["port"] == 8123
    assert cfg["host"] == "127.0.0.1"
