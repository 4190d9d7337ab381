"""
Runs the authentication endpoints (/api/login, /api/registrar).
Run: python serve_auth_api.py
"""

import logging
import os

import toml
import uvicorn

import auth
from infrastructure.http.auth_api import app
from infrastructure.observability import setup_observability

log = logging.getLogger(__name__)

SECRETS_FILE = ".streamlit/secrets.toml"


def load_config():
    """Local secrets.toml first; on a server the environment variables are used."""
    try:
        secrets = toml.load(SECRETS_FILE)
    except (FileNotFoundError, toml.TomlDecodeError):
        secrets = {}

    def pick(key, default):
        return secrets.get(key) or os.getenv(key) or default

    return {
        "db_path": pick("AUTH_DB_PATH", auth.USERS_DB),
        "host": pick("AUTH_API_HOST", "127.0.0.1"),
        "port": int(pick("AUTH_API_PORT", 8888)),
    }


def main():
    setup_observability()
    config = load_config()

    auth.USERS_DB = config["db_path"]
    auth.init_auth_db()

    log.info(f"Auth API listening on http://{config['host']}:{config['port']} (db: {config['db_path']})")
    uvicorn.run(app, host=config["host"], port=config["port"])


if __name__ == "__main__":
    main()
