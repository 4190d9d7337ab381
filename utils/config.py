import os
from typing import Optional

import streamlit as st

DEFAULT_AUTH_API_URL = "http://localhost:8888"
DEFAULT_AUTH_DB_PATH = "users.db"


def get_secret(key):
    """Looks the key up in st.secrets first, then in the environment."""
    try:
        value = st.secrets.get(key)
    except FileNotFoundError:
        value = None
    return value or os.getenv(key)


def auth_api_url() -> str:
    return (get_secret("AUTH_API_URL") or DEFAULT_AUTH_API_URL).rstrip("/")


def auth_db_path() -> str:
    return get_secret("AUTH_DB_PATH") or DEFAULT_AUTH_DB_PATH


def auth_http_timeout() -> Optional[float]:
    # No timeout unless configured: requests wait for the service.
    raw = get_secret("AUTH_HTTP_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def genai_api_key() -> Optional[str]:
    return get_secret("GEMINI_API_KEY") or get_secret("API_KEY")
