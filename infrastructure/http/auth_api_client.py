import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

log = logging.getLogger(__name__)

LOGIN_PATH = "/api/login"
REGISTER_PATH = "/api/registrar"


class AuthServiceError(RuntimeError):
    """The authentication service could not be reached or answered garbage."""


@dataclass(frozen=True)
class AuthApiReply:
    status_code: int
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return bool(self.payload.get("sucesso"))

    @property
    def message(self) -> str:
        return str(self.payload.get("mensagem") or "")


class AuthApiClient:
    """HTTP client for the login/registration endpoints (JSON bodies, Portuguese field names)."""

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _post(self, path: str, body: Dict[str, Any]) -> AuthApiReply:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.post(url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"❌ Network error while calling {path}: {e}")
            raise AuthServiceError(f"Auth service network error: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            log.error(f"❌ Non-JSON answer from {path}: HTTP {resp.status_code}")
            raise AuthServiceError(f"Auth service returned HTTP {resp.status_code} without JSON") from e

        if not isinstance(payload, dict):
            raise AuthServiceError(f"Auth service returned an unexpected body from {path}")
        log.debug(f"{path} -> HTTP {resp.status_code}")
        return AuthApiReply(status_code=resp.status_code, payload=payload)

    def post_login(self, email: str, senha: str) -> AuthApiReply:
        return self._post(LOGIN_PATH, {"email": email, "senha": senha})

    def post_register(self, body: Dict[str, Any]) -> AuthApiReply:
        return self._post(REGISTER_PATH, body)
