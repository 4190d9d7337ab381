"""
Login / registration against the external authentication service.

The service speaks its own vocabulary (nome, senha, endereco, telefone); the
translation to local field names happens here and nowhere else. A successful
login materializes a local Session in the AppStore; registration never logs in.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union
from urllib.parse import quote

from infrastructure.http.auth_api_client import AuthApiClient, AuthServiceError
from use_cases.app_store import AppStore
from use_cases.domain_models import Member, Role
from use_cases.errors import SessionAlreadyActiveError
from use_cases.session_models import Session, is_active

log = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
CONNECTION_ERROR_MESSAGE = "Erro ao conectar com servidor"
DEFAULT_LOGIN_ERROR = "Email ou senha inválidos"
AVATAR_URL_TEMPLATE = "https://ui-avatars.com/api/?name={name}&background=0a9396&color=fff"
DEFAULT_BANNER_URL = "https://picsum.photos/1000/300"


@dataclass(frozen=True)
class AuthFailure:
    message: str
    status_code: Optional[int] = None


@dataclass(frozen=True)
class RegistrationData:
    name: str
    email: str
    password: str
    cpf: str = ""
    address: str = ""
    phone: str = ""


@dataclass(frozen=True)
class RegistrationResult:
    ok: bool
    message: str
    status_code: Optional[int] = None
    user_id: Optional[int] = None


def validate_registration(data: RegistrationData) -> Optional[str]:
    """Client-side checks run before the request; returns an error message or None."""
    if not data.name.strip() or not data.email.strip() or not data.password:
        return "Por favor, preencha nome, email e senha"
    if len(data.password) < MIN_PASSWORD_LENGTH:
        return "A senha deve ter pelo menos 6 caracteres"
    return None


def registration_body(data: RegistrationData) -> dict:
    return {
        "nome": data.name.strip(),
        "email": data.email.strip(),
        "senha": data.password,
        "cpf": data.cpf.strip(),
        "endereco": data.address.strip(),
        "telefone": data.phone.strip(),
    }


class AuthGateway:
    def __init__(self, client: AuthApiClient, store: AppStore, clock=None):
        self.client = client
        self.store = store
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def login(self, email: str, password: str) -> Union[Session, AuthFailure]:
        if is_active(self.store.get_state().session):
            raise SessionAlreadyActiveError("Log out before logging in again")

        email = email.strip()
        try:
            reply = self.client.post_login(email, password)
        except AuthServiceError as e:
            log.warning(f"Login for {email} failed: {e}")
            return AuthFailure(message=CONNECTION_ERROR_MESSAGE)

        if not reply.ok:
            log.info(f"Login rejected for {email} (HTTP {reply.status_code})")
            return AuthFailure(message=reply.message or DEFAULT_LOGIN_ERROR, status_code=reply.status_code)

        user = self._session_user(email, password, reply.payload.get("usuario") or {})
        self.store.start_session(user)
        log.info(f"User {user.id} logged in with role {user.role.value}")
        return self.store.get_state().session

    def _session_user(self, email: str, password: str, usuario: dict) -> Member:
        # The service only vouches for the credentials; role comes from the local directory.
        for member in self.store.get_state().members:
            if member.email.lower() == email.lower():
                return member

        now = self._clock()
        name = usuario.get("nome") or email.split("@")[0]
        created = str(usuario.get("criado_em") or "")[:10] or now.date().isoformat()
        return Member(
            id=int(now.timestamp() * 1000),
            name=name,
            cpf="",
            address="",
            phone="",
            email=email,
            join_date=created,
            role=Role.MEMBER,
            avatar_url=AVATAR_URL_TEMPLATE.format(name=quote(email)),
            banner_url=DEFAULT_BANNER_URL,
            password=password,
            fees=(),
        )

    def register(self, data: RegistrationData) -> RegistrationResult:
        error = validate_registration(data)
        if error:
            return RegistrationResult(ok=False, message=error)

        try:
            reply = self.client.post_register(registration_body(data))
        except AuthServiceError as e:
            log.warning(f"Registration for {data.email} failed: {e}")
            return RegistrationResult(ok=False, message=CONNECTION_ERROR_MESSAGE)

        if not reply.ok:
            return RegistrationResult(
                ok=False,
                message=reply.message or "Erro ao criar conta",
                status_code=reply.status_code,
            )

        usuario = reply.payload.get("usuario") or {}
        log.info(f"Registered {data.email} as user {usuario.get('id')}")
        return RegistrationResult(
            ok=True,
            message=reply.message,
            status_code=reply.status_code,
            user_id=usuario.get("id"),
        )

    def logout(self) -> None:
        self.store.end_session()
