from infrastructure.repositories.sqlite_audit_repository import AuditAction, SQLiteAuditRepository
from infrastructure.repositories.sqlite_user_repository import SQLiteUserRepository
import hashlib
import hmac
import logging
import os
import re
from datetime import datetime

log = logging.getLogger(__name__)


class UserAlreadyExistsError(Exception):
    pass


class InvalidCredentialsError(Exception):
    pass


class RegistrationValidationError(Exception):
    pass


USERS_DB = "users.db"
PASSWORD_ITERATIONS = 200_000
MIN_PASSWORD_LENGTH = 6
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_user_repo = None
_audit_repo = None


def get_user_repo() -> SQLiteUserRepository:
    global _user_repo
    if _user_repo is None or _user_repo.db_path != USERS_DB:
        _user_repo = SQLiteUserRepository(USERS_DB)
    return _user_repo


def get_audit_repo() -> SQLiteAuditRepository:
    global _audit_repo
    if _audit_repo is None or _audit_repo.db_path != USERS_DB:
        _audit_repo = SQLiteAuditRepository(USERS_DB)
    return _audit_repo


def init_auth_db():
    get_user_repo().init_auth_db()


def _hash_password(password, salt_hex):
    salt = bytes.fromhex(salt_hex)
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PASSWORD_ITERATIONS).hex()


def _make_password(password):
    salt_hex = os.urandom(16).hex()
    return salt_hex, _hash_password(password, salt_hex)


def _verify_password(password, salt_hex, expected_hash):
    candidate = _hash_password(password, salt_hex)
    return hmac.compare_digest(candidate, expected_hash)


def _email_domain(email):
    return email.rsplit("@", 1)[-1] if "@" in email else ""


def _reject(reason, email):
    get_audit_repo().log_action(
        AuditAction.REGISTER_REJECTED,
        target_type="usuario",
        metadata={"reason": reason, "email_domain": _email_domain(email or "")},
        result="deny",
    )


def register_user(nome, email, senha, cpf=None, endereco=None, telefone=None):
    """Validates and stores a new user. Returns the public user record."""
    if not nome or not email or not senha:
        _reject("missing_fields", email)
        raise RegistrationValidationError("Nome, email e senha são obrigatórios")
    if not EMAIL_RE.match(email):
        _reject("invalid_email", email)
        raise RegistrationValidationError("Email inválido")
    if len(senha) < MIN_PASSWORD_LENGTH:
        _reject("short_password", email)
        raise RegistrationValidationError("A senha deve ter no mínimo 6 caracteres")

    repo = get_user_repo()
    if repo.email_exists(email):
        _reject("duplicate_email", email)
        raise UserAlreadyExistsError("Este email já está cadastrado")
    cpf = cpf or None
    if cpf and repo.cpf_exists(cpf):
        _reject("duplicate_cpf", email)
        raise UserAlreadyExistsError("Este CPF já está cadastrado")

    salt_hex, pw_hash = _make_password(senha)
    criado_em = datetime.utcnow().isoformat()
    user, err = repo.create_user(nome, email, salt_hex, pw_hash, cpf, endereco or None, telefone or None, criado_em)
    if err == "integrity_error":
        # Lost a race against a concurrent registration with the same email/CPF.
        _reject("integrity_error", email)
        raise UserAlreadyExistsError("Este email já está cadastrado")

    get_audit_repo().log_action(AuditAction.USER_CREATE, target_type="usuario", actor_user_id=user["id"], target_id=user["id"])
    log.info(f"User {user['id']} registered")
    return user


def authenticate_user(email, senha):
    """Returns {id, nome, email, criado_em} or raises InvalidCredentialsError."""
    email = (email or "").strip()
    user = get_user_repo().get_user_by_email(email)

    if not user or not senha or not _verify_password(senha, user["senha_salt"], user["senha_hash"]):
        get_audit_repo().log_action(
            AuditAction.LOGIN_FAIL,
            target_type="usuario",
            actor_user_id=user["id"] if user else None,
            metadata={"reason": "invalid_credentials", "email_domain": _email_domain(email)},
            result="deny",
        )
        raise InvalidCredentialsError("Email ou senha incorretos")

    get_audit_repo().log_action(AuditAction.LOGIN_SUCCESS, target_type="usuario", actor_user_id=user["id"], target_id=user["id"])
    return {"id": user["id"], "nome": user["nome"], "email": user["email"], "criado_em": user["criado_em"]}
