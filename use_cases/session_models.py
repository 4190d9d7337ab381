"""Session DTOs shared across application layers."""

from dataclasses import dataclass
from typing import Optional

from use_cases.domain_models import Member, Role


@dataclass(frozen=True)
class Session:
    current_user: Optional[Member]
    is_authenticated: bool

    @classmethod
    def anonymous(cls) -> "Session":
        return cls(current_user=None, is_authenticated=False)

    @classmethod
    def for_user(cls, user: Member) -> "Session":
        return cls(current_user=user, is_authenticated=True)


def is_admin(user: Member) -> bool:
    return user.role == Role.ADMIN


def is_manager(user: Member) -> bool:
    return user.role in (Role.ADMIN, Role.PROJECT_MANAGER)


def is_active(session: Optional[Session]) -> bool:
    return session is not None and session.is_authenticated and session.current_user is not None
