"""Authentication flow orchestration (application layer)."""

from dataclasses import dataclass
from typing import Literal, Optional

from use_cases.session_models import is_active
from utils import session_manager

AuthFlowStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for auth flow orchestration."""

    status: AuthFlowStatus
    reason: str
    user_id: Optional[int] = None


def ensure_authenticated_session() -> AuthFlowResult:
    """Run auth-gate orchestration and return a control-flow status."""
    session_manager.init_session_state()

    session = session_manager.get_store().get_state().session
    if not is_active(session):
        return AuthFlowResult(status="STOP", reason="auth_required")

    return AuthFlowResult(status="CONTINUE", reason="authenticated", user_id=session.current_user.id)
