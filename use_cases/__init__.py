"""Application layer contracts for orchestrating high-level flows."""

from .app_store import AppState, AppStore
from .auth_flow import AuthFlowResult, AuthFlowStatus, ensure_authenticated_session
from .auth_gateway import AuthFailure, AuthGateway, RegistrationData, RegistrationResult
from .bootstrap import StartupResult, StartupStatus, run_startup
from .rbac_policy import AccessLevel, Page, access_level, allowed_pages, can_view
from .session_models import Role, Session, is_admin, is_manager
from .view_router import navigation_items, resolve_page

__all__ = [
    "AccessLevel",
    "AppState",
    "AppStore",
    "AuthFailure",
    "AuthFlowResult",
    "AuthFlowStatus",
    "AuthGateway",
    "Page",
    "RegistrationData",
    "RegistrationResult",
    "Role",
    "Session",
    "StartupResult",
    "StartupStatus",
    "access_level",
    "allowed_pages",
    "can_view",
    "ensure_authenticated_session",
    "is_admin",
    "is_manager",
    "navigation_items",
    "resolve_page",
    "run_startup",
]
