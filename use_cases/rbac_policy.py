"""Centralized Role-Based Access Control logic."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from use_cases.domain_models import Role
from use_cases.session_models import Session, is_active

log = logging.getLogger(__name__)


class Page(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    PROFILE = "profile"
    CHAT = "chat"
    MEMBERS = "members"
    PROJECTS = "projects"
    CREATIVE = "creative"
    FINANCIALS = "financials"
    SETTINGS = "settings"


@dataclass(frozen=True)
class AccessLevel:
    can_view_admin_pages: bool
    can_view_manager_pages: bool


BASE_PAGES = (Page.DASHBOARD, Page.PROFILE, Page.CHAT)
MANAGER_PAGES = (Page.PROJECTS, Page.CREATIVE)
ADMIN_PAGES = (Page.MEMBERS, Page.FINANCIALS, Page.SETTINGS)

# Order of the navigation bar.
NAVIGATION_ORDER = (
    Page.DASHBOARD,
    Page.PROFILE,
    Page.CHAT,
    Page.MEMBERS,
    Page.PROJECTS,
    Page.CREATIVE,
    Page.FINANCIALS,
    Page.SETTINGS,
)


def access_level(role: Role) -> AccessLevel:
    is_admin = role == Role.ADMIN
    return AccessLevel(
        can_view_admin_pages=is_admin,
        can_view_manager_pages=is_admin or role == Role.PROJECT_MANAGER,
    )


def can_view(role: Role, page: Page) -> bool:
    if page in BASE_PAGES:
        return True
    level = access_level(role)
    if page in MANAGER_PAGES:
        return level.can_view_manager_pages
    if page in ADMIN_PAGES:
        return level.can_view_admin_pages
    return False


def allowed_pages(role: Role) -> Tuple[Page, ...]:
    return tuple(page for page in NAVIGATION_ORDER if can_view(role, page))


def can_manage_members(role: Role) -> bool:
    return access_level(role).can_view_admin_pages


def can_manage_projects(role: Role) -> bool:
    return access_level(role).can_view_manager_pages


def enforce(session: Optional[Session], page: Page) -> bool:
    """
    Evaluates if the session user may open the page.
    Returns True if authorized, False otherwise.
    """
    if not is_active(session):
        log.info(f"Access to '{page.value}' denied: no active session")
        return False

    user = session.current_user
    authorized = can_view(user.role, page)
    if not authorized:
        log.warning(
            f"Access to '{page.value}' denied for user {user.id} (role: {user.role.value})"
        )
    return authorized
