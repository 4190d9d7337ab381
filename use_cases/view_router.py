"""Page resolution for the current session."""

import logging
from typing import Optional, Tuple

from use_cases import rbac_policy
from use_cases.rbac_policy import Page
from use_cases.session_models import Session, is_active

log = logging.getLogger(__name__)


def resolve_page(session: Optional[Session], requested: Page) -> Page:
    """Anonymous sessions always land on login; forbidden pages redirect to the dashboard."""
    if not is_active(session):
        return Page.LOGIN

    if requested == Page.LOGIN:
        return Page.DASHBOARD

    if not rbac_policy.enforce(session, requested):
        log.warning(f"Redirecting '{requested.value}' to dashboard")
        return Page.DASHBOARD

    return requested


def navigation_items(session: Optional[Session]) -> Tuple[Page, ...]:
    if not is_active(session):
        return ()
    return rbac_policy.allowed_pages(session.current_user.role)
