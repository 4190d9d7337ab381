import pytest

from services import fixtures
from use_cases import view_router
from use_cases.rbac_policy import Page
from use_cases.session_models import Session

ADMIN, MANAGER, MEMBER = fixtures.INITIAL_MEMBERS


@pytest.mark.parametrize("page", list(Page))
def test_anonymous_always_lands_on_login(page):
    assert view_router.resolve_page(Session.anonymous(), page) == Page.LOGIN
    assert view_router.resolve_page(None, page) == Page.LOGIN


@pytest.mark.parametrize("page", [Page.MEMBERS, Page.PROJECTS, Page.CREATIVE, Page.FINANCIALS, Page.SETTINGS])
def test_member_is_redirected_to_dashboard(page):
    assert view_router.resolve_page(Session.for_user(MEMBER), page) == Page.DASHBOARD


def test_manager_gets_projects_but_not_financials():
    session = Session.for_user(MANAGER)
    assert view_router.resolve_page(session, Page.PROJECTS) == Page.PROJECTS
    assert view_router.resolve_page(session, Page.FINANCIALS) == Page.DASHBOARD


def test_authenticated_user_never_sees_login():
    assert view_router.resolve_page(Session.for_user(ADMIN), Page.LOGIN) == Page.DASHBOARD


def test_admin_gets_requested_page():
    assert view_router.resolve_page(Session.for_user(ADMIN), Page.SETTINGS) == Page.SETTINGS


def test_navigation_items():
    assert view_router.navigation_items(Session.anonymous()) == ()
    assert view_router.navigation_items(Session.for_user(MEMBER)) == (Page.DASHBOARD, Page.PROFILE, Page.CHAT)
    assert len(view_router.navigation_items(Session.for_user(ADMIN))) == 8
