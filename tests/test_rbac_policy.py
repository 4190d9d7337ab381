import logging

import pytest
from use_cases import rbac_policy
from use_cases.domain_models import Role
from use_cases.rbac_policy import Page
from use_cases.session_models import Session
from services import fixtures

ADMIN, MANAGER, MEMBER = fixtures.INITIAL_MEMBERS


def test_member_sees_only_base_pages():
    assert rbac_policy.allowed_pages(Role.MEMBER) == (Page.DASHBOARD, Page.PROFILE, Page.CHAT)


def test_manager_adds_projects_and_creative():
    assert rbac_policy.allowed_pages(Role.PROJECT_MANAGER) == (
        Page.DASHBOARD, Page.PROFILE, Page.CHAT, Page.PROJECTS, Page.CREATIVE,
    )


def test_admin_sees_everything_in_navigation_order():
    assert rbac_policy.allowed_pages(Role.ADMIN) == rbac_policy.NAVIGATION_ORDER


@pytest.mark.parametrize("role", list(Role))
@pytest.mark.parametrize("page", [p for p in Page if p != Page.LOGIN])
def test_can_view_matches_page_groups(role, page):
    level = rbac_policy.access_level(role)
    if page in rbac_policy.BASE_PAGES:
        expected = True
    elif page in rbac_policy.MANAGER_PAGES:
        expected = level.can_view_manager_pages
    else:
        expected = level.can_view_admin_pages
    assert rbac_policy.can_view(role, page) is expected


def test_login_page_is_not_a_navigation_page():
    for role in Role:
        assert Page.LOGIN not in rbac_policy.allowed_pages(role)


def test_admin_access_implies_manager_access():
    for role in Role:
        level = rbac_policy.access_level(role)
        if level.can_view_admin_pages:
            assert level.can_view_manager_pages


def test_management_capabilities():
    assert rbac_policy.can_manage_members(Role.ADMIN) is True
    assert rbac_policy.can_manage_members(Role.PROJECT_MANAGER) is False
    assert rbac_policy.can_manage_projects(Role.PROJECT_MANAGER) is True
    assert rbac_policy.can_manage_projects(Role.MEMBER) is False


def test_enforce_denies_anonymous():
    assert rbac_policy.enforce(Session.anonymous(), Page.DASHBOARD) is False
    assert rbac_policy.enforce(None, Page.DASHBOARD) is False


def test_enforce_logs_denial(caplog):
    with caplog.at_level(logging.WARNING, logger="use_cases.rbac_policy"):
        result = rbac_policy.enforce(Session.for_user(MEMBER), Page.FINANCIALS)

    assert result is False
    assert "financials" in caplog.text
    assert f"user {MEMBER.id}" in caplog.text


def test_enforce_allows_admin():
    assert rbac_policy.enforce(Session.for_user(ADMIN), Page.SETTINGS) is True
