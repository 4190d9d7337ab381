import streamlit as st

from infrastructure.http.auth_api_client import AuthApiClient
from services import fixtures
from use_cases.app_store import AppStore
from use_cases.auth_gateway import AuthGateway
from use_cases.rbac_policy import Page
from utils import config

"""
SESSION STATE CONTRACT

This module owns the Streamlit session state of one browser session.

st.session_state keys:

app_store: AppStore
    every collection of the running app plus the active session
    default: AppStore seeded from services.fixtures
    owner: session_manager

auth_gateway: AuthGateway
    login/registration against the auth service, bound to app_store
    default: AuthGateway(AuthApiClient(AUTH_API_URL), app_store)
    owner: session_manager

active_page: Page
    page requested by the navigation bar (resolved by use_cases.view_router)
    default: Page.DASHBOARD
    owner: ui

registration_success: bool
    shows the "account created" notice on the login screen
    default: False
    owner: login_view

state_version: int
    bumped by the store subscription on every mutation
    default: 0
    owner: session_manager

startup_logged: bool
    startup banner already written to the log
    default: False
    owner: system
"""


def _bump_state_version(_state):
    st.session_state.state_version = st.session_state.get("state_version", 0) + 1


def init_session_state():
    if "app_store" not in st.session_state:
        store = AppStore(fixtures.initial_state())
        store.subscribe(_bump_state_version)
        st.session_state.app_store = store
    if "auth_gateway" not in st.session_state:
        client = AuthApiClient(config.auth_api_url(), timeout=config.auth_http_timeout())
        st.session_state.auth_gateway = AuthGateway(client, st.session_state.app_store)
    if "active_page" not in st.session_state:
        st.session_state.active_page = Page.DASHBOARD
    if "registration_success" not in st.session_state:
        st.session_state.registration_success = False
    if "state_version" not in st.session_state:
        st.session_state.state_version = 0
    if "startup_logged" not in st.session_state:
        st.session_state.startup_logged = False


def get_store() -> AppStore:
    return st.session_state.app_store


def get_gateway() -> AuthGateway:
    return st.session_state.auth_gateway


def navigate(page: Page):
    st.session_state.active_page = page
    st.rerun()


def logout():
    get_gateway().logout()
    st.session_state.active_page = Page.DASHBOARD
    st.rerun()
