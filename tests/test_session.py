import pytest
from unittest.mock import patch
import streamlit as st
from services import fixtures
from use_cases.app_store import AppStore
from use_cases.auth_gateway import AuthGateway
from use_cases.rbac_policy import Page
from utils import session_manager


@pytest.fixture(autouse=True)
def clean_session_state():
    st.session_state.clear()
    yield
    st.session_state.clear()


@patch("utils.session_manager.config.get_secret", return_value=None)
def test_init_session_state(_mock_secret):
    session_manager.init_session_state()
    assert isinstance(st.session_state.app_store, AppStore)
    assert isinstance(st.session_state.auth_gateway, AuthGateway)
    assert st.session_state.auth_gateway.store is st.session_state.app_store
    assert st.session_state.auth_gateway.client.base_url == "http://localhost:8888"
    assert st.session_state.active_page == Page.DASHBOARD
    assert st.session_state.registration_success is False
    assert st.session_state.state_version == 0
    assert st.session_state.startup_logged is False


@patch("utils.session_manager.config.get_secret", return_value=None)
def test_init_session_state_seeds_fixtures(_mock_secret):
    session_manager.init_session_state()
    state = session_manager.get_store().get_state()
    assert state.members == fixtures.INITIAL_MEMBERS
    assert state.session.is_authenticated is False


@patch("utils.session_manager.config.get_secret", return_value=None)
def test_init_session_state_keeps_existing_store(_mock_secret):
    session_manager.init_session_state()
    store = session_manager.get_store()
    session_manager.init_session_state()
    assert session_manager.get_store() is store


@patch("utils.session_manager.config.get_secret", return_value=None)
def test_store_mutations_bump_state_version(_mock_secret):
    session_manager.init_session_state()
    session_manager.get_store().update_pix_key("nova@chave.com")
    assert st.session_state.state_version == 1


@patch("streamlit.rerun")
def test_navigate(mock_rerun):
    session_manager.navigate(Page.CHAT)
    assert st.session_state.active_page == Page.CHAT
    mock_rerun.assert_called_once()


@patch("streamlit.rerun")
@patch("utils.session_manager.config.get_secret", return_value=None)
def test_logout(_mock_secret, mock_rerun):
    session_manager.init_session_state()
    store = session_manager.get_store()
    store.start_session(fixtures.INITIAL_MEMBERS[0])
    st.session_state.active_page = Page.SETTINGS

    session_manager.logout()

    mock_rerun.assert_called_once()
    assert store.get_state().session.is_authenticated is False
    assert store.get_state().session.current_user is None
    assert st.session_state.active_page == Page.DASHBOARD
