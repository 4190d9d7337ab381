import pytest
import sys
import streamlit as st  # noqa: TID251
from unittest.mock import patch
import importlib


def test_imports():
    """Ensure core modules can be imported without crashing."""
    import services.analytics_service  # noqa: F401
    import services.finance_service  # noqa: F401
    import services.project_service  # noqa: F401
    import services.member_service  # noqa: F401
    import auth  # noqa: F401
    import serve_auth_api  # noqa: F401
    import ui  # noqa: F401
    import views.login_view  # noqa: F401
    import views.pages  # noqa: F401


def _import_app():
    if "app" in sys.modules:
        del sys.modules["app"]
    importlib.import_module("app")


@patch("streamlit.stop")
@patch("utils.config.get_secret", return_value=None)
def test_app_anonymous_session_stops_at_login(_mock_secret, mock_stop):
    st.session_state.clear()

    with patch("views.login_view.render_auth_screen") as mock_login:
        _import_app()

    mock_login.assert_called_once()
    mock_stop.assert_called_once()
    assert st.session_state.app_store.get_state().session.is_authenticated is False


@patch("streamlit.stop")
@patch("utils.config.get_secret", return_value=None)
def test_app_admin_session_renders_requested_page(_mock_secret, mock_stop):
    from utils import session_manager
    from use_cases.rbac_policy import Page

    st.session_state.clear()
    session_manager.init_session_state()
    store = session_manager.get_store()
    store.start_session(store.get_state().members[0])
    st.session_state.active_page = Page.FINANCIALS

    with patch.dict("views.pages.PAGE_RENDERERS", {Page.FINANCIALS: lambda s, u: None}):
        try:
            _import_app()
        except Exception as e:
            pytest.fail(f"app.py import failed with error: {e}")

    mock_stop.assert_not_called()
    assert st.session_state.active_page == Page.FINANCIALS
