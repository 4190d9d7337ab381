import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

import ui
from use_cases import auth_flow, bootstrap, view_router
from use_cases.rbac_policy import Page
from utils import session_manager
from views import login_view
from views.pages import PAGE_LABELS, PAGE_RENDERERS

# --- PAGE CONFIG ---
st.set_page_config(page_title="Community Connect", layout="wide", initial_sidebar_state="expanded")


def _set_sentry_user(user):
    try:
        import sentry_sdk
        if sentry_sdk.get_client().is_active():
            sentry_sdk.set_user({"id": user.id, "role": user.role.value})
    except (ImportError, AttributeError):
        pass


def render_sidebar(store, session):
    settings = store.get_state().settings
    user = session.current_user
    with st.sidebar:
        if settings.logo_url:
            st.image(settings.logo_url, width=70)
        st.write(f"**{user.name}**  \n{user.role.value}")

        for page in view_router.navigation_items(session):
            is_current = st.session_state.active_page == page
            if st.button(PAGE_LABELS[page], key=f"nav_{page.value}", use_container_width=True,
                         type="primary" if is_current else "secondary"):
                session_manager.navigate(page)

        st.divider()
        if st.button("Sair", key="logout_btn", type="secondary"):
            session_manager.logout()

        st.caption(f"📧 {settings.contact_info.email}  \n📞 {settings.contact_info.phone}")


def main():
    # --- STARTUP ORCHESTRATION ---
    startup_result = bootstrap.run_startup()
    if startup_result.status == "STOP":
        st.stop()
        return

    store = session_manager.get_store()
    ui.setup_style(store.get_state().settings)

    # --- LOGIN ---
    auth_result = auth_flow.ensure_authenticated_session()
    if auth_result.status == "STOP":
        login_view.render_auth_screen()
        st.stop()
        return

    session = store.get_state().session
    _set_sentry_user(session.current_user)
    render_sidebar(store, session)

    # --- ROUTING ---
    page = view_router.resolve_page(session, st.session_state.active_page)
    if page == Page.LOGIN:
        login_view.render_auth_screen()
        st.stop()
        return
    st.session_state.active_page = page

    st.title(store.get_state().settings.custom_texts.header_title)
    PAGE_RENDERERS[page](store, session.current_user)


main()
