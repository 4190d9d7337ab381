import streamlit as st

from use_cases.auth_gateway import AuthFailure, RegistrationData
from utils import session_manager


def render_auth_screen():
    settings = session_manager.get_store().get_state().settings
    if settings.logo_url:
        st.image(settings.logo_url, width=120)
    st.title(f"🔐 {settings.custom_texts.header_title}")

    tab_login, tab_register = st.tabs(["Entrar", "Cadastre-se"])

    with tab_login:
        if st.session_state.registration_success:
            st.success("Cadastro realizado com sucesso! Faça login para continuar.")
        with st.form("login_form", clear_on_submit=False):
            email = st.text_input("Email")
            password = st.text_input("Senha", type="password")
            submitted = st.form_submit_button("Entrar")
            if submitted:
                result = session_manager.get_gateway().login(email, password)
                if isinstance(result, AuthFailure):
                    st.error(result.message)
                else:
                    st.session_state.registration_success = False
                    session_manager.navigate(st.session_state.active_page)

    with tab_register:
        with st.form("register_form", clear_on_submit=True):
            name = st.text_input("Nome Completo *")
            email = st.text_input("Email *")
            password = st.text_input("Senha * (mín. 6 caracteres)", type="password")
            cpf = st.text_input("CPF", max_chars=14, placeholder="000.000.000-00")
            address = st.text_input("Endereço")
            phone = st.text_input("Telefone", max_chars=20, placeholder="(00) 00000-0000")
            submitted = st.form_submit_button("Cadastrar")
            if submitted:
                result = session_manager.get_gateway().register(RegistrationData(
                    name=name, email=email, password=password, cpf=cpf, address=address, phone=phone,
                ))
                if result.ok:
                    st.session_state.registration_success = True
                    st.success(f"✅ {result.message}")
                else:
                    st.error(result.message)
