import streamlit as st

from use_cases.app_store import AppStore
from use_cases.domain_models import (
    ContactInfoPatch,
    CustomTextsPatch,
    Member,
    SettingsPatch,
    ThemeColorsPatch,
)

LANGUAGES = ("pt-BR", "en-US")
NO_LOGO = ""


def logo_patch_value(entered: str, remove: bool):
    """None keeps the current logo; NO_LOGO removes it."""
    if remove:
        return NO_LOGO
    return entered.strip() or None


def render_settings(store: AppStore, user: Member):
    settings = store.get_state().settings
    with st.form("settings_form"):
        st.write("#### Aparência")
        c1, c2, c3 = st.columns(3)
        primary = c1.color_picker("Cor primária", settings.theme_colors.primary)
        accent = c2.color_picker("Cor de destaque", settings.theme_colors.accent)
        header_bg = c3.color_picker("Fundo do cabeçalho", settings.theme_colors.header_bg_color)
        logo_url = st.text_input("URL do logo", value=settings.logo_url or "")
        remove_logo = st.checkbox("Remover logo", value=False, disabled=not settings.logo_url)
        language = st.selectbox("Idioma", LANGUAGES, index=LANGUAGES.index(settings.language) if settings.language in LANGUAGES else 0)

        st.write("#### Textos")
        header_title = st.text_input("Título do cabeçalho", value=settings.custom_texts.header_title)
        welcome = st.text_area("Mensagem de boas-vindas", value=settings.custom_texts.welcome_message)

        st.write("#### Contato")
        email = st.text_input("Email", value=settings.contact_info.email)
        phone = st.text_input("Telefone", value=settings.contact_info.phone)

        if st.form_submit_button("Salvar"):
            store.update_settings(SettingsPatch(
                theme_colors=ThemeColorsPatch(primary=primary, accent=accent, header_bg_color=header_bg),
                language=language,
                custom_texts=CustomTextsPatch(header_title=header_title, welcome_message=welcome),
                logo_url=logo_patch_value(logo_url, remove_logo),
                contact_info=ContactInfoPatch(email=email, phone=phone),
            ))
            st.rerun()
