from datetime import datetime

import streamlit as st

from use_cases.app_store import AppStore
from use_cases.domain_models import Member


def _time_label(timestamp: str) -> str:
    try:
        return datetime.fromisoformat(timestamp).strftime("%H:%M")
    except ValueError:
        return ""


def render_chat(store: AppStore, user: Member):
    for message in store.get_state().chat_messages:
        is_me = message.sender_id == user.id
        with st.chat_message("user" if is_me else "assistant", avatar=message.sender_avatar_url):
            st.caption(f"{'Você' if is_me else message.sender_name} · {_time_label(message.timestamp)}")
            st.write(message.text)

    text = st.chat_input("Digite sua mensagem...")
    if text and text.strip():
        store.add_chat_message(text.strip())
        st.rerun()
