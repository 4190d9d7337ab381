import streamlit as st

from infrastructure.ai import genai_provider
from services import creative_service
from use_cases.app_store import AppStore
from use_cases.domain_models import CreativeKind, Member

FORMS = (
    (CreativeKind.TEXT, "✍️ Gerar texto", "Ex.: convite para a assembleia geral de junho"),
    (CreativeKind.IMAGE, "🖼️ Gerar imagem", "Ex.: cartaz colorido para a festa junina do bairro"),
)


def _show(kind: CreativeKind, result: str):
    if kind == CreativeKind.IMAGE:
        st.image(result)
    else:
        st.write(result)


def render_creative(store: AppStore, user: Member):
    provider = genai_provider.from_config()
    if provider is None:
        st.warning(f"**Aviso de Configuração**  \n{creative_service.API_DISABLED}")

    for kind, title, placeholder in FORMS:
        with st.form(f"creative_{kind.value}_form"):
            st.write(f"#### {title}")
            prompt = st.text_area("Prompt", placeholder=placeholder, key=f"prompt_{kind.value}")
            if st.form_submit_button("Gerar", disabled=provider is None):
                with st.spinner("Gerando..."):
                    outcome = creative_service.generate(store, provider, kind, prompt)
                if outcome.ok:
                    _show(kind, outcome.item.result)
                else:
                    st.error(outcome.error)

    st.write("#### Histórico")
    history = store.get_state().creative_history
    if not history:
        st.caption("Nenhum conteúdo gerado ainda.")
    for item in history:
        with st.container(border=True):
            st.caption(f"{item.timestamp[:16].replace('T', ' ')} · {item.prompt}")
            _show(item.type, item.result)
