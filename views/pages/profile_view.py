import streamlit as st

import ui
from services import finance_service, member_service
from use_cases.app_store import AppStore
from use_cases.domain_models import FeeStatus, Member, pending_amount, pending_fees
from use_cases.session_models import is_admin


def render_profile(store: AppStore, user: Member):
    state = store.get_state()
    if user.banner_url:
        st.image(user.banner_url, use_container_width=True)

    col_avatar, col_info = st.columns([1, 4])
    col_avatar.image(user.avatar_url, width=120)
    with col_info:
        st.subheader(user.name)
        st.caption(f"{user.role.value} · associado desde {user.join_date}")

    with st.form("profile_form"):
        name = st.text_input("Nome", value=user.name)
        email = st.text_input("Email", value=user.email)
        phone = st.text_input("Telefone", value=user.phone)
        address = st.text_input("Endereço", value=user.address)
        cpf = st.text_input("CPF", value=user.cpf)
        if st.form_submit_button("Salvar"):
            member_service.update_profile(store, user, name=name, email=email, phone=phone, address=address, cpf=cpf)
            st.success("Perfil atualizado.")

    st.write("#### Mensalidades")
    for fee in user.fees:
        c1, c2, c3 = st.columns([3, 2, 2])
        c1.write(f"{fee.month}/{fee.year} · {ui.money(fee.amount)}")
        c2.write("✅ Paga" if fee.status == FeeStatus.PAID else "⏳ Pendente")
        if fee.status == FeeStatus.PENDING:
            if c3.button("Gerar PIX", key=f"pix_{fee.month}_{fee.year}"):
                st.code(finance_service.pix_payment_text(fee.amount, fee.month, state.pix_key))
            # Only admins confirm payments.
            if is_admin(store.get_state().session.current_user) and c3.button(
                "Marcar como paga", key=f"paid_{fee.month}_{fee.year}"
            ):
                member_service.regularize_fee(store, store.get_state().session.current_user, user.id, fee.month, fee.year)
                st.rerun()

    total = pending_amount(user)
    if pending_fees(user):
        st.warning(f"Total pendente: {ui.money(total)}")
        if st.button("Gerar PIX de todas as pendências"):
            st.code(finance_service.pix_payment_text(total, "Todas as Pendências", state.pix_key))
