from datetime import date

import streamlit as st

import ui
from services import member_service
from use_cases.app_store import AppStore
from use_cases.domain_models import Member, MemberDraft, Role, pending_fees


def render_members(store: AppStore, user: Member):
    with st.expander("➕ Adicionar associado"):
        with st.form("new_member_form", clear_on_submit=True):
            name = st.text_input("Nome *")
            email = st.text_input("Email *")
            cpf = st.text_input("CPF")
            phone = st.text_input("Telefone")
            address = st.text_input("Endereço")
            role = st.selectbox("Perfil", list(Role), format_func=lambda r: r.value, index=2)
            if st.form_submit_button("Cadastrar"):
                if not name.strip() or not email.strip():
                    st.error("Nome e email são obrigatórios.")
                else:
                    store.add_member(MemberDraft(
                        name=name.strip(),
                        cpf=cpf.strip(),
                        address=address.strip(),
                        phone=phone.strip(),
                        email=email.strip(),
                        join_date=date.today().isoformat(),
                        role=role,
                    ))
                    st.success("Associado cadastrado.")

    for member in store.get_state().members:
        c1, c2, c3 = st.columns([4, 2, 3])
        c1.write(f"**{member.name}**  \n{member.email}")
        pending = pending_fees(member)
        c2.write(f"⏳ {len(pending)} pendente(s)" if pending else "✅ Em dia")
        if pending:
            with c2.popover("Regularizar"):
                for fee in pending:
                    if st.button(
                        f"Marcar {fee.month}/{fee.year} ({ui.money(fee.amount)}) como paga",
                        key=f"regularize_{member.id}_{fee.month}_{fee.year}",
                    ):
                        member_service.regularize_fee(store, user, member.id, fee.month, fee.year)
                        st.rerun()
        if member.id == user.id:
            c3.caption(member.role.value)
            continue
        roles = list(Role)
        new_role = c3.selectbox(
            "Perfil", roles, index=roles.index(member.role), format_func=lambda r: r.value,
            key=f"role_{member.id}", label_visibility="collapsed",
        )
        if new_role != member.role:
            member_service.change_role(store, user, member.id, new_role)
            st.rerun()
