from dataclasses import replace
from datetime import date

import streamlit as st

import ui
from services import finance_service
from use_cases.app_store import AppStore
from use_cases.domain_models import Member, TransactionDraft, TransactionType


def render_financials(store: AppStore, user: Member):
    state = store.get_state()
    summary = finance_service.financial_summary(state.transactions)

    c1, c2, c3 = st.columns(3)
    c1.metric("Receitas", ui.money(summary.total_revenue))
    c2.metric("Despesas", ui.money(summary.total_expenses))
    c3.metric("Saldo", ui.money(summary.balance))

    with st.expander("➕ Nova transação"):
        with st.form("new_transaction_form", clear_on_submit=True):
            description = st.text_input("Descrição")
            amount = st.number_input("Valor (R$)", min_value=0.0, step=10.0)
            kind = st.selectbox("Tipo", list(TransactionType), format_func=lambda t: t.value)
            category = st.text_input("Categoria")
            when = st.date_input("Data", value=date.today())
            if st.form_submit_button("Adicionar"):
                store.add_transaction(TransactionDraft(
                    description=description, amount=amount, type=kind, category=category, date=when.isoformat(),
                ))
                st.rerun()

    st.dataframe(finance_service.newest_first(state.transactions), use_container_width=True, hide_index=True)

    st.write("#### Contas bancárias")
    for account in state.bank_accounts:
        with st.form(f"account_{account.id}"):
            c1, c2, c3, c4 = st.columns(4)
            name = c1.text_input("Banco", value=account.name)
            agency = c2.text_input("Agência", value=account.agency)
            number = c3.text_input("Conta", value=account.account)
            kind = c4.text_input("Tipo", value=account.type)
            if st.form_submit_button("Salvar conta"):
                store.update_bank_account(replace(account, name=name, agency=agency, account=number, type=kind))

    with st.form("fee_settings"):
        fee = st.number_input("Valor da mensalidade (R$)", min_value=0.0, value=float(state.membership_fee_amount))
        pix_key = st.text_input("Chave PIX", value=state.pix_key)
        if st.form_submit_button("Salvar"):
            if fee != state.membership_fee_amount:
                store.update_membership_fee_amount(fee)
            if pix_key != state.pix_key:
                store.update_pix_key(pix_key)
            st.success("Configurações financeiras salvas.")
