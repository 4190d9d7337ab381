import plotly.express as px
import streamlit as st

import ui
from services import analytics_service, finance_service
from use_cases.app_store import AppStore
from use_cases.domain_models import Member
from use_cases.session_models import is_admin


def render_dashboard(store: AppStore, user: Member):
    state = store.get_state()
    metrics = analytics_service.dashboard_metrics(state)

    welcome = state.settings.custom_texts.welcome_message or f"Olá, {user.name}!"
    st.write(f"### {welcome}")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("📁 Projetos ativos", metrics.active_projects)
    c2.metric("👥 Associados", metrics.total_members)
    c3.metric("💰 Receitas", ui.money(metrics.total_revenue))
    c4.metric("💸 Despesas", ui.money(metrics.total_expenses))

    if is_admin(user):
        with st.expander(f"🔔 Notificações ({metrics.pending_fees_count + len(metrics.projects_near_deadline)})"):
            for alert in analytics_service.dashboard_alerts(metrics):
                getattr(st, alert.level)(alert.message)

    by_category = finance_service.totals_by_category(state.transactions)
    if by_category.empty:
        st.info("Nenhuma transação registrada.")
        return

    fig = px.bar(
        by_category,
        x="category",
        y=["Receita", "Despesa"],
        barmode="group",
        labels={"category": "Categoria", "value": "Valor (R$)", "variable": "Tipo"},
        title="Receitas e despesas por categoria",
    )
    st.plotly_chart(ui.update_chart_layout(fig), use_container_width=True)
