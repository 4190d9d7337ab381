from dataclasses import replace
from datetime import date

import streamlit as st

import ui
from services import project_service
from use_cases import rbac_policy
from use_cases.app_store import AppStore
from use_cases.domain_models import Member, ProjectDraft, ProjectStatus
from use_cases.errors import ValidationError


def render_projects(store: AppStore, user: Member):
    state = store.get_state()
    managers = {m.id: m.name for m in state.members}

    if rbac_policy.can_manage_projects(user.role):
        with st.expander("➕ Novo projeto"):
            with st.form("new_project_form"):
                name = st.text_input("Nome do Projeto")
                description = st.text_area("Descrição")
                manager_id = st.selectbox(
                    "Responsável", [0] + list(managers),
                    format_func=lambda i: managers.get(i, "Selecione..."),
                )
                c1, c2 = st.columns(2)
                start = c1.date_input("Início", value=date.today())
                end = c2.date_input("Fim", value=date.today())
                budget = st.number_input("Orçamento (R$)", min_value=0.0, step=100.0)
                if st.form_submit_button("Cadastrar"):
                    try:
                        project_service.create_project(store, ProjectDraft(
                            name=name,
                            description=description,
                            manager_id=manager_id,
                            start_date=start.isoformat(),
                            end_date=end.isoformat(),
                            budget=budget,
                        ))
                        st.success("Projeto cadastrado.")
                    except ValidationError as e:
                        st.error(str(e))

    for project in store.get_state().projects:
        with st.container(border=True):
            st.write(f"**{project.name}** · {project.status.value}")
            st.caption(
                f"{project.start_date} → {project.end_date} · "
                f"Responsável: {managers.get(project.manager_id, '—')} · {ui.money(project.budget)}"
            )
            st.write(project.description)
            if project.files:
                st.caption("Arquivos: " + ", ".join(project.files))
            if rbac_policy.can_manage_projects(user.role):
                statuses = list(ProjectStatus)
                status = st.selectbox(
                    "Status", statuses, index=statuses.index(project.status),
                    format_func=lambda s: s.value, key=f"status_{project.id}",
                )
                if status != project.status:
                    store.update_project(replace(project, status=status))
                    st.rerun()
                upload = st.file_uploader("Anexar arquivo", key=f"file_{project.id}")
                if upload is not None and upload.name not in project.files:
                    project_service.attach_file(store, project.id, upload.name)
                    st.rerun()
