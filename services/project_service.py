import logging
from dataclasses import replace
from datetime import date

from use_cases.app_store import AppStore
from use_cases.domain_models import Project, ProjectDraft, Role
from use_cases.errors import ValidationError

log = logging.getLogger(__name__)

NO_MANAGER_ID = 0


def validate_project(draft: ProjectDraft) -> None:
    if date.fromisoformat(draft.end_date) < date.fromisoformat(draft.start_date):
        raise ValidationError("A data final não pode ser anterior à data de início.")
    if draft.manager_id == NO_MANAGER_ID:
        raise ValidationError("Por favor, selecione um responsável pelo projeto.")


def create_project(store: AppStore, draft: ProjectDraft) -> Project:
    """
    Project creation flow: validates the draft, promotes a plain Member chosen
    as manager to Project Manager, then adds the project.
    Raises ValidationError without touching the store.
    """
    validate_project(draft)

    manager = next((m for m in store.get_state().members if m.id == draft.manager_id), None)
    if manager is not None and manager.role == Role.MEMBER:
        log.info(f"Promoting member {manager.id} to project manager")
        store.update_member(replace(manager, role=Role.PROJECT_MANAGER))

    return store.add_project(draft)


def attach_file(store: AppStore, project_id: int, filename: str) -> None:
    project = next((p for p in store.get_state().projects if p.id == project_id), None)
    if project is None or not filename:
        return
    store.update_project(replace(project, files=project.files + (filename,)))
