import pytest

from services import fixtures, project_service
from use_cases.app_store import AppStore
from use_cases.domain_models import ProjectDraft, Role
from use_cases.errors import ValidationError


@pytest.fixture
def store():
    return AppStore(fixtures.initial_state())


def _draft(**overrides):
    values = dict(
        name="Mutirão", description="Limpeza da praça", manager_id=3,
        start_date="2025-05-01", end_date="2025-05-31", budget=200.0,
    )
    values.update(overrides)
    return ProjectDraft(**values)


def test_create_project_promotes_member_manager(store):
    project = project_service.create_project(store, _draft())

    state = store.get_state()
    assert state.projects[-1] == project
    assert state.members[2].role == Role.PROJECT_MANAGER


def test_create_project_keeps_admin_role(store):
    project_service.create_project(store, _draft(manager_id=1))
    assert store.get_state().members[0].role == Role.ADMIN


def test_end_before_start_is_rejected_without_changes(store):
    before = store.get_state()
    with pytest.raises(ValidationError) as excinfo:
        project_service.create_project(store, _draft(start_date="2025-05-31", end_date="2025-05-01"))
    assert "data final" in str(excinfo.value)
    assert store.get_state() is before


def test_missing_manager_is_rejected(store):
    with pytest.raises(ValidationError):
        project_service.create_project(store, _draft(manager_id=project_service.NO_MANAGER_ID))


def test_attach_file(store):
    project_service.attach_file(store, 1, "ata.pdf")
    assert store.get_state().projects[0].files[-1] == "ata.pdf"


def test_attach_file_to_unknown_project_is_noop(store):
    before = store.get_state()
    project_service.attach_file(store, 99, "ata.pdf")
    project_service.attach_file(store, 1, "")
    assert store.get_state() is before
