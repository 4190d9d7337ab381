from dataclasses import replace

from services import fixtures, member_service
from use_cases.app_store import AppStore
from use_cases.domain_models import Role, pending_amount, pending_fees

ADMIN, MANAGER, MEMBER = fixtures.INITIAL_MEMBERS


def test_admin_changes_role():
    store = AppStore(fixtures.initial_state())
    assert member_service.change_role(store, ADMIN, MEMBER.id, Role.PROJECT_MANAGER) is True
    assert store.get_state().members[2].role == Role.PROJECT_MANAGER


def test_admin_cannot_change_own_role():
    store = AppStore(fixtures.initial_state())
    assert member_service.change_role(store, ADMIN, ADMIN.id, Role.MEMBER) is False
    assert store.get_state().members[0].role == Role.ADMIN


def test_non_admin_cannot_change_roles():
    store = AppStore(fixtures.initial_state())
    before = store.get_state()
    assert member_service.change_role(store, MANAGER, MEMBER.id, Role.ADMIN) is False
    assert store.get_state() is before


def test_unknown_member():
    store = AppStore(fixtures.initial_state())
    assert member_service.change_role(store, ADMIN, 404, Role.ADMIN) is False


def test_update_profile_never_touches_id_or_fees():
    store = AppStore(fixtures.initial_state())
    store.start_session(MEMBER)

    member_service.update_profile(store, MEMBER, name="João S.", phone="(11) 1", id=77, fees=())

    updated = store.get_state().members[2]
    assert updated.id == MEMBER.id
    assert updated.fees == MEMBER.fees
    assert updated.name == "João S."
    assert store.get_state().session.current_user == updated


def test_update_profile_of_user_created_at_login():
    store = AppStore(fixtures.initial_state())
    user = replace(MEMBER, id=1747000000000, name="Ana", email="ana@x.com", fees=())
    store.start_session(user)

    member_service.update_profile(store, user, name="Ana Souza")

    assert store.get_state().session.current_user.name == "Ana Souza"
    assert all(m.name != "Ana Souza" for m in store.get_state().members)


def test_admin_regularizes_another_members_fee():
    store = AppStore(fixtures.initial_state())

    assert member_service.regularize_fee(store, ADMIN, MEMBER.id, "Fevereiro", 2024) is True

    joao = store.get_state().members[2]
    assert pending_amount(joao) == 50.0
    assert [f.month for f in pending_fees(joao)] == ["Março"]


def test_regularize_fee_requires_admin():
    store = AppStore(fixtures.initial_state())
    before = store.get_state()
    assert member_service.regularize_fee(store, MANAGER, MEMBER.id, "Fevereiro", 2024) is False
    assert store.get_state() is before


def test_regularize_fee_ignores_paid_or_unknown_fees():
    store = AppStore(fixtures.initial_state())
    before = store.get_state()
    assert member_service.regularize_fee(store, ADMIN, MEMBER.id, "Janeiro", 2024) is False
    assert member_service.regularize_fee(store, ADMIN, 404, "Fevereiro", 2024) is False
    assert store.get_state() is before
