import logging
from dataclasses import replace

from use_cases import rbac_policy
from use_cases.app_store import AppStore
from use_cases.domain_models import FeeStatus, Member, Role

log = logging.getLogger(__name__)


def change_role(store: AppStore, actor: Member, member_id: int, role: Role) -> bool:
    """Admins may change anyone's role except their own. Returns True when applied."""
    if not rbac_policy.can_manage_members(actor.role) or actor.id == member_id:
        log.warning(f"User {actor.id} may not change the role of member {member_id}")
        return False

    member = next((m for m in store.get_state().members if m.id == member_id), None)
    if member is None:
        return False

    store.update_member(replace(member, role=role))
    log.info(f"Member {member_id} role changed to {role.value} by {actor.id}")
    return True


def update_profile(store: AppStore, member: Member, **changes) -> None:
    """Profile edits; id and fee history are never edited from the profile page."""
    changes.pop("id", None)
    changes.pop("fees", None)
    store.update_member(replace(member, **changes))


def regularize_fee(store: AppStore, actor: Member, member_id: int, month: str, year: int) -> bool:
    """Marks one of a member's pending fees as paid. Admins only."""
    if not rbac_policy.can_manage_members(actor.role):
        log.warning(f"User {actor.id} may not regularize fees of member {member_id}")
        return False

    member = next((m for m in store.get_state().members if m.id == member_id), None)
    if member is None or not any(f.month == month and f.year == year and f.status == FeeStatus.PENDING for f in member.fees):
        return False

    store.mark_fee_paid(member_id, month, year)
    log.info(f"Fee {month}/{year} of member {member_id} marked as paid by {actor.id}")
    return True
