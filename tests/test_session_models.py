from dataclasses import FrozenInstanceError

import pytest

from services import fixtures
from use_cases.domain_models import FeeStatus, MonthlyFee, has_pending_fees, pending_amount, pending_fees
from use_cases.session_models import Session, is_active, is_admin, is_manager

ADMIN, MANAGER, MEMBER = fixtures.INITIAL_MEMBERS


def test_is_admin() -> None:
    assert is_admin(ADMIN) is True
    assert is_admin(MANAGER) is False
    assert is_admin(MEMBER) is False


def test_is_manager() -> None:
    assert is_manager(ADMIN) is True
    assert is_manager(MANAGER) is True
    assert is_manager(MEMBER) is False


def test_is_active() -> None:
    assert is_active(Session.for_user(MEMBER)) is True
    assert is_active(Session.anonymous()) is False
    assert is_active(Session(current_user=MEMBER, is_authenticated=False)) is False
    assert is_active(None) is False


def test_pending_fee_helpers() -> None:
    assert has_pending_fees(ADMIN) is False
    assert [f.month for f in pending_fees(MEMBER)] == ["Fevereiro", "Março"]
    assert pending_amount(MEMBER) == 100.0


def test_monthly_fee_is_immutable() -> None:
    fee = MonthlyFee(month="Janeiro", year=2024, status=FeeStatus.PENDING, amount=50.0)
    with pytest.raises(FrozenInstanceError):
        fee.status = FeeStatus.PAID
