"""
Application state container.

One AppStore instance holds every collection of the running app plus the
active session and the UI-facing settings. It is created once per Streamlit
session (see utils.session_manager) and passed by reference to whoever needs
it. Mutators replace the immutable AppState snapshot and notify every
subscriber synchronously before returning.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from use_cases.domain_models import (
    BankAccount,
    ChatMessage,
    ContactInfo,
    CreativeDraft,
    CreativeHistoryItem,
    CustomTexts,
    FeeStatus,
    Member,
    MemberDraft,
    MonthlyFee,
    Project,
    ProjectDraft,
    Settings,
    SettingsPatch,
    ThemeColors,
    Transaction,
    TransactionDraft,
)
from use_cases.errors import UnknownActionError
from use_cases.session_models import Session, is_active

log = logging.getLogger(__name__)

SEED_FEE_MONTHS = ("Janeiro", "Fevereiro", "Março")
DEFAULT_MEMBER_PASSWORD = "password123"
AVATAR_URL_TEMPLATE = "https://picsum.photos/seed/member{seed}/200"
BANNER_URL_TEMPLATE = "https://picsum.photos/seed/banner{seed}/1000/300"

T = TypeVar("T")
Listener = Callable[["AppState"], None]
Clock = Callable[[], datetime]


@dataclass(frozen=True)
class AppState:
    settings: Settings
    members: Tuple[Member, ...] = ()
    projects: Tuple[Project, ...] = ()
    bank_accounts: Tuple[BankAccount, ...] = ()
    transactions: Tuple[Transaction, ...] = ()
    chat_messages: Tuple[ChatMessage, ...] = ()
    creative_history: Tuple[CreativeHistoryItem, ...] = ()
    membership_fee_amount: float = 50.0
    pix_key: str = ""
    session: Session = field(default_factory=Session.anonymous)


def next_id(items: Sequence) -> int:
    """max(existing ids) + 1, or 1 for an empty collection."""
    if not items:
        return 1
    return max(item.id for item in items) + 1


def _replace_by_id(items: Tuple[T, ...], updated: T) -> Optional[Tuple[T, ...]]:
    """Returns the collection with the matching item swapped, or None when the id is unknown."""
    if not any(item.id == updated.id for item in items):
        return None
    return tuple(updated if item.id == updated.id else item for item in items)


def merge_settings(current: Settings, patch: SettingsPatch) -> Settings:
    """Deep-merges the nested records; language and logo are replaced when given."""

    def _merge(base, part):
        if part is None:
            return base
        changes = {name: value for name, value in vars(part).items() if value is not None}
        return replace(base, **changes)

    return Settings(
        theme_colors=_merge(current.theme_colors, patch.theme_colors),
        language=patch.language if patch.language is not None else current.language,
        custom_texts=_merge(current.custom_texts, patch.custom_texts),
        contact_info=_merge(current.contact_info, patch.contact_info),
        logo_url=patch.logo_url if patch.logo_url is not None else current.logo_url,
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AppStore:
    ACTIONS = (
        "add_member",
        "update_member",
        "add_project",
        "update_project",
        "update_bank_account",
        "add_transaction",
        "add_chat_message",
        "add_creative_history_item",
        "update_settings",
        "update_membership_fee_amount",
        "update_pix_key",
        "mark_fee_paid",
        "start_session",
        "end_session",
    )

    def __init__(self, initial_state: AppState, clock: Optional[Clock] = None):
        self._state = initial_state
        self._clock = clock or _utc_now
        self._listeners: List[Listener] = []

    # --- get / subscribe / dispatch ---

    def get_state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: str, *args, **kwargs):
        if action not in self.ACTIONS:
            raise UnknownActionError(f"Unknown store action: {action}")
        return getattr(self, action)(*args, **kwargs)

    def _commit(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    # --- members ---

    def add_member(self, draft: MemberDraft) -> Member:
        now = self._clock()
        seed = int(now.timestamp() * 1000)
        amount = self._state.membership_fee_amount
        member = Member(
            id=next_id(self._state.members),
            name=draft.name,
            cpf=draft.cpf,
            address=draft.address,
            phone=draft.phone,
            email=draft.email,
            join_date=draft.join_date,
            role=draft.role,
            avatar_url=AVATAR_URL_TEMPLATE.format(seed=seed),
            banner_url=BANNER_URL_TEMPLATE.format(seed=seed),
            password=draft.password or DEFAULT_MEMBER_PASSWORD,
            fees=tuple(
                MonthlyFee(month=month, year=now.year, status=FeeStatus.PENDING, amount=amount)
                for month in SEED_FEE_MONTHS
            ),
        )
        log.info(f"Member {member.id} added ({member.role.value})")
        self._commit(members=self._state.members + (member,))
        return member

    def update_member(self, member: Member) -> None:
        changes: Dict[str, object] = {}
        members = _replace_by_id(self._state.members, member)
        if members is not None:
            changes["members"] = members

        # Users created at login are not in the directory but still own the session.
        session = self._state.session
        if session.current_user is not None and session.current_user.id == member.id:
            changes["session"] = Session.for_user(member)

        if not changes:
            log.debug(f"update_member ignored: no member with id {member.id}")
            return
        self._commit(**changes)

    def mark_fee_paid(self, member_id: int, month: str, year: int) -> None:
        member = next((m for m in self._state.members if m.id == member_id), None)
        if member is None:
            log.debug(f"mark_fee_paid ignored: no member with id {member_id}")
            return
        if not any(f.month == month and f.year == year for f in member.fees):
            log.debug(f"mark_fee_paid ignored: member {member_id} has no fee {month}/{year}")
            return

        fees = tuple(
            replace(fee, status=FeeStatus.PAID) if fee.month == month and fee.year == year else fee
            for fee in member.fees
        )
        self.update_member(replace(member, fees=fees))

    # --- projects / finance ---

    def add_project(self, draft: ProjectDraft) -> Project:
        # Date ordering is checked by the creation flow, not here.
        project = Project(id=next_id(self._state.projects), files=(), **vars(draft))
        self._commit(projects=self._state.projects + (project,))
        return project

    def update_project(self, project: Project) -> None:
        projects = _replace_by_id(self._state.projects, project)
        if projects is None:
            log.debug(f"update_project ignored: no project with id {project.id}")
            return
        self._commit(projects=projects)

    def update_bank_account(self, account: BankAccount) -> None:
        accounts = _replace_by_id(self._state.bank_accounts, account)
        if accounts is None:
            log.debug(f"update_bank_account ignored: no account with id {account.id}")
            return
        self._commit(bank_accounts=accounts)

    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        transaction = Transaction(id=next_id(self._state.transactions), **vars(draft))
        self._commit(transactions=self._state.transactions + (transaction,))
        return transaction

    def update_membership_fee_amount(self, amount: float) -> None:
        self._commit(membership_fee_amount=amount)

    def update_pix_key(self, key: str) -> None:
        self._commit(pix_key=key)

    # --- chat / creative ---

    def add_chat_message(self, text: str) -> Optional[ChatMessage]:
        session = self._state.session
        if not is_active(session):
            log.debug("add_chat_message ignored: no active session")
            return None

        sender = session.current_user
        message = ChatMessage(
            id=next_id(self._state.chat_messages),
            sender_id=sender.id,
            sender_name=sender.name,
            sender_avatar_url=sender.avatar_url,
            text=text,
            timestamp=self._clock().isoformat(),
        )
        self._commit(chat_messages=self._state.chat_messages + (message,))
        return message

    def add_creative_history_item(self, draft: CreativeDraft) -> CreativeHistoryItem:
        item = CreativeHistoryItem(
            id=next_id(self._state.creative_history),
            type=draft.type,
            prompt=draft.prompt,
            result=draft.result,
            timestamp=self._clock().isoformat(),
        )
        self._commit(creative_history=(item,) + self._state.creative_history)
        return item

    # --- settings ---

    def update_settings(self, patch: SettingsPatch) -> None:
        self._commit(settings=merge_settings(self._state.settings, patch))

    # --- session ---

    def start_session(self, user: Member) -> None:
        self._commit(session=Session.for_user(user))

    def end_session(self) -> None:
        self._commit(session=Session.anonymous())


def default_settings() -> Settings:
    return Settings(
        theme_colors=ThemeColors(primary="#005f73", accent="#ee9b00", header_bg_color="#003e4d"),
        language="pt-BR",
        custom_texts=CustomTexts(header_title="Community Connect", welcome_message=""),
        contact_info=ContactInfo(email="contato@associacao.com", phone="(00) 12345-6789"),
        logo_url=None,
    )
