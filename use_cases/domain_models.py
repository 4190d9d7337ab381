"""Domain records for the community association (members, projects, ledger, chat)."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Role(str, Enum):
    ADMIN = "Admin"
    PROJECT_MANAGER = "Gestor de Projeto"
    MEMBER = "Associado"


class FeeStatus(str, Enum):
    PAID = "Paga"
    PENDING = "Pendente"


class ProjectStatus(str, Enum):
    IN_PROGRESS = "Em andamento"
    COMPLETED = "Concluído"
    SUSPENDED = "Suspenso"


class TransactionType(str, Enum):
    REVENUE = "Receita"
    EXPENSE = "Despesa"


class CreativeKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class MonthlyFee:
    month: str
    year: int
    status: FeeStatus
    amount: float


@dataclass(frozen=True)
class Member:
    id: int
    name: str
    cpf: str
    address: str
    phone: str
    email: str
    join_date: str
    role: Role
    avatar_url: str
    banner_url: Optional[str] = None
    password: Optional[str] = None
    fees: Tuple[MonthlyFee, ...] = ()


@dataclass(frozen=True)
class MemberDraft:
    """Member fields supplied by the caller; id, images and fees are assigned by the store."""

    name: str
    cpf: str
    address: str
    phone: str
    email: str
    join_date: str
    role: Role = Role.MEMBER
    password: Optional[str] = None


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    description: str
    manager_id: int
    start_date: str
    end_date: str
    budget: float
    status: ProjectStatus
    files: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectDraft:
    name: str
    description: str
    manager_id: int
    start_date: str
    end_date: str
    budget: float
    status: ProjectStatus = ProjectStatus.IN_PROGRESS


@dataclass(frozen=True)
class Transaction:
    id: int
    description: str
    amount: float
    type: TransactionType
    category: str
    date: str


@dataclass(frozen=True)
class TransactionDraft:
    description: str
    amount: float
    type: TransactionType
    category: str
    date: str


@dataclass(frozen=True)
class BankAccount:
    id: int
    name: str
    agency: str
    account: str
    type: str


@dataclass(frozen=True)
class ChatMessage:
    """Chat line with the sender's name and avatar copied at send time."""

    id: int
    sender_id: int
    sender_name: str
    sender_avatar_url: str
    text: str
    timestamp: str


@dataclass(frozen=True)
class CreativeHistoryItem:
    id: int
    type: CreativeKind
    prompt: str
    result: str  # text, or a data URL for images
    timestamp: str


@dataclass(frozen=True)
class CreativeDraft:
    type: CreativeKind
    prompt: str
    result: str


@dataclass(frozen=True)
class ThemeColors:
    primary: str
    accent: str
    header_bg_color: str


@dataclass(frozen=True)
class CustomTexts:
    header_title: str
    welcome_message: str


@dataclass(frozen=True)
class ContactInfo:
    email: str
    phone: str


@dataclass(frozen=True)
class Settings:
    theme_colors: ThemeColors
    language: str
    custom_texts: CustomTexts
    contact_info: ContactInfo
    logo_url: Optional[str] = None


# Partial updates: None means "keep the current value".

@dataclass(frozen=True)
class ThemeColorsPatch:
    primary: Optional[str] = None
    accent: Optional[str] = None
    header_bg_color: Optional[str] = None


@dataclass(frozen=True)
class CustomTextsPatch:
    header_title: Optional[str] = None
    welcome_message: Optional[str] = None


@dataclass(frozen=True)
class ContactInfoPatch:
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class SettingsPatch:
    theme_colors: Optional[ThemeColorsPatch] = None
    language: Optional[str] = None
    custom_texts: Optional[CustomTextsPatch] = None
    logo_url: Optional[str] = None
    contact_info: Optional[ContactInfoPatch] = None


def pending_fees(member: Member) -> Tuple[MonthlyFee, ...]:
    return tuple(fee for fee in member.fees if fee.status == FeeStatus.PENDING)


def pending_amount(member: Member) -> float:
    return sum(fee.amount for fee in pending_fees(member))


def has_pending_fees(member: Member) -> bool:
    return any(fee.status == FeeStatus.PENDING for fee in member.fees)
