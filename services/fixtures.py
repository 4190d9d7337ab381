"""Static seed data the application starts from on every run."""

from use_cases.app_store import AppState, default_settings
from use_cases.domain_models import (
    BankAccount,
    ChatMessage,
    FeeStatus,
    Member,
    MonthlyFee,
    Project,
    ProjectStatus,
    Role,
    Transaction,
    TransactionType,
)

MEMBERSHIP_FEE_AMOUNT = 50.0
PIX_KEY = "financeiro@community.com"


def _fees(*statuses: FeeStatus, year: int = 2024):
    months = ("Janeiro", "Fevereiro", "Março")
    return tuple(
        MonthlyFee(month=month, year=year, status=status, amount=MEMBERSHIP_FEE_AMOUNT)
        for month, status in zip(months, statuses)
    )


INITIAL_MEMBERS = (
    Member(
        id=1,
        name="Admin da Associação",
        cpf="111.111.111-11",
        address="Rua Principal, 100",
        phone="(11) 91111-1111",
        email="admin@community.com",
        join_date="2023-01-10",
        role=Role.ADMIN,
        avatar_url="https://picsum.photos/seed/member1/200",
        banner_url="https://picsum.photos/seed/banner1/1000/300",
        password="senha123",
        fees=_fees(FeeStatus.PAID, FeeStatus.PAID, FeeStatus.PAID),
    ),
    Member(
        id=2,
        name="Maria Souza",
        cpf="222.222.222-22",
        address="Av. das Flores, 200",
        phone="(11) 92222-2222",
        email="maria@community.com",
        join_date="2023-03-15",
        role=Role.PROJECT_MANAGER,
        avatar_url="https://picsum.photos/seed/member2/200",
        banner_url="https://picsum.photos/seed/banner2/1000/300",
        password="senha123",
        fees=_fees(FeeStatus.PAID, FeeStatus.PAID, FeeStatus.PENDING),
    ),
    Member(
        id=3,
        name="João Lima",
        cpf="333.333.333-33",
        address="Travessa Azul, 30",
        phone="(11) 93333-3333",
        email="joao@community.com",
        join_date="2023-06-01",
        role=Role.MEMBER,
        avatar_url="https://picsum.photos/seed/member3/200",
        banner_url="https://picsum.photos/seed/banner3/1000/300",
        password="senha123",
        fees=_fees(FeeStatus.PAID, FeeStatus.PENDING, FeeStatus.PENDING),
    ),
)

INITIAL_PROJECTS = (
    Project(
        id=1,
        name="Horta Comunitária",
        description="Implantação de uma horta no terreno da sede.",
        manager_id=2,
        start_date="2024-02-01",
        end_date="2024-08-31",
        budget=3500.0,
        status=ProjectStatus.IN_PROGRESS,
        files=("planta_horta.pdf",),
    ),
    Project(
        id=2,
        name="Reforma da Quadra",
        description="Pintura e troca das redes da quadra poliesportiva.",
        manager_id=1,
        start_date="2023-09-01",
        end_date="2023-12-15",
        budget=12000.0,
        status=ProjectStatus.COMPLETED,
    ),
)

INITIAL_BANK_ACCOUNTS = (
    BankAccount(id=1, name="Banco do Brasil", agency="1234-5", account="12345-6", type="Conta Corrente"),
    BankAccount(id=2, name="Caixa Econômica", agency="0987", account="98765-4", type="Poupança"),
)

INITIAL_TRANSACTIONS = (
    Transaction(
        id=1,
        description="Mensalidades de janeiro",
        amount=1200.0,
        type=TransactionType.REVENUE,
        category="Mensalidades",
        date="2024-01-31",
    ),
    Transaction(
        id=2,
        description="Material de limpeza",
        amount=150.0,
        type=TransactionType.EXPENSE,
        category="Manutenção",
        date="2024-01-20",
    ),
    Transaction(
        id=3,
        description="Sementes e ferramentas",
        amount=800.0,
        type=TransactionType.EXPENSE,
        category="Projetos",
        date="2024-03-05",
    ),
)

INITIAL_CHAT_MESSAGES = (
    ChatMessage(
        id=1,
        sender_id=1,
        sender_name="Admin da Associação",
        sender_avatar_url="https://picsum.photos/seed/member1/200",
        text="Bem-vindos ao chat da associação!",
        timestamp="2024-03-01T12:00:00+00:00",
    ),
    ChatMessage(
        id=2,
        sender_id=2,
        sender_name="Maria Souza",
        sender_avatar_url="https://picsum.photos/seed/member2/200",
        text="A horta começa no sábado, contamos com todos.",
        timestamp="2024-03-01T12:05:00+00:00",
    ),
)


def initial_state() -> AppState:
    return AppState(
        settings=default_settings(),
        members=INITIAL_MEMBERS,
        projects=INITIAL_PROJECTS,
        bank_accounts=INITIAL_BANK_ACCOUNTS,
        transactions=INITIAL_TRANSACTIONS,
        chat_messages=INITIAL_CHAT_MESSAGES,
        creative_history=(),
        membership_fee_amount=MEMBERSHIP_FEE_AMOUNT,
        pix_key=PIX_KEY,
    )
