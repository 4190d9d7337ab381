from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from use_cases.domain_models import Transaction, TransactionType

TRANSACTION_COLUMNS = ["id", "date", "description", "category", "type", "amount"]


@dataclass(frozen=True)
class FinancialSummary:
    total_revenue: float
    total_expenses: float
    balance: float


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    rows = [
        {
            "id": t.id,
            "date": t.date,
            "description": t.description,
            "category": t.category,
            "type": t.type.value,
            "amount": float(t.amount),
        }
        for t in transactions
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def financial_summary(transactions: Iterable[Transaction]) -> FinancialSummary:
    df = transactions_frame(transactions)
    revenue = float(df.loc[df["type"] == TransactionType.REVENUE.value, "amount"].sum())
    expenses = float(df.loc[df["type"] == TransactionType.EXPENSE.value, "amount"].sum())
    return FinancialSummary(total_revenue=revenue, total_expenses=expenses, balance=revenue - expenses)


def totals_by_category(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Revenue and expense per category, largest movement first."""
    df = transactions_frame(transactions)
    if df.empty:
        return pd.DataFrame(columns=["category", TransactionType.REVENUE.value, TransactionType.EXPENSE.value])

    pivot = df.pivot_table(index="category", columns="type", values="amount", aggfunc="sum", fill_value=0.0)
    for column in (TransactionType.REVENUE.value, TransactionType.EXPENSE.value):
        if column not in pivot.columns:
            pivot[column] = 0.0
    pivot = pivot[[TransactionType.REVENUE.value, TransactionType.EXPENSE.value]]
    pivot = pivot.loc[pivot.sum(axis=1).sort_values(ascending=False).index]
    pivot.columns.name = None
    return pivot.reset_index()


def newest_first(transactions: Iterable[Transaction]) -> pd.DataFrame:
    df = transactions_frame(transactions)
    return df.iloc[::-1].reset_index(drop=True)


def pix_payment_text(amount: float, label: str, pix_key: str) -> str:
    """Text encoded in the PIX QR code shown to members."""
    return f"Pagar R${amount:.2f} para {label} na chave PIX: {pix_key}"
