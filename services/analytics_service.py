from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Literal, Optional, Tuple

import pandas as pd

from services import finance_service
from use_cases.app_store import AppState
from use_cases.domain_models import FeeStatus, Member, Project, ProjectStatus, has_pending_fees

NEAR_DEADLINE_PROGRESS = 90.0

InsightLevel = Literal["success", "warning", "error", "info"]


@dataclass(frozen=True)
class InsightMetric:
    """DTO for a single dashboard alert."""
    type: str
    message: str
    level: InsightLevel


@dataclass(frozen=True)
class DashboardMetrics:
    active_projects: int
    total_members: int
    total_revenue: float
    total_expenses: float
    members_with_pending_fees: Tuple[Member, ...]
    pending_fees_count: int
    projects_near_deadline: Tuple[Project, ...]


def project_progress(projects: Iterable[Project], today: date) -> pd.DataFrame:
    """Elapsed share (0-100) of each project's planned duration as of `today`."""
    df = pd.DataFrame(
        [
            {"id": p.id, "status": p.status.value, "start": p.start_date, "end": p.end_date}
            for p in projects
        ],
        columns=["id", "status", "start", "end"],
    )
    if df.empty:
        df["progress"] = pd.Series(dtype=float)
        return df

    df["start"] = pd.to_datetime(df["start"])
    df["end"] = pd.to_datetime(df["end"])
    now = pd.Timestamp(today)
    total = (df["end"] - df["start"]).dt.total_seconds()
    elapsed = (now - df["start"]).dt.total_seconds()
    df["progress"] = (elapsed / total.where(total > 0)) * 100
    df["progress"] = df["progress"].fillna(0.0)
    df["running"] = (df["start"] <= now) & (df["end"] >= now)
    return df


def near_deadline(projects: Iterable[Project], today: date) -> Tuple[Project, ...]:
    projects = tuple(projects)
    df = project_progress(projects, today)
    if df.empty:
        return ()
    mask = (
        (df["status"] == ProjectStatus.IN_PROGRESS.value)
        & df["running"]
        & (df["progress"] >= NEAR_DEADLINE_PROGRESS)
    )
    ids = set(df.loc[mask, "id"])
    return tuple(p for p in projects if p.id in ids)


def dashboard_metrics(state: AppState, today: Optional[date] = None) -> DashboardMetrics:
    today = today or date.today()
    summary = finance_service.financial_summary(state.transactions)
    return DashboardMetrics(
        active_projects=sum(1 for p in state.projects if p.status == ProjectStatus.IN_PROGRESS),
        total_members=len(state.members),
        total_revenue=summary.total_revenue,
        total_expenses=summary.total_expenses,
        members_with_pending_fees=tuple(m for m in state.members if has_pending_fees(m)),
        pending_fees_count=sum(
            1 for m in state.members for fee in m.fees if fee.status == FeeStatus.PENDING
        ),
        projects_near_deadline=near_deadline(state.projects, today),
    )


def dashboard_alerts(metrics: DashboardMetrics) -> List[InsightMetric]:
    """Notifications shown to admins on the dashboard."""
    alerts = []
    if metrics.pending_fees_count:
        alerts.append(InsightMetric(
            type="pending_fees",
            message=(
                f"💰 {metrics.pending_fees_count} mensalidade(s) pendente(s) de "
                f"{len(metrics.members_with_pending_fees)} associado(s)."
            ),
            level="warning",
        ))
    for project in metrics.projects_near_deadline:
        alerts.append(InsightMetric(
            type="near_deadline",
            message=f"⏳ O projeto **{project.name}** está perto do prazo final ({project.end_date}).",
            level="warning",
        ))
    if metrics.total_expenses > metrics.total_revenue:
        alerts.append(InsightMetric(
            type="negative_balance",
            message="📉 As despesas superam as receitas registradas.",
            level="error",
        ))
    if not alerts:
        alerts.append(InsightMetric(type="all_clear", message="✅ Nenhuma pendência no momento.", level="success"))
    return alerts
