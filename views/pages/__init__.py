"""Page renderers keyed by Page; each takes (store, current_user)."""

from use_cases.rbac_policy import Page

from .chat_view import render_chat
from .creative_view import render_creative
from .dashboard_view import render_dashboard
from .financials_view import render_financials
from .members_view import render_members
from .profile_view import render_profile
from .projects_view import render_projects
from .settings_view import render_settings

PAGE_RENDERERS = {
    Page.DASHBOARD: render_dashboard,
    Page.PROFILE: render_profile,
    Page.CHAT: render_chat,
    Page.MEMBERS: render_members,
    Page.PROJECTS: render_projects,
    Page.CREATIVE: render_creative,
    Page.FINANCIALS: render_financials,
    Page.SETTINGS: render_settings,
}

PAGE_LABELS = {
    Page.DASHBOARD: "🏠 Painel",
    Page.PROFILE: "👤 Meu Perfil",
    Page.CHAT: "💬 Chat",
    Page.MEMBERS: "👥 Associados",
    Page.PROJECTS: "📁 Projetos",
    Page.CREATIVE: "✨ Criativo",
    Page.FINANCIALS: "💰 Financeiro",
    Page.SETTINGS: "⚙️ Configurações",
}
