import re

import streamlit as st

from use_cases.domain_models import Settings

HEX_COLOR_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(hex_color: str) -> str:
    """'#005f73' -> '0 95 115'; unparseable colors fall back to black."""
    match = HEX_COLOR_RE.match(hex_color or "")
    if not match:
        return "0 0 0"
    return " ".join(str(int(part, 16)) for part in match.groups())


def setup_style(settings: Settings):
    colors = settings.theme_colors
    st.markdown(f"""
    <style>
        :root {{
            --color-primary: {hex_to_rgb(colors.primary)};
            --color-accent: {hex_to_rgb(colors.accent)};
            --color-header-bg: {hex_to_rgb(colors.header_bg_color)};
        }}

        header[data-testid="stHeader"] {{
            background-color: rgb(var(--color-header-bg));
        }}

        section[data-testid="stSidebar"] {{
            background-color: rgb(var(--color-primary));
        }}

        section[data-testid="stSidebar"] * {{
            color: #ffffff;
        }}

        .stButton > button[kind="primary"] {{
            background-color: rgb(var(--color-accent));
            border-color: rgb(var(--color-accent));
        }}
    </style>
    """, unsafe_allow_html=True)


def update_chart_layout(fig):
    fig.update_layout(
        font=dict(size=13),
        margin=dict(l=20, r=20, t=50, b=20),
        paper_bgcolor="rgba(0,0,0,0)",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def money(value: float) -> str:
    """Brazilian currency formatting: 1234.5 -> 'R$ 1.234,50'."""
    formatted = f"{value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {formatted}"
