"""Dark felt color scheme, CSS overrides, and Plotly layout for the simulator page."""

import streamlit as st

COLORS = {
    "bg_primary": "#1a1a2e",
    "bg_secondary": "#16213e",
    "bg_gradient_end": "#0f3460",
    "card_bg": "#1b2838",
    "card_border": "#2a3f5f",
    "accent_green": "#2ecc71",
    "accent_gold": "#f1c40f",
    "accent_red": "#e74c3c",
    "accent_blue": "#3498db",
    "text_primary": "#e8e8e8",
    "text_secondary": "#a0a0b0",
    "text_muted": "#6c7a89",
    "button_primary": "#2ecc71",
    "button_primary_hover": "#27ae60",
}

# Win / tie / loss / equity bar colors
OUTCOME_COLORS = [
    COLORS["accent_green"],
    COLORS["accent_blue"],
    COLORS["accent_red"],
    COLORS["accent_gold"],
]

PLOTLY_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(color=COLORS["text_primary"], family="Inter, sans-serif"),
    xaxis=dict(gridcolor="#2a3f5f", zerolinecolor="#2a3f5f"),
    yaxis=dict(gridcolor="#2a3f5f", zerolinecolor="#2a3f5f", range=[0, 100]),
    margin=dict(l=40, r=20, t=40, b=40),
)

THEME_CSS = f"""
<style>
.stApp {{
    background: linear-gradient(135deg, {COLORS['bg_primary']} 0%, {COLORS['bg_secondary']} 50%, {COLORS['bg_gradient_end']} 100%);
    color: {COLORS['text_primary']};
}}
[data-testid="stMetric"] {{
    background: {COLORS['card_bg']};
    border: 1px solid {COLORS['card_border']};
    border-radius: 12px;
    padding: 16px;
}}
.stButton > button[kind="primary"] {{
    background: {COLORS['button_primary']} !important;
    border: none;
    color: #fff !important;
}}
.stButton > button[kind="primary"]:hover {{
    background: {COLORS['button_primary_hover']} !important;
}}
.stSelectbox > div > div {{
    background: {COLORS['card_bg']};
    border-color: {COLORS['card_border']};
    color: {COLORS['text_primary']};
}}
.stCaption {{
    color: {COLORS['text_muted']} !important;
}}
</style>
"""


def inject_theme():
    """Inject the theme CSS into the current page."""
    st.markdown(THEME_CSS, unsafe_allow_html=True)
