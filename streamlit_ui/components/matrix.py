"""
components/matrix.py — Legends and the 3x3 prioritization grid.
"""

import streamlit as st

from opportunity_matrix.models.grid import GridView
from session import on_select

CELL_BADGES = {
    "green": "🟩",
    "blue": "🟦",
    "purple": "🟪",
    "teal": "🟢",
    "orange": "🟧",
    "red": "🟥",
    "gray-light": "⬜",
    "gray": "🔘",
    "gray-dark": "⬛",
}

RISK_TEXT_COLORS = {
    "High": "red",
    "Medium": "orange",
    "Low": "green",
}

LEVELS = ["High", "Medium", "Low"]

LEGENDS = {
    "Impact": [
        ("High Impact", "Significant contribution to strategic objectives."),
        ("Medium Impact", "Noticeable but not transformative benefits."),
        ("Low Impact", "Minor improvements, less alignment with strategy."),
    ],
    "Feasibility": [
        ("High Feasibility", "Data ready, expertise exists, low complexity."),
        ("Medium Feasibility", "Some data/effort needed, moderate complexity."),
        ("Low Feasibility", "Significant data gaps, high complexity, rare expertise."),
    ],
    "Risk": [
        (":green[Low Risk]", "Minimal potential downsides."),
        (":orange[Medium Risk]", "Manageable risks, require attention."),
        (":red[High Risk]", "Significant potential downsides, careful consideration."),
    ],
}


def risk_badge(category: str, score: int) -> str:
    color = RISK_TEXT_COLORS.get(category, "gray")
    return f":{color}[**{category}** ({score})]"


def render_legends() -> None:
    cols = st.columns(len(LEGENDS))
    for col, (title, entries) in zip(cols, LEGENDS.items()):
        with col.container(border=True):
            st.markdown(f"**{title} Legend**")
            st.markdown("\n".join(f"- **{name}:** {text}" for name, text in entries))


def render_grid(grid: GridView) -> None:
    # Column headers: feasibility, High on the left
    header = st.columns([1, 4, 4, 4])
    header[0].markdown("**Impact ↓ / Feasibility →**")
    for col, level in zip(header[1:], LEVELS):
        col.markdown(f"**{level}**")

    for level, row in zip(LEVELS, grid.rows()):
        cols = st.columns([1, 4, 4, 4])
        cols[0].markdown(f"**{level}**")
        for col, cell in zip(cols[1:], row):
            with col.container(border=True, height=320):
                st.markdown(f"{CELL_BADGES.get(cell.color, '')} **{cell.label}**")
                if cell.is_empty:
                    st.caption(f"_{cell.placeholder}_")
                    continue
                for item in cell.items:
                    st.button(
                        item.name, key=f"op_{item.id}",
                        on_click=on_select, args=(item.id,),
                        width="stretch",
                    )
                    st.caption(f"Risk: {risk_badge(item.risk_category.value, item.overall_risk)}")
