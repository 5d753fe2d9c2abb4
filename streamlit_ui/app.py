"""
AI Opportunities Prioritization Matrix — Dashboard
Run from project root: streamlit run streamlit_ui/app.py
"""
import sys
from pathlib import Path

# Ensure project root is on path when run without an installed package
_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from opportunity_matrix.config import get_settings
from opportunity_matrix.core.logging import configure_logging

settings = get_settings()
configure_logging(level=settings.LOG_LEVEL, fmt=settings.LOG_FORMAT)

st.set_page_config(
    page_title=settings.APP_NAME,
    page_icon="🧭",
    layout="wide",
)

from components.charts import impact_feasibility_scatter, risk_distribution_bar
from components.detail import show_detail
from components.form import render_form
from components.matrix import render_grid, render_legends
from session import get_controller, on_toggle_form

controller = get_controller()

st.title("🧭 AI Opportunities Prioritization Matrix")
st.caption(
    "Candidate AI integrations placed by estimated business impact and feasibility, "
    "with a derived risk rating for each."
)

render_legends()
st.divider()

st.button(
    "✖️ Hide Form" if controller.form.visible else "➕ Add Opportunity",
    on_click=on_toggle_form, key="form_toggle",
)
if controller.form.visible:
    render_form()

tab_matrix, tab_chart, tab_table = st.tabs(["🗂️ Matrix", "📈 Chart", "📋 Table"])

with tab_matrix:
    render_grid(controller.grid())

df = controller.presenter.to_dataframe(controller.repository)

with tab_chart:
    col1, col2 = st.columns([2, 1])
    with col1:
        st.plotly_chart(impact_feasibility_scatter(df), width="stretch", key="chart_scatter")
    with col2:
        st.plotly_chart(risk_distribution_bar(df), width="stretch", key="chart_risk")

with tab_table:
    st.dataframe(df, width="stretch", hide_index=True)
    st.download_button(
        "📥 Download CSV", df.to_csv(index=False).encode("utf-8"),
        "ai_opportunities.csv", mime="text/csv",
    )

st.caption(f"{settings.APP_NAME} v{settings.APP_VERSION} · {len(controller.repository)} opportunities")

selected = controller.selected
if selected is not None:
    show_detail(selected)
