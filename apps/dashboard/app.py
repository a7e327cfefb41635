from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from h2calc.display import CURVE_SERIES, format_production_result, format_reverse_result
from h2calc.economics.constants import DEFAULT_CONSTANTS, EnergySource
from h2calc.economics.curve import curve_to_frame, generate_curve
from h2calc.economics.production import ProductionInputs, compute_production
from h2calc.economics.reverse import ReverseInputs, compute_reverse
from h2calc.errors import CalculatorError

st.set_page_config(page_title="Hydrogen Production Calculator", layout="wide")

st.markdown(
    """
<style>
.stApp {
    background-color: #f4f8fb;
    color: #14212b;
    font-family: "Inter", "Helvetica Neue", sans-serif;
}
[data-testid="stSidebar"] {
    background-color: #e6eef4;
    border-right: 1px solid #c7d6e2;
}
[data-testid="stMetric"] {
    background-color: #ffffff;
    border-left: 4px solid #1b9aaa;
    border-radius: 6px;
    padding: 8px 14px;
}
h1, h2, h3 {
    color: #0f4c5c;
}
</style>
""",
    unsafe_allow_html=True,
)

PLOT_TEMPLATE = "plotly_white"
SERIES_COLORS = {
    "energy_required_kwh": "#1b9aaa",
    "water_required_m3": "#5c9ead",
    "total_cost": "#e07a1f",
    "cost_per_kg": "#c0392b",
}
PRODUCTION_DEFAULTS = ProductionInputs()
REVERSE_DEFAULTS = ReverseInputs()


def _render_report(report: dict[str, str]) -> None:
    columns = st.columns(len(report))
    for column, (label, value) in zip(columns, report.items(), strict=True):
        column.metric(label, value)


def _curve_figure(curve_df: pd.DataFrame) -> go.Figure:
    figure = go.Figure()
    for column, label, side in CURVE_SERIES:
        figure.add_trace(
            go.Scatter(
                x=curve_df["production_kg_per_day"],
                y=curve_df[column],
                mode="lines+markers",
                name=label,
                line=dict(color=SERIES_COLORS[column], width=2.2),
                yaxis="y2" if side == "right" else "y",
            )
        )
    figure.update_layout(
        template=PLOT_TEMPLATE,
        title="Production Analysis Graph",
        xaxis_title="Production (kg/day)",
        yaxis=dict(title="Energy (kWh) / Cost ($)"),
        yaxis2=dict(title="Water (m³)", overlaying="y", side="right"),
    )
    return figure


with st.sidebar:
    st.header("Plant Inputs")
    source_options = [source.value for source in EnergySource]
    energy_source = st.selectbox(
        "Energy Source",
        options=source_options,
        index=source_options.index(EnergySource.parse(PRODUCTION_DEFAULTS.energy_source).value),
        format_func=str.title,
    )
    energy_cost = st.number_input(
        "Energy Cost ($/kWh)",
        value=float(PRODUCTION_DEFAULTS.energy_cost_per_kwh),
        step=0.01,
    )
    water_cost = st.number_input(
        "Water Cost ($/m³)", value=float(PRODUCTION_DEFAULTS.water_cost_per_m3), step=0.1
    )
    production_capacity = st.number_input(
        "Production Capacity (kg/day)",
        value=float(PRODUCTION_DEFAULTS.production_kg_per_day),
        step=10.0,
    )
    temperature = st.number_input(
        "Temperature (°C)", value=float(PRODUCTION_DEFAULTS.temperature_c), step=1.0
    )
    pressure = st.number_input(
        "Pressure (atm)", value=float(PRODUCTION_DEFAULTS.pressure_atm), step=1.0
    )

st.title("Hydrogen Production Calculator")

production_inputs = ProductionInputs(
    energy_source=energy_source,
    energy_cost_per_kwh=float(energy_cost),
    water_cost_per_m3=float(water_cost),
    production_kg_per_day=float(production_capacity),
    temperature_c=float(temperature),
    pressure_atm=float(pressure),
)

tab_production, tab_reverse, tab_graph = st.tabs(
    ["Production Analysis", "Reverse Calculation", "Production Graph"]
)

with tab_production:
    st.subheader("Production Analysis")
    if st.button("Calculate", type="primary", key="production_calculate"):
        try:
            production_result = compute_production(production_inputs, DEFAULT_CONSTANTS)
        except CalculatorError as exc:
            st.error(f"Production analysis failed: {exc}")
        else:
            _render_report(format_production_result(production_result))

with tab_reverse:
    st.subheader("Reverse Calculation")
    reverse_cols = st.columns(3)
    target_production = reverse_cols[0].number_input(
        "Target Production (kg/day)",
        value=float(REVERSE_DEFAULTS.target_production_kg_per_day),
        step=10.0,
    )
    target_efficiency = reverse_cols[1].number_input(
        "Target Efficiency (%)",
        value=float(REVERSE_DEFAULTS.target_efficiency_percent),
        step=1.0,
    )
    target_cost = reverse_cols[2].number_input(
        "Target Cost ($/kg)", value=float(REVERSE_DEFAULTS.target_cost_per_kg), step=0.1
    )
    if st.button("Calculate", type="primary", key="reverse_calculate"):
        reverse_inputs = ReverseInputs(
            target_production_kg_per_day=float(target_production),
            target_efficiency_percent=float(target_efficiency),
            target_cost_per_kg=float(target_cost),
        )
        try:
            reverse_result = compute_reverse(reverse_inputs, DEFAULT_CONSTANTS)
        except CalculatorError as exc:
            st.error(f"Reverse calculation failed: {exc}")
        else:
            _render_report(format_reverse_result(reverse_result))

with tab_graph:
    try:
        curve_df = curve_to_frame(generate_curve(production_inputs, DEFAULT_CONSTANTS))
    except CalculatorError as exc:
        st.error(f"Curve generation failed: {exc}")
    else:
        st.plotly_chart(_curve_figure(curve_df), width="stretch")
        st.dataframe(curve_df, width="stretch")
