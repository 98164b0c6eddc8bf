"""
Terroir - climate and soil explorer.
A Streamlit app that matches terroir conditions to wine regions and grapes.
"""

import sys
from pathlib import Path

import streamlit as st

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from terroir import TerroirInput, load_default_catalog
from terroir.charts import flavor_radar_chart, score_bar_chart
from terroir.constants import InputRanges, SoilType, UnitSystem
from terroir.error_handling import CatalogError
from terroir.highlights import build_map_highlights
from terroir.simulation import TerroirSimulator
from terroir.tables import grapes_frame, profile_frame, regions_frame, scored_frame
from terroir.units import to_display, unit_labels

# Page configuration
st.set_page_config(
    page_title="Terroir - Climate & Soil Explorer",
    page_icon="🍇",
    layout="wide",
)


@st.cache_resource
def get_simulator() -> TerroirSimulator:
    """Catalog is loaded once per process; a broken catalog stops the app."""
    return TerroirSimulator(load_default_catalog())


try:
    simulator = get_simulator()
except CatalogError as e:
    st.error(f"⚠️ Wine catalog failed to load: {e}")
    st.stop()

defaults = TerroirInput.default()

st.title("🍇 Terroir Simulator")
st.caption("Adjust climate and soil parameters to discover matching wine regions and grape varieties.")

# TERROIR CONTROLS
with st.sidebar:
    st.header("🌱 Terroir Controls")
    use_imperial = st.toggle("Imperial units", value=False)
    temperature = st.slider(
        "Temperature (°C, growing season avg)",
        min_value=InputRanges.MIN_TEMPERATURE,
        max_value=InputRanges.MAX_TEMPERATURE,
        value=int(defaults.temperature),
        step=InputRanges.TEMPERATURE_STEP,
    )
    rainfall = st.slider(
        "Rainfall (mm/year)",
        min_value=InputRanges.MIN_RAINFALL,
        max_value=InputRanges.MAX_RAINFALL,
        value=int(defaults.rainfall),
        step=InputRanges.RAINFALL_STEP,
    )
    altitude = st.slider(
        "Altitude (m)",
        min_value=InputRanges.MIN_ALTITUDE,
        max_value=InputRanges.MAX_ALTITUDE,
        value=int(defaults.altitude),
        step=InputRanges.ALTITUDE_STEP,
    )
    soil_choices = [soil.value for soil in SoilType]
    soil_type = st.selectbox("Soil type", soil_choices, index=soil_choices.index(defaults.soil_type))

terroir = TerroirInput(temperature=temperature, rainfall=rainfall, altitude=altitude, soil_type=soil_type)
result = simulator.simulate(terroir)

system = UnitSystem.IMPERIAL if use_imperial else UnitSystem.METRIC
display = to_display(terroir, system)
labels = unit_labels(system)

metric_cols = st.columns(4)
for col, name in zip(metric_cols, labels):
    with col:
        st.metric(name.title(), f"{display[name]}{labels[name]}")
with metric_cols[3]:
    st.metric("Soil", soil_type)

st.markdown("---")

# RESULTS
regions_col, grapes_col = st.columns(2)
with regions_col:
    st.plotly_chart(score_bar_chart(result.matched_regions, "Regions That Fit This Terroir"), use_container_width=True)
    for scored in result.matched_regions:
        region = scored.entity
        with st.expander(f"{region.name} · {region.country} · {scored.score:.0f}%"):
            st.caption(region.appellation)
            st.write(region.description)

with grapes_col:
    st.plotly_chart(score_bar_chart(result.matched_grapes, "Grapes That Thrive Here"), use_container_width=True)
    st.dataframe(scored_frame(result.matched_grapes), hide_index=True)

st.markdown("---")

profile_col, map_col = st.columns(2)
with profile_col:
    st.plotly_chart(flavor_radar_chart(result.derived_flavor_profile), use_container_width=True)
    st.dataframe(profile_frame(result.derived_flavor_profile), hide_index=True)

with map_col:
    st.markdown("### 🗺️ Matching Wine Regions")
    highlights = build_map_highlights(result.matched_regions)
    st.caption(f"Countries: {', '.join(highlights.countries) or '-'}")
    st.caption(f"US states: {', '.join(highlights.states) or '-'}")
    for code, names in {**highlights.country_regions, **highlights.state_regions}.items():
        st.markdown(f"**{code}**: {', '.join(names)}")

st.markdown("---")

# CATALOG BROWSER
with st.expander("📚 Browse the full catalog"):
    regions_tab, grapes_tab = st.tabs(["Regions", "Grapes"])
    with regions_tab:
        st.dataframe(regions_frame(simulator.catalog.regions), hide_index=True)
    with grapes_tab:
        st.dataframe(grapes_frame(simulator.catalog.grapes), hide_index=True)
