"""Tests for pandas tables and plotly charts built from results."""

import plotly.graph_objects as go

from terroir.charts import flavor_radar_chart, score_bar_chart
from terroir.schema import FlavorProfile, TerroirInput
from terroir.simulation import TerroirSimulator
from terroir.tables import grapes_frame, profile_frame, regions_frame, scored_frame


class TestTables:
    """Test DataFrame views."""

    def test_regions_frame(self, small_catalog):
        df = regions_frame(small_catalog.regions)
        assert list(df["id"]) == ["cool", "mild", "warm"]
        assert df.loc[0, "temperature_mid"] == 11.0
        assert df.loc[2, "soils"] == "Granite"

    def test_grapes_frame_includes_flavor(self, small_catalog):
        df = grapes_frame(small_catalog.grapes)
        assert df.loc[0, "color"] == "white"
        assert df.loc[0, "acidity"] == 5.0
        assert "earthiness" in df.columns

    def test_scored_frame(self, small_catalog):
        result = TerroirSimulator(small_catalog).simulate(TerroirInput.default())
        df = scored_frame(result.matched_regions)
        assert list(df.columns) == ["rank", "id", "name", "score"]
        assert list(df["rank"]) == [1, 2, 3]
        assert df["score"].is_monotonic_decreasing

    def test_scored_frame_empty(self):
        df = scored_frame([])
        assert df.empty
        assert list(df.columns) == ["rank", "id", "name", "score"]

    def test_profile_frame(self):
        df = profile_frame(FlavorProfile(acidity=5, tannin=1, body=2, fruitiness=4, earthiness=3))
        assert list(df["attribute"]) == ["Acidity", "Tannin", "Body", "Fruitiness", "Earthiness"]
        assert list(df["value"]) == [5.0, 1.0, 2.0, 4.0, 3.0]


class TestCharts:
    """Test plotly figures."""

    def test_radar_chart_closed_polygon(self):
        fig = flavor_radar_chart(FlavorProfile.neutral())
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        trace = fig.data[0]
        assert len(trace.r) == 6
        assert trace.r[0] == trace.r[-1]
        assert list(fig.layout.polar.radialaxis.range) == [0, 5]

    def test_score_bar_chart_best_on_top(self, small_catalog):
        result = TerroirSimulator(small_catalog).simulate(TerroirInput.default())
        fig = score_bar_chart(result.matched_grapes, "Grapes")
        trace = fig.data[0]
        assert trace.y[-1] == result.matched_grapes[0].entity.name
        assert trace.x[-1] == result.matched_grapes[0].score
