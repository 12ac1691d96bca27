import plotly.graph_objects as go
import pytest

from solarquote.compute import project_savings, savings_schedule
from solarquote.models import PanelPosition, PanelsConfig, RoofData
from solarquote.renderers.plotly_savings import render_savings_chart
from solarquote.renderers.roof_svg import render_roof_svg


class TestSavingsChart:
    def test_yearly_and_cumulative_traces(self):
        projection = project_savings(9659.26)
        fig = render_savings_chart(projection)

        assert isinstance(fig, go.Figure)
        bars, line = fig.data
        assert len(bars.x) == 20
        assert line.y[-1] == pytest.approx(projection.twenty_year_savings)
        assert fig.layout.xaxis.title.text == "Année"

    def test_series_follow_the_savings_schedule(self):
        projection = project_savings(9659.26)
        bars, line = render_savings_chart(projection, years=10).data
        assert list(line.y) == pytest.approx(savings_schedule(projection, 10))
        assert list(bars.y) == pytest.approx([projection.annual_savings * 0.9] * 10)

    def test_payback_marker_sits_on_the_cumulative_line(self):
        projection = project_savings(9659.26)
        fig = render_savings_chart(projection, payback_period=6.2)
        assert len(fig.layout.shapes) == 1
        # Cost of 6.2 years at full savings, recovered at 90% of them
        assert fig.layout.shapes[0].x0 == pytest.approx(6.2 / 0.9)

    def test_payback_beyond_horizon_not_drawn(self):
        fig = render_savings_chart(project_savings(100), payback_period=60, lang="en")
        assert len(fig.layout.shapes) == 0
        assert fig.layout.xaxis.title.text == "Year"


class TestRoofSvg:
    def test_auto_layout_draws_every_panel(self):
        svg = render_roof_svg(RoofData(), PanelsConfig(panel_count=12))
        assert svg.startswith("<svg")
        assert svg.count("<rect") == 12

    def test_stored_positions_and_rotation(self):
        panels = PanelsConfig(
            panel_count=2,
            panel_positions=(PanelPosition(0, 0), PanelPosition(2, 0, 90)),
        )
        svg = render_roof_svg(RoofData(orientation=90), panels)
        assert svg.count("<rect") == 2
        assert "rotate(90.0" in svg

    def test_title_is_escaped(self):
        svg = render_roof_svg(RoofData(), PanelsConfig(), title="<b>Toit & garage</b>")
        assert "&lt;b&gt;Toit &amp; garage&lt;/b&gt;" in svg
        assert "<rect" not in svg
