"""Tests for row conversion at the store boundary."""

from factories import client_row, project_row
from solarquote.models import (
    PanelPosition,
    PanelsConfig,
    Project,
    Quote,
    RoofData,
    SimulationResults,
    SiteLocation,
)


def test_client_full_name():
    client = Project.from_row(project_row(client=client_row())).client
    assert client.full_name == "Marie Dupont"


def test_null_columns_become_defaults():
    project = Project.from_row(project_row())
    assert project.roof_data == RoofData()
    assert project.panels_config == PanelsConfig()
    assert project.simulation_results is None
    assert project.client is None
    assert project.annual_production == 0.0


def test_list_embed_is_unwrapped():
    project = Project.from_row(project_row(client=[client_row(id="c7")]))
    assert project.client.id == "c7"
    assert Project.from_row(project_row(client=[])).client is None


def test_simulation_results_preferred_over_estimates(simulated_row):
    project = Project.from_row(
        project_row(simulation_results=simulated_row, estimated_production=1)
    )
    assert project.annual_production == 9659.26
    assert project.annual_savings == 1931.85


def test_estimates_used_without_simulation():
    project = Project.from_row(
        project_row(estimated_production="4200", estimated_savings=840)
    )
    assert project.annual_production == 4200.0
    assert project.annual_savings == 840.0


def test_simulation_results_row_round_trip(simulated_row):
    results = SimulationResults.from_row(simulated_row)
    assert results.to_row() == simulated_row
    assert SimulationResults.from_row({}) is None


def test_roof_coordinates():
    roof = RoofData.from_row(
        {"address": "Lyon", "coordinates": {"lat": 45.76, "lng": 4.84}, "tilt": 35}
    )
    assert roof.location == SiteLocation(45.76, 4.84)
    assert roof.orientation == 180.0
    assert roof.tilt == 35.0
    assert roof.to_row()["coordinates"] == {"lat": 45.76, "lng": 4.84}
    assert RoofData().location is None
    assert RoofData().to_row()["coordinates"] is None


def test_panels_config_positions():
    panels = PanelsConfig.from_row(
        {
            "panel_count": 2,
            "panel_wattage": 0.375,
            "panel_positions": [{"x": 0, "y": 0}, {"x": 1.05, "y": 0, "rotation": 90}],
        }
    )
    assert panels.panel_positions[1] == PanelPosition(1.05, 0.0, 90.0)
    assert panels.array.panel_wattage == 0.375
    assert panels.to_row()["panel_positions"][0] == {"x": 0.0, "y": 0.0, "rotation": 0.0}


def test_quote_embeds_and_items():
    quote = Quote.from_row(
        {
            "id": "q1",
            "user_id": "u1",
            "project_id": "p1",
            "client_id": "c1",
            "quote_number": "DEV-2026-0001",
            "total_amount": "4850.50",
            "items": [{"description": "Onduleur", "quantity": 1, "unit_price": 1250.5}],
            "project": project_row(),
            "client": client_row(),
        }
    )
    assert quote.total_amount == 4850.5
    assert quote.items[0].total == 1250.5
    assert quote.project.name == "Toiture sud"
    assert quote.client.city == "Lyon"
    assert quote.status == "draft"


def test_equator_coordinates_are_kept():
    default = SiteLocation(45.0, 0.0)
    assert RoofData(lat=0.0, lng=0.0).location_or(default) == SiteLocation(0.0, 0.0)
    assert RoofData(lat=-12.5).location_or(default) == SiteLocation(-12.5, 0.0)
    assert RoofData().location_or(default) == default
