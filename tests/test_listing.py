"""Tests for list filtering and aggregate statistics."""

import pytest

from factories import client_row, project_row
from solarquote.listing import (
    client_stats,
    dashboard_stats,
    filter_clients,
    filter_projects,
    filter_projects_for_quote,
    project_stats,
)
from solarquote.models import Client, Project, Quote


@pytest.fixture
def clients():
    return [
        Client.from_row(client_row()),
        Client.from_row(
            client_row(
                id="c2",
                first_name="Paul",
                last_name="Martin",
                email="paul@martin.fr",
                city="Bordeaux",
                pdl="12345678901234",
            )
        ),
    ]


@pytest.fixture
def projects(clients, simulated_row):
    return [
        Project.from_row(
            project_row(
                status="completed",
                simulation_results=simulated_row,
                client=client_row(),
            )
        ),
        Project.from_row(
            project_row(
                id="p2",
                client_id="c2",
                name="Hangar agricole",
                status="pending",
                estimated_production=3000,
                estimated_savings=600,
                client=client_row(
                    id="c2",
                    first_name="Paul",
                    last_name="Martin",
                    email="paul@martin.fr",
                    city="Bordeaux",
                ),
            )
        ),
        Project.from_row(project_row(id="p3", name="Garage", status="in_progress")),
    ]


class TestFilterClients:
    def test_empty_term_returns_all(self, clients):
        assert filter_clients(clients, "  ") == clients

    def test_matches_case_insensitively(self, clients):
        assert [c.id for c in filter_clients(clients, "BORDEAUX")] == ["c2"]
        assert [c.id for c in filter_clients(clients, "dupont")] == ["c1"]

    def test_matches_email(self, clients):
        assert [c.id for c in filter_clients(clients, "paul@")] == ["c2"]

    def test_no_match(self, clients):
        assert filter_clients(clients, "zzz") == []


class TestFilterProjects:
    def test_by_client_name(self, projects):
        assert [p.id for p in filter_projects(projects, "marie dupont")] == ["p1"]

    def test_by_status(self, projects):
        assert [p.id for p in filter_projects(projects, status="pending")] == ["p2"]

    def test_term_and_status_combine(self, projects):
        assert filter_projects(projects, "hangar", "completed") == []

    def test_project_without_client(self, projects):
        assert [p.id for p in filter_projects(projects, "garage")] == ["p3"]

    def test_quote_picker_searches_client_email(self, projects):
        found = filter_projects_for_quote(projects, "paul@martin")
        assert [p.id for p in found] == ["p2"]


def test_project_stats(projects):
    stats = project_stats(projects)
    assert stats["total"] == 3
    assert stats["completed"] == 1
    assert stats["in_progress"] == 1
    assert stats["pending"] == 1
    assert stats["total_production"] == pytest.approx(9659.26 + 3000)
    assert stats["total_savings"] == pytest.approx(1931.85 + 600)


def test_client_stats(clients):
    assert client_stats(clients, clients[:1]) == {"total": 2, "with_pdl": 1, "shown": 1}


class TestDashboard:
    def test_only_simulated_projects_count(self, projects, clients):
        quotes = [
            Quote(id="q1", user_id="u1", project_id="p1", client_id="c1", status="accepted"),
            Quote(id="q2", user_id="u1", project_id="p1", client_id="c1", status="sent"),
            Quote(id="q3", user_id="u1", project_id="p2", client_id="c2", status="rejected"),
            Quote(id="q4", user_id="u1", project_id="p2", client_id="c2", status="accepted"),
        ]
        stats = dashboard_stats(projects, clients, quotes)
        assert stats.total_projects == 3
        assert stats.total_clients == 2
        assert stats.total_quotes == 4
        assert stats.total_production == pytest.approx(9659.26)
        assert stats.total_savings == pytest.approx(1931.85)
        assert stats.conversion_rate == pytest.approx(50.0)

    def test_no_quotes(self):
        stats = dashboard_stats([], [], [])
        assert stats.conversion_rate == 0.0
        assert stats.total_production == 0
