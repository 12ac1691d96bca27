"""List filtering and aggregate statistics for the list and dashboard pages."""

from collections.abc import Sequence

from solarquote.models import Client, DashboardStats, Project, Quote


def _contains(haystack: str, needle: str) -> bool:
    return needle in (haystack or "").lower()


def filter_clients(clients: Sequence[Client], term: str) -> list[Client]:
    """Case-insensitive search on first name, last name, email, or city."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(clients)
    return [
        c
        for c in clients
        if _contains(c.first_name, needle)
        or _contains(c.last_name, needle)
        or _contains(c.email, needle)
        or _contains(c.city, needle)
    ]


def filter_projects(
    projects: Sequence[Project], term: str = "", status: str = ""
) -> list[Project]:
    """Search on project name, client full name, or client city, then by status."""
    needle = (term or "").strip().lower()
    result = list(projects)
    if needle:
        result = [
            p
            for p in result
            if _contains(p.name, needle)
            or (p.client is not None and _contains(p.client.full_name, needle))
            or (p.client is not None and _contains(p.client.city, needle))
        ]
    if status:
        result = [p for p in result if p.status == status]
    return result


def filter_projects_for_quote(projects: Sequence[Project], term: str) -> list[Project]:
    """Project picker search: name, client name, client email, client city."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(projects)
    matches = []
    for p in projects:
        client = p.client
        if _contains(p.name, needle) or (
            client is not None
            and (
                _contains(client.full_name, needle)
                or _contains(client.email, needle)
                or _contains(client.city, needle)
            )
        ):
            matches.append(p)
    return matches


def project_stats(projects: Sequence[Project]) -> dict[str, float]:
    return {
        "total": len(projects),
        "completed": sum(1 for p in projects if p.status == "completed"),
        "in_progress": sum(1 for p in projects if p.status == "in_progress"),
        "pending": sum(1 for p in projects if p.status == "pending"),
        "total_production": sum(p.annual_production for p in projects),
        "total_savings": sum(p.annual_savings for p in projects),
    }


def client_stats(clients: Sequence[Client], shown: Sequence[Client]) -> dict[str, int]:
    return {
        "total": len(clients),
        "with_pdl": sum(1 for c in clients if c.pdl),
        "shown": len(shown),
    }


def dashboard_stats(
    projects: Sequence[Project], clients: Sequence[Client], quotes: Sequence[Quote]
) -> DashboardStats:
    """Totals across the user's rows. Only simulated projects count toward production."""
    total_production = sum(
        p.simulation_results.annual_production
        for p in projects
        if p.simulation_results is not None
    )
    total_savings = sum(
        p.simulation_results.annual_savings
        for p in projects
        if p.simulation_results is not None
    )
    accepted = sum(1 for q in quotes if q.status == "accepted")
    conversion_rate = accepted / len(quotes) * 100 if quotes else 0.0
    return DashboardStats(
        total_projects=len(projects),
        total_clients=len(clients),
        total_quotes=len(quotes),
        total_production=total_production,
        total_savings=total_savings,
        conversion_rate=conversion_rate,
    )
