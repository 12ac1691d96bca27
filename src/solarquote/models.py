"""Data model definitions — explicit boundaries between input, compute, store, and render layers."""

from dataclasses import dataclass, field
from typing import Any

PROJECT_STATUSES = ("draft", "pending", "in_progress", "completed", "cancelled")
QUOTE_STATUSES = ("draft", "sent", "accepted", "rejected")


@dataclass(frozen=True)
class PanelArrayConfig:
    """Installed or simulated panel array."""

    panel_count: int  # Number of panels (>= 0)
    panel_wattage: float  # Per-panel rating, in the unit the caller uses (kW-equivalent in the UI)


@dataclass(frozen=True)
class SiteOrientation:
    """Installation geometry."""

    orientation: float  # Compass heading (degrees, 0/360=N, 180=S)
    tilt: float  # Inclination from horizontal (degrees, 0-90)


@dataclass(frozen=True)
class SiteLocation:
    """Site coordinates. Longitude is carried but unused by the estimator."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)


@dataclass(frozen=True)
class YieldEstimate:
    annual_production: float  # kWh/year, may be negative for off-axis inputs


@dataclass(frozen=True)
class SavingsProjection:
    annual_savings: float
    monthly_savings: float
    twenty_year_savings: float


@dataclass(frozen=True)
class SimulationInput:
    """Everything needed to simulate one project."""

    array: PanelArrayConfig
    orientation: SiteOrientation
    location: SiteLocation
    electricity_price: float = 0.20  # EUR/kWh
    installation_cost: float | None = None  # EUR, enables payback period


@dataclass(frozen=True)
class SimulationResults:
    """Stored shape of projects.simulation_results."""

    annual_production: float
    annual_savings: float
    monthly_savings: float
    twenty_year_savings: float
    payback_period: float | None = None  # Years

    @classmethod
    def from_row(cls, row: dict[str, Any] | None) -> "SimulationResults | None":
        if not row:
            return None
        payback = row.get("payback_period")
        return cls(
            annual_production=float(row.get("annual_production") or 0),
            annual_savings=float(row.get("annual_savings") or 0),
            monthly_savings=float(row.get("monthly_savings") or 0),
            twenty_year_savings=float(row.get("twenty_year_savings") or 0),
            payback_period=float(payback) if payback is not None else None,
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "annual_production": self.annual_production,
            "annual_savings": self.annual_savings,
            "monthly_savings": self.monthly_savings,
            "twenty_year_savings": self.twenty_year_savings,
            "payback_period": self.payback_period,
        }


# --- Stored rows ---


@dataclass(frozen=True)
class User:
    id: str
    email: str
    full_name: str = ""


@dataclass(frozen=True)
class Client:
    """A prospect. Row of the clients table."""

    id: str
    user_id: str
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""
    pdl: str = ""  # Delivery point identifier (14 digits), optional
    created_at: str = ""
    updated_at: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Client":
        return cls(
            id=str(row.get("id", "")),
            user_id=str(row.get("user_id", "")),
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            email=row.get("email") or "",
            phone=row.get("phone") or "",
            address=row.get("address") or "",
            city=row.get("city") or "",
            postal_code=row.get("postal_code") or "",
            pdl=row.get("pdl") or "",
            created_at=row.get("created_at") or "",
            updated_at=row.get("updated_at") or "",
        )


@dataclass(frozen=True)
class RoofData:
    address: str = ""
    lat: float | None = None
    lng: float | None = None
    orientation: float = 180.0
    tilt: float = 30.0
    area: float = 0.0  # m²
    obstacles: tuple[dict[str, Any], ...] = ()

    @property
    def location(self) -> SiteLocation | None:
        if self.lat is None or self.lng is None:
            return None
        return SiteLocation(lat=self.lat, lng=self.lng)

    def location_or(self, default: SiteLocation) -> SiteLocation:
        """Stored coordinates, each missing one taken from default."""
        return SiteLocation(
            lat=self.lat if self.lat is not None else default.lat,
            lng=self.lng if self.lng is not None else default.lng,
        )

    @classmethod
    def from_row(cls, row: dict[str, Any] | None) -> "RoofData":
        row = row or {}
        coords = row.get("coordinates") or {}
        lat = coords.get("lat")
        lng = coords.get("lng")
        return cls(
            address=row.get("address") or "",
            lat=float(lat) if lat is not None else None,
            lng=float(lng) if lng is not None else None,
            orientation=float(row.get("orientation", 180.0)),
            tilt=float(row.get("tilt", 30.0)),
            area=float(row.get("area") or 0.0),
            obstacles=tuple(row.get("obstacles") or ()),
        )

    def to_row(self) -> dict[str, Any]:
        coordinates = (
            {"lat": self.lat, "lng": self.lng}
            if self.lat is not None and self.lng is not None
            else None
        )
        return {
            "address": self.address,
            "coordinates": coordinates,
            "orientation": self.orientation,
            "tilt": self.tilt,
            "area": self.area,
            "obstacles": list(self.obstacles),
        }


@dataclass(frozen=True)
class PanelPosition:
    x: float  # Metres from the roof's left edge
    y: float  # Metres from the roof's top edge
    rotation: float = 0.0  # Degrees


@dataclass(frozen=True)
class PanelsConfig:
    panel_count: int = 0
    panel_wattage: float = 0.4
    panel_positions: tuple[PanelPosition, ...] = ()

    @property
    def array(self) -> PanelArrayConfig:
        return PanelArrayConfig(
            panel_count=self.panel_count, panel_wattage=self.panel_wattage
        )

    @classmethod
    def from_row(cls, row: dict[str, Any] | None) -> "PanelsConfig":
        row = row or {}
        positions = tuple(
            PanelPosition(
                x=float(p.get("x", 0)),
                y=float(p.get("y", 0)),
                rotation=float(p.get("rotation", 0)),
            )
            for p in row.get("panel_positions") or ()
        )
        return cls(
            panel_count=int(row.get("panel_count") or 0),
            panel_wattage=float(row.get("panel_wattage", 0.4)),
            panel_positions=positions,
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "panel_count": self.panel_count,
            "panel_wattage": self.panel_wattage,
            "panel_positions": [
                {"x": p.x, "y": p.y, "rotation": p.rotation}
                for p in self.panel_positions
            ],
        }


@dataclass(frozen=True)
class Project:
    """A solar project attached to a client. Row of the projects table."""

    id: str
    user_id: str
    client_id: str
    name: str
    status: str = "draft"
    description: str = ""
    roof_data: RoofData = field(default_factory=RoofData)
    panels_config: PanelsConfig = field(default_factory=PanelsConfig)
    simulation_results: SimulationResults | None = None
    estimated_production: float | None = None  # kWh/year, manual estimate
    estimated_savings: float | None = None  # EUR/year, manual estimate
    created_at: str = ""
    updated_at: str = ""
    client: Client | None = None  # Embedded via client:clients(*)

    @property
    def annual_production(self) -> float:
        """Simulated production, falling back to the manual estimate."""
        if self.simulation_results is not None:
            return self.simulation_results.annual_production
        return self.estimated_production or 0.0

    @property
    def annual_savings(self) -> float:
        if self.simulation_results is not None:
            return self.simulation_results.annual_savings
        return self.estimated_savings or 0.0

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Project":
        client_row = row.get("client")
        # PostgREST may return a to-one embed as a single-element list
        if isinstance(client_row, list):
            client_row = client_row[0] if client_row else None
        production = row.get("estimated_production")
        savings = row.get("estimated_savings")
        return cls(
            id=str(row.get("id", "")),
            user_id=str(row.get("user_id", "")),
            client_id=str(row.get("client_id") or ""),
            name=row.get("name") or "",
            status=row.get("status") or "draft",
            description=row.get("description") or "",
            roof_data=RoofData.from_row(row.get("roof_data")),
            panels_config=PanelsConfig.from_row(row.get("panels_config")),
            simulation_results=SimulationResults.from_row(
                row.get("simulation_results")
            ),
            estimated_production=float(production) if production is not None else None,
            estimated_savings=float(savings) if savings is not None else None,
            created_at=row.get("created_at") or "",
            updated_at=row.get("updated_at") or "",
            client=Client.from_row(client_row) if client_row else None,
        )


@dataclass(frozen=True)
class QuoteItem:
    description: str
    quantity: float
    unit_price: float  # EUR

    @property
    def total(self) -> float:
        return round(self.quantity * self.unit_price, 2)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "QuoteItem":
        return cls(
            description=row.get("description") or "",
            quantity=float(row.get("quantity") or 0),
            unit_price=float(row.get("unit_price") or 0),
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total": self.total,
        }


@dataclass(frozen=True)
class Quote:
    """A quote issued for a project. Row of the quotes table."""

    id: str
    user_id: str
    project_id: str
    client_id: str
    quote_number: str = ""
    name: str = ""
    description: str = ""
    total_amount: float = 0.0
    status: str = "draft"
    valid_until: str = ""
    items: tuple[QuoteItem, ...] = ()
    pdf_url: str | None = None
    created_at: str = ""
    updated_at: str = ""
    project: Project | None = None
    client: Client | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Quote":
        project_row = row.get("project")
        client_row = row.get("client")
        if isinstance(project_row, list):
            project_row = project_row[0] if project_row else None
        if isinstance(client_row, list):
            client_row = client_row[0] if client_row else None
        return cls(
            id=str(row.get("id", "")),
            user_id=str(row.get("user_id", "")),
            project_id=str(row.get("project_id") or ""),
            client_id=str(row.get("client_id") or ""),
            quote_number=row.get("quote_number") or "",
            name=row.get("name") or "",
            description=row.get("description") or "",
            total_amount=float(row.get("total_amount") or 0),
            status=row.get("status") or "draft",
            valid_until=row.get("valid_until") or "",
            items=tuple(QuoteItem.from_row(i) for i in row.get("items") or ()),
            pdf_url=row.get("pdf_url"),
            created_at=row.get("created_at") or "",
            updated_at=row.get("updated_at") or "",
            project=Project.from_row(project_row) if project_row else None,
            client=Client.from_row(client_row) if client_row else None,
        )


@dataclass(frozen=True)
class DashboardStats:
    total_projects: int
    total_clients: int
    total_quotes: int
    total_production: float  # kWh/year
    total_savings: float  # EUR/year
    conversion_rate: float  # Percent of quotes accepted
