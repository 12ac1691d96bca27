"""SVG roof layout renderer.

Produces a self-contained SVG string for st.markdown(unsafe_allow_html=True).
Panels are drawn at their stored positions (metres, origin top-left of the
roof). A compass needle shows which way the roof faces.
"""

from __future__ import annotations

import html
import math

from solarquote.models import PanelPosition, PanelsConfig, RoofData

_BG = "#f7f7f2"
_PANEL_COLOR = "#1d3557"
_PANEL_STROKE = "#a8dadc"
_NEEDLE_COLOR = "#e63946"

# Standard residential module footprint (metres)
PANEL_WIDTH_M = 1.0
PANEL_HEIGHT_M = 1.7


def _extent(panels: PanelsConfig) -> tuple[float, float]:
    """Bounding box of all panels, at least one panel in size."""
    width = max((p.x + PANEL_WIDTH_M for p in panels.panel_positions), default=0.0)
    height = max((p.y + PANEL_HEIGHT_M for p in panels.panel_positions), default=0.0)
    return max(width, PANEL_WIDTH_M), max(height, PANEL_HEIGHT_M)


def _compass(orientation_deg: float, cx: float, cy: float, r: float) -> str:
    """Needle pointing toward the roof's facing direction (0=N up, 90=E right)."""
    rad = math.radians(orientation_deg)
    tip_x = cx + r * math.sin(rad)
    tip_y = cy - r * math.cos(rad)
    return (
        f'<circle cx="{cx:.3f}" cy="{cy:.3f}" r="{r:.3f}" fill="none"'
        f' stroke="#999" stroke-width="{r / 20:.3f}"/>'
        f'<line x1="{cx:.3f}" y1="{cy:.3f}" x2="{tip_x:.3f}" y2="{tip_y:.3f}"'
        f' stroke="{_NEEDLE_COLOR}" stroke-width="{r / 8:.3f}" stroke-linecap="round"/>'
        f'<text x="{cx:.3f}" y="{cy - r * 1.15:.3f}" font-size="{r / 2:.3f}"'
        f' text-anchor="middle" fill="#555">N</text>'
    )


def render_roof_svg(roof: RoofData, panels: PanelsConfig, title: str = "") -> str:
    """Return an SVG drawing of the panel layout.

    Without stored positions the panels are laid out in rows of up to
    seven, so a freshly created project still gets a preview.

    Args:
        roof: Roof geometry (orientation drives the compass).
        panels: Panel configuration and positions.
        title: Optional caption, HTML-escaped.

    Returns:
        SVG markup string.
    """
    if not panels.panel_positions and panels.panel_count > 0:
        cols = min(7, panels.panel_count)
        positions = tuple(
            PanelPosition(
                x=(i % cols) * (PANEL_WIDTH_M + 0.05),
                y=(i // cols) * (PANEL_HEIGHT_M + 0.05),
            )
            for i in range(panels.panel_count)
        )
        panels = PanelsConfig(
            panel_count=panels.panel_count,
            panel_wattage=panels.panel_wattage,
            panel_positions=positions,
        )

    width, height = _extent(panels)
    margin = 0.5
    compass_r = min(width, height) * 0.12 + 0.3
    view_w = width + 2 * margin + compass_r * 3
    view_h = height + 2 * margin

    panel_parts: list[str] = []
    for p in panels.panel_positions:
        x = p.x + margin
        y = p.y + margin
        cx = x + PANEL_WIDTH_M / 2
        cy = y + PANEL_HEIGHT_M / 2
        panel_parts.append(
            f'<rect x="{x:.3f}" y="{y:.3f}" width="{PANEL_WIDTH_M}" height="{PANEL_HEIGHT_M}"'
            f' fill="{_PANEL_COLOR}" stroke="{_PANEL_STROKE}" stroke-width="0.03"'
            f' transform="rotate({p.rotation:.1f} {cx:.3f} {cy:.3f})"/>'
        )

    compass_svg = _compass(
        roof.orientation,
        cx=width + 2 * margin + compass_r * 1.5,
        cy=margin + compass_r * 1.4,
        r=compass_r,
    )
    caption = (
        f'<text x="{margin:.3f}" y="{view_h - 0.1:.3f}" font-size="0.3"'
        f' fill="#333">{html.escape(title)}</text>'
        if title
        else ""
    )
    panels_svg = "\n  ".join(panel_parts)

    return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {view_w:.3f} {view_h:.3f}"
     style="width:100%;max-height:420px;background:{_BG}">
  {panels_svg}
  {compass_svg}
  {caption}
</svg>"""
