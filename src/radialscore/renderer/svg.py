"""Serialize laid-out circles into an SVG document."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from radialscore.config import DEFAULT_CONFIG, RenderConfig
from radialscore.models import Note
from radialscore.renderer.radial import Circle, layout_notes

SVG_NS = "http://www.w3.org/2000/svg"


def _circle_element(circle: Circle, blend_mode: str) -> str:
    return (
        f'<circle cx="{circle.x}" cy="{circle.y}" r="{circle.size}" fill="{circle.fill}" '
        f'style="mix-blend-mode: {blend_mode};" />'
    )


def circles_to_svg(circles: Sequence[Circle], config: RenderConfig = DEFAULT_CONFIG) -> str:
    lines = [f'<svg xmlns="{SVG_NS}" viewBox="{config.view_box}">', "  <g>"]
    lines.extend(f"    {_circle_element(c, config.blend_mode)}" for c in circles)
    lines.extend(["  </g>", "</svg>"])
    return "\n".join(lines) + "\n"


def render_svg(notes: Sequence[Note], config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Render notes as a radial plot. Empty input gives an empty plot."""
    return circles_to_svg(layout_notes(notes, config), config)


def write_svg(
    notes: Sequence[Note],
    path: str | Path,
    config: RenderConfig = DEFAULT_CONFIG,
) -> Path:
    out = Path(path)
    out.write_text(render_svg(notes, config), encoding="utf-8")
    return out
