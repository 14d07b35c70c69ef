"""Global constants and default render settings."""

from __future__ import annotations

from dataclasses import dataclass

# Ring geometry (SVG user units)
INNER_RADIUS = 25
RADIUS_SPAN = 75
PLOT_RADIUS = 100
VIEW_HALF_EXTENT = 105

# Largest circle, drawn for the longest note
MAX_POINT_SIZE = 4

# Pitch gradient endpoints: lowest pitch -> highest pitch
LOW_COLOR = "#1b3a6b"
HIGH_COLOR = "#f2a541"

COORD_DECIMALS = 1
SIZE_DECIMALS = 2
BLEND_MODE = "multiply"

# Raster preview
PNG_SIZE = 840
PNG_BACKGROUND = (255, 255, 255)


@dataclass(frozen=True)
class RenderConfig:
    """Geometry and palette handed to the renderer."""

    inner_radius: float = INNER_RADIUS
    radius_span: float = RADIUS_SPAN
    max_point_size: float = MAX_POINT_SIZE
    low_color: str = LOW_COLOR
    high_color: str = HIGH_COLOR
    view_half_extent: float = VIEW_HALF_EXTENT
    plot_radius: float = PLOT_RADIUS
    decimals: int = COORD_DECIMALS
    size_decimals: int = SIZE_DECIMALS
    blend_mode: str = BLEND_MODE

    def __post_init__(self) -> None:
        if self.inner_radius < 0 or self.radius_span <= 0:
            raise ValueError("inner_radius must be >= 0 and radius_span > 0")
        if self.max_point_size < 0:
            raise ValueError("max_point_size must be >= 0")
        if self.inner_radius + self.radius_span > self.plot_radius:
            raise ValueError(
                f"ring ({self.inner_radius} + {self.radius_span}) exceeds plot radius {self.plot_radius}"
            )
        if self.plot_radius > self.view_half_extent:
            raise ValueError(
                f"plot radius {self.plot_radius} exceeds view half-extent {self.view_half_extent}"
            )

    @property
    def view_box(self) -> str:
        h = self.view_half_extent
        return f"{-h:g} {-h:g} {2 * h:g} {2 * h:g}"


DEFAULT_CONFIG = RenderConfig()
