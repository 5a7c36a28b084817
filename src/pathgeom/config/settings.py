"""Configuration settings for pathgeom."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from pathgeom.domain.style import PINK, WHITE, ShapeStyle


class OuterRingPolicy(str, Enum):
    """How the decoder picks the outer ring among a path's contours."""

    FIRST = "first"
    LARGEST = "largest"


class CurveConfig(BaseModel):
    """Configuration for curve tessellation and primitive synthesis.

    Sampling density is fixed per segment, not adaptive to the segment's
    length or the primitive's size.
    """

    curve_samples: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Points sampled per quadratic/cubic curve segment",
    )
    primitive_sample_multiplier: int = Field(
        default=4,
        ge=1,
        le=32,
        description="Multiplier applied to curve_samples for curved primitives",
    )

    @property
    def primitive_points(self) -> int:
        """Point count used for ellipses, rectangles and arcs."""
        return self.curve_samples * self.primitive_sample_multiplier


class ConversionConfig(BaseModel):
    """Configuration for shape/geometry conversion."""

    outer_ring: OuterRingPolicy = Field(
        default=OuterRingPolicy.LARGEST,
        description="Outer ring selection: first contour or largest enclosed area",
    )
    max_depth: int = Field(
        default=64,
        ge=1,
        description="Maximum nesting depth of groups and geometry collections",
    )


class StyleConfig(BaseModel):
    """Default style assigned to shapes produced by the encoder."""

    apply_defaults: bool = Field(
        default=True,
        description="Assign the default style to every encoded node",
    )
    fill_color: int = Field(
        default=WHITE,
        ge=0,
        le=0xFFFFFFFF,
        description="ARGB fill color",
    )
    stroke_color: int = Field(
        default=PINK,
        ge=0,
        le=0xFFFFFFFF,
        description="ARGB stroke color",
    )
    stroke_weight: float = Field(
        default=4.0,
        ge=0.0,
        description="Stroke width",
    )

    def default_style(self) -> ShapeStyle | None:
        """Build the style for encoded nodes, or None when disabled."""
        if not self.apply_defaults:
            return None
        return ShapeStyle(
            fill=True,
            fill_color=self.fill_color,
            stroke=True,
            stroke_color=self.stroke_color,
            stroke_weight=self.stroke_weight,
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathgeomSettings(BaseModel):
    """Main application settings."""

    curve: CurveConfig = Field(default_factory=CurveConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
