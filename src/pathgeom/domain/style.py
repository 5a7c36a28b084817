"""Visual style carried by shape nodes.

Colors are packed 32-bit ARGB integers. Styles are carried through
conversion untouched; nothing in pathgeom renders them.
"""

from dataclasses import dataclass
from typing import Any

WHITE = 0xFFFFFFFF
BLACK = 0xFF000000
PINK = 0xFFFF69B4


def argb(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack color channels into an ARGB integer.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255)

    Returns:
        Packed ARGB color
    """
    for channel in (r, g, b, a):
        if not 0 <= channel <= 255:
            raise ValueError(f"Color channel out of range: {channel}")
    return (a << 24) | (r << 16) | (g << 8) | b


@dataclass(frozen=True, slots=True)
class ShapeStyle:
    """Fill and stroke settings of a shape node.

    Attributes:
        fill: Whether the shape is filled
        fill_color: ARGB fill color
        stroke: Whether the outline is stroked
        stroke_color: ARGB stroke color
        stroke_weight: Stroke width
    """

    fill: bool = True
    fill_color: int = WHITE
    stroke: bool = True
    stroke_color: int = BLACK
    stroke_weight: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "fill": self.fill,
            "fill_color": self.fill_color,
            "stroke": self.stroke,
            "stroke_color": self.stroke_color,
            "stroke_weight": self.stroke_weight,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeStyle":
        """Deserialize from dictionary.

        Missing keys fall back to the field defaults.
        """
        defaults = cls()
        return cls(
            fill=data.get("fill", defaults.fill),
            fill_color=data.get("fill_color", defaults.fill_color),
            stroke=data.get("stroke", defaults.stroke),
            stroke_color=data.get("stroke_color", defaults.stroke_color),
            stroke_weight=data.get("stroke_weight", defaults.stroke_weight),
        )
