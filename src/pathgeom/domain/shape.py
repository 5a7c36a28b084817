"""Path-command shape model.

A shape is a tree of nodes of one of four families:

- GROUP: owns an ordered list of child shapes
- PATH / GEOMETRY: a flat vertex list plus a parallel list of command codes
- PRIMITIVE: a parametric primitive (ellipse, rect, ...) given by a kind
  and a short parameter list

Command codes consume vertices from the vertex list: VERTEX and
CURVE_VERTEX take one, QUADRATIC_VERTEX takes two (control, end),
BEZIER_VERTEX takes three (control, control, end) and BREAK takes none.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from pathgeom.domain.style import ShapeStyle

Vertex = tuple[float, float]


class ShapeFamily(str, Enum):
    """Shape node family."""

    GROUP = "group"
    PATH = "path"
    GEOMETRY = "geometry"
    PRIMITIVE = "primitive"


class VertexCode(str, Enum):
    """Command code of a path element."""

    VERTEX = "vertex"
    QUADRATIC_VERTEX = "quadratic_vertex"
    BEZIER_VERTEX = "bezier_vertex"
    CURVE_VERTEX = "curve_vertex"
    BREAK = "break"

    @property
    def vertex_count(self) -> int:
        """Number of physical vertices this command consumes."""
        return _CONSUMED_VERTICES[self]


_CONSUMED_VERTICES = {
    VertexCode.VERTEX: 1,
    VertexCode.QUADRATIC_VERTEX: 2,
    VertexCode.BEZIER_VERTEX: 3,
    VertexCode.CURVE_VERTEX: 1,
    VertexCode.BREAK: 0,
}


class PrimitiveKind(str, Enum):
    """Kind of a parametric primitive."""

    ELLIPSE = "ellipse"
    RECT = "rect"
    TRIANGLE = "triangle"
    QUAD = "quad"
    ARC = "arc"
    LINE = "line"
    POINT = "point"
    BOX = "box"
    SPHERE = "sphere"


@dataclass(kw_only=True)
class Shape:
    """Base class of all shape nodes.

    Attributes:
        name: Optional node name
        style: Fill/stroke style, None when unstyled
    """

    family: ClassVar[ShapeFamily]

    name: str | None = None
    style: ShapeStyle | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data: dict[str, Any] = {"family": self.family.value}
        if self.name is not None:
            data["name"] = self.name
        if self.style is not None:
            data["style"] = self.style.to_dict()
        data.update(self._payload())
        return data

    def _payload(self) -> dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize any shape node from a dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            GroupShape, PathShape or PrimitiveShape depending on ``family``

        Raises:
            ValueError: If the family is unknown
            KeyError: If a required key is missing
        """
        family = ShapeFamily(data["family"])
        common = {
            "name": data.get("name"),
            "style": ShapeStyle.from_dict(data["style"]) if data.get("style") else None,
        }

        if family == ShapeFamily.GROUP:
            return GroupShape(
                children=[Shape.from_dict(child) for child in data.get("children", [])],
                **common,
            )
        if family == ShapeFamily.PRIMITIVE:
            return PrimitiveShape(
                kind=PrimitiveKind(data["kind"]),
                params=[float(p) for p in data.get("params", [])],
                **common,
            )
        return PathShape(
            vertices=[(float(x), float(y)) for x, y in data.get("vertices", [])],
            codes=[VertexCode(c) for c in data.get("codes", [])],
            closed=bool(data.get("closed", False)),
            kind=family,
            **common,
        )


@dataclass
class GroupShape(Shape):
    """A node owning an ordered list of child shapes."""

    family: ClassVar[ShapeFamily] = ShapeFamily.GROUP

    children: list[Shape] = field(default_factory=list)

    def add_child(self, child: Shape) -> None:
        """Append a child shape."""
        self.children.append(child)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def _payload(self) -> dict[str, Any]:
        return {"children": [child.to_dict() for child in self.children]}


@dataclass
class PathShape(Shape):
    """A vertex stream annotated with command codes.

    The builder methods mirror an immediate-mode drawing API::

        path = PathShape()
        path.begin_shape()
        path.vertex(0, 0)
        path.vertex(10, 0)
        path.quadratic_vertex(15, 5, 10, 10)
        path.begin_contour()
        path.vertex(2, 2)
        ...
        path.end_contour()
        path.end_shape(close=True)

    Attributes:
        vertices: Physical vertices, in stream order
        codes: Command codes; each consumes ``code.vertex_count`` vertices
        closed: Whether the outline was closed with ``end_shape(close=True)``
        kind: PATH or GEOMETRY; both decode the same way
    """

    vertices: list[Vertex] = field(default_factory=list)
    codes: list[VertexCode] = field(default_factory=list)
    closed: bool = False
    kind: ShapeFamily = ShapeFamily.PATH

    def __post_init__(self) -> None:
        if self.kind not in (ShapeFamily.PATH, ShapeFamily.GEOMETRY):
            raise ValueError(f"PathShape kind must be PATH or GEOMETRY, got {self.kind}")

    @property
    def family(self) -> ShapeFamily:  # type: ignore[override]
        return self.kind

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def vertex_code_count(self) -> int:
        return len(self.codes)

    def get_vertex(self, index: int) -> Vertex:
        return self.vertices[index]

    def get_vertex_code(self, index: int) -> VertexCode:
        return self.codes[index]

    def consumed_vertex_count(self) -> int:
        """Count the vertices implied by the command codes."""
        return sum(code.vertex_count for code in self.codes)

    def begin_shape(self) -> None:
        """Start (or restart) recording an open outline."""
        self.closed = False

    def vertex(self, x: float, y: float) -> None:
        self.vertices.append((float(x), float(y)))
        self.codes.append(VertexCode.VERTEX)

    def curve_vertex(self, x: float, y: float) -> None:
        self.vertices.append((float(x), float(y)))
        self.codes.append(VertexCode.CURVE_VERTEX)

    def quadratic_vertex(self, cx: float, cy: float, x: float, y: float) -> None:
        """Append a quadratic segment from the previous vertex to (x, y)."""
        self.vertices.append((float(cx), float(cy)))
        self.vertices.append((float(x), float(y)))
        self.codes.append(VertexCode.QUADRATIC_VERTEX)

    def bezier_vertex(
        self,
        cx1: float,
        cy1: float,
        cx2: float,
        cy2: float,
        x: float,
        y: float,
    ) -> None:
        """Append a cubic segment from the previous vertex to (x, y)."""
        self.vertices.append((float(cx1), float(cy1)))
        self.vertices.append((float(cx2), float(cy2)))
        self.vertices.append((float(x), float(y)))
        self.codes.append(VertexCode.BEZIER_VERTEX)

    def begin_contour(self) -> None:
        """Start a new contour (a hole when inside the outline)."""
        self.codes.append(VertexCode.BREAK)

    def end_contour(self) -> None:
        """Finish the current contour.

        Contours are delimited by BREAK codes alone, so nothing is recorded.
        """

    def end_shape(self, close: bool = False) -> None:
        self.closed = close

    def _payload(self) -> dict[str, Any]:
        return {
            "vertices": [list(v) for v in self.vertices],
            "codes": [code.value for code in self.codes],
            "closed": self.closed,
        }


@dataclass
class PrimitiveShape(Shape):
    """A parametric primitive without vertex data.

    Attributes:
        kind: Primitive kind
        params: Kind-specific parameters (see ``pathgeom.core.primitives``)
    """

    family: ClassVar[ShapeFamily] = ShapeFamily.PRIMITIVE

    kind: PrimitiveKind
    params: list[float] = field(default_factory=list)

    def get_param(self, index: int) -> float:
        return self.params[index]

    def _payload(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "params": list(self.params)}
