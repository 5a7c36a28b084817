"""Exception hierarchy for pathgeom."""


class PathgeomError(Exception):
    """Base exception for all pathgeom errors."""

    pass


class ShapeError(PathgeomError):
    """Errors related to shape conversion."""

    pass


class MalformedShapeError(ShapeError):
    """Shape data is inconsistent (bad code stream, missing parameters)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed shape: {reason}")


class UnsupportedShapeError(ShapeError):
    """Shape or geometry kind has no polygonal counterpart."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Unsupported '{kind}': {reason}")


class NestingDepthError(PathgeomError):
    """Shape tree or geometry collection is nested deeper than allowed."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Nesting exceeds maximum depth of {max_depth}")


class DocumentError(PathgeomError):
    """Errors related to reading or writing documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a shape or geometry document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving a shape or geometry document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")
