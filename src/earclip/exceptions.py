"""Exception hierarchy for Earclip."""


class EarclipError(Exception):
    """Base exception for all Earclip errors."""

    pass


class PolygonError(EarclipError):
    """Errors related to polygon loading, saving or validation."""

    pass


class PolygonLoadError(PolygonError):
    """Error loading a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load polygons from '{path}': {reason}")


class PolygonSaveError(PolygonError):
    """Error saving a triangulation file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save triangulation to '{path}': {reason}")


class PolygonFormatError(PolygonError):
    """Unsupported or invalid polygon data."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid polygon data in '{path}': {details}")


class TriangulationError(EarclipError):
    """Triangulation did not produce any triangles."""

    def __init__(self, status: str, vertex_count: int) -> None:
        self.status = status
        self.vertex_count = vertex_count
        super().__init__(
            f"Triangulation failed ({status}) for polygon with {vertex_count} vertices"
        )

