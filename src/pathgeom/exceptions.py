"""Exception hierarchy for Pathgeom."""


class PathGeomError(Exception):
    """Base exception for all Pathgeom errors."""

    pass


class PathError(PathGeomError):
    """Errors related to building paths."""

    pass


class PathStateError(PathError):
    """A path command was issued in the wrong builder phase."""

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while path is {state}")


class GeometryError(PathGeomError):
    """Errors in geometric calculations."""

    pass


class TriangulationError(GeometryError):
    """A closed path could not be triangulated.

    Raised when no ear can be found while three or more vertices remain,
    which means the polygon is self-intersecting or degenerate, or when the
    boundary does not wind counter-clockwise.
    """

    def __init__(self, reason: str, remaining: list[int] | None = None) -> None:
        self.reason = reason
        self.remaining = list(remaining) if remaining is not None else []
        super().__init__(f"Triangulation failed: {reason}")


class ScriptError(PathGeomError):
    """Errors related to path script and geometry files."""

    pass


class ScriptLoadError(ScriptError):
    """Error loading a path script."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load path script '{path}': {reason}")


class GeometrySaveError(ScriptError):
    """Error saving compiled geometry."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save geometry '{path}': {reason}")


class ShapeCompileError(PathGeomError):
    """Error compiling a named shape."""

    def __init__(self, shape_name: str, reason: str) -> None:
        self.shape_name = shape_name
        self.reason = reason
        super().__init__(f"Error compiling shape '{shape_name}': {reason}")
