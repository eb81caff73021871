"""Exception hierarchy for elbowroute.

Routing itself never raises for geometric conditions; these errors belong to
the scene loading, saving and batch processing surfaces.
"""


class ElbowRouteError(Exception):
    """Base exception for all elbowroute errors."""

    pass


class SceneError(ElbowRouteError):
    """Errors related to scene loading or saving."""

    pass


class SceneLoadError(SceneError):
    """Error loading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneSaveError(SceneError):
    """Error saving a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Unsupported or invalid scene document."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")


class ElementError(ElbowRouteError):
    """Errors related to individual scene elements."""

    pass


class ElementNotFoundError(ElementError):
    """Requested element not found in scene."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(f"Element '{element_id}' not found in scene")


class ArrowRoutingError(ElementError):
    """Error routing a specific arrow."""

    def __init__(self, arrow_id: str, reason: str) -> None:
        self.arrow_id = arrow_id
        self.reason = reason
        super().__init__(f"Error routing arrow '{arrow_id}': {reason}")


class ProcessingCancelledError(ElbowRouteError):
    """Processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
