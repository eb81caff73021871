"""Scene reader for loading Excalidraw scene files.

This module provides the SceneReader class for loading scene documents
and extracting arrows and bindable shapes into domain models.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import orjson

from elbowroute.domain import Arrow, SceneSnapshot, Shape
from elbowroute.exceptions import SceneFormatError
from elbowroute.io.converter import element_to_arrow, element_to_shape, is_arrow_element


class SceneReader:
    """Loads scene files and extracts element data.

    The SceneReader provides a high-level interface for loading scenes
    and converting element dictionaries to domain models.

    Example:
        reader = SceneReader(Path("diagram.excalidraw"))
        reader.load()
        for arrow in reader.iter_arrows():
            print(arrow.id)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the scene JSON file
        """
        self._scene_path = scene_path
        self._document: dict[str, Any] | None = None

    def load(self) -> None:
        """Load the scene file.

        Raises:
            FileNotFoundError: If scene file does not exist
            SceneFormatError: If the file is not a JSON scene document
        """
        if not self._scene_path.exists():
            raise FileNotFoundError(f"Scene file not found: {self._scene_path}")

        try:
            data = orjson.loads(self._scene_path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise SceneFormatError(str(self._scene_path), f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise SceneFormatError(str(self._scene_path), "document is not a JSON object")

        elements = data.get("elements", [])
        if not isinstance(elements, list):
            raise SceneFormatError(str(self._scene_path), "'elements' is not a list")

        self._document = data

    def _elements(self) -> list[dict[str, Any]]:
        if self._document is None:
            raise RuntimeError("Scene not loaded. Call load() first.")

        return [e for e in self._document.get("elements", []) if isinstance(e, dict)]

    @property
    def document(self) -> dict[str, Any]:
        """Return the raw scene document.

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Scene not loaded. Call load() first.")

        return self._document

    @property
    def element_count(self) -> int:
        """Return total number of elements in the scene.

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        return len(self._elements())

    def iter_arrows(self) -> Iterator[Arrow]:
        """Iterate over all arrow elements, converting to domain model.

        Yields arrows in document order, deleted ones included.

        Yields:
            Arrow domain models

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        for element in self._elements():
            if is_arrow_element(element):
                yield element_to_arrow(element)

    def iter_shapes(self) -> Iterator[Shape]:
        """Iterate over all bindable shapes, converting to domain model.

        Yields:
            Shape domain models

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        for element in self._elements():
            shape = element_to_shape(element)
            if shape is not None:
                yield shape

    def snapshot(self) -> SceneSnapshot:
        """Build a read-only snapshot of the scene's non-deleted shapes.

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        return SceneSnapshot.from_shapes(self.iter_shapes())

    def get_element(self, element_id: str) -> dict[str, Any] | None:
        """Get a raw element by id.

        Args:
            element_id: Identifier of the element

        Returns:
            Element dict, or None if no element has that id

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        for element in self._elements():
            if element.get("id") == element_id:
                return element
        return None

    def close(self) -> None:
        """Drop the loaded document."""
        self._document = None

    def __enter__(self) -> "SceneReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
