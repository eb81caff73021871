"""Scene writer for saving routed scenes.

This module provides the SceneWriter class for writing scene documents
with updated arrow points and the routed naming convention.
"""

import copy
from pathlib import Path
from typing import Any

import orjson

from elbowroute.domain import Point
from elbowroute.exceptions import ElementNotFoundError, SceneSaveError
from elbowroute.io.converter import apply_arrow_points


def write_json_atomic(path: Path, payload: Any) -> None:
    """Write JSON to a temporary file and move it into place.

    Args:
        path: Destination file
        payload: JSON-serializable document
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(f"{path.suffix}.tmp")
    tmp_path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
    tmp_path.replace(path)


class SceneWriter:
    """Writes scene documents with routed arrow points.

    The writer works on its own copy of the document, so the reader's
    document stays as loaded.

    Example:
        writer = SceneWriter(reader.document, Path("output.excalidraw"))
        writer.update_arrow("arrow-1", points)
        writer.save()
    """

    def __init__(self, document: dict[str, Any], output_path: Path) -> None:
        """Initialize the scene writer.

        Args:
            document: Scene document to write
            output_path: Path where the scene will be saved
        """
        self._document = copy.deepcopy(document)
        self._output_path = output_path

    @property
    def document(self) -> dict[str, Any]:
        """The document as it will be written."""
        return self._document

    def update_arrow(self, arrow_id: str, points: tuple[Point, ...]) -> None:
        """Replace the points of an arrow element.

        Args:
            arrow_id: Identifier of the arrow
            points: New local-space points

        Raises:
            ElementNotFoundError: If no arrow has that id
        """
        elements = self._document.get("elements", [])
        for idx, element in enumerate(elements):
            if isinstance(element, dict) and element.get("id") == arrow_id:
                elements[idx] = apply_arrow_points(element, points)
                return

        raise ElementNotFoundError(arrow_id)

    def save(self) -> None:
        """Save the scene document to the output path.

        Raises:
            SceneSaveError: If the file cannot be written
        """
        try:
            write_json_atomic(self._output_path, self._document)
        except OSError as e:
            raise SceneSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_routed_path(input_path: Path) -> Path:
        """Generate output path with routed naming convention.

        Converts: diagram.excalidraw -> diagram-routed.excalidraw
                  flow.json -> flow-routed.json

        Args:
            input_path: Original scene file path

        Returns:
            Path with -routed suffix before extension
        """
        stem = input_path.stem
        suffix = input_path.suffix
        parent = input_path.parent

        routed_name = f"{stem}-routed{suffix}"
        return parent / routed_name
