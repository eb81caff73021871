"""Tests for scene I/O operations."""

from pathlib import Path
from unittest.mock import patch

import orjson
import pytest

from elbowroute.domain import Binding, Point, ShapeType
from elbowroute.exceptions import ElementNotFoundError, SceneFormatError, SceneSaveError
from elbowroute.io import SceneReader, SceneWriter
from elbowroute.io.converter import apply_arrow_points, element_to_arrow, element_to_shape


class TestConverter:
    """Tests for element dict conversion."""

    def test_element_to_arrow(self) -> None:
        arrow = element_to_arrow(
            {
                "id": "a",
                "type": "arrow",
                "x": 5,
                "y": 6,
                "points": [[0, 0], [10, 20]],
                "startBinding": {"elementId": "s", "focus": 0.2, "gap": 4},
                "endBinding": None,
                "elbowed": True,
            }
        )

        assert arrow.points == (Point(0.0, 0.0), Point(10.0, 20.0))
        assert arrow.start_binding == Binding("s")
        assert arrow.end_binding is None
        assert arrow.elbowed

    def test_elbowed_defaults_false(self) -> None:
        """Arrows from older scenes without the flag are not elbow arrows."""
        arrow = element_to_arrow({"id": "a", "type": "arrow", "points": []})
        assert not arrow.elbowed

    def test_bad_point(self) -> None:
        with pytest.raises(ValueError):
            element_to_arrow({"id": "a", "type": "arrow", "points": [[1, 2, 3]]})

    def test_element_to_shape(self) -> None:
        shape = element_to_shape(
            {"id": "d", "type": "diamond", "x": 1, "y": 2, "width": 3, "height": 4, "angle": 0.5}
        )
        assert shape is not None
        assert shape.type is ShapeType.DIAMOND
        assert shape.angle == 0.5

    def test_non_bindable_element(self) -> None:
        assert element_to_shape({"id": "l", "type": "line"}) is None
        assert element_to_shape({"id": "a", "type": "arrow"}) is None

    def test_apply_arrow_points(self) -> None:
        """New points refresh the extent and leave the original alone."""
        element = {"id": "a", "points": [[0, 0], [1, 1]], "width": 1, "height": 1, "roughness": 1}
        updated = apply_arrow_points(element, (Point(0, 0), Point(30, 0), Point(30, -40)))

        assert updated["points"] == [[0, 0], [30, 0], [30, -40]]
        assert updated["width"] == 30
        assert updated["height"] == 40
        assert updated["roughness"] == 1
        assert element["points"] == [[0, 0], [1, 1]]


class TestSceneReader:
    """Tests for SceneReader class."""

    def test_init(self) -> None:
        """Test SceneReader initialization."""
        path = Path("diagram.excalidraw")
        reader = SceneReader(path)

        assert reader._scene_path == path
        assert reader._document is None

    def test_load_file_not_found(self) -> None:
        """Test loading non-existent file raises error."""
        reader = SceneReader(Path("nonexistent.excalidraw"))

        with pytest.raises(FileNotFoundError, match="Scene file not found"):
            reader.load()

    def test_load_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.excalidraw"
        path.write_text("{not json")

        with pytest.raises(SceneFormatError, match="invalid JSON"):
            SceneReader(path).load()

    @pytest.mark.parametrize("content", [b"[]", b'{"elements": {}}'])
    def test_load_wrong_shape(self, tmp_path: Path, content: bytes) -> None:
        path = tmp_path / "odd.json"
        path.write_bytes(content)

        with pytest.raises(SceneFormatError):
            SceneReader(path).load()

    def test_property_without_load(self) -> None:
        """Test accessing properties before load raises error."""
        reader = SceneReader(Path("diagram.excalidraw"))

        with pytest.raises(RuntimeError, match="Scene not loaded"):
            _ = reader.element_count

        with pytest.raises(RuntimeError, match="Scene not loaded"):
            _ = reader.document

    def test_iterates_elements(self, scene_file: Path) -> None:
        reader = SceneReader(scene_file)
        reader.load()

        assert reader.element_count == 6
        assert [a.id for a in reader.iter_arrows()] == ["elbow", "plain"]
        assert [s.id for s in reader.iter_shapes()] == ["A", "B", "old"]

    def test_snapshot_skips_deleted(self, scene_file: Path) -> None:
        reader = SceneReader(scene_file)
        reader.load()

        assert set(reader.snapshot()) == {"A", "B"}

    def test_get_element(self, scene_file: Path) -> None:
        reader = SceneReader(scene_file)
        reader.load()

        assert reader.get_element("plain")["type"] == "arrow"
        assert reader.get_element("missing") is None

    def test_context_manager(self, scene_file: Path) -> None:
        """Test SceneReader as context manager."""
        with SceneReader(scene_file) as reader:
            assert reader._document is not None

        assert reader._document is None

    @patch("elbowroute.io.reader.orjson.loads", return_value={"elements": []})
    def test_load_uses_orjson(self, mock_loads, scene_file: Path) -> None:
        reader = SceneReader(scene_file)
        reader.load()

        mock_loads.assert_called_once()
        assert reader.element_count == 0


class TestSceneWriter:
    """Tests for SceneWriter class."""

    def test_init_copies_document(self, scene_document: dict) -> None:
        """The writer never mutates the document it was given."""
        writer = SceneWriter(scene_document, Path("output.excalidraw"))
        writer.update_arrow("elbow", (Point(0, 0), Point(10, 0)))

        assert scene_document["elements"][3]["points"] == [[0, 0], [200, 0]]
        assert writer.document["elements"][3]["points"] == [[0, 0], [10, 0]]

    def test_update_unknown_arrow(self, scene_document: dict) -> None:
        writer = SceneWriter(scene_document, Path("output.excalidraw"))

        with pytest.raises(ElementNotFoundError):
            writer.update_arrow("nope", (Point(0, 0),))

    def test_save(self, tmp_path: Path, scene_document: dict) -> None:
        """Saved scenes keep unrelated fields."""
        output = tmp_path / "out" / "diagram-routed.excalidraw"
        writer = SceneWriter(scene_document, output)
        writer.update_arrow("elbow", (Point(0, 0), Point(30, 0)))
        writer.save()

        saved = orjson.loads(output.read_bytes())
        assert saved["appState"] == {"viewBackgroundColor": "#ffffff"}
        assert saved["elements"][3]["points"] == [[0, 0], [30, 0]]
        assert saved["elements"][3]["strokeColor"] == "#1e1e1e"
        assert not output.with_suffix(".excalidraw.tmp").exists()

    def test_get_routed_path(self) -> None:
        """Test get_routed_path static method."""
        test_cases = [
            (Path("diagram.excalidraw"), Path("diagram-routed.excalidraw")),
            (Path("flow.json"), Path("flow-routed.json")),
            (Path("/path/to/My Diagram.excalidraw"), Path("/path/to/My Diagram-routed.excalidraw")),
        ]

        for input_path, expected in test_cases:
            assert SceneWriter.get_routed_path(input_path) == expected

    def test_save_failure(self, tmp_path: Path, scene_document: dict) -> None:
        """Unwritable destinations surface as SceneSaveError."""
        blocker = tmp_path / "file"
        blocker.write_text("x")
        writer = SceneWriter(scene_document, blocker / "diagram.excalidraw")

        with pytest.raises(SceneSaveError):
            writer.save()
