"""Integration tests for the command-line interface."""

from pathlib import Path
from unittest.mock import patch

import orjson
from typer.testing import CliRunner

from elbowroute import __version__
from elbowroute.cli.app import app
from elbowroute.exceptions import ProcessingCancelledError

runner = CliRunner()


def _points(path: Path, arrow_id: str) -> list[list[float]]:
    document = orjson.loads(path.read_bytes())
    return next(e for e in document["elements"] if e["id"] == arrow_id)["points"]


class TestRouteCommand:
    """Tests for the route command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_default_output_path(self, scene_file: Path) -> None:
        result = runner.invoke(app, [str(scene_file)])

        assert result.exit_code == 0, result.output
        output = scene_file.parent / "diagram-routed.excalidraw"
        assert output.exists()
        assert _points(output, "elbow")[2] == [30, 40]

    def test_explicit_output(self, scene_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "nested" / "routed.json"
        result = runner.invoke(app, [str(scene_file), "--output", str(output), "--quiet"])

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_parallel_workers(self, scene_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "routed.json"
        result = runner.invoke(app, [str(scene_file), "-o", str(output), "-j", "2", "-q"])

        assert result.exit_code == 0, result.output
        assert len(_points(output, "elbow")) == 6

    def test_dry_run(self, scene_file: Path) -> None:
        result = runner.invoke(app, [str(scene_file), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "Dry run" in result.output
        assert not (scene_file.parent / "diagram-routed.excalidraw").exists()

    def test_list_arrows(self, scene_file: Path) -> None:
        result = runner.invoke(app, [str(scene_file), "--list-arrows"])

        assert result.exit_code == 0, result.output
        assert "elbow" in result.output
        assert "1 elbow arrows" in result.output
        assert not (scene_file.parent / "diagram-routed.excalidraw").exists()

    def test_log_file(self, scene_file: Path, tmp_path: Path) -> None:
        log_file = tmp_path / "route.log"
        result = runner.invoke(app, [str(scene_file), "--log-file", str(log_file), "-q"])

        assert result.exit_code == 0, result.output
        assert "Arrow routed" in log_file.read_text(encoding="utf-8")

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "nope.excalidraw")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_directory_rejected(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 1
        assert "not a file" in result.output

    def test_invalid_scene(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.excalidraw"
        path.write_text("{oops")

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 1
        assert "Invalid scene" in result.output

    def test_verbose_and_quiet_conflict(self, scene_file: Path) -> None:
        result = runner.invoke(app, [str(scene_file), "-v", "-q"])

        assert result.exit_code == 1

    def test_no_elbow_arrows(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.excalidraw"
        path.write_bytes(orjson.dumps({"elements": []}))

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0
        assert "No elbow arrows found" in result.output
        assert not (tmp_path / "empty-routed.excalidraw").exists()

    @patch("elbowroute.cli.app.SceneProcessor")
    def test_cancelled_exit_code(self, mock_processor_cls, scene_file: Path) -> None:
        mock_processor_cls.return_value.process.side_effect = ProcessingCancelledError(0, 1)

        result = runner.invoke(app, [str(scene_file), "--quiet"])

        assert result.exit_code == 130
