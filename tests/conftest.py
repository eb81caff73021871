"""Shared fixtures: a small Excalidraw scene with two boxes and arrows."""

from pathlib import Path
from typing import Any

import orjson
import pytest


def _rect(element_id: str, x: float, y: float, **extra: Any) -> dict[str, Any]:
    return {
        "id": element_id,
        "type": "rectangle",
        "x": x,
        "y": y,
        "width": 40,
        "height": 40,
        "angle": 0,
        "isDeleted": False,
        **extra,
    }


@pytest.fixture
def scene_document() -> dict[str, Any]:
    """Scene with boxes A and B, one elbow arrow between them and a plain arrow."""
    return {
        "type": "excalidraw",
        "version": 2,
        "source": "https://excalidraw.com",
        "elements": [
            _rect("A", 0, 0),
            _rect("B", 200, 0),
            _rect("old", 500, 500, isDeleted=True),
            {
                "id": "elbow",
                "type": "arrow",
                "x": 40,
                "y": 20,
                "width": 200,
                "height": 0,
                "points": [[0, 0], [200, 0]],
                "startBinding": {"elementId": "A", "focus": 0, "gap": 0},
                "endBinding": {"elementId": "B", "focus": 0, "gap": 0},
                "elbowed": True,
                "strokeColor": "#1e1e1e",
            },
            {
                "id": "plain",
                "type": "arrow",
                "x": 0,
                "y": 100,
                "width": 50,
                "height": 50,
                "points": [[0, 0], [50, 50]],
                "startBinding": None,
                "endBinding": None,
            },
            {"id": "label", "type": "line", "x": 0, "y": 0, "points": [[0, 0], [1, 1]]},
        ],
        "appState": {"viewBackgroundColor": "#ffffff"},
        "files": {},
    }


@pytest.fixture
def scene_file(tmp_path: Path, scene_document: dict[str, Any]) -> Path:
    """The scene document written to disk."""
    path = tmp_path / "diagram.excalidraw"
    path.write_bytes(orjson.dumps(scene_document))
    return path
