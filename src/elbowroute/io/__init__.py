"""Scene I/O layer for elbowroute.

This module handles reading and writing Excalidraw scene files. It provides
a clean abstraction layer between the JSON document and the domain models.

Key responsibilities:
- Load scene documents
- Convert element dictionaries to domain models
- Write routed points back into the document
- Save scenes with the routed naming convention

Key classes:
- SceneReader: Load scenes and extract arrows and shapes
- SceneWriter: Save routed scenes
"""

from elbowroute.io.reader import SceneReader
from elbowroute.io.writer import SceneWriter

__all__ = [
    "SceneReader",
    "SceneWriter",
]
