"""elbowroute - Orthogonal ("elbow") connector routing for diagram arrows.

elbowroute computes paths made of axis-aligned segments between the two
endpoints of an arrow, leaving and entering the shapes the arrow is bound to
from the side it is attached on and steering clear of their bounding boxes.
It ships a small library API and a CLI that re-routes every elbow arrow in
an Excalidraw scene file.

Example:
    $ elbowroute diagram.excalidraw

This will create diagram-routed.excalidraw with fresh joint points for every
arrow marked as elbowed.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
