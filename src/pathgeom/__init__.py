"""Pathgeom - Compile 2D drawing paths into meshes and collider shapes.

Pathgeom turns a sequence of straight-line and circular-arc drawing commands
into a closed polygon boundary, a triangulated fill mesh, a wireframe line mesh
and a collision-shape descriptor for a physics engine.

Example:
    $ pathgeom level.json --output level-geometry.json

This will compile every shape in level.json and write the fill mesh, the
wireframe and the collider of each shape to level-geometry.json.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
