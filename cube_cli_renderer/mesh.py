#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import numpy as np


class Wireframe:
    """
    Model-space vertices and the edges between them.

    Edges are unordered pairs of vertex indices; the topology is fixed for
    the lifetime of the object.
    """

    def __init__(self, vertices, edges):
        self.vertices = [np.array(v, dtype=np.float64) for v in vertices]
        self.edges = tuple((int(a), int(b)) for a, b in edges)
        count = len(self.vertices)
        for a, b in self.edges:
            if not (0 <= a < count and 0 <= b < count):
                raise ValueError(f"edge ({a}, {b}) references a missing vertex")

    @classmethod
    def cube(cls) -> 'Wireframe':
        """Cube of side 2 centered at the origin: 8 vertices, 12 edges."""
        vertices = [
            [-1, -1, -1], [ 1, -1, -1], [ 1,  1, -1], [-1,  1, -1],
            [-1, -1,  1], [ 1, -1,  1], [ 1,  1,  1], [-1,  1,  1],
        ]
        edges = [
            (0, 1), (1, 2), (2, 3), (3, 0),  # near face
            (4, 5), (5, 6), (6, 7), (7, 4),  # far face
            (0, 4), (1, 5), (2, 6), (3, 7),  # connecting edges
        ]
        return cls(vertices, edges)
