"""Triangular mesh structure with per-vertex attributes and connectivity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .vec3 import Vec3, cross

logger = logging.getLogger(__name__)

Triangle = Tuple[int, int, int]
UV = Tuple[float, float]

_EPS = 1e-6
_WHITE = Vec3(1.0, 1.0, 1.0)
_LARGE = 10_000_000
_INDEX_CHECK_LIMIT = 6000


@dataclass
class Mesh:
    """Triangle mesh storing per-vertex data and triangle connectivity."""

    position: List[Vec3] = field(default_factory=list)
    normal: List[Vec3] = field(default_factory=list)
    color: List[Vec3] = field(default_factory=list)
    uv: List[UV] = field(default_factory=list)
    connectivity: List[Triangle] = field(default_factory=list)

    def __str__(self) -> str:
        return f"mesh[N_vertex={len(self.position)}][N_triangle={len(self.connectivity)}]"

    def fill_empty_field(self) -> Mesh:
        """Give default values to per-vertex attributes that are too short."""
        count = len(self.position)
        if count == 0:
            raise ValueError("Trying to fill field of a mesh without vertex")
        if not self.connectivity:
            raise ValueError("Connectivity doesn't have any triangle")

        if len(self.normal) < count:
            self.normal = normal_per_vertex(self.position, self.connectivity)
        if len(self.color) < count:
            self.color = [_WHITE] * count
        if len(self.uv) < count:
            self.uv = [(0.0, 0.0)] * count
        return self

    def extend(self, other: Mesh) -> Mesh:
        """Append the content of another mesh, reindexing its triangles."""
        offset = len(self.position)
        self.position.extend(other.position)
        self.normal.extend(other.normal)
        self.color.extend(other.color)
        self.uv.extend(other.uv)
        self.connectivity.extend(
            (a + offset, b + offset, c + offset) for a, b, c in other.connectivity
        )
        return self

    def flip_connectivity(self) -> Mesh:
        """Reverse the orientation of every triangle."""
        self.connectivity = [(b, a, c) for a, b, c in self.connectivity]
        return self

    def compute_normal(self) -> Mesh:
        """Recompute the per-vertex normals from the geometry."""
        self.normal = normal_per_vertex(self.position, self.connectivity)
        return self


def normal_per_vertex(
    position: Sequence[Vec3],
    connectivity: Sequence[Triangle],
    invert: bool = False,
) -> List[Vec3]:
    """Per-vertex normals: normalized sum of the unit normals of adjacent triangles."""
    count = len(position)
    normals = [Vec3() for _ in range(count)]

    for face in connectivity:
        if any(not 0 <= idx < count for idx in face):
            raise ValueError(f"Triangle {tuple(face)} has an index outside [0, {count})")
        p0, p1, p2 = (position[idx] for idx in face)
        p10 = p1 - p0
        p20 = p2 - p0
        l10 = p10.length()
        l20 = p20.length()
        if l10 <= _EPS or l20 <= _EPS:
            continue
        n = cross(p10 / l10, p20 / l20)
        ln = n.length()
        if ln <= _EPS:
            continue
        n_unit = n / ln
        for idx in face:
            normals[idx] = normals[idx] + n_unit

    result = []
    for n in normals:
        ln = n.length()
        if ln > _EPS:
            n = n / ln
        result.append(-n if invert else n)
    return result


def mesh_check(mesh: Mesh) -> bool:
    """Log warnings about incoherent mesh data; False on a critical indexing error."""
    count = len(mesh.position)

    def warn(message: str) -> None:
        logger.warning("[mesh_check]: %s", message)

    if count == 0:
        warn("Current mesh has 0 position")
    if count > _LARGE:
        warn("Current mesh has more than 10 millions positions")

    for name, values in (("normal", mesh.normal), ("uv", mesh.uv), ("color", mesh.color)):
        if not values:
            warn(f"Mesh doesn't have any per-vertex {name} defined")
        if len(values) != count:
            warn(f"Mesh has incoherent size of per-vertex {name}")

    triangle_count = len(mesh.connectivity)
    if triangle_count == 0:
        warn("Current mesh has no connectivity")
    if triangle_count > _LARGE:
        warn("Current mesh has more than 10 millions triangles")

    for kt, (f0, f1, f2) in enumerate(mesh.connectivity):
        if f0 >= count or f1 >= count or f2 >= count:
            warn(
                f"Triangle {kt} has index triplet ({f0},{f1},{f2}) "
                f"exceeding the size of the position [{count}]"
            )
            return False

        p0, p1, p2 = mesh.position[f0], mesh.position[f1], mesh.position[f2]
        for (ia, pa), (ib, pb) in (((f0, p0), (f1, p1)), ((f2, p2), (f1, p1)), ((f2, p2), (f0, p0))):
            edge = (pb - pa).length()
            if edge < _EPS:
                warn(
                    f"Edge ({ia},{ib}) has zero length. position[{ia}]={pa}, "
                    f"position[{ib}]={pb}; L_edge = {edge}"
                )

    if count < _INDEX_CHECK_LIMIT:
        indexed = {idx for face in mesh.connectivity for idx in face}
        for k, p in enumerate(mesh.position):
            if k not in indexed:
                warn(f"Vertex {k} at position {p} is not indexed in the connectivity")

    return True


def connectivity_one_ring(connectivity: Sequence[Triangle]) -> List[List[int]]:
    """Sorted neighbour indices of each vertex, gathered from the triangles."""
    highest = max((idx for face in connectivity for idx in face), default=-1)
    rings: List[set] = [set() for _ in range(max(len(connectivity), highest + 1))]
    for a, b, c in connectivity:
        rings[a].update((b, c))
        rings[b].update((a, c))
        rings[c].update((a, b))
    return [sorted(ring) for ring in rings]