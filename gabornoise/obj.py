"""Reader for Wavefront OBJ files producing triangle meshes."""

from __future__ import annotations

import enum
import re
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Tuple, Union

from .mesh import Mesh, Triangle
from .vec3 import Vec3

PathLike = Union[str, Path]
FaceIndex = Tuple[int, int, int]

_INT = re.compile(r"\s*([+-]?\d+)")


class ObjType(enum.Enum):
    """Which attributes the face records of a file refer to."""

    VERTEX = "%d"
    VERTEX_TEXTURE = "%d/%d"
    VERTEX_TEXTURE_NORMAL = "%d/%d/%d"
    VERTEX_NORMAL = "%d//%d"


# Slot of the index triplet that each "%d" of a face pattern fills.
_SLOTS = {
    ObjType.VERTEX: (0,),
    ObjType.VERTEX_TEXTURE: (0, 1),
    ObjType.VERTEX_TEXTURE_NORMAL: (0, 1, 2),
    ObjType.VERTEX_NORMAL: (0, 2),
}


def _records(filename: PathLike) -> Iterator[Tuple[str, List[str]]]:
    """Yield (keyword, remaining tokens) for each non-empty, non-comment line."""
    with open(filename, encoding="utf-8") as stream:
        for line in stream:
            tokens = line.split()
            if not tokens or tokens[0].startswith("#"):
                continue
            yield tokens[0], tokens[1:]


def _floats(tokens: Sequence[str], count: int) -> List[float]:
    """Read up to ``count`` numbers, stopping at the first unreadable one; missing ones are 0."""
    values: List[float] = []
    for token in tokens[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (count - len(values)))
    return values


def _leading_int(word: str) -> int:
    match = _INT.match(word)
    if match is None:
        raise ValueError(f"Cannot read an integer from {word!r}")
    return int(match.group(1))


def read_positions(filename: PathLike) -> List[Vec3]:
    """Vertex positions ("v" records) of an OBJ file."""
    return [Vec3(*_floats(rest, 3)) for key, rest in _records(filename) if key == "v"]


def read_normals(filename: PathLike) -> List[Vec3]:
    """Vertex normals ("vn" records) of an OBJ file."""
    return [Vec3(*_floats(rest, 3)) for key, rest in _records(filename) if key == "vn"]


def read_texture_uv(filename: PathLike) -> List[Tuple[float, float]]:
    """Texture coordinates ("vt" records) of an OBJ file."""
    return [tuple(_floats(rest, 2)) for key, rest in _records(filename) if key == "vt"]


def read_connectivity(filename: PathLike) -> List[Triangle]:
    """Zero-based position indices of the first three vertices of each face."""
    triangles: List[Triangle] = []
    for key, rest in _records(filename):
        if key != "f":
            continue
        if len(rest) < 3:
            raise ValueError(f"Face record has fewer than 3 vertices: {' '.join(rest)!r}")
        a, b, c = (_leading_int(word) - 1 for word in rest[:3])
        triangles.append((a, b, c))
    return triangles


def _scan(word: str, pattern: str) -> List[int]:
    """Match ``word`` against a pattern of %d fields and literals, as far as it goes."""
    values: List[int] = []
    pos = 0
    rest = pattern
    while rest:
        if rest.startswith("%d"):
            match = _INT.match(word, pos)
            if match is None:
                break
            values.append(int(match.group(1)))
            pos = match.end()
            rest = rest[2:]
        else:
            if pos >= len(word) or word[pos] != rest[0]:
                break
            pos += 1
            rest = rest[1:]
    return values


def extract_face_index(word: str, obj_type: ObjType) -> FaceIndex:
    """Zero-based (position, texture, normal) indices of one face vertex; absent ones are -1."""
    indices = [0, 0, 0]
    for slot, value in zip(_SLOTS[obj_type], _scan(word, obj_type.value)):
        indices[slot] = value
    return indices[0] - 1, indices[1] - 1, indices[2] - 1


def read_faces(filename: PathLike, obj_type: ObjType) -> List[List[FaceIndex]]:
    """All faces as polygons of (position, texture, normal) index triplets."""
    return [
        [extract_face_index(word, obj_type) for word in rest]
        for key, rest in _records(filename)
        if key == "f"
    ]


def triangulate_faces(
    faces: Sequence[Sequence[FaceIndex]],
) -> List[Tuple[FaceIndex, FaceIndex, FaceIndex]]:
    """Split each polygon into a fan of triangles around its first vertex."""
    return [
        (polygon[0], polygon[k + 1], polygon[k + 2])
        for polygon in faces
        for k in range(len(polygon) - 2)
    ]


def _detect_type(texture_uv: Sequence, normals: Sequence) -> ObjType:
    if texture_uv and normals:
        return ObjType.VERTEX_TEXTURE_NORMAL
    if texture_uv:
        return ObjType.VERTEX_TEXTURE
    if normals:
        return ObjType.VERTEX_NORMAL
    return ObjType.VERTEX


def _checked(values: Sequence, index: int, what: str):
    if not 0 <= index < len(values):
        raise ValueError(f"{what} index {index + 1} out of range (1..{len(values)})")
    return values[index]


def _unique_vertices(
    positions: Sequence[Vec3],
    texture_uv: Sequence[Tuple[float, float]],
    normals: Sequence[Vec3],
    triangles: Sequence[Tuple[FaceIndex, FaceIndex, FaceIndex]],
    obj_type: ObjType,
) -> Tuple[Mesh, Dict[FaceIndex, int]]:
    """One output vertex per distinct index triplet, duplicating positions as needed."""
    use_uv = obj_type in (ObjType.VERTEX_TEXTURE, ObjType.VERTEX_TEXTURE_NORMAL)
    use_normal = obj_type in (ObjType.VERTEX_NORMAL, ObjType.VERTEX_TEXTURE_NORMAL)

    mesh = Mesh()
    mapping: Dict[FaceIndex, int] = {}
    for tri in triangles:
        new_triangle = []
        for index in tri:
            if index not in mapping:
                mapping[index] = len(mesh.position)
                mesh.position.append(_checked(positions, index[0], "Position"))
                if use_uv:
                    mesh.uv.append(_checked(texture_uv, index[1], "Texture"))
                if use_normal:
                    mesh.normal.append(_checked(normals, index[2], "Normal"))
            new_triangle.append(mapping[index])
        mesh.connectivity.append(tuple(new_triangle))
    return mesh, mapping


def load_obj_with_correspondence(filename: PathLike) -> Tuple[Mesh, List[List[int]]]:
    """Load an OBJ mesh, also returning for each file vertex the mesh vertices made from it.

    Per-vertex fields absent from the file are left empty.
    """
    if not Path(filename).is_file():
        raise FileNotFoundError(f"File {filename} does not exist")

    positions = read_positions(filename)
    texture_uv = read_texture_uv(filename)
    normals = read_normals(filename)
    if not positions:
        raise ValueError(f"File {filename} has 0 vertices")

    obj_type = _detect_type(texture_uv, normals)
    triangles = triangulate_faces(read_faces(filename, obj_type))
    mesh, mapping = _unique_vertices(positions, texture_uv, normals, triangles, obj_type)

    count = len(positions)

    def order(index: FaceIndex) -> int:
        return index[0] + count * (index[1] + count * index[2])

    correspondence: List[List[int]] = [[] for _ in positions]
    for index in sorted(mapping, key=order):
        correspondence[index[0]].append(mapping[index])
    return mesh, correspondence


def load_obj(filename: PathLike) -> Mesh:
    """Load an OBJ file as a triangle mesh with every per-vertex field filled."""
    mesh, _ = load_obj_with_correspondence(filename)
    return mesh.fill_empty_field()