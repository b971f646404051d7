import math

import pytest

from gabornoise.obj import (
    ObjType,
    extract_face_index,
    load_obj,
    load_obj_with_correspondence,
    read_connectivity,
    read_faces,
    read_normals,
    read_positions,
    read_texture_uv,
    triangulate_faces,
)
from gabornoise.vec3 import Vec3


def _write(tmp_path, text, name="model.obj"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


QUAD = """# a unit square
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3 4
"""

UV_QUAD = """v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 1
f 1/1 2/1 3/1
f 1/2 3/2 4/2
"""


def test_read_positions_skips_comments(tmp_path):
    path = _write(tmp_path, "# v 9 9 9\nv 1.5 -2 3\nvn 0 0 1\nv 4 5 6\n")
    assert read_positions(path) == [Vec3(1.5, -2.0, 3.0), Vec3(4.0, 5.0, 6.0)]


def test_read_normals_and_texture(tmp_path):
    path = _write(tmp_path, "v 1 2 3\nvn 0 1 0\nvt 0.25 0.75\nvt 1 0\n")
    assert read_normals(path) == [Vec3(0.0, 1.0, 0.0)]
    assert read_texture_uv(path) == [(0.25, 0.75), (1.0, 0.0)]


def test_read_connectivity_uses_position_index(tmp_path):
    path = _write(tmp_path, QUAD.replace("f 1 2 3 4", "f 1/1 2/2 3/3"))
    assert read_connectivity(path) == [(0, 1, 2)]


def test_read_connectivity_short_face_raises(tmp_path):
    path = _write(tmp_path, "v 0 0 0\nf 1 2\n")
    with pytest.raises(ValueError):
        read_connectivity(path)


@pytest.mark.parametrize(
    "word, obj_type, expected",
    [
        ("3", ObjType.VERTEX, (2, -1, -1)),
        ("3/4", ObjType.VERTEX_TEXTURE, (2, 3, -1)),
        ("3//5", ObjType.VERTEX_NORMAL, (2, -1, 4)),
        ("1/2/3", ObjType.VERTEX_TEXTURE_NORMAL, (0, 1, 2)),
    ],
)
def test_extract_face_index(word, obj_type, expected):
    assert extract_face_index(word, obj_type) == expected


def test_extract_face_index_stops_at_mismatch():
    assert extract_face_index("7", ObjType.VERTEX_TEXTURE_NORMAL) == (6, -1, -1)


def test_read_faces_keeps_polygons(tmp_path):
    path = _write(tmp_path, QUAD)
    faces = read_faces(path, ObjType.VERTEX)
    assert len(faces) == 1
    assert [index[0] for index in faces[0]] == [0, 1, 2, 3]


def test_triangulate_faces_fan():
    a, b, c, d = (0, -1, -1), (1, -1, -1), (2, -1, -1), (3, -1, -1)
    assert triangulate_faces([[a, b, c, d]]) == [(a, b, c), (a, c, d)]
    assert triangulate_faces([[a, b]]) == []


def test_load_obj_quad(tmp_path):
    mesh = load_obj(_write(tmp_path, QUAD))
    assert len(mesh.position) == 4
    assert len(mesh.connectivity) == 2
    assert all(math.isclose(n.length(), 1.0) for n in mesh.normal)
    assert mesh.color == [Vec3(1.0, 1.0, 1.0)] * 4
    assert mesh.uv == [(0.0, 0.0)] * 4


def test_load_obj_duplicates_vertices_with_different_uv(tmp_path):
    mesh, correspondence = load_obj_with_correspondence(_write(tmp_path, UV_QUAD))
    assert len(mesh.position) == 6
    assert len(mesh.uv) == 6
    assert mesh.normal == []
    assert correspondence == [[0, 3], [1], [2, 4], [5]]
    positions = read_positions(_write(tmp_path, UV_QUAD))
    for vertex_in, outputs in enumerate(correspondence):
        for vertex_out in outputs:
            assert mesh.position[vertex_out] == positions[vertex_in]


def test_load_obj_with_normals(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\nf 1//1 2//1 3//1\n"
    mesh = load_obj(_write(tmp_path, text))
    assert mesh.normal == [Vec3(0.0, 0.0, 1.0)] * 3
    assert mesh.connectivity == [(0, 1, 2)]


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")


def test_load_obj_without_vertices(tmp_path):
    with pytest.raises(ValueError):
        load_obj(_write(tmp_path, "# nothing\n"))


def test_load_obj_index_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 9\n"))