"""Builders for simple triangle meshes: triangles, quads, grids, spheres, cubes."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from .mesh import Mesh, Triangle
from .vec3 import Vec3, cross, normalize


def _vec(p: Sequence[float]) -> Vec3:
    return p if isinstance(p, Vec3) else Vec3(*p)


def _connectivity_grid(nu: int, nv: int) -> List[Triangle]:
    """Two triangles per cell of an nu x nv vertex grid stored row by row in u."""
    triangles: List[Triangle] = []
    for ku in range(nu - 1):
        for kv in range(nv - 1):
            k00 = kv + nv * ku
            k10 = kv + 1 + nv * ku
            k01 = kv + nv * (ku + 1)
            k11 = kv + 1 + nv * (ku + 1)
            triangles.append((k00, k10, k11))
            triangles.append((k00, k11, k01))
    return triangles


def _concatenate(parts: Iterable[Mesh]) -> Mesh:
    shape = Mesh()
    for part in parts:
        shape.extend(part)
    return shape


def triangle(
    p0=Vec3(0.0, 0.0, 0.0),
    p1=Vec3(1.0, 0.0, 0.0),
    p2=Vec3(0.0, 1.0, 0.0),
) -> Mesh:
    """A single triangle with a flat normal."""
    p0, p1, p2 = _vec(p0), _vec(p1), _vec(p2)
    n = normalize(cross(normalize(p1 - p0), normalize(p2 - p0)))
    shape = Mesh(
        position=[p0, p1, p2],
        normal=[n, n, n],
        uv=[(0.0, 0.0), (0.0, 1.0), (1.0, 0.0)],
        connectivity=[(0, 1, 2)],
    )
    return shape.fill_empty_field()


def quadrangle(
    p00=Vec3(0.0, 0.0, 0.0),
    p10=Vec3(1.0, 0.0, 0.0),
    p11=Vec3(1.0, 1.0, 0.0),
    p01=Vec3(0.0, 1.0, 0.0),
) -> Mesh:
    """Quad (p00, p10, p11, p01) split into triangles (p00,p10,p11) and (p00,p11,p01)."""
    p00, p10, p11, p01 = _vec(p00), _vec(p10), _vec(p11), _vec(p01)

    def corner_normal(p: Vec3, a: Vec3, b: Vec3) -> Vec3:
        return normalize(cross(normalize(a - p), normalize(b - p)))

    shape = Mesh(
        position=[p00, p10, p11, p01],
        uv=[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)],
        normal=[
            corner_normal(p00, p10, p01),
            corner_normal(p10, p11, p00),
            corner_normal(p11, p01, p10),
            corner_normal(p01, p00, p11),
        ],
        connectivity=[(0, 1, 2), (0, 2, 3)],
    )
    return shape.fill_empty_field()


def sphere(radius: float = 1.0, center=Vec3(0.0, 0.0, 0.0), nu: int = 40, nv: int = 20) -> Mesh:
    """UV sphere with separate pole vertices closing each end."""
    if radius <= 0:
        raise ValueError("Sphere radius should be > 0")
    if nu <= 2 or nv <= 2:
        raise ValueError("Sphere samples should be > 2")
    center = _vec(center)

    shape = Mesh()
    for ku in range(nu):
        for kv in range(nv):
            u = ku / (nu - 1.0)
            alpha = kv / (nv - 1.0)
            v = (1.0 - alpha) / (nv + 1.0) + alpha * nv / (nv + 1.0)
            theta = 2.0 * math.pi * (u - 0.5)
            phi = math.pi * (v - 0.5)
            n = Vec3(
                math.cos(phi) * math.cos(theta),
                math.cos(phi) * math.sin(theta),
                math.sin(phi),
            )
            shape.position.append(n * radius + center)
            shape.normal.append(n)
            shape.uv.append((u, v))

    shape.connectivity = _connectivity_grid(nu, nv)

    south = Vec3(0.0, 0.0, -1.0)
    for ku in range(nu - 1):
        shape.position.append(center + south * radius)
        shape.normal.append(south)
        shape.uv.append((ku / (nu - 1.0), 0.0))
    shape.connectivity.extend(
        (nu * nv + ku, nv * ku, nv * (ku + 1)) for ku in range(nu - 1)
    )

    north = Vec3(0.0, 0.0, 1.0)
    for ku in range(nu - 1):
        shape.position.append(center + north * radius)
        shape.normal.append(north)
        shape.uv.append((ku / (nu - 1.0), 1.0))
    shape.connectivity.extend(
        (nu * nv + nu - 1 + ku, nv - 1 + nv * (ku + 1), nv - 1 + nv * ku)
        for ku in range(nu - 1)
    )

    shape.fill_empty_field()
    return shape.flip_connectivity()


def grid(
    p00=Vec3(0.0, 0.0, 0.0),
    p10=Vec3(1.0, 0.0, 0.0),
    p11=Vec3(1.0, 1.0, 0.0),
    p01=Vec3(0.0, 1.0, 0.0),
    nu: int = 10,
    nv: int = 10,
) -> Mesh:
    """Bilinear patch between four corners sampled on an nu x nv grid."""
    if nu <= 1 or nv <= 1:
        raise ValueError("Grid sample must be >1")
    p00, p10, p11, p01 = _vec(p00), _vec(p10), _vec(p11), _vec(p01)

    shape = Mesh()
    for ku in range(nu):
        for kv in range(nv):
            u = ku / (nu - 1.0)
            v = kv / (nv - 1.0)
            p = (
                p00 * ((1 - u) * (1 - v))
                + p10 * (u * (1 - v))
                + p11 * (u * v)
                + p01 * ((1 - u) * v)
            )
            dpdu = (p01 - p00) * (1 - u) + (p11 - p10) * u
            dpdv = (p10 - p00) * (1 - v) + (p11 - p01) * v
            shape.position.append(p)
            shape.normal.append(normalize(cross(dpdv, dpdu)))
            shape.uv.append((u, v))

    shape.connectivity = _connectivity_grid(nu, nv)
    shape.fill_empty_field()
    return shape.flip_connectivity()


def cube(center=Vec3(0.0, 0.0, 0.0), edge_length: float = 1.0) -> Mesh:
    """Axis-aligned cube made of six independent quads."""
    center = _vec(center)
    u = Vec3(1.0, 1.0, 1.0) * edge_length
    p000 = center - u / 2.0
    p100 = p000 + u * Vec3(1, 0, 0)
    p110 = p000 + u * Vec3(1, 1, 0)
    p010 = p000 + u * Vec3(0, 1, 0)
    p001 = p000 + u * Vec3(0, 0, 1)
    p101 = p000 + u * Vec3(1, 0, 1)
    p111 = p000 + u * Vec3(1, 1, 1)
    p011 = p000 + u * Vec3(0, 1, 1)

    return _concatenate(
        [
            quadrangle(p000, p100, p101, p001),
            quadrangle(p100, p110, p111, p101),
            quadrangle(p110, p010, p011, p111),
            quadrangle(p010, p000, p001, p011),
            quadrangle(p001, p101, p111, p011),
            quadrangle(p100, p000, p010, p110),
        ]
    )


def cubic_grid(
    p000=Vec3(0.0, 0.0, 0.0),
    p100=Vec3(1.0, 0.0, 0.0),
    p110=Vec3(1.0, 1.0, 0.0),
    p010=Vec3(0.0, 1.0, 0.0),
    p001=Vec3(0.0, 0.0, 1.0),
    p101=Vec3(1.0, 0.0, 1.0),
    p111=Vec3(1.0, 1.0, 1.0),
    p011=Vec3(0.0, 1.0, 1.0),
    nx: int = 10,
    ny: int = 10,
    nz: int = 10,
) -> Mesh:
    """Hexahedron surface made of six sampled grids."""
    if nx < 2 or ny < 2 or nz < 2:
        raise ValueError("Nx, Ny, Nz must be >= 2")
    p000, p100, p110, p010 = _vec(p000), _vec(p100), _vec(p110), _vec(p010)
    p001, p101, p111, p011 = _vec(p001), _vec(p101), _vec(p111), _vec(p011)

    return _concatenate(
        [
            grid(p000, p100, p101, p001, nx, nz),
            grid(p100, p110, p111, p101, ny, nz),
            grid(p110, p010, p011, p111, nx, nz),
            grid(p010, p000, p001, p011, ny, nz),
            grid(p001, p101, p111, p011, nx, ny),
            grid(p100, p000, p010, p110, nx, ny),
        ]
    )


def tetrahedron(
    p0=Vec3(0.0, 0.0, 0.0),
    p1=Vec3(1.0, 0.0, 0.0),
    p2=Vec3(0.0, 1.0, 0.0),
    p3=Vec3(0.0, 0.0, 1.0),
) -> Mesh:
    """Tetrahedron made of four independent triangles."""
    p0, p1, p2, p3 = _vec(p0), _vec(p1), _vec(p2), _vec(p3)
    return _concatenate(
        [
            triangle(p0, p2, p1),
            triangle(p0, p1, p3),
            triangle(p1, p2, p3),
            triangle(p2, p0, p3),
        ]
    )