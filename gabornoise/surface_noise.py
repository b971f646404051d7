"""Isotropic Gabor noise evaluated on surfaces through local tangent planes."""

from __future__ import annotations

import math
from typing import Tuple

from .gabor import _cell_seed, gabor
from .prng import UINT_MAX, PseudoRandomNumberGenerator
from .vec3 import Vec3, cross, dot, length

_EPS = 1e-2


def projection_3d(m: Vec3, p: Vec3, n: Vec3) -> Vec3:
    """Project point ``m`` onto the plane through ``p`` with normal ``n``."""
    alpha = dot(p - m, n) / dot(n, n)
    return m + n * alpha


def projection_2d(m: Vec3, p: Vec3, n: Vec3) -> Tuple[float, float]:
    """Coordinates of the projection of ``m`` in a 2D frame of the plane (p, n)."""
    p_orth = projection_3d(m, p, n)
    pn = dot(p, n)
    if abs(n.x) > _EPS:
        u1 = Vec3((pn - n.y) / n.x, 1.0, 0.0)
        if length(u1 - p) < _EPS:
            u1 = Vec3((pn - n.z) / n.x, 0.0, 1.0)
    elif abs(n.y) > _EPS:
        u1 = Vec3(1.0, (pn - n.x) / n.y, 0.0)
        if length(u1 - p) < _EPS:
            u1 = Vec3(0.0, (pn - n.z) / n.y, 1.0)
    else:
        u1 = Vec3(1.0, 0.0, (pn - n.x) / n.z)
        if length(u1 - p) < _EPS:
            u1 = Vec3(0.0, 1.0, (pn - n.y) / n.z)

    u1 = u1 / length(u1)
    u2 = cross(n, u1)
    return dot(p_orth, u1), dot(p_orth, u2)


class SurfaceNoise:
    """Isotropic surface Gabor noise with a single frequency magnitude."""

    def __init__(
        self,
        k: float,
        a: float,
        f0: float,
        number_of_impulses_per_kernel: float,
        random_offset: int,
        is_periodic: bool,
        period: int = 256,
    ) -> None:
        if a == 0:
            raise ValueError("Gaussian width a must be nonzero")
        if period <= 0:
            raise ValueError("period must be positive")
        self.k = k
        self.a = a
        self.f0 = f0
        self.random_offset = int(random_offset) & UINT_MAX
        self.is_periodic = is_periodic
        self.period = int(period)
        self.kernel_radius = 1.0 / a
        self.impulse_density = number_of_impulses_per_kernel / (
            math.pi * self.kernel_radius**2
        )

    def intensity(self, x: float, y: float, z: float, n) -> float:
        """Noise value at (x, y, z) on a surface with normal ``n``."""
        normal = n if isinstance(n, Vec3) else Vec3(*n)
        x /= self.kernel_radius
        y /= self.kernel_radius
        z /= self.kernel_radius
        cell_x = math.floor(x)
        cell_y = math.floor(y)
        cell_z = math.floor(z)
        frac_x = x - cell_x
        frac_y = y - cell_y
        frac_z = y - cell_y
        return sum(
            self.cell_noise(
                cell_x + i, cell_y + j, cell_z + k,
                frac_x - i, frac_y - j, frac_z - k,
                normal,
            )
            for i in (-1, 0, 1)
            for j in (-1, 0, 1)
            for k in (-1, 0, 1)
        )

    def cell_noise(self, i: int, j: int, k: int, x: float, y: float, z: float, n) -> float:
        """Contribution of the impulses of cell (i, j, k) at local position (x, y, z)."""
        normal = n if isinstance(n, Vec3) else Vec3(*n)
        seed = _cell_seed(i, j, self.random_offset, self.is_periodic, self.period)
        prng = PseudoRandomNumberGenerator(seed)

        impulses_per_cell = self.impulse_density * self.kernel_radius**3
        count = prng.poisson(impulses_per_cell)

        p = Vec3(x, y, z)
        p_plane = projection_2d(p, p, normal)
        noise = 0.0
        for _ in range(count):
            impulse = Vec3(prng.uniform_0_1(), prng.uniform_0_1(), prng.uniform_0_1())
            weight = 1.0 - length(impulse - projection_3d(impulse, p, normal))
            w0i = prng.uniform(0.0, 2.0 * 3.14)

            impulse_plane = projection_2d(impulse, p, normal)
            dx = p_plane[0] - impulse_plane[0]
            dy = p_plane[1] - impulse_plane[1]
            if math.hypot(dx, dy) < 1.0:
                noise += weight * gabor(
                    self.k,
                    self.a,
                    self.f0,
                    w0i,
                    self.kernel_radius * dx,
                    self.kernel_radius * dy,
                )
        return noise

    def variance(self) -> float:
        """Analytic variance of the noise."""
        return (self.impulse_density * self.k**2 / (12.0 * self.a**2)) * (
            1.0 + math.exp(-2.0 * math.pi * self.f0**2 / self.a**2)
        )