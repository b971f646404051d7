"""Three-dimensional vectors with the usual arithmetic and geometric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec3:
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __lt__(self, other: Vec3) -> bool:
        """True when every component is strictly smaller."""
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __ge__(self, other: Vec3) -> bool:
        """True when every component is greater or equal."""
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def squared_length(self) -> float:
        return dot(self, self)

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        norm = self.length()
        if norm == 0.0:
            return self
        return self * (1.0 / norm)

    def two_orthogonals(self) -> Tuple[Vec3, Vec3]:
        """Two vectors orthogonal to this one (and to each other)."""
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax < ay:
            if ax < az:
                u = Vec3(0.0, -self.z, self.y)
            else:
                u = Vec3(-self.y, self.x, 0.0)
        else:
            if ay < az:
                u = Vec3(self.z, 0.0, -self.x)
            else:
                u = Vec3(-self.y, self.x, 0.0)
        return u, cross(self, u)

    def project_on(self, n: Vec3, p: Vec3) -> Vec3:
        """Project onto the plane through ``p`` with unit normal ``n``."""
        w = dot(self - p, n)
        return self - n * w


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def length(a: Vec3) -> float:
    return a.length()


def dist(a: Vec3, b: Vec3) -> float:
    return (a - b).length()


def normalize(a: Vec3) -> Vec3:
    return a.normalized()


def mix(u: Vec3, v: Vec3, alpha: float) -> Vec3:
    """Linear blend: ``u`` at alpha 0, ``v`` at alpha 1."""
    return u * (1.0 - alpha) + v * alpha


def cartesian_to_polar(v: Vec3) -> Vec3:
    """Return (length, angle with z axis, angle of xy projection with x axis)."""
    radius = length(v)

    if v.z > 0.0:
        theta = math.atan(math.sqrt(v.x * v.x + v.y * v.y) / v.z)
    elif v.z < 0.0:
        theta = math.atan(math.sqrt(v.x * v.x + v.y * v.y) / v.z) + math.pi
    else:
        theta = math.pi * 0.5

    if v.x > 0.0:
        phi = math.atan(v.y / v.x)
    elif v.x < 0.0:
        phi = math.atan(v.y / v.x) + math.pi
    elif v.y > 0.0:
        phi = math.pi * 0.5
    else:
        phi = -math.pi * 0.5

    return Vec3(radius, theta, phi)


def polar_to_cartesian(v: Vec3) -> Vec3:
    """Inverse of :func:`cartesian_to_polar`."""
    radius, theta, phi = v
    return Vec3(
        radius * math.sin(theta) * math.cos(phi),
        radius * math.sin(theta) * math.sin(phi),
        radius * math.cos(theta),
    )