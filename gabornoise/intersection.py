"""Ray intersections with spheres and planes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .vec3 import Vec3, dot, normalize


@dataclass
class Intersection:
    """Result of a ray query; ``valid`` tells whether something was hit."""

    valid: bool = False
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    normal: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))


def intersection_ray_sphere(
    ray_origin: Vec3, ray_direction: Vec3, sphere_center: Vec3, sphere_radius: float
) -> Intersection:
    """First hit of a ray (unit direction) with a sphere, in front of the origin."""
    d = ray_origin - sphere_center
    b = dot(ray_direction, d)
    c = dot(d, d) - sphere_radius * sphere_radius
    delta = b * b - c
    if delta >= 0:
        root = math.sqrt(delta)
        t0 = -b - root
        t1 = -b + root
        t = t0 if t0 > 0 else t1
        if t > 0:
            position = ray_origin + ray_direction * t
            return Intersection(True, position, normalize(position - sphere_center))
    return Intersection()


def intersection_ray_spheres_closest(
    ray_origin: Vec3,
    ray_direction: Vec3,
    sphere_centers: Iterable[Vec3],
    sphere_radius: float,
) -> Tuple[Intersection, int]:
    """Closest hit among equal-radius spheres and the index of the sphere hit (0 if none)."""
    closest = Intersection()
    closest_index = 0
    closest_distance = math.inf
    for index, center in enumerate(sphere_centers):
        hit = intersection_ray_sphere(ray_origin, ray_direction, center, sphere_radius)
        if not hit.valid:
            continue
        distance = (hit.position - ray_origin).length()
        if not closest.valid or distance < closest_distance:
            closest = hit
            closest_index = index
            closest_distance = distance
    return closest, closest_index


def intersection_ray_plane(
    ray_origin: Vec3, ray_direction: Vec3, plane_position: Vec3, plane_normal: Vec3
) -> Intersection:
    """Hit of a ray with a plane, in front of the origin; rays parallel to it miss."""
    denominator = dot(ray_direction, plane_normal)
    if denominator == 0:
        return Intersection()
    t = -dot(ray_origin - plane_position, plane_normal) / denominator
    if t > 0:
        return Intersection(True, ray_origin + ray_direction * t, plane_normal)
    return Intersection()