"""
Geometric shapes for the ray caster.

Only spheres are supported. The intersection test reports the distance
along the ray to the first visible point of the surface.
"""

from __future__ import annotations
from typing import NamedTuple
import math

from .vec3 import Point3, subtract, dot
from .ray import Ray


class Intersection(NamedTuple):
    """Result of a ray-sphere test.

    Attributes:
        hit: True if the ray reaches the sphere at a non-negative distance
        distance: Distance along the ray to the surface (0.0 on a miss)
    """
    hit: bool
    distance: float


MISS = Intersection(False, 0.0)


class Sphere:
    """A sphere defined by center and radius."""

    __slots__ = ('center', 'radius')

    def __init__(self, center: Point3, radius: float):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere, must be positive
        """
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> Intersection:
        """Test this sphere against a ray. See :func:`intersect`."""
        return intersect(ray, self)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


def intersect(ray: Ray, sphere: Sphere) -> Intersection:
    """Find where a ray first enters (or, from inside, leaves) a sphere.

    Uses the projected-center method: the origin-to-center vector is
    projected onto the ray direction, and the two roots lie half a chord
    on either side of that projection. ``ray.direction`` must be unit
    length for the projection to be a distance.

    When the origin is inside the sphere the nearer root is behind it, so
    the farther root is the visible surface. A tangent ray produces a
    single double root and counts as a hit.
    """
    s = subtract(sphere.center, ray.origin)
    sd = dot(s, ray.direction)
    ss = dot(s, s)

    disc = sd * sd - ss + sphere.radius * sphere.radius

    # The line carrying the ray passes outside the sphere
    if disc < 0:
        return MISS

    q = math.sqrt(disc)
    p1 = sd - q
    p2 = sd + q

    # p1 <= p2, so p1 is the nearest root whenever it is in front
    if p1 >= 0:
        return Intersection(True, p1)
    if p2 >= 0:
        return Intersection(True, p2)
    return MISS
