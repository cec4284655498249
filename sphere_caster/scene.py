"""
The fixed two-sphere scene and its per-ray coloring policy.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple

from .vec3 import Point3
from .ray import Ray
from .camera import Camera
from .shapes import Sphere, Intersection


RGB = Tuple[int, int, int]

RED: RGB = (255, 0, 0)
BLUE: RGB = (0, 0, 255)
BLACK: RGB = (0, 0, 0)


def choose_color(
    hit_a: Intersection,
    hit_b: Intersection,
    color_a: RGB,
    color_b: RGB,
    background: RGB = BLACK
) -> RGB:
    """Pick the color of whichever sphere the ray reaches first.

    When both spheres are hit, A wins ties as well as when it is closer.
    """
    if not hit_a.hit and not hit_b.hit:
        return background
    if not hit_b.hit:
        return color_a
    if not hit_a.hit:
        return color_b
    if hit_a.distance <= hit_b.distance:
        return color_a
    return color_b


@dataclass(frozen=True)
class Scene:
    """Two spheres seen through a camera.

    Attributes:
        sphere_a, sphere_b: The two spheres
        camera: The camera rays are generated from
        color_a, color_b: 8-bit RGB colors for each sphere
        background: Color for rays that hit nothing
    """
    sphere_a: Sphere
    sphere_b: Sphere
    camera: Camera
    color_a: RGB = RED
    color_b: RGB = BLUE
    background: RGB = BLACK

    def shade_ray(self, ray: Ray) -> RGB:
        """Intersect both spheres and return the resulting pixel color."""
        return choose_color(
            self.sphere_a.intersect(ray),
            self.sphere_b.intersect(ray),
            self.color_a,
            self.color_b,
            self.background
        )


def create_default_scene() -> Scene:
    """Create the standard scene: a large red sphere behind a small blue one."""
    sphere_a = Sphere(Point3(-1, 1, 10), 2)
    sphere_b = Sphere(Point3(1, -1, 4), 1)

    camera = Camera(Point3(0, 0, 0), yaw=0.0, pitch=0.0, fov=math.radians(75))

    return Scene(sphere_a, sphere_b, camera)
