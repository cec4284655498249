"""
sphere_caster - A minimal Python ray caster

Casts one ray per pixel from a pinhole camera into a fixed scene of two
spheres and colors each pixel by the sphere it reaches first.
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, subtract, dot
from .ray import Ray
from .camera import Camera
from .shapes import Sphere, Intersection, MISS, intersect
from .scene import Scene, create_default_scene, choose_color, RED, BLUE, BLACK
from .renderer import Renderer, RenderSettings, pixel_to_uv, get_platform_info
