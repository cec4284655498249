"""
Camera module for generating primary rays.

A pinhole camera placed at a position and oriented by yaw and pitch.
Image coordinates are resolution independent: u and v both run over
[-1, 1] with (0, 0) at the image center.
"""

from __future__ import annotations
import math
from .vec3 import Vec3, Point3
from .ray import Ray


WORLD_UP = Vec3(0, 1, 0)


class Camera:
    """A pinhole camera with a fixed position, orientation and field of view."""

    def __init__(self, position: Point3, yaw: float = 0.0, pitch: float = 0.0, fov: float = math.pi / 2):
        """Create a camera.

        Args:
            position: Camera position in world space
            yaw: Rotation about the world up axis, in radians
            pitch: Elevation above the horizontal plane, in radians
                (must stay strictly inside (-pi/2, pi/2))
            fov: Field of view in radians, in (0, pi)

        With yaw = pitch = 0 the camera looks down +Z, with +X to the
        right and +Y up.
        """
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov

        self.forward = Vec3(
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.cos(yaw) * math.cos(pitch)
        ).normalize()
        self.right = WORLD_UP.cross(self.forward).normalize()
        self.up = self.forward.cross(self.right)

        # Half-height of the view plane at unit distance
        self.half_height = math.tan(fov / 2)

    def trace_ray(self, u: float, v: float) -> Ray:
        """Generate the ray through normalized image coordinates (u, v).

        Args:
            u: Horizontal coordinate [-1, 1] (-1 = left, 1 = right)
            v: Vertical coordinate [-1, 1]

        Returns:
            A ray from the camera position with a unit-length direction
        """
        du = u * self.half_height
        dv = v * self.half_height

        direction = self.forward + self.right * du + self.up * dv
        return Ray(self.position, direction.normalize())

    def __repr__(self) -> str:
        return (
            f"Camera(position={self.position}, yaw={self.yaw:.4f}, "
            f"pitch={self.pitch:.4f}, fov={self.fov:.4f})"
        )
