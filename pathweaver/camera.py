"""
Camera module for generating primary rays.

Supports:
- Perspective projection
- Depth of field (defocus blur)
- Configurable field of view
- Arbitrary positioning via look-at
- Motion blur (shutter time range)
"""

from __future__ import annotations
import math

import numpy as np

from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A thin-lens camera with depth of field and motion blur.

    All derived quantities are computed once at construction; `get_ray`
    only reads them, so one camera can serve many rendering threads.
    """

    def __init__(
        self,
        look_from: Point3,
        look_at: Point3,
        vup: Vec3 = Vec3(0, 1, 0),
        vfov: float = 90.0,
        aspect_ratio: float = 16.0 / 9.0,
        aperture: float = 0.0,
        focus_dist: float = 1.0,
        shutter_open: float = 0.0,
        shutter_close: float = 0.0
    ):
        """Create a camera.

        Args:
            look_from: Camera position in world space
            look_at: Point the camera is looking at
            vup: World up vector (usually (0, 1, 0))
            vfov: Vertical field of view in degrees
            aspect_ratio: Width / Height ratio
            aperture: Lens diameter for depth of field (0 = pinhole)
            focus_dist: Distance to the focus plane
            shutter_open: Time when shutter opens (for motion blur)
            shutter_close: Time when shutter closes (for motion blur)

        Raises:
            ValueError: If any parameter is out of range or the view basis
                is degenerate
        """
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"vfov must lie in (0, 180) degrees, got {vfov}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ValueError(f"aperture must be >= 0, got {aperture}")
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")
        if shutter_close < shutter_open:
            raise ValueError(
                f"shutter_close ({shutter_close}) must not precede shutter_open ({shutter_open})"
            )

        forward = look_from - look_at
        if forward.near_zero():
            raise ValueError("look_from and look_at must be distinct points")
        right = vup.cross(forward)
        if right.near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")

        theta = math.radians(vfov)
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        # Compute orthonormal camera basis
        self.w = forward.normalize()    # Points backward from camera
        self.u = right.normalize()      # Points right
        self.v = self.w.cross(self.u)   # Points up

        self.origin = look_from
        self.horizontal = self.u * (2 * half_width * focus_dist)
        self.vertical = self.v * (2 * half_height * focus_dist)
        self.lower_left_corner = (
            self.origin
            - self.horizontal / 2
            - self.vertical / 2
            - self.w * focus_dist
        )

        self.lens_radius = aperture / 2
        self.shutter_open = shutter_open
        self.shutter_close = shutter_close

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generate a ray for the given coordinates on the image plane.

        Args:
            s: Horizontal coordinate [0, 1] (0 = left, 1 = right)
            t: Vertical coordinate [0, 1] (0 = bottom, 1 = top)
            rng: Random source for lens and shutter sampling

        Returns:
            A ray from a point on the lens through the focus plane
        """
        # Depth of field: random point on lens
        if self.lens_radius > 0:
            rd = Vec3.random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vec3(0, 0, 0)

        direction = (
            self.lower_left_corner
            + self.horizontal * s
            + self.vertical * t
            - self.origin
            - offset
        )

        # Motion blur: random time within shutter interval
        if self.shutter_close > self.shutter_open:
            time = rng.uniform(self.shutter_open, self.shutter_close)
        else:
            time = self.shutter_open

        return Ray(self.origin + offset, direction, float(time))

    def __repr__(self) -> str:
        return f"Camera(origin={self.origin}, looking_at={self.lower_left_corner + self.horizontal/2 + self.vertical/2})"
