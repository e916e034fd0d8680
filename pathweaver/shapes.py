"""
Geometric shapes for the path tracer.

Each shape implements the Hittable interface with a `hit` method that
returns the nearest intersection inside an open parametric window.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TYPE_CHECKING
import math

from .vec3 import Vec3, Point3
from .ray import Ray

if TYPE_CHECKING:
    from .materials import Material


@dataclass
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        point: The intersection point in world space
        normal: Unit surface normal, always pointing against the ray
        t: The ray parameter at intersection
        front_face: True if the geometric normal already opposed the ray
        material: The material of the primitive that was hit (shared, not owned)
        u, v: Surface coordinates at the hit point
    """
    point: Point3
    normal: Vec3
    t: float
    front_face: bool
    material: Optional[Material] = None
    u: float = 0.0
    v: float = 0.0

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Set the normal to always point against the ray direction.

        Args:
            ray: The incoming ray
            outward_normal: The unit geometric normal pointing outward from surface
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test
            t_min: Lower bound of the window (exclusive, avoids self-intersection)
            t_max: Upper bound of the window (exclusive)

        Returns:
            HitRecord for the nearest intersection in the window, None otherwise
        """


def sphere_uv(p: Vec3) -> tuple[float, float]:
    """Get spherical UV coordinates for a point on the unit sphere.

    u: returned value [0,1] of angle around the Y axis from X=-1
    v: returned value [0,1] of angle from Y=-1 to Y=+1
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def _hit_sphere(
    center: Point3,
    radius: float,
    material: Material,
    ray: Ray,
    t_min: float,
    t_max: float
) -> Optional[HitRecord]:
    """Ray-sphere intersection using the half-b quadratic.

    (P-C)·(P-C) = r² with P = O + tD expands to
    t²(D·D) + 2t(D·(O-C)) + (O-C)·(O-C) - r² = 0.
    """
    oc = ray.origin - center
    a = ray.direction.length_squared()
    if a == 0:
        return None
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius

    discriminant = half_b * half_b - a * c
    if discriminant < 0:
        return None

    sqrtd = math.sqrt(discriminant)

    # Find the nearest root in the acceptable range
    root = (-half_b - sqrtd) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrtd) / a
        if root <= t_min or root >= t_max:
            return None

    point = ray.at(root)
    if radius > 0:
        outward_normal = (point - center) / radius
    else:
        # Point sphere: no geometric normal, face the incoming ray
        outward_normal = -ray.direction.normalize()

    u, v = sphere_uv(outward_normal)

    hit_record = HitRecord(
        point=point,
        normal=outward_normal,
        t=root,
        front_face=True,
        material=material,
        u=u,
        v=v
    )
    hit_record.set_face_normal(ray, outward_normal)
    return hit_record


class Sphere(Hittable):
    """A static sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float, material: Material):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere, must be >= 0
            material: Material for shading (may be shared with other spheres)

        Raises:
            ValueError: If radius is negative
        """
        if radius < 0:
            raise ValueError(f"Sphere radius must be >= 0, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class MovingSphere(Hittable):
    """A sphere that moves linearly between two positions over time.

    Used for motion blur effects.
    """

    def __init__(
        self,
        center0: Point3,
        center1: Point3,
        time0: float,
        time1: float,
        radius: float,
        material: Material
    ):
        """Create a moving sphere.

        Args:
            center0: Center position at time0
            center1: Center position at time1
            time0: Start time
            time1: End time, must not precede time0
            radius: Radius of the sphere, must be >= 0
            material: Material for shading

        Raises:
            ValueError: If radius is negative or time1 < time0
        """
        if radius < 0:
            raise ValueError(f"Sphere radius must be >= 0, got {radius}")
        if time1 < time0:
            raise ValueError(f"time1 ({time1}) must not be earlier than time0 ({time0})")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = float(radius)
        self.material = material

    def center(self, time: float) -> Point3:
        """Get the center position at a given time."""
        if self.time1 == self.time0:
            return self.center0
        t = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * t

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test ray-sphere intersection at the ray's time."""
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def __repr__(self) -> str:
        return (
            f"MovingSphere(center0={self.center0}, center1={self.center1}, "
            f"time=[{self.time0}, {self.time1}], radius={self.radius})"
        )


class HittableList(Hittable):
    """A collection of hittable objects."""

    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable) -> None:
        """Add an object to the list."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all objects."""
        self.objects.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Find the closest intersection among all objects.

        The window's far end shrinks to each accepted hit, so later
        objects can only replace it with something strictly closer.
        """
        closest_hit: Optional[HitRecord] = None
        closest_t = t_max

        for obj in self.objects:
            hit_record = obj.hit(ray, t_min, closest_t)
            if hit_record is not None:
                closest_hit = hit_record
                closest_t = hit_record.t

        return closest_hit

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)
