"""
Materials describe how light scatters off a surface.

Implements:
- Lambertian diffuse (textured albedo)
- Metal (specular reflection with fuzz)
- Dielectric (glass, water - refraction with Schlick reflectance)

A material never emits light: returning None from `scatter` means the
path is absorbed and contributes nothing from that point onward.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union, TYPE_CHECKING
import math

import numpy as np

from .vec3 import Vec3, Color
from .ray import Ray
from .textures import Texture, SolidColor, check_color

if TYPE_CHECKING:
    from .shapes import HitRecord


@dataclass
class ScatterResult:
    """Result of a material scatter operation."""
    scattered_ray: Ray
    attenuation: Color


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation for Fresnel reflectance."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * pow(1 - cosine, 5)


class Material(ABC):
    """Abstract base class for materials."""

    @abstractmethod
    def scatter(self, ray_in: Ray, hit: HitRecord, rng: np.random.Generator) -> Optional[ScatterResult]:
        """Compute the scattered ray and attenuation.

        Args:
            ray_in: The incoming ray
            hit: Intersection record for the surface being shaded
            rng: Random source owned by the calling unit of work

        Returns:
            ScatterResult if ray scatters, None if absorbed
        """


class Lambertian(Material):
    """Diffuse material with Lambertian (ideal matte) scattering."""

    def __init__(self, albedo: Union[Texture, Color]):
        """Create a Lambertian material.

        Args:
            albedo: A texture, or a plain color with components in [0, 1]

        Raises:
            ValueError: If a plain color has components outside [0, 1]
        """
        if isinstance(albedo, Texture):
            self.albedo = albedo
        else:
            check_color(albedo, "Lambertian albedo")
            self.albedo = SolidColor(albedo)

    def scatter(self, ray_in: Ray, hit: HitRecord, rng: np.random.Generator) -> Optional[ScatterResult]:
        scatter_direction = hit.normal + Vec3.random_in_unit_sphere(rng)

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = hit.normal

        return ScatterResult(
            scattered_ray=Ray(hit.point, scatter_direction, ray_in.time),
            attenuation=self.albedo.value(hit.u, hit.v, hit.point)
        )

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"


class Metal(Material):
    """Metallic material with specular reflection."""

    def __init__(self, albedo: Color, fuzz: float = 0.0):
        """Create a metal material.

        Args:
            albedo: The reflection color, components in [0, 1]
            fuzz: Radius of the reflection perturbation (0 = mirror, 1 = very rough)

        Raises:
            ValueError: If albedo or fuzz is out of range
        """
        check_color(albedo, "Metal albedo")
        if not 0.0 <= fuzz <= 1.0:
            raise ValueError(f"Metal fuzz must lie in [0, 1], got {fuzz}")
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, hit: HitRecord, rng: np.random.Generator) -> Optional[ScatterResult]:
        reflected = ray_in.direction.normalize().reflect(hit.normal)
        if self.fuzz > 0:
            reflected = reflected + Vec3.random_in_unit_sphere(rng) * self.fuzz

        # Only scatter if reflection leaves the surface
        if reflected.dot(hit.normal) <= 0:
            return None
        return ScatterResult(
            scattered_ray=Ray(hit.point, reflected, ray_in.time),
            attenuation=self.albedo
        )

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo}, fuzz={self.fuzz})"


class Dielectric(Material):
    """Dielectric (glass-like) material with refraction."""

    def __init__(self, ior: float = 1.5):
        """Create a dielectric material.

        Args:
            ior: Index of refraction (1.0 = air, 1.5 = glass, 2.4 = diamond)

        Raises:
            ValueError: If ior is not positive
        """
        if ior <= 0:
            raise ValueError(f"Index of refraction must be positive, got {ior}")
        self.ior = ior

    def refraction_ratio(self, front_face: bool) -> float:
        """Ratio n1/n2 for a ray entering (front face) or leaving the medium."""
        return 1.0 / self.ior if front_face else self.ior

    def scatter(self, ray_in: Ray, hit: HitRecord, rng: np.random.Generator) -> Optional[ScatterResult]:
        refraction_ratio = self.refraction_ratio(hit.front_face)

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(hit.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0

        if cannot_refract or rng.random() < schlick(cos_theta, refraction_ratio):
            direction = unit_direction.reflect(hit.normal)
        else:
            direction = unit_direction.refract(hit.normal, refraction_ratio)

        return ScatterResult(
            scattered_ray=Ray(hit.point, direction, ray_in.time),
            attenuation=Color(1.0, 1.0, 1.0)
        )

    def __repr__(self) -> str:
        return f"Dielectric(ior={self.ior})"
