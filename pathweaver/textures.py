"""
Texture system for the path tracer.

Implements:
- Solid color textures
- 3D checker pattern
- Perlin gradient noise with turbulence (marble)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import math

import numpy as np

from .vec3 import Color, Point3


def check_color(color: Color, name: str) -> None:
    """Raise ValueError unless every component of a reflectance color lies in [0, 1]."""
    if any(c < 0.0 or c > 1.0 for c in color):
        raise ValueError(f"{name} components must lie in [0, 1], got {color}")


class Texture(ABC):
    """Abstract base class for textures."""

    @abstractmethod
    def value(self, u: float, v: float, point: Point3) -> Color:
        """Get the texture color at a surface coordinate and hit point.

        Args:
            u: Horizontal surface coordinate [0, 1]
            v: Vertical surface coordinate [0, 1]
            point: 3D point in world space (for procedural textures)

        Returns:
            Color at this location
        """


class SolidColor(Texture):
    """A solid color texture."""

    def __init__(self, color: Color):
        check_color(color, "SolidColor")
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> 'SolidColor':
        return cls(Color(r, g, b))

    def value(self, u: float, v: float, point: Point3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color})"


class CheckerTexture(Texture):
    """A 3D checker pattern built from the sign of a product of sines.

    The pattern depends only on the world-space point, not on (u, v), so it
    stays consistent across any surface parameterization. One checker cell
    along each axis spans pi / scale.
    """

    def __init__(self, even: Texture, odd: Texture, scale: float = 10.0):
        """Create a checker texture.

        Args:
            even: Texture where the sine product is non-negative
            odd: Texture where the sine product is negative
            scale: Spatial frequency of the pattern

        Raises:
            ValueError: If scale is not positive
        """
        if scale <= 0:
            raise ValueError(f"Checker scale must be positive, got {scale}")
        self.even = even
        self.odd = odd
        self.scale = scale

    @classmethod
    def from_colors(cls, c1: Color, c2: Color, scale: float = 10.0) -> 'CheckerTexture':
        return cls(SolidColor(c1), SolidColor(c2), scale)

    @property
    def period(self) -> float:
        """Width of one checker cell along an axis."""
        return math.pi / self.scale

    def value(self, u: float, v: float, point: Point3) -> Color:
        s = self.scale
        sines = math.sin(s * point.x) * math.sin(s * point.y) * math.sin(s * point.z)
        if sines < 0:
            return self.odd.value(u, v, point)
        return self.even.value(u, v, point)


class Perlin:
    """Gradient noise over a fixed table of random unit vectors.

    The tables are generated once, at construction, from a seeded numpy
    Generator and are never modified afterwards, so one instance can be
    shared between rendering threads.
    """

    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)
        gradients = rng.uniform(-1.0, 1.0, (self.POINT_COUNT, 3))
        gradients /= np.linalg.norm(gradients, axis=1, keepdims=True)
        self._gradients = gradients
        self._perm_x = self._generate_permutation(rng)
        self._perm_y = self._generate_permutation(rng)
        self._perm_z = self._generate_permutation(rng)

    def _generate_permutation(self, rng: np.random.Generator) -> np.ndarray:
        """Generate one permutation table of the lattice indices."""
        return rng.permutation(self.POINT_COUNT).astype(np.int64)

    def noise(self, point: Point3) -> float:
        """Compute gradient noise at a point, roughly in [-1, 1]."""
        x, y, z = point.x, point.y, point.z
        fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
        u, v, w = x - fx, y - fy, z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite smoothing of the lattice weights
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        mask = self.POINT_COUNT - 1
        accum = 0.0
        for di in range(2):
            px = self._perm_x[(i + di) & mask]
            wx = uu if di else 1 - uu
            for dj in range(2):
                py = self._perm_y[(j + dj) & mask]
                wy = vv if dj else 1 - vv
                for dk in range(2):
                    pz = self._perm_z[(k + dk) & mask]
                    wz = ww if dk else 1 - ww
                    g = self._gradients[px ^ py ^ pz]
                    dot = g[0] * (u - di) + g[1] * (v - dj) + g[2] * (w - dk)
                    accum += wx * wy * wz * dot
        return float(accum)

    def turbulence(self, point: Point3, depth: int = 7) -> float:
        """Multi-octave noise: frequency doubles and weight halves per octave."""
        accum = 0.0
        weight = 1.0
        p = point

        for _ in range(depth):
            accum += weight * self.noise(p)
            weight *= 0.5
            p = p * 2

        return abs(accum)


class NoiseTexture(Texture):
    """Marble-like procedural texture driven by Perlin turbulence.

    value = color * 0.5 * (1 + sin(scale * z + amplitude * turbulence(scale * p)))
    """

    def __init__(
        self,
        scale: float = 1.0,
        turbulence_amplitude: float = 10.0,
        depth: int = 7,
        color: Optional[Color] = None,
        seed: Optional[int] = None
    ):
        """Create a noise texture.

        Args:
            scale: Frequency of the noise field and of the sine stripes along z
            turbulence_amplitude: How strongly turbulence bends the stripes
            depth: Number of turbulence octaves
            color: Base color (the pattern modulates its intensity)
            seed: Seed for the gradient tables (None = fresh entropy)

        Raises:
            ValueError: If scale is not positive, depth is less than 1, or
                color has components outside [0, 1]
        """
        if scale <= 0:
            raise ValueError(f"Noise scale must be positive, got {scale}")
        if depth < 1:
            raise ValueError(f"Turbulence depth must be >= 1, got {depth}")
        self.scale = scale
        self.turbulence_amplitude = turbulence_amplitude
        self.depth = depth
        if color is None:
            color = Color(1, 1, 1)
        check_color(color, "NoiseTexture color")
        self.color = color
        self.noise = Perlin(seed)

    def value(self, u: float, v: float, point: Point3) -> Color:
        turb = self.noise.turbulence(point * self.scale, self.depth)
        t = 0.5 * (1 + math.sin(self.scale * point.z + self.turbulence_amplitude * turb))
        return self.color * t
