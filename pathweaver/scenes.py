"""
Built-in demo scenes.

Every builder takes a numpy Generator so that a seeded run rebuilds the
same scene, and returns a populated HittableList.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict

import numpy as np

from .vec3 import Vec3, Point3, Color
from .camera import Camera
from .shapes import Sphere, MovingSphere, HittableList
from .materials import Lambertian, Metal, Dielectric
from .textures import CheckerTexture, NoiseTexture

logger = logging.getLogger(__name__)


def _checker() -> CheckerTexture:
    return CheckerTexture.from_colors(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))


def random_scene(rng: np.random.Generator) -> HittableList:
    """Checkered ground, a grid of small random spheres and three large ones.

    Small diffuse spheres bounce upward during the shutter interval.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(_checker())))

    glass = Dielectric(1.5)
    for a in range(-10, 10):
        for b in range(-10, 10):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = Vec3.random(rng) * Vec3.random(rng)
                world.add(MovingSphere(
                    center, center + Vec3(0, rng.uniform(0, 0.5), 0),
                    0.0, 1.0, 0.2, Lambertian(albedo)
                ))
            elif choose_mat < 0.95:
                # metal
                albedo = Vec3.random(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, glass))

    world.add(Sphere(Point3(0, 1, 0), 1.0, glass))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    logger.debug("random_scene: %d objects", len(world))
    return world


def two_spheres(rng: np.random.Generator) -> HittableList:
    """Two large spheres sharing one checker material."""
    checker = Lambertian(_checker())
    return HittableList([
        Sphere(Point3(0, -10, 0), 10, checker),
        Sphere(Point3(0, 10, 0), 10, checker),
    ])


def two_perlin_spheres(rng: np.random.Generator) -> HittableList:
    """Marble ground and a marble sphere."""
    marble = Lambertian(NoiseTexture(4.0, seed=int(rng.integers(2**32))))
    return HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
    ])


SCENES: Dict[str, Callable[[np.random.Generator], HittableList]] = {
    'random': random_scene,
    'two_spheres': two_spheres,
    'perlin': two_perlin_spheres,
}


def default_camera(aspect_ratio: float, aperture: float = 0.0) -> Camera:
    """The viewpoint all demo scenes are composed for."""
    return Camera(
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        vup=Vec3(0, 1, 0),
        vfov=20,
        aspect_ratio=aspect_ratio,
        aperture=aperture,
        focus_dist=10.0,
        shutter_open=0.0,
        shutter_close=1.0
    )
