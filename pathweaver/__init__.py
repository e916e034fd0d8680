"""
PathWeaver - A Python Monte Carlo Path Tracer

Renders scenes of static and moving spheres with:
- Lambertian, metal and dielectric materials
- Solid, checker and Perlin marble textures
- Thin-lens depth of field
- Motion blur over a shutter interval
- Tile-parallel sampling with independent random streams
"""

__version__ = "0.1.0"
__author__ = "PathWeaver Team"

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .shapes import HitRecord, Hittable, Sphere, MovingSphere, HittableList
from .textures import Texture, SolidColor, CheckerTexture, Perlin, NoiseTexture
from .materials import Material, ScatterResult, Lambertian, Metal, Dielectric, schlick
from .camera import Camera
from .renderer import Renderer, RenderSettings, ray_color, sky_color
from .image import to_rgb8, write_ppm, save_image
from .scenes import SCENES, random_scene, two_spheres, two_perlin_spheres, default_camera
