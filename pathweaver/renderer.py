"""
Renderer module - the heart of the path tracer.

Implements:
- The recursive radiance estimator (`ray_color`)
- Tile-based sample accumulation with per-tile random streams
- Optional multi-threaded tile rendering
"""

from __future__ import annotations
import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, Tuple
import numpy as np

from .vec3 import Color
from .ray import Ray
from .camera import Camera
from .shapes import Hittable

logger = logging.getLogger(__name__)

# Lower end of the hit window, keeps bounced rays off their own surface
T_MIN = 0.001

SKY_BLUE = Color(0.5, 0.7, 1.0)
WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)

Tile = Tuple[int, int, int, int]


def sky_color(ray: Ray) -> Color:
    """Blend from white at the nadir to sky blue at the zenith."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng: np.random.Generator) -> Color:
    """Estimate the radiance arriving along a ray.

    Args:
        ray: The ray to trace
        world: The scene to trace against
        depth: Remaining number of bounces
        rng: Random source for material sampling

    Returns:
        Linear radiance carried back along the ray
    """
    # Bounce limit reached: no more light is gathered
    if depth <= 0:
        return BLACK

    hit_record = world.hit(ray, T_MIN, float('inf'))
    if hit_record is None:
        return sky_color(ray)

    scatter_result = hit_record.material.scatter(ray, hit_record, rng)
    if scatter_result is None:
        return BLACK

    return scatter_result.attenuation * ray_color(
        scatter_result.scattered_ray, world, depth - 1, rng
    )


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 800
    height: int = 400
    samples_per_pixel: int = 100
    max_depth: int = 50
    tile_size: int = 32
    num_threads: int = 1  # 0 = auto-detect
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ('width', 'height', 'samples_per_pixel', 'max_depth', 'tile_size', 'num_threads'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ('width', 'height', 'samples_per_pixel', 'max_depth', 'tile_size'):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads must be >= 0, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


class Renderer:
    """Monte Carlo path tracer over a static scene."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Render the scene.

        The world and camera are only read, never modified, while rendering.

        Args:
            world: The scene to render (any Hittable)
            camera: The camera to render from

        Returns:
            Array of shape (height, width, 3) holding, per pixel, the sum of
            `samples_per_pixel` linear radiance samples. Row 0 is the top
            of the image.
        """
        width = self.settings.width
        height = self.settings.height

        image = np.zeros((height, width, 3), dtype=np.float64)

        tiles = self._generate_tiles(width, height)
        seeds = np.random.SeedSequence(self.settings.seed).spawn(len(tiles))
        total_tiles = len(tiles)
        completed_tiles = [0]
        lock = threading.Lock()

        logger.info(
            "Rendering %dx%d, %d spp, depth %d, %d tiles on %d thread(s)",
            width, height, self.settings.samples_per_pixel, self.settings.max_depth,
            total_tiles, self.settings.num_threads
        )
        start = time.perf_counter()

        def render_tile(job: Tuple[Tile, np.random.SeedSequence]) -> Tuple[Tile, np.ndarray]:
            tile, seed_seq = job
            tile_image = self._render_tile(tile, world, camera, np.random.default_rng(seed_seq))

            # Callbacks run under the lock, so progress arrives in order
            with lock:
                completed_tiles[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed_tiles[0] / total_tiles)

            return tile, tile_image

        jobs = list(zip(tiles, seeds))
        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_tile, jobs))
        else:
            results = [render_tile(job) for job in jobs]

        for (x0, y0, x1, y1), tile_image in results:
            image[y0:y1, x0:x1] = tile_image

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def _render_tile(
        self,
        tile: Tile,
        world: Hittable,
        camera: Camera,
        rng: np.random.Generator
    ) -> np.ndarray:
        """Accumulate samples for every pixel of one tile."""
        width = self.settings.width
        height = self.settings.height
        samples = self.settings.samples_per_pixel
        max_depth = self.settings.max_depth

        x0, y0, x1, y1 = tile
        tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float64)

        for row in range(y0, y1):
            # Image rows run top-down, camera scanlines bottom-up
            scanline = height - 1 - row
            for col in range(x0, x1):
                pixel_color = np.zeros(3, dtype=np.float64)

                for _ in range(samples):
                    s = (col + rng.random()) / width
                    t = (scanline + rng.random()) / height
                    ray = camera.get_ray(s, t, rng)
                    pixel_color += ray_color(ray, world, max_depth, rng).to_array()

                tile_image[row - y0, col - x0] = pixel_color

        return tile_image

    def _generate_tiles(self, width: int, height: int) -> list[Tile]:
        """Split the image into tiles of at most tile_size x tile_size.

        Returns:
            List of tiles as (x0, y0, x1, y1) tuples
        """
        tile_size = self.settings.tile_size
        tiles = []

        for y in range(0, height, tile_size):
            for x in range(0, width, tile_size):
                x1 = min(x + tile_size, width)
                y1 = min(y + tile_size, height)
                tiles.append((x, y, x1, y1))

        return tiles
