"""
Renderer module - the heart of the ray tracer.

Implements:
- One primary ray per pixel through a pinhole camera
- Phong shading with shadows and mirror reflections
- Tile-based rendering, optionally spread over a thread pool
- 8-bit RGBA output
"""

from __future__ import annotations
import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, Sequence, Tuple
import numpy as np

from .vec3 import Color
from .camera import PinholeCamera
from .shapes import SceneObject
from .lights import Light
from .scene import nearest_hit
from .lighting import AmbientMode, shade
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ALPHA = 255


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 800
    height: int = 600
    background_color: Tuple[int, int, int] = (50, 50, 50)
    tile_size: int = 32
    num_threads: int = 1  # 0 = auto-detect
    ambient_mode: AmbientMode = AmbientMode.FIRST_LIGHT

    def __post_init__(self):
        if self.width is None or self.height is None or self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"Image size must be positive, got {self.width}x{self.height}"
            )
        if self.tile_size <= 0:
            raise InvalidArgumentError(f"Tile size must be positive, got {self.tile_size}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


def color_to_rgba(color: Color) -> Tuple[int, int, int, int]:
    """Convert a shaded color to RGBA bytes, rounding half up."""
    channels = np.clip(color.to_array(), 0.0, 1.0)
    r, g, b = (int(c) for c in np.floor(channels * 255 + 0.5))
    return r, g, b, ALPHA


class Renderer:
    """Whitted-style ray tracing renderer."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self.camera = PinholeCamera()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, objects: Sequence[SceneObject], lights: Sequence[Light]) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Args:
            objects: Ordered scene objects
            lights: Ordered lights; the first supplies the global ambient term

        Returns:
            RGBA image as uint8 array of shape (height, width, 4), top row first
        """
        if objects is None or lights is None:
            raise InvalidArgumentError("Scene objects and lights are required")
        if len(lights) == 0:
            raise InvalidArgumentError("At least one light is required")

        objects = list(objects)
        lights = list(lights)
        width = self.settings.width
        height = self.settings.height

        image = np.empty((height, width, 4), dtype=np.uint8)

        tiles = self._generate_tiles(width, height)
        total_tiles = len(tiles)
        completed_tiles = [0]
        progress_lock = threading.Lock()

        logger.info(
            "Rendering %dx%d: %d objects, %d lights, %d threads",
            width, height, len(objects), len(lights), self.settings.num_threads
        )
        logger.debug("Split image into %d tiles of %d px", total_tiles, self.settings.tile_size)
        start_time = time.perf_counter()

        def render_tile(tile: Tuple[int, int, int, int]) -> Tuple[Tuple, np.ndarray]:
            """Render a single tile."""
            x0, y0, x1, y1 = tile
            tile_image = np.empty((y1 - y0, x1 - x0, 4), dtype=np.uint8)

            for j, y in enumerate(range(y0, y1)):
                for i, x in enumerate(range(x0, x1)):
                    tile_image[j, i] = self._trace_pixel(x, y, objects, lights)

            with progress_lock:
                completed_tiles[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed_tiles[0] / total_tiles)

            return tile, tile_image

        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_tile, tiles))
        else:
            results = [render_tile(tile) for tile in tiles]

        for tile, tile_image in results:
            x0, y0, x1, y1 = tile
            image[y0:y1, x0:x1] = tile_image

        logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
        return image

    def _trace_pixel(
        self,
        x: int,
        y: int,
        objects: Sequence[SceneObject],
        lights: Sequence[Light]
    ) -> Tuple[int, int, int, int]:
        """Trace the primary ray for one pixel and return its RGBA bytes."""
        ray = self.camera.get_ray(x, y, self.settings.width, self.settings.height)
        hit = nearest_hit(ray, objects)

        if not hit.hit:
            r, g, b = self.settings.background_color
            return r, g, b, ALPHA

        color = shade(
            hit.obj.material,
            lights,
            hit.obj.normal_at(hit.point),
            (ray.origin - hit.point).normalize(),
            hit.point,
            objects,
            hit.obj,
            0,
            self.settings.ambient_mode
        )
        return color_to_rgba(color)

    def _generate_tiles(self, width: int, height: int) -> list[Tuple[int, int, int, int]]:
        """Generate tiles for parallel rendering.

        Args:
            width: Image width
            height: Image height

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

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save an RGBA buffer to file.

        Args:
            image: uint8 array of shape (height, width, 4)
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(image)
        if filename.lower().endswith(('.jpg', '.jpeg')):
            pil_image = pil_image.convert('RGB')
        pil_image.save(filename)


def render(
    scene_objects: Sequence[SceneObject],
    lights: Sequence[Light],
    width: int,
    height: int,
    **settings
) -> np.ndarray:
    """Render a scene to an RGBA pixel buffer.

    Args:
        scene_objects: Ordered scene objects
        lights: Ordered lights (at least one)
        width: Image width in pixels
        height: Image height in pixels
        **settings: Extra RenderSettings fields (num_threads, ambient_mode, ...)

    Returns:
        uint8 array of shape (height, width, 4), row-major, top row first
    """
    renderer = Renderer(RenderSettings(width=width, height=height, **settings))
    return renderer.render(scene_objects, lights)


def to_bytes(image: np.ndarray) -> bytes:
    """Flatten an RGBA buffer to row-major RGBA byte quadruples."""
    return np.ascontiguousarray(image, dtype=np.uint8).tobytes()
