"""
Renderer module - walks the image and writes it out.

Implements:
- Pixel to camera coordinate mapping
- Multi-threaded tile-based rendering
- PNG (or any Pillow-supported) output
"""

from __future__ import annotations
import os
import platform
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Callable, Tuple
import numpy as np

from .scene import Scene


def pixel_to_uv(x: int, y: int, width: int, height: int) -> Tuple[float, float]:
    """Map pixel (x, y) to resolution independent coordinates in [-1, 1].

    Row 0 maps to v = -1; no vertical flip is applied.
    """
    u = 2 * (x / (width - 1)) - 1
    v = 2 * (y / (height - 1)) - 1
    return u, v


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 512
    height: int = 512
    tile_size: int = 32
    num_threads: int = 0  # 0 = auto-detect
    output: str = 'output.png'

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"Image must be at least 2x2 pixels, got {self.width}x{self.height}"
            )
        if self.tile_size < 1:
            raise ValueError(f"Tile size must be positive, got {self.tile_size}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """One-ray-per-pixel renderer with multi-threading support."""

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

    def render(self, scene: Scene) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Args:
            scene: The scene to render

        Returns:
            8-bit RGB image of shape (height, width, 3), indexed [y, x]
        """
        width = self.settings.width
        height = self.settings.height
        camera = scene.camera

        image = np.zeros((height, width, 3), dtype=np.uint8)

        tiles = self._generate_tiles(width, height)
        total_tiles = len(tiles)
        completed_tiles = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        def render_tile(tile: Tuple[int, int, int, int]) -> Tuple[Tuple, np.ndarray]:
            """Render a single tile."""
            x0, y0, x1, y1 = tile
            tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.uint8)

            for y in range(y0, y1):
                for x in range(x0, x1):
                    u, v = pixel_to_uv(x, y, width, height)
                    ray = camera.trace_ray(u, v)
                    tile_image[y - y0, x - x0] = scene.shade_ray(ray)

            # Held through the callback so reports arrive in increasing order
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

        return image

    def _generate_tiles(self, width: int, height: int) -> list[Tuple[int, int, int, int]]:
        """Generate tiles for parallel rendering.

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
        """Save image to file.

        Args:
            image: 8-bit RGB image array
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        output_path = Path(filename)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        pil_image = PILImage.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
        pil_image.save(output_path)


def get_platform_info() -> dict:
    """Get information about the current platform.

    Returns:
        Dictionary with platform details
    """
    return {
        'system': platform.system(),
        'machine': platform.machine(),
        'python_version': platform.python_version(),
        'cpu_count': os.cpu_count(),
    }
