# renderer/raytracer.py
import logging
import multiprocessing as mp
import time

import numpy as np

from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError, require
from raytracer.renderer.tracer import Tracer

logger = logging.getLogger(__name__)

# Chunks handed to each worker, more chunks balance uneven rows better.
CHUNKS_PER_WORKER = 4


def _render_row_chunk(args):
    """
    Worker function to render a chunk of rows.
    Called by multiprocessing pool.
    """
    renderer, y_start, y_end = args
    return y_start, renderer.render_rows(y_start, y_end)


class Renderer:
    """
    Drives the camera and the tracer over every pixel of a width x height
    image. Each pixel is computed independently from the read-only scene
    and written to its own cell, so rows can be rendered in parallel.
    """
    def __init__(self, world, camera, width: int, height: int, workers: int = 1):
        self.world = require(world, "world")
        self.camera = require(camera, "camera")
        if width < 1 or height < 1:
            raise InvalidConfigurationError(f"Image size must be at least 1x1, got {width}x{height}.")
        if workers < 1:
            raise InvalidConfigurationError(f"workers must be >= 1, got {workers}.")
        self.width = width
        self.height = height
        self.workers = workers

    def render_pixel(self, x: int, y: int) -> Color:
        ray = self.camera.ray_for(self.width, self.height, x, y)
        return Tracer.for_world(self.world).trace(ray, self.world)

    def render_rows(self, y_start: int, y_end: int) -> np.ndarray:
        """
        Renders rows [y_start, y_end) into an array of shape
        (y_end - y_start, width, 3) holding linear, unclamped colors.
        """
        rows = np.zeros((y_end - y_start, self.width, 3), dtype=np.float64)
        for y in range(y_start, y_end):
            for x in range(self.width):
                rows[y - y_start, x] = self.render_pixel(x, y).as_tuple()
        return rows

    def render(self, clamp: bool = True) -> np.ndarray:
        """
        Renders the full image as an array of shape (height, width, 3).
        Row 0 is the top of the image. With clamp the channels are limited
        to [0, 1], otherwise the raw colors are returned for tone mapping.
        """
        start_time = time.time()
        logger.info("Rendering %dx%d with %d worker(s), max depth %d",
                    self.width, self.height, self.workers, self.world.max_depth)

        if self.workers == 1:
            image = self.render_rows(0, self.height)
        else:
            image = self._render_parallel()

        logger.info("Rendering complete in %.2fs", time.time() - start_time)
        if clamp:
            np.clip(image, 0.0, 1.0, out=image)
        return image

    def _render_parallel(self) -> np.ndarray:
        rows_per_chunk = max(1, self.height // (self.workers * CHUNKS_PER_WORKER))
        chunks = [(self, y_start, min(y_start + rows_per_chunk, self.height))
                  for y_start in range(0, self.height, rows_per_chunk)]
        logger.debug("Divided into %d chunks of ~%d rows each", len(chunks), rows_per_chunk)

        with mp.Pool(self.workers) as pool:
            results = pool.map(_render_row_chunk, chunks)

        # Assemble final image
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for y_start, rows in results:
            image[y_start:y_start + rows.shape[0]] = rows
        return image
