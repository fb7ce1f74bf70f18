# renderer/raytracer.py
import logging
import math
import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, Tuple

from core.color import ColorRGBA, FullBright
from core.ray import Ray
from geometry.world import WorldInfo
from renderer.canvas import Canvas

logger = logging.getLogger(__name__)

# Bands per worker; more bands than workers keeps the pool busy when some rows are cheap
BANDS_PER_WORKER = 4

ProgressCallback = Callable[[int, int], None]


def trace(world_info: WorldInfo, ray: Ray, background: ColorRGBA) -> ColorRGBA:
    """Color seen along `ray`: the nearest hit's material, or the background on a miss."""
    hit = world_info.root_object.intersect(ray).hit()
    if hit is None:
        return background
    return hit.object.get_material().render(hit, world_info)


def split_rows(height: int, bands: int) -> List[Tuple[int, int]]:
    """Partitions [0, height) into at most `bands` contiguous, disjoint [start, stop) ranges."""
    bands = max(1, min(bands, height))
    size = math.ceil(height / bands)
    return [(start, min(start + size, height)) for start in range(0, height, size)]


class Renderer:
    """
    Renders a world through a viewer (anything with ray_for_pos(x, y) taking
    normalized pixel-center coordinates) into a Canvas.

    Rows are split into disjoint bands and each band is rendered by a single
    worker thread, so every pixel has exactly one writer and the canvas
    needs no lock.
    """

    def __init__(self, width: int, height: int, workers: Optional[int] = None,
                 background: ColorRGBA = FullBright.BLACK):
        self.width = width
        self.height = height
        self.workers = workers if workers else (os.cpu_count() or 1)
        self.background = background

    def _render_band(self, world_info: WorldInfo, viewer, canvas: Canvas, start: int, stop: int) -> int:
        for y in range(start, stop):
            v = (y + 0.5) / self.height
            for x in range(self.width):
                u = (x + 0.5) / self.width
                canvas.set_color_at(x, y, trace(world_info, viewer.ray_for_pos(u, v), self.background))
        return stop - start

    def render(self, world_info: WorldInfo, viewer, canvas: Optional[Canvas] = None,
               progress: Optional[ProgressCallback] = None) -> Canvas:
        if canvas is None:
            canvas = Canvas(self.width, self.height)
        elif (canvas.width, canvas.height) != (self.width, self.height):
            raise ValueError(f"Canvas is {canvas.width}x{canvas.height}, "
                             f"renderer is {self.width}x{self.height}")

        bands = split_rows(self.height, self.workers * BANDS_PER_WORKER)
        logger.info("Rendering %dx%d with %d workers in %d bands",
                    self.width, self.height, self.workers, len(bands))

        start_time = time.perf_counter()
        rows_done = 0
        last_logged = 0

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            futures = [pool.submit(self._render_band, world_info, viewer, canvas, start, stop)
                       for start, stop in bands]
            for future in as_completed(futures):
                rows_done += future.result()
                if progress is not None:
                    progress(rows_done, self.height)
                percent = 100 * rows_done // self.height
                if percent - last_logged >= 10 or rows_done == self.height:
                    logger.debug("Rendered %d/%d rows (%d%%)", rows_done, self.height, percent)
                    last_logged = percent

        logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
        return canvas
