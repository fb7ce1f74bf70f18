# renderer/preview.py
import logging
from typing import Callable, Optional

import numpy as np

from renderer.canvas import Canvas
from renderer.tone_mapping import clamp_to_rgba8

logger = logging.getLogger(__name__)


def show_canvas(canvas: Canvas, title: str = "Ray Tracer",
                tone_map: Optional[Callable[[np.ndarray], np.ndarray]] = None) -> None:
    """
    Opens a pygame window with the rendered image and blocks until it is
    closed (window close or Escape).
    """
    import pygame

    if tone_map is None:
        tone_map = clamp_to_rgba8

    rgb = tone_map(canvas.pixels)[..., :3]

    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(title)

        # surfarray is indexed [x, y]
        frame_surface = pygame.surfarray.make_surface(np.ascontiguousarray(rgb.transpose(1, 0, 2)))
        screen.blit(frame_surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        logger.debug("Closing preview window")
        pygame.quit()
