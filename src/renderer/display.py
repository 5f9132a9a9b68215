# renderer/display.py
import numpy as np
import pygame

def frame_to_surface(frame: np.ndarray) -> "pygame.Surface":
    """
    Convert a (height, width, 3) frame buffer to a pygame surface.
    surfarray indexes pixels as [x, y], so the buffer is transposed first.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(np.transpose(frame, (1, 0, 2))))

def show_frame(frame: np.ndarray, title: str = "Path Tracer", max_window: int = 1280) -> None:
    """
    Open a window showing a finished render until it is closed or Escape is
    pressed. Small renders are scaled up to a viewable size.
    """
    height, width = frame.shape[:2]
    scale = max(1, max_window // max(width, height))
    window_size = (width * scale, height * scale)

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)

        surf = frame_to_surface(frame)
        if scale != 1:
            surf = pygame.transform.scale(surf, window_size)
        screen.blit(surf, (0, 0))
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
        pygame.quit()
