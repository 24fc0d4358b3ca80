# renderer/preview.py
import pygame
from raycaster.renderer.canvas import Canvas
from raycaster.renderer.tone_mapping import tone_map

def show(image: Canvas, window_width: int = 640, window_height: int = None, operator: str = "clamp"):
    """
    Opens a window with the rendered image scaled to fit, until it is closed
    or Escape is pressed.
    """
    if window_height is None:
        window_height = round(window_width * image.height / image.width)

    pygame.init()
    try:
        screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption(f"raycaster {image.width}x{image.height}")

        # surfarray expects [width, height, 3], which is the canvas layout.
        surf = pygame.surfarray.make_surface(tone_map(image.pixels, operator))
        surf = pygame.transform.scale(surf, (window_width, window_height))

        clock = pygame.time.Clock()
        running = True
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surf, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
