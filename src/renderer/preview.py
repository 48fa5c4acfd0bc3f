# renderer/preview.py
import pygame
from renderer.canvas import Canvas


def canvas_to_surface(canvas: Canvas, tone_map: bool = False) -> pygame.Surface:
    """
    Converts a canvas to a pygame surface. surfarray expects (width, height, 3).
    """
    return pygame.surfarray.make_surface(canvas.to_bytes_array(tone_map).swapaxes(0, 1))


def show(canvas: Canvas, tone_map: bool = False, title: str = "Ray Tracer"):
    """
    Displays the canvas in a window until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(title)
        screen.blit(canvas_to_surface(canvas, tone_map), (0, 0))
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
