"""
Pygame Renderer
Window frontend for the fireworks show.

DUCK TYPING EXAMPLE:
This class has the same interface as HeadlessRenderer:
- width, height
- begin_frame(), end_frame(), fade(alpha)
- fill_circle(x, y, radius, color), fill_rect(x, y, w, h, color)
- handle_input() -> dict
- cleanup()

No shared base class needed! The show loop just calls these methods.
"""
from typing import Any, Dict, Tuple

import pygame


def parse_color(color) -> Tuple[int, ...]:
    """Convert "#rrggbb" / "#rrggbbaa" hex strings to an RGB(A) tuple."""
    if isinstance(color, str) and color.startswith('#'):
        digits = color[1:]
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        return tuple(int(digits[i:i+2], 16) for i in range(0, len(digits), 2))
    return tuple(color)


class PygameRenderer:
    """Draws the show into a pygame window.

    Instead of clearing, each frame covers the previous one with a
    translucent black rectangle, so bright particles leave light trails.
    """

    COLOR_BG = (0, 0, 0)
    COLOR_HUD = (150, 150, 150)

    def __init__(self, width: int = 1024, height: int = 768, fps: int = 60,
                 debug: bool = False):
        pygame.init()
        pygame.display.set_caption("Skyburst")

        self.width = width
        self.height = height
        self.fps = fps
        self.debug = debug

        self.screen = pygame.display.set_mode((width, height))
        self.screen.fill(self.COLOR_BG)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24) if debug else None

        self._fade_surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self._colors: Dict[str, Tuple[int, ...]] = {}

    def _color(self, color) -> Tuple[int, ...]:
        # Cache parsed hex strings; the same few colors are drawn thousands of times
        if isinstance(color, str):
            if color not in self._colors:
                self._colors[color] = parse_color(color)[:3]
            return self._colors[color]
        return tuple(color)[:3]

    def begin_frame(self) -> None:
        pass

    def fade(self, alpha: float) -> None:
        """Cover the last frame with translucent black."""
        self._fade_surface.fill((*self.COLOR_BG, int(255 * alpha)))
        self.screen.blit(self._fade_surface, (0, 0))

    def fill_circle(self, x: float, y: float, radius: float, color) -> None:
        if radius <= 0:
            return
        pygame.draw.circle(self.screen, self._color(color), (int(x), int(y)), max(1, round(radius)))

    def fill_rect(self, x: float, y: float, w: float, h: float, color) -> None:
        pygame.draw.rect(self.screen, self._color(color), (int(x), int(y), int(w), int(h)))

    def end_frame(self, hud: str = "") -> None:
        if self.debug and hud:
            # Black box behind the text so the fade doesn't smear it
            text_surface = self.font.render(hud, True, self.COLOR_HUD)
            self.screen.fill(self.COLOR_BG, text_surface.get_rect(topleft=(10, 10)))
            self.screen.blit(text_surface, (10, 10))

        pygame.display.flip()
        self.clock.tick(self.fps)

    def handle_input(self) -> Dict[str, Any]:
        """Process pygame events. The show only cares about quitting."""
        result = {'quit': False}
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result['quit'] = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                result['quit'] = True
        return result

    def cleanup(self) -> None:
        pygame.quit()
