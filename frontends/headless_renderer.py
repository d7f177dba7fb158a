"""
Headless Renderer - records draw calls instead of drawing

DUCK TYPING EXAMPLE:
Same interface as PygameRenderer, so the show loop can run without a
window (CI, --headless, tests):
- width, height
- begin_frame(), end_frame(), fade(alpha)
- fill_circle(x, y, radius, color), fill_rect(x, y, w, h, color)
- handle_input() -> dict
- cleanup()
"""
from typing import Any, Dict, List, Tuple


class HeadlessRenderer:
    """Drawing surface that keeps the calls of the current frame."""

    def __init__(self, width: int = 1024, height: int = 768):
        self.width = width
        self.height = height
        self.calls: List[Tuple] = []
        self.frames = 0
        self.total_calls = 0

    def begin_frame(self) -> None:
        self.calls = []

    def fade(self, alpha: float) -> None:
        self.calls.append(("fade", alpha))

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self.calls.append(("circle", x, y, radius, color))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.calls.append(("rect", x, y, w, h, color))

    def end_frame(self, hud: str = "") -> None:
        self.frames += 1
        self.total_calls += len(self.calls)

    def count(self, kind: str) -> int:
        """Number of calls of one kind ("circle", "rect", "fade") this frame."""
        return sum(1 for call in self.calls if call[0] == kind)

    def handle_input(self) -> Dict[str, Any]:
        return {'quit': False}

    def cleanup(self) -> None:
        pass
