"""
Skyburst Frontends
Drawing surfaces for the show.

DUCK TYPING EXAMPLE:
Both renderers have the same interface:
- width, height
- begin_frame(), fade(alpha), end_frame(hud)
- fill_circle(x, y, radius, color), fill_rect(x, y, w, h, color)
- handle_input() -> dict
- cleanup()

No shared base class needed! Just swap them:

    # Window
    renderer = PygameRenderer(1024, 768)

    # Or no window at all
    renderer = HeadlessRenderer(1024, 768)

    # Show loop works with either:
    show.run(renderer)
"""

# Note: Don't import renderers here to avoid importing pygame
# when it might not be needed. Import directly in main.py instead.
