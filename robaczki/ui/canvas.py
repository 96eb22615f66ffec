# robaczki/ui/canvas.py
from __future__ import annotations
import math
from typing import List, Sequence, Tuple
import pygame

Point = Tuple[float, float]

# 2D affine transform as (a, b, c, d, tx, ty):  x' = a*x + c*y + tx,  y' = b*x + d*y + ty
_IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

def _compose(m, n):
    """m then n in local space (m * n)."""
    a, b, c, d, tx, ty = m
    a2, b2, c2, d2, tx2, ty2 = n
    return (a * a2 + c * b2,
            b * a2 + d * b2,
            a * c2 + c * d2,
            b * c2 + d * d2,
            a * tx2 + c * ty2 + tx,
            b * tx2 + d * ty2 + ty)


class PygameCanvas:
    """
    Drawing surface with a push/pop transform stack, in the spirit of p5.
    Shapes with alpha < 255 go through a SRCALPHA overlay.
    """
    ELLIPSE_STEPS = 24

    def __init__(self, surface: pygame.Surface, font_name: str = "Menlo"):
        self.surface = surface
        self._m = _IDENTITY
        self._stack: List[tuple] = []
        self.font = pygame.font.SysFont(font_name, 14)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    # ---------- transform stack ----------
    def push(self):
        self._stack.append(self._m)

    def pop(self):
        self._m = self._stack.pop() if self._stack else _IDENTITY

    def translate(self, dx: float, dy: float):
        self._m = _compose(self._m, (1.0, 0.0, 0.0, 1.0, dx, dy))

    def rotate(self, angle: float):
        ca, sa = math.cos(angle), math.sin(angle)
        self._m = _compose(self._m, (ca, sa, -sa, ca, 0.0, 0.0))

    def _apply(self, x: float, y: float) -> Point:
        a, b, c, d, tx, ty = self._m
        return (a * x + c * y + tx, b * x + d * y + ty)

    def _rotated(self) -> bool:
        a, b, c, d, _, _ = self._m
        return abs(b) > 1e-9 or abs(c) > 1e-9

    # ---------- primitives ----------
    def background(self, color):
        self.surface.fill(color[:3])

    def _fill_polygon(self, pts: Sequence[Point], color):
        if len(pts) < 3:
            return
        ipts = [(int(round(x)), int(round(y))) for x, y in pts]
        if len(color) == 4 and color[3] < 255:
            overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
            pygame.draw.polygon(overlay, color, ipts)
            self.surface.blit(overlay, (0, 0))
        else:
            pygame.draw.polygon(self.surface, color[:3], ipts)

    def polygon(self, points: Sequence[Point], color):
        self._fill_polygon([self._apply(x, y) for x, y in points], color)

    def triangle(self, p1: Point, p2: Point, p3: Point, color):
        self.polygon([p1, p2, p3], color)

    def ellipse(self, x: float, y: float, w: float, h: float, color):
        rx, ry = w / 2.0, h / 2.0
        n = self.ELLIPSE_STEPS
        pts = [(x + rx * math.cos(2 * math.pi * i / n), y + ry * math.sin(2 * math.pi * i / n))
               for i in range(n)]
        self.polygon(pts, color)

    def rounded_rect(self, cx: float, cy: float, w: float, h: float, radius: float, color):
        if w <= 0 or h <= 0:
            return
        if self._rotated():
            hw, hh = w / 2.0, h / 2.0
            self.polygon([(cx - hw, cy - hh), (cx + hw, cy - hh), (cx + hw, cy + hh), (cx - hw, cy + hh)], color)
            return
        sx, sy = self._apply(cx - w / 2.0, cy - h / 2.0)
        rect = pygame.Rect(int(round(sx)), int(round(sy)), max(1, int(round(w))), max(1, int(round(h))))
        if len(color) == 4 and color[3] < 255:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(overlay, color, overlay.get_rect(), border_radius=int(radius))
            self.surface.blit(overlay, rect.topleft)
        else:
            pygame.draw.rect(self.surface, color[:3], rect, border_radius=int(radius))

    def text(self, s: str, x: float, y: float, color):
        sx, sy = self._apply(x, y)
        self.surface.blit(self.font.render(s, True, color[:3]), (int(sx), int(sy)))
