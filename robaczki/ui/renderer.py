# robaczki/ui/renderer.py
from __future__ import annotations
import math
from ..sim.models import Creature, Food, CreatureState

# ---------- Colors / Theme ----------
BG_COLOR       = (220, 220, 220)
APPLE_COLOR    = (220, 50, 50)
POISON_COLOR   = (50, 200, 50)
DEAD_COLOR     = (90, 90, 90)
BAR_BG_COLOR   = (0, 0, 0, 80)
ENERGY_COLOR   = (0, 100, 255)
HEALTH_COLOR   = (0, 200, 100)
EAT_MARK_COLOR = (250, 210, 60)
SLEEP_COLOR    = (120, 120, 200)
HUD_COLOR      = (30, 30, 30)
VISION_ALPHA   = 40

# ---------- Glyph knobs ----------
BODY_POINTS    = ((12, 0), (-8, -6), (-8, 6))   # arrow pointing along +x
BAR_W, BAR_H   = 24, 4
ENERGY_BAR_Y   = -14
HEALTH_BAR_Y   = -8
CONE_STEPS     = 16

def _cone_points(half_angle: float, radius: float, steps: int = CONE_STEPS):
    """Filled sector as a polygon fan, apex at the origin."""
    pts = [(0.0, 0.0)]
    for i in range(steps + 1):
        a = -half_angle + (2.0 * half_angle) * i / steps
        pts.append((math.cos(a) * radius, math.sin(a) * radius))
    return pts


class Renderer:
    """Pure reads of sim state; every entry point leaves the canvas transform as it found it."""

    def __init__(self, canvas, show_hud: bool = True):
        self.canvas = canvas
        self.show_hud = show_hud
        # HUD flags, set by the app
        self.paused = False
        self.recording = False

    def draw_background(self):
        self.canvas.background(BG_COLOR)

    # ---------- food ----------
    def draw_food(self, f: Food):
        col = POISON_COLOR if f.poisonous else APPLE_COLOR
        self.canvas.ellipse(f.x, f.y, f.radius * 2, f.radius * 2, col)

    # ---------- creatures ----------
    def _draw_bar(self, y: float, ratio: float, color):
        cv = self.canvas
        ratio = max(0.0, min(1.0, ratio))
        cv.rounded_rect(0, y, BAR_W + 2, BAR_H + 2, 2, BAR_BG_COLOR)
        if ratio > 0:
            w = BAR_W * ratio
            cv.rounded_rect(-BAR_W / 2 + w / 2, y, w, BAR_H, 2, color)

    def _draw_dead(self, c: Creature):
        cv = self.canvas
        cv.push()
        cv.translate(c.x, c.y)
        cv.rotate(math.pi / 4)
        cv.rounded_rect(0, 0, 14, 3, 1, DEAD_COLOR)
        cv.rounded_rect(0, 0, 3, 14, 1, DEAD_COLOR)
        cv.pop()

    def draw_creature(self, c: Creature):
        state = c.state
        if state is CreatureState.DEAD:
            self._draw_dead(c)
            return

        cv = self.canvas
        cv.push()
        cv.translate(c.x, c.y)

        cv.push()
        cv.rotate(c.direction)
        if state not in (CreatureState.EATING, CreatureState.SLEEPING):
            half = math.radians(c.view_angle) / 2.0
            cv.polygon(_cone_points(half, c.view_range), (*c.color, VISION_ALPHA))
        cv.triangle(*BODY_POINTS, c.color)
        if state is CreatureState.EATING:
            cv.ellipse(13, 0, 5, 5, EAT_MARK_COLOR)
        cv.pop()

        if state is CreatureState.SLEEPING:
            cv.ellipse(8, -20, 4, 4, SLEEP_COLOR)
            cv.ellipse(13, -26, 6, 6, SLEEP_COLOR)

        self._draw_bar(ENERGY_BAR_Y, c.energy_ratio(), ENERGY_COLOR)
        self._draw_bar(HEALTH_BAR_Y, c.health_ratio(), HEALTH_COLOR)
        cv.pop()

    # ---------- HUD ----------
    def draw_hud(self, world):
        if not self.show_hud:
            return
        alive = sum(1 for c in world.creatures if not c.dead)
        poison = sum(1 for f in world.food if f.poisonous)
        line = (f"frame {world.frame}  creatures {alive}/{len(world.creatures)}  "
                f"food {len(world.food)} ({poison} poisonous)")
        if self.paused:
            line += "  [PAUSED]"
        if self.recording:
            line += "  [REC]"
        self.canvas.text(line, 8, 6, HUD_COLOR)
