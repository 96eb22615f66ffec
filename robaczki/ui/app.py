# robaczki/ui/app.py
from __future__ import annotations
from typing import Optional, Tuple
import pygame

from .canvas import PygameCanvas
from .renderer import Renderer
from .recorder import Recorder
from ..sim.engine import run_frame
from ..sim.world import World
from ..sim.config import WORLD, SURFACE, SIM

def fit_surface(viewport_w: int, viewport_h: int,
                margin_x: int = SURFACE.margin_x, margin_y: int = SURFACE.margin_y) -> Tuple[int, int]:
    """Largest surface that fits the viewport minus margins, capped at the configured max."""
    w = min(SURFACE.max_width, int(viewport_w) - margin_x)
    h = min(SURFACE.max_height, int(viewport_h) - margin_y)
    return max(1, w), max(1, h)


class App:
    """
    Window host. `start()` opens the surface and runs the frame loop until the
    window closes; calling it again while running does nothing.
    """
    def __init__(self, seed: Optional[int] = SIM.seed, world: Optional[World] = None):
        self.seed = seed
        self.world = world
        self.running = False
        self.paused = False
        self.screen = None
        self.canvas = None
        self.renderer = None
        self.recorder = Recorder(enabled=False, stride_frames=2)

    def _new_world(self, w: int, h: int) -> World:
        world = World(w, h, seed=self.seed)
        world.populate()
        return world

    def _open_surface(self, size: Tuple[int, int]):
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.canvas = PygameCanvas(self.screen)
        self.renderer = Renderer(self.canvas)

    def _resize(self, w: int, h: int):
        size = fit_surface(w, h, 0, 0)
        self._open_surface(size)
        self.world.resize(*size)

    def _draw_paused(self):
        r = self.renderer
        r.draw_background()
        for f in self.world.food:
            r.draw_food(f)
        for c in self.world.creatures:
            r.draw_creature(c)
        r.draw_hud(self.world)

    def _handle_key(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_n:
            c = self.world.add_creature()
            print(f"[App] creature #{c.id} added at ({c.x:.0f}, {c.y:.0f})")
        elif key == pygame.K_f:
            self.world.spawn_food()
        elif key == pygame.K_r:
            self.world = self._new_world(self.canvas.width, self.canvas.height)
            self.paused = False
        elif key == pygame.K_v:
            self.recorder.toggle()
        elif key == pygame.K_c:
            self.recorder.clear()
        elif key == pygame.K_s:
            self.recorder.save_npz(world_size=self.world.bounds)

    def start(self, max_frames: Optional[int] = None) -> bool:
        if self.running:
            return False
        self.running = True
        try:
            self._run(max_frames)
        finally:
            self.running = False
            pygame.quit()
        return True

    def _run(self, max_frames: Optional[int]):
        pygame.init()
        pygame.display.set_caption("Robaczki")
        info = pygame.display.Info()
        self._open_surface(fit_surface(info.current_w, info.current_h))
        if self.world is None:
            self.world = self._new_world(self.canvas.width, self.canvas.height)
        else:
            self.world.resize(self.canvas.width, self.canvas.height)
        clock = pygame.time.Clock()

        frames = 0
        while self.running:
            clock.tick(int(WORLD.fps))

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                elif e.type == pygame.VIDEORESIZE:
                    self._resize(e.w, e.h)
                elif e.type == pygame.KEYDOWN:
                    self._handle_key(e.key)

            self.renderer.paused = self.paused
            self.renderer.recording = self.recorder.enabled
            if self.paused:
                self._draw_paused()
            else:
                run_frame(self.world, self.renderer, WORLD.dt)
                self.recorder.maybe_capture(self.world)
            pygame.display.flip()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.running = False


def run_ui(seed: Optional[int] = SIM.seed):
    App(seed=seed).start()
