import math

import numpy as np
import pygame
import pytest

from robaczki.sim.config import WORLD
from robaczki.sim.world import World
from robaczki.ui.app import App, fit_surface
from robaczki.ui.canvas import PygameCanvas
from robaczki.ui.recorder import Recorder


# ---------------- host ----------------
def test_fit_surface_caps_at_max():
    assert fit_surface(1920, 1080) == (800, 600)

def test_fit_surface_subtracts_margins():
    assert fit_surface(500, 400) == (460, 280)

def test_fit_surface_never_collapses():
    assert fit_surface(10, 10) == (1, 1)

def test_fit_surface_on_resize_without_margins():
    assert fit_surface(700, 500, 0, 0) == (700, 500)
    assert fit_surface(1000, 900, 0, 0) == (800, 600)

def test_start_is_noop_while_running(monkeypatch):
    def boom():
        raise AssertionError("pygame.init should not run twice")
    monkeypatch.setattr(pygame, "init", boom)
    app = App(seed=1)
    app.running = True
    assert app.start() is False
    assert app.running


# ---------------- canvas ----------------
@pytest.fixture
def surface():
    pygame.font.init()
    return pygame.Surface((60, 60))

def test_canvas_translate_and_restore(surface):
    cv = PygameCanvas(surface)
    cv.background((0, 0, 0))
    cv.push()
    cv.translate(30, 30)
    cv.ellipse(0, 0, 10, 10, (255, 0, 0))
    cv.pop()
    assert surface.get_at((30, 30))[:3] == (255, 0, 0)
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)
    assert cv._apply(1.0, 2.0) == (1.0, 2.0)

def test_canvas_rotate_maps_points(surface):
    cv = PygameCanvas(surface)
    cv.translate(10, 10)
    cv.rotate(math.pi / 2)
    x, y = cv._apply(5.0, 0.0)
    assert x == pytest.approx(10.0)
    assert y == pytest.approx(15.0)

def test_canvas_pop_on_empty_stack_resets(surface):
    cv = PygameCanvas(surface)
    cv.translate(5, 5)
    cv.pop()
    assert cv._apply(0.0, 0.0) == (0.0, 0.0)

def test_canvas_alpha_blends(surface):
    cv = PygameCanvas(surface)
    cv.background((0, 0, 0))
    cv.rounded_rect(30, 30, 20, 20, 0, (255, 255, 255, 128))
    r, g, b = surface.get_at((30, 30))[:3]
    assert 100 < r < 160 and r == g == b


# ---------------- recorder ----------------
def test_recorder_saves_npz(tmp_path):
    world = World(200.0, 100.0, seed=4)
    world.populate(n_creatures=2, n_food=3)
    rec = Recorder(enabled=True, stride_frames=1)
    rec.maybe_capture(world)
    world.add_creature()
    world.remove_food(world.food[0].id)
    rec.maybe_capture(world)
    assert len(rec) == 2

    out = rec.save_npz(str(tmp_path / "run.npz"), world_size=world.bounds)
    data = np.load(out)
    assert data["pos"].shape == (2, 3, 2)
    assert list(data["food_count"]) == [3, 2]
    assert np.isnan(data["pos"][0, 2]).all()
    assert data["state"][0, 2] == -1
    assert tuple(data["world_size"]) == (200.0, 100.0)

def test_recorder_disabled_captures_nothing():
    rec = Recorder(enabled=False)
    rec.maybe_capture(World(seed=1))
    assert len(rec) == 0
    assert rec.save_npz() is None

def test_recorder_stride(tmp_path):
    world = World(seed=2)
    rec = Recorder(enabled=True, stride_frames=3)
    for _ in range(7):
        rec.maybe_capture(world)
    assert len(rec) == 2


# ---------------- host keys / resize ----------------
@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    a = App(seed=3)
    a._open_surface((400, 300))
    a.world = a._new_world(400, 300)
    yield a
    pygame.display.quit()

def test_key_n_adds_creature(app):
    before = len(app.world.creatures)
    app._handle_key(pygame.K_n)
    assert len(app.world.creatures) == before + 1

def test_key_f_spawns_food(app):
    before = len(app.world.food)
    app._handle_key(pygame.K_f)
    assert len(app.world.food) == before + 1
    assert app.world.spawn_count == 1

def test_key_r_builds_fresh_world(app):
    old = app.world
    app.world.add_creature()
    app.paused = True
    app._handle_key(pygame.K_r)
    assert app.world is not old
    assert len(app.world.creatures) == WORLD.initial_creatures
    assert len(app.world.food) == WORLD.initial_food
    assert app.world.bounds == (400, 300)
    assert not app.paused

def test_key_space_v_esc(app):
    app.running = True
    app._handle_key(pygame.K_SPACE)
    assert app.paused
    app._handle_key(pygame.K_v)
    assert app.recorder.enabled
    app._handle_key(pygame.K_ESCAPE)
    assert not app.running

def test_key_s_with_empty_recording_saves_nothing(app, capsys):
    app._handle_key(pygame.K_s)
    assert "nothing to save" in capsys.readouterr().out

def test_resize_caps_surface_and_world(app):
    app._resize(1000, 900)
    assert app.world.bounds == (800, 600)
    assert (app.canvas.width, app.canvas.height) == (800, 600)
    app._resize(500, 400)
    assert app.world.bounds == (500, 400)
