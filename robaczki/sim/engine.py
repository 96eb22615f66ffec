# robaczki/sim/engine.py
from __future__ import annotations
from typing import Dict, List, Optional

from .world import World
from .behaviors import step_creature
from .metrics import summarize_frame
from .config import WORLD

def _consume_signal(world: World, me) -> None:
    if me.last_eaten_id is None:
        return
    world.remove_food(me.last_eaten_id)
    me.last_eaten_id = None

def run_frame(world: World, renderer=None, dt: float = WORLD.dt) -> None:
    """
    One frame, in order:
      (a) tick the food spawn clock (maybe drop an apple)
      (b) draw background + food
      (c) per creature: step, draw, then remove whatever it just finished eating
      (d) draw HUD
    `renderer` is optional so the loop can run headless.
    """
    world.tick_food_spawn()

    if renderer is not None:
        renderer.draw_background()
        for f in world.food:
            renderer.draw_food(f)

    for me in world.creatures:
        step_creature(me, world.food, world.bounds, dt, world.rng)
        if renderer is not None:
            renderer.draw_creature(me)
        _consume_signal(world, me)

    if renderer is not None:
        renderer.draw_hud(world)

    world.frame += 1

def simulate(world: World, frames: int, dt: float = WORLD.dt,
             report_every: Optional[int] = None) -> List[Dict[str, float]]:
    rows: List[Dict[str, float]] = []
    for _ in range(frames):
        run_frame(world, None, dt)
        if report_every and world.frame % report_every == 0:
            rows.append(summarize_frame(world.frame, world))
    return rows
