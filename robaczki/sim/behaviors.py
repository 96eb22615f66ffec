# robaczki/sim/behaviors.py
from __future__ import annotations
from typing import Iterable, Optional, Sequence, Tuple
import math

from .models import Creature, Food, Bounds, food_by_id
from .config import CREATURE
from .rng import Rng, RNG

# ---------------- angle / position helpers ----------------
def normalize_angle(a: float) -> float:
    """Map an angle into [-pi, pi]."""
    while a > math.pi:
        a -= 2.0 * math.pi
    while a < -math.pi:
        a += 2.0 * math.pi
    return a

def wrap_position(x: float, y: float, bounds: Optional[Bounds]) -> Tuple[float, float]:
    if bounds is None:
        return x, y
    w, h = bounds
    # a tiny negative coordinate can round up to exactly w under modulo
    if w > 0:
        x = x % w
        if x >= w:
            x = 0.0
    if h > 0:
        y = y % h
        if y >= h:
            y = 0.0
    return x, y

def fatigue_multiplier(me: Creature) -> float:
    return CREATURE.fatigue_floor + (1.0 - CREATURE.fatigue_floor) * me.energy_ratio()

# ---------------- perception ----------------
def is_in_fov(me: Creature, tx: float, ty: float) -> bool:
    dx, dy = tx - me.x, ty - me.y
    if math.hypot(dx, dy) > me.view_range:
        return False
    diff = normalize_angle(math.atan2(dy, dx) - me.direction)
    return abs(diff) <= math.radians(me.view_angle) / 2.0

def find_nearest_food(me: Creature, foods: Iterable[Food]) -> Optional[Food]:
    # linear scan; food counts stay tiny
    nearest = None
    nearest_d = math.inf
    for f in foods:
        if not is_in_fov(me, f.x, f.y):
            continue
        d = math.hypot(f.x - me.x, f.y - me.y)
        if d < nearest_d:
            nearest, nearest_d = f, d
    return nearest

# ---------------- life-cycle branches ----------------
def _step_sleep(me: Creature) -> None:
    me.sleep_remaining -= 1
    me.speed = 0.0
    me.set_energy(me.energy + me.max_energy / me.sleep_duration)
    if me.sleep_remaining <= 0:
        me.energy = me.max_energy
        me.sleeping = False
        me.sleep_remaining = 0

def _fall_asleep(me: Creature) -> None:
    me.sleeping = True
    me.sleep_remaining = me.sleep_duration
    me.target_id = None
    me.speed = 0.0

def _step_eat(me: Creature, foods: Sequence[Food]) -> None:
    me.eating_remaining -= 1
    me.speed = 0.0
    if me.eating_remaining > 0:
        return
    # another creature may have finished this food first
    food = food_by_id(foods, me.target_id)
    if food is not None:
        me.set_health(me.health + food.nutrition_value)
        if food.poisonous:
            me.set_energy(me.energy - CREATURE.poison_energy_penalty)
        me.last_eaten_id = food.id
    me.eating = False
    me.eating_remaining = 0
    me.target_id = None

def _wander(me: Creature, rng: Rng) -> None:
    if rng.random() < CREATURE.wander_turn_prob:
        me.direction += rng.uniform(-CREATURE.wander_turn_max, CREATURE.wander_turn_max)
    me.set_speed(rng.uniform(CREATURE.wander_speed_min, CREATURE.wander_speed_max))

# ---------------- main behavior ----------------
def step_creature(me: Creature, foods: Sequence[Food], bounds: Optional[Bounds] = None,
                  dt: float = 1.0, rng: Rng = RNG) -> None:
    """
    Advance one creature by one frame.

    Precedence: dead > sleeping > exhausted (fall asleep) > eating > hunt/wander.
    Only the hunt/wander branch moves the creature; every other branch holds it still.
    """
    if me.dead or me.health <= 0:
        me.dead = True
        me.eating = me.sleeping = False
        me.target_id = None
        me.speed = 0.0
        return

    if me.sleeping:
        _step_sleep(me)
        return

    if me.energy <= 0 and not me.eating:
        _fall_asleep(me)
        return

    if me.eating:
        _step_eat(me, foods)
        return

    seen = find_nearest_food(me, foods)
    if seen is not None:
        me.target_id = seen.id
    target = food_by_id(foods, me.target_id)
    if target is None:
        me.target_id = None

    if target is not None:
        dx, dy = target.x - me.x, target.y - me.y
        me.direction = math.atan2(dy, dx)
        if math.hypot(dx, dy) < CREATURE.arrival_distance:
            me.eating = True
            me.eating_remaining = me.eating_duration
            me.speed = 0.0
            return
        me.set_speed(me.max_speed * CREATURE.hunt_speed_fraction)
    else:
        _wander(me, rng)

    # tired creatures crawl, whatever they are doing
    me.set_speed(me.speed * fatigue_multiplier(me))

    me.x += math.cos(me.direction) * me.speed * dt
    me.y += math.sin(me.direction) * me.speed * dt

    me.set_energy(me.energy - abs(me.speed) * CREATURE.energy_drain * dt)

    me.x, me.y = wrap_position(me.x, me.y, bounds)
