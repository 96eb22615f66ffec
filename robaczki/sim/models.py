# robaczki/sim/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple
import math

from .config import CREATURE, FOOD
from .rng import Rng, RNG

Vec = Tuple[float, float]
Bounds = Tuple[float, float]   # (width, height)
Color = Tuple[int, int, int]

# ---------------- clamping / defaults ----------------
def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))

def option_or_default(value, default: float) -> float:
    """Return value as float, or default when it is missing, non-numeric or not finite."""
    if value is None or isinstance(value, bool):
        return default
    try:
        v = float(value)
    except (TypeError, ValueError):
        return default
    return v if math.isfinite(v) else default

def positive_or_default(value, default: float) -> float:
    v = option_or_default(value, default)
    return v if v > 0 else default


class CreatureState(Enum):
    WANDERING = "wandering"
    HUNTING = "hunting"
    EATING = "eating"
    SLEEPING = "sleeping"
    DEAD = "dead"


@dataclass(frozen=True)
class Food:
    id: int
    x: float
    y: float
    nutrition_value: float = FOOD.nutrition
    poisonous: bool = False
    radius: float = FOOD.radius

    def pos(self) -> Vec:
        return (self.x, self.y)


@dataclass
class Creature:
    id: int
    x: float = CREATURE.x
    y: float = CREATURE.y
    direction: float = 0.0          # radians
    speed: float = 1.0
    energy: float = CREATURE.max_energy
    health: float = CREATURE.max_health

    max_speed: float = CREATURE.max_speed
    max_energy: float = CREATURE.max_energy
    max_health: float = CREATURE.max_health

    color: Color = (200, 120, 40)
    view_angle: float = 90.0        # degrees
    view_range: float = CREATURE.view_range

    # life cycle
    eating: bool = False
    eating_remaining: int = 0
    eating_duration: int = CREATURE.eating_duration
    sleeping: bool = False
    sleep_remaining: int = 0
    sleep_duration: int = CREATURE.sleep_duration
    dead: bool = False

    # food ids, never references: the world may drop the food at any time
    target_id: Optional[int] = None
    last_eaten_id: Optional[int] = None

    def __post_init__(self):
        # bad maxima/durations fall back to defaults; ratios and sleep recovery divide by them
        self.max_speed = positive_or_default(self.max_speed, CREATURE.max_speed)
        self.max_energy = positive_or_default(self.max_energy, CREATURE.max_energy)
        self.max_health = positive_or_default(self.max_health, CREATURE.max_health)
        self.view_range = positive_or_default(self.view_range, CREATURE.view_range)
        self.eating_duration = max(1, int(positive_or_default(self.eating_duration, CREATURE.eating_duration)))
        self.sleep_duration = max(1, int(positive_or_default(self.sleep_duration, CREATURE.sleep_duration)))
        self.set_speed(self.speed)
        self.set_energy(self.energy)
        self.set_health(self.health)

    def set_speed(self, s: float) -> None:
        self.speed = clamp(s, 0.0, self.max_speed)

    def set_energy(self, e: float) -> None:
        self.energy = clamp(e, 0.0, self.max_energy)

    def set_health(self, h: float) -> None:
        self.health = clamp(h, 0.0, self.max_health)

    @property
    def state(self) -> CreatureState:
        if self.dead:
            return CreatureState.DEAD
        if self.sleeping:
            return CreatureState.SLEEPING
        if self.eating:
            return CreatureState.EATING
        if self.target_id is not None:
            return CreatureState.HUNTING
        return CreatureState.WANDERING

    def pos(self) -> Vec:
        return (self.x, self.y)

    def energy_ratio(self) -> float:
        return self.energy / self.max_energy

    def health_ratio(self) -> float:
        return self.health / self.max_health


# ---------------- factories ----------------
def random_color(rng: Rng = RNG) -> Color:
    v = rng.randint(0, 0xFFFFFF)
    return ((v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)

def make_food(rng: Rng = RNG, bounds: Optional[Bounds] = None, *, food_id: int = 0,
              x=None, y=None, nutrition_value=None, poisonous=None) -> Food:
    w, h = bounds if bounds is not None else (800.0, 600.0)
    return Food(
        id=food_id,
        x=option_or_default(x, rng.uniform(0.0, w)),
        y=option_or_default(y, rng.uniform(0.0, h)),
        nutrition_value=option_or_default(nutrition_value, FOOD.nutrition),
        poisonous=bool(poisonous) if poisonous is not None else False,
    )

def make_creature(rng: Rng = RNG, *, creature_id: int = 0, **opts) -> Creature:
    """
    Build a creature from loose options. Unknown keys are ignored, bad values
    fall back to the CREATURE defaults (randomized where the default is random),
    and current resources are clamped to their maxima.
    """
    max_speed = positive_or_default(opts.get("max_speed"), CREATURE.max_speed)
    max_energy = positive_or_default(opts.get("max_energy"), CREATURE.max_energy)
    max_health = positive_or_default(opts.get("max_health"), CREATURE.max_health)

    direction = option_or_default(opts.get("direction"), rng.uniform(0.0, 2.0 * math.pi))
    speed = option_or_default(opts.get("speed"),
                              rng.uniform(CREATURE.wander_speed_min, CREATURE.wander_speed_max))
    view_angle = positive_or_default(opts.get("view_angle"),
                                     rng.uniform(CREATURE.min_view_angle, CREATURE.max_view_angle))
    color = opts.get("color")
    if not (isinstance(color, tuple) and len(color) == 3):
        color = random_color(rng)

    return Creature(
        id=creature_id,
        x=option_or_default(opts.get("x"), CREATURE.x),
        y=option_or_default(opts.get("y"), CREATURE.y),
        direction=direction,
        speed=speed,
        energy=option_or_default(opts.get("energy"), max_energy),
        health=option_or_default(opts.get("health"), max_health),
        max_speed=max_speed,
        max_energy=max_energy,
        max_health=max_health,
        color=color,
        view_angle=min(view_angle, 360.0),
        view_range=opts.get("view_range", CREATURE.view_range),
        eating_duration=opts.get("eating_duration", CREATURE.eating_duration),
        sleep_duration=opts.get("sleep_duration", CREATURE.sleep_duration),
    )


def food_by_id(foods: Iterable[Food], fid: Optional[int]) -> Optional[Food]:
    if fid is None:
        return None
    for f in foods:
        if f.id == fid:
            return f
    return None
