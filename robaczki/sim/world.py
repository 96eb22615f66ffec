# robaczki/sim/world.py
from __future__ import annotations
from typing import List, Optional

from .models import Food, Creature, Bounds, make_food, make_creature, food_by_id
from .rng import Rng
from .config import WORLD, FOOD


class World:
    """Owns every creature and apple; nothing else mutates the food list."""

    def __init__(self, width: float = WORLD.width, height: float = WORLD.height,
                 rng: Rng | None = None, seed: int | None = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else Rng(seed)
        self.creatures: List[Creature] = []
        self.food: List[Food] = []
        self.frame = 0

        # spawn clock
        self.spawn_timer = 0
        self.spawn_count = 0

        self._food_id = 0
        self._creature_id = 0

    @property
    def bounds(self) -> Bounds:
        return (self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def _next_food_id(self) -> int:
        self._food_id += 1
        return self._food_id

    def _next_creature_id(self) -> int:
        self._creature_id += 1
        return self._creature_id

    # --- food ---
    def add_food(self, x=None, y=None, nutrition_value=None, poisonous: bool = False) -> Food:
        if nutrition_value is None and poisonous:
            nutrition_value = FOOD.poison_nutrition
        f = make_food(self.rng, self.bounds, food_id=self._next_food_id(),
                      x=x, y=y, nutrition_value=nutrition_value, poisonous=poisonous)
        self.food.append(f)
        return f

    def spawn_food(self) -> Food:
        """Drop one apple at a random spot; every `poison_every`-th spawn is poisonous."""
        self.spawn_count += 1
        poisonous = self.spawn_count % int(WORLD.poison_every) == 0
        return self.add_food(
            nutrition_value=FOOD.poison_nutrition if poisonous else FOOD.nutrition,
            poisonous=poisonous,
        )

    def tick_food_spawn(self) -> Optional[Food]:
        self.spawn_timer += 1
        if self.spawn_timer < int(WORLD.food_spawn_interval):
            return None
        self.spawn_timer = 0
        return self.spawn_food()

    def food_by_id(self, fid: int) -> Optional[Food]:
        return food_by_id(self.food, fid)

    def remove_food(self, fid: int) -> bool:
        for i, f in enumerate(self.food):
            if f.id == fid:
                del self.food[i]
                return True
        return False

    # --- creatures ---
    def add_creature(self, **opts) -> Creature:
        opts.setdefault("x", self.rng.uniform(0.0, self.width))
        opts.setdefault("y", self.rng.uniform(0.0, self.height))
        c = make_creature(self.rng, creature_id=self._next_creature_id(), **opts)
        self.creatures.append(c)
        return c

    def populate(self, n_creatures: Optional[int] = None, n_food: Optional[int] = None) -> None:
        """Start-of-world placement: a few creatures and some safe apples."""
        if n_creatures is None:
            n_creatures = int(WORLD.initial_creatures)
        if n_food is None:
            n_food = int(WORLD.initial_food)
        for _ in range(n_creatures):
            self.add_creature()
        for _ in range(n_food):
            self.add_food(poisonous=False)
