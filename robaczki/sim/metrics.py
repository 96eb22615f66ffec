# robaczki/sim/metrics.py
from __future__ import annotations
from typing import Dict
import os
import csv

from .models import CreatureState

def summarize_frame(frame: int, world) -> Dict[str, float]:
    pop = world.creatures
    states = [c.state for c in pop]
    alive = [c for c in pop if not c.dead]
    n_alive = max(len(alive), 1)
    return dict(
        frame=frame,
        creatures=len(pop),
        alive=len(alive),
        sleeping=sum(1 for s in states if s is CreatureState.SLEEPING),
        eating=sum(1 for s in states if s is CreatureState.EATING),
        food=len(world.food),
        poisonous_food=sum(1 for f in world.food if f.poisonous),
        avg_energy=sum(c.energy for c in alive) / n_alive,
        avg_health=sum(c.health for c in alive) / n_alive,
    )

def append_csv(path: str, row: Dict[str, float]) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        if write_header:
            w.writeheader()
        w.writerow(row)
