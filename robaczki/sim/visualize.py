# robaczki/sim/visualize.py
from __future__ import annotations
import math
import matplotlib.pyplot as plt

from .world import World

def snapshot(world: World, title: str = "", show: bool = True):
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.set_xlim(0, world.width)
    ax.set_ylim(world.height, 0)   # screen coordinates: y grows down
    ax.set_aspect("equal")
    # food
    good = [f for f in world.food if not f.poisonous]
    bad = [f for f in world.food if f.poisonous]
    if good:
        ax.scatter([f.x for f in good], [f.y for f in good], c="red", s=16, label="Apple")
    if bad:
        ax.scatter([f.x for f in bad], [f.y for f in bad], c="green", s=16, label="Poison")
    # creatures
    live = [c for c in world.creatures if not c.dead]
    dead = [c for c in world.creatures if c.dead]
    if live:
        ax.quiver([c.x for c in live], [c.y for c in live],
                  [math.cos(c.direction) for c in live], [-math.sin(c.direction) for c in live],
                  color=[tuple(v / 255 for v in c.color) for c in live], label="Creatures")
    if dead:
        ax.scatter([c.x for c in dead], [c.y for c in dead], marker="x", c="black", label="Dead")
    ax.set_title(title or f"Frame {world.frame}")
    ax.legend(loc="upper right")
    plt.tight_layout()
    if show:
        plt.show()
    return fig
