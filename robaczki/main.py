# robaczki/main.py
from __future__ import annotations
import argparse

from .sim.config import SIM, WORLD
from .sim.world import World
from .sim.engine import simulate
from .sim.metrics import append_csv
from .ui.app import run_ui  # UI entry

def run():
    parser = argparse.ArgumentParser(description="Robaczki: creatures foraging for apples on a wrapping plane")
    parser.add_argument("--frames", type=int, default=SIM.frames, help="headless frames to simulate")
    parser.add_argument("--seed", type=int, default=SIM.seed)
    parser.add_argument("--creatures", type=int, default=WORLD.initial_creatures)
    parser.add_argument("--food", type=int, default=WORLD.initial_food)
    parser.add_argument("--report-every", type=int, default=SIM.report_every)
    parser.add_argument("--csv", type=str, default=SIM.track_csv)
    parser.add_argument("--plot", action="store_true", default=SIM.enable_plot)
    parser.add_argument("--ui", action="store_true", help="launch real-time UI")
    args = parser.parse_args()

    if args.ui:
        run_ui(seed=args.seed)
        return

    world = World(seed=args.seed)
    world.populate(n_creatures=args.creatures, n_food=args.food)

    rows = simulate(world, args.frames, report_every=max(1, args.report_every))
    for row in rows:
        print(
            f"Frame {row['frame']:6d} | alive={row['alive']:2d}/{row['creatures']:2d} "
            f"eating={row['eating']:2d} sleeping={row['sleeping']:2d} "
            f"food={row['food']:3d} (poison {row['poisonous_food']:2d}) "
            f"avg_energy={row['avg_energy']:6.2f} avg_health={row['avg_health']:5.2f}"
        )
        if args.csv:
            append_csv(args.csv, row)

    if args.plot:
        from .sim.visualize import snapshot
        snapshot(world, title=f"Frame {world.frame} (seed {args.seed})")

if __name__ == "__main__":
    run()
