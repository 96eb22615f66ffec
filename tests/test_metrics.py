import csv

from robaczki.sim.metrics import summarize_frame, append_csv
from robaczki.sim.world import World


def _world():
    w = World(800.0, 600.0, seed=11)
    a = w.add_creature(energy=40.0, health=10.0)
    b = w.add_creature(energy=60.0, health=4.0)
    c = w.add_creature()
    a.sleeping = True
    b.eating = True
    c.dead = True
    w.add_food()
    w.add_food(poisonous=True)
    return w

def test_summarize_frame_counts():
    row = summarize_frame(5, _world())
    assert row["frame"] == 5
    assert row["creatures"] == 3
    assert row["alive"] == 2
    assert row["sleeping"] == 1
    assert row["eating"] == 1
    assert row["food"] == 2
    assert row["poisonous_food"] == 1
    assert row["avg_energy"] == 50.0
    assert row["avg_health"] == 7.0

def test_summarize_empty_world():
    row = summarize_frame(0, World(seed=1))
    assert row["alive"] == 0
    assert row["avg_energy"] == 0.0

def test_append_csv_writes_header_once(tmp_path):
    path = tmp_path / "out" / "frames.csv"
    append_csv(str(path), dict(frame=1, food=2))
    append_csv(str(path), dict(frame=2, food=3))
    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert rows == [{"frame": "1", "food": "2"}, {"frame": "2", "food": "3"}]
