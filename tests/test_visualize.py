import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from robaczki.sim.visualize import snapshot
from robaczki.sim.world import World


def test_snapshot_plots_world():
    world = World(300.0, 200.0, seed=5)
    world.populate(n_creatures=2, n_food=2)
    world.add_food(poisonous=True)
    world.creatures[0].dead = True
    fig = snapshot(world, title="t", show=False)
    ax = fig.axes[0]
    assert ax.get_title() == "t"
    assert ax.get_xlim() == (0.0, 300.0)
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert {"Apple", "Poison", "Dead"} <= set(labels)
    plt.close(fig)
