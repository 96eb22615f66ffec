# robaczki/sim/config.py
from dataclasses import dataclass
import math

# ------------------------------------------------------------
# WORLD / FRAME LOOP SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)  # mutable so UI can tweak spawn rate at runtime
class WorldConfig:
    width: float = 800.0
    height: float = 600.0
    fps: int = 60
    dt: float = 1.0
    # food spawning: one apple every 30 s at 60 fps
    food_spawn_interval: int = 30 * 60
    poison_every: int = 5
    # start of world
    initial_food: int = 5
    initial_creatures: int = 1

# ------------------------------------------------------------
# FOOD
# ------------------------------------------------------------
@dataclass(frozen=True)
class FoodConfig:
    nutrition: float = 15.0
    poison_nutrition: float = -10.0
    radius: float = 4.0

# ------------------------------------------------------------
# CREATURE DEFAULTS, ENERGY ECONOMY, BEHAVIOR TUNING
# ------------------------------------------------------------
@dataclass(frozen=True)
class CreatureConfig:
    x: float = 100.0
    y: float = 100.0
    max_speed: float = 4.0
    max_energy: float = 100.0
    max_health: float = 10.0
    min_view_angle: float = 45.0    # degrees
    max_view_angle: float = 180.0
    view_range: float = 150.0
    eating_duration: int = 3 * 60   # frames
    sleep_duration: int = 5 * 60

    arrival_distance: float = 15.0
    hunt_speed_fraction: float = 0.8
    wander_turn_prob: float = 0.03
    wander_turn_max: float = math.pi / 4   # +-45 deg
    wander_speed_min: float = 0.5
    wander_speed_max: float = 2.0

    energy_drain: float = 0.02      # per unit speed per frame
    fatigue_floor: float = 0.3
    poison_energy_penalty: float = 20.0

# ------------------------------------------------------------
# WINDOW FITTING
# ------------------------------------------------------------
@dataclass(frozen=True)
class SurfaceConfig:
    max_width: int = 800
    max_height: int = 600
    margin_x: int = 40
    margin_y: int = 120

# ------------------------------------------------------------
# HEADLESS SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)
class SimConfig:
    seed: int = 42
    frames: int = 60 * 60 * 5
    report_every: int = 60 * 30
    track_csv: str | None = None
    enable_plot: bool = False

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
WORLD = WorldConfig()
FOOD = FoodConfig()
CREATURE = CreatureConfig()
SURFACE = SurfaceConfig()
SIM = SimConfig()
