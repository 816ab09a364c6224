"""
Simulation tuning knobs.

Module constants are the defaults; ``SimConfig`` bundles the per-run values
that get passed into ``initialize``/``step``.
"""

from __future__ import annotations
from dataclasses import dataclass

# World
WORLD_W, WORLD_H = 800, 600

# Population controls
START_POP = 50
MAX_POP = 500

# Energy + life
MAX_ENERGY = 120.0
CHILD_INITIAL_ENERGY = 60.0
INITIAL_POP_ENERGY_FACTOR = 0.75
BASE_REPRO_COOLDOWN = 200
MIN_REPRO_AGE = 50
REPRO_ENERGY_COST_FACTOR = 0.15
CHILD_SPAWN_MARGIN = 10.0

# Metabolism
METABOLIC_RATE_BASE = 0.08
SIZE_COST_FACTOR = 0.01
STRESS_IMPACT_MULTIPLIER = 0.01
EFFICIENCY_MIN_DIVISOR = 0.01
EFFICIENCY_PENALTY = 5.0

# Temperature + toxins
TEMPERATURE_OPTIMUM = 0.5
TEMPERATURE_AMPLITUDE = 0.2
TEMPERATURE_RATE = 0.0005
TEMPERATURE_STRESS_FACTOR = 0.1
TOXIN_DAMAGE_FACTOR = 0.01

# Food field
FOOD_COUNT = 150
FOOD_ENERGY_GAIN = 65.0
FOOD_LIFETIME = 1500
FOOD_ABUNDANCE = 0.8
FOOD_SPAWN_SCALE = 0.10
EAT_MARGIN = 4.0

# Toxins
TOXICITY = 0.05
TOXIN_SPAWN_SCALE = 0.015
TOXIN_LIFETIME = 300

# Ambient particles (visual only)
PARTICLE_SPAWN_CHANCE = 0.3
PARTICLE_LIFE = 100

# Mutation
MUTATION_RATE = 0.06
CROSSOVER_CHANCE = 0.5
MATE_RANGE_FACTOR = 0.8

# Progress marker
GENERATION_INTERVAL = 500

# Genome generation bounds (min, max)
SIZE_RANGE = (3.0, 9.0)
SPEED_RANGE = (0.5, 2.0)
ENERGY_EFFICIENCY_RANGE = (0.7, 1.4)
REPRO_THRESHOLD_FACTOR_RANGE = (0.40, 1.10)
REPRO_SPEED_FACTOR_RANGE = (0.8, 1.2)
LIFESPAN_BASE = 4500.0
LIFESPAN_RANDOM_ADD = 2500.0
AGGRESSIVENESS_RANGE = (0.0, 0.6)
SOCIABILITY_RANGE = (0.0, 1.0)
TOXIN_RESISTANCE_RANGE = (0.2, 0.8)
SENSOR_RANGE_RANGE = (30.0, 80.0)
HUE_RANGE = (0.0, 360.0)

# Runtime pacing (viewer only)
SIM_SPEED = 1  # simulation steps per rendered frame
FPS = 60


@dataclass(frozen=True)
class SimConfig:
    """
    Static per-run parameters. Never mutated once a run starts.
    """
    width: int = WORLD_W
    height: int = WORLD_H
    initial_population: int = START_POP
    max_population: int = MAX_POP
    initial_food: int = FOOD_COUNT

    max_energy: float = MAX_ENERGY
    child_initial_energy: float = CHILD_INITIAL_ENERGY
    initial_energy_factor: float = INITIAL_POP_ENERGY_FACTOR
    base_cooldown: int = BASE_REPRO_COOLDOWN
    min_reproduction_age: int = MIN_REPRO_AGE
    reproduction_cost_factor: float = REPRO_ENERGY_COST_FACTOR
    child_spawn_margin: float = CHILD_SPAWN_MARGIN

    metabolic_rate_base: float = METABOLIC_RATE_BASE
    size_cost_factor: float = SIZE_COST_FACTOR
    stress_impact_multiplier: float = STRESS_IMPACT_MULTIPLIER

    temperature_optimum: float = TEMPERATURE_OPTIMUM
    temperature_amplitude: float = TEMPERATURE_AMPLITUDE
    temperature_rate: float = TEMPERATURE_RATE
    temperature_stress_factor: float = TEMPERATURE_STRESS_FACTOR
    toxin_damage_factor: float = TOXIN_DAMAGE_FACTOR

    food_energy_gain: float = FOOD_ENERGY_GAIN
    food_lifetime: int = FOOD_LIFETIME
    food_abundance: float = FOOD_ABUNDANCE
    eat_margin: float = EAT_MARGIN
    toxicity: float = TOXICITY
    toxin_lifetime: int = TOXIN_LIFETIME
    particles: bool = True

    mutation_rate: float = MUTATION_RATE
    crossover_chance: float = CROSSOVER_CHANCE
    mate_range_factor: float = MATE_RANGE_FACTOR

    generation_interval: int = GENERATION_INTERVAL

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"world size must be positive, got {self.width}x{self.height}")
        if self.max_population < 0:
            raise ValueError(f"max_population must be >= 0, got {self.max_population}")
        if not 0 <= self.initial_population <= self.max_population:
            raise ValueError(
                f"initial_population must be in [0, {self.max_population}], got {self.initial_population}"
            )
        if self.initial_food < 0:
            raise ValueError(f"initial_food must be >= 0, got {self.initial_food}")
        if self.max_energy <= 0:
            raise ValueError(f"max_energy must be positive, got {self.max_energy}")
        if self.generation_interval <= 0:
            raise ValueError(f"generation_interval must be positive, got {self.generation_interval}")
        for name in ("mutation_rate", "crossover_chance", "food_abundance", "toxicity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
