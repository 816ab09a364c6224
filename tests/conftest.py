"""Shared fixtures and builders for engine tests."""

from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from config import SimConfig
from organism.genome import Genome
from organism.organism import Organism
from world.world import Environment


class ConstRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_genome(**overrides: float) -> Genome:
    values = dict(
        size=5.0,
        speed=1.0,
        energy_efficiency=1.0,
        reproduction_threshold=0.5,
        reproduction_speed=1.0,
        lifespan=5000.0,
        aggressiveness=0.1,
        sociability=0.1,
        toxin_resistance=0.5,
        sensor_range=50.0,
        hue=180.0,
    )
    values.update(overrides)
    return Genome(**values)


def make_organism(
    x: float = 100.0,
    y: float = 100.0,
    cfg: SimConfig | None = None,
    energy: float | None = None,
    age: int = 0,
    cooldown: int = 0,
    **genes: float,
) -> Organism:
    cfg = cfg or SimConfig()
    org = Organism.initial(x, y, make_genome(**genes), cfg)
    if energy is not None:
        org.energy = energy
    org.age = age
    org.reproduction_cooldown = cooldown
    return org


@pytest.fixture
def quiet_cfg() -> SimConfig:
    """No food, no toxins, no particles: nothing spawns on its own."""
    return SimConfig(
        initial_population=0,
        initial_food=0,
        food_abundance=0.0,
        toxicity=0.0,
        particles=False,
    )


@pytest.fixture
def quiet_env(quiet_cfg: SimConfig) -> Environment:
    env = Environment.create(quiet_cfg, random.Random(1))
    env.temperature = quiet_cfg.temperature_optimum
    return env


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
