"""Unit tests for world.world and world.resources: temperature and resource lifecycle."""

from __future__ import annotations

import math
import random

import pytest

from config import SimConfig
from conftest import ConstRandom
from world.resources import FoodField, ParticleField, ResourceField, ToxinField
from world.world import Environment, temperature_at

pytestmark = pytest.mark.unit


class TestTemperature:
    def test_starts_at_optimum(self):
        assert temperature_at(0, SimConfig()) == pytest.approx(0.5)

    def test_slow_sinusoid(self):
        cfg = SimConfig()
        t = 1000
        assert temperature_at(t, cfg) == pytest.approx(0.5 + 0.2 * math.sin(t * 0.0005))

    def test_deterministic(self):
        cfg = SimConfig()
        assert temperature_at(777, cfg) == temperature_at(777, cfg)


class TestEnvironment:
    def test_create_seeds_initial_food(self):
        cfg = SimConfig(initial_food=40)
        env = Environment.create(cfg, random.Random(0))
        assert len(env.food) == 40
        assert len(env.toxins) == 0
        assert env.time == 0
        assert env.generation == 0
        assert (env.total_born, env.total_died) == (0, 0)
        for f in env.food:
            assert 0.0 <= f.x < cfg.width and 0.0 <= f.y < cfg.height

    def test_update_advances_clock_and_temperature(self, quiet_cfg, quiet_env):
        for _ in range(3):
            quiet_env.update(quiet_cfg, random.Random(0))
        assert quiet_env.time == 3
        assert quiet_env.temperature == pytest.approx(temperature_at(3, quiet_cfg))


class TestFoodField:
    def test_spawns_below_cap(self):
        field = FoodField(100, 100, target=10, abundance=1.0, lifetime=1500, spawn_scale=1.0)
        field.seed(14, random.Random(0))
        field.update(ConstRandom(0.0))
        assert len(field) == 15

    def test_no_spawn_at_one_and_a_half_target(self):
        field = FoodField(100, 100, target=10, abundance=1.0, lifetime=1500, spawn_scale=1.0)
        field.seed(15, random.Random(0))
        field.update(ConstRandom(0.0))
        assert len(field) == 15

    def test_spawn_probability_from_abundance(self):
        field = FoodField(100, 100, target=10, abundance=0.8, lifetime=1500)
        assert field.spawn_chance == pytest.approx(0.08)
        field.update(ConstRandom(0.09))
        assert len(field) == 0

    def test_items_age_out(self):
        field = FoodField(100, 100, target=10, abundance=0.0, lifetime=5)
        item = field.spawn_at(1.0, 1.0)
        for _ in range(4):
            field.update(random.Random(0))
        assert item.age == 4 and len(field) == 1
        field.update(random.Random(0))
        assert len(field) == 0

    def test_remove_by_identity(self):
        field = FoodField(100, 100, target=10, abundance=0.0, lifetime=5)
        a = field.spawn_at(1.0, 1.0)
        b = field.spawn_at(1.0, 1.0)
        field.remove([a])
        assert field.items == [b]


class TestResourceField:
    def test_base_field_has_no_item_type(self):
        field = ResourceField(100, 100, spawn_chance=1.0, lifetime=10)
        with pytest.raises(NotImplementedError):
            field.spawn_at(1.0, 1.0)


class TestToxinField:
    def test_spawn_probability_from_toxicity(self):
        field = ToxinField(100, 100, toxicity=0.05, lifetime=300)
        assert field.spawn_chance == pytest.approx(0.05 * 0.015)

    def test_shorter_lifetime(self):
        field = ToxinField(100, 100, toxicity=0.0, lifetime=300)
        field.spawn_at(5.0, 5.0)
        for _ in range(299):
            field.update(random.Random(0))
        assert len(field) == 1
        field.update(random.Random(0))
        assert len(field) == 0


class TestParticles:
    def test_disabled_field_stays_empty(self):
        field = ParticleField(100, 100, spawn_chance=1.0, enabled=False)
        field.update(ConstRandom(0.0))
        assert len(field) == 0

    def test_particles_drift_and_fade(self):
        field = ParticleField(100, 100, spawn_chance=1.0, life=3)
        field.update(ConstRandom(0.0))
        p = field.particles[0]
        assert p.life == 2
        assert (p.vx, p.vy) == (-0.25, -0.25)
        field.spawn_chance = 0.0
        field.update(ConstRandom(0.5))
        field.update(ConstRandom(0.5))
        assert len(field) == 0
