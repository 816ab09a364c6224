"""Tests for simulation.snapshot and render.*: read-only views and off-screen drawing."""

from __future__ import annotations

import dataclasses

import pygame
import pytest

from config import SimConfig
from render import colors
from render.renderer import draw_extinction, draw_hud, draw_organism, draw_world
from render.trails import TRAIL_LENGTH, TrailBuffer
from simulation.scheduler import Simulation
from simulation.snapshot import snapshot_organism
from conftest import make_organism

pytestmark = pytest.mark.unit


@pytest.fixture(scope="module", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sim() -> Simulation:
    return Simulation(SimConfig(width=200, height=150, initial_population=8, initial_food=20), seed=3)


class TestSnapshot:
    def test_counts_match_state(self, sim):
        for _ in range(3):
            sim.step()
        snap = sim.snapshot()
        assert len(snap.organisms) == len(sim.population)
        assert len(snap.food) == len(sim.env.food)
        assert snap.tick == sim.env.time == 3
        assert snap.stats is sim.stats

    def test_snapshot_is_frozen_and_detached(self, sim):
        org = sim.population[0]
        view = sim.snapshot().organisms[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.x = 0.0  # type: ignore[misc]
        org.x += 10.0
        assert view.x != org.x

    def test_energy_ratio(self):
        view = snapshot_organism(make_organism(energy=30.0))
        assert view.energy_ratio == pytest.approx(0.25)


class TestTrails:
    def test_bounded_length(self):
        org = make_organism()
        trails = TrailBuffer()
        for i in range(TRAIL_LENGTH + 5):
            org.x = float(i)
            trails.record([snapshot_organism(org)])
        pts = list(trails.points(org.uid))
        assert len(pts) == TRAIL_LENGTH
        assert pts[-1][0] == float(TRAIL_LENGTH + 4)
        assert pts[-1][2] == 1.0
        assert pts[0][2] < pts[-1][2]

    def test_newborn_never_inherits_a_dead_trail(self):
        trails = TrailBuffer()
        old = make_organism(10.0, 10.0)
        trails.record([snapshot_organism(old)])
        old_key = old.uid
        del old
        young = make_organism(200.0, 200.0)
        trails.record([snapshot_organism(young)])
        assert young.uid != old_key
        assert list(trails.points(young.uid)) == [(200.0, 200.0, 1.0)]

    def test_forgets_vanished_organisms(self):
        a, b = make_organism(), make_organism()
        trails = TrailBuffer()
        trails.record([snapshot_organism(a), snapshot_organism(b)])
        trails.record([snapshot_organism(a)])
        assert len(trails) == 1
        assert list(trails.points(b.uid)) == []


class TestColors:
    def test_species_markers_distinct(self):
        assert len({tuple(colors.species_marker(s)) for s in range(8)}) == 8

    def test_energy_ring_channels_clamped(self):
        assert tuple(colors.energy_ring(0.9))[:3] == (255, 255, 0)
        assert tuple(colors.energy_ring(0.0))[:3] == (255, 0, 0)


class TestDrawing:
    def test_draw_world_and_hud(self, sim):
        surface = pygame.Surface((sim.cfg.width, sim.cfg.height))
        trails = TrailBuffer()
        for _ in range(4):
            sim.step()
            snap = sim.snapshot()
            trails.record(snap.organisms)
        draw_world(surface, snap, trails, debug=True)
        draw_hud(surface, snap, paused=True)
        draw_extinction(surface)
        hud = [tuple(surface.get_at((x, y)))[:3] for x in range(12, 150) for y in range(10, 30)]
        assert any(px != colors.BG for px in hud)

    def test_low_energy_organism_draws_over_background(self):
        surface = pygame.Surface((60, 60))
        surface.fill(colors.BG)
        org = make_organism(30.0, 30.0, energy=10.0, size=8.0)
        draw_organism(surface, snapshot_organism(org))
        assert tuple(surface.get_at((30, 30)))[:3] != colors.BG
