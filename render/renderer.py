"""
organism_sim module: render/renderer.py

Pygame rendering of world snapshots (top-down).
"""

from __future__ import annotations
import math
import pygame

from render import colors
from render.trails import TrailBuffer
from simulation.snapshot import ItemSnapshot, OrganismSnapshot, ParticleSnapshot, WorldSnapshot


def _safe_radius(r: float) -> float:
    return r if math.isfinite(r) and r > 0.1 else 1.0


def draw_particles(screen: pygame.Surface, particles: tuple[ParticleSnapshot, ...]) -> None:
    for p in particles:
        pygame.draw.circle(screen, colors.particle(p.hue, p.life / 100.0), (int(p.x), int(p.y)), 1)


def draw_food(screen: pygame.Surface, food: tuple[ItemSnapshot, ...], tick: int) -> None:
    for f in food:
        pulse = math.sin(tick * 0.08 + f.x * 0.02 + f.y * 0.01) * 0.3 + 0.7
        r = 2.8 + pulse * 0.5
        pygame.draw.circle(screen, colors.FOOD, (int(f.x), int(f.y)), max(1, int(round(r))))


def draw_toxins(screen: pygame.Surface, toxins: tuple[ItemSnapshot, ...], tick: int) -> None:
    # rotating pentagons
    for t in toxins:
        size = 3.0 + math.sin(tick * 0.2 + t.y * 0.02) * 0.5
        pts = []
        for i in range(5):
            a = (i / 5) * math.pi * 2 + tick * 0.02
            pts.append((t.x + math.cos(a) * size, t.y + math.sin(a) * size))
        pygame.draw.polygon(screen, colors.TOXIN, pts)


def draw_trail(screen: pygame.Surface, org: OrganismSnapshot, trails: TrailBuffer) -> None:
    r = _safe_radius(org.genome.size)
    for i, (x, y, fade) in enumerate(trails.points(org.key)):
        if fade <= 0.05:
            continue
        size = max(1, int(_safe_radius(r * 0.25) * fade))
        pygame.draw.circle(screen, colors.trail(org.genome.hue + i * 6, fade), (int(x), int(y)), size)


def draw_organism(screen: pygame.Surface, org: OrganismSnapshot, debug: bool = False) -> None:
    r = _safe_radius(org.genome.size)
    cx, cy = int(org.x), int(org.y)

    pygame.draw.circle(screen, colors.body(org.genome.hue), (cx, cy), max(1, int(r)))
    pygame.draw.circle(screen, colors.body_core(org.genome.hue), (cx, cy), max(1, int(r * 0.6)))

    # energy ring only when running low
    ratio = org.energy_ratio
    if ratio < 0.65:
        width = max(1, int(r * 0.12))
        side = int(2 * (r + width))
        rect = pygame.Rect(0, 0, side, side)
        rect.center = (cx, cy)
        start = math.pi / 2 - math.pi * 2 * ratio
        pygame.draw.arc(screen, colors.energy_ring(ratio), rect, start, math.pi / 2, width)

    marker = _safe_radius(r * 0.33 + math.sin(org.age * 0.05) * (r * 0.05))
    pygame.draw.circle(screen, colors.species_marker(org.species), (cx, cy), max(1, int(marker)))

    if debug:
        font = pygame.font.Font(None, 16)
        txt = font.render(f"E:{org.energy:.1f} A:{org.age} S:{org.species}", True, colors.HUD_TEXT)
        screen.blit(txt, (cx + int(r) + 2, cy - int(r) - 2))


def draw_world(screen: pygame.Surface, snap: WorldSnapshot, trails: TrailBuffer, debug: bool = False) -> None:
    screen.fill(colors.BG)
    draw_particles(screen, snap.particles)
    draw_food(screen, snap.food, snap.tick)
    draw_toxins(screen, snap.toxins, snap.tick)
    for org in snap.organisms:
        draw_trail(screen, org, trails)
    for org in snap.organisms:
        draw_organism(screen, org, debug=debug)


def draw_hud(screen: pygame.Surface, snap: WorldSnapshot, paused: bool = False) -> None:
    font = pygame.font.Font(None, 22)
    s = snap.stats

    lines = [
        f"Generation: {s.generation}   Tick: {s.tick}" + ("   [paused]" if paused else ""),
        f"Alive: {s.population}   Species: {s.species}",
        f"Born: {s.total_born}   Died: {s.total_died}",
        f"Avg size: {s.avg_size:.2f}  speed: {s.avg_speed:.2f}  energy: {s.avg_energy:.2f}",
        f"Temperature: {s.temperature:.3f}   Food: {s.food}   Toxins: {s.toxins}",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (12, y))
        y += 20


def draw_extinction(screen: pygame.Surface) -> None:
    w, h = screen.get_size()
    big = pygame.font.Font(None, 48)
    small = pygame.font.Font(None, 24)

    title = big.render("Extinction Event", True, colors.EXTINCT)
    hint = small.render("All organisms have perished. Press R to restart.", True, colors.HUD_DIM)
    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 16)))
    screen.blit(hint, hint.get_rect(center=(w // 2, h // 2 + 20)))
