"""
organism_sim module: render/colors.py

Central color palette.
"""

from __future__ import annotations
import pygame

BG = (10, 10, 15)
HUD_TEXT = (235, 235, 235)
HUD_DIM = (156, 163, 175)

FOOD = (80, 255, 150)
TOXIN = (255, 50, 80)
EXTINCT = (239, 68, 68)


def hsl(hue: float, sat: float, light: float) -> pygame.Color:
    """
    HSL -> pygame.Color. ``hue`` in degrees, ``sat``/``light`` in percent.
    """
    c = pygame.Color(0, 0, 0)
    c.hsla = (hue % 360.0, sat, light, 100)
    return c


def body(hue: float) -> pygame.Color:
    return hsl(hue, 70, 60)


def body_core(hue: float) -> pygame.Color:
    return hsl(hue, 85, 75)


def species_marker(species: int) -> pygame.Color:
    return hsl(species * 45, 95, 85)


def trail(hue: float, fade: float) -> pygame.Color:
    # fade in [0, 1]; darken toward the background
    return hsl(hue, 60, 10 + 45 * max(0.0, min(1.0, fade)))


def energy_ring(ratio: float) -> pygame.Color:
    return pygame.Color(255, max(0, min(255, int(ratio * 255 * 1.8))), 0)


def particle(hue: float, life01: float) -> pygame.Color:
    return hsl(hue, 40, 8 + 20 * max(0.0, min(1.0, life01)))
