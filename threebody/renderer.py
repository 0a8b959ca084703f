#!/usr/bin/env python3
"""
Pygame drawing for Three Bodies: trails, bodies, labels, HUD and the collision banner.

Nothing here changes simulation state; draw() reads a Simulation and a
SimulationConfig and paints one frame.
"""
from typing import List, Optional, Tuple

import pygame
from pygame import gfxdraw

from .config import SimulationConfig, UiDetail
from .constants import (
    BACKGROUND_COLOR,
    BANNER_COLOR,
    HUD_TEXT_COLOR,
    LABEL_TEXT_COLOR,
    SAFE_COORD_LIMIT,
)
from .controls import HELP_TEXT
from .physics import kinetic_energy
from .simulation import Simulation
from .vector_utils import vec_len

LINE_HEIGHT = 18


def _on_off(flag: bool) -> str:
    return "on" if flag else "off"


def hud_lines(sim: Simulation, config: SimulationConfig) -> List[str]:
    """Overlay text for the current UI detail level, top to bottom."""
    if config.ui_detail is UiDetail.OFF:
        return []
    if config.ui_detail is UiDetail.MINIMAL:
        return ["H: help"]
    lines = list(HELP_TEXT)
    lines.append("")
    lines.append(
        f"Trails: {_on_off(config.trails)}  Wrap: {_on_off(config.wrap)}  "
        f"Elastic: {_on_off(config.elastic)}  Auto-restart: {_on_off(config.auto_restart)}"
    )
    lines.append(f"Step: {sim.steps}  Trail samples: {len(sim.trails)}  "
                 f"KE: {kinetic_energy(sim.bodies):.2f}")
    return lines


def body_label(mass: float, velocity: Tuple[float, float]) -> str:
    return f"m={mass:.1f} v={vec_len(velocity):.2f}"


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class Renderer:
    """Draws the simulation onto a pygame surface."""

    def __init__(self, font_name: str = "consolas", font_size: int = 16):
        self.font_name = font_name
        self.font_size = font_size
        self._font = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(self.font_name, self.font_size)
        return self._font

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int, color) -> None:
        img = self.font.render(text, True, color)
        surface.blit(img, (x, y))

    def draw(self, surface: pygame.Surface, sim: Simulation, config: SimulationConfig) -> None:
        surface.fill(BACKGROUND_COLOR)

        if config.trails:
            for sample in sim.trails:
                p = _safe_point(sample.position)
                if p:
                    gfxdraw.pixel(surface, p[0], p[1], (*sample.color, int(255 * sample.alpha)))

        show_labels = config.ui_detail is UiDetail.FULL
        for b in sim.bodies:
            p = _safe_point(b.position)
            if p is None:
                continue
            r = max(1, int(b.radius))
            gfxdraw.filled_circle(surface, p[0], p[1], r, b.color)
            gfxdraw.aacircle(surface, p[0], p[1], r, b.color)
            if show_labels:
                self.draw_text(surface, body_label(b.mass, b.velocity),
                               p[0] + r + 4, p[1] - r - 4, LABEL_TEXT_COLOR)

        for i, line in enumerate(hud_lines(sim, config)):
            self.draw_text(surface, line, 10, 10 + i * LINE_HEIGHT, HUD_TEXT_COLOR)

        if not sim.running:
            self.draw_banner(surface, "COLLISION - press Space to reset")

    def draw_banner(self, surface: pygame.Surface, text: str) -> None:
        img = self.font.render(text, True, BANNER_COLOR)
        w, h = surface.get_size()
        surface.blit(img, ((w - img.get_width()) // 2, (h - img.get_height()) // 2))
