#!/usr/bin/env python3
"""
Keyboard controls.

Key releases collected during a frame become a FrameCommands record. The shell applies
it between frames: toggles produce a new SimulationConfig, reset and quit are acted on
by the shell itself.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

import pygame

from .config import SimulationConfig, UiDetail

logger = logging.getLogger(__name__)

# Key -> config option flipped on release.
TOGGLE_KEYS = {
    pygame.K_h: "ui_detail",
    pygame.K_r: "auto_restart",
    pygame.K_e: "elastic",
    pygame.K_w: "wrap",
    pygame.K_t: "trails",
}
RESET_KEY = pygame.K_SPACE
QUIT_KEY = pygame.K_ESCAPE

HELP_TEXT = [
    "Space: reset bodies",
    "H: cycle help overlay",
    "R: toggle auto-restart",
    "E: toggle elastic collisions",
    "W: toggle screen wrap",
    "T: toggle trails",
    "Esc: quit",
]


@dataclass
class FrameCommands:
    """Everything the user asked for during one frame."""
    reset: bool = False
    quit: bool = False
    toggles: List[str] = field(default_factory=list)
    ui_detail: Optional[UiDetail] = None

    def merge(self, other: "FrameCommands") -> "FrameCommands":
        return FrameCommands(
            reset=self.reset or other.reset,
            quit=self.quit or other.quit,
            toggles=self.toggles + other.toggles,
            ui_detail=other.ui_detail if other.ui_detail is not None else self.ui_detail,
        )


def commands_from_events(events: Iterable[pygame.event.Event]) -> FrameCommands:
    """Translate one frame's pygame events into commands. Only key releases count."""
    commands = FrameCommands()
    for event in events:
        if event.type == pygame.QUIT:
            commands.quit = True
        elif event.type == pygame.KEYUP:
            if event.key == QUIT_KEY:
                commands.quit = True
            elif event.key == RESET_KEY:
                commands.reset = True
            elif event.key in TOGGLE_KEYS:
                commands.toggles.append(TOGGLE_KEYS[event.key])
    return commands


def apply_toggles(config: SimulationConfig, commands: FrameCommands) -> SimulationConfig:
    """Return the configuration to use for the next frame."""
    for option in commands.toggles:
        config = config.toggled(option)
        logger.info("%s -> %s", option, _describe(getattr(config, option)))
    if commands.ui_detail is not None and commands.ui_detail is not config.ui_detail:
        config = replace(config, ui_detail=commands.ui_detail)
        logger.info("ui_detail -> %s", commands.ui_detail.value)
    return config


def _describe(value) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    return getattr(value, "value", str(value))
