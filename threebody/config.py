#!/usr/bin/env python3
"""
Per-frame simulation configuration.

SimulationConfig is immutable: the simulation reads one instance per step, and the
input layer swaps in a new instance between frames (see toggled()).
"""
import enum
from dataclasses import dataclass, replace
from typing import Optional

from .constants import (
    DEFAULT_BODY_COUNT,
    DEFAULT_FIXED_RADIUS,
    DEFAULT_RADIUS_POLICY,
    DEFAULT_SEED,
    GRAVITY_SCALE,
    RADIUS_POLICIES,
    RADIUS_POLICY_MASS,
    TRAIL_CUTOFF,
    TRAIL_DECAY,
)


class UiDetail(enum.Enum):
    OFF = "off"
    MINIMAL = "minimal"
    FULL = "full"

    def next(self) -> "UiDetail":
        members = list(UiDetail)
        return members[(members.index(self) + 1) % len(members)]


# Options that flip with a single key press.
TOGGLES = ("trails", "wrap", "elastic", "auto_restart")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Behavioural switches and tunables for one simulation run.

    Fields:
    - trails: Record trail samples each step
    - trail_decay: Alpha multiplier per step; None keeps every sample forever
    - trail_cutoff: Samples fading below this alpha are evicted
    - wrap: Toroidal viewport for both distance and position
    - elastic: Bounce overlapping bodies instead of halting
    - ui_detail: Amount of overlay text drawn
    - auto_restart: Reset automatically on the step after a halting collision
    - radius_policy: "mass" (radius = mass) or "fixed" (radius = fixed_radius)
    - gravity_scale: Multiplier applied to the summed pairwise force
    """
    trails: bool = True
    trail_decay: Optional[float] = TRAIL_DECAY
    trail_cutoff: float = TRAIL_CUTOFF
    wrap: bool = False
    elastic: bool = False
    ui_detail: UiDetail = UiDetail.MINIMAL
    auto_restart: bool = False
    radius_policy: str = DEFAULT_RADIUS_POLICY
    fixed_radius: float = DEFAULT_FIXED_RADIUS
    gravity_scale: float = GRAVITY_SCALE
    body_count: int = DEFAULT_BODY_COUNT
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        if self.trail_decay is not None and not 0.0 < self.trail_decay <= 1.0:
            raise ValueError(f"trail_decay must be in (0, 1], got {self.trail_decay!r}")
        if not 0.0 < self.trail_cutoff < 1.0:
            raise ValueError(f"trail_cutoff must be in (0, 1), got {self.trail_cutoff!r}")
        if self.radius_policy not in RADIUS_POLICIES:
            raise ValueError(
                f"radius_policy must be one of {', '.join(RADIUS_POLICIES)}, got {self.radius_policy!r}"
            )
        if self.fixed_radius <= 0:
            raise ValueError(f"fixed_radius must be positive, got {self.fixed_radius!r}")
        if self.body_count < 2:
            raise ValueError(f"at least 2 bodies are required, got {self.body_count}")

    def radius_for(self, mass: float) -> float:
        if self.radius_policy == RADIUS_POLICY_MASS:
            return mass
        return self.fixed_radius

    def toggled(self, option: str) -> "SimulationConfig":
        """Return a copy with one on/off option flipped, or ui_detail advanced."""
        if option == "ui_detail":
            return replace(self, ui_detail=self.ui_detail.next())
        if option not in TOGGLES:
            raise ValueError(f"unknown toggle {option!r}")
        return replace(self, **{option: not getattr(self, option)})
