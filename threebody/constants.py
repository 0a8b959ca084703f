#!/usr/bin/env python3
"""
Shared constants for Three Bodies (screen units: pixels, frames).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physics controls
GRAVITY_SCALE = 9.81  # arbitrary strength knob applied to the summed pairwise force
DEFAULT_BODY_COUNT = 3
DEFAULT_SEED = 42

# Body spawning
SPAWN_MARGIN = 100.0  # px kept free on each side of the viewport
MASS_RANGE = (5.0, 10.0)
VELOCITY_RANGE = (-1.0, 1.0)  # px per frame, per component

# Collision radius
RADIUS_POLICY_MASS = "mass"
RADIUS_POLICY_FIXED = "fixed"
RADIUS_POLICIES = (RADIUS_POLICY_MASS, RADIUS_POLICY_FIXED)
DEFAULT_RADIUS_POLICY = RADIUS_POLICY_MASS
DEFAULT_FIXED_RADIUS = 5.0  # px; two of these give a 10 px halting distance

# Trails
TRAIL_DECAY = 0.995  # alpha multiplier per frame
TRAIL_CUTOFF = 0.01  # samples fading below this alpha are evicted

# Rendering (viewport)
VIEW_WIDTH = 800
VIEW_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "Three Bodies"
BACKGROUND_COLOR = (0, 0, 0)
HUD_TEXT_COLOR = (200, 200, 200)
LABEL_TEXT_COLOR = (230, 230, 230)
BANNER_COLOR = (255, 80, 80)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
