"""flappy/observation.py — Observation extraction from SimState.

Produces a flat numpy vector for agent consumption.
"""

from __future__ import annotations

import numpy as np

from flappy.config import PhysicsConfig
from flappy.pipes import Pipe
from flappy.simulation import Phase, SimState

OBS_DIM = 6


def next_pipe(state: SimState) -> Pipe | None:
    """The oldest pipe the bird has not yet passed, or None."""
    for pipe in state.pipes:
        if not pipe.passed:
            return pipe
    return None


def extract_observation(state: SimState, physics_config: PhysicsConfig) -> np.ndarray:
    """Extract a 6-dim observation vector from a simulation state.

    Layout:
        [0] bird y (normalized by viewport height)
        [1] bird velocity (normalized by terminal velocity)
        [2] horizontal distance to next pipe ((pipe.x - bird.x) / width)
        [3] gap top relative to bird top (/ height)
        [4] gap bottom relative to bird bottom (/ height)
        [5] active flag (0.0 or 1.0)

    With no pipe ahead, the distance is 1.0 and the gap spans the whole
    viewport.
    """
    bird = state.bird
    width = float(state.viewport.width)
    height = float(state.viewport.height)
    obs = np.zeros(OBS_DIM, dtype=np.float32)

    obs[0] = bird.y / height
    obs[1] = bird.velocity / physics_config.terminal_velocity

    pipe = next_pipe(state)
    if pipe is None:
        gap_top, gap_bottom = 0.0, height
        obs[2] = 1.0
    else:
        gap_top = pipe.gap_y - pipe.gap_height / 2
        gap_bottom = pipe.gap_y + pipe.gap_height / 2
        obs[2] = (pipe.x - bird.x) / width
    obs[3] = (gap_top - bird.y) / height
    obs[4] = (gap_bottom - (bird.y + bird.height)) / height

    obs[5] = float(state.phase == Phase.ACTIVE)
    return obs
