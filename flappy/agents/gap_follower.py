"""flappy/agents/gap_follower.py — GapFollowerAgent: flap to stay in the gap.

Flaps when the bird's bottom edge has sunk within `margin` of the next gap's
bottom edge and the bird is not already rising. Uses only the observation
vector (see flappy.observation for the layout).
"""

from __future__ import annotations

import numpy as np

from flappy.agents.actions import ACTION_FLAP, ACTION_NOOP


class GapFollowerAgent:
    """Agent that keeps the bird just above the bottom of the next gap."""

    def __init__(self, margin: float = 0.04) -> None:
        self.margin = margin

    def act(self, obs: np.ndarray) -> int:
        velocity = obs[1]
        clearance_below = obs[4]
        if clearance_below < self.margin and velocity >= 0:
            return ACTION_FLAP
        return ACTION_NOOP

    def reset(self) -> None:
        pass
