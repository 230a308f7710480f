"""flappy/agents/base.py — Agent protocol.

An agent sees the vector from flappy.observation.extract_observation and
answers with ACTION_NOOP or ACTION_FLAP (flappy.agents.actions). The vector
holds, in order: bird y, bird velocity, horizontal distance to the next pipe,
gap top and gap bottom relative to the bird, and an ACTIVE flag. All values
are normalized by the viewport size or terminal velocity.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Agent(Protocol):
    def act(self, obs: np.ndarray) -> int:
        """Flap or not for one tick, given an OBS_DIM observation."""
        ...

    def reset(self) -> None:
        """Forget per-episode state before the opening jump."""
        ...
