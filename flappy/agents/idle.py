"""flappy/agents/idle.py — IdleAgent: never flaps. A null baseline."""

from __future__ import annotations

import numpy as np

from flappy.agents.actions import ACTION_NOOP


class IdleAgent:
    """Agent that does nothing every frame."""

    def act(self, obs: np.ndarray) -> int:
        return ACTION_NOOP

    def reset(self) -> None:
        pass
