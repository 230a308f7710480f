"""flappy/env.py — Gymnasium environment wrapper.

Bridges the headless simulation with RL training. Thin adapter that delegates
to the driver, observation, and action modules.
"""

from __future__ import annotations

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from flappy.agents.actions import NUM_ACTIONS, action_to_input
from flappy.config import GameConfig, validate_config
from flappy.driver import CollisionEvent, Driver, Event, ScoreEvent
from flappy.observation import OBS_DIM, extract_observation
from flappy.simulation import Phase

SCORE_REWARD = 1.0
COLLISION_PENALTY = -1.0
SURVIVAL_REWARD = 0.01


class FlappyEnv(gym.Env):
    """Gymnasium environment for the flappy simulation.

    reset() starts play with the opening jump, so every step is an ACTIVE
    tick until the bird collides.
    """

    metadata = {"render_modes": [], "render_fps": 60}

    def __init__(
        self,
        config: GameConfig | None = None,
        render_mode: str | None = None,
        max_steps: int = 5000,
    ) -> None:
        super().__init__()
        self.config, _ = validate_config(config if config is not None else GameConfig())
        self.render_mode = render_mode
        self.max_steps = max_steps

        self.observation_space = spaces.Box(
            low=-np.inf,
            high=np.inf,
            shape=(OBS_DIM,),
            dtype=np.float32,
        )
        self.action_space = spaces.Discrete(NUM_ACTIONS)

        self.driver: Driver | None = None
        self._step_count = 0

    def reset(
        self,
        *,
        seed: int | None = None,
        options: dict | None = None,
    ) -> tuple[np.ndarray, dict]:
        super().reset(seed=seed)
        self.driver = Driver(self.config, seed=int(self.np_random.integers(0, 2**32)))
        self.driver.jump()
        self._step_count = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: int
    ) -> tuple[np.ndarray, float, bool, bool, dict]:
        event = action_to_input(action)
        if event is not None:
            self.driver.send(event)
        events = self.driver.tick()
        self._step_count += 1

        obs = self._get_obs()
        reward = self._compute_reward(events)
        terminated = self.driver.state.phase == Phase.ENDED
        truncated = self._step_count >= self.max_steps
        info = self._get_info()

        return obs, reward, terminated, truncated, info

    def _get_obs(self) -> np.ndarray:
        return extract_observation(self.driver.state, self.config.physics)

    def _compute_reward(self, events: list[Event]) -> float:
        reward = SURVIVAL_REWARD
        for evt in events:
            if isinstance(evt, ScoreEvent):
                reward += SCORE_REWARD
            elif isinstance(evt, CollisionEvent):
                return COLLISION_PENALTY
        return reward

    def _get_info(self) -> dict:
        state = self.driver.state
        return {
            "frame": self.driver.frame,
            "y": state.bird.y,
            "velocity": state.bird.velocity,
            "score": state.score,
            "pipes": len(state.pipes),
            "phase": state.phase.value,
        }
