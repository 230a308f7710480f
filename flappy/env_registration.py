"""flappy/env_registration.py — Register flappy envs with Gymnasium.

Import this module to register the environment::

    import flappy.env_registration
    env = gymnasium.make("flappy/Flappy-v0")
"""

import gymnasium as gym

gym.register(
    id="flappy/Flappy-v0",
    entry_point="flappy.env:FlappyEnv",
    kwargs={"max_steps": 5000},
    max_episode_steps=5000,
)
