"""Tests for flappy/env.py — FlappyEnv Gymnasium environment."""

from __future__ import annotations

from dataclasses import replace

import gymnasium as gym
import numpy as np

from flappy.agents.actions import ACTION_FLAP, ACTION_NOOP, NUM_ACTIONS
from flappy.config import GameConfig, PipeGeneratorConfig
from flappy.env import COLLISION_PENALTY, SCORE_REWARD, SURVIVAL_REWARD, FlappyEnv
from flappy.observation import OBS_DIM
from flappy.pipes import Pipe
from flappy.simulation import Phase


# ---------------------------------------------------------------------------
# Space definitions
# ---------------------------------------------------------------------------

def test_observation_space_shape():
    env = FlappyEnv()
    assert env.observation_space.shape == (OBS_DIM,)
    assert env.observation_space.dtype == np.float32


def test_action_space():
    env = FlappyEnv()
    assert env.action_space.n == NUM_ACTIONS


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

def test_reset_returns_obs_info():
    env = FlappyEnv()
    obs, info = env.reset()
    assert isinstance(obs, np.ndarray)
    assert obs.shape == (OBS_DIM,)
    assert isinstance(info, dict)


def test_reset_starts_play():
    env = FlappyEnv()
    assert env.driver is None
    env.reset()
    assert env.driver.state.phase == Phase.ACTIVE


def test_reset_info_keys():
    env = FlappyEnv()
    _, info = env.reset()
    assert set(info.keys()) == {"frame", "y", "velocity", "score", "pipes", "phase"}


def test_reset_with_seed_is_deterministic():
    env = FlappyEnv()
    env.reset(seed=42)
    for _ in range(5):
        env.step(ACTION_NOOP)
    pipes_a = env.driver.state.pipes
    env.reset(seed=42)
    for _ in range(5):
        env.step(ACTION_NOOP)
    assert env.driver.state.pipes == pipes_a


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------

def test_step_returns_5_tuple():
    env = FlappyEnv()
    env.reset()
    obs, reward, terminated, truncated, info = env.step(ACTION_NOOP)
    assert obs.shape == (OBS_DIM,)
    assert isinstance(reward, float)
    assert isinstance(terminated, bool)
    assert isinstance(truncated, bool)
    assert isinstance(info, dict)


def test_step_advances_frame():
    env = FlappyEnv()
    env.reset()
    _, _, _, _, info1 = env.step(ACTION_NOOP)
    _, _, _, _, info2 = env.step(ACTION_NOOP)
    assert info2["frame"] == info1["frame"] + 1


def test_flap_sets_upward_velocity():
    env = FlappyEnv()
    env.reset()
    for _ in range(20):
        env.step(ACTION_NOOP)
    _, _, _, _, info = env.step(ACTION_FLAP)
    assert info["velocity"] < 0


def test_survival_reward():
    env = FlappyEnv()
    env.reset()
    _, reward, _, _, _ = env.step(ACTION_NOOP)
    assert reward == SURVIVAL_REWARD


def test_score_reward():
    env = FlappyEnv()
    env.reset()
    driver = env.driver
    pipe = Pipe(x=float(driver.state.bird.x) - 51.0, gap_y=256.0, gap_height=120, width=52)
    driver._state = replace(driver.state, pipes=(pipe,))
    driver._frame = 1
    _, reward, _, _, info = env.step(ACTION_NOOP)
    assert reward == SURVIVAL_REWARD + SCORE_REWARD
    assert info["score"] == 1


# ---------------------------------------------------------------------------
# Termination / truncation
# ---------------------------------------------------------------------------

def test_terminated_on_collision():
    env = FlappyEnv()
    env.reset()
    terminated = False
    reward = 0.0
    for _ in range(500):
        _, reward, terminated, _, _ = env.step(ACTION_NOOP)
        if terminated:
            break
    assert terminated
    assert reward == COLLISION_PENALTY


def test_truncated_on_max_steps():
    env = FlappyEnv(max_steps=10)
    env.reset()
    truncated = False
    for _ in range(10):
        _, _, _, truncated, _ = env.step(ACTION_NOOP)
    assert truncated is True


def test_not_truncated_before_max_steps():
    env = FlappyEnv(max_steps=10)
    env.reset()
    for _ in range(9):
        _, _, _, truncated, _ = env.step(ACTION_NOOP)
    assert truncated is False


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_registered_env():
    import flappy.env_registration  # noqa: F401

    env = gym.make("flappy/Flappy-v0")
    obs, _ = env.reset(seed=0)
    assert obs.shape == (OBS_DIM,)
    env.close()


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_invalid_config_validated():
    env = FlappyEnv(GameConfig(pipes=PipeGeneratorConfig(spawn_interval=0)))
    assert env.config.pipes.spawn_interval == PipeGeneratorConfig().spawn_interval
    env.reset(seed=0)
    _, _, terminated, _, info = env.step(ACTION_NOOP)
    assert not terminated
    assert info["pipes"] == 1


def test_driver_seeded_from_reset_seed():
    env = FlappyEnv()
    env.reset(seed=3)
    first = env.driver.rng.random()
    env.reset(seed=3)
    assert env.driver.rng.random() == first
