"""Tests for flappy/agents — protocol, actions, registry, programmed agents."""

from __future__ import annotations

import numpy as np
import pytest

from flappy.agents import (
    ACTION_FLAP,
    ACTION_NOOP,
    AGENT_REGISTRY,
    NUM_ACTIONS,
    Agent,
    GapFollowerAgent,
    IdleAgent,
    action_to_input,
    resolve_agent,
)
from flappy.config import GameConfig, PipeGeneratorConfig
from flappy.driver import Driver
from flappy.observation import OBS_DIM, extract_observation
from flappy.simulation import InputEvent, Phase


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def test_action_space():
    assert NUM_ACTIONS == 2
    assert {ACTION_NOOP, ACTION_FLAP} == set(range(NUM_ACTIONS))


def test_action_to_input():
    assert action_to_input(ACTION_NOOP) is None
    assert action_to_input(ACTION_FLAP) == InputEvent.JUMP


# ---------------------------------------------------------------------------
# Protocol and registry
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", sorted(AGENT_REGISTRY))
def test_registered_agents_conform(name):
    agent = resolve_agent(name)
    assert isinstance(agent, Agent)
    agent.reset()
    action = agent.act(np.zeros(OBS_DIM, dtype=np.float32))
    assert 0 <= action < NUM_ACTIONS


def test_resolve_with_params():
    agent = resolve_agent("gap_follower", {"margin": 0.1})
    assert agent.margin == 0.1


def test_resolve_unknown():
    with pytest.raises(KeyError, match="Unknown agent"):
        resolve_agent("nope")


# ---------------------------------------------------------------------------
# Agents
# ---------------------------------------------------------------------------

def test_idle_never_flaps():
    agent = IdleAgent()
    obs = np.array([0.9, 1.0, 0.1, -0.5, -0.2, 1.0], dtype=np.float32)
    assert agent.act(obs) == ACTION_NOOP


class TestGapFollower:
    def test_flaps_near_gap_bottom_when_falling(self):
        obs = np.array([0.5, 0.3, 0.2, -0.1, 0.01, 1.0], dtype=np.float32)
        assert GapFollowerAgent().act(obs) == ACTION_FLAP

    def test_waits_while_rising(self):
        obs = np.array([0.5, -0.3, 0.2, -0.1, 0.01, 1.0], dtype=np.float32)
        assert GapFollowerAgent().act(obs) == ACTION_NOOP

    def test_waits_with_clearance(self):
        obs = np.array([0.5, 0.3, 0.2, -0.1, 0.2, 1.0], dtype=np.float32)
        assert GapFollowerAgent().act(obs) == ACTION_NOOP

    def test_scores_through_fixed_gap(self):
        config = GameConfig(pipes=PipeGeneratorConfig(min_gap_y=256, max_gap_y=256))
        driver = Driver(config, seed=0)
        agent = GapFollowerAgent()
        driver.jump()
        for _ in range(600):
            obs = extract_observation(driver.state, config.physics)
            if agent.act(obs) == ACTION_FLAP:
                driver.jump()
            driver.tick()
        assert driver.state.phase == Phase.ACTIVE
        assert driver.state.score >= 3

    def test_outlives_idle(self):
        def frames_survived(agent):
            config = GameConfig()
            driver = Driver(config, seed=11)
            driver.jump()
            while driver.state.phase == Phase.ACTIVE and driver.frame < 3000:
                obs = extract_observation(driver.state, config.physics)
                if agent.act(obs) == ACTION_FLAP:
                    driver.jump()
                driver.tick()
            return driver.frame

        assert frames_survived(GapFollowerAgent()) > frames_survived(IdleAgent())
