"""flappy/runner.py — Headless episode execution.

Runs one agent for one episode through the Driver and collects the outcome,
optionally keeping every SimState snapshot for invariant checking.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from flappy.agents.actions import action_to_input
from flappy.agents.registry import resolve_agent
from flappy.config import GameConfig
from flappy.driver import Driver
from flappy.invariants import Violation, check_trajectory
from flappy.observation import extract_observation
from flappy.simulation import Phase, SimState


@dataclass
class EpisodeOutcome:
    """Result of running one episode to collision or the frame cap."""

    episode: int
    seed: int | None
    agent: str
    score: int
    frames_elapsed: int
    collided: bool
    wall_time_ms: float
    violations: list[Violation] = field(default_factory=list)


def run_episode(
    agent_name: str,
    config: GameConfig,
    *,
    episode: int = 0,
    seed: int | None = None,
    max_frames: int = 5000,
    check_invariants: bool = False,
    agent_params: dict | None = None,
) -> EpisodeOutcome:
    """Play one episode. The opening jump starts the game.

    *config* is validated by the Driver; snapshots are checked against the
    validated copy.
    """
    agent = resolve_agent(agent_name, agent_params)
    agent.reset()
    driver = Driver(config, seed=seed)
    config = driver.config
    driver.jump()

    snapshots: list[SimState] = [driver.state]
    start = time.perf_counter()
    while driver.state.phase == Phase.ACTIVE and driver.frame < max_frames:
        obs = extract_observation(driver.state, config.physics)
        event = action_to_input(agent.act(obs))
        if event is not None:
            driver.send(event)
        driver.tick()
        if check_invariants:
            snapshots.append(driver.state)
    wall_time_ms = (time.perf_counter() - start) * 1000.0

    violations: list[Violation] = []
    if check_invariants:
        violations = check_trajectory(snapshots, config.physics, config.pipes)

    return EpisodeOutcome(
        episode=episode,
        seed=seed,
        agent=agent_name,
        score=driver.state.score,
        frames_elapsed=driver.frame,
        collided=driver.state.phase == Phase.ENDED,
        wall_time_ms=wall_time_ms,
        violations=violations,
    )
