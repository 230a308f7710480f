"""flappy/invariants.py — Invariant checker for simulation trajectories.

Scans a recorded trajectory (a list of SimState snapshots, one per tick) and
flags states the rules should never produce. This is a library module: tests
and the CLI import it and assert on or report the results. No Pyxel imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from flappy.config import PhysicsConfig, PipeGeneratorConfig
from flappy.pipes import Pipe
from flappy.simulation import Phase, SimState

EPSILON = 1e-6


# ---------------------------------------------------------------------------
# Violation
# ---------------------------------------------------------------------------

@dataclass
class Violation:
    """A single invariant violation."""

    frame: int
    invariant: str
    details: str
    severity: str  # "error" or "warning"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _match_pipes(
    prev: SimState,
    curr: SimState,
    pipe_speed: float,
) -> list[tuple[Pipe, Pipe]]:
    """Pair each pipe in *curr* with the pipe it was in *prev*, if any."""
    pairs: list[tuple[Pipe, Pipe]] = []
    for cp in curr.pipes:
        for pp in prev.pipes:
            if pp.gap_y != cp.gap_y:
                continue
            if abs(pp.x - cp.x) < EPSILON or abs(pp.x - pipe_speed - cp.x) < EPSILON:
                pairs.append((pp, cp))
                break
    return pairs


def _is_reset(prev: SimState, curr: SimState) -> bool:
    return curr.phase == Phase.READY and prev.phase != Phase.READY


# ---------------------------------------------------------------------------
# Individual checkers
# ---------------------------------------------------------------------------

def _check_score(snapshots: Sequence[SimState]) -> list[Violation]:
    violations: list[Violation] = []
    for i in range(1, len(snapshots)):
        prev, curr = snapshots[i - 1], snapshots[i]
        if _is_reset(prev, curr):
            continue
        if curr.score < prev.score:
            violations.append(Violation(
                frame=i,
                invariant="score_decreased",
                details=f"Score went from {prev.score} to {curr.score}",
                severity="error",
            ))
        elif prev.phase == Phase.ENDED and curr.score != prev.score:
            violations.append(Violation(
                frame=i,
                invariant="score_changed_after_end",
                details=f"Score changed from {prev.score} to {curr.score} after the game ended",
                severity="error",
            ))
    return violations


def _check_pipe_order(snapshots: Sequence[SimState]) -> list[Violation]:
    violations: list[Violation] = []
    for i, snap in enumerate(snapshots):
        xs = [p.x for p in snap.pipes]
        if any(b <= a for a, b in zip(xs, xs[1:])):
            violations.append(Violation(
                frame=i,
                invariant="pipes_out_of_order",
                details=f"Pipe x positions not strictly increasing: {xs}",
                severity="error",
            ))
    return violations


def _check_pipe_gaps(
    snapshots: Sequence[SimState],
    generator_config: PipeGeneratorConfig,
) -> list[Violation]:
    violations: list[Violation] = []
    for i, snap in enumerate(snapshots):
        height = snap.viewport.height
        for p in snap.pipes:
            in_range = generator_config.min_gap_y <= p.gap_y <= generator_config.max_gap_y
            fits = p.gap_y - p.gap_height / 2 >= 0 and p.gap_y + p.gap_height / 2 <= height
            if in_range and fits and p.gap_height > 0:
                continue
            violations.append(Violation(
                frame=i,
                invariant="gap_out_of_bounds",
                details=(
                    f"Pipe at x={p.x:.1f} has gap_y={p.gap_y:.1f}, "
                    f"gap_height={p.gap_height} outside "
                    f"[{generator_config.min_gap_y}, {generator_config.max_gap_y}] "
                    f"or viewport height {height}"
                ),
                severity="error",
            ))
    return violations


def _check_velocity(
    snapshots: Sequence[SimState],
    physics_config: PhysicsConfig,
) -> list[Violation]:
    violations: list[Violation] = []
    for i, snap in enumerate(snapshots):
        if snap.bird.velocity > physics_config.terminal_velocity + EPSILON:
            violations.append(Violation(
                frame=i,
                invariant="velocity_exceeds_terminal",
                details=(
                    f"Bird velocity {snap.bird.velocity:.2f} > "
                    f"terminal {physics_config.terminal_velocity}"
                ),
                severity="error",
            ))
    return violations


def _check_passed_flags(
    snapshots: Sequence[SimState],
    physics_config: PhysicsConfig,
) -> list[Violation]:
    violations: list[Violation] = []
    for i in range(1, len(snapshots)):
        prev, curr = snapshots[i - 1], snapshots[i]
        if _is_reset(prev, curr):
            continue
        newly_passed = 0
        for pp, cp in _match_pipes(prev, curr, physics_config.pipe_speed):
            if pp.passed and not cp.passed:
                violations.append(Violation(
                    frame=i,
                    invariant="passed_flag_reverted",
                    details=f"Pipe at x={cp.x:.1f} lost its passed flag",
                    severity="error",
                ))
            elif cp.passed and not pp.passed:
                newly_passed += 1
        gained = curr.score - prev.score
        if gained > newly_passed:
            violations.append(Violation(
                frame=i,
                invariant="score_without_pass",
                details=(
                    f"Score rose by {gained} but only {newly_passed} "
                    f"pipe(s) were newly passed"
                ),
                severity="error",
            ))
    return violations


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def check_trajectory(
    snapshots: Sequence[SimState],
    physics_config: PhysicsConfig,
    generator_config: PipeGeneratorConfig,
) -> list[Violation]:
    """Run all invariant checks over a trajectory.

    Returns a list of violations sorted by frame. An empty list means the
    trajectory is clean.
    """
    violations: list[Violation] = []
    violations.extend(_check_score(snapshots))
    violations.extend(_check_pipe_order(snapshots))
    violations.extend(_check_pipe_gaps(snapshots, generator_config))
    violations.extend(_check_velocity(snapshots, physics_config))
    violations.extend(_check_passed_flags(snapshots, physics_config))
    violations.sort(key=lambda v: v.frame)
    return violations
