"""flappy/cli — CLI entry point for running headless episodes.

Usage::

    python -m flappy.cli --agent gap_follower --episodes 10 --seed 1
    python -m flappy.cli --config flappy.yaml --check-invariants
    python -m flappy.cli -o results/run_001.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from flappy.agents.registry import AGENT_REGISTRY
from flappy.config import GameConfig, load_config
from flappy.debug import DEBUG
from flappy.runner import EpisodeOutcome, run_episode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_outcome(outcome: EpisodeOutcome) -> None:
    """Print a one-line summary for an episode."""
    status = "COLLIDED" if outcome.collided else "SURVIVED"
    parts = [
        f"episode {outcome.episode:>3d}",
        f"{status:<8s}",
        f"score={outcome.score:<4d}",
        f"{outcome.frames_elapsed:>6d} frames",
        f"{outcome.wall_time_ms:>7.1f}ms",
    ]
    if outcome.violations:
        parts.append(f"violations={len(outcome.violations)}")
    print("  ".join(parts))
    for v in outcome.violations:
        print(f"    [{v.severity}] frame {v.frame}: {v.invariant}: {v.details}")


def print_summary(results: list[EpisodeOutcome]) -> None:
    total = len(results)
    if total == 0:
        return
    scores = [r.score for r in results]
    mean = sum(scores) / total
    print(f"\n{total} episodes: mean score {mean:.2f}, best {max(scores)}")


def save_results(results: list[EpisodeOutcome], path: Path | str) -> None:
    """Save episode outcomes as a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump([asdict(r) for r in results], f, indent=2)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Run episodes from the command line."""
    parser = argparse.ArgumentParser(description="Run headless flappy episodes")
    parser.add_argument(
        "--agent", default="gap_follower", choices=sorted(AGENT_REGISTRY),
        help="Agent to play the episodes",
    )
    parser.add_argument(
        "--episodes", type=int, default=1, help="Number of episodes",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the first episode; episode i uses seed+i",
    )
    parser.add_argument(
        "--max-frames", type=int, default=5000, help="Frame cap per episode",
    )
    parser.add_argument(
        "--config", help="YAML config file",
    )
    parser.add_argument(
        "--check-invariants", action="store_true",
        help="Record every tick and check simulation invariants",
    )
    parser.add_argument(
        "--output", "-o", help="Output file path for results JSON",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.episodes < 1:
        parser.error("--episodes must be at least 1")

    config = GameConfig()
    if args.config:
        try:
            config, _ = load_config(args.config)
        except (OSError, ValueError) as e:
            print(f"error: cannot load config {args.config}: {e}", file=sys.stderr)
            sys.exit(2)

    results = []
    for i in range(args.episodes):
        seed = None if args.seed is None else args.seed + i
        outcome = run_episode(
            args.agent,
            config,
            episode=i,
            seed=seed,
            max_frames=args.max_frames,
            check_invariants=args.check_invariants,
        )
        results.append(outcome)
        print_outcome(outcome)

    print_summary(results)

    if args.output:
        save_results(results, args.output)

    if any(r.violations for r in results):
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
