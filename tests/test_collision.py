"""Tests for flappy.collision — rectangle overlap, walls, pipe segments."""

import pytest

from flappy.collision import (
    Rect,
    check_bird_boundary_collision,
    check_bird_pipe_collision,
    detect_collision,
    pipe_segments,
    rectangles_intersect,
)
from flappy.config import Viewport
from flappy.physics import Bird
from flappy.pipes import Pipe
from flappy.simulation import SimState


# ---------------------------------------------------------------------------
# Rectangle intersection
# ---------------------------------------------------------------------------

class TestRectanglesIntersect:
    def test_overlapping(self):
        assert rectangles_intersect(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))

    def test_contained(self):
        assert rectangles_intersect(Rect(0, 0, 100, 100), Rect(10, 10, 5, 5))

    def test_separate(self):
        assert not rectangles_intersect(Rect(0, 0, 10, 10), Rect(20, 20, 5, 5))

    @pytest.mark.parametrize("other", [
        Rect(10, 0, 10, 10),   # right edge
        Rect(-10, 0, 10, 10),  # left edge
        Rect(0, 10, 10, 10),   # bottom edge
        Rect(0, -10, 10, 10),  # top edge
        Rect(10, 10, 5, 5),    # corner
    ])
    def test_shared_edge_is_not_intersection(self, other):
        a = Rect(0, 0, 10, 10)
        assert not rectangles_intersect(a, other)
        assert not rectangles_intersect(other, a)

    def test_symmetric(self):
        a, b = Rect(0, 0, 10, 10), Rect(9.5, 9.5, 1, 1)
        assert rectangles_intersect(a, b)
        assert rectangles_intersect(b, a)


# ---------------------------------------------------------------------------
# Boundaries
# ---------------------------------------------------------------------------

class TestBoundary:
    def test_bottom_touch_collides(self):
        assert check_bird_boundary_collision(Bird(y=576.0, height=24), 600)

    def test_just_above_bottom_is_clear(self):
        assert not check_bird_boundary_collision(Bird(y=575.0, height=24), 600)

    def test_top_touch_collides(self):
        assert check_bird_boundary_collision(Bird(y=0.0, height=24), 600)

    def test_above_top_collides(self):
        assert check_bird_boundary_collision(Bird(y=-3.0, height=24), 600)

    def test_below_bottom_collides(self):
        assert check_bird_boundary_collision(Bird(y=650.0, height=24), 600)

    @pytest.mark.parametrize("y", [0.01, 1.0, 300.0, 575.99])
    def test_strictly_inside_is_clear(self, y):
        assert not check_bird_boundary_collision(Bird(y=y, height=24), 600)


# ---------------------------------------------------------------------------
# Pipe segments
# ---------------------------------------------------------------------------

PIPE = Pipe(x=100.0, gap_y=300.0, gap_height=100, width=50)


class TestPipeSegments:
    def test_segment_geometry(self):
        top, bottom = pipe_segments(PIPE, 600)
        assert top == Rect(100.0, 0.0, 50, 250.0)
        assert bottom == Rect(100.0, 350.0, 50, 250.0)

    def test_heights_clamped_to_zero(self):
        pipe = Pipe(x=0.0, gap_y=20.0, gap_height=100, width=50)
        top, _ = pipe_segments(pipe, 600)
        assert top.height == 0.0


class TestBirdPipeCollision:
    def test_bird_in_gap_is_clear(self):
        bird = Bird(x=110.0, y=280.0, width=34, height=24)
        assert not check_bird_pipe_collision(bird, PIPE, 600)

    def test_bird_overlapping_top_segment(self):
        bird = Bird(x=110.0, y=240.0, width=34, height=24)
        assert check_bird_pipe_collision(bird, PIPE, 600)

    def test_bird_overlapping_bottom_segment(self):
        bird = Bird(x=110.0, y=330.0, width=34, height=24)
        assert check_bird_pipe_collision(bird, PIPE, 600)

    def test_bird_touching_gap_edges_is_clear(self):
        bird = Bird(x=110.0, y=250.0, width=34, height=100)
        assert not check_bird_pipe_collision(bird, PIPE, 600)

    def test_bird_left_of_pipe_is_clear(self):
        bird = Bird(x=66.0, y=100.0, width=34, height=24)
        assert not check_bird_pipe_collision(bird, PIPE, 600)

    def test_bird_right_of_pipe_is_clear(self):
        bird = Bird(x=150.0, y=100.0, width=34, height=24)
        assert not check_bird_pipe_collision(bird, PIPE, 600)

    def test_bird_clipping_pipe_corner(self):
        bird = Bird(x=67.0, y=230.0, width=34, height=24)
        assert check_bird_pipe_collision(bird, PIPE, 600)


# ---------------------------------------------------------------------------
# detect_collision
# ---------------------------------------------------------------------------

class TestDetectCollision:
    def _state(self, bird, pipes=()):
        return SimState(bird=bird, viewport=Viewport(400, 600), pipes=tuple(pipes))

    def test_clear(self):
        assert not detect_collision(self._state(Bird(x=60.0, y=300.0)))

    def test_wall(self):
        assert detect_collision(self._state(Bird(x=60.0, y=576.0, height=24)))

    def test_any_pipe(self):
        far = Pipe(x=300.0, gap_y=300.0, gap_height=100, width=50)
        bird = Bird(x=110.0, y=240.0)
        assert detect_collision(self._state(bird, [far, PIPE]))
