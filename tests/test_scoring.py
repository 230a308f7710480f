"""Tests for flappy.scoring — pass detection and idempotent score updates."""

from flappy.config import Viewport
from flappy.physics import Bird
from flappy.pipes import Pipe
from flappy.scoring import check_pipe_passed, update_score
from flappy.simulation import Phase, SimState

BIRD = Bird(x=60.0, y=250.0)


def _pipe(x: float, passed: bool = False) -> Pipe:
    return Pipe(x=x, gap_y=256.0, gap_height=120, width=52, passed=passed)


def _state(*pipes: Pipe, score: int = 0) -> SimState:
    return SimState(bird=BIRD, viewport=Viewport(), phase=Phase.ACTIVE, pipes=pipes, score=score)


# ---------------------------------------------------------------------------
# check_pipe_passed
# ---------------------------------------------------------------------------

class TestCheckPipePassed:
    def test_bird_past_right_edge(self):
        assert check_pipe_passed(BIRD, _pipe(7.0))

    def test_bird_at_right_edge_not_passed(self):
        assert not check_pipe_passed(BIRD, _pipe(8.0))

    def test_pipe_ahead_not_passed(self):
        assert not check_pipe_passed(BIRD, _pipe(100.0))

    def test_already_passed_pipe_never_again(self):
        assert not check_pipe_passed(BIRD, _pipe(-20.0, passed=True))


# ---------------------------------------------------------------------------
# update_score
# ---------------------------------------------------------------------------

class TestUpdateScore:
    def test_scores_one_per_pipe(self):
        state = update_score(_state(_pipe(-10.0), _pipe(0.0), _pipe(150.0), score=4))
        assert state.score == 6
        assert [p.passed for p in state.pipes] == [True, True, False]

    def test_second_call_is_noop(self):
        once = update_score(_state(_pipe(0.0), _pipe(150.0)))
        twice = update_score(once)
        assert once.score == twice.score == 1
        assert twice.pipes == once.pipes

    def test_nothing_to_score_returns_same_state(self):
        state = _state(_pipe(150.0), score=3)
        assert update_score(state) is state

    def test_passed_pipes_do_not_count(self):
        state = update_score(_state(_pipe(-30.0, passed=True), _pipe(0.0), score=1))
        assert state.score == 2

    def test_input_state_not_modified(self):
        state = _state(_pipe(0.0))
        update_score(state)
        assert state.score == 0
        assert state.pipes[0].passed is False

    def test_order_preserved(self):
        pipes = (_pipe(-40.0), _pipe(0.0), _pipe(140.0), _pipe(320.0))
        state = update_score(_state(*pipes))
        assert [p.x for p in state.pipes] == [-40.0, 0.0, 140.0, 320.0]
