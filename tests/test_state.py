import pytest

from squish.constants import LEVEL_TIME_S
from squish.state import GameState, GameStateError


def test_first_level_has_three_mosquitoes_and_full_timer():
    state = GameState()
    assert state.level == 1
    assert state.remaining == 3
    assert state.timer == LEVEL_TIME_S
    assert state.timer_text == "Time: 5.00"


def test_mosquito_count_grows_with_level():
    assert [GameState.mosquitoes_for(level) for level in (1, 2, 5)] == [3, 4, 7]


def test_remaining_never_goes_negative():
    state = GameState()
    for _ in range(10):
        state.squish()
    assert state.remaining == 0
    assert state.total_squished == 3


def test_last_squish_reports_cleared_level():
    state = GameState()
    assert state.squish() is False
    assert state.squish() is False
    assert state.squish() is True
    assert state.cleared


def test_advance_level_resets_timer_and_count():
    state = GameState()
    state.tick(2.0)
    for _ in range(3):
        state.squish()
    assert state.advance_level() == 4
    assert state.level == 2
    assert state.remaining == 4
    assert state.timer == LEVEL_TIME_S


def test_cannot_advance_with_mosquitoes_left():
    state = GameState()
    state.squish()
    with pytest.raises(GameStateError):
        state.advance_level()
    assert state.level == 1


def test_cannot_advance_after_time_ran_out():
    state = GameState()
    state.squish()
    state.squish()
    assert state.tick(LEVEL_TIME_S) is True
    assert state.squish() is False
    assert state.remaining == 1
    with pytest.raises(GameStateError):
        state.advance_level()


def test_tick_ends_game_exactly_once():
    state = GameState()
    assert state.tick(4.0) is False
    assert state.tick(1.5) is True
    assert state.over
    assert state.tick(1.0) is False


def test_timer_stops_once_level_is_cleared():
    state = GameState()
    for _ in range(3):
        state.squish()
    assert state.tick(10.0) is False
    assert state.timer == LEVEL_TIME_S
    assert not state.over


def test_display_time_is_clamped_at_zero():
    state = GameState()
    state.tick(LEVEL_TIME_S + 0.37)
    assert state.timer < 0
    assert state.display_time == 0.0
    assert state.timer_text == "Time: 0.00"


def test_reset_returns_to_level_one():
    state = GameState()
    for _ in range(3):
        state.squish()
    state.advance_level()
    state.tick(LEVEL_TIME_S)
    state.reset()
    assert (state.level, state.remaining, state.over, state.total_squished) == (1, 3, False, 0)
