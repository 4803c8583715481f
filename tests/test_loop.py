import random

from conftest import ScriptedClock
from gridsnake.config import DOWN, LEFT, UP, RED, GAME_OVER_TEXT, Config
from gridsnake.game import Phase
from gridsnake.loop import GameLoop


def make_loop(display, sink, **overrides):
    cfg = Config(**overrides)
    loop = GameLoop(display, sink, cfg, rng=random.Random(99))
    loop.state.apple = (cfg.grid_w - 1, cfg.grid_h - 1)
    return loop


def test_first_frame_only_sets_baseline(display, sink):
    loop = make_loop(display, sink)
    assert loop.on_frame(1000.0) is False
    assert loop.last_tick == 1000.0
    assert loop.state.head == (3, 0)
    assert display.calls == []


def test_tick_waits_for_step_period(display, sink):
    loop = make_loop(display, sink)
    loop.on_frame(0.0)
    assert loop.on_frame(299.0) is False
    assert loop.state.head == (3, 0)
    assert loop.on_frame(300.0) is True
    assert loop.state.head == (4, 0)
    assert loop.last_tick == 300.0
    assert display.presents() == 1


def test_long_pause_fires_a_single_tick(display, sink):
    loop = make_loop(display, sink)
    loop.on_frame(0.0)
    assert loop.on_frame(10_000.0) is True
    assert loop.state.head == (4, 0)
    assert loop.on_frame(10_001.0) is False
    assert loop.state.head == (4, 0)


def test_apple_updates_score_sink_and_pace(display, sink):
    loop = make_loop(display, sink)
    loop.state.apple = (4, 0)
    loop.on_frame(0.0)
    loop.on_frame(300.0)
    assert sink.scores == [10]
    assert loop.state.step_period == 275
    # The next tick uses the shorter period.
    assert loop.on_frame(574.0) is False
    assert loop.on_frame(575.0) is True


def test_repaint_after_eating_draws_the_new_apple(display, sink):
    loop = make_loop(display, sink)
    loop.state.apple = (4, 0)
    loop.state.rng = random.Random(42)
    expected = random.Random(42)
    ax, ay = expected.randrange(40), expected.randrange(40)

    loop.on_frame(0.0)
    loop.on_frame(300.0)
    assert loop.state.apple == (ax, ay)
    assert display.calls[-2] == ("fill_rect", ax * 10, ay * 10, 10, 10, RED)


def test_out_of_bounds_switches_to_game_over(display, sink):
    loop = make_loop(display, sink, grid_w=5, grid_h=5)
    loop.on_frame(0.0)
    loop.on_frame(300.0)
    assert loop.phase is Phase.PLAYING
    loop.on_frame(600.0)
    assert loop.phase is Phase.GAME_OVER
    assert ("text", GAME_OVER_TEXT, (255, 0, 0)) in display.calls

    # No further ticks while the game is over.
    head = loop.state.head
    assert loop.on_frame(5000.0) is False
    assert loop.state.head == head


def test_key_after_game_over_restarts(display, sink):
    loop = make_loop(display, sink, grid_w=5, grid_h=5)
    loop.on_frame(0.0)
    loop.on_frame(300.0)
    loop.on_frame(600.0)
    dead = loop.state
    assert loop.game_over

    loop.on_key(DOWN)
    assert loop.phase is Phase.PLAYING
    assert loop.state is not dead
    assert loop.state.length == 4
    assert loop.state.score == 0
    assert loop.state.heading == DOWN
    assert sink.scores[-1] == 0


def test_non_arrow_key_restarts_without_turning(display, sink):
    loop = make_loop(display, sink, grid_w=5, grid_h=5)
    loop.phase = Phase.GAME_OVER
    loop.on_key(None)
    assert loop.phase is Phase.PLAYING
    assert loop.state.heading == 0


def test_key_while_playing_only_turns(display, sink):
    loop = make_loop(display, sink)
    state = loop.state
    loop.on_key(LEFT)
    assert loop.state is state
    assert state.heading == 0
    loop.on_key(UP)
    assert state.heading == UP
    assert sink.scores == []


def test_run_is_bounded_by_max_frames(display, sink):
    loop = make_loop(display, sink)
    clock = ScriptedClock([0.0, 100.0, 300.0, 450.0, 600.0])
    frames = loop.run(clock, max_frames=5)
    assert frames == 5
    assert loop.state.head == (5, 0)
    # Initial paint plus one per tick.
    assert display.presents() == 3


def test_run_stops_when_input_requests_it(display, sink):
    class QuitAfter:
        def __init__(self, n):
            self.n = n

        def dispatch(self, loop):
            self.n -= 1
            if self.n == 0:
                loop.stop()

    loop = make_loop(display, sink)
    clock = ScriptedClock([0.0, 300.0, 600.0, 900.0])
    assert loop.run(clock, QuitAfter(3)) == 2
    assert not loop.running
