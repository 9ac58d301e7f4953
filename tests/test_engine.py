import logging
from itertools import combinations

import pygame
import pytest

from freakout.core import GameEngine, GameState, Key, load_profile

W, H = 1043, 424


def started(engine):
    engine.on_key_down(Key.START)
    return engine


# -----------------------------
# initialize / reset
# -----------------------------

def test_initialize_places_paddle_ball_and_grid(engine):
    assert engine.paddle == pygame.Rect(481, 394, 80, 10)
    assert engine.ball == pygame.Rect(511, 374, 20, 20)
    assert engine.velocity == (7, -7)
    assert engine.state is GameState.NOT_STARTED
    assert engine.score == 0

    # 17 columns (x = 20..980) by 4 rows (y = 50..140)
    assert len(engine.bricks) == 68
    assert engine.bricks[0] == pygame.Rect(20, 50, 55, 22)
    assert engine.bricks[-1] == pygame.Rect(980, 140, 55, 22)


@pytest.mark.parametrize("size", [(80, 80), (81, 200), (143, 90), (200, 80), (500, 500), (W, H)])
def test_reset_always_builds_non_overlapping_bricks(make_engine, size):
    engine = make_engine(size=size)
    assert engine.bricks
    surface = pygame.Rect(0, 0, *size)
    for brick in engine.bricks:
        assert brick.w > 0 and brick.h > 0
        assert surface.contains(brick)
        assert not brick.colliderect(engine.paddle)
        assert brick.bottom <= engine.ball.top
    for a, b in combinations(engine.bricks, 2):
        assert not a.colliderect(b)


@pytest.mark.parametrize("size", [(0, H), (W, 0), (-5, -5)])
def test_non_positive_surface_is_reported_not_raised(make_engine, caplog, size):
    with caplog.at_level(logging.ERROR, logger="freakout.core.engine"):
        engine = make_engine(size=size)
    assert engine.bricks == []
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


def test_tick_is_a_no_op_until_started(engine):
    before = engine.ball.copy()
    engine.tick()
    assert engine.ball == before
    assert engine.state is GameState.NOT_STARTED


# -----------------------------
# input
# -----------------------------

def test_start_key_starts_scheduler_once(engine, scheduler):
    engine.on_key_down(Key.START)
    assert engine.state is GameState.PLAYING
    assert scheduler.starts == 1

    for _ in range(3):
        engine.on_key_down(Key.START)
    assert engine.state is GameState.PLAYING
    assert scheduler.starts == 1


def test_unknown_keys_are_ignored(engine):
    for key in ("x", None, 42):
        engine.on_key_down(key)
        engine.on_key_up(key)
    assert engine.state is GameState.NOT_STARTED
    assert not engine.input.left_held and not engine.input.right_held


def test_key_up_clears_held_flags(engine):
    engine.on_key_down(Key.MOVE_LEFT)
    engine.on_key_down(Key.MOVE_RIGHT)
    assert engine.input.left_held and engine.input.right_held
    engine.on_key_up(Key.MOVE_LEFT)
    engine.on_key_up(Key.MOVE_RIGHT)
    assert not engine.input.left_held and not engine.input.right_held


# -----------------------------
# paddle
# -----------------------------

def test_paddle_moves_by_speed_while_held(engine):
    started(engine)
    engine.on_key_down(Key.MOVE_LEFT)
    engine.tick()
    assert engine.paddle.x == 481 - 12
    engine.on_key_up(Key.MOVE_LEFT)
    engine.tick()
    assert engine.paddle.x == 481 - 12


def test_paddle_at_left_edge_does_not_move(engine):
    started(engine)
    engine.paddle.x = 0
    engine.on_key_down(Key.MOVE_LEFT)
    engine.tick()
    assert engine.paddle.x == 0


def test_paddle_near_left_edge_overshoots_once_then_stops(engine):
    started(engine)
    engine.paddle.x = 5
    engine.on_key_down(Key.MOVE_LEFT)
    engine.tick()
    assert engine.paddle.x == -7
    for _ in range(5):
        engine.tick()
    assert engine.paddle.x == -7


def test_paddle_near_right_edge_overshoots_once_then_stops(engine):
    started(engine)
    engine.paddle.right = W - 5
    engine.on_key_down(Key.MOVE_RIGHT)
    engine.tick()
    assert engine.paddle.right == W + 7
    engine.tick()
    assert engine.paddle.right == W + 7


# -----------------------------
# ball
# -----------------------------

def test_ball_moves_by_velocity(engine):
    started(engine)
    engine.tick()
    assert engine.ball.topleft == (511 + 7, 374 - 7)
    engine.tick()
    assert engine.ball.topleft == (511 + 14, 374 - 14)


def test_left_wall_reflects_vx_only(engine):
    started(engine)
    engine.ball.topleft = (2, 300)
    engine.vx, engine.vy = -7, -7
    engine.tick()
    assert engine.velocity == (7, -7)


def test_right_wall_reflects_vx_only(engine):
    started(engine)
    engine.ball.topleft = (W - 20 - 3, 300)
    engine.vx, engine.vy = 7, -7
    engine.tick()
    assert engine.velocity == (-7, -7)


def test_top_wall_reflects_vy_only(engine):
    started(engine)
    engine.ball.topleft = (500, 3)
    engine.vx, engine.vy = 7, -7
    engine.tick()
    assert engine.velocity == (7, 7)


def test_corner_reflects_both_axes(engine):
    started(engine)
    engine.ball.topleft = (2, 3)
    engine.vx, engine.vy = -7, -7
    engine.tick()
    assert engine.velocity == (7, 7)


def test_no_reflection_on_bottom_edge(engine):
    started(engine)
    engine.ball.topleft = (100, H - 25)
    engine.vx, engine.vy = 7, 7
    engine.tick()
    assert engine.velocity == (7, 7)


@pytest.mark.parametrize("offset", [-15, 30, 60])
def test_paddle_bounce_is_vertical_wherever_it_lands(engine, offset):
    started(engine)
    engine.ball.topleft = (engine.paddle.left + offset, engine.paddle.top - 23)
    engine.vx, engine.vy = 7, 7
    engine.tick()
    assert engine.ball.colliderect(engine.paddle)
    assert engine.velocity == (7, -7)


# -----------------------------
# bricks & score
# -----------------------------

def test_at_most_one_brick_per_tick(engine):
    started(engine)
    # After moving, the ball spans x 68..88 and y 145..165: over (20,140) and (80,140)
    engine.ball.topleft = (61, 152)
    engine.tick()
    assert len(engine.bricks) == 67
    assert engine.score == 10
    assert pygame.Rect(20, 140, 55, 22) in engine.bricks
    assert pygame.Rect(80, 140, 55, 22) not in engine.bricks
    assert engine.velocity == (7, 7)


def test_three_bricks_score_thirty(engine):
    started(engine)
    start_count = len(engine.bricks)
    for _ in range(3):
        target = engine.bricks[-1]
        engine.ball.center = (target.centerx - engine.vx, target.centery - engine.vy)
        engine.tick()
        assert target not in engine.bricks
    assert engine.score == 30
    assert len(engine.bricks) == start_count - 3
    assert engine.state is GameState.PLAYING


def test_ball_stays_inside_surface_until_first_event(make_engine):
    engine = started(make_engine(ball_speed=8))
    assert engine.velocity == (8, -8)

    hit = False
    for _ in range(100):
        engine.tick()
        if engine.score or engine.state is not GameState.PLAYING:
            hit = True
            break
        assert engine.ball.left >= 0 and engine.ball.right <= W
        assert engine.ball.top >= 0 and engine.ball.bottom <= H
    assert hit


# -----------------------------
# round end
# -----------------------------

def drop_ball(engine):
    engine.ball.topleft = (100, H - 15)
    engine.vx, engine.vy = 7, 7
    engine.tick()


def test_fall_through_ends_round(engine, scheduler):
    results = []
    engine.add_round_listener(results.append)
    started(engine)
    engine.score = 40
    engine.high_score = 20

    drop_ball(engine)

    assert engine.state is GameState.GAME_OVER
    assert scheduler.stops == 1 and not scheduler.running
    assert engine.high_score == 40
    assert "40" in engine.message
    assert engine.message.startswith("GAME OVER!")
    assert len(results) == 1
    assert results[0].score == 40 and not results[0].cleared


def test_high_score_never_decreases(engine):
    started(engine)
    engine.high_score = 100
    engine.score = 30
    drop_ball(engine)
    assert engine.high_score == 100
    assert "30" in engine.message


def test_round_end_fires_once(engine, scheduler):
    results = []
    engine.add_round_listener(results.append)
    started(engine)
    drop_ball(engine)
    for _ in range(5):
        engine.tick()
    assert len(results) == 1
    assert scheduler.stops == 1


def test_restart_after_game_over_resets_round_keeps_high_score(engine, scheduler):
    started(engine)
    engine.score = 50
    drop_ball(engine)

    engine.on_key_down(Key.START)
    assert engine.state is GameState.PLAYING
    assert engine.score == 0
    assert engine.high_score == 50
    assert len(engine.bricks) == 68
    assert engine.message == ""
    assert scheduler.starts == 2


def test_clearing_field_wins_in_classic_profile(engine):
    results = []
    engine.add_round_listener(results.append)
    started(engine)
    last = pygame.Rect(500, 140, 55, 22)
    engine.bricks = [last]
    engine.ball.center = (last.centerx - engine.vx, last.centery - engine.vy)
    engine.tick()

    assert engine.state is GameState.GAME_OVER
    assert engine.message == "YOU WIN!\nYour score: 10"
    assert results[0].cleared


def test_clearing_field_keeps_playing_in_lose_only_profile(make_engine):
    engine = started(make_engine("arcade"))
    last = pygame.Rect(500, 140, 50, 20)
    engine.bricks = [last]
    engine.ball.center = (last.centerx - engine.vx, last.centery - engine.vy)
    engine.tick()

    assert engine.bricks == []
    assert engine.state is GameState.PLAYING


# -----------------------------
# snapshot
# -----------------------------

def test_snapshot_is_detached_from_engine(engine):
    started(engine)
    snap = engine.snapshot()
    assert snap.state is GameState.PLAYING
    assert snap.paddle == (481, 394, 80, 10)
    assert len(snap.bricks) == 68

    engine.tick()
    assert snap.ball == (511, 374, 20, 20)
    assert engine.snapshot().frame == snap.frame + 1


def test_snapshot_does_not_advance_frame(engine):
    first = engine.snapshot().frame
    engine.snapshot()
    assert engine.snapshot().frame == first


def test_engines_do_not_share_state():
    a = GameEngine(W, H, load_profile("classic"))
    b = GameEngine(W, H, load_profile("classic"))
    a.high_score = 90
    del a.bricks[0]
    assert b.high_score == 0
    assert len(b.bricks) == 68


def test_short_surface_gets_one_row_above_the_ball(make_engine):
    engine = make_engine(size=(200, 80))
    assert {b.y for b in engine.bricks} == {4}
    assert all(b.bottom <= 30 for b in engine.bricks)


def test_rows_below_the_ball_start_are_dropped(make_engine):
    engine = make_engine(size=(200, 200))
    # ball starts at y=150, so the y=140 row would reach it
    assert sorted({b.y for b in engine.bricks}) == [50, 80, 110]


def test_held_key_survives_restart(engine):
    started(engine)
    engine.on_key_down(Key.MOVE_LEFT)
    drop_ball(engine)
    assert engine.state is GameState.GAME_OVER

    engine.on_key_down(Key.START)
    assert engine.input.left_held
    engine.tick()
    assert engine.paddle.x == 481 - 12
