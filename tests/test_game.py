import math

import pytest

from cinnamoncraft.game import Game, Key


def test_initial_state():
    game = Game()
    assert game.camera.z == 2.0
    assert game.camera.x == 0.0
    assert game.mouse_captured is True
    assert game.held == set()


def test_chunk_is_filled_with_solid_blocks():
    game = Game()
    values = {b for column in game.chunk.blocks for row in column for b in row}
    assert values <= {1, 2, 3, 4}


def test_camera_outside_chunk_is_not_colliding():
    assert Game().is_colliding() is False


def test_camera_inside_chunk_is_colliding():
    game = Game()
    game.camera.x, game.camera.y, game.camera.z = 8.0, 8.0, -8.0
    assert game.is_colliding() is True


def test_padding_extends_collision_volume():
    game = Game()
    game.camera.x, game.camera.y, game.camera.z = -0.1, 8.0, -8.0
    assert game.is_colliding() is True
    game.camera.x = -0.3
    assert game.is_colliding() is False


def test_forward_moves_towards_negative_z_at_zero_yaw():
    game = Game()
    start = game.camera.z
    game.on_key_press(Key.FORWARD)
    game.step()
    assert game.camera.z < start
    assert game.camera.x == pytest.approx(0.0)


def test_backward_undoes_forward():
    game = Game()
    start = (game.camera.x, game.camera.z)
    game.on_key_press(Key.FORWARD)
    game.step()
    game.on_key_release(Key.FORWARD)
    game.on_key_press(Key.BACKWARD)
    game.step()
    assert game.camera.x == pytest.approx(start[0])
    assert game.camera.z == pytest.approx(start[1])


def test_left_takes_priority_over_right():
    game = Game()
    game.on_key_press(Key.LEFT)
    game.on_key_press(Key.RIGHT)
    game.step()
    assert game.camera.x < 0.0


def test_released_key_stops_movement():
    game = Game()
    game.on_key_press(Key.RIGHT)
    game.on_key_release(Key.RIGHT)
    game.step()
    assert game.camera.x == 0.0
    assert game.camera.z == 2.0


def test_up_and_down_cancel():
    game = Game()
    start = game.camera.y
    game.on_key_press(Key.UP)
    game.step()
    assert game.camera.y > start
    game.on_key_release(Key.UP)
    game.on_key_press(Key.DOWN)
    game.step()
    assert game.camera.y == pytest.approx(start)


def test_movement_inside_chunk_is_undone():
    game = Game()
    game.camera.x, game.camera.y, game.camera.z = 8.0, 8.0, -8.0
    game.on_key_press(Key.UP)
    game.step()
    assert game.camera.y == pytest.approx(8.0)


def test_step_spins_model():
    game = Game()
    game.step()
    game.step()
    assert game.model_transform.yaw == pytest.approx(0.02)


def test_mouse_motion_turns_camera():
    game = Game()
    game.on_mouse_motion(10, -5)
    assert game.camera.yaw > 0
    assert game.camera.pitch < 0


def test_pitch_is_clamped():
    game = Game()
    game.on_mouse_motion(0, 10_000)
    assert game.camera.pitch == pytest.approx(math.pi / 2)
    game.on_mouse_motion(0, -100_000)
    assert game.camera.pitch == pytest.approx(-math.pi / 2)


def test_toggle_mouse_flips_capture_and_is_not_held():
    game = Game()
    game.on_key_press(Key.TOGGLE_MOUSE)
    assert game.mouse_captured is False
    assert Key.TOGGLE_MOUSE not in game.held
    game.on_key_press(Key.TOGGLE_MOUSE)
    assert game.mouse_captured is True