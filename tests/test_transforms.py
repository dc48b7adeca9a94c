import math

import pytest

from cinnamoncraft.transforms import (
    IDENTITY,
    Transform,
    flatten,
    mat4_mult,
    model_matrix,
    normal_matrix,
    perspective_matrix,
    position_matrix,
    rotation_matrices,
    view_matrix,
)


def _approx_matrix(matrix):
    return [pytest.approx(list(row), abs=1e-9) for row in matrix]


def _as_lists(matrix):
    return [list(row) for row in matrix]


def _transpose(matrix):
    return tuple(tuple(column) for column in zip(*matrix))


def _apply_row_vector(vector, matrix):
    return [sum(v * row[col] for v, row in zip(vector, matrix)) for col in range(4)]


SAMPLE = tuple(tuple(float(4 * r + c + 1) for c in range(4)) for r in range(4))


def test_identity_is_neutral():
    assert mat4_mult(IDENTITY, SAMPLE) == SAMPLE
    assert mat4_mult(SAMPLE, IDENTITY) == SAMPLE


def test_mat4_mult_is_associative():
    pitch, yaw = rotation_matrices(0.3, 1.1)
    left = mat4_mult(mat4_mult(SAMPLE, pitch), yaw)
    right = mat4_mult(SAMPLE, mat4_mult(pitch, yaw))
    assert _as_lists(left) == _approx_matrix(right)


def test_zero_rotation_is_identity():
    pitch, yaw = rotation_matrices(0.0, 0.0)
    assert pitch == IDENTITY
    assert yaw == IDENTITY


@pytest.mark.parametrize("angle", [0.4, -1.2, math.pi / 3])
def test_rotations_are_orthonormal(angle):
    for matrix in rotation_matrices(angle, angle):
        assert _as_lists(mat4_mult(matrix, _transpose(matrix))) == _approx_matrix(IDENTITY)


def test_perspective_matrix_entries():
    projection = perspective_matrix(2.0)
    assert projection[0][0] == pytest.approx(0.5)
    assert projection[1][1] == pytest.approx(1.0)
    assert projection[2][3] == -1.0
    assert projection[3][3] == 0.0


def test_perspective_rejects_non_positive_aspect():
    with pytest.raises(ValueError):
        perspective_matrix(0.0)


def test_model_matrix_translation_row():
    matrix = model_matrix(Transform(x=1.5, y=-2.0, z=3.0, pitch=0.2, yaw=0.7))
    assert matrix[3][:3] == (1.5, -2.0, 3.0)


def test_view_matrix_maps_camera_position_to_origin():
    camera = Transform(x=3.0, y=-1.0, z=2.5, pitch=0.4, yaw=-0.9)
    result = _apply_row_vector([camera.x, camera.y, camera.z, 1.0], view_matrix(camera))
    assert result == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-9)


def test_view_matrix_without_rotation_is_translation():
    matrix = view_matrix(Transform(x=1.0, y=2.0, z=3.0))
    assert matrix[3] == (-1.0, -2.0, -3.0, 1.0)


def test_position_matrix_of_identity_setup():
    assert _as_lists(position_matrix(IDENTITY, Transform(), Transform())) == _approx_matrix(
        IDENTITY
    )


def test_normal_matrix_undoes_yaw():
    transform = Transform(yaw=0.8)
    rotation = tuple(row for row in model_matrix(transform))
    assert _as_lists(normal_matrix(transform)) == _approx_matrix(_transpose(rotation))


def test_flatten_is_row_major():
    flat = flatten(SAMPLE)
    assert len(flat) == 16
    assert all(flat[4 * r + c] == SAMPLE[r][c] for r in range(4) for c in range(4))