"""Transforms and 4x4 matrix maths for the 3D renderer.

Matrices are tuples of four rows, laid out in the order the shader
uniforms expect them in memory.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

Matrix = tuple[tuple[float, float, float, float], ...]

IDENTITY: Matrix = tuple(
    tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
)

FOV_Y_DEGREES = 90.0
NEAR_PLANE = 0.01
FAR_PLANE = 100.0


@dataclass
class Transform:
    """Position and orientation of an object or camera."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0


def mat4_mult(b: Matrix, a: Matrix) -> Matrix:
    """Combine two matrices so that ``a`` is applied first, then ``b``."""
    columns = tuple(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns)
        for row in a
    )


def rotation_matrices(pitch: float, yaw: float) -> tuple[Matrix, Matrix]:
    """Return the pitch (about x) and yaw (about y) rotation matrices."""
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    pitch_matrix = (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, cp, -sp, 0.0),
        (0.0, sp, cp, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    yaw_matrix = (
        (cy, 0.0, sy, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-sy, 0.0, cy, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return pitch_matrix, yaw_matrix


def perspective_matrix(aspect_ratio: float) -> Matrix:
    """Projection from view space to clip space for the given aspect ratio."""
    if aspect_ratio <= 0:
        raise ValueError("aspect ratio must be positive")
    tangent = math.tan(math.radians(FOV_Y_DEGREES / 2))
    top = NEAR_PLANE * tangent
    right = top * aspect_ratio
    depth = FAR_PLANE - NEAR_PLANE
    return (
        (NEAR_PLANE / right, 0.0, 0.0, 0.0),
        (0.0, NEAR_PLANE / top, 0.0, 0.0),
        (0.0, 0.0, -(FAR_PLANE + NEAR_PLANE) / depth, -1.0),
        (0.0, 0.0, -(2.0 * FAR_PLANE * NEAR_PLANE) / depth, 0.0),
    )


def model_matrix(transform: Transform) -> Matrix:
    """Matrix taking model space to world space."""
    pitch_matrix, yaw_matrix = rotation_matrices(transform.pitch, transform.yaw)
    rows = [list(row) for row in mat4_mult(yaw_matrix, pitch_matrix)]
    rows[3][0:3] = [transform.x, transform.y, transform.z]
    return tuple(tuple(row) for row in rows)


def view_matrix(camera: Transform) -> Matrix:
    """Matrix taking world space to view space: translate, then rotate."""
    pitch_matrix, yaw_matrix = rotation_matrices(-camera.pitch, -camera.yaw)
    translation = (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (-camera.x, -camera.y, -camera.z, 1.0),
    )
    return mat4_mult(pitch_matrix, mat4_mult(yaw_matrix, translation))


def position_matrix(projection: Matrix, camera: Transform, transform: Transform) -> Matrix:
    """Full model-view-projection matrix."""
    projected_view = mat4_mult(projection, view_matrix(camera))
    return mat4_mult(projected_view, model_matrix(transform))


def normal_matrix(transform: Transform) -> Matrix:
    """Rotation applied to normals to account for the model's orientation."""
    pitch_matrix, yaw_matrix = rotation_matrices(-transform.pitch, -transform.yaw)
    return mat4_mult(yaw_matrix, pitch_matrix)


def flatten(matrix: Matrix) -> tuple[float, ...]:
    """The 16 matrix entries in memory order."""
    return tuple(value for row in matrix for value in row)