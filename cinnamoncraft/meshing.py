"""Conversion of 16x16x16 block chunks into textured triangle meshes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .resources import Mesh
from .rng import XorShiftRng

CHUNK_SIZE = 16
SPRITES_PER_ROW = 16
SIDE_SPRITE_BASE = 241

Vertex = tuple[float, float, float, float, float, float, float, float]
Blocks = Sequence[Sequence[Sequence[int]]]


def block_is_air(block: int) -> bool:
    """Blocks 0 and anything above 4 are empty space."""
    return block == 0 or block > 4


def spritemap_uv(index: int) -> tuple[float, float, float, float]:
    """Return ``(u_small, v_small, u_big, v_big)`` for a sprite index."""
    u_small = (index % SPRITES_PER_ROW) / SPRITES_PER_ROW
    v_small = (index // SPRITES_PER_ROW) / SPRITES_PER_ROW
    u_big = ((index + 1) % SPRITES_PER_ROW) / SPRITES_PER_ROW
    v_big = (index // SPRITES_PER_ROW + 1) / SPRITES_PER_ROW
    return u_small, v_small, u_big, v_big


@dataclass(frozen=True)
class _Face:
    offset: tuple[int, int, int]
    normal: tuple[float, float, float]
    # each corner: dx, dy, dz, use big u, use big v
    corners: tuple[tuple[int, int, int, bool, bool], ...]
    sprite_overrides: dict[int, int]


_S, _B = False, True

_FACES = (
    _Face(
        (-1, 0, 0),
        (1.0, 0.0, 0.0),
        (
            (0, 0, 0, _B, _S),
            (0, 0, 1, _S, _S),
            (0, 1, 0, _B, _B),
            (0, 1, 1, _S, _B),
            (0, 1, 0, _B, _B),
            (0, 0, 1, _S, _S),
        ),
        {},
    ),
    _Face(
        (1, 0, 0),
        (-1.0, 0.0, 0.0),
        (
            (1, 0, 0, _S, _S),
            (1, 1, 0, _S, _B),
            (1, 0, 1, _B, _S),
            (1, 1, 1, _B, _B),
            (1, 0, 1, _B, _S),
            (1, 1, 0, _S, _B),
        ),
        {},
    ),
    _Face(
        (0, 0, -1),
        (0.0, 0.0, 1.0),
        (
            (0, 0, 0, _S, _S),
            (0, 1, 0, _S, _B),
            (1, 0, 0, _B, _S),
            (1, 1, 0, _B, _B),
            (1, 0, 0, _B, _S),
            (0, 1, 0, _S, _B),
        ),
        {},
    ),
    _Face(
        (0, 0, 1),
        (0.0, 0.0, -1.0),
        (
            (0, 0, 1, _B, _S),
            (1, 0, 1, _S, _S),
            (0, 1, 1, _B, _B),
            (1, 1, 1, _S, _B),
            (0, 1, 1, _B, _B),
            (1, 0, 1, _S, _S),
        ),
        {},
    ),
    _Face(
        (0, -1, 0),
        (0.0, -1.0, 0.0),
        (
            (0, 0, 0, _S, _S),
            (1, 0, 0, _S, _B),
            (0, 0, 1, _B, _S),
            (1, 0, 1, _B, _B),
            (0, 0, 1, _B, _S),
            (1, 0, 0, _S, _B),
        ),
        {2: 242, 4: 246},
    ),
    _Face(
        (0, 1, 0),
        (0.0, 1.0, 0.0),
        (
            (0, 1, 0, _B, _S),
            (0, 1, 1, _S, _S),
            (1, 1, 0, _B, _B),
            (1, 1, 1, _S, _B),
            (1, 1, 0, _B, _B),
            (0, 1, 1, _S, _S),
        ),
        {2: 98, 4: 246},
    ),
)


def _exposed(blocks: Blocks, x: int, y: int, z: int) -> bool:
    """Whether a face pointing at ``(x, y, z)`` is visible."""
    if not all(0 <= c < CHUNK_SIZE for c in (x, y, z)):
        return True
    return block_is_air(blocks[x][y][z])


def block_faces(blocks: Blocks, x: int, y: int, z: int) -> list[Vertex]:
    """Vertices of the visible faces of one block, six per face."""
    block = blocks[x][y][z]
    if block_is_air(block):
        return []

    vertices: list[Vertex] = []
    for face in _FACES:
        dx, dy, dz = face.offset
        if not _exposed(blocks, x + dx, y + dy, z + dz):
            continue
        sprite = face.sprite_overrides.get(block, SIDE_SPRITE_BASE + block)
        u_small, v_small, u_big, v_big = spritemap_uv(sprite)
        nx, ny, nz = face.normal
        for cx, cy, cz, big_u, big_v in face.corners:
            vertices.append(
                (
                    float(x + cx),
                    float(y + cy),
                    float(z + cz),
                    nx,
                    ny,
                    nz,
                    u_big if big_u else u_small,
                    v_big if big_v else v_small,
                )
            )
    return vertices


def mesh_chunk(blocks: Blocks) -> Mesh:
    """Build the mesh of every visible block face in a chunk."""
    mesh = Mesh()
    for x in range(CHUNK_SIZE):
        for y in range(CHUNK_SIZE):
            for z in range(CHUNK_SIZE):
                for vertex in block_faces(blocks, x, y, z):
                    mesh.data.extend(vertex)
                    mesh.vertex_count += 1
    return mesh


class Chunk:
    """A cube of 16x16x16 block states indexed as ``blocks[x][y][z]``."""

    def __init__(self, blocks: Blocks) -> None:
        if len(blocks) != CHUNK_SIZE or any(
            len(column) != CHUNK_SIZE or any(len(row) != CHUNK_SIZE for row in column)
            for column in blocks
        ):
            raise ValueError("a chunk must be 16x16x16 blocks")
        copied = [[list(row) for row in column] for column in blocks]
        if any(not 0 <= b < 256 for column in copied for row in column for b in row):
            raise ValueError("block states must be in the range 0..255")
        self.blocks = copied

    @classmethod
    def filled_random(cls, rng: XorShiftRng) -> Chunk:
        """A chunk where every block is a random solid block (1 to 4)."""
        return cls(
            [
                [[rng.random_uint(4) + 1 for _ in range(CHUNK_SIZE)] for _ in range(CHUNK_SIZE)]
                for _ in range(CHUNK_SIZE)
            ]
        )

    def mesh(self) -> Mesh:
        """Mesh of this chunk's visible faces."""
        return mesh_chunk(self.blocks)