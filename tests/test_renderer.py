from array import array

import pytest

from cinnamoncraft.meshing import Chunk, mesh_chunk
from cinnamoncraft.renderer import Renderer, split_attributes
from cinnamoncraft.resources import Mesh
from cinnamoncraft.rng import XorShiftRng


def _mesh(vertices):
    return Mesh(array("f", [v for vertex in vertices for v in vertex]), len(vertices))


def test_split_attributes_separates_streams():
    mesh = _mesh(
        [
            (1.0, 2.0, 3.0, 0.0, 1.0, 0.0, 0.25, 0.5),
            (4.0, 5.0, 6.0, -1.0, 0.0, 0.0, 0.75, 1.0),
        ]
    )
    positions, normals, uvs = split_attributes(mesh)
    assert positions == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert normals == [0.0, 1.0, 0.0, -1.0, 0.0, 0.0]
    assert uvs == [0.25, 0.5, 0.75, 1.0]


def test_split_attributes_empty_mesh():
    assert split_attributes(Mesh()) == ([], [], [])


def test_split_attributes_stream_lengths_match_vertex_count():
    chunk = Chunk.filled_random(XorShiftRng())
    mesh = mesh_chunk(chunk.blocks)
    positions, normals, uvs = split_attributes(mesh)
    assert len(positions) == 3 * mesh.vertex_count
    assert len(normals) == 3 * mesh.vertex_count
    assert len(uvs) == 2 * mesh.vertex_count


def test_split_attributes_round_trip():
    chunk = Chunk.filled_random(XorShiftRng(7))
    mesh = mesh_chunk(chunk.blocks)
    positions, normals, uvs = split_attributes(mesh)
    rebuilt = [
        value
        for p, n, t in zip(
            zip(*[iter(positions)] * 3),
            zip(*[iter(normals)] * 3),
            zip(*[iter(uvs)] * 2),
        )
        for value in (*p, *n, *t)
    ]
    assert rebuilt == list(mesh.data)


def test_split_attributes_rejects_partial_vertex():
    mesh = Mesh(array("f", [0.0] * 9), 1)
    with pytest.raises(ValueError):
        split_attributes(mesh)


def test_split_attributes_rejects_wrong_count():
    mesh = Mesh(array("f", [0.0] * 16), 3)
    with pytest.raises(ValueError):
        split_attributes(mesh)


@pytest.mark.parametrize("aspect", [0.0, -1.5])
def test_renderer_rejects_bad_aspect_ratio(aspect):
    with pytest.raises(ValueError):
        Renderer(aspect)