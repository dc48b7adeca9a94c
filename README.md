# cinnamoncraft

A small first-person block world. It shows a randomly filled 16×16×16 chunk
of blocks and a textured test model that slowly spins, and lets you fly
around them with the keyboard and mouse. The pieces behind it (a
deterministic xorshift random number generator, OBJ and PPM loaders, 4×4
transform matrices and a chunk mesher that culls hidden faces) can also be
used on their own.

## Installing

```
pip install .
```

The viewer draws with OpenGL through `pyglet`, which is installed with the
package. It needs a display and a driver that supports an OpenGL 3.3 core
(forward-compatible) context.

## Running

```
cinnamoncraft --assets path/to/assets
```

Options:

| Option           | Default | Meaning                                   |
|------------------|---------|-------------------------------------------|
| `--assets DIR`   | `.`     | directory holding the mesh and textures   |
| `--width N`      | `800`   | initial window width (positive integer)   |
| `--height N`     | `400`   | initial window height (positive integer)  |

The assets directory must contain:

- `miku.obj`: the test model, a Wavefront OBJ made of triangles with
  `p/t/n` (position, texture, normal) indices on every face corner;
- `dirt.ppm`: the test model's texture;
- `minecraft_block_spritemap.ppm`: the block textures, laid out as a 16×16
  grid of sprites.

Both images must be binary (`P6`) PPM files with 8-bit channels. If any file
is missing or malformed the command prints an error and exits with status 1.

The window opens with the mouse captured.

### Controls

| Input        | Action                         |
|--------------|--------------------------------|
| Mouse        | Look around (pitch is clamped) |
| W / S        | Move forward / backward        |
| A / D        | Strafe left / right            |
| Space        | Move up                        |
| Left Shift   | Move down                      |
| Escape       | Capture or release the mouse   |

Movement is blocked by the chunk's bounding box, with a little padding.

## Using the library

```python
from cinnamoncraft.rng import XorShiftRng
from cinnamoncraft.meshing import Chunk
from cinnamoncraft.resources import load_obj, load_ppm

rng = XorShiftRng(1)
chunk = Chunk.filled_random(rng)      # block ids 1..4 in every cell
mesh = chunk.mesh()                   # interleaved position, normal, UV

model = load_obj("model.obj")         # a Mesh; model.bytecount() gives its size
texture = load_ppm("texture.ppm")     # an Image, rows ordered bottom to top
```

- `cinnamoncraft.rng`: `XorShiftRng` with `random_uint(bound)` and
  `random_uchar()`.
- `cinnamoncraft.resources`: `Mesh`, `Image`, `parse_obj`, `load_obj`,
  `parse_ppm`, `load_ppm`; malformed or missing files raise `ResourceError`.
- `cinnamoncraft.meshing`: `block_is_air`, `spritemap_uv`, `block_faces`,
  `mesh_chunk` and `Chunk`. Block ids 1 to 4 are solid; 0 and anything above
  4 is air.
- `cinnamoncraft.transforms`: `Transform`, `mat4_mult`, `rotation_matrices`,
  `perspective_matrix`, `model_matrix`, `view_matrix`, `position_matrix`,
  `normal_matrix` and `flatten` for building the matrices handed to the
  shader.
- `cinnamoncraft.game`: `Game` and `Key`, the camera movement, collision and
  input state, usable without a window.
- `cinnamoncraft.renderer`: `Renderer`, `Model` and `split_attributes`;
  `Renderer` needs a current OpenGL context.

## What it does not do

There is a single fixed chunk: blocks cannot be placed or broken, the world
is not saved or loaded, there is no text or 2D overlay, and there is no
multiplayer or server.

## Tests

```
pip install ".[test]"
pytest
```