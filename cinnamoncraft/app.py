"""Window, event loop and asset loading for the game client."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .game import TITLE, Game, Key
from .meshing import CHUNK_SIZE
from .renderer import Renderer
from .resources import Image, Mesh, ResourceError, load_obj, load_ppm

MODEL_MESH_FILE = "miku.obj"
MODEL_TEXTURE_FILE = "dirt.ppm"
SPRITEMAP_FILE = "minecraft_block_spritemap.ppm"

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 400
TICKS_PER_SECOND = 60

_KEY_BINDINGS = {
    "A": Key.LEFT,
    "D": Key.RIGHT,
    "W": Key.FORWARD,
    "S": Key.BACKWARD,
    "SPACE": Key.UP,
    "LSHIFT": Key.DOWN,
    "ESCAPE": Key.TOGGLE_MOUSE,
}


@dataclass(frozen=True)
class Assets:
    """Everything the game loads from disk at start-up."""

    model_mesh: Mesh
    model_texture: Image
    spritemap: Image


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(prog="cinnamoncraft", description=f"Run {TITLE}.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the mesh and texture files",
    )
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    return parser.parse_args(argv)


def load_assets(directory: str | Path) -> Assets:
    """Load the test model and the block spritemap from a directory."""
    directory = Path(directory)
    return Assets(
        model_mesh=load_obj(directory / MODEL_MESH_FILE),
        model_texture=load_ppm(directory / MODEL_TEXTURE_FILE),
        spritemap=load_ppm(directory / SPRITEMAP_FILE),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; returns the process exit status."""
    args = parse_args(argv)
    print(f"Starting {TITLE}")

    try:
        assets = load_assets(args.assets)
    except ResourceError as exc:
        print(f"\nCould not load assets: {exc}\n", file=sys.stderr)
        return 1

    import pyglet
    from pyglet.window import key as keys

    config = pyglet.gl.Config(
        double_buffer=True,
        depth_size=24,
        stencil_size=8,
        major_version=3,
        minor_version=3,
        forward_compatible=True,
    )
    try:
        window = pyglet.window.Window(
            args.width, args.height, caption=TITLE, resizable=True, config=config
        )
    except (pyglet.window.NoSuchConfigException, pyglet.gl.ContextException) as exc:
        print(f"\nCould not create window: {exc or '<No error given>'}\n", file=sys.stderr)
        return 1

    game = Game()
    renderer = Renderer(args.width / args.height)
    renderer.resize(*window.get_framebuffer_size())

    test_model = renderer.create_model(assets.model_mesh, assets.model_texture)
    test_model.transform = game.model_transform
    chunk_model = renderer.create_model(game.chunk.mesh(), assets.spritemap)
    window.set_exclusive_mouse(game.mouse_captured)

    @window.event
    def on_resize(width, height):
        renderer.resize(*window.get_framebuffer_size())
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_key_press(symbol, modifiers):
        bound = _KEY_BINDINGS.get(keys.symbol_string(symbol))
        if bound is not None:
            game.on_key_press(bound)
            if bound is Key.TOGGLE_MOUSE:
                window.set_exclusive_mouse(game.mouse_captured)
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_key_release(symbol, modifiers):
        bound = _KEY_BINDINGS.get(keys.symbol_string(symbol))
        if bound is not None:
            game.on_key_release(bound)
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        # the game expects screen-down to be positive
        game.on_mouse_motion(dx, -dy)

    @window.event
    def on_draw():
        window.clear()
        renderer.draw(game.camera, test_model)
        renderer.draw(game.camera, chunk_model)

    def tick(_dt: float) -> None:
        game.step()

    pyglet.clock.schedule_interval(tick, 1 / TICKS_PER_SECOND)
    try:
        pyglet.app.run()
    finally:
        pyglet.clock.unschedule(tick)
        test_model.delete()
        chunk_model.delete()
    return 0


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["Assets", "CHUNK_SIZE", "load_assets", "main", "parse_args"]