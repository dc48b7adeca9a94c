"""OpenGL rendering of textured models with a single shared shader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .resources import FLOATS_PER_VERTEX, Image, Mesh
from .transforms import (
    Transform,
    flatten,
    normal_matrix,
    perspective_matrix,
    position_matrix,
)

CLEAR_COLOR = (0.2, 0.2, 0.23, 1.0)

VERTEX_SHADER = """#version 150 core
uniform mat4 position_matrix;
uniform mat4 normal_matrix;
in vec3 position;
in vec3 normal;
in vec2 UV;
out vec3 normal_camera;
out vec2 frag_UV;
void main() {
    gl_Position = position_matrix * vec4(position.xy, -position.z, 1.0);
    normal_camera = (normal_matrix * vec4(normal, 1.0)).xyz;
    frag_UV = UV;
}
"""

FRAGMENT_SHADER = """#version 150 core
uniform sampler2D tex;
in vec3 normal_camera;
in vec2 frag_UV;
out vec4 outColor;
void main() {
    float c = dot(normal_camera, vec3(0.7, 0.7, 0)) * 0.5 + 0.5;
    outColor = texture(tex, frag_UV) * vec4(c, c, c, 1.0);
}
"""


def split_attributes(mesh: Mesh) -> tuple[list[float], list[float], list[float]]:
    """Split interleaved vertex data into position, normal and UV streams."""
    data = list(mesh.data)
    if len(data) % FLOATS_PER_VERTEX:
        raise ValueError("mesh data is not a whole number of vertices")
    vertices = list(zip(*[iter(data)] * FLOATS_PER_VERTEX))
    if len(vertices) != mesh.vertex_count:
        raise ValueError(
            f"mesh declares {mesh.vertex_count} vertices but holds {len(vertices)}"
        )
    positions = [value for vertex in vertices for value in vertex[0:3]]
    normals = [value for vertex in vertices for value in vertex[3:6]]
    uvs = [value for vertex in vertices for value in vertex[6:8]]
    return positions, normals, uvs


@dataclass
class Model:
    """A mesh uploaded to the GPU together with its texture and placement."""

    vertex_list: Any
    texture: Any
    vertex_count: int
    transform: Transform = field(default_factory=Transform)

    def delete(self) -> None:
        """Release the GPU vertex data."""
        if self.vertex_list is not None:
            self.vertex_list.delete()
            self.vertex_list = None


class Renderer:
    """Owns the shader program and projection; draws models for a camera.

    Requires a current OpenGL context.
    """

    def __init__(self, aspect_ratio: float = 2.0) -> None:
        self.projection = perspective_matrix(aspect_ratio)

        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        self._gl = gl
        self._program = ShaderProgram(
            Shader(VERTEX_SHADER, "vertex"), Shader(FRAGMENT_SHADER, "fragment")
        )
        gl.glClearColor(*CLEAR_COLOR)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glFrontFace(gl.GL_CW)

    def resize(self, width: int, height: int) -> None:
        """Match the viewport and projection to a new framebuffer size."""
        if width <= 0 or height <= 0:
            return
        self._gl.glViewport(0, 0, width, height)
        self.projection = perspective_matrix(width / height)

    def create_model(self, mesh: Mesh, image: Image) -> Model:
        """Upload a mesh and its RGB texture, returning a model at the origin."""
        import pyglet

        gl = self._gl
        positions, normals, uvs = split_attributes(mesh)

        vertex_list = None
        if mesh.vertex_count:
            vertex_list = self._program.vertex_list(
                mesh.vertex_count,
                gl.GL_TRIANGLES,
                position=("f", positions),
                normal=("f", normals),
                UV=("f", uvs),
            )

        image_data = pyglet.image.ImageData(
            image.width, image.height, "RGB", image.pixels
        )
        texture = image_data.get_texture()
        gl.glBindTexture(texture.target, texture.id)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)

        return Model(vertex_list, texture, mesh.vertex_count)

    def draw(self, camera: Transform, model: Model) -> None:
        """Draw one model as seen from the camera."""
        if model.vertex_list is None:
            return
        gl = self._gl
        program = self._program
        program.use()
        program["position_matrix"] = flatten(
            position_matrix(self.projection, camera, model.transform)
        )
        program["normal_matrix"] = flatten(normal_matrix(model.transform))
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(model.texture.target, model.texture.id)
        model.vertex_list.draw(gl.GL_TRIANGLES)