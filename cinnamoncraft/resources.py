"""Loading of OBJ meshes and binary PPM images."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

FLOATS_PER_VERTEX = 8


class ResourceError(Exception):
    """Raised when a resource file is missing or malformed."""


@dataclass
class Mesh:
    """Interleaved vertex data: position (3), normal (3), UV (2) per vertex."""

    data: array = field(default_factory=lambda: array("f"))
    vertex_count: int = 0

    def bytecount(self) -> int:
        """Size of the vertex data in bytes."""
        return len(self.data) * self.data.itemsize


@dataclass(frozen=True)
class Image:
    """RGB pixels stored with the bottom row first."""

    width: int
    height: int
    pixels: bytes


def _floats(parts: list[str], count: int, line: str) -> list[float]:
    if len(parts) < count:
        raise ResourceError(f"expected {count} values in line: {line!r}")
    try:
        return [float(part) for part in parts[:count]]
    except ValueError as exc:
        raise ResourceError(f"invalid number in line: {line!r}") from exc


def _lookup(items: list, index: int, kind: str):
    if not 1 <= index <= len(items):
        raise ResourceError(f"{kind} index {index} out of range")
    return items[index - 1]


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a triangle mesh from the lines of an OBJ file.

    Positions have their x and z axes negated; only the first three
    corners of each face are used.
    """
    positions: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    uvs: list[tuple[float, ...]] = []
    mesh = Mesh()

    for line in lines:
        parts = line.split()
        if not parts:
            continue
        prefix, args = parts[0], parts[1:]
        if prefix == "v":
            x, y, z = _floats(args, 3, line)
            positions.append((-x, y, -z))
        elif prefix == "vn":
            normals.append(tuple(_floats(args, 3, line)))
        elif prefix == "vt":
            uvs.append(tuple(_floats(args, 2, line)))
        elif prefix == "f":
            if len(args) < 3:
                raise ResourceError(f"face needs three corners: {line!r}")
            for corner in args[:3]:
                indices = corner.split("/")
                if len(indices) != 3:
                    raise ResourceError(f"face corner must be p/t/n: {corner!r}")
                try:
                    p, t, n = (int(index) for index in indices)
                except ValueError as exc:
                    raise ResourceError(f"invalid face corner: {corner!r}") from exc
                mesh.data.extend(_lookup(positions, p, "position"))
                mesh.data.extend(_lookup(normals, n, "normal"))
                mesh.data.extend(_lookup(uvs, t, "texture"))
            mesh.vertex_count += 3
    return mesh


def load_obj(path: str | Path) -> Mesh:
    """Read and parse an OBJ file."""
    try:
        with open(path, encoding="utf-8") as file:
            return parse_obj(file)
    except FileNotFoundError as exc:
        raise ResourceError(f"file does not exist: {path}") from exc


def _header_tokens(data: bytes, count: int) -> tuple[list[bytes], int]:
    tokens: list[bytes] = []
    pos = 0
    size = len(data)
    while len(tokens) < count:
        while pos < size and data[pos : pos + 1].isspace():
            pos += 1
        if pos < size and data[pos : pos + 1] == b"#":
            while pos < size and data[pos : pos + 1] != b"\n":
                pos += 1
            continue
        start = pos
        while pos < size and not data[pos : pos + 1].isspace():
            pos += 1
        if start == pos:
            raise ResourceError("truncated PPM header")
        tokens.append(data[start:pos])
    if pos >= size:
        raise ResourceError("PPM has no pixel data")
    return tokens, pos + 1


def parse_ppm(data: bytes) -> Image:
    """Parse a binary (P6) PPM image, flipping rows to bottom-first order."""
    (magic, *numbers), offset = _header_tokens(data, 4)
    if magic != b"P6":
        raise ResourceError(f"unsupported PPM type: {magic!r}")
    try:
        width, height, maxval = (int(number) for number in numbers)
    except ValueError as exc:
        raise ResourceError("invalid PPM header values") from exc
    if width <= 0 or height <= 0:
        raise ResourceError("PPM dimensions must be positive")
    if not 0 < maxval < 256:
        raise ResourceError("only 8-bit PPM images are supported")

    row_size = width * 3
    body = data[offset : offset + row_size * height]
    if len(body) < row_size * height:
        raise ResourceError("PPM pixel data is truncated")
    rows = [body[start : start + row_size] for start in range(0, len(body), row_size)]
    return Image(width, height, b"".join(reversed(rows)))


def load_ppm(path: str | Path) -> Image:
    """Read and parse a binary PPM file."""
    try:
        return parse_ppm(Path(path).read_bytes())
    except FileNotFoundError as exc:
        raise ResourceError(f"file does not exist: {path}") from exc