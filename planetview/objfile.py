"""Reader for triangulated Wavefront OBJ meshes with positions, UVs and normals."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

_FACE_VERTEX = re.compile(r"([+-]?\d+)/([+-]?\d+)/([+-]?\d+)")


class ObjFormatError(ValueError):
    """Raised when an OBJ file uses features this reader does not handle."""


def _empty(columns: int) -> np.ndarray:
    return np.zeros((0, columns), dtype=np.float32)


@dataclass
class Mesh:
    """Unindexed triangle data: one row per triangle corner, three corners per face."""

    vertices: np.ndarray = field(default_factory=lambda: _empty(3))
    uvs: np.ndarray = field(default_factory=lambda: _empty(2))
    normals: np.ndarray = field(default_factory=lambda: _empty(3))

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        """Number of triangles in the mesh."""
        return len(self.vertices) // 3


def _floats(args: Sequence[str], count: int, lineno: int, kind: str) -> list[float]:
    if len(args) < count:
        raise ObjFormatError(f"line {lineno}: '{kind}' needs {count} values, got {len(args)}")
    try:
        return [float(a) for a in args[:count]]
    except ValueError as exc:
        raise ObjFormatError(f"line {lineno}: bad number in '{kind}' record") from exc


def _face(args: Sequence[str], lineno: int) -> list[tuple[int, int, int]]:
    corners = []
    for token in args[:3]:
        match = _FACE_VERTEX.fullmatch(token)
        if match is None:
            break
        corners.append(tuple(int(g) for g in match.groups()))
    if len(corners) != 3:
        raise ObjFormatError(
            f"line {lineno}: file can't be read by this simple parser; "
            "export with triangulated faces, UVs and normals"
        )
    return corners


def _gather(table: list[list[float]], indices: Iterable[int], columns: int, kind: str) -> np.ndarray:
    rows = []
    for index in indices:
        if not 1 <= index <= len(table):
            raise ObjFormatError(f"{kind} index {index} out of range (1..{len(table)})")
        rows.append(table[index - 1])
    if not rows:
        return _empty(columns)
    return np.array(rows, dtype=np.float32)


def parse_obj(text: str) -> Mesh:
    """Parse OBJ text into a :class:`Mesh`, expanding each face corner into its own vertex."""
    positions: list[list[float]] = []
    tex_coords: list[list[float]] = []
    normals: list[list[float]] = []
    corners: list[tuple[int, int, int]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        header, args = fields[0], fields[1:]
        if header == "v":
            positions.append(_floats(args, 3, lineno, header))
        elif header == "vt":
            tex_coords.append(_floats(args, 2, lineno, header))
        elif header == "vn":
            normals.append(_floats(args, 3, lineno, header))
        elif header == "f":
            corners.extend(_face(args, lineno))

    return Mesh(
        vertices=_gather(positions, (c[0] for c in corners), 3, "vertex"),
        uvs=_gather(tex_coords, (c[1] for c in corners), 2, "uv"),
        normals=_gather(normals, (c[2] for c in corners), 3, "normal"),
    )


def load_obj(path) -> Mesh:
    """Read and parse an OBJ file from ``path``."""
    return parse_obj(Path(path).read_text())