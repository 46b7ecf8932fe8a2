"""Batched UI geometry: coloured textured triangles, text runs and masked groups."""

from __future__ import annotations

import dataclasses
import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from .atlas import SpritesAtlas, SubTexture
from .layout import Aabb, Vec2
from .rendering import Color, TextRenderOptions, get_pixel_scale

DEFAULT_Z = 0.0
Z_INDEX_SCALE = 1e-5
"""How far one step of ``Geometry.change_z_index`` moves the z index."""

# A large step in the float's bit pattern: the depth buffer loses precision otherwise.
_Z_STEP_BITS = 1 << 16

_NINE_SLICE_MID = Aabb(Vec2(0.3, 0.3), Vec2(0.7, 0.7))
_WHOLE = Aabb(Vec2(0.0, 0.0), Vec2(1.0, 1.0))


def _step_float(value: float) -> float:
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    (result,) = struct.unpack("<f", struct.pack("<I", (bits + _Z_STEP_BITS) & 0xFFFFFFFF))
    return result


@dataclass(frozen=True)
class GeometryTriangleVertex:
    a_z: float
    a_pos: Vec2
    a_color: Color
    a_vt: Vec2


@dataclass
class GeometryText:
    z_index: float
    text: str
    position: Vec2
    options: TextRenderOptions


@dataclass
class MaskedGeometry:
    z_index: float
    clip_rect: Aabb
    geometry: Geometry


@dataclass
class Geometry:
    triangles: list[GeometryTriangleVertex] = field(default_factory=list)
    text: list[GeometryText] = field(default_factory=list)
    masked: list[MaskedGeometry] = field(default_factory=list)

    def merge(self, other: Geometry) -> None:
        self.triangles.extend(other.triangles)
        self.text.extend(other.text)
        self.masked.extend(other.masked)

    def change_z_index(self, delta: int) -> None:
        """Move everything towards the viewer by ``delta`` steps (away if negative)."""
        shift = -float(delta) * Z_INDEX_SCALE
        for masked in self.masked:
            masked.z_index += shift
        self.triangles = [
            dataclasses.replace(v, a_z=v.a_z + shift) for v in self.triangles
        ]
        for text in self.text:
            text.z_index += shift


def _quad_triangles(corners: Sequence) -> list:
    a, b, c, d = corners
    return [a, b, c, a, c, d]


class GeometryContext:
    """Builds geometry for one frame, handing out increasing z indices."""

    def __init__(self, atlas: Optional[SpritesAtlas] = None) -> None:
        self._white_uv = (
            atlas.get("white").uv.bottom_left() if atlas is not None else Vec2(0.0, 0.0)
        )
        self.framebuffer_size: tuple[int, int] = (1, 1)
        self.pixel_scale = 1.0
        self._z_index = DEFAULT_Z

    def update(self, framebuffer_size: Sequence[int]) -> None:
        width, height = framebuffer_size
        self.framebuffer_size = (int(width), int(height))
        self.pixel_scale = get_pixel_scale(self.framebuffer_size)
        self._z_index = DEFAULT_Z

    def _next_z_index(self) -> float:
        current = self._z_index
        self._z_index = _step_float(current)
        return current

    def masked(self, clip_rect: Aabb, geometry: Geometry) -> Geometry:
        return Geometry(masked=[MaskedGeometry(self._next_z_index(), clip_rect, geometry)])

    def text(self, text: str, position: Vec2, options: TextRenderOptions) -> Geometry:
        return Geometry(text=[GeometryText(self._next_z_index(), text, position, options)])

    def nine_slice(self, pos: Aabb, color: Color, texture: SubTexture) -> Geometry:
        """Stretch a texture over ``pos`` keeping its borders at pixel scale."""
        z_index = self._next_z_index()
        uv = texture.uv
        mid = _NINE_SLICE_MID
        whole = _WHOLE

        size = mid.min * uv.size() * Vec2(*texture.atlas_size) * self.pixel_scale
        size = Vec2(min(size.x, pos.width()), min(size.y, pos.height()))

        slices = [
            Aabb.from_corners(mid.top_left(), whole.top_left()),
            Aabb.from_corners(mid.top_left(), Vec2(mid.max.x, whole.max.y)),
            Aabb.from_corners(mid.top_right(), whole.top_right()),
            Aabb.from_corners(mid.top_right(), Vec2(whole.max.x, mid.min.y)),
            Aabb.from_corners(mid.bottom_right(), whole.bottom_right()),
            Aabb.from_corners(mid.bottom_right(), Vec2(mid.min.x, whole.min.y)),
            Aabb.from_corners(mid.bottom_left(), whole.bottom_left()),
            Aabb.from_corners(mid.bottom_left(), Vec2(whole.min.x, mid.max.y)),
            mid,
        ]

        def place(coord: float, lo: float, hi: float, extent: float, inset: float,
                  mid_lo: float, mid_hi: float) -> float:
            if coord == mid_lo:
                return lo + inset
            if coord == mid_hi:
                return hi - inset
            return lo + extent * coord

        def vertex(a_vt: Vec2) -> GeometryTriangleVertex:
            a_pos = Vec2(
                place(a_vt.x, pos.min.x, pos.max.x, pos.width(), size.x, mid.min.x, mid.max.x),
                place(a_vt.y, pos.min.y, pos.max.y, pos.height(), size.y, mid.min.y, mid.max.y),
            )
            return GeometryTriangleVertex(z_index, a_pos, color, uv.align_pos(a_vt))

        triangles = [
            v
            for piece in slices
            for v in _quad_triangles([vertex(corner) for corner in piece.corners()])
        ]
        return Geometry(triangles=triangles)

    def quad(self, position: Aabb, color: Color) -> Geometry:
        """A solid quad, sampled from the atlas's white texture."""
        z_index = self._next_z_index()
        return Geometry(
            triangles=[
                GeometryTriangleVertex(z_index, corner, color, self._white_uv)
                for corner in _quad_triangles(position.corners())
            ]
        )

    def texture(self, position: Aabb, color: Color, texture: SubTexture) -> Geometry:
        """A texture stretched over ``position``."""
        z_index = self._next_z_index()
        unit = (Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0))
        corners = list(zip(position.corners(), unit))
        return Geometry(
            triangles=[
                GeometryTriangleVertex(z_index, a_pos, color, texture.uv.align_pos(a_vt))
                for a_pos, a_vt in _quad_triangles(corners)
            ]
        )