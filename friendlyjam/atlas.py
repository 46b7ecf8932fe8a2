"""Packing textures side by side into one atlas and naming its sub-textures."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .layout import Aabb, Vec2

AtlasField = Union[str, tuple]

SPRITE_FIELDS: tuple[AtlasField, ...] = (
    "white",
    "button_background",
    "play_dispatcher",
    "play_solver",
)


@dataclass(frozen=True)
class SubTexture:
    """A region of an atlas texture, given in normalised coordinates."""

    atlas_size: tuple[int, int]
    uv: Aabb

    def pixel_size(self) -> tuple[int, int]:
        width = self.atlas_size[0] * self.uv.width()
        height = self.atlas_size[1] * self.uv.height()
        return int(math.floor(width + 0.5)), int(math.floor(height + 0.5))


class TextureAtlas:
    """Textures laid out left to right with one pixel of spacing between them."""

    def __init__(self, texture_sizes: Iterable[tuple[int, int]]) -> None:
        sizes = [(int(w), int(h)) for w, h in texture_sizes]
        if any(w < 0 or h < 0 for w, h in sizes):
            raise ValueError("texture sizes must not be negative")
        width = sum(w + 1 for w, _ in sizes)
        height = max((h for _, h in sizes), default=0)
        if sizes and height == 0:
            raise ValueError("at least one texture must have a positive height")

        self.texture_sizes = sizes
        self.size = (width, height)
        self.offsets: list[int] = []
        self._uvs: list[Aabb] = []
        x = 0
        for w, h in sizes:
            self.offsets.append(x)
            self._uvs.append(
                Aabb.point(Vec2(x / width, 0.0)).extend_positive(Vec2(w / width, h / height))
            )
            x += w + 1

    def __len__(self) -> int:
        return len(self._uvs)

    def get(self, index: int) -> SubTexture:
        if not 0 <= index < len(self._uvs):
            raise IndexError(f"atlas has no texture {index}")
        uv = self._uvs[index]
        return SubTexture(self.size, Aabb(uv.min, uv.max))


def flatten_atlas_fields(fields: Iterable[AtlasField]) -> list[tuple[str, ...]]:
    """Expand names and ``(folder, children)`` pairs into paths, in order."""
    paths: list[tuple[str, ...]] = []
    for item in fields:
        if isinstance(item, str):
            name, children = item, None
        else:
            name, children = item
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"invalid atlas field name: {name!r}")
        if children is None:
            paths.append((name,))
        else:
            paths.extend((name, *inner) for inner in flatten_atlas_fields(children))
    return paths


def atlas_texture_paths(
    root: str | Path, fields: Iterable[AtlasField] = SPRITE_FIELDS
) -> list[Path]:
    """The image file for each atlas entry, in atlas order."""
    root = Path(root)
    return [root.joinpath(*parts).with_suffix(".png") for parts in flatten_atlas_fields(fields)]


class SpritesAtlas:
    """An atlas whose entries are looked up by their underscore-joined path."""

    def __init__(
        self,
        texture_sizes: Sequence[tuple[int, int]],
        fields: Iterable[AtlasField] = SPRITE_FIELDS,
    ) -> None:
        self.paths = flatten_atlas_fields(fields)
        self.names = ["_".join(parts) for parts in self.paths]
        if len(set(self.names)) != len(self.names):
            raise ValueError("atlas entry names must be unique")
        if len(texture_sizes) != len(self.names):
            raise ValueError(
                f"expected {len(self.names)} textures, got {len(texture_sizes)}"
            )
        self.atlas = TextureAtlas(texture_sizes)
        self._index = {name: i for i, name in enumerate(self.names)}

    def get(self, name: str) -> SubTexture:
        try:
            index = self._index[name]
        except KeyError:
            raise KeyError(f"atlas has no entry named {name!r}") from None
        return self.atlas.get(index)