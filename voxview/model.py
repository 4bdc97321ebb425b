"""Loading of MagicaVoxel ``.vox`` models into frames of voxels."""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

logger = logging.getLogger(__name__)

SIZE_CHUNK = b"SIZE"
VOXEL_CHUNK = b"XYZI"
PACK_CHUNK = b"PACK"
PALETTE_CHUNK = b"RGBA"

_HEADER_SIZE = 8
_CHUNK_HEADER_SIZE = 12
_PALETTE_LENGTH = 256
_OPAQUE = 0xFF000000


def _build_default_palette() -> tuple[int, ...]:
    """Return the standard ``.vox`` palette as packed ABGR words."""
    cube_levels = range(0xFF, -1, -0x33)
    cube = [
        _OPAQUE | (blue << 16) | (green << 8) | red
        for red in cube_levels
        for green in cube_levels
        for blue in cube_levels
    ]
    # The all-black corner of the colour cube is not part of the palette.
    cube.pop()

    ramp = [level for level in range(0xEE, 0, -0x11) if level % 0x33]
    reds = [_OPAQUE | level for level in ramp]
    greens = [_OPAQUE | (level << 8) for level in ramp]
    blues = [_OPAQUE | (level << 16) for level in ramp]
    greys = [_OPAQUE | (level * 0x010101) for level in ramp]

    palette = (0, *cube, *reds, *greens, *blues, *greys)
    assert len(palette) == _PALETTE_LENGTH
    return palette


DEFAULT_PALETTE: tuple[int, ...] = _build_default_palette()


class VoxFormatError(ValueError):
    """Raised when model data is truncated or malformed."""


@dataclass(frozen=True)
class Bounds:
    """Size of a frame, with ``y`` as the vertical axis."""

    x: int
    y: int
    z: int

    def __str__(self) -> str:
        return f"({self.x & 0xFFFFFFFF}, {self.y & 0xFFFFFFFF}, {self.z & 0xFFFFFFFF})"


@dataclass(frozen=True)
class Voxel:
    """One voxel position, with ``y`` vertical, and its palette index."""

    x: int
    y: int
    z: int
    i: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z}, {self.i})"


@dataclass
class AnimationFrame:
    """The bounds and voxels of one animation frame."""

    bounds: Bounds
    voxels: list[Voxel] = field(default_factory=list)


@dataclass
class Model:
    """A loaded voxel model: its frames, palette and animation state."""

    magic: bytes
    version: int
    frames: list[AnimationFrame] = field(default_factory=list)
    frame_count: int = 1
    cur_frame: int = 0
    palette: tuple[int, ...] = DEFAULT_PALETTE

    @property
    def current_frame(self) -> AnimationFrame:
        """The frame selected by ``cur_frame``."""
        return self.frames[self.cur_frame]


@dataclass(frozen=True)
class _Chunk:
    ident: bytes
    offset: int
    content_size: int
    children_size: int

    @property
    def content_offset(self) -> int:
        return self.offset + _CHUNK_HEADER_SIZE

    @property
    def end(self) -> int:
        return self.offset + _CHUNK_HEADER_SIZE + self.content_size + self.children_size


def _unpack(fmt: str, data: bytes, offset: int) -> tuple:
    try:
        return struct.unpack_from(fmt, data, offset)
    except struct.error as exc:
        raise VoxFormatError(f"data ends before offset {offset}") from exc


def _read_chunk(data: bytes, offset: int) -> _Chunk:
    ident, content, children = _unpack("<4sII", data, offset)
    return _Chunk(bytes(ident), offset, content, children)


def _read_voxels(data: bytes, chunk: _Chunk) -> Iterator[Voxel]:
    (count,) = _unpack("<I", data, chunk.content_offset)
    start = chunk.content_offset + 4
    raw = data[start:start + 4 * count]
    if len(raw) < 4 * count:
        raise VoxFormatError(f"voxel data holds fewer than {count} voxels")
    for x, z, y, index in struct.iter_unpack("4B", raw):
        yield Voxel(x=x, y=y, z=z, i=index)


def _read_frame(data: bytes, size: _Chunk, voxels: _Chunk) -> AnimationFrame:
    logger.info("New frame")
    if voxels.ident != VOXEL_CHUNK:
        raise VoxFormatError(
            f"{SIZE_CHUNK!r} chunk at {size.offset} is not followed by voxel data"
        )
    x, z, y = _unpack("<3i", data, size.content_offset)
    return AnimationFrame(bounds=Bounds(x=x, y=y, z=z), voxels=list(_read_voxels(data, voxels)))


def parse_model(data: bytes) -> Model:
    """Build a model from the bytes of a ``.vox`` file."""
    data = bytes(data)
    magic, version = _unpack("<4sI", data, 0)
    model = Model(magic=bytes(magic), version=version)
    logger.info("%sfile found: version %d", model.magic.decode("latin-1"), version)

    main = _read_chunk(data, _HEADER_SIZE)
    offset = main.content_offset
    while offset < main.end:
        chunk = _read_chunk(data, offset)
        if chunk.ident == PACK_CHUNK:
            (model.frame_count,) = _unpack("<I", data, chunk.content_offset)
        elif chunk.ident == SIZE_CHUNK:
            voxels = _read_chunk(data, chunk.end)
            model.frames.append(_read_frame(data, chunk, voxels))
            offset = voxels.end
            continue
        elif chunk.ident == PALETTE_CHUNK:
            logger.info("Palette found")
            model.palette = _unpack(f"<{_PALETTE_LENGTH}I", data, chunk.content_offset)
        offset = chunk.end
    logger.info("Done processing chunks")
    return model


def load_model(path: str | PathLike[str]) -> Model:
    """Read and parse the ``.vox`` file at ``path``."""
    logger.info('Loading "%s"', path)
    model = parse_model(Path(path).read_bytes())
    logger.info("Load successful")
    return model