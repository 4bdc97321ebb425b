"""Turning the current frame of a model into coloured unit cubes."""

from __future__ import annotations

from dataclasses import dataclass

from voxview.model import Model

FRAME_HOLD = 5
"""Number of draws a frame is held for before the next one is shown."""


@dataclass(frozen=True)
class Cube:
    """A unit cube centred at ``position`` (``y`` vertical) with an RGBA colour."""

    position: tuple[float, float, float]
    color: tuple[int, int, int, int]


def palette_color(value: int) -> tuple[int, int, int, int]:
    """Split a palette entry into its (r, g, b, a) bytes, lowest byte first."""
    r, g, b, a = (value & 0xFFFFFFFF).to_bytes(4, "little")
    return r, g, b, a


def _half(n: int) -> int:
    """Halve ``n``, rounding toward zero."""
    return n // 2 if n >= 0 else -(-n // 2)


def frame_cubes(model: Model) -> list[Cube]:
    """Cubes for every voxel of the model's current frame, centred on the origin."""
    frame = model.current_frame
    bounds = frame.bounds
    hx, hy, hz = _half(bounds.x), _half(bounds.y), _half(bounds.z)
    return [
        Cube(
            position=(float(voxel.x - hx), float(voxel.y - hy), float(voxel.z - hz)),
            color=palette_color(model.palette[voxel.i]),
        )
        for voxel in frame.voxels
    ]


class Animator:
    """Steps a model through its animation frames as it is drawn."""

    def __init__(self) -> None:
        self.rendered_frames = 0

    def advance(self, model: Model) -> None:
        """Count one draw and move to the next frame once the current one is held long enough."""
        if self.rendered_frames < FRAME_HOLD:
            self.rendered_frames += 1
        else:
            self.rendered_frames = 0
            model.cur_frame = (model.cur_frame + 1) % model.frame_count

    def draw(self, model: Model) -> list[Cube]:
        """Return the cubes of the current frame, then advance the animation."""
        cubes = frame_cubes(model)
        self.advance(model)
        return cubes