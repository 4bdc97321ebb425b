"""Command line viewer: pick a model from a resource directory and show it."""

from __future__ import annotations

import argparse
import math
import sys
from os import PathLike
from pathlib import Path

from voxview.camera import Vector, initial_position, orbit
from voxview.model import Model, VoxFormatError, load_model
from voxview.volume import Animator

DEFAULT_RESOURCES = "Resources"
WINDOW_TITLE = "VoxelLoader"
BACKGROUND = (100 / 255, 149 / 255, 237 / 255)
FRAME_INTERVAL_MS = 1000 / 60


def list_resources(directory: str | PathLike[str]) -> list[str]:
    """Names of the entries in ``directory``, sorted."""
    return sorted(entry.name for entry in Path(directory).iterdir())


def _view_angles(position: Vector) -> tuple[float, float]:
    """Elevation and azimuth, in degrees, of a y-up camera position."""
    x, y, z = position
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0:
        return 0.0, 0.0
    elev = math.degrees(math.asin(max(-1.0, min(1.0, y / length))))
    azim = math.degrees(math.atan2(z, x))
    return elev, azim


def _show(model: Model, title: str):
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation

    fig = plt.figure(figsize=(8, 8))
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(title)
    fig.patch.set_facecolor(BACKGROUND)
    ax = fig.add_subplot(projection="3d")
    ax.disable_mouse_rotation()

    bounds = model.frames[0].bounds
    extent = max(abs(bounds.x), abs(bounds.y), abs(bounds.z)) / 2 + 1
    state = {"position": initial_position(model), "last": None}
    animator = Animator()

    def update(_frame):
        ax.cla()
        ax.set_facecolor(BACKGROUND)
        ax.set_axis_off()
        for setter in (ax.set_xlim, ax.set_ylim, ax.set_zlim):
            setter(-extent, extent)
        cubes = animator.draw(model)
        if cubes:
            ax.scatter(
                [c.position[0] for c in cubes],
                [c.position[2] for c in cubes],
                [c.position[1] for c in cubes],
                c=[tuple(v / 255 for v in c.color) for c in cubes],
                marker="s",
                depthshade=False,
            )
        elev, azim = _view_angles(state["position"])
        ax.view_init(elev=elev, azim=azim)
        return ()

    def on_press(event):
        if event.button == 1 and event.x is not None:
            state["last"] = (event.x, event.y)

    def on_release(event):
        if event.button == 1:
            state["last"] = None

    def on_motion(event):
        last = state["last"]
        if last is None or event.x is None:
            return
        dx = event.x - last[0]
        dy = last[1] - event.y  # screen y grows downward, canvas y upward
        state["position"] = orbit(state["position"], dx, dy)
        state["last"] = (event.x, event.y)

    fig.canvas.mpl_connect("button_press_event", on_press)
    fig.canvas.mpl_connect("button_release_event", on_release)
    fig.canvas.mpl_connect("motion_notify_event", on_motion)

    animation = FuncAnimation(
        fig, update, interval=FRAME_INTERVAL_MS, cache_frame_data=False
    )
    plt.show()
    return animation


def main(argv: list[str] | None = None) -> int:
    """List the models in the resource directory, load the chosen one and view it."""
    parser = argparse.ArgumentParser(prog="voxview", description=__doc__)
    parser.add_argument("file", nargs="?", help="name of the model in the resource directory")
    parser.add_argument(
        "--resources", default=DEFAULT_RESOURCES, help="directory holding the models"
    )
    args = parser.parse_args(argv)
    resources = Path(args.resources)

    print("Chose a file to load\n")
    if resources.is_dir():
        for name in list_resources(resources):
            print(f"\t{name}")
    print()

    file_name = args.file
    if file_name is None:
        try:
            file_name = input("Enter file name: ").strip()
        except EOFError:
            return -1

    path = resources / file_name
    if not file_name or not path.exists():
        return -1

    try:
        model = load_model(path)
    except (OSError, VoxFormatError) as exc:
        print(f"Unable to open {path}: {exc}", file=sys.stderr)
        return -1
    if not model.frames:
        print(f"{path} holds no frames", file=sys.stderr)
        return -1

    _show(model, WINDOW_TITLE)
    return 0


if __name__ == "__main__":
    sys.exit(main())