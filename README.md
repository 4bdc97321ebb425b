# voxview

A small viewer for MagicaVoxel `.vox` models. It reads the frames, bounds,
voxels and palette of a model and shows the model in a 3D matplotlib window.
You can drag with the left mouse button to orbit the camera. Animated models
step through their frames.

## Installing

```
pip install .
```

## Using the viewer

```
voxview [FILE] [--resources DIR]
```

The viewer prints the entries of the resources directory. The default
directory is `Resources`, and `--resources` chooses another one. It then
loads `FILE` from that directory. If you give no `FILE`, it asks you for a
name. The command returns -1 if the name is empty, if the file does not
exist, if the file cannot be read or parsed, or if the model has no frames.
Otherwise it opens a window that shows the model. Hold the left mouse
button and drag to orbit around the model.

## Using the library

```python
from voxview.model import load_model, parse_model, VoxFormatError
from voxview.volume import Animator, frame_cubes, palette_color

model = load_model("castle.vox")
for cube in frame_cubes(model):
    print(cube.position, cube.color)
```

- `voxview.model`
  - `load_model(path)` reads a file, and `parse_model(data)` reads raw bytes.
  - Both raise `VoxFormatError`, a subclass of `ValueError`, when the data is truncated or a `SIZE` chunk has no voxel data after it.
  - A `Model` has `magic`, `version`, `frames`, `frame_count`, `cur_frame`, `palette` and `current_frame`.
  - Each `AnimationFrame` has its `Bounds` and a list of `Voxel`s. Both use `y` as the vertical axis, and a `Voxel` also carries a palette index `i`.
  - The palette holds 256 packed entries. It is `DEFAULT_PALETTE` unless the file has an `RGBA` chunk.
  - Loading steps are reported through the standard `logging` module.
- `voxview.volume`
  - `frame_cubes(model)` turns the current frame into `Cube`s that are centred on the origin.
  - `palette_color(value)` splits a palette entry into `(r, g, b, a)`.
  - `Animator.draw(model)` returns the current cubes and then calls `Animator.advance(model)`, which moves to the next frame after every sixth draw.
- `voxview.camera`
  - It holds the vector helpers that the viewer uses to orbit the camera: `cross`, `rotate_by_axis_angle`, `initial_position` and `orbit`.

## What it does not do

- Only the `SIZE`, `XYZI`, `PACK` and `RGBA` chunks are read. Scene-graph, layer and material chunks are skipped.
- The viewer draws each voxel as a square scatter marker, not as a shaded solid cube.
- Models cannot be edited or saved.

## Running the tests

```
pip install .[test]
pytest
```