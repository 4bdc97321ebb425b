[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxview"
version = "0.1.0"
description = "Load MagicaVoxel .vox models and view their animation frames in 3D"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["voxel", "magicavoxel", "vox", "viewer", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxview = "voxview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["voxview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
