"""Load MagicaVoxel .vox models and view their animation frames in 3D."""

__version__ = "0.1.0"
__all__ = ["model", "volume", "camera", "cli"]