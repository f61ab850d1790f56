"""Height-map grids, a 2D wave simulation, XPM decoding and X11 colour names."""

__version__ = "0.1.0"
__all__ = ["colors", "visual", "textscan", "image", "xpm", "fdfmap", "wave"]