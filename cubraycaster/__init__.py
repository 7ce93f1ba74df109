"""First-person raycasting maze explorer: .cub scene parsing, XPM textures,
ray casting, a minimap and a pygame game window."""

__version__ = "0.1.0"