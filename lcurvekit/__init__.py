"""Building blocks for modelling light curves of close binary stars:
constants, surface elements and limb darkening, data files, stellar radii,
disc eclipses, minimisers and byte swapping."""

__version__ = "0.1.0"
__all__ = [
    "constants",
    "elements",
    "data",
    "radius",
    "disc_eclipse",
    "minimise",
    "simplex",
    "byteswap",
]