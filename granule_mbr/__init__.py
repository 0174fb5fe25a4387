"""Mini README: Core package initialiser for the granule bounding engine.

Computes the minimum bounding rectangle of granule geometry on the sphere.
The public entry points, error types and logger factory are re-exported here
so callers never need to know the module layout.
"""

from .errors import DegenerateArcError, EmptyGeometryError, MalformedGeometryError, MbrError
from .logging_utils import get_logger
from .mbr import compute_granule_mbr, compute_mbr, compute_umm_mbr

__all__ = [
    "DegenerateArcError",
    "EmptyGeometryError",
    "MalformedGeometryError",
    "MbrError",
    "compute_granule_mbr",
    "compute_mbr",
    "compute_umm_mbr",
    "get_logger",
]
