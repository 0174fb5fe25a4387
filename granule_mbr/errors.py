"""Mini README: Exception types raised by the bounding engine.

Structure:
    * MbrError - common base, a ``ValueError`` so generic handlers still work.
    * MalformedGeometryError - input that cannot form a valid geometry.
    * EmptyGeometryError - a bundle with nothing to bound.
    * DegenerateArcError - an arc whose great circle is undefined.
"""

from __future__ import annotations


class MbrError(ValueError):
    """Base class for every failure reported by the engine."""


class MalformedGeometryError(MbrError):
    """Raised when coordinates or bundle structure cannot be interpreted."""


class EmptyGeometryError(MalformedGeometryError):
    """Raised when a bundle contains no usable geometry."""


class DegenerateArcError(MbrError):
    """Raised for identical or antipodal arc endpoints."""
