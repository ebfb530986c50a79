"""
Distance of a 3D point from the origin.

Input policy
------------
Coordinates arrive as query-string text.

* absent or blank  -> ``0.0``
* a finite decimal number (``3``, ``-1.5``, ``.5``, ``2e3``) -> that value
* anything else (``abc``, ``3abc``, ``nan``, ``inf``, ``1e999``) ->
  :class:`InvalidCoordinate`

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
import re
from typing import Optional

from .entities import Point3D

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_CENTS = Decimal("0.01")
# wide enough to quantize any finite float (up to ~1.8e308) to cents
_QUANTIZE_CONTEXT = Context(prec=400)


class InvalidCoordinate(ValueError):
    """Raised when a coordinate is present but is not a finite number."""

    message = "x, y, and z must be numeric"

    def __init__(self, name: str, raw: str):
        super().__init__(f"{name}={raw!r} is not a finite number")
        self.name = name
        self.raw = raw


def parse_coordinate(raw: Optional[str], name: str = "value") -> float:
    """Parse one coordinate from query-string text."""
    if raw is None or not raw.strip():
        return 0.0

    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidCoordinate(name, raw)

    value = float(text)
    if not math.isfinite(value):
        raise InvalidCoordinate(name, raw)
    return value


def point_from_query(
    x: Optional[str], y: Optional[str], z: Optional[str]
) -> Point3D:
    return Point3D(
        x=parse_coordinate(x, "x"),
        y=parse_coordinate(y, "y"),
        z=parse_coordinate(z, "z"),
    )


def distance_from_origin(point: Point3D) -> float:
    """Return ``sqrt(x² + y² + z²)`` rounded to 2 decimal places.

    Ties round up (``0.125 -> 0.13``). The exact binary value of the float
    is rounded, so ``1.005`` (stored as ``1.00499...``) gives ``1.0``.
    Raises :class:`InvalidCoordinate` when the distance itself overflows.
    """
    # hypot scales internally, so 1e200 does not overflow when squared
    norm = math.hypot(point.x, point.y, point.z)
    if not math.isfinite(norm):
        raise InvalidCoordinate("x, y, z", repr((point.x, point.y, point.z)))
    exact = Decimal(norm)
    return float(
        exact.quantize(_CENTS, rounding=ROUND_HALF_UP, context=_QUANTIZE_CONTEXT)
    )
