"""Mini README: Flat-map geometry used by every planner.

Exports the immutable ``Point`` value and the pixel/nautical-mile and
degree/radian conversions. The map is a flat plane at a fixed scale, so no
geodesic correction is applied anywhere in the package.
"""

from .units import (
    PX_PER_NM,
    Point,
    degrees_to_radians,
    nm_to_px,
    px_to_nm,
    radians_to_degrees,
)

__all__ = [
    "PX_PER_NM",
    "Point",
    "degrees_to_radians",
    "nm_to_px",
    "px_to_nm",
    "radians_to_degrees",
]
