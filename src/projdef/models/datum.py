"""
Datum sub-object attached to a derived CRS definition.

The datum carries the final ellipsoid constants together with the shift
to WGS84, ready for a datum-shift transform to consume.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Maximum difference in squared eccentricity for two ellipsoids to match
DATUM_ES_TOLERANCE = 5.0e-11


class DatumType(str, Enum):
    """How a datum relates to WGS84."""

    NODATUM = "nodatum"  # no shift possible or wanted
    WGS84 = "wgs84"  # coincident with WGS84
    THREE_PARAM = "3param"  # geocentric translation
    SEVEN_PARAM = "7param"  # full Helmert transform
    GRIDSHIFT = "gridshift"  # grid based shift


@dataclass
class Datum:
    """
    Datum with its ellipsoid and normalised Helmert parameters.

    For SEVEN_PARAM datums the rotations are stored in radians and the
    scale as a multiplier (``1 + ppm / 1e6``).

    Attributes:
        datum_type: Relationship to WGS84
        params: Shift parameters (3 or 7 values, possibly empty)
        a: Semi-major axis
        b: Semi-minor axis
        es: First eccentricity squared
        ep2: Second eccentricity squared
        grid_name: Grid file list for GRIDSHIFT datums
    """

    datum_type: DatumType
    params: List[float] = field(default_factory=list)
    a: Optional[float] = None
    b: Optional[float] = None
    es: Optional[float] = None
    ep2: Optional[float] = None
    grid_name: Optional[str] = None

    def is_same_as(self, other: "Datum") -> bool:
        """
        Check whether two datums are equivalent for transformation purposes.

        Args:
            other: Datum to compare with

        Returns:
            True if no datum shift is needed between the two
        """
        if self.datum_type != other.datum_type:
            return False
        if self.a != other.a or abs((self.es or 0.0) - (other.es or 0.0)) > DATUM_ES_TOLERANCE:
            return False
        if self.datum_type == DatumType.THREE_PARAM:
            return self.params[:3] == other.params[:3]
        if self.datum_type == DatumType.SEVEN_PARAM:
            return self.params[:7] == other.params[:7]
        if self.datum_type == DatumType.GRIDSHIFT:
            return self.grid_name == other.grid_name
        return True

    def __str__(self) -> str:
        """String representation."""
        if self.params:
            return f"Datum({self.datum_type.value}, {','.join(str(p) for p in self.params)})"
        return f"Datum({self.datum_type.value})"
