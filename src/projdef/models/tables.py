"""
Pydantic models for lookup-table entries.

Ellipsoid and datum tables are static data loaded once at import time;
these models validate each entry and keep it immutable afterwards.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Ellipsoid(BaseModel):
    """
    Reference ellipsoid.

    Either the semi-minor axis ``b`` or the inverse flattening ``rf``
    is given, never required both.

    Attributes:
        a: Semi-major axis in meters
        b: Semi-minor axis in meters
        rf: Inverse flattening
        description: Human-readable ellipsoid name
    """

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., gt=0, description="Semi-major axis (m)")
    b: Optional[float] = Field(None, gt=0, description="Semi-minor axis (m)")
    rf: Optional[float] = Field(None, ge=0, description="Inverse flattening")
    description: str = Field(..., description="Ellipsoid name")

    @model_validator(mode="after")
    def check_shape(self) -> "Ellipsoid":
        """Require b or rf so the shape is fully determined."""
        if self.b is None and self.rf is None:
            raise ValueError(f"Ellipsoid '{self.description}' needs either b or rf")
        return self


class DatumDefinition(BaseModel):
    """
    Named geodetic datum.

    Attributes:
        towgs84: Comma separated Helmert parameters to WGS84 (3 or 7 values)
        ellipse: Key of the ellipsoid in the ellipsoid table
        datum_name: Display name
        nadgrids: Comma separated grid files for grid based shifts
    """

    model_config = ConfigDict(frozen=True)

    towgs84: Optional[str] = None
    ellipse: str
    datum_name: Optional[str] = None
    nadgrids: Optional[str] = None

    @property
    def shift_params(self) -> Optional[List[float]]:
        """Helmert parameters as floats, or None if the datum has none."""
        if not self.towgs84:
            return None
        return [float(token) for token in self.towgs84.split(",")]
