"""
Data models for parsed Coordinate Reference System (CRS) definitions.

A CRSDefinition is the single parameter model both the PROJ string and the
WKT parsers write into. It is mutated while parsing and deriving, then
treated as read-only once a projection is bound.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional, Union

from projdef.core.errors import UnboundProjectionError
from projdef.models.datum import Datum

if TYPE_CHECKING:
    from projdef.core.crs.registry import Projection


class Authority(str, Enum):
    """Authority that issued a CRS code."""

    NONE = ""
    EPSG = "EPSG"
    IGNF = "IGNF"
    CRS = "CRS"


@dataclass
class CRSDefinition:
    """
    Unified, fully resolved CRS parameter model.

    Angles are stored in radians. Unset parameters are ``None``; numeric
    values that failed to parse are NaN.

    Attributes:
        code: Normalised CRS code (e.g. "EPSG:4326") or WKT name
        authority: Authority parsed from the code prefix
        srs_proj_number: Code without its authority prefix
        title: Free text title
        projection_name: Canonical projection short code (e.g. "longlat")
        units: Unit name
        is_local: True for local systems that need no transform
        geocs_code: Name of the geographic CRS from a WKT GEOGCS node
        ellipsoid_name: Ellipsoid table key or WKT spheroid name
        semi_major: Semi-major axis (a)
        semi_minor: Semi-minor axis (b)
        inverse_flattening: Inverse flattening (rf)
        es: First eccentricity squared
        ep2: Second eccentricity squared
        datum_code: Datum table key
        shift_params: Helmert shift to WGS84 (3 or 7 values)
        grid_name: Grid shift files; "@null" disables the datum
        scale_factor: Projection scale factor (k0)
        axis_order: Three letters from "ewnsud" for x, y and z
        datum: Datum built by the derivation step
        projection: Projection bound by the registry
    """

    # Identity
    code: Optional[str] = None
    authority: Authority = Authority.NONE
    srs_proj_number: Optional[str] = None
    title: Optional[str] = None

    # Classification
    projection_name: Optional[str] = None
    wkt_projection_name: Optional[str] = None
    units: Optional[str] = None
    is_local: bool = False
    geocs_code: Optional[str] = None

    # Ellipsoid
    ellipsoid_name: Optional[str] = None
    ellipsoid_description: Optional[str] = None
    semi_major: Optional[float] = None
    semi_minor: Optional[float] = None
    inverse_flattening: Optional[float] = None
    a2: Optional[float] = None
    b2: Optional[float] = None
    es: Optional[float] = None
    e: Optional[float] = None
    ep2: Optional[float] = None
    is_sphere: bool = False
    ellipsoidal_semi_major: Optional[float] = None

    # Datum
    datum_code: Optional[str] = None
    datum_name: Optional[str] = None
    shift_params: Optional[List[float]] = None
    grid_name: Optional[str] = None

    # Projection parameters
    lat0: Optional[float] = None
    lat1: Optional[float] = None
    lat2: Optional[float] = None
    lat_true_scale: Optional[float] = None
    long0: Optional[float] = None
    long_c: Optional[float] = None
    alpha: Optional[float] = None
    false_easting: float = 0.0
    false_northing: float = 0.0
    scale_factor: Optional[float] = None
    # int, or NaN when the zone could not be parsed
    zone: Optional[Union[int, float]] = None
    is_southern_utm: bool = False
    use_authalic_radius: bool = False
    prime_meridian_offset: Optional[float] = None
    meters_per_unit: Optional[float] = None
    axis_order: Optional[str] = None

    # Runtime binding
    datum: Optional[Datum] = None
    projection: Optional["Projection"] = field(default=None, compare=False, repr=False)

    @property
    def a(self) -> Optional[float]:
        """Semi-major axis."""
        return self.semi_major

    @property
    def b(self) -> Optional[float]:
        """Semi-minor axis."""
        return self.semi_minor

    @property
    def rf(self) -> Optional[float]:
        """Inverse flattening."""
        return self.inverse_flattening

    @property
    def k0(self) -> Optional[float]:
        """Scale factor."""
        return self.scale_factor

    @property
    def is_bound(self) -> bool:
        """True once the registry has bound a projection."""
        return self.projection is not None

    def forward(self, point: Any) -> Any:
        """
        Project a geographic point with the bound projection.

        Raises:
            UnboundProjectionError: If no projection is bound
        """
        if self.projection is None:
            raise UnboundProjectionError(self.code)
        return self.projection.forward(point)

    def inverse(self, point: Any) -> Any:
        """
        Unproject a point with the bound projection.

        Raises:
            UnboundProjectionError: If no projection is bound
        """
        if self.projection is None:
            raise UnboundProjectionError(self.code)
        return self.projection.inverse(point)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.code or 'unnamed'} [{self.projection_name or 'unresolved'}]"
