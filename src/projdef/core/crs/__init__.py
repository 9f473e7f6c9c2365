"""
Coordinate Reference System (CRS) definition parsing.

This module provides:
- PROJ string and WKT parsers writing into one CRSDefinition model
- Derivation of dependent ellipsoid and datum constants
- A registry binding projection implementations by name
- The ``parse`` dispatcher and the built-in WGS84 definition
"""

from projdef.core.crs.definition import (
    DEFINITIONS,
    WGS84,
    classify_authority,
    get_definition,
    is_wkt,
    normalize_code,
    parse,
    register_definition,
)
from projdef.core.crs.derive import build_datum, derive_constants
from projdef.core.crs.proj_parser import apply_proj_clauses, parse_proj_string
from projdef.core.crs.registry import (
    LongLat,
    Projection,
    ProjectionRegistry,
    projection_registry,
    register_projection,
)
from projdef.core.crs.tables import (
    DATUMS,
    ELLIPSOIDS,
    PRIME_MERIDIANS,
    WKT_PROJECTIONS,
    get_datum,
    get_ellipsoid,
    get_prime_meridian,
    lookup_wkt_projection,
)
from projdef.core.crs.wkt_parser import parse_wkt, split_wkt_arguments

__all__ = [
    # Dispatcher
    "DEFINITIONS",
    "WGS84",
    "classify_authority",
    "get_definition",
    "is_wkt",
    "normalize_code",
    "parse",
    "register_definition",
    # Derivation
    "build_datum",
    "derive_constants",
    # PROJ strings
    "apply_proj_clauses",
    "parse_proj_string",
    # WKT
    "parse_wkt",
    "split_wkt_arguments",
    # Registry
    "LongLat",
    "Projection",
    "ProjectionRegistry",
    "projection_registry",
    "register_projection",
    # Lookup tables
    "DATUMS",
    "ELLIPSOIDS",
    "PRIME_MERIDIANS",
    "WKT_PROJECTIONS",
    "get_datum",
    "get_ellipsoid",
    "get_prime_meridian",
    "lookup_wkt_projection",
]
