"""
Definition dispatcher.

``parse`` is the entry point: it decides between the WKT and PROJ string
parsers, derives the dependent constants and binds the projection.
"""

import logging
from typing import Dict, Optional, Tuple

from projdef.core.crs.constants import WKT_MARKERS
from projdef.core.crs.derive import derive_constants
from projdef.core.crs.proj_parser import parse_proj_string
from projdef.core.crs.registry import projection_registry
from projdef.core.crs.wkt_parser import parse_wkt
from projdef.models.crs import Authority, CRSDefinition

logger = logging.getLogger(__name__)

WGS84_PROJ = "+title=long/lat:WGS84 +proj=longlat +ellps=WGS84 +datum=WGS84 +units=degrees"

# In-memory PROJ definitions used when parse() gets a code without a body
DEFINITIONS: Dict[str, str] = {
    "WGS84": WGS84_PROJ,
    "EPSG:4326": "+title=long/lat:WGS84 +proj=longlat +a=6378137.0 +rf=298.257223563 +no_defs",
    "EPSG:4269": "+title=long/lat:NAD83 +proj=longlat +a=6378137.0 +rf=298.257222101 +no_defs",
    "EPSG:3857": (
        "+title=WGS 84 / Pseudo-Mercator +proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 "
        "+lon_0=0.0 +x_0=0.0 +y_0=0 +k=1.0 +units=m +nadgrids=@null +no_defs"
    ),
}
DEFINITIONS["EPSG:900913"] = DEFINITIONS["EPSG:3857"]
DEFINITIONS["GOOGLE"] = DEFINITIONS["EPSG:3857"]

_AUTHORITY_PREFIXES: Tuple[Tuple[str, Authority, int], ...] = (
    ("EPSG", Authority.EPSG, 5),
    ("IGNF", Authority.IGNF, 5),
    ("CRS", Authority.CRS, 4),
)


def is_wkt(text: str) -> bool:
    """True if the text contains one of the WKT root keywords."""
    return any(marker in text for marker in WKT_MARKERS)


def normalize_code(code: str) -> str:
    """Strip leading colons and uppercase a CRS code."""
    return code.lstrip(":").upper()


def classify_authority(code: str) -> Tuple[Authority, str]:
    """
    Split a normalised code into its authority and authority-local number.

    Args:
        code: Normalised code such as "EPSG:4326"

    Returns:
        Tuple of (authority, number); the number is the whole code when
        no known authority prefix is present
    """
    for prefix, authority, offset in _AUTHORITY_PREFIXES:
        if code.startswith(prefix):
            return authority, code[offset:]
    return Authority.NONE, code


def register_definition(code: str, proj4: str) -> None:
    """
    Store a PROJ string under a code for later ``parse(code)`` calls.

    Args:
        code: CRS code; normalised before storing
        proj4: PROJ definition string
    """
    DEFINITIONS[normalize_code(code)] = proj4


def get_definition(code: str) -> Optional[str]:
    """Return the stored PROJ string for a code, if any."""
    return DEFINITIONS.get(normalize_code(code))


def parse(code: str, proj4: Optional[str] = None) -> CRSDefinition:
    """
    Parse a CRS into a derived, projection-bound definition.

    If ``code`` contains a WKT root keyword it is parsed as WKT. Otherwise
    ``code`` names the CRS and ``proj4`` supplies its PROJ string; without
    ``proj4`` the in-memory definitions are consulted.

    Unknown projections are reported, not raised (unless strict projection
    checking is configured): check ``definition.is_bound`` before using
    forward/inverse.

    Args:
        code: WKT text, or a CRS code like "EPSG:4326"
        proj4: PROJ string for the code

    Returns:
        CRSDefinition
    """
    definition = CRSDefinition()

    if is_wkt(code):
        parse_wkt(code, definition)
        derive_constants(definition)
    else:
        definition.code = normalize_code(code)
        definition.authority, definition.srs_proj_number = classify_authority(definition.code)
        if proj4 is None:
            proj4 = DEFINITIONS.get(definition.code)
            if proj4 is None:
                logger.debug(f"No definition stored for '{definition.code}'")
                proj4 = ""
        parse_proj_string(proj4, definition)

    projection_registry.bind(definition)
    return definition


# Default target CRS for downstream code
WGS84 = parse("WGS84", WGS84_PROJ)
