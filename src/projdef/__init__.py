"""
projdef - CRS definition parsing for PROJ strings and WKT.

Turns a PROJ "+key=value" string or a WKT tree into a fully derived
coordinate reference system definition with its projection bound.
"""

__version__ = "0.1.0"

from projdef.core.crs import WGS84, parse, register_projection
from projdef.core.crs import projection_registry as registry
from projdef.core.crs.registry import Projection
from projdef.models.crs import Authority, CRSDefinition

__all__ = [
    "Authority",
    "CRSDefinition",
    "Projection",
    "WGS84",
    "parse",
    "register_projection",
    "registry",
]
