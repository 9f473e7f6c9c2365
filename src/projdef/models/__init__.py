"""
Data models and schemas.
"""

from .crs import Authority, CRSDefinition
from .datum import Datum, DatumType
from .tables import DatumDefinition, Ellipsoid

__all__ = [
    # CRS
    "Authority",
    "CRSDefinition",
    # Datum
    "Datum",
    "DatumType",
    # Lookup tables
    "DatumDefinition",
    "Ellipsoid",
]
