"""
Constant derivation for parsed CRS definitions.

Resolves the datum and ellipsoid named by a definition, fills in the
dependent ellipsoid constants (b, es, e, ep2, ...) and builds the Datum
sub-object. Running it twice on the same definition gives identical
results.
"""

import logging
import math
from typing import Optional

from projdef.core.config import settings
from projdef.core.crs.constants import (
    DEFAULT_AXIS,
    NO_DATUM,
    NULL_GRID,
    RA4,
    RA6,
    SEC_TO_RAD,
    SIXTH,
)
from projdef.core.crs.tables import ELLIPSOIDS, get_datum, get_ellipsoid
from projdef.models.crs import CRSDefinition
from projdef.models.datum import Datum, DatumType
from projdef.models.tables import Ellipsoid

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator


def _resolve_ellipsoid(name: Optional[str]) -> Ellipsoid:
    ellipsoid = get_ellipsoid(name)
    if ellipsoid is None:
        if name is not None:
            logger.debug(f"Unknown ellipsoid '{name}', using {settings.default_ellipsoid}")
        ellipsoid = get_ellipsoid(settings.default_ellipsoid) or ELLIPSOIDS["WGS84"]
    return ellipsoid


def _resolve_datum(definition: CRSDefinition) -> None:
    if definition.grid_name == NULL_GRID:
        definition.datum_code = NO_DATUM

    if not definition.datum_code or definition.datum_code == NO_DATUM:
        return

    datum_def = get_datum(definition.datum_code)
    if datum_def is None:
        logger.debug(f"Datum '{definition.datum_code}' not in datum table")
        return

    # A named datum implies its canonical shift, even over explicit towgs84
    definition.shift_params = datum_def.shift_params
    definition.ellipsoid_name = datum_def.ellipse
    definition.datum_name = datum_def.datum_name or definition.datum_code
    if datum_def.nadgrids and not definition.grid_name:
        definition.grid_name = datum_def.nadgrids


def build_datum(definition: CRSDefinition) -> Datum:
    """
    Build the Datum sub-object from a definition's final constants.

    Args:
        definition: Definition whose ellipsoid constants are already derived

    Returns:
        Datum with normalised shift parameters
    """
    params = list(definition.shift_params or [])

    if definition.datum_code == NO_DATUM:
        datum_type = DatumType.NODATUM
        params = []
    elif definition.grid_name and definition.grid_name != NULL_GRID:
        datum_type = DatumType.GRIDSHIFT
        params = []
    else:
        datum_type = DatumType.WGS84
        if any(p != 0 for p in params[:3]):
            datum_type = DatumType.THREE_PARAM
        if len(params) > 3 and any(p != 0 for p in params[3:7]):
            datum_type = DatumType.SEVEN_PARAM
            params[3:6] = [p * SEC_TO_RAD for p in params[3:6]]
            if len(params) > 6:
                # ppm to scale multiplier
                params[6] = params[6] / 1.0e6 + 1.0

    return Datum(
        datum_type=datum_type,
        params=params,
        a=definition.semi_major,
        b=definition.semi_minor,
        es=definition.es,
        ep2=definition.ep2,
        grid_name=definition.grid_name if datum_type == DatumType.GRIDSHIFT else None,
    )


def derive_constants(definition: CRSDefinition) -> CRSDefinition:
    """
    Derive ellipsoid and datum constants in place.

    Steps:
    1. ``+nadgrids=@null`` disables the datum.
    2. A datum found in the datum table sets the shift parameters, the
       ellipsoid name and the datum display name.
    3. Without a semi-major axis the named ellipsoid (default WGS84) is used,
       and its rf overwrites one given without +a (``+rf=0`` alone is no sphere).
    4. The semi-minor axis is computed from the inverse flattening if needed.
    5. Near-equal axes (or rf == 0) make the ellipsoid a sphere.
    6. a2, b2, es and e are computed.
    7. ``+R_A`` replaces a by the authalic sphere radius and forces es = 0.
    8. ep2 is computed; scale factor and axis order get their defaults.
    9. The Datum sub-object is built.

    Args:
        definition: Parsed definition

    Returns:
        The same definition, derived
    """
    _resolve_datum(definition)

    # Undo a previous authalic correction so it is applied only once
    if definition.ellipsoidal_semi_major is not None:
        definition.semi_major = definition.ellipsoidal_semi_major
        definition.ellipsoidal_semi_major = None

    if not definition.semi_major:
        ellipsoid = _resolve_ellipsoid(definition.ellipsoid_name)
        definition.semi_major = ellipsoid.a
        if ellipsoid.b is not None:
            definition.semi_minor = ellipsoid.b
        if ellipsoid.rf is not None:
            definition.inverse_flattening = ellipsoid.rf
        definition.ellipsoid_description = ellipsoid.description

    a = definition.semi_major
    if definition.inverse_flattening and not definition.semi_minor:
        definition.semi_minor = (1.0 - 1.0 / definition.inverse_flattening) * a
    if definition.semi_minor is None:
        # Only a radius was given
        definition.semi_minor = a

    b = definition.semi_minor
    definition.is_sphere = (
        definition.inverse_flattening == 0 or abs(a - b) < settings.sphere_tolerance
    )
    if definition.is_sphere:
        b = definition.semi_minor = a

    a2 = a * a
    b2 = b * b
    es = _ratio(a2 - b2, a2)
    definition.e = math.sqrt(es) if es >= 0 else math.nan

    if definition.use_authalic_radius:
        definition.ellipsoidal_semi_major = a
        a = definition.semi_major = a * (1.0 - es * (SIXTH + es * (RA4 + es * RA6)))
        a2 = a * a
        es = 0.0

    definition.a2 = a2
    definition.b2 = b2
    definition.es = es
    definition.ep2 = _ratio(a2 - b2, b2)

    if not definition.scale_factor:
        definition.scale_factor = 1.0
    if not definition.axis_order:
        definition.axis_order = DEFAULT_AXIS

    definition.datum = build_datum(definition)

    logger.debug(
        f"Derived constants for '{definition.code}': a={a}, b={b}, es={es}",
        extra={"crs_code": definition.code},
    )
    return definition
