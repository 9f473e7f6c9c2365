"""
PROJ string parser.

Parses "+key=value" definitions such as
``+proj=utm +zone=33 +ellps=WGS84 +units=m`` into a CRSDefinition. Angles
are converted to radians while parsing. Unknown keys are ignored and values
that are not numbers become NaN, so a partly broken string still yields
every field that could be read.
"""

import logging
import re
from typing import Callable, Dict, Optional

from projdef.core.crs.constants import D2R, LEGAL_AXIS_LETTERS
from projdef.core.crs.derive import derive_constants
from projdef.core.crs.tables import get_prime_meridian
from projdef.models.crs import CRSDefinition
from projdef.utils.numbers import parse_float, parse_int

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")

ClauseHandler = Callable[[CRSDefinition, Optional[str]], None]


def _compact(value: Optional[str]) -> Optional[str]:
    """Remove all whitespace from a value."""
    if value is None:
        return None
    return _WHITESPACE.sub("", value)


def _radians(value: Optional[str]) -> float:
    return parse_float(value) * D2R


def _set_prime_meridian(definition: CRSDefinition, value: Optional[str]) -> None:
    name = _compact(value)
    offset = get_prime_meridian(name) if name is not None else None
    if offset is None:
        offset = parse_float(name)
    definition.prime_meridian_offset = offset * D2R


def _set_axis(definition: CRSDefinition, value: Optional[str]) -> None:
    axis = _compact(value)
    if axis and len(axis) == 3 and all(letter in LEGAL_AXIS_LETTERS for letter in axis):
        definition.axis_order = axis
    else:
        logger.debug(f"Ignoring invalid axis '{value}'")


def _set_shift_params(definition: CRSDefinition, value: Optional[str]) -> None:
    if value is None:
        definition.shift_params = None
        return
    definition.shift_params = [parse_float(token) for token in value.split(",")]


def _ignore(definition: CRSDefinition, value: Optional[str]) -> None:
    pass


def _setter(attr: str, convert: Callable[[Optional[str]], object]) -> ClauseHandler:
    def handler(definition: CRSDefinition, value: Optional[str]) -> None:
        setattr(definition, attr, convert(value))

    return handler


def _flag(attr: str) -> ClauseHandler:
    def handler(definition: CRSDefinition, value: Optional[str]) -> None:
        setattr(definition, attr, True)

    return handler


def _raw(value: Optional[str]) -> Optional[str]:
    return value


# Recognised keys; this table is the PROJ wire format
CLAUSE_HANDLERS: Dict[str, ClauseHandler] = {
    "title": _setter("title", _raw),
    "proj": _setter("projection_name", _compact),
    "units": _setter("units", _compact),
    "datum": _setter("datum_code", _compact),
    "nadgrids": _setter("grid_name", _compact),
    "ellps": _setter("ellipsoid_name", _compact),
    "a": _setter("semi_major", parse_float),
    "b": _setter("semi_minor", parse_float),
    "rf": _setter("inverse_flattening", parse_float),
    "lat_0": _setter("lat0", _radians),
    "lat_1": _setter("lat1", _radians),
    "lat_2": _setter("lat2", _radians),
    "lat_ts": _setter("lat_true_scale", _radians),
    "lon_0": _setter("long0", _radians),
    "alpha": _setter("alpha", _radians),
    "lonc": _setter("long_c", _radians),
    "x_0": _setter("false_easting", parse_float),
    "y_0": _setter("false_northing", parse_float),
    "k_0": _setter("scale_factor", parse_float),
    "k": _setter("scale_factor", parse_float),
    "r_a": _flag("use_authalic_radius"),
    "zone": _setter("zone", parse_int),
    "south": _flag("is_southern_utm"),
    "towgs84": _set_shift_params,
    "to_meter": _setter("meters_per_unit", parse_float),
    "from_greenwich": _setter("prime_meridian_offset", _radians),
    "pm": _set_prime_meridian,
    "axis": _set_axis,
    "no_defs": _ignore,
}


def apply_proj_clauses(text: str, definition: CRSDefinition) -> CRSDefinition:
    """
    Write every recognised clause of a PROJ string into a definition.

    No derivation is performed; see parse_proj_string for the full step.

    Args:
        text: PROJ definition string
        definition: Definition to update in place

    Returns:
        The same definition
    """
    for clause in text.split("+"):
        key, sep, value = clause.partition("=")
        key = _WHITESPACE.sub("", key.lower())
        if not key:
            continue

        handler = CLAUSE_HANDLERS.get(key)
        if handler is None:
            logger.debug(f"Ignoring unrecognized PROJ parameter '{key}'")
            continue
        handler(definition, value.strip() if sep else None)

    return definition


def parse_proj_string(text: str, definition: Optional[CRSDefinition] = None) -> CRSDefinition:
    """
    Parse a PROJ string and derive the dependent constants.

    Args:
        text: PROJ definition string
        definition: Definition to update; a new one is created if omitted

    Returns:
        The derived definition
    """
    if definition is None:
        definition = CRSDefinition()

    apply_proj_clauses(text, definition)
    return derive_constants(definition)
