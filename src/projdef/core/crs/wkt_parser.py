"""
WKT (Well-Known Text) parser.

Walks a WKT1 tree such as::

    PROJCS["NAD83 / UTM zone 17N",
        GEOGCS["NAD83", DATUM["North_American_Datum_1983", SPHEROID["GRS 1980",6378137,298.257222101]], ...],
        PROJECTION["Transverse_Mercator"],
        PARAMETER["central_meridian",-81], ...]

depth-first and writes what it finds into a shared CRSDefinition. Nodes
that do not match the ``KEYWORD[...]`` grammar are skipped silently.

Arguments are split on commas at bracket depth zero only; quoted strings
get no special treatment, so a comma inside a top-level quoted name splits
that name.
"""

import logging
import re
from typing import Callable, Dict, List, Optional

from projdef.core.crs.constants import D2R, DEFAULT_AXIS, NO_DATUM
from projdef.core.crs.tables import lookup_wkt_projection
from projdef.models.crs import CRSDefinition
from projdef.utils.numbers import parse_float

logger = logging.getLogger(__name__)

WKT_NODE = re.compile(r"^(\w+)\[(.*)\]$", re.DOTALL)

COMPASS_LETTERS: Dict[str, str] = {
    "EAST": "e",
    "WEST": "w",
    "NORTH": "n",
    "SOUTH": "s",
    "UP": "u",
    "DOWN": "d",
}

AXIS_POSITIONS: Dict[str, int] = {"x": 0, "y": 1, "z": 2}

# PARAMETER name -> (attribute, multiplier)
PARAMETER_FIELDS: Dict[str, tuple] = {
    "false_easting": ("false_easting", 1.0),
    "false_northing": ("false_northing", 1.0),
    "scale_factor": ("scale_factor", 1.0),
    "central_meridian": ("long0", D2R),
    "latitude_of_origin": ("lat0", D2R),
    "standard_parallel_1": ("lat1", D2R),
    "standard_parallel_2": ("lat2", D2R),
    "longitude_of_center": ("long_c", D2R),
    "azimuth": ("alpha", D2R),
}

NodeHandler = Callable[[CRSDefinition, str, List[str]], None]


def _is_balanced(content: str) -> bool:
    depth = 0
    for char in content:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def split_wkt_arguments(content: str) -> List[str]:
    """
    Split node content into its top-level arguments.

    Commas nested inside brackets stay with their argument.

    Args:
        content: Text between a node's outer brackets

    Returns:
        Stripped argument strings
    """
    arguments: List[str] = []
    depth = 0
    current: List[str] = []
    for char in content:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == "," and depth == 0:
            arguments.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    if current or arguments:
        arguments.append("".join(current).strip())
    return arguments


def _strip_quotes(name: str) -> str:
    if name.startswith('"'):
        name = name[1:]
    if name.endswith('"'):
        name = name[:-1]
    return name


def _next_number(args: List[str]) -> float:
    return parse_float(args.pop(0)) if args else parse_float(None)


def _local_cs(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.projection_name = "identity"
    definition.is_local = True
    definition.code = name


def _geogcs(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.projection_name = "longlat"
    definition.geocs_code = name
    if not definition.code:
        definition.code = name


def _projcs(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.code = name


def _geoccs(definition: CRSDefinition, name: str, args: List[str]) -> None:
    # Geocentric systems carry no fields of their own yet
    pass


def _projection(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.wkt_projection_name = name
    definition.projection_name = lookup_wkt_projection(name)
    if definition.projection_name is None:
        logger.debug(f"No projection code known for WKT projection '{name}'")


def _datum(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.datum_name = name


def _local_datum(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.datum_code = NO_DATUM


def _spheroid(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.ellipsoid_name = name
    definition.semi_major = _next_number(args)
    definition.inverse_flattening = _next_number(args)


def _primem(definition: CRSDefinition, name: str, args: List[str]) -> None:
    # Kept in the node's own angular unit
    definition.prime_meridian_offset = _next_number(args)


def _unit(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.units = name
    definition.meters_per_unit = _next_number(args)


def _parameter(definition: CRSDefinition, name: str, args: List[str]) -> None:
    value = _next_number(args)
    target = PARAMETER_FIELDS.get(name.lower())
    if target is None:
        logger.debug(f"Ignoring WKT parameter '{name}'")
        return
    attr, multiplier = target
    setattr(definition, attr, value * multiplier)


def _towgs84(definition: CRSDefinition, name: str, args: List[str]) -> None:
    definition.shift_params = [parse_float(arg) for arg in args]
    args.clear()


def _axis(definition: CRSDefinition, name: str, args: List[str]) -> None:
    direction = args.pop(0) if args else ""
    letter = COMPASS_LETTERS.get(direction, " ")
    if not definition.axis_order:
        definition.axis_order = DEFAULT_AXIS
    position = AXIS_POSITIONS.get(name.lower())
    if position is None:
        return
    axis = list(definition.axis_order)
    axis[position] = letter
    definition.axis_order = "".join(axis)


NODE_HANDLERS: Dict[str, NodeHandler] = {
    "LOCAL_CS": _local_cs,
    "GEOGCS": _geogcs,
    "PROJCS": _projcs,
    "GEOCCS": _geoccs,
    "PROJECTION": _projection,
    "DATUM": _datum,
    "LOCAL_DATUM": _local_datum,
    "SPHEROID": _spheroid,
    "PRIMEM": _primem,
    "UNIT": _unit,
    "PARAMETER": _parameter,
    "TOWGS84": _towgs84,
    "AXIS": _axis,
}


def parse_wkt(wkt: str, definition: Optional[CRSDefinition] = None) -> CRSDefinition:
    """
    Parse a WKT node and all of its nested nodes into a definition.

    Constants are not derived here; the dispatcher does that once after the
    whole tree has been read.

    Args:
        wkt: WKT text of a single node
        definition: Definition to update; a new one is created if omitted

    Returns:
        The updated definition (unchanged if the text is not a WKT node)
    """
    if definition is None:
        definition = CRSDefinition()

    match = WKT_NODE.match(wkt.strip())
    if not match:
        return definition

    keyword, content = match.groups()
    if not _is_balanced(content):
        logger.debug(f"Unbalanced brackets in WKT node '{keyword}'")
        return definition

    args = split_wkt_arguments(content)
    if keyword.upper() == "TOWGS84":
        name = keyword
    else:
        name = _strip_quotes(args.pop(0)) if args else ""

    handler = NODE_HANDLERS.get(keyword)
    if handler is not None:
        handler(definition, name, args)

    for arg in args:
        parse_wkt(arg, definition)

    return definition
