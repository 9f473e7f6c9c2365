"""
Numeric constants shared by the parsers and the derivation engine.
"""

import math

# Angle conversion
D2R = math.pi / 180.0
SEC_TO_RAD = 4.84813681109535993589914102357e-6

# Default tolerance for the sphere test (|a - b| < EPSLN)
EPSLN = 1.0e-10

# Series coefficients for the authalic sphere radius
SIXTH = 0.1666666666666666667  # 1/6
RA4 = 0.04722222222222222222  # 17/360
RA6 = 0.02215608465608465608  # 67/3024

DEFAULT_AXIS = "enu"
LEGAL_AXIS_LETTERS = "ewnsud"

# Grid name that disables any datum shift
NULL_GRID = "@null"
NO_DATUM = "none"

# Markers that identify a WKT definition
WKT_MARKERS = ("GEOGCS", "GEOCCS", "PROJCS", "LOCAL_CS")
