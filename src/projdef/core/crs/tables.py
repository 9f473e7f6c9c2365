"""
Process-wide read-only lookup tables.

Ellipsoids, datums, prime meridians and WKT projection names, keyed the
same way PROJ.4 keys them so PROJ strings resolve without translation.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from projdef.models.tables import DatumDefinition, Ellipsoid

ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    "MERIT": Ellipsoid(a=6378137.0, rf=298.257, description="MERIT 1983"),
    "SGS85": Ellipsoid(a=6378136.0, rf=298.257, description="Soviet Geodetic System 85"),
    "GRS80": Ellipsoid(a=6378137.0, rf=298.257222101, description="GRS 1980(IUGG, 1980)"),
    "IAU76": Ellipsoid(a=6378140.0, rf=298.257, description="IAU 1976"),
    "airy": Ellipsoid(a=6377563.396, b=6356256.910, description="Airy 1830"),
    "APL4.9": Ellipsoid(a=6378137.0, rf=298.25, description="Appl. Physics. 1965"),
    "NWL9D": Ellipsoid(a=6378145.0, rf=298.25, description="Naval Weapons Lab., 1965"),
    "mod_airy": Ellipsoid(a=6377340.189, b=6356034.446, description="Modified Airy"),
    "andrae": Ellipsoid(a=6377104.43, rf=300.0, description="Andrae 1876 (Den., Iclnd.)"),
    "aust_SA": Ellipsoid(a=6378160.0, rf=298.25, description="Australian Natl & S. Amer. 1969"),
    "GRS67": Ellipsoid(a=6378160.0, rf=298.2471674270, description="GRS 67(IUGG 1967)"),
    "bessel": Ellipsoid(a=6377397.155, rf=299.1528128, description="Bessel 1841"),
    "bess_nam": Ellipsoid(a=6377483.865, rf=299.1528128, description="Bessel 1841 (Namibia)"),
    "clrk66": Ellipsoid(a=6378206.4, b=6356583.8, description="Clarke 1866"),
    "clrk80": Ellipsoid(a=6378249.145, rf=293.4663, description="Clarke 1880 mod."),
    "clrk58": Ellipsoid(a=6378293.645208759, rf=294.2606763692654, description="Clarke 1858"),
    "CPM": Ellipsoid(a=6375738.7, rf=334.29, description="Comm. des Poids et Mesures 1799"),
    "delmbr": Ellipsoid(a=6376428.0, rf=311.5, description="Delambre 1810 (Belgium)"),
    "engelis": Ellipsoid(a=6378136.05, rf=298.2566, description="Engelis 1985"),
    "evrst30": Ellipsoid(a=6377276.345, rf=300.8017, description="Everest 1830"),
    "evrst48": Ellipsoid(a=6377304.063, rf=300.8017, description="Everest 1948"),
    "evrst56": Ellipsoid(a=6377301.243, rf=300.8017, description="Everest 1956"),
    "evrst69": Ellipsoid(a=6377295.664, rf=300.8017, description="Everest 1969"),
    "evrstSS": Ellipsoid(a=6377298.556, rf=300.8017, description="Everest (Sabah & Sarawak)"),
    "fschr60": Ellipsoid(a=6378166.0, rf=298.3, description="Fischer (Mercury Datum) 1960"),
    "fschr60m": Ellipsoid(a=6378155.0, rf=298.3, description="Fischer 1960"),
    "fschr68": Ellipsoid(a=6378150.0, rf=298.3, description="Fischer 1968"),
    "helmert": Ellipsoid(a=6378200.0, rf=298.3, description="Helmert 1906"),
    "hough": Ellipsoid(a=6378270.0, rf=297.0, description="Hough"),
    "intl": Ellipsoid(a=6378388.0, rf=297.0, description="International 1909 (Hayford)"),
    "kaula": Ellipsoid(a=6378163.0, rf=298.24, description="Kaula 1961"),
    "lerch": Ellipsoid(a=6378139.0, rf=298.257, description="Lerch 1979"),
    "mprts": Ellipsoid(a=6397300.0, rf=191.0, description="Maupertius 1738"),
    "new_intl": Ellipsoid(a=6378157.5, b=6356772.2, description="New International 1967"),
    "plessis": Ellipsoid(a=6376523.0, b=6355863.0, description="Plessis 1817 (France)"),
    "krass": Ellipsoid(a=6378245.0, rf=298.3, description="Krassovsky, 1942"),
    "SEasia": Ellipsoid(a=6378155.0, b=6356773.3205, description="Southeast Asia"),
    "walbeck": Ellipsoid(a=6376896.0, b=6355834.8467, description="Walbeck"),
    "WGS60": Ellipsoid(a=6378165.0, rf=298.3, description="WGS 60"),
    "WGS66": Ellipsoid(a=6378145.0, rf=298.25, description="WGS 66"),
    "WGS72": Ellipsoid(a=6378135.0, rf=298.26, description="WGS 72"),
    "WGS84": Ellipsoid(a=6378137.0, rf=298.257223563, description="WGS 84"),
    "sphere": Ellipsoid(a=6370997.0, b=6370997.0, description="Normal Sphere (r=6370997)"),
})

DATUMS: Mapping[str, DatumDefinition] = MappingProxyType({
    "WGS84": DatumDefinition(towgs84="0,0,0", ellipse="WGS84", datum_name="WGS84"),
    "GGRS87": DatumDefinition(
        towgs84="-199.87,74.79,246.62",
        ellipse="GRS80",
        datum_name="Greek_Geodetic_Reference_System_1987",
    ),
    "NAD83": DatumDefinition(
        towgs84="0,0,0", ellipse="GRS80", datum_name="North_American_Datum_1983"
    ),
    "NAD27": DatumDefinition(
        nadgrids="@conus,@alaska,@ntv2_0.gsb,@ntv1_can.dat",
        ellipse="clrk66",
        datum_name="North_American_Datum_1927",
    ),
    "potsdam": DatumDefinition(
        towgs84="606.0,23.0,413.0", ellipse="bessel", datum_name="Potsdam Rauenberg 1950 DHDN"
    ),
    "carthage": DatumDefinition(
        towgs84="-263.0,6.0,431.0", ellipse="clrk80", datum_name="Carthage 1934 Tunisia"
    ),
    "hermannskogel": DatumDefinition(
        towgs84="653.0,-212.0,449.0", ellipse="bessel", datum_name="Hermannskogel"
    ),
    "ire65": DatumDefinition(
        towgs84="482.530,-130.596,564.557,-1.042,-0.214,-0.631,8.15",
        ellipse="mod_airy",
        datum_name="Ireland 1965",
    ),
    "nzgd49": DatumDefinition(
        towgs84="59.47,-5.04,187.44,0.47,-0.1,1.024,-4.5993",
        ellipse="intl",
        datum_name="New Zealand Geodetic Datum 1949",
    ),
    "OSGB36": DatumDefinition(
        towgs84="446.448,-125.157,542.060,0.1502,0.2470,0.8421,-20.4894",
        ellipse="airy",
        datum_name="Airy 1830",
    ),
})

# Offsets from Greenwich in degrees
PRIME_MERIDIANS: Mapping[str, float] = MappingProxyType({
    "greenwich": 0.0,
    "lisbon": -9.131906111111,
    "paris": 2.337229166667,
    "bogota": -74.080916666667,
    "madrid": -3.687938888889,
    "rome": 12.452333333333,
    "bern": 7.439583333333,
    "jakarta": 106.807719444444,
    "ferro": -17.666666666667,
    "brussels": 4.367975,
    "stockholm": 18.058277777778,
    "athens": 23.7163375,
    "oslo": 10.722916666667,
})

WKT_PROJECTIONS: Mapping[str, str] = MappingProxyType({
    "Lambert Tangential Conformal Conic Projection": "lcc",
    "Lambert_Conformal_Conic": "lcc",
    "Lambert_Conformal_Conic_1SP": "lcc",
    "Lambert_Conformal_Conic_2SP": "lcc",
    "Mercator": "merc",
    "Popular Visualisation Pseudo Mercator": "merc",
    "Mercator_1SP": "merc",
    "Mercator_2SP": "merc",
    "Transverse_Mercator": "tmerc",
    "Transverse Mercator": "tmerc",
    "Lambert Azimuthal Equal Area": "laea",
    "Lambert_Azimuthal_Equal_Area": "laea",
    "Universal Transverse Mercator System": "utm",
    "Polar_Stereographic": "stere",
    "Oblique_Stereographic": "sterea",
    "Albers_Conic_Equal_Area": "aea",
    "Equirectangular": "eqc",
    "Hotine_Oblique_Mercator": "omerc",
    "Cassini_Soldner": "cass",
})


def get_ellipsoid(name: Optional[str]) -> Optional[Ellipsoid]:
    """Look up an ellipsoid by its PROJ name."""
    if name is None:
        return None
    return ELLIPSOIDS.get(name)


def get_datum(code: Optional[str]) -> Optional[DatumDefinition]:
    """Look up a datum by its PROJ code."""
    if code is None:
        return None
    return DATUMS.get(code)


def get_prime_meridian(name: str) -> Optional[float]:
    """Prime meridian offset from Greenwich in degrees, or None if unknown."""
    return PRIME_MERIDIANS.get(name)


def lookup_wkt_projection(name: str) -> Optional[str]:
    """Map a WKT PROJECTION name to the canonical short code."""
    return WKT_PROJECTIONS.get(name)
