#!/usr/bin/env python3
"""
Demo script showing how to parse CRS definitions.

This example demonstrates:
1. Parsing PROJ strings and stored codes
2. Parsing WKT
3. Registering a projection implementation
4. Handling definitions without a registered projection
"""

from projdef import WGS84, parse, register_projection
from projdef.core.crs.definition import register_definition
from projdef.core.crs.registry import Projection
from projdef.core.logging_config import setup_logging


@register_projection("eqc_demo")
class PlateCarree(Projection):
    """Equirectangular projection on the definition's semi-major axis."""

    def initialize(self):
        self.a = self.definition.semi_major

    def forward(self, point):
        lon, lat = point
        return (self.a * lon, self.a * lat)

    def inverse(self, point):
        x, y = point
        return (x / self.a, y / self.a)


def main():
    """Run definition parsing demo."""
    setup_logging(log_level="DEBUG")

    print("=" * 70)
    print("CRS Definition Parsing Demo")
    print("=" * 70)

    # Example 1: Built-in default
    print("\n1. Built-in WGS84 definition...")
    print("-" * 70)
    print(f"  {WGS84}")
    print(f"  a={WGS84.a}  b={WGS84.b:.6f}  es={WGS84.es:.12f}")
    print(f"  datum: {WGS84.datum}")

    # Example 2: PROJ string with a seven parameter datum
    print("\n2. Parsing a PROJ string...")
    print("-" * 70)
    register_definition("EPSG:4277", "+proj=longlat +datum=OSGB36 +no_defs")
    osgb = parse("EPSG:4277")
    print(f"  {osgb} ({osgb.authority.value} {osgb.srs_proj_number})")
    print(f"  ellipsoid: {osgb.ellipsoid_name} ({osgb.ellipsoid_description})")
    print(f"  datum: {osgb.datum}")

    # Example 3: WKT
    print("\n3. Parsing WKT...")
    print("-" * 70)
    wkt = (
        'GEOGCS["NAD83",DATUM["North_American_Datum_1983",'
        'SPHEROID["GRS 1980",6378137,298.257222101]],'
        'PRIMEM["Greenwich",0],UNIT["degree",0.0174532925199433]]'
    )
    nad83 = parse(wkt)
    print(f"  {nad83}")
    print(f"  datum name: {nad83.datum_name}  rf: {nad83.rf}")

    # Example 4: Custom projection
    print("\n4. Using a registered projection...")
    print("-" * 70)
    plate = parse("", "+proj=eqc_demo +ellps=sphere")
    print(f"  forward((0.1, 0.2)) = {plate.forward((0.1, 0.2))}")

    # Example 5: Unregistered projection
    print("\n5. Unregistered projection (reported, not raised)...")
    print("-" * 70)
    utm = parse("EPSG:32633", "+proj=utm +zone=33 +ellps=WGS84 +units=m")
    print(f"  {utm}  bound: {utm.is_bound}")

    print("\n" + "=" * 70)
    print("Demo complete! See the test files for more examples.")
    print("=" * 70)


if __name__ == "__main__":
    main()
