"""
Tests for the definition dispatcher.
"""

from typing import Any, List, Tuple

import pytest

from projdef.core.crs import definition as definition_module
from projdef.core.crs.definition import (
    WGS84,
    classify_authority,
    get_definition,
    is_wkt,
    normalize_code,
    parse,
    register_definition,
)
from projdef.core.errors import UnboundProjectionError
from projdef.core.reporting import reset_error_handler, set_error_handler
from projdef.models.crs import Authority
from projdef.models.datum import DatumType

WGS84_WKT = 'GEOGCS["WGS84",DATUM["WGS84_1984",SPHEROID["WGS84",6378137,298.257223563]]]'


@pytest.fixture
def reports():
    """Collect error reports instead of logging them."""
    collected: List[Tuple[str, dict]] = []

    def handler(message: str, **details: Any) -> None:
        collected.append((message, details))

    set_error_handler(handler)
    yield collected
    reset_error_handler()


@pytest.fixture
def definitions(monkeypatch):
    """Isolate the in-memory definitions store."""
    store = dict(definition_module.DEFINITIONS)
    monkeypatch.setattr(definition_module, "DEFINITIONS", store)
    return store


class TestCodes:
    """Tests for code normalisation and authority detection."""

    def test_normalize_code(self) -> None:
        """Test colon stripping and uppercasing."""
        assert normalize_code("::epsg:4326") == "EPSG:4326"
        assert normalize_code("wgs84") == "WGS84"

    @pytest.mark.parametrize(
        "code, authority, number",
        [
            ("EPSG:4326", Authority.EPSG, "4326"),
            ("IGNF:LAMB93", Authority.IGNF, "LAMB93"),
            ("CRS:84", Authority.CRS, "84"),
            ("WGS84", Authority.NONE, "WGS84"),
            ("", Authority.NONE, ""),
        ],
    )
    def test_classify_authority(self, code: str, authority: Authority, number: str) -> None:
        """Test authority prefixes."""
        assert classify_authority(code) == (authority, number)

    @pytest.mark.parametrize(
        "text, expected",
        [
            (WGS84_WKT, True),
            ('PROJCS["x"]', True),
            ('GEOCCS["x"]', True),
            ('LOCAL_CS["x"]', True),
            ("EPSG:4326", False),
            ("+proj=longlat", False),
        ],
    )
    def test_is_wkt(self, text: str, expected: bool) -> None:
        """Test WKT marker detection."""
        assert is_wkt(text) is expected


class TestParseProj:
    """Tests for parse() with PROJ strings."""

    def test_longlat_scenario(self) -> None:
        """Test a WGS84 geographic definition."""
        crs = parse("", "+proj=longlat +ellps=WGS84 +datum=WGS84 +units=degrees")
        assert crs.projection_name == "longlat"
        assert crs.is_sphere is False
        assert crs.scale_factor == 1.0
        assert crs.axis_order == "enu"
        assert crs.is_bound
        assert crs.authority == Authority.NONE

    def test_code_is_normalised(self) -> None:
        """Test code and authority on the result."""
        crs = parse(":epsg:4326", "+proj=longlat +datum=WGS84")
        assert crs.code == "EPSG:4326"
        assert crs.authority == Authority.EPSG
        assert crs.srs_proj_number == "4326"

    def test_mercator_lat_ts(self, reports) -> None:
        """Test lat_ts conversion through the dispatcher."""
        crs = parse("", "+proj=merc +lat_ts=0.5 +ellps=sphere")
        assert abs(crs.lat_true_scale - 0.5 * 3.141592653589793 / 180) < 1e-12
        assert crs.is_sphere is True

    def test_unregistered_projection_reported(self, reports) -> None:
        """Test that an unknown projection yields an unbound definition."""
        crs = parse("EPSG:32633", "+proj=utm +zone=33 +ellps=WGS84 +datum=WGS84 +units=m")
        assert crs.zone == 33
        assert crs.semi_major == 6378137.0
        assert not crs.is_bound
        assert len(reports) == 1
        assert reports[0][1]["crs_code"] == "EPSG:32633"
        with pytest.raises(UnboundProjectionError):
            crs.forward((0.0, 0.0))

    def test_wkt_marker_wins_over_proj_string(self) -> None:
        """Test that a WKT code is parsed as WKT even with a PROJ string."""
        crs = parse(WGS84_WKT, "+proj=merc")
        assert crs.projection_name == "longlat"
        assert crs.code == "WGS84"


class TestParseStored:
    """Tests for parse() using the in-memory definitions."""

    def test_stored_epsg_4326(self) -> None:
        """Test a built-in stored definition."""
        crs = parse("EPSG:4326")
        assert crs.projection_name == "longlat"
        assert crs.semi_major == 6378137.0
        assert crs.is_bound

    def test_register_definition(self, definitions) -> None:
        """Test registering and parsing a custom code."""
        register_definition("epsg:27700", "+proj=longlat +datum=OSGB36 +units=m")
        assert get_definition("EPSG:27700") == "+proj=longlat +datum=OSGB36 +units=m"
        crs = parse("EPSG:27700")
        assert crs.ellipsoid_name == "airy"
        assert crs.datum.datum_type == DatumType.SEVEN_PARAM

    def test_unknown_code_without_definition(self, reports) -> None:
        """Test a code with no stored definition."""
        crs = parse("EPSG:999999")
        assert crs.projection_name is None
        assert crs.semi_major == 6378137.0
        assert not crs.is_bound
        assert len(reports) == 1


class TestParseWkt:
    """Tests for parse() with WKT."""

    def test_geogcs_scenario(self) -> None:
        """Test WGS84 GEOGCS through the dispatcher."""
        crs = parse(WGS84_WKT)
        assert crs.projection_name == "longlat"
        assert crs.semi_major == 6378137
        assert crs.inverse_flattening == 298.257223563
        assert crs.semi_minor == pytest.approx((1 - 1 / 298.257223563) * 6378137)
        assert crs.is_bound

    def test_local_cs(self) -> None:
        """Test LOCAL_CS binds the identity projection."""
        crs = parse('LOCAL_CS["Site grid",LOCAL_DATUM["Site",0],UNIT["metre",1]]')
        assert crs.is_local is True
        assert crs.projection_name == "identity"
        assert crs.datum.datum_type == DatumType.NODATUM
        assert crs.forward((10.0, 20.0)) == (10.0, 20.0)

    def test_projected_wkt_unresolved(self, reports) -> None:
        """Test that a projected WKT without registered projection is reported."""
        crs = parse('PROJCS["x",GEOGCS["g"],PROJECTION["Mercator_1SP"]]')
        assert crs.projection_name == "merc"
        assert not crs.is_bound
        assert len(reports) == 1


class TestWGS84Default:
    """Tests for the built-in WGS84 definition."""

    def test_wgs84(self) -> None:
        """Test the module-level WGS84 definition."""
        assert WGS84.code == "WGS84"
        assert WGS84.title == "long/lat:WGS84"
        assert WGS84.projection_name == "longlat"
        assert WGS84.units == "degrees"
        assert WGS84.datum_code == "WGS84"
        assert WGS84.datum.datum_type == DatumType.WGS84
        assert WGS84.is_bound

    def test_wgs84_matches_fresh_parse(self) -> None:
        """Test the default equals parsing the same string again."""
        assert parse("WGS84") == WGS84
