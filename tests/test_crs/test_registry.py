"""
Tests for the projection registry.
"""

from typing import Any, List, Tuple

import pytest

import projdef.core.crs
import projdef.core.crs.registry as registry_module
from projdef.core.config import settings
from projdef.core.crs.proj_parser import parse_proj_string
from projdef.core.crs.registry import (
    LongLat,
    Projection,
    ProjectionRegistry,
    register_projection,
)
from projdef.core.errors import (
    RegistrationError,
    UnboundProjectionError,
    UnresolvedProjectionError,
)
from projdef.core.reporting import reset_error_handler, set_error_handler


class Scaled(Projection):
    """Test projection scaling x and y by the scale factor."""

    def initialize(self) -> None:
        self.k0 = self.definition.scale_factor
        self.initialized = True

    def forward(self, point: Tuple[float, float]) -> Tuple[float, float]:
        return (point[0] * self.k0, point[1] * self.k0)

    def inverse(self, point: Tuple[float, float]) -> Tuple[float, float]:
        return (point[0] / self.k0, point[1] / self.k0)


@pytest.fixture
def reports():
    """Collect error reports instead of logging them."""
    collected: List[Tuple[str, dict]] = []

    def handler(message: str, **details: Any) -> None:
        collected.append((message, details))

    set_error_handler(handler)
    yield collected
    reset_error_handler()


class TestProjectionRegistry:
    """Tests for ProjectionRegistry."""

    def test_register_and_get(self) -> None:
        """Test registering a projection class."""
        registry = ProjectionRegistry()
        registry.register("scaled", Scaled)
        assert "scaled" in registry
        assert registry.get("scaled") is Scaled
        assert registry.get("missing") is None
        assert registry.get(None) is None

    def test_register_empty_name(self) -> None:
        """Test that an empty name is rejected."""
        registry = ProjectionRegistry()
        with pytest.raises(RegistrationError) as exc_info:
            registry.register("", Scaled)
        assert exc_info.value.error_code == "REGISTRATION_ERROR"

    def test_register_non_projection(self) -> None:
        """Test that arbitrary objects are rejected."""
        registry = ProjectionRegistry()
        with pytest.raises(RegistrationError):
            registry.register("bad", object)
        with pytest.raises(RegistrationError):
            registry.register("bad", lambda definition: None)

    def test_bind_initializes_projection(self) -> None:
        """Test binding creates and initializes a projection instance."""
        registry = ProjectionRegistry()
        registry.register("scaled", Scaled)
        definition = parse_proj_string("+proj=scaled +k=2")

        assert registry.bind(definition) is True
        assert definition.is_bound
        assert definition.projection.initialized is True
        assert definition.forward((1.0, 2.0)) == (2.0, 4.0)
        assert definition.inverse((2.0, 4.0)) == (1.0, 2.0)

    def test_each_definition_gets_own_instance(self) -> None:
        """Test that bound projections are not shared."""
        registry = ProjectionRegistry()
        registry.register("scaled", Scaled)
        first = parse_proj_string("+proj=scaled +k=2")
        second = parse_proj_string("+proj=scaled +k=3")
        registry.bind(first)
        registry.bind(second)
        assert first.projection is not second.projection
        assert second.forward((1.0, 1.0)) == (3.0, 3.0)

    def test_bind_miss_reports(self, reports) -> None:
        """Test that an unknown projection is reported, not raised."""
        registry = ProjectionRegistry()
        definition = parse_proj_string("+proj=lcc")
        definition.code = "EPSG:2154"

        assert registry.bind(definition) is False
        assert not definition.is_bound
        assert len(reports) == 1
        message, details = reports[0]
        assert "lcc" in message
        assert details == {"crs_code": "EPSG:2154", "projection_name": "lcc"}

    def test_unbound_transform_raises(self, reports) -> None:
        """Test forward/inverse on an unbound definition."""
        registry = ProjectionRegistry()
        definition = parse_proj_string("+proj=lcc")
        registry.bind(definition)
        with pytest.raises(UnboundProjectionError):
            definition.forward((0.0, 0.0))
        with pytest.raises(UnboundProjectionError):
            definition.inverse((0.0, 0.0))

    def test_strict_mode_raises(self, monkeypatch) -> None:
        """Test strict projection checking."""
        monkeypatch.setattr(settings, "strict_projections", True)
        registry = ProjectionRegistry()
        definition = parse_proj_string("+proj=lcc")
        with pytest.raises(UnresolvedProjectionError) as exc_info:
            registry.bind(definition)
        assert exc_info.value.details["projection_name"] == "lcc"


class TestBuiltins:
    """Tests for the built-in longlat/identity projection."""

    def test_registry_module_not_shadowed(self) -> None:
        """Test the package attribute is the registry module, not the instance."""
        assert projdef.core.crs.registry is registry_module
        assert isinstance(projdef.core.crs.projection_registry, ProjectionRegistry)
        assert projdef.registry is registry_module.projection_registry

    def test_longlat_registered(self) -> None:
        """Test longlat and identity are registered globally."""
        assert registry_module.projection_registry.get("longlat") is LongLat
        assert registry_module.projection_registry.get("identity") is LongLat

    def test_identity_transform(self) -> None:
        """Test that longlat returns points unchanged."""
        definition = parse_proj_string("+proj=longlat")
        registry_module.projection_registry.bind(definition)
        point = (0.1, 0.2)
        assert definition.forward(point) is point
        assert definition.inverse(point) is point


class TestRegisterDecorator:
    """Tests for the register_projection decorator."""

    def test_decorator_registers_all_names(self, monkeypatch) -> None:
        """Test registration under several names."""
        monkeypatch.setattr(
            registry_module.projection_registry,
            "_projections",
            dict(registry_module.projection_registry._projections),
        )

        @register_projection("scaled_a", "scaled_b")
        class Decorated(Scaled):
            pass

        assert registry_module.projection_registry.get("scaled_a") is Decorated
        assert registry_module.projection_registry.get("scaled_b") is Decorated
