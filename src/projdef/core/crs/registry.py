"""
Projection registry and initializer.

Projection implementations register under their canonical short code
("longlat", "merc", ...). After a definition has been parsed and derived,
the registry looks up its projection name, binds a new instance to the
definition and initializes it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from projdef.core.config import settings
from projdef.core.errors import RegistrationError, UnresolvedProjectionError
from projdef.core.reporting import report_error
from projdef.models.crs import CRSDefinition

logger = logging.getLogger(__name__)


class Projection(ABC):
    """
    Transform capability bound to a CRS definition.

    Subclasses read their parameters from ``self.definition`` in
    ``initialize`` and implement the point transforms.
    """

    def __init__(self, definition: CRSDefinition):
        self.definition = definition

    def initialize(self) -> None:
        """Precompute projection constants from the definition."""

    @abstractmethod
    def forward(self, point: Any) -> Any:
        """Geographic (radians) to projected coordinates."""

    @abstractmethod
    def inverse(self, point: Any) -> Any:
        """Projected to geographic (radians) coordinates."""


class LongLat(Projection):
    """Identity transform used for geographic and local systems."""

    def forward(self, point: Any) -> Any:
        return point

    def inverse(self, point: Any) -> Any:
        return point


P = TypeVar("P", bound=Type[Projection])


class ProjectionRegistry:
    """
    Name-keyed store of projection classes.

    Populate it before the first definition is parsed; lookups do not lock.
    """

    def __init__(self) -> None:
        self._projections: Dict[str, Type[Projection]] = {}

    def register(self, name: str, projection_cls: Type[Projection]) -> None:
        """
        Register a projection class under a canonical name.

        Args:
            name: Canonical short code, e.g. "merc"
            projection_cls: Projection subclass

        Raises:
            RegistrationError: If the name is empty or the class is not a Projection
        """
        if not name:
            raise RegistrationError("Projection name must not be empty", projection_name=name)
        if not (isinstance(projection_cls, type) and issubclass(projection_cls, Projection)):
            raise RegistrationError(
                f"Cannot register {projection_cls!r}: not a Projection subclass",
                projection_name=name,
            )
        if name in self._projections:
            logger.debug(f"Replacing projection registered as '{name}'")
        self._projections[name] = projection_cls

    def get(self, name: Optional[str]) -> Optional[Type[Projection]]:
        """Return the projection class registered under name, if any."""
        if name is None:
            return None
        return self._projections.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._projections

    def bind(self, definition: CRSDefinition) -> bool:
        """
        Bind and initialize the projection named by the definition.

        A miss is reported to the error sink and leaves the definition
        without a projection. With ``settings.strict_projections`` the miss
        raises instead.

        Args:
            definition: Derived CRS definition

        Returns:
            True if a projection was bound

        Raises:
            UnresolvedProjectionError: On a miss in strict mode
        """
        projection_cls = self.get(definition.projection_name)
        if projection_cls is None:
            name = definition.projection_name or definition.wkt_projection_name
            message = (
                f"Projection '{name}' for '{definition.code}' is not registered. "
                "Did you forget to register it?"
            )
            if settings.strict_projections:
                raise UnresolvedProjectionError(
                    message, projection_name=name, crs_code=definition.code
                )
            report_error(message, crs_code=definition.code, projection_name=name)
            definition.projection = None
            return False

        projection = projection_cls(definition)
        projection.initialize()
        definition.projection = projection
        logger.debug(f"Bound projection '{definition.projection_name}' to '{definition.code}'")
        return True


# Global registry instance
projection_registry = ProjectionRegistry()


def register_projection(*names: str) -> Callable[[P], P]:
    """
    Class decorator registering a projection in the global registry.

    Example:
        @register_projection("merc")
        class Mercator(Projection):
            ...
    """

    def decorator(projection_cls: P) -> P:
        for name in names:
            projection_registry.register(name, projection_cls)
        return projection_cls

    return decorator


register_projection("longlat", "identity")(LongLat)
