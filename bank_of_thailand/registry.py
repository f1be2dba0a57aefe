"""
Registry for API resources.

Maps resource names to classes so the client and the CLI can build them
by name.
"""

from typing import TYPE_CHECKING, Dict, Optional, Type

from bank_of_thailand.core.logging import get_logger
from bank_of_thailand.resources import ALL_RESOURCES, BaseResource

if TYPE_CHECKING:
    from bank_of_thailand.client import BOTClient

logger = get_logger("registry")


class ResourceRegistry:
    """Registry of resource classes keyed by name."""

    def __init__(self):
        self._resources: Dict[str, Type[BaseResource]] = {}

    def register(self, resource_class: Type[BaseResource], name: Optional[str] = None) -> None:
        """
        Register a resource class.

        Args:
            resource_class: Resource class (not instance)
            name: Registry key. Defaults to the class's ``name``.
        """
        key = name or resource_class.name
        self._resources[key] = resource_class
        logger.debug(f"Registered resource: {key}")

    def get(self, name: str, client: "BOTClient") -> BaseResource:
        """
        Build a resource bound to a client.

        Raises:
            KeyError: If resource not registered
        """
        if name not in self._resources:
            raise KeyError(f"Resource not registered: {name}")
        return self._resources[name](client)

    def resource_class(self, name: str) -> Type[BaseResource]:
        if name not in self._resources:
            raise KeyError(f"Resource not registered: {name}")
        return self._resources[name]

    def has(self, name: str) -> bool:
        """Check if resource is registered."""
        return name in self._resources

    def list_resources(self) -> list[str]:
        """List all registered resource names."""
        return list(self._resources.keys())


def create_default_registry() -> ResourceRegistry:
    """Registry holding every built-in resource."""
    registry = ResourceRegistry()
    for resource_class in ALL_RESOURCES:
        registry.register(resource_class)
    return registry
