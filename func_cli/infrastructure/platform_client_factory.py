"""Factory producing namespace-scoped platform client handles."""

from __future__ import annotations

import logging

from func_cli.domain.exceptions import ConnectionError
from func_cli.domain.models import ResourceFamily
from func_cli.infrastructure.knative_clients import (
    EventingClient,
    NamespacedResourceClient,
    ServingClient,
)
from func_cli.ports.connection import ConnectionConfigPort

logger = logging.getLogger(__name__)

_FAMILY_CLIENTS: dict[ResourceFamily, type[NamespacedResourceClient]] = {
    ResourceFamily.SERVING: ServingClient,
    ResourceFamily.EVENTING: EventingClient,
}


class PlatformClientFactory:
    """Builds a fresh handle per call; nothing is cached or retried."""

    def __init__(self, connection_config: ConnectionConfigPort):
        """Initialize the factory.

        Args:
            connection_config: Source of ambient cluster connection settings
        """
        self._connection_config = connection_config

    def new_serving_handle(self, namespace: str) -> ServingClient:
        """Create a serving client scoped to ``namespace``.

        Raises:
            ConnectionError: If connection config or client construction fails
        """
        return self._new_handle(ResourceFamily.SERVING, namespace)

    def new_eventing_handle(self, namespace: str) -> EventingClient:
        """Create an eventing client scoped to ``namespace``.

        Raises:
            ConnectionError: If connection config or client construction fails
        """
        return self._new_handle(ResourceFamily.EVENTING, namespace)

    def _new_handle(self, family: ResourceFamily, namespace: str):
        failure = f"failed to create new {family.value} client"

        try:
            configuration = self._connection_config.load()
        except ConnectionError as e:
            raise ConnectionError(f"{failure}: {e.message}", family=family.value, cause=e) from e
        except Exception as e:
            raise ConnectionError(f"{failure}: {e}", family=family.value, cause=e) from e

        try:
            handle = _FAMILY_CLIENTS[family].from_configuration(configuration, namespace)
        except Exception as e:
            raise ConnectionError(f"{failure}: {e}", family=family.value, cause=e) from e

        logger.debug("Created %s client for namespace %s", family.value, namespace)
        return handle
