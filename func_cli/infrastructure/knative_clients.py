"""Namespace-scoped clients for the serving and eventing resource families."""

from __future__ import annotations

from typing import Any, ClassVar

from kubernetes import client
from kubernetes.client.rest import ApiException

from func_cli.domain.models import ResourceFamily


class NamespacedResourceClient:
    """Read-only access to one custom resource group, bound to a namespace."""

    family: ClassVar[ResourceFamily]
    group: ClassVar[str]
    version: ClassVar[str]

    def __init__(self, api: client.CustomObjectsApi, namespace: str):
        self._api = api
        self._namespace = namespace

    @classmethod
    def from_configuration(
        cls, configuration: client.Configuration, namespace: str
    ) -> NamespacedResourceClient:
        """Build a client with its own ApiClient over ``configuration``."""
        return cls(client.CustomObjectsApi(client.ApiClient(configuration)), namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    def close(self) -> None:
        """Release the connection pool of the underlying ApiClient."""
        self._api.api_client.close()

    def __enter__(self) -> NamespacedResourceClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _list(self, plural: str, label_selector: str | None = None) -> list[dict[str, Any]]:
        kwargs = {"label_selector": label_selector} if label_selector else {}
        response = self._api.list_namespaced_custom_object(
            group=self.group,
            version=self.version,
            namespace=self._namespace,
            plural=plural,
            **kwargs,
        )
        return response.get("items", [])

    def _get(self, plural: str, name: str) -> dict[str, Any] | None:
        try:
            return self._api.get_namespaced_custom_object(
                group=self.group,
                version=self.version,
                namespace=self._namespace,
                plural=plural,
                name=name,
            )
        except ApiException as e:
            if e.status == 404:
                return None
            raise


class ServingClient(NamespacedResourceClient):
    """Knative serving (serving.knative.dev/v1) services and revisions."""

    family = ResourceFamily.SERVING
    group = "serving.knative.dev"
    version = "v1"

    def list_services(self) -> list[dict[str, Any]]:
        return self._list("services")

    def get_service(self, name: str) -> dict[str, Any] | None:
        return self._get("services", name)

    def list_revisions(self, service: str | None = None) -> list[dict[str, Any]]:
        """Revisions in the namespace, optionally only those of ``service``."""
        selector = f"serving.knative.dev/service={service}" if service else None
        return self._list("revisions", label_selector=selector)


class EventingClient(NamespacedResourceClient):
    """Knative eventing (eventing.knative.dev/v1beta1) triggers and brokers."""

    family = ResourceFamily.EVENTING
    group = "eventing.knative.dev"
    version = "v1beta1"

    def list_triggers(self) -> list[dict[str, Any]]:
        return self._list("triggers")

    def get_trigger(self, name: str) -> dict[str, Any] | None:
        return self._get("triggers", name)

    def list_brokers(self) -> list[dict[str, Any]]:
        return self._list("brokers")
