"""Cluster connection config adapter backed by the kubernetes client."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from kubernetes import client, config

from func_cli.domain.exceptions import ConnectionError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"
SERVICE_ACCOUNT_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"

# A malformed kubeconfig surfaces from the loader as a yaml error or TypeError
_LOAD_ERRORS = (config.ConfigException, yaml.YAMLError, OSError, TypeError, ValueError)


class KubeConfigAdapter:
    """Loads ambient connection settings: in-cluster first, then kubeconfig.

    Each ``load()`` fills a new ``client.Configuration`` instead of touching the
    library's global default, so handles built from it share no state.
    """

    def __init__(self, kubeconfig: str | None = None, context: str | None = None):
        """Initialize the adapter.

        Args:
            kubeconfig: Explicit kubeconfig path; ``$KUBECONFIG`` or ``~/.kube/config`` if None
            context: Kubeconfig context to use instead of the current one
        """
        self._kubeconfig = kubeconfig
        self._context = context

    def load(self) -> client.Configuration:
        """Load a fresh transport configuration."""
        configuration = client.Configuration()
        try:
            if self._kubeconfig is None and self._context is None:
                try:
                    config.load_incluster_config(client_configuration=configuration)
                    logger.debug("Loaded in-cluster connection config")
                    return configuration
                except config.ConfigException:
                    pass

            config.load_kube_config(
                config_file=self._kubeconfig,
                context=self._context,
                client_configuration=configuration,
                persist_config=False,
            )
        except _LOAD_ERRORS as e:
            raise ConnectionError(f"unable to load cluster connection config: {e}", cause=e) from e

        logger.debug("Loaded kubeconfig connection config for host %s", configuration.host)
        return configuration

    def get_namespace(self) -> str:
        """Namespace of the active context, or ``default``."""
        if self._kubeconfig is None and self._context is None:
            namespace_file = Path(SERVICE_ACCOUNT_NAMESPACE_FILE)
            if namespace_file.exists():
                try:
                    return namespace_file.read_text().strip() or DEFAULT_NAMESPACE
                except OSError:
                    pass

        try:
            contexts, active = config.list_kube_config_contexts(config_file=self._kubeconfig)
        except _LOAD_ERRORS:
            return DEFAULT_NAMESPACE

        selected = active
        if self._context:
            selected = next((c for c in contexts or [] if c.get("name") == self._context), None)

        if not selected:
            return DEFAULT_NAMESPACE
        return selected.get("context", {}).get("namespace") or DEFAULT_NAMESPACE
