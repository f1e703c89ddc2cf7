"""Orchestrator for coordinating task providers and aggregating their tasks."""

import importlib
import logging
import time
from typing import Optional

from .config import ExplorerSettings
from .host import Host
from .models import TaskListing

logger = logging.getLogger(__name__)


class Orchestrator:
    """Coordinates provider discovery and aggregates task listings."""

    PROVIDER_REGISTRY = {
        "gradle": "gradle_task_explorer.providers.gradle",
    }

    def __init__(self, host: Host, settings: Optional[ExplorerSettings] = None):
        """Initialize orchestrator and load providers."""
        self.host = host
        self.settings = settings or ExplorerSettings()
        self.providers = {}
        self._load_providers()

    def _load_providers(self) -> None:
        """
        Load all registered providers.

        Providers are discovered via the PROVIDER_REGISTRY. Each provider module
        must expose a PROVIDER_CLASS variable pointing to the provider class.
        """
        for name, module_path in self.PROVIDER_REGISTRY.items():
            try:
                module = importlib.import_module(module_path)
                provider_class = getattr(module, "PROVIDER_CLASS")
                self.providers[name] = provider_class(self.host, self.settings)
                logger.info(f"Loaded provider: {name}")
            except (ImportError, AttributeError) as e:
                logger.error(f"Failed to load provider {name}: {e}")
                # Continue loading other providers

    async def list_tasks(self, provider_filter: Optional[list[str]] = None) -> TaskListing:
        """
        List tasks from all (or filtered) providers.

        A provider failure aborts the whole listing and propagates; providers
        that already ran keep their caches.

        Args:
            provider_filter: Optional list of provider names to run (None = all)

        Returns:
            TaskListing with tasks from all providers, in registry order
        """
        start_time = time.time()
        all_tasks = []
        providers_run = []

        if provider_filter:
            providers_to_run = {
                name: provider
                for name, provider in self.providers.items()
                if name in provider_filter
            }
            for name in provider_filter:
                if name not in self.providers:
                    logger.warning(f"Provider '{name}' not found, skipping")
        else:
            providers_to_run = self.providers

        for name, provider in providers_to_run.items():
            logger.info(f"Running provider: {name}")
            tasks = await provider.list_tasks()
            all_tasks.extend(tasks)
            providers_run.append(name)
            logger.info(f"Provider {name} found {len(tasks)} task(s)")

        duration = time.time() - start_time

        return TaskListing(
            roots=self.host.workspace_roots,
            tasks=all_tasks,
            providers_run=providers_run,
            scan_duration_seconds=round(duration, 2),
        )

    def invalidate(self) -> None:
        """Clear every provider's cache."""
        for provider in self.providers.values():
            provider.invalidate()

    def list_providers(self) -> list[dict]:
        """
        Get metadata for all loaded providers.

        Returns:
            List of provider metadata dictionaries
        """
        return [provider.get_metadata() for provider in self.providers.values()]
