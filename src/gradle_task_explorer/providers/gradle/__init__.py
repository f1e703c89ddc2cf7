"""Gradle task provider."""

from .provider import GradleTaskProvider

# Provider class exposed for orchestrator discovery
PROVIDER_CLASS = GradleTaskProvider

__all__ = ["GradleTaskProvider", "PROVIDER_CLASS"]
