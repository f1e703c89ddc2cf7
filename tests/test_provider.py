"""Tests for provider base class."""

import pytest

from gradle_task_explorer.core.provider import TaskProvider


class TestTaskProvider:
    """Tests for TaskProvider abstract base class."""

    def test_cannot_instantiate_base_provider_directly(self):
        """Test that TaskProvider cannot be instantiated directly."""
        with pytest.raises(TypeError) as exc_info:
            TaskProvider()

        assert "abstract" in str(exc_info.value).lower()

    def test_subclass_must_implement_list_tasks(self):
        """Test that subclass must implement list_tasks() method."""

        class IncompleteProvider(TaskProvider):
            def invalidate(self) -> None:
                pass

            def get_metadata(self) -> dict:
                return {}

            def get_supported_files(self) -> list[str]:
                return []

        with pytest.raises(TypeError) as exc_info:
            IncompleteProvider()

        assert "abstract" in str(exc_info.value).lower()

    def test_subclass_must_implement_invalidate(self):
        """Test that subclass must implement invalidate() method."""

        class IncompleteProvider(TaskProvider):
            async def list_tasks(self):
                return ()

            def get_metadata(self) -> dict:
                return {}

            def get_supported_files(self) -> list[str]:
                return []

        with pytest.raises(TypeError) as exc_info:
            IncompleteProvider()

        assert "abstract" in str(exc_info.value).lower()

    @pytest.mark.asyncio
    async def test_complete_subclass(self):
        """Test that a complete subclass works and resolves nothing."""

        class CompleteProvider(TaskProvider):
            async def list_tasks(self):
                return ()

            def invalidate(self) -> None:
                pass

            def get_metadata(self) -> dict:
                return {"name": "test", "version": "1.0", "description": "Test"}

            def get_supported_files(self) -> list[str]:
                return ["*.test"]

        provider = CompleteProvider()

        assert await provider.list_tasks() == ()
        assert provider.resolve_task(None) is None
        assert provider.get_metadata()["name"] == "test"
