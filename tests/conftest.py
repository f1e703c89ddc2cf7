"""Shared pytest fixtures for Gradle Task Explorer tests."""

from pathlib import Path
from typing import Optional

import pytest

from gradle_task_explorer.core.errors import EnumerationFailure, ReadFailure
from gradle_task_explorer.core.host import Host
from gradle_task_explorer.core.models import WorkspaceRoot


class FakeHost(Host):
    """In-memory host that counts searches and reads."""

    def __init__(
        self,
        roots: list[WorkspaceRoot],
        files: dict[str, list[str]],
        contents: dict[str, str],
        config: Optional[dict[str, str]] = None,
    ):
        self._roots = roots
        self.files = files
        self.contents = contents
        self.config = config or {}
        self.search_calls = 0
        self.read_calls = 0
        self.failing_reads: set[str] = set()
        self.failing_roots: set[str] = set()

    @property
    def workspace_roots(self) -> list[WorkspaceRoot]:
        return self._roots

    async def search_files(self, root, pattern, exclude):
        self.search_calls += 1
        if root.name in self.failing_roots:
            raise EnumerationFailure(root.path, "permission denied")
        return [Path(p) for p in self.files.get(root.name, [])]

    def is_excluded(self, path, exclude):
        return any(part in path.parts for part in ("node_modules",))

    async def read_file_text(self, path):
        self.read_calls += 1
        if str(path) in self.failing_reads:
            raise ReadFailure(path, "permission denied")
        return self.contents[str(path)]

    def get_config_value(self, key):
        return self.config.get(key)

    def resolve_workspace_root_for(self, path):
        matches = [r for r in self._roots if r.path == path or r.path in path.parents]
        if not matches:
            return None
        return max(matches, key=lambda r: len(r.path.parts))


@pytest.fixture
def fake_host():
    """Host with one root holding a root build file and a nested module."""
    root = WorkspaceRoot(name="project", path=Path("/work/project"))
    return FakeHost(
        roots=[root],
        files={
            "project": [
                "/work/project/build.gradle",
                "/work/project/app/build.gradle",
            ]
        },
        contents={
            "/work/project/build.gradle": "task clean(type: Delete) {\n}\n",
            "/work/project/app/build.gradle": (
                "apply plugin: 'java'\n"
                "task assembleDist(type: Zip) {\n"
                "    from 'build'\n"
                "}\n"
                "task runApp(type: JavaExec) {\n"
                "}\n"
            ),
        },
    )


@pytest.fixture
def gradle_project(tmp_path):
    """Multi-project Gradle build on disk."""
    (tmp_path / "build.gradle").write_text(
        "task hello(type: Exec) {\n"
        "    commandLine 'echo', 'hello'\n"
        "}\n"
    )

    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "build.gradle").write_text(
        "apply plugin: 'java'\n"
        "\n"
        "task copyDocs(type: Copy) {\n"
        "    from 'docs'\n"
        "}\n"
        "Task packageApp(type: Zip) {\n"
        "}\n"
    )

    return tmp_path


@pytest.fixture
def gradle_project_with_node_modules(gradle_project):
    """Gradle project containing a vendored build file under node_modules."""
    vendored = gradle_project / "node_modules" / "some-lib" / "android"
    vendored.mkdir(parents=True)
    (vendored / "build.gradle").write_text("task vendoredTask(type: Copy) {\n}\n")
    return gradle_project


@pytest.fixture
def host_factory():
    """Factory building FakeHost instances."""
    return FakeHost
