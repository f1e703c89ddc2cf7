"""Tests for output formatters."""

import io
import json
from pathlib import Path

from rich.console import Console

from gradle_task_explorer.core.models import VERSION, TaskDescriptor, TaskListing, WorkspaceRoot
from gradle_task_explorer.core.reporting import JsonReporter, TextReporter


def _listing(tasks):
    return TaskListing(
        roots=[WorkspaceRoot(name="project", path=Path("/work/project"))],
        tasks=tasks,
        providers_run=["gradle"],
        scan_duration_seconds=0.25,
    )


def _task(target, relative_path):
    directory = Path("/work/project") / relative_path
    return TaskDescriptor(
        target=target,
        source_path=directory / "build.gradle",
        relative_path=relative_path,
        command="gradle",
        args=(target,),
        working_directory=directory,
        root="project",
    )


class TestTextReporter:
    """Tests for text output formatter."""

    def test_text_report_no_tasks(self):
        """Test text output with no tasks."""
        output = io.StringIO()
        reporter = TextReporter(console=Console(file=output, width=120))
        reporter.report(_listing([]))

        text = output.getvalue()
        assert "No tasks found" in text
        assert "0 task(s)" in text

    def test_text_report_with_tasks(self):
        """Test text output lists every task."""
        output = io.StringIO()
        reporter = TextReporter(console=Console(file=output, width=120))
        reporter.report(_listing([_task("clean", ""), _task("copyDocs", "app/")]))

        text = output.getvalue()
        assert "clean" in text
        assert "gradle copyDocs" in text
        assert "app/" in text
        assert "2 task(s)" in text

    def test_text_report_header_version(self):
        """Test the header shows the package version."""
        output = io.StringIO()
        reporter = TextReporter(console=Console(file=output, width=120))
        reporter.report(_listing([]))

        assert f"v{VERSION}" in output.getvalue()


class TestJsonReporter:
    """Tests for JSON output formatter."""

    def test_json_report(self):
        """Test JSON output structure."""
        reporter = JsonReporter()
        data = json.loads(reporter.report(_listing([_task("clean", "")])))

        assert data["providers_run"] == ["gradle"]
        assert data["roots"][0]["path"] == "/work/project"
        assert data["tasks"][0]["target"] == "clean"
        assert data["tasks"][0]["args"] == ["clean"]
        assert data["tasks"][0]["relative_path"] == ""
