"""Output formatters for task listings."""

from rich.console import Console
from rich.table import Table

from .models import VERSION, TaskListing


class TextReporter:
    """Human-readable output using rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize text reporter with optional console."""
        self.console = console or Console()

    def report(self, listing: TaskListing) -> None:
        """
        Generate and print text report.

        Args:
            listing: Task listing to report
        """
        self.console.print(f"Gradle Task Explorer v{VERSION}", style="bold")
        roots = ", ".join(str(root.path) for root in listing.roots) or "(none)"
        self.console.print(f"Workspace: {roots}")
        self.console.print(f"Providers: {', '.join(listing.providers_run)}\n")

        if not listing.tasks:
            self.console.print("No tasks found", style="yellow bold")
        else:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Task", style="cyan")
            table.add_column("Path")
            table.add_column("Command")
            table.add_column("Group", style="dim")

            for task in listing.tasks:
                table.add_row(
                    task.target,
                    task.relative_path or ".",
                    " ".join(task.command_line),
                    task.group,
                )

            self.console.print(table)

        summary = listing.summary()
        self.console.print(
            f"Summary: {summary['total']} task(s) in {listing.scan_duration_seconds}s"
        )


class JsonReporter:
    """JSON output for programmatic consumption."""

    def report(self, listing: TaskListing) -> str:
        """
        Generate JSON report.

        Args:
            listing: Task listing to report

        Returns:
            JSON string
        """
        return listing.model_dump_json(indent=2)
