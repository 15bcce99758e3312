"""User interface utilities for operator prompts and run summaries."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.redactor import RedactionResult
from ..core.scaffolder import ScaffoldResult


class OperatorInterface:
    """Handles operator interaction on the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def ask_revocation_confirmation(self) -> str:
        """Ask whether the exposed credential has been revoked.

        Returns:
            The raw answer; only the exact word ``yes`` lets a redaction proceed.
            An empty string when stdin is closed or the prompt is interrupted
        """
        self.console.print(
            "[bold yellow]IMPORTANT:[/bold yellow] Rewriting history does not revoke a credential. "
            "Anyone who already copied it can still use it.",
        )
        try:
            return input("Confirm you have REVOKED the exposed token at its source (yes/no)? ")
        except (EOFError, KeyboardInterrupt):
            return ""

    def warn_destructive_redaction(self, remote_url: str) -> None:
        self.console.print(
            Panel(
                f"Every ref of [cyan]{escape(remote_url)}[/cyan] will be force-overwritten.\n"
                "All collaborators must re-clone afterwards.",
                title="[bold red]Destructive operation[/bold red]",
                border_style="red",
            ),
        )

    def warn_destructive_scaffold(self, theme_path: str) -> None:
        self.console.print(f"[dim]Anything at {theme_path} will be deleted and regenerated.[/dim]")

    def show_scaffold_summary(self, result: ScaffoldResult, verbose: bool = False) -> None:
        table = Table(title="Theme Scaffold", show_header=True, header_style="bold magenta")
        table.add_column("Item", style="cyan", no_wrap=True)
        table.add_column("Status")

        table.add_row("Theme directory", str(result.theme_path))
        table.add_row("Authentication", result.auth_method.value)
        table.add_row("Generated files", str(len(result.written_files)))

        copied = ", ".join(p.name for p in result.copied_assets) or "none"
        table.add_row("Copied assets", f"[green]{copied}[/green]")
        if result.skipped_assets:
            table.add_row("Skipped assets", f"[yellow]{', '.join(result.skipped_assets)}[/yellow]")

        if result.archive is not None:
            if result.archive.success:
                table.add_row("Archive", f"[green]✓ {result.archive.path}[/green]")
            else:
                table.add_row("Archive", f"[yellow]⚠ not created ({escape(str(result.archive.error))})[/yellow]")

        commit_status = "[green]✓ Committed[/green]" if result.committed else "[yellow]⚠ No commit[/yellow]"
        table.add_row("Commit", commit_status)
        if result.remote_url:
            table.add_row("Pushed to", f"{result.remote_url} ({result.branch})")

        self.console.print(table)

        if verbose:
            self.console.print("\n[bold]Generated files:[/bold]")
            for path in result.written_files:
                self.console.print(f"  • {path.relative_to(result.theme_path)}")

    def show_redaction_summary(self, result: RedactionResult) -> None:
        lines = [
            f"[green]✓ History of {result.remote_url} rewritten and force-pushed.[/green]",
            f"Secret replaced with [cyan]{escape(result.placeholder)}[/cyan].",
        ]
        if result.workspace_retained:
            lines.append(f"Workspace kept for inspection: {result.workspace}")
            lines.append(f"[dim]Remove it when done: rm -rf {result.workspace}[/dim]")
        lines.append("[bold]Inform collaborators to re-clone the repository.[/bold]")
        self.console.print(Panel("\n".join(lines), title="[bold green]Done[/bold green]", border_style="green"))
