"""Main CLI entry point for themeforge."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.archiver import ZipArchiver
from ..core.config_manager import ConfigManager
from ..core.gh_session import GhSession
from ..core.git_client import GitClient
from ..core.history_rewriter import FilterRepoRewriter
from ..core.redactor import HistoryRedactor
from ..core.scaffolder import Scaffolder
from ..core.secret_source import ChainedSecretSource, EnvSecretSource, PromptSecretSource
from ..models.config import ThemeforgeSettings
from ..models.exceptions import ThemeforgeError
from ..utils.error_handler import ErrorReporter
from ..utils.logger import configure_logging, get_logger
from ..utils.user_interface import OperatorInterface

console = Console()

app = typer.Typer(
    name="themeforge",
    help="Scaffold and publish storefront themes, and scrub leaked secrets from repository history.",
    add_completion=False,
)


def _load_settings(config_dir: Path | None) -> ThemeforgeSettings:
    return ConfigManager(config_dir).load_settings()


def _get_scaffolder(settings: ThemeforgeSettings) -> Scaffolder:
    """Get a scaffolder wired to the real collaborators."""
    scaffold_settings = settings.scaffold
    return Scaffolder(
        settings=scaffold_settings,
        session=GhSession(),
        vcs=GitClient(),
        archiver=ZipArchiver(),
        token_source=EnvSecretSource(scaffold_settings.token_env_var),
    )


def _get_redactor(settings: ThemeforgeSettings, ui: OperatorInterface) -> HistoryRedactor:
    """Get a history redactor wired to the real collaborators."""
    redact_settings = settings.redact
    secret_source = ChainedSecretSource(
        [
            EnvSecretSource(redact_settings.secret_env_var),
            PromptSecretSource(
                "Enter the exact exposed token (kept only in a local replacements file during the rewrite)",
            ),
        ],
    )
    return HistoryRedactor(
        settings=redact_settings,
        vcs=GitClient(),
        rewriter=FilterRepoRewriter(),
        secret_source=secret_source,
        confirm=ui.ask_revocation_confirmation,
    )


@app.command()
def scaffold(
    repo: str | None = typer.Option(None, "--repo", "-r", help="Target repository as owner/repo"),
    base_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--base-path",
        "-b",
        help="Directory in which the theme directory and archive are created",
    ),
    assets_source: Path | None = typer.Option(  # noqa: B008
        None,
        "--assets-src",
        "-a",
        help="Directory holding optional assets (logo.png, favicon.ico)",
    ),
    theme_name: str | None = typer.Option(None, "--theme-name", "-t", help="Name of the theme directory"),
    branch: str | None = typer.Option(None, "--branch", help="Branch to publish"),
    config_dir: Path | None = typer.Option(None, "--config-dir", help="Directory holding config.yaml"),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed information"),
    structured_output: bool = typer.Option(False, "--structured", help="Output structured JSON logs"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write JSON logs to this file"),  # noqa: B008
) -> None:
    """Create the theme tree, zip it and push it as a fresh repository.

    The access token is read from the environment (GITHUB_PAT by default),
    never from the command line.
    """
    configure_logging(verbose=verbose, structured_output=structured_output, log_file=log_file)
    logger = get_logger()
    reporter = ErrorReporter(show_messages=not structured_output)

    try:
        settings = _load_settings(config_dir)
        scaffold_settings = settings.scaffold
        if repo is not None:
            scaffold_settings.repository = repo
        if base_path is not None:
            scaffold_settings.base_path = base_path.expanduser()
        if assets_source is not None:
            scaffold_settings.assets_source = assets_source.expanduser()
        if theme_name is not None:
            scaffold_settings.theme_name = theme_name
        if branch is not None:
            scaffold_settings.branch = branch

        logger.info("Starting theme scaffold", theme_path=str(scaffold_settings.theme_path))
        ui = OperatorInterface(console)
        if not structured_output:
            ui.warn_destructive_scaffold(str(scaffold_settings.theme_path))

        result = _get_scaffolder(settings).run()

        if not structured_output:
            ui.show_scaffold_summary(result, verbose=verbose)
            console.print("[green]Done.[/green]")

    except ThemeforgeError as e:
        raise typer.Exit(reporter.report(e, "scaffold")) from e
    except Exception as e:
        logger.exception("Unexpected error during scaffold", error=str(e))
        if not structured_output:
            console.print(f"[red]Error:[/red] Unexpected error: {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def redact(
    repository_url: str | None = typer.Argument(None, help="Remote repository URL to rewrite"),
    placeholder: str | None = typer.Option(None, "--placeholder", help="Text that replaces the secret"),
    cleanup: bool = typer.Option(False, "--cleanup", help="Delete the scratch workspace after a successful push"),
    config_dir: Path | None = typer.Option(None, "--config-dir", help="Directory holding config.yaml"),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed information"),
    structured_output: bool = typer.Option(False, "--structured", help="Output structured JSON logs"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write JSON logs to this file"),  # noqa: B008
) -> None:
    """Replace a leaked secret throughout a remote repository's history.

    Revoke the secret first. The secret is read from the environment or a
    hidden prompt, never from the command line.
    """
    configure_logging(verbose=verbose, structured_output=structured_output, log_file=log_file)
    logger = get_logger()
    reporter = ErrorReporter(show_messages=not structured_output)

    try:
        settings = _load_settings(config_dir)
        redact_settings = settings.redact
        if repository_url is not None:
            redact_settings.repository_url = repository_url
        if placeholder is not None:
            redact_settings.placeholder = placeholder
        if cleanup:
            redact_settings.cleanup = True

        redact_settings.validate()
        ui = OperatorInterface(console)
        ui.warn_destructive_redaction(str(redact_settings.repository_url))

        logger.info("Starting history redaction", remote_url=redact_settings.repository_url)
        result = _get_redactor(settings, ui).run()

        ui.show_redaction_summary(result)

    except ThemeforgeError as e:
        raise typer.Exit(reporter.report(e, "redact")) from e
    except Exception as e:
        logger.exception("Unexpected error during redaction", error=str(e))
        console.print(f"[red]Error:[/red] Unexpected error: {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config.yaml"),
    config_dir: Path | None = typer.Option(None, "--config-dir", help="Directory holding config.yaml"),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed information"),
) -> None:
    """Write a default config.yaml."""
    configure_logging(verbose=verbose)
    reporter = ErrorReporter()
    manager = ConfigManager(config_dir)

    try:
        written = manager.write_default_config(force=force)
    except ThemeforgeError as e:
        raise typer.Exit(reporter.report(e, "init")) from e

    if written:
        console.print(f"[green]✓ Wrote {manager.config_path}[/green]")
        console.print("\n[bold]Next steps:[/bold]")
        console.print("  1. Set [cyan]scaffold.repository[/cyan] to your owner/repo")
        console.print("  2. Run [cyan]themeforge scaffold[/cyan]")
    else:
        console.print(f"[yellow]{manager.config_path} already exists[/yellow] (use --force to overwrite)")


@app.command("config")
def show_config(
    config_dir: Path | None = typer.Option(None, "--config-dir", help="Directory holding config.yaml"),  # noqa: B008
) -> None:
    """Show the effective settings."""
    configure_logging()
    reporter = ErrorReporter()
    manager = ConfigManager(config_dir)

    try:
        settings = manager.load_settings()
    except ThemeforgeError as e:
        raise typer.Exit(reporter.report(e, "config")) from e

    console.print(f"[dim]Config file: {manager.config_path}[/dim]\n")
    data = settings.to_dict()
    for section in ("scaffold", "redact"):
        table = Table(title=section, show_header=True, header_style="bold magenta")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value")
        for key, value in data[section].items():
            table.add_row(key, "" if value is None else escape(str(value)))
        console.print(table)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
