"""Typer CLI: format, check, preview, batch, demo, init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shinycmd import __version__
from shinycmd.config import LayoutConfig

app = typer.Typer(
    name="shinycmd",
    help="Pretty command line formatter - multi-line layout and syntax highlighting.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"shinycmd v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version.", callback=_version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """shinycmd - pretty command line formatter."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


def _read_command(words: list[str] | None) -> str:
    if words:
        return " ".join(words)
    return sys.stdin.read().strip()


def _color_system():
    """Color system of the output console; None when it cannot show colors."""
    from shinycmd.highlight import detect_color_system

    return detect_color_system(console)


def _print_command(text: str) -> None:
    # soft_wrap keeps rich from re-wrapping our own line breaks
    console.print(Text.from_ansi(text), soft_wrap=True, highlight=False)


def _layout_config(
    project_dir: Path,
    width: int | None = None,
    indent_size: int | None = None,
    flags_on_new_line: bool | None = None,
    no_color: bool = False,
) -> LayoutConfig:
    """Load the project config and apply command-line overrides. Exits on invalid config."""
    from shinycmd.config import load_config, validate_config

    config = load_config(project_dir)
    errors = validate_config(config)
    if errors:
        for e in errors:
            err_console.print(f"[red]Config error: {e}[/red]")
        raise typer.Exit(1)

    try:
        return LayoutConfig.from_dict(config).replace(
            max_width=width,
            indent=" " * indent_size if indent_size is not None else None,
            flags_on_new_line=flags_on_new_line,
            disable_colors=True if no_color else None,
        )
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)


@app.command("format")
def format_command(
    words: list[str] = typer.Argument(None, help="Command to format (quote it); reads stdin if omitted"),
    width: int = typer.Option(None, "--width", "-w", help="Maximum line width"),
    indent_size: int = typer.Option(None, "--indent-size", "-i", help="Spaces per continuation indent"),
    flags_on_new_line: bool = typer.Option(
        None, "--flags-on-new-line/--flags-inline", help="Put every flag on its own line"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable syntax highlighting"),
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
) -> None:
    """Format a command across multiple lines."""
    from shinycmd.layout import prettify

    command = _read_command(words)
    config = _layout_config(project_dir, width, indent_size, flags_on_new_line, no_color)
    _print_command(prettify(command, config, color_system=_color_system()))


@app.command()
def check(
    words: list[str] = typer.Argument(None, help="Command to check (quote it); reads stdin if omitted"),
    threshold: int = typer.Option(None, "--threshold", "-t", help="Length threshold"),
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
) -> None:
    """Tell whether a command should be prettified. Exit code 1 means no."""
    from shinycmd.config import load_config, validate_config
    from shinycmd.heuristics import should_prettify

    command = _read_command(words)
    config = load_config(project_dir)
    errors = validate_config(config)
    if errors:
        for e in errors:
            err_console.print(f"[red]Config error: {e}[/red]")
        raise typer.Exit(1)
    if threshold is None:
        threshold = config["threshold"]

    if should_prettify(command, threshold):
        console.print("[green]yes[/green]")
    else:
        console.print("[yellow]no[/yellow]")
        raise typer.Exit(1)


@app.command("preview")
def preview_command(
    words: list[str] = typer.Argument(None, help="Command to preview (quote it); reads stdin if omitted"),
    width: int = typer.Option(None, "--width", "-w", help="Maximum line width"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable syntax highlighting"),
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
) -> None:
    """Show the original command, the prettify decision and the pretty form."""
    from shinycmd.preview import preview

    command = _read_command(words)
    config = _layout_config(project_dir, width, no_color=no_color)
    result = preview(command, config, show_pretty=True, color_system=_color_system())

    console.print(Panel(Text(result.original), title="Original", style="blue"))
    decision = "[green]yes[/green]" if result.should_prettify else "[yellow]no[/yellow]"
    console.print(f"  Should prettify: {decision} ({len(result.original)} characters)")
    if result.pretty is not None:
        console.print(Panel(Text.from_ansi(result.pretty), title="Prettified", style="green"))


@app.command()
def batch(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Commands file (.yaml or one per line)"),
    width: int = typer.Option(None, "--width", "-w", help="Maximum line width"),
    flags_on_new_line: bool = typer.Option(
        None, "--flags-on-new-line/--flags-inline", help="Put every flag on its own line"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable syntax highlighting"),
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
) -> None:
    """Format every command in a file."""
    from shinycmd.commands import load_commands
    from shinycmd.preview import prettify_batch

    try:
        commands = load_commands(file)
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    config = _layout_config(project_dir, width, flags_on_new_line=flags_on_new_line, no_color=no_color)
    results = prettify_batch(commands, config, color_system=_color_system())
    for i, pretty in enumerate(results):
        if i:
            console.print("")
        _print_command(pretty)


@app.command()
def demo(
    no_color: bool = typer.Option(False, "--no-color", help="Disable syntax highlighting"),
) -> None:
    """Walk through the sample commands: analysis, preview, batch, highlighting, flags."""
    from shinycmd.commands import load_samples
    from shinycmd.heuristics import should_prettify
    from shinycmd.layout import prettify
    from shinycmd.preview import preview, prettify_batch

    samples = load_samples()
    config = LayoutConfig(disable_colors=no_color)
    colors = _color_system()

    console.print(Panel("[bold]Shiny Command Line Demo[/bold]", style="blue"))

    table = Table(title="Command Analysis", show_lines=True)
    table.add_column("#", width=3)
    table.add_column("Command")
    table.add_column("Length", width=6)
    table.add_column("Prettify", width=8)
    for i, cmd in enumerate(samples.get("analysis", []), start=1):
        decision = "[green]yes[/green]" if should_prettify(cmd) else "[dim]no[/dim]"
        table.add_row(str(i), Text(cmd), str(len(cmd)), decision)
    console.print(table)

    for cmd in samples.get("analysis", []):
        if should_prettify(cmd):
            console.print("")
            _print_command(prettify(cmd, config, color_system=colors))

    if "preview" in samples:
        result = preview(samples["preview"], config, show_pretty=True, color_system=colors)
        console.print(Panel("[bold]Preview[/bold]", style="blue"))
        console.print(Text(result.original))
        if result.pretty is not None:
            _print_command(result.pretty)

    if "batch" in samples:
        console.print(Panel("[bold]Batch[/bold]", style="blue"))
        for i, pretty in enumerate(prettify_batch(samples["batch"], config, color_system=colors), start=1):
            console.print(f"\n[bold]{i}.[/bold]")
            _print_command(pretty)

    if "highlighting" in samples:
        console.print(Panel("[bold]Syntax Highlighting[/bold]", style="blue"))
        console.print("Without colors:")
        _print_command(prettify(samples["highlighting"], config.replace(disable_colors=True)))
        console.print("\nWith colors:")
        _print_command(prettify(samples["highlighting"], config, color_system=colors))

    if "flags" in samples:
        console.print(Panel("[bold]Flags On New Lines[/bold]", style="blue"))
        _print_command(prettify(samples["flags"], config.replace(flags_on_new_line=True), color_system=colors))


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
    project_dir: Path = typer.Option(Path.cwd(), "--dir", help="Project directory"),
) -> None:
    """Write a .shinycmd/config.json with the default layout options."""
    from shinycmd.config import CONFIG_DIR, CONFIG_FILE, DEFAULT_CONFIG, load_config, save_config, validate_config

    config_path = project_dir / CONFIG_DIR / CONFIG_FILE
    if config_path.exists() and not force:
        config = load_config(project_dir)
        console.print("  [yellow]Merged with existing config[/yellow]")
    else:
        config = DEFAULT_CONFIG.copy()
        console.print("  [green]Created default config[/green]")

    errors = validate_config(config)
    if errors:
        for e in errors:
            console.print(f"  [red]Config error: {e}[/red]")
        raise typer.Exit(1)

    save_config(config, project_dir)
    console.print(f"  Config: [cyan]{config_path}[/cyan]")
