"""
Main CLI application for HTML CLI.

Provides a Typer-based command-line interface for viewing and editing
simplified HTML documents.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from ..config import get_config_manager, load_config
from ..core.html_editor import HtmlEditor
from ..core.tree_handler import TreeHandler
from ..spelling.spell_checker import SpellChecker

# Initialize Typer app
app = typer.Typer(
    name="html-cli",
    help="Line-oriented HTML document editor with undo/redo",
    add_completion=False,
    rich_markup_mode="rich"
)

# Global console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Configure logging for every command."""
    level = "DEBUG" if verbose else load_config().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def _open_document(file_path: Path) -> HtmlEditor:
    if not file_path.exists():
        console.print(f"[red]Error: File not found: {file_path}[/red]")
        raise typer.Exit(1)

    editor = HtmlEditor()
    editor.read(file_path)
    return editor


@app.command()
def shell() -> None:
    """
    Start the interactive editor.

    Documents are loaded from and saved to the configured files folder;
    the list of open documents is kept between runs.
    """
    from ..session.interactive import InteractiveSession

    session = InteractiveSession(load_config(), console)
    try:
        asyncio.run(session.run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interactive session ended[/yellow]")


@app.command()
def tree(
    file_path: Path = typer.Argument(..., help="HTML file to show"),
    show_id: Optional[bool] = typer.Option(None, "--show-id/--no-show-id", help="Append #id to element labels"),
    indent: Optional[int] = typer.Option(None, "--indent", "-i", help="Use plain indentation of this width instead of connectors"),
    spell_check: bool = typer.Option(False, "--spell-check", help="Mark elements with spelling problems"),
) -> None:
    """
    Show a document as a decorated tree.
    """
    config = load_config()
    editor = _open_document(file_path)

    if spell_check:
        report = asyncio.run(editor.spell_check(SpellChecker(config.spell_check)))
        console.print(report, markup=False, highlight=False)

    output = editor.print_tree(
        show_id=config.editor.show_id if show_id is None else show_id,
        mark_error=spell_check,
        use_symbols=indent is None,
        indent_size=indent if indent is not None else config.editor.tree_indent_size,
    )
    console.print(output, markup=False, highlight=False, end="")


@app.command()
def indent(
    file_path: Path = typer.Argument(..., help="HTML file to show"),
    indent_size: Optional[int] = typer.Option(None, "--indent", "-i", help="Spaces per nesting level"),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the result to a file"),
) -> None:
    """
    Show (or rewrite) a document as nested, indented HTML.
    """
    config = load_config()
    editor = _open_document(file_path)
    size = indent_size if indent_size is not None else config.editor.indent_size

    if output_file:
        editor.save(output_file, size)
        console.print(f"[green]Saved to {output_file}[/green]")
        return

    console.print(Syntax(editor.print_indent(size), "html", theme="monokai"))


@app.command("spell-check")
def spell_check(
    file_path: Path = typer.Argument(..., help="HTML file to check"),
) -> None:
    """
    Check the spelling of every element's text.
    """
    config = load_config()
    editor = _open_document(file_path)

    report = asyncio.run(editor.spell_check(SpellChecker(config.spell_check)))
    console.print(Panel(report, title="Spell Check", border_style="blue"))


@app.command()
def validate(
    file_path: Path = typer.Argument(..., help="HTML file to validate"),
) -> None:
    """
    Check a document's tree invariants after parsing.
    """
    editor = _open_document(file_path)
    issues = TreeHandler(editor.root).validate_structure()

    if not issues:
        console.print("[green]Document structure is valid[/green]")
        return

    for issue in issues:
        console.print(f"  • {issue}", markup=False)
    raise typer.Exit(1)


@app.command()
def info() -> None:
    """
    Show information about HTML CLI.
    """
    config_info = get_config_manager().get_config_info()

    info_text = f"""[bold cyan]HTML CLI - Structured HTML Document Editing[/bold cyan]

[bold]Current Configuration:[/bold]
• Indent Size: {config_info['indent_size']}
• Show IDs: {config_info['show_id']}
• Spell Check: {'✓ Enabled' if config_info['spell_check_enabled'] else '✗ Disabled'} ({config_info['spell_check_url']})
• Files Folder: {config_info['files_dir']}
• Config File: {'✓ Exists' if config_info['config_exists'] else '✗ Not Found'}

[bold]Commands:[/bold]
• [cyan]html-cli shell[/cyan] - Start the interactive editor
• [cyan]html-cli tree <file>[/cyan] - Show a document as a tree
• [cyan]html-cli indent <file>[/cyan] - Show a document as indented HTML
• [cyan]html-cli spell-check <file>[/cyan] - Check spelling
• [cyan]html-cli validate <file>[/cyan] - Check document structure
    """

    console.print(Panel(info_text, border_style="blue"))


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    create_default: bool = typer.Option(False, "--create-default", help="Create default config file"),
    set_indent: Optional[int] = typer.Option(None, "--set-indent", help="Set the default indent size"),
    set_show_id: Optional[bool] = typer.Option(None, "--set-show-id/--set-hide-id", help="Show ids in tree views by default"),
) -> None:
    """
    Manage HTML CLI configuration.
    """
    config_manager = get_config_manager()

    if create_default:
        path = config_manager.create_default_config()
        console.print(f"Created default configuration at {path}")
        return

    if show:
        current_config = load_config()
        config_display = f"""[bold]HTML CLI Configuration[/bold]

[bold cyan]Editor Settings:[/bold cyan]
• Indent Size: {current_config.editor.indent_size}
• Show IDs: {current_config.editor.show_id}
• Tree Indent Size: {current_config.editor.tree_indent_size}
• Use Symbols: {current_config.editor.use_symbols}

[bold yellow]Spell Check:[/bold yellow]
• Enabled: {current_config.spell_check.enabled}
• API URL: {current_config.spell_check.api_url}
• Language: {current_config.spell_check.language}
• Categories: {', '.join(current_config.spell_check.categories)}

[bold green]Session:[/bold green]
• Files Folder: {current_config.session.files_dir}
• State Folder: {current_config.session.state_dir}

[bold magenta]Files:[/bold magenta]
• Config File: {config_manager.config_file}
• Exists: {'Yes' if config_manager.config_file.exists() else 'No'}"""

        console.print(Panel(config_display, border_style="green"))
        return

    if set_indent is not None or set_show_id is not None:
        current_config = load_config()

        if set_indent is not None:
            if set_indent < 0:
                console.print("[red]Indent size must not be negative[/red]")
                raise typer.Exit(1)
            current_config.editor.indent_size = set_indent
            console.print(f"[green]Set indent size to {set_indent}[/green]")

        if set_show_id is not None:
            current_config.editor.show_id = set_show_id
            console.print(f"[green]Set show ids to {set_show_id}[/green]")

        config_manager.save_config(current_config)
        console.print("[green]Configuration saved[/green]")
        return

    console.print("Use [cyan]html-cli config --show[/cyan] to see full configuration")
    console.print("Use [cyan]html-cli config --create-default[/cyan] to create a default config file")


if __name__ == "__main__":
    app()
