"""
Interactive command loop for HTML CLI.

Restores the previous session on start, reads commands from the console
until ``exit`` (or end of input) and saves the session state on the way out.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from ..config import HtmlCLIConfig
from .command_handler import CommandHandler
from .file_handler import FileHandler
from .state_manager import SessionStateManager


class InteractiveSession:
    """Console front end around a ``CommandHandler``."""

    def __init__(self, config: Optional[HtmlCLIConfig] = None, console: Optional[Console] = None):
        self.config = config or HtmlCLIConfig()
        self.console = console or Console()
        self.file_handler = FileHandler(self.config.session.files_dir)
        self.state_manager = SessionStateManager(
            self.config.session.state_dir, self.file_handler, self.config.editor.indent_size
        )
        self.session = self.state_manager.load_session()
        self.handler = CommandHandler(self.session, self.config, self.file_handler)
        self.is_running = False

    def _show_welcome(self) -> None:
        self.console.print(Panel(
            "Welcome to the HTML Editor. Type [cyan]help[/cyan] to see available commands.",
            title="html-cli",
            border_style="blue",
        ))

    def _prompt(self) -> str:
        editor = self.session.active_editor
        if editor is None:
            return "[bold cyan]html-cli>[/bold cyan] "
        dirty = " [yellow]●[/yellow]" if editor.is_dirty else ""
        return f"[dim]{editor.file_path}[/dim]{dirty} [bold cyan]>[/bold cyan] "

    async def _get_user_input(self) -> str:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.console.input, self._prompt())

    async def run(self) -> None:
        """Run the loop until ``exit`` or end of input."""
        self.is_running = True
        self._show_welcome()

        try:
            while self.is_running:
                try:
                    command_line = (await self._get_user_input()).strip()
                except EOFError:
                    break
                if not command_line:
                    continue

                result = await self.handler.execute_command(command_line)
                self.console.print(result, markup=False, highlight=False)

                if command_line.lower().startswith("exit"):
                    break
        finally:
            self.is_running = False
            self.state_manager.save_session(self.session)
