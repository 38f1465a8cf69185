"""Interactive questions asked before a project is generated.

Built on ``rich.prompt``.  Each question is a ``Prompt`` subclass whose
``process_response`` either returns a valid answer or raises
``InvalidResponse``, which makes Rich print the message and ask again.
The gateway methods are coroutines so callers can await them like any other
step; each one blocks until the user has answered.
"""

from __future__ import annotations

import re
from typing import Any, TextIO

from rich.console import Console
from rich.prompt import InvalidResponse, Prompt

from projgen.models import FrameworkChoice, Package, PackageSelection
from projgen.utils import console as default_console

EMPTY_NAME_MESSAGE = "Project name cannot be empty!"

_FRAMEWORKS: list[FrameworkChoice] = list(FrameworkChoice)
_PACKAGES: list[Package] = list(Package)


# ---------------------------------------------------------------------------
# Prompt classes
# ---------------------------------------------------------------------------


class FrameworkPrompt(Prompt):
    """Single-select over ``FrameworkChoice`` by number or label.

    A blank answer picks the first framework.
    """

    validate_error_message = "[prompt.invalid]Please select one of the listed frameworks"

    default_choice = FrameworkChoice.NEXTJS

    def process_response(self, value: str) -> Any:
        if not value.strip():
            return self.default_choice
        return parse_framework(value)


class ProjectNamePrompt(Prompt):
    """Free-text project name that must not be empty."""

    def process_response(self, value: str) -> Any:
        name = value.strip()
        if not name:
            raise InvalidResponse(f"[prompt.invalid]{EMPTY_NAME_MESSAGE}")
        return name


class PackagePrompt(Prompt):
    """Multi-select over the MERN package catalog.

    Accepts numbers or names separated by commas or spaces; blank selects
    nothing.
    """

    validate_error_message = "[prompt.invalid]Unknown package"

    def process_response(self, value: str) -> Any:
        selected: set[Package] = set()
        for token in re.split(r"[,\s]+", value.strip()):
            if token:
                selected.add(_lookup(token, _PACKAGES, f"{self.validate_error_message}: {token}"))
        return frozenset(selected)


def parse_framework(value: str) -> FrameworkChoice:
    """Resolve a framework number (1-based) or label.

    Raises:
        InvalidResponse: If *value* names no framework.
    """
    return _lookup(value.strip(), _FRAMEWORKS, FrameworkPrompt.validate_error_message)


def _lookup(token: str, options: list[Any], error: str) -> Any:
    """Resolve a 1-based index or a case-insensitive value from *options*."""
    if token.isdigit():
        index = int(token)
        if 1 <= index <= len(options):
            return options[index - 1]
    for option in options:
        if option.value.lower() == token.lower():
            return option
    raise InvalidResponse(error)


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------


class PromptGateway:
    """Asks the questions of one generation run.

    Args:
        console: Console used to print questions and validation errors.
        stream: Optional file to read answers from instead of stdin.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or default_console
        self.stream = stream

    async def ask_framework(self) -> FrameworkChoice:
        self._print_options("Select a framework for your project:", _FRAMEWORKS)
        return FrameworkPrompt.ask(
            "Framework [dim](1)[/dim]",
            console=self.console,
            stream=self.stream,
        )

    async def ask_project_name(self, framework: FrameworkChoice) -> str:
        return ProjectNamePrompt.ask(
            f"Enter your project name for {framework.label}",
            console=self.console,
            stream=self.stream,
        )

    async def ask_packages(self) -> PackageSelection:
        self._print_options("Select additional packages to add to the server:", _PACKAGES)
        return PackagePrompt.ask(
            "Packages (comma separated, blank for none)",
            console=self.console,
            stream=self.stream,
        )

    def _print_options(self, title: str, options: list[Any]) -> None:
        self.console.print(f"[bold]{title}[/bold]")
        for index, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]. {option.value}")
