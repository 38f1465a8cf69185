"""projgen command-line entry point.

Usage::

    projgen
    projgen --framework "Node.js" --name demo
    python -m projgen -o ~/code --no-clear
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import InvalidResponse

from projgen import __version__
from projgen.config import Config
from projgen.dispatcher import GenerationDispatcher
from projgen.models import FrameworkChoice
from projgen.prompts import PromptGateway, parse_framework
from projgen.runner import ProcessRunner
from projgen.utils import console as default_console
from projgen.utils import print_banner, print_error

WELCOME = "Welcome to Project Generator CLI!"


def _framework_arg(value: str) -> FrameworkChoice:
    """argparse type: a framework number or label."""
    try:
        return parse_framework(value)
    except InvalidResponse as exc:
        choices = ", ".join(f.label for f in FrameworkChoice)
        raise argparse.ArgumentTypeError(f"unknown framework {value!r} (choose from {choices})") from exc


def _name_arg(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("Project name cannot be empty!")
    return value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projgen",
        description="Interactive starter-project generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  projgen\n"
            "  projgen --framework Vanilla --name site\n"
            "  projgen -f 6 -n demo -o ./projects\n"
        ),
    )
    parser.add_argument(
        "--framework", "-f",
        type=_framework_arg,
        default=None,
        help="Framework number or name (asked interactively if omitted)",
    )
    parser.add_argument(
        "--name", "-n",
        type=_name_arg,
        default=None,
        help="Project name (asked interactively if omitted)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Parent directory for the new project (default: current directory)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen before starting",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def run(
    config: Config,
    framework: FrameworkChoice | None = None,
    project_name: str | None = None,
    prompts: PromptGateway | None = None,
    console: Console | None = None,
) -> None:
    """Ask the remaining questions, generate the project, and wait for
    background scaffolding to report back."""
    out = console or default_console
    gateway = prompts or PromptGateway(console=out)
    runner = ProcessRunner(console=out)
    dispatcher = GenerationDispatcher(config, gateway, runner, console=out)

    if config.clear_screen:
        out.clear()
    print_banner(WELCOME, out)

    if framework is None:
        framework = await gateway.ask_framework()
    if project_name is None:
        project_name = await gateway.ask_project_name(framework)

    await dispatcher.dispatch(framework, project_name)
    await runner.drain()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``projgen`` and ``python -m projgen``."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    if args.output is not None:
        config.output_dir = args.output
    if args.no_clear:
        config.clear_screen = False

    try:
        asyncio.run(run(config, framework=args.framework, project_name=args.name))
    except (KeyboardInterrupt, EOFError):
        default_console.print()
        print_error("Aborted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
