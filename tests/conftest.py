"""Shared pytest fixtures for the projgen test suite.

Provides reusable fixtures for:
- A recording Rich console
- A Config rooted in a temporary output directory
- Scripted answer streams for the prompt gateway
- A mocked ProcessRunner that records calls instead of spawning npm / npx
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from projgen.config import Config
from projgen.models import Package
from projgen.prompts import PromptGateway
from projgen.runner import ProcessResult, ProcessRunner


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def console() -> Console:
    """A console that records plain text into a buffer."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


@pytest.fixture
def console_text():
    """Reader for everything printed to a recording console so far."""

    def _read(console: Console) -> str:
        return console.file.getvalue()

    return _read


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> Config:
    """A Config writing into the temporary output directory."""
    return Config(output_dir=output_dir, clear_screen=False)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_gateway(console: Console):
    """Factory for a PromptGateway that reads the given answers, one per line."""

    def _make(*answers: str) -> PromptGateway:
        stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return PromptGateway(console=console, stream=stream)

    return _make


@pytest.fixture
def mock_prompts() -> MagicMock:
    """A gateway mock whose package question selects mongoose and dotenv."""
    prompts = MagicMock(spec=PromptGateway)
    prompts.ask_packages = AsyncMock(
        return_value=frozenset({Package.MONGOOSE, Package.DOTENV})
    )
    return prompts


# ---------------------------------------------------------------------------
# Process runner
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_runner() -> MagicMock:
    """A ProcessRunner mock.

    ``run_inherited`` succeeds; ``start`` records its arguments and returns a
    sentinel.  Tests call the recorded ``on_complete`` themselves to simulate
    the background command finishing.
    """
    runner = MagicMock(spec=ProcessRunner)
    runner.run_inherited = AsyncMock(return_value=None)
    runner.start = MagicMock(return_value=MagicMock(name="task"))
    runner.drain = AsyncMock(return_value=None)
    return runner


@pytest.fixture
def completed():
    """Factory for a successful ProcessResult."""

    def _make(argv: list[str], stdout: str = "", stderr: str = "") -> ProcessResult:
        return ProcessResult(argv=argv, exit_code=0, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture
def failed():
    """Factory for a failed ProcessResult."""

    def _make(argv: list[str], error: str = "Command failed") -> ProcessResult:
        return ProcessResult(argv=argv, exit_code=1, error=error)

    return _make
