"""External process execution for scaffolding and dependency installs.

Two modes are supported:

* ``run_inherited`` -- blocks the calling coroutine until the child exits,
  with the child attached to the controlling terminal.  Used for
  ``npm install`` so interactive installer prompts still work.
* ``start`` -- fire-and-forget.  Output is captured and handed to a
  completion callback once the child exits.  Used for scaffolding tools.

Commands are argv lists and never go through a shell.  There is no timeout
and no retry: a hung child hangs the run.
"""

from __future__ import annotations

import asyncio
import shlex
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from projgen.utils import console as default_console
from projgen.utils import print_error


@dataclass
class ProcessResult:
    """Outcome of a captured child process."""

    argv: list[str]
    exit_code: int = -1
    stdout: str = ""
    stderr: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_warnings(self) -> bool:
        """True when a successful command still wrote to stderr."""
        return self.ok and bool(self.stderr)


class ProcessError(Exception):
    """Raised when a blocking command fails to spawn or exits non-zero."""

    def __init__(self, message: str, result: ProcessResult | None = None):
        self.result = result
        super().__init__(message)


CompletionCallback = Callable[[ProcessResult], None]


def format_command(argv: Sequence[str]) -> str:
    """Render an argv list the way a user would type it."""
    return shlex.join(argv)


class ProcessRunner:
    """Runs external commands and tracks background ones until they finish."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console
        self._pending: set[asyncio.Task[ProcessResult]] = set()

    # -- Captured ----------------------------------------------------------

    async def run(self, argv: Sequence[str], cwd: str | Path | None = None) -> ProcessResult:
        """Run *argv* with captured output.

        Never raises for spawn failures or non-zero exits; those are reported
        through ``ProcessResult.error``.
        """
        result = ProcessResult(argv=list(argv))
        command = format_command(argv)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(cwd) if cwd else None,
            )
        except OSError as exc:
            result.error = f"Failed to start {command}: {exc}"
            return result

        stdout_bytes, stderr_bytes = await process.communicate()
        result.exit_code = process.returncode if process.returncode is not None else -1
        result.stdout = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
        result.stderr = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()

        if result.exit_code != 0:
            message = f"Command failed: {command} (exit code {result.exit_code})"
            if result.stderr:
                message += f"\n{result.stderr}"
            result.error = message
        return result

    # -- Blocking, inherited terminal -------------------------------------

    async def run_inherited(self, argv: Sequence[str], cwd: str | Path | None = None) -> None:
        """Run *argv* attached to the terminal and wait for it to exit.

        Raises:
            ProcessError: If the command cannot be started or exits non-zero.
        """
        command = format_command(argv)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(cwd) if cwd else None,
            )
        except OSError as exc:
            raise ProcessError(
                f"Failed to start {command}: {exc}",
                ProcessResult(argv=list(argv), error=str(exc)),
            ) from exc

        exit_code = await process.wait()
        if exit_code != 0:
            message = f"Command failed: {command} (exit code {exit_code})"
            raise ProcessError(
                message,
                ProcessResult(argv=list(argv), exit_code=exit_code, error=message),
            )

    # -- Background --------------------------------------------------------

    def start(
        self,
        argv: Sequence[str],
        cwd: str | Path | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> asyncio.Task[ProcessResult]:
        """Run *argv* in the background and return immediately.

        *on_complete* receives the ``ProcessResult`` once the child exits.
        Must be called from inside a running event loop.
        """
        task = asyncio.create_task(self._run_and_report(list(argv), cwd, on_complete))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending(self) -> int:
        """Number of background commands that have not finished yet."""
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every background command and its callback has run."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def _run_and_report(
        self,
        argv: list[str],
        cwd: str | Path | None,
        on_complete: CompletionCallback | None,
    ) -> ProcessResult:
        result = await self.run(argv, cwd)
        if on_complete is not None:
            try:
                on_complete(result)
            except Exception as exc:
                print_error(f"Error while reporting {format_command(argv)}: {exc}", self.console)
        return result
