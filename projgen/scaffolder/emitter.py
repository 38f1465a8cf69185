"""Literal file emission for the local generation recipes.

The emitter creates a project directory and writes a fixed set of
``(relative path, content)`` pairs into it.  It refuses to touch a directory
that already exists.  Files written before a failure are left in place.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from pathlib import Path


class FilesystemError(Exception):
    """Raised when a project directory or file cannot be created."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class TemplateEmitter:
    """Writes rendered recipe files to disk."""

    async def create_directory(self, path: str | Path) -> Path:
        """Create a single new directory.

        Raises:
            FilesystemError: If *path* already exists or cannot be created.
        """
        target = Path(path)
        try:
            await asyncio.to_thread(target.mkdir)
        except FileExistsError as exc:
            raise FilesystemError(f"Directory already exists: {target}", target) from exc
        except OSError as exc:
            raise FilesystemError(f"Cannot create directory {target}: {exc}", target) from exc
        return target

    async def write_files(
        self,
        base: str | Path,
        files: Mapping[str, str],
    ) -> list[Path]:
        """Write each file under *base*, creating parent folders as needed.

        Returns:
            The written paths, in the order given.

        Raises:
            FilesystemError: On the first file that cannot be written.
        """
        base_path = Path(base)
        written: list[Path] = []
        for rel_path, content in files.items():
            out = base_path / rel_path
            try:
                await asyncio.to_thread(_write_file, out, content)
            except OSError as exc:
                raise FilesystemError(f"Cannot write {out}: {exc}", out) from exc
            written.append(out)
        return written

    async def emit(
        self,
        target: str | Path,
        files: Mapping[str, str],
        subdirs: Iterable[str] = (),
    ) -> list[Path]:
        """Create *target* plus any declared *subdirs*, then write *files*.

        If *target* already exists nothing is written.
        """
        root = await self.create_directory(target)
        for subdir in subdirs:
            await self.create_directory(root / subdir)
        return await self.write_files(root, files)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
