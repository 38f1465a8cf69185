"""projgen configuration.

Typed configuration for a generation run. Settings use a Pydantic v2 model so
they are validated at construction time and can be filled in from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global projgen configuration.

    Created once by the CLI entry point and passed to the dispatcher, which
    reads the tool names and manifest defaults from it.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory in which project folders are created",
    )
    npm: str = Field(default="npm", description="Executable used to install dependencies")
    npx: str = Field(default="npx", description="Executable used to run scaffolding tools")
    express_version: str = Field(default="^4.17.1")
    default_port: int = Field(default=5000, ge=1, le=65535)
    clear_screen: bool = Field(default=True)

    # ------------------------------------------------------------------
    # Command builders
    # ------------------------------------------------------------------

    def install_command(self) -> list[str]:
        """Return the argv used to install a generated project's dependencies."""
        return [self.npm, "install"]

    def npx_command(self, *args: str) -> list[str]:
        """Return an ``npx`` argv with *args* appended."""
        return [self.npx, *args]

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROJGEN_OUTPUT_DIR, PROJGEN_NPM, PROJGEN_NPX,
            PROJGEN_EXPRESS_VERSION, PROJGEN_DEFAULT_PORT, PROJGEN_NO_CLEAR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PROJGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["PROJGEN_OUTPUT_DIR"])
        if os.environ.get("PROJGEN_NPM"):
            kwargs["npm"] = os.environ["PROJGEN_NPM"]
        if os.environ.get("PROJGEN_NPX"):
            kwargs["npx"] = os.environ["PROJGEN_NPX"]
        if os.environ.get("PROJGEN_EXPRESS_VERSION"):
            kwargs["express_version"] = os.environ["PROJGEN_EXPRESS_VERSION"]
        if os.environ.get("PROJGEN_DEFAULT_PORT"):
            kwargs["default_port"] = int(os.environ["PROJGEN_DEFAULT_PORT"])
        if os.environ.get("PROJGEN_NO_CLEAR", "").lower() in ("1", "true", "yes"):
            kwargs["clear_screen"] = False

        return cls(**kwargs)
