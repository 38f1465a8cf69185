"""Pydantic v2 models and enumerations shared across projgen.

Defines the closed set of frameworks the generator understands, the package
catalog offered for MERN servers, and the ``package.json`` manifest model the
local recipes write to disk.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FrameworkChoice(str, Enum):
    """Frameworks offered by the framework prompt, in display order."""
    NEXTJS = "Next.js"
    REACTJS = "React.js"
    MERN_STACK = "MERN Stack"
    REACT_NATIVE = "React Native"
    VANILLA = "Vanilla"
    NODEJS = "Node.js"

    @property
    def label(self) -> str:
        return self.value


class Package(str, Enum):
    """Optional server packages offered for MERN projects."""
    NODEMON = "nodemon"
    MONGOOSE = "mongoose"
    DOTENV = "dotenv"
    CORS = "cors"
    BCRYPT = "bcrypt"


class Strategy(str, Enum):
    """How a framework's project gets generated."""
    DELEGATE = "delegate"
    VANILLA = "vanilla"
    NODE = "node"
    MERN = "mern"


PackageSelection = frozenset[Package]


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

SELECTED_PACKAGE_VERSION = "latest"


class ManifestScripts(BaseModel):
    """The ``scripts`` block of a generated ``package.json``."""
    start: str = Field(..., description="Plain run command")
    dev: Optional[str] = Field(default=None, description="Development run command")


class ProjectManifest(BaseModel):
    """A generated ``package.json``.

    Built deterministically from the project name and, for MERN servers, the
    user's package selection.  Field order matches the order npm writes.
    """
    name: str
    version: str = "1.0.0"
    main: str = "server.js"
    scripts: ManifestScripts
    dependencies: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def for_node(cls, project_name: str, express_version: str) -> "ProjectManifest":
        """Manifest for a standalone Node.js server project."""
        return cls(
            name=project_name,
            scripts=ManifestScripts(start="node server.js", dev="nodemon server.js"),
            dependencies={"express": express_version},
        )

    @classmethod
    def for_mern_server(
        cls,
        project_name: str,
        packages: Iterable[Package],
        express_version: str,
    ) -> "ProjectManifest":
        """Manifest for the ``server/`` half of a MERN project.

        Every selected package is pinned to ``latest``.  The ``dev`` script
        only uses nodemon when nodemon was selected.
        """
        selected = set(packages)
        dependencies = {"express": express_version}
        # Catalog order keeps the output stable for a given selection.
        for package in Package:
            if package in selected:
                dependencies[package.value] = SELECTED_PACKAGE_VERSION

        dev = "nodemon server.js" if Package.NODEMON in selected else "node server.js"
        return cls(
            name=f"{project_name}-server",
            scripts=ManifestScripts(start="node server.js", dev=dev),
            dependencies=dependencies,
        )

    def to_json(self) -> str:
        """Serialise as a 2-space indented ``package.json`` document."""
        return self.model_dump_json(indent=2, exclude_none=True)
