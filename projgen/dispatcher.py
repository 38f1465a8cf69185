"""Generation dispatcher.

Maps a ``FrameworkChoice`` to one generation strategy:

* Next.js, React.js, React Native -- delegate to an ``npx`` scaffolding tool
  running in the background.
* Vanilla -- write three static files, no process execution.
* Node.js -- write an Express server and ``package.json``, then
  ``npm install``.
* MERN Stack -- Express server under ``server/`` with a user-selected
  package set, ``npm install``, then ``create-react-app client`` in the
  background.

Local recipes run their steps strictly in order.  The first failing step
aborts the recipe and is reported on the console; earlier steps are not
undone.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from projgen.config import Config
from projgen.models import FrameworkChoice, Package, ProjectManifest, Strategy
from projgen.prompts import PromptGateway
from projgen.runner import ProcessError, ProcessResult, ProcessRunner
from projgen.scaffolder import FilesystemError, TemplateEmitter, TemplateRenderer
from projgen.utils import (
    console as default_console,
    print_error,
    print_info,
    print_output,
    print_success,
    print_warning,
)

SERVER_DIR = "server"
CLIENT_DIR = "client"

# Arguments passed to ``npx`` for delegated frameworks; the project name is
# appended as the final argument.
SCAFFOLD_ARGS: dict[FrameworkChoice, tuple[str, ...]] = {
    FrameworkChoice.NEXTJS: ("create-next-app@latest",),
    FrameworkChoice.REACTJS: ("create-react-app",),
    FrameworkChoice.REACT_NATIVE: ("create-expo-app", "--template", "blank"),
}


def strategy_for(framework: FrameworkChoice) -> Strategy | None:
    """Return the generation strategy for *framework*.

    ``None`` is only possible for a value outside the enumeration.
    """
    match framework:
        case FrameworkChoice.NEXTJS | FrameworkChoice.REACTJS | FrameworkChoice.REACT_NATIVE:
            return Strategy.DELEGATE
        case FrameworkChoice.VANILLA:
            return Strategy.VANILLA
        case FrameworkChoice.NODEJS:
            return Strategy.NODE
        case FrameworkChoice.MERN_STACK:
            return Strategy.MERN
        case _:
            return None


class GenerationDispatcher:
    """Runs the generation strategy selected for a framework.

    Attributes:
        config: Tool names, output directory and manifest defaults.
        prompts: Gateway used for the MERN package question.
        runner: Executes installs and background scaffolding commands.
        emitter: Creates directories and writes recipe files.
        renderer: Renders the recipe templates.
    """

    def __init__(
        self,
        config: Config,
        prompts: PromptGateway,
        runner: ProcessRunner,
        emitter: TemplateEmitter | None = None,
        renderer: TemplateRenderer | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.prompts = prompts
        self.runner = runner
        self.emitter = emitter or TemplateEmitter()
        self.renderer = renderer or TemplateRenderer()
        self.console = console or default_console

    # -- Public API --------------------------------------------------------

    async def dispatch(self, framework: FrameworkChoice, project_name: str) -> Strategy | None:
        """Generate *project_name* with *framework*.

        Delegated strategies return as soon as the scaffolding command has
        been started.  Local recipes return once their last step is done or
        a step has failed.

        Returns:
            The strategy that ran, or ``None`` for an unknown framework.
        """
        strategy = strategy_for(framework)
        match strategy:
            case Strategy.DELEGATE:
                self._delegate(framework, project_name)
            case Strategy.VANILLA:
                await self._guarded(self._create_vanilla_project(project_name))
            case Strategy.NODE:
                await self._guarded(self._create_node_project(project_name))
            case Strategy.MERN:
                await self._guarded(self._create_mern_project(project_name))
            case _:
                print_error("Invalid choice!", self.console)
        return strategy

    def project_path(self, project_name: str) -> Path:
        """Return the project directory, always inside ``output_dir``.

        An absolute name loses its anchor, so ``/tmp/app`` becomes
        ``<output_dir>/tmp/app``.
        """
        name = Path(project_name)
        if name.anchor:
            name = name.relative_to(name.anchor)
        return Path(self.config.output_dir) / name

    # -- Delegated ---------------------------------------------------------

    def scaffold_command(self, framework: FrameworkChoice, project_name: str) -> list[str]:
        """Return the ``npx`` argv that scaffolds *project_name*."""
        return self.config.npx_command(*SCAFFOLD_ARGS[framework], project_name)

    def _delegate(self, framework: FrameworkChoice, project_name: str) -> None:
        argv = self.scaffold_command(framework, project_name)
        print_info(f"\nGenerating project: {project_name} with {framework.label}...\n", self.console)

        def on_complete(result: ProcessResult) -> None:
            if not result.ok:
                print_error(f"Error: {result.error}", self.console)
                return
            if result.has_warnings:
                print_warning(f"Warnings: {result.stderr}", self.console)
            print_output(result.stdout, self.console)
            print_success(f"\nProject {project_name} created successfully!", self.console)

        self.runner.start(argv, cwd=self.config.output_dir, on_complete=on_complete)

    # -- Local recipes -----------------------------------------------------

    async def _guarded(self, recipe) -> None:
        """Await *recipe*, turning recipe failures into console errors."""
        try:
            await recipe
        except (FilesystemError, ProcessError) as exc:
            print_error(f"Error creating project: {exc}", self.console)

    def _server_module(self, welcome: str) -> str:
        return self.renderer.render(
            "server/server.js.j2",
            {"welcome": welcome, "default_port": self.config.default_port},
        )

    async def _create_vanilla_project(self, project_name: str) -> None:
        print_info(f"Creating Vanilla JavaScript project: {project_name}\n", self.console)
        files = self.renderer.render_tree("vanilla", {"project_name": project_name})
        await self.emitter.emit(self.project_path(project_name), files)
        print_success(f"\nVanilla project {project_name} created successfully!", self.console)

    async def _create_node_project(self, project_name: str) -> None:
        print_info(f"Creating Node.js project: {project_name}\n", self.console)
        project_path = self.project_path(project_name)

        manifest = ProjectManifest.for_node(project_name, self.config.express_version)
        await self.emitter.emit(
            project_path,
            {
                "server.js": self._server_module("Welcome to the Node.js server!"),
                "package.json": manifest.to_json(),
            },
        )

        print_info("\nInstalling dependencies...\n", self.console)
        await self.runner.run_inherited(self.config.install_command(), cwd=project_path)

        print_success(f"\nNode.js project {project_name} created successfully!", self.console)
        print_warning("\nDon't forget to run the server with: npm start", self.console)

    async def _create_mern_project(self, project_name: str) -> None:
        print_info(f"Creating MERN Stack project: {project_name}\n", self.console)
        project_path = self.project_path(project_name)
        server_path = project_path / SERVER_DIR

        await self.emitter.emit(
            project_path,
            {f"{SERVER_DIR}/server.js": self._server_module("Welcome to the MERN Stack server!")},
            subdirs=(SERVER_DIR,),
        )

        packages = await self.prompts.ask_packages()
        manifest = ProjectManifest.for_mern_server(
            project_name, packages, self.config.express_version
        )
        await self.emitter.write_files(server_path, {"package.json": manifest.to_json()})

        print_info("\nInstalling server dependencies...\n", self.console)
        await self.runner.run_inherited(self.config.install_command(), cwd=server_path)

        print_info("\nCreating React frontend...\n", self.console)
        self.runner.start(
            self.config.npx_command("create-react-app", CLIENT_DIR),
            cwd=project_path,
            on_complete=self._mern_client_reporter(project_name, packages),
        )

    def _mern_client_reporter(self, project_name: str, packages: frozenset[Package]):
        def on_complete(result: ProcessResult) -> None:
            if not result.ok:
                print_error(f"Error creating React app: {result.error}", self.console)
                return
            if result.has_warnings:
                print_warning(f"Warnings: {result.stderr}", self.console)
            print_output(result.stdout, self.console)
            print_success(
                f"\nMERN Stack project {project_name} created successfully!", self.console
            )
            print_warning(f"\nNavigate to your project with: cd {project_name}", self.console)
            if packages:
                print_info("\nAll selected packages have been installed!", self.console)

        return on_complete
