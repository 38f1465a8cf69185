"""End-to-end runs of the projgen CLI against a temporary directory.

No Node.js tooling is required: local recipes that install dependencies have
``run_inherited`` patched, and delegated scaffolding points ``npx`` at the
Python interpreter so the command fails quickly and predictably.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from projgen.cli import build_parser, main, run
from projgen.config import Config
from projgen.models import FrameworkChoice
from projgen.runner import ProcessRunner


@pytest.mark.integration
class TestRun:
    async def test_vanilla_from_prompts(self, config, console, output_dir: Path, console_text, scripted_gateway):
        gateway = scripted_gateway("5", "site")
        await run(config, prompts=gateway, console=console)

        files = sorted(p.name for p in (output_dir / "site").iterdir())
        assert files == ["app.js", "index.html", "style.css"]
        output = console_text(console)
        assert "Welcome to Project Generator CLI!" in output
        assert "Vanilla project site created successfully!" in output

    async def test_empty_name_reprompts_before_generating(self, config, console, output_dir: Path, console_text, scripted_gateway):
        gateway = scripted_gateway("Vanilla", "", "site")
        await run(config, prompts=gateway, console=console)
        assert "Project name cannot be empty!" in console_text(console)
        assert [p.name for p in output_dir.iterdir()] == ["site"]

    async def test_node_with_patched_install(self, config, console, output_dir: Path):
        with patch.object(ProcessRunner, "run_inherited", new=AsyncMock(return_value=None)) as install:
            await run(config, FrameworkChoice.NODEJS, "demo", console=console)

        install.assert_awaited_once()
        manifest = json.loads((output_dir / "demo" / "package.json").read_text(encoding="utf-8"))
        assert manifest["dependencies"] == {"express": "^4.17.1"}

    async def test_mern_with_patched_commands(self, config, console, output_dir: Path, console_text, scripted_gateway):
        config.npx = sys.executable
        gateway = scripted_gateway("mongoose, dotenv")
        with patch.object(ProcessRunner, "run_inherited", new=AsyncMock(return_value=None)):
            await run(config, FrameworkChoice.MERN_STACK, "shop", prompts=gateway, console=console)

        manifest = json.loads((output_dir / "shop" / "server" / "package.json").read_text(encoding="utf-8"))
        assert set(manifest["dependencies"]) == {"express", "mongoose", "dotenv"}
        # The client step ran in the background and was drained before run() returned.
        assert "Error creating React app" in console_text(console)

    async def test_delegated_failure_is_a_message(self, config, console, console_text):
        config.npx = sys.executable
        await run(config, FrameworkChoice.REACTJS, "web", console=console)
        output = console_text(console)
        assert "Generating project: web with React.js..." in output
        assert "Error: Command failed" in output


@pytest.mark.integration
class TestMain:
    def test_flags_skip_prompts(self, tmp_path: Path, capsys):
        with patch.dict("os.environ", {}, clear=True):
            main(["-f", "Vanilla", "-n", "site", "-o", str(tmp_path), "--no-clear"])
        assert (tmp_path / "site" / "index.html").is_file()
        assert "Vanilla project site created successfully!" in capsys.readouterr().out

    def test_env_output_dir(self, tmp_path: Path):
        env = {"PROJGEN_OUTPUT_DIR": str(tmp_path), "PROJGEN_NO_CLEAR": "1"}
        with patch.dict("os.environ", env, clear=True):
            main(["--framework", "5", "--name", "page"])
        assert (tmp_path / "page" / "app.js").is_file()

    def test_keyboard_interrupt_exits_130(self, tmp_path: Path):
        with patch("projgen.cli.run", new=AsyncMock(side_effect=KeyboardInterrupt)):
            with pytest.raises(SystemExit) as exc_info:
                main(["-o", str(tmp_path), "--no-clear"])
        assert exc_info.value.code == 130


@pytest.mark.unit
class TestParser:
    def test_framework_by_number_and_label(self):
        parser = build_parser()
        assert parser.parse_args(["-f", "3"]).framework is FrameworkChoice.MERN_STACK
        assert parser.parse_args(["-f", "react native"]).framework is FrameworkChoice.REACT_NATIVE

    def test_unknown_framework(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-f", "Angular"])
        assert exc_info.value.code == 2
        assert "unknown framework" in capsys.readouterr().err

    def test_blank_name_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-n", "   "])

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.framework is None
        assert args.name is None
        assert args.output is None
        assert args.no_clear is False
