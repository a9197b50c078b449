"""Tests for the generator orchestrator."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from pptb_scaffold.config.schema import ScaffoldConfig
from pptb_scaffold.generator import Generator, GeneratorOptions, GeneratorState
from pptb_scaffold.prompts import FieldOverrides


@pytest.fixture
def which_all():
    """Pretend every executable is on PATH."""
    with patch("shutil.which", side_effect=lambda cmd: f"/usr/bin/{cmd}"):
        yield


@pytest.fixture
def mock_run(which_all):
    """Record subprocess calls instead of running them."""
    with patch(
        "subprocess.run", return_value=subprocess.CompletedProcess([], 0, "", "")
    ) as run:
        yield run


class TestEndToEnd:
    """Full runs with subprocesses mocked."""

    def test_html_scenario(
        self, tmp_path: Path, mock_run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the HTML stack from selection to finalize."""
        options = GeneratorOptions(
            destination="demo",
            tool_type="html",
            overrides=FieldOverrides(
                display_name="Demo",
                identifier="demo-tool",
                package_manager="npm",
                git_init=True,
            ),
            quick=True,
        )
        result = Generator(options, cwd=tmp_path).run()

        destination = tmp_path / "demo"
        assert result.succeeded
        assert result.state == GeneratorState.DONE
        assert result.destination == destination.resolve()
        manifest = json.loads((destination / "package.json").read_text())
        assert manifest["name"] == "demo-tool"
        assert (destination / ".gitignore").is_file()

        commands = [call.args[0] for call in mock_run.call_args_list]
        assert commands == [
            ["/usr/bin/npm", "install"],
            ["/usr/bin/git", "init", "--quiet"],
        ]
        for call in mock_run.call_args_list:
            assert call.kwargs["cwd"] == destination.resolve()

        output = capsys.readouterr().out
        assert "Your tool has been created!" in output
        assert "cd demo" in output
        assert "npm run build" in output
        assert "Your HTML/TypeScript tool is ready!" in output

    def test_current_directory_has_no_cd_line(
        self, tmp_path: Path, mock_run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that no cd instruction is printed when generating in place."""
        options = GeneratorOptions(
            destination=".",
            tool_type="react",
            quick=True,
            overrides=FieldOverrides(git_init=False),
        )
        result = Generator(options, cwd=tmp_path).run()

        assert result.succeeded
        assert result.destination == tmp_path.resolve()
        assert (tmp_path / "src" / "App.tsx").is_file()
        assert "cd " not in capsys.readouterr().out
        assert len(mock_run.call_args_list) == 1

    def test_quick_mode_uses_folder_name(self, tmp_path: Path, mock_run) -> None:
        """Test that quick mode names the tool after the destination folder."""
        options = GeneratorOptions(destination="widgets", tool_type="vue", quick=True)
        result = Generator(options, cwd=tmp_path).run()

        assert result.config is not None
        assert result.config.display_name == "widgets"
        assert result.config.identifier == "pptb-widgets"
        manifest = json.loads((tmp_path / "widgets" / "package.json").read_text())
        assert manifest["displayName"] == "widgets"

    def test_missing_destination_uses_display_name(
        self, tmp_path: Path, mock_run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that the project folder defaults to the display name."""
        options = GeneratorOptions(
            tool_type="svelte",
            quick=True,
            overrides=FieldOverrides(display_name="My Tool"),
        )
        result = Generator(options, cwd=tmp_path).run()

        assert result.destination == tmp_path.resolve() / "My Tool"
        assert (tmp_path / "My Tool" / "src" / "App.svelte").is_file()
        assert "cd My Tool" in capsys.readouterr().out

    @pytest.mark.parametrize("display_name", ["..", ".", "..."])
    def test_dot_display_name_stays_inside_cwd(
        self, tmp_path: Path, mock_run, display_name: str
    ) -> None:
        """Test that a dot-only display name cannot escape the working folder."""
        cwd = tmp_path / "work"
        cwd.mkdir()
        options = GeneratorOptions(
            tool_type="html",
            quick=True,
            overrides=FieldOverrides(display_name=display_name, identifier="dots"),
        )
        result = Generator(options, cwd=cwd).run()

        assert result.succeeded
        assert result.destination == cwd.resolve() / "dots"
        assert (cwd / "dots" / "package.json").is_file()
        assert not (tmp_path / "package.json").exists()
        assert not (cwd / "package.json").exists()

    def test_config_defaults_apply(self, tmp_path: Path, mock_run) -> None:
        """Test that config file defaults feed the resolver and install step."""
        defaults = ScaffoldConfig(
            package_manager="pnpm", git_init=False, skip_install=True
        )
        options = GeneratorOptions(destination="tool", tool_type="vue", quick=True)
        result = Generator(options, defaults=defaults, cwd=tmp_path).run()

        assert result.succeeded
        assert result.config is not None
        assert result.config.package_manager == "pnpm"
        mock_run.assert_not_called()
        assert not (tmp_path / "tool" / ".gitignore").exists()


class TestAborts:
    """Runs that stop before completion."""

    def test_unknown_alias_writes_nothing(
        self, tmp_path: Path, mock_run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an unknown alias aborts before touching the filesystem."""
        options = GeneratorOptions(destination="out", tool_type="foo", quick=True)
        result = Generator(options, cwd=tmp_path).run()

        assert result.aborted
        assert result.state == GeneratorState.SELECT_TEMPLATE
        assert list(tmp_path.iterdir()) == []
        mock_run.assert_not_called()
        output = capsys.readouterr().out
        assert "Invalid tool type: foo" in output
        assert "Possible types are:" in output

    def test_invalid_identifier_override_aborts(
        self, tmp_path: Path, mock_run
    ) -> None:
        """Test that a bad --tool-id aborts without prompting."""
        options = GeneratorOptions(
            destination="out",
            tool_type="vue",
            overrides=FieldOverrides(display_name="Demo", identifier="Bad Id"),
        )
        result = Generator(options, cwd=tmp_path).run()

        assert result.aborted
        assert result.state == GeneratorState.RESOLVE_FIELDS
        assert not (tmp_path / "out").exists()
        mock_run.assert_not_called()

    def test_collision_aborts_without_install(
        self, tmp_path: Path, mock_run, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a write failure stops the run before install."""
        destination = tmp_path / "out"
        destination.mkdir()
        (destination / "package.json").write_text("{}")

        options = GeneratorOptions(destination="out", tool_type="html", quick=True)
        result = Generator(options, cwd=tmp_path).run()

        assert result.aborted
        assert result.state == GeneratorState.MATERIALIZE
        assert not result.succeeded
        mock_run.assert_not_called()
        assert "Error:" in capsys.readouterr().out


class TestSubprocessResults:
    """Install and git init failures never abort the run."""

    def test_failed_install_still_finishes(self, tmp_path: Path, which_all) -> None:
        """Test that non-zero exit codes are not fatal."""
        with patch(
            "subprocess.run", return_value=subprocess.CompletedProcess([], 1, "", "")
        ):
            result = Generator(
                GeneratorOptions(destination="out", tool_type="html", quick=True),
                cwd=tmp_path,
            ).run()

        assert result.succeeded

    def test_missing_tools_only_warn(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that missing npm and git are reported and skipped."""
        with (
            patch("shutil.which", return_value=None),
            patch("subprocess.run") as run,
        ):
            result = Generator(
                GeneratorOptions(destination="out", tool_type="html", quick=True),
                cwd=tmp_path,
            ).run()

        assert result.succeeded
        run.assert_not_called()
        output = capsys.readouterr().out
        assert "npm was not found in PATH" in output
        assert "git was not found in PATH" in output

    def test_skip_install_option(self, tmp_path: Path, mock_run) -> None:
        """Test that --skip-install leaves only git init."""
        result = Generator(
            GeneratorOptions(
                destination="out", tool_type="html", quick=True, skip_install=True
            ),
            cwd=tmp_path,
        ).run()

        assert result.succeeded
        commands = [call.args[0] for call in mock_run.call_args_list]
        assert commands == [["/usr/bin/git", "init", "--quiet"]]
