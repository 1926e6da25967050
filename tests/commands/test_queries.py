"""End-to-end tests for the query commands against project files on disk."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from projdeps.cli import cli


def _invoke(runner: CliRunner, *args: str) -> Result:
    return runner.invoke(cli, list(args))


class TestTreeCommand:
    def test_full_tree(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "tree", "--path", str(solution_root))
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "A",
            "  B",
            "    C",
            "      P2",
            "  P1",
            "B",
            "  C",
            "    P2",
            "C",
            "  P2",
        ]
        assert result.stderr == ""

    def test_command_and_options_case_insensitive(
        self, cli_runner: CliRunner, solution_root: Path
    ) -> None:
        result = _invoke(cli_runner, "ENTRY", "--Path", str(solution_root), "--SOURCE", "b")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["B", "  C", "    P2"]

    def test_cycle(
        self, cli_runner: CliRunner, tmp_path: Path, write_project: Callable[..., Path]
    ) -> None:
        write_project(tmp_path, "X", projects=["Y"])
        write_project(tmp_path, "Y", projects=["X"])
        result = _invoke(cli_runner, "entry", "--path", str(tmp_path), "--source", "X")
        assert result.stdout.splitlines() == ["X", "  Y", "    X"]

    def test_assembly_name_used_as_identifier(
        self, cli_runner: CliRunner, tmp_path: Path, write_project: Callable[..., Path]
    ) -> None:
        write_project(tmp_path, "Web", assembly_name="Company.Web", projects=["Core"])
        write_project(tmp_path, "Core", packages=["Dapper"])
        result = _invoke(cli_runner, "tree", "--path", str(tmp_path))
        assert result.stdout.splitlines() == [
            "Company.Web",
            "  Core",
            "    Dapper",
            "Core",
            "  Dapper",
        ]


class TestEntryCommands:
    def test_entry_not_found(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "entry", "--path", str(solution_root), "--source", "Zzz")
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr.strip() == "Project 'Zzz' not found."

    def test_entry_simple(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(
            cli_runner, "entry-simple", "--path", str(solution_root), "--source", "A"
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Projects:",
            "  B",
            "  C",
            "NuGet Packages:",
            "  P1",
            "  P2",
        ]


class TestDependsOnCommand:
    def test_filtered_trees(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "depends-on", "--path", str(solution_root), "--target", "P1")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["A", "  P1"]

    def test_target_not_found(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "depends-on", "--path", str(solution_root), "--target", "Q")
        assert result.stderr.strip() == "Target 'Q' not found."


class TestPathCommand:
    def test_path(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(
            cli_runner, "path", "--path", str(solution_root), "--source", "A", "--target", "P2"
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "A -> B -> C -> P2"

    def test_no_path(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(
            cli_runner, "path", "--path", str(solution_root), "--source", "C", "--target", "A"
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "No path from 'C' to 'A' found."


class TestOptionValidation:
    def test_missing_path(self, cli_runner: CliRunner) -> None:
        result = _invoke(cli_runner, "tree")
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr.strip() == (
            "Unhandled error: Invalid or missing path. "
            "Use --path <folder> to specify the solution directory."
        )

    def test_path_must_exist(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = _invoke(cli_runner, "tree", "--path", str(tmp_path / "nope"))
        assert "Invalid or missing path" in result.stderr

    def test_path_checked_before_required_options(self, cli_runner: CliRunner) -> None:
        result = _invoke(cli_runner, "path")
        assert "Invalid or missing path" in result.stderr
        assert "required" not in result.stderr

    @pytest.mark.parametrize(
        ("args", "message"),
        [
            (["entry"], "Error: --source is required for 'entry'."),
            (["entry-simple"], "Error: --source is required for 'entry-simple'."),
            (["depends-on"], "Error: --target is required for 'depends-on'."),
            (["path", "--source", "A"], "Error: --source and --target are required for 'path'."),
            (["path", "--target", "A"], "Error: --source and --target are required for 'path'."),
        ],
    )
    def test_missing_required_option(
        self, cli_runner: CliRunner, solution_root: Path, args: list[str], message: str
    ) -> None:
        result = _invoke(cli_runner, *args, "--path", str(solution_root))
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr.strip() == message

    def test_missing_option_value(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "entry", "--path", str(solution_root), "--source")
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr.strip() == "Unhandled error: Missing value for --source"

    def test_flag_given_a_value(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "entry", "--path", str(solution_root), "--examples=x")
        assert result.exit_code == 0
        assert result.stdout == ""
        assert "Missing value" not in result.stderr
        assert "--examples' does not take a value" in result.stderr
        assert result.stderr.startswith("Unhandled error: ")

    def test_unknown_option_is_a_warning(self, cli_runner: CliRunner, solution_root: Path) -> None:
        result = _invoke(cli_runner, "tree", "--path", str(solution_root), "--depth", "3")
        assert result.exit_code == 0
        assert "Unknown option --depth" in result.stderr
        assert result.stdout.splitlines()[0] == "A"


class TestErrors:
    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = _invoke(cli_runner, "graph", "--path", ".")
        assert result.exit_code == 0
        assert "Unknown command: graph" in result.stderr
        assert "Usage:" in result.stdout

    def test_unknown_leading_option(self, cli_runner: CliRunner) -> None:
        result = _invoke(cli_runner, "-x", "tree", "--path", ".")
        assert result.exit_code == 0
        assert "Unknown command: -x" in result.stderr
        assert "Usage:" in result.stdout

    def test_malformed_project_file(
        self, cli_runner: CliRunner, tmp_path: Path, write_project: Callable[..., Path]
    ) -> None:
        write_project(tmp_path, "Good")
        (tmp_path / "Bad.csproj").write_text("<Project>", encoding="utf-8")
        result = _invoke(cli_runner, "tree", "--path", str(tmp_path))
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr.startswith("Unhandled error: Failed to parse")
        assert "Traceback" not in result.stderr

    def test_unreadable_directory(
        self,
        cli_runner: CliRunner,
        tmp_path: Path,
        write_project: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        write_project(tmp_path, "A")
        write_project(tmp_path / "locked", "B")
        real_scandir = os.scandir

        def scandir(path: str | os.PathLike[str]) -> object:
            if Path(path).name == "locked":
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        result = _invoke(cli_runner, "tree", "--path", str(tmp_path))
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr.startswith("Unhandled error: ")
        assert "Permission denied" in result.stderr

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = _invoke(cli_runner, "path", "--examples")
        assert result.exit_code == 0
        assert "projdeps path --path" in result.stdout
