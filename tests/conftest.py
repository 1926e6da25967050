"""Shared pytest fixtures for projdeps tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

from projdeps.domain.graph import DependencyGraph
from projdeps.domain.records import UnitRecord
from projdeps.infrastructure.graph.builder import build_graph

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"

type WriteProject = Callable[..., Path]
type MakeGraph = Callable[..., DependencyGraph]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the logging setup each CLI invocation performs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("projdeps")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own projdeps settings out of the tests."""
    for name in ("PROJDEPS_CONFIG", "PROJDEPS_VERBOSE", "PROJDEPS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def render_csproj(
    *,
    assembly_name: str | None = None,
    projects: Sequence[str] = (),
    packages: Sequence[str] = (),
    legacy: bool = False,
) -> str:
    """Render a minimal project file.

    *projects* are written as ``..\\<name>\\<name>.csproj`` includes.
    *legacy* produces an old-style file in the MSBuild XML namespace.
    """
    if legacy:
        root_open = f'<Project ToolsVersion="15.0" xmlns="{MSBUILD_NS}">'
    else:
        root_open = '<Project Sdk="Microsoft.NET.Sdk">'
    lines = ['<?xml version="1.0" encoding="utf-8"?>', root_open]
    lines.append("  <PropertyGroup>")
    lines.append("    <TargetFramework>net8.0</TargetFramework>")
    if assembly_name is not None:
        lines.append(f"    <AssemblyName>{assembly_name}</AssemblyName>")
    lines.append("  </PropertyGroup>")
    lines.append("  <ItemGroup>")
    for name in projects:
        lines.append(f'    <ProjectReference Include="..\\{name}\\{name}.csproj" />')
    for name in packages:
        lines.append(f'    <PackageReference Include="{name}" Version="1.0.0" />')
    lines.append("  </ItemGroup>")
    lines.append("</Project>")
    return "\n".join(lines) + "\n"


@pytest.fixture
def csproj() -> Callable[..., str]:
    """Expose :func:`render_csproj` to test modules."""
    return render_csproj


@pytest.fixture
def write_project() -> WriteProject:
    """Factory writing ``<root>/<name>/<name>.csproj`` and returning its path."""

    def _write(root: Path, name: str, **kwargs: object) -> Path:
        path = root / name / f"{name}.csproj"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_csproj(**kwargs), encoding="utf-8")  # type: ignore[arg-type]
        return path

    return _write


@pytest.fixture
def make_graph() -> MakeGraph:
    """Factory building a graph from ``(identifier, project_refs, package_refs)`` tuples."""

    def _make(*units: tuple[str, Sequence[str], Sequence[str]]) -> DependencyGraph:
        return build_graph(
            UnitRecord(identifier=name, project_refs=tuple(projs), package_refs=tuple(pkgs))
            for name, projs, pkgs in units
        )

    return _make


@pytest.fixture
def sample_graph(make_graph: MakeGraph) -> DependencyGraph:
    """A -> B -> C -> P2 with A -> P1."""
    return make_graph(
        ("A", ["B"], ["P1"]),
        ("B", ["C"], []),
        ("C", [], ["P2"]),
    )


@pytest.fixture
def cycle_graph(make_graph: MakeGraph) -> DependencyGraph:
    """X -> Y -> X."""
    return make_graph(("X", ["Y"], []), ("Y", ["X"], []))


@pytest.fixture
def solution_root(tmp_path: Path, write_project: WriteProject) -> Path:
    """A source tree on disk holding the sample graph as project files."""
    root = tmp_path / "solution"
    write_project(root, "A", projects=["B"], packages=["P1"])
    write_project(root, "B", projects=["C"])
    write_project(root, "C", packages=["P2"])
    return root
