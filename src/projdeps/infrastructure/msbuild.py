"""MSBuild project file parsing.

Reads the three things the dependency graph needs from a project file:

- the logical name (first ``AssemblyName`` element, else the file stem),
- ``ProjectReference`` includes, reduced to the referenced file's stem,
- ``PackageReference`` includes, used verbatim.

Elements are matched by local name, so both SDK-style files and legacy
files declaring the MSBuild XML namespace are understood.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path, PureWindowsPath

from projdeps.domain.records import UnitRecord
from projdeps.errors import ProjectFileError


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _elements(root: ET.Element, name: str) -> Iterator[ET.Element]:
    for element in root.iter():
        if isinstance(element.tag, str) and _local_name(element.tag) == name:
            yield element


def reference_stem(include: str) -> str:
    """Return the file stem of a project reference path.

    Accepts both ``\\`` and ``/`` separators, since project files written on
    Windows use backslashes.

    >>> reference_stem(r"..\\Core\\Core.csproj")
    'Core'
    """
    return PureWindowsPath(include.strip()).stem


def parse_project_xml(
    text: str | bytes, *, fallback_name: str, source: str | None = None
) -> UnitRecord:
    """Build a :class:`UnitRecord` from project file XML *text*.

    Raw bytes are decoded by the XML parser itself, which honours a byte
    order mark and the encoding named in the XML declaration.

    Raises:
        ProjectFileError: If *text* is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ProjectFileError(source or fallback_name, str(exc)) from exc

    identifier = fallback_name
    for element in _elements(root, "AssemblyName"):
        if element.text and element.text.strip():
            identifier = element.text.strip()
        break

    project_refs: list[str] = []
    for element in _elements(root, "ProjectReference"):
        include = element.get("Include")
        if include is None:
            continue
        project_refs.append(reference_stem(include))

    package_refs: list[str] = []
    for element in _elements(root, "PackageReference"):
        package_id = (element.get("Include") or "").strip()
        if package_id:
            package_refs.append(package_id)

    return UnitRecord(
        identifier=identifier,
        project_refs=tuple(project_refs),
        package_refs=tuple(package_refs),
        source=source,
    )


def parse_project_file(path: Path) -> UnitRecord:
    """Read and parse the project file at *path*.

    Raises:
        ProjectFileError: If the file cannot be read or is malformed.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ProjectFileError(str(path), str(exc)) from exc
    return parse_project_xml(data, fallback_name=path.stem, source=str(path))
