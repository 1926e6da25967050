"""Project file discovery.

Walks the scan root recursively, pruning configured directory names, and
returns every file whose name matches one of the configured glob patterns.
Results are sorted by their root-relative POSIX path so repeated scans of
an unchanged tree yield the same order.
"""

from __future__ import annotations

import logging
import os
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING

from projdeps.infrastructure.msbuild import parse_project_file

if TYPE_CHECKING:
    from projdeps.config.models import ScanConfig
    from projdeps.domain.records import UnitRecord

logger = logging.getLogger(__name__)


def _raise(exc: OSError) -> None:
    raise exc


def find_project_files(root: Path, scan: ScanConfig) -> list[Path]:
    """Discover project files below *root* matching ``scan.patterns``.

    Raises:
        OSError: If a directory below *root* cannot be listed.
    """
    skip = frozenset(scan.skip_dirs)
    results: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = [d for d in dirnames if d not in skip]
        for filename in filenames:
            if any(fnmatch(filename, pattern) for pattern in scan.patterns):
                results.append(Path(dirpath) / filename)

    return sorted(results, key=lambda p: p.relative_to(root).as_posix())


def scan_units(root: Path, scan: ScanConfig) -> list[UnitRecord]:
    """Parse every project file below *root* into a :class:`UnitRecord`.

    Parse failures propagate as :class:`~projdeps.errors.ProjectFileError`.
    """
    files = find_project_files(root, scan)
    logger.debug("Found %d project files under %s", len(files), root)
    return [parse_project_file(path) for path in files]
