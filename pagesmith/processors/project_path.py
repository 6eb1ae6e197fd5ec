"""Project root detection for template directories"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pagesmith.config import get_settings

# Deepest ancestor chain inspected before giving up
MAX_DEPTH = 20


class ProjectPath:
    """Locate the project directory a template directory belongs to.

    A project directory is a directory whose name is one of the configured
    markers (``.pagesmith`` or ``_pagesmith`` by default). It is found either
    by being the given path or one of its parents, or by sitting next to one
    of them as a child.
    """

    def __init__(
        self,
        path: str | Path,
        markers: Iterable[str] | None = None,
        max_depth: int = MAX_DEPTH,
    ):
        self.path = Path(path)
        self.markers = (
            tuple(markers) if markers is not None else get_settings().project_markers
        )
        self.max_depth = max_depth

    def get(self) -> Path | None:
        """Return the project directory, or None outside a project"""
        current = self.path.expanduser().resolve()
        for _ in range(self.max_depth):
            if current.name in self.markers and current.is_dir():
                return current
            for marker in self.markers:
                candidate = current / marker
                if candidate.is_dir():
                    return candidate
            if current.parent == current:
                break
            current = current.parent
        return None

    def __str__(self) -> str:
        project = self.get()
        return "" if project is None else str(project)
