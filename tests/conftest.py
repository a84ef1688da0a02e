from __future__ import annotations

from pathlib import Path

import pytest


class ProjectBuilder:
    """Creates files and directories below a project root."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def file(self, relative: str, content: str = "") -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def dir(self, relative: str) -> Path:
        path = self.root / relative
        path.mkdir(parents=True, exist_ok=True)
        return path


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)
