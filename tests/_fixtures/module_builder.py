"""Helper utilities for constructing temporary Drupal modules in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from readmegen.models import ModuleDocument
from readmegen.scanner import ModuleAggregator


class ModuleBuilder:
    """Utility for writing files into a throwaway module and rescanning it."""

    def __init__(self, tmp_path: Path, name: str = "demo") -> None:
        self.root = tmp_path / name
        self.root.mkdir()
        self._aggregator = ModuleAggregator()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the module."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def aggregate(self) -> ModuleDocument:
        """Return a fresh document describing the module contents."""
        return self._aggregator.aggregate(self.root)

    def path(self) -> Path:
        """Return the module root path."""
        return self.root


__all__ = ["ModuleBuilder"]
