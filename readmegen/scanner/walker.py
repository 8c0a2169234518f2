"""Recursive traversal of a module directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .classifier import FileClassifier

_EXCLUDED_DIRS = {".git", ".hg", ".svn", "vendor", "node_modules"}


class TreeWalker:
    """Yields absolute paths of every file the classifier accepts."""

    def __init__(self, classifier: FileClassifier | None = None) -> None:
        self.classifier = classifier or FileClassifier()

    def walk(self, root: Path) -> Iterator[Path]:
        # os.walk does not descend into directory symlinks, so the walk stays finite.
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
            current_dir = Path(dirpath)
            for filename in sorted(filenames):
                path = current_dir / filename
                if not path.is_file():
                    continue
                rel_path = path.relative_to(root).as_posix()
                if self.classifier.accepts(rel_path, path.suffix):
                    yield path


__all__ = ["TreeWalker"]
