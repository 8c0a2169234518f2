"""Relevance rules deciding which module files feed extraction."""

from __future__ import annotations

from typing import FrozenSet, Tuple

CONTROLLER_DIR = "src/Controller/"
FORM_DIR = "src/Form/"

_RELEVANT_PREFIXES: Tuple[str, ...] = (
    CONTROLLER_DIR,
    FORM_DIR,
    "src/Plugin/",
    "src/Entity/",
    "src/Utility/",
    "config/install/",
)

_RELEVANT_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        ".php",
        ".module",
        ".install",
        ".inc",
        ".theme",
        ".profile",
        ".yml",
        ".yaml",
        ".twig",
        ".js",
    }
)


class FileClassifier:
    """Accepts paths under conventional directories or with known extensions."""

    def __init__(
        self,
        prefixes: Tuple[str, ...] = _RELEVANT_PREFIXES,
        extensions: FrozenSet[str] = _RELEVANT_EXTENSIONS,
    ) -> None:
        self.prefixes = prefixes
        self.extensions = frozenset(ext.lower() for ext in extensions)

    def accepts(self, relative_path: str, extension: str) -> bool:
        """Return True when the file should be scanned for symbols."""
        norm = relative_path.replace("\\", "/")
        if norm.startswith(self.prefixes):
            return True
        return extension.lower() in self.extensions


__all__ = ["CONTROLLER_DIR", "FORM_DIR", "FileClassifier"]
