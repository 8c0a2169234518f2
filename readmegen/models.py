"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple

NO_DESCRIPTION = "No description available."


@dataclass(frozen=True)
class ManifestInfo:
    """Declared metadata read from a module's ``*.info.yml`` file."""

    name: str
    description: str = NO_DESCRIPTION
    dependencies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SubmoduleInfo:
    """Name and description of a nested module under ``modules/``."""

    name: str
    description: str = NO_DESCRIPTION


@dataclass(frozen=True)
class FileSymbols:
    """Declarations and role flags extracted from a single file."""

    functions: Tuple[str, ...] = ()
    classes: Tuple[str, ...] = ()
    hooks: Tuple[str, ...] = ()
    is_controller: bool = False
    is_form: bool = False


@dataclass(frozen=True)
class ModuleDocument:
    """Structured summary of a module, built once per pipeline run."""

    name: str
    description: str
    dependencies: Tuple[str, ...] = ()
    files: FrozenSet[str] = field(default_factory=frozenset)
    classes: Tuple[str, ...] = ()
    functions: Tuple[str, ...] = ()
    hooks: Tuple[str, ...] = ()
    controllers: Tuple[str, ...] = ()
    forms: Tuple[str, ...] = ()
    submodules: Tuple[SubmoduleInfo, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Return the canonical, key-ordered representation used for prompting."""
        return {
            "name": self.name,
            "description": self.description,
            "dependencies": list(self.dependencies),
            "files": sorted(self.files),
            "classes": list(self.classes),
            "functions": list(self.functions),
            "hooks": list(self.hooks),
            "controllers": list(self.controllers),
            "forms": list(self.forms),
            "submodules": [
                {"name": submodule.name, "description": submodule.description}
                for submodule in self.submodules
            ],
        }
