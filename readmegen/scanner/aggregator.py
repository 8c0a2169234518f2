"""Composition of manifest, walker and extractor output into a ModuleDocument."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..errors import FileReadError, InvalidInputError
from ..logging import get_logger
from ..models import ModuleDocument
from .metadata import MetadataLoader
from .symbols import SymbolExtractor
from .walker import TreeWalker


class ModuleAggregator:
    """Builds the structured summary of a module directory."""

    def __init__(
        self,
        metadata_loader: MetadataLoader | None = None,
        walker: TreeWalker | None = None,
        extractor: SymbolExtractor | None = None,
    ) -> None:
        self.metadata_loader = metadata_loader or MetadataLoader()
        self.walker = walker or TreeWalker()
        self.extractor = extractor or SymbolExtractor()
        self.logger = get_logger("scanner.aggregator")

    def aggregate(self, root: str | Path) -> ModuleDocument:
        """Return the document describing the module rooted at ``root``."""
        root_path = resolve_module_root(root)
        self.logger.info("Scanning module at %s", root_path)

        info = self.metadata_loader.load(root_path)
        paths = list(self.walker.walk(root_path))
        self.logger.debug("Walker accepted %d files", len(paths))

        files: List[str] = []
        classes: List[str] = []
        functions: List[str] = []
        hooks: List[str] = []
        controllers: List[str] = []
        forms: List[str] = []

        for path in paths:
            rel_path = path.relative_to(root_path).as_posix()
            symbols = self.extractor.extract(rel_path, _read_source(path))
            files.append(rel_path)
            classes.extend(symbols.classes)
            functions.extend(symbols.functions)
            hooks.extend(symbols.hooks)
            # Only the first type declaration of a role file is captured.
            if symbols.is_controller and symbols.classes:
                controllers.append(symbols.classes[0])
            if symbols.is_form and symbols.classes:
                forms.append(symbols.classes[0])

        submodules = self.metadata_loader.load_submodules(root_path)
        self.logger.debug(
            "Extracted %d classes, %d functions, %d hooks, %d submodules",
            len(classes),
            len(functions),
            len(hooks),
            len(submodules),
        )

        return ModuleDocument(
            name=info.name,
            description=info.description,
            dependencies=info.dependencies,
            files=frozenset(files),
            classes=tuple(classes),
            functions=tuple(functions),
            hooks=tuple(hooks),
            controllers=tuple(controllers),
            forms=tuple(forms),
            submodules=submodules,
        )


def resolve_module_root(root: str | Path) -> Path:
    """Return the absolute module root, rejecting missing paths and plain files."""
    root_path = Path(root).expanduser().resolve()
    if not root_path.exists():
        raise InvalidInputError(f"Module path not found: {root}")
    if not root_path.is_dir():
        raise InvalidInputError(f"Module path is not a directory: {root}")
    return root_path


def _read_source(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        raise FileReadError(f"Unable to read {path}: {exc}") from exc


__all__ = ["ModuleAggregator", "resolve_module_root"]
