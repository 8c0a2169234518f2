"""Pattern-based extraction of declarations and framework conventions.

Extraction is purely lexical: declarations inside comments or string literals
are reported like any other match.
"""

from __future__ import annotations

import re
from typing import List

from ..models import FileSymbols
from .classifier import CONTROLLER_DIR, FORM_DIR

_FUNCTION_PATTERN = re.compile(r"function\s+(\w+)\s*\(")
_CLASS_PATTERN = re.compile(r"class\s+(\w+)")
HOOK_PREFIX = "hook_"


class SymbolExtractor:
    """Extracts ``path::name`` entries for routines, types and hooks."""

    def extract(self, path: str, contents: str) -> FileSymbols:
        functions: List[str] = []
        hooks: List[str] = []
        for match in _FUNCTION_PATTERN.finditer(contents):
            name = match.group(1)
            entry = f"{path}::{name}"
            functions.append(entry)
            if name.startswith(HOOK_PREFIX):
                hooks.append(entry)

        classes = [f"{path}::{match.group(1)}" for match in _CLASS_PATTERN.finditer(contents)]

        return FileSymbols(
            functions=tuple(functions),
            classes=tuple(classes),
            hooks=tuple(hooks),
            is_controller=_in_role_dir(path, CONTROLLER_DIR),
            is_form=_in_role_dir(path, FORM_DIR),
        )


def _in_role_dir(path: str, role_dir: str) -> bool:
    # Nested submodules keep their own src/ tree, so match the directory anywhere.
    norm = "/" + path.replace("\\", "/")
    return f"/{role_dir}" in norm


__all__ = ["HOOK_PREFIX", "SymbolExtractor"]
