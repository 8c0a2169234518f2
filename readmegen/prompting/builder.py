"""Builds the README generation prompt from a module summary."""

from __future__ import annotations

import json

from jinja2 import Environment

from ..models import ModuleDocument
from .constants import PROMPT_TEMPLATE, README_MARKER, README_SECTIONS


class PromptBuilder:
    """Renders a ModuleDocument into the fixed instruction template."""

    def __init__(self) -> None:
        self._env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
        self._template = self._env.from_string(PROMPT_TEMPLATE)

    def build(self, document: ModuleDocument) -> str:
        """Return the instruction text for the generation backend."""
        summary = self.serialize(document)
        return self._template.render(
            marker=README_MARKER,
            sections=README_SECTIONS,
            module_name=document.name,
            summary=summary,
        ).strip() + "\n"

    @staticmethod
    def serialize(document: ModuleDocument) -> str:
        """Return the canonical JSON form of the document."""
        return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)


__all__ = ["PromptBuilder"]
