"""Cleanup of generated README text."""

from __future__ import annotations

import re

from ..errors import MarkerNotFoundError
from ..prompting.constants import README_MARKER


class ResponseSanitizer:
    """Drops backend preambles and enforces the leading marker line."""

    def __init__(self, marker: str = README_MARKER) -> None:
        self.marker = marker
        # The marker must stand on its own line, optionally as a markdown heading.
        self._pattern = re.compile(
            rf"^[ \t]*(?:#+[ \t]*)?{re.escape(marker)}[ \t\r]*$",
            re.IGNORECASE | re.MULTILINE,
        )

    def sanitize(self, raw: str) -> str:
        match = self._pattern.search(raw)
        if match is None:
            raise MarkerNotFoundError(
                f"Generated text does not contain the required '{self.marker}' line"
            )
        return raw[match.start():].strip()


__all__ = ["ResponseSanitizer"]
