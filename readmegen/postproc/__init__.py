"""Post-processing of generated README text."""

from .sanitizer import ResponseSanitizer

__all__ = ["ResponseSanitizer"]
