"""Error taxonomy shared by the extraction and generation stages."""

from __future__ import annotations


class ReadmeGenError(RuntimeError):
    """Base class for fatal pipeline errors.

    ``stage`` names the pipeline stage that failed and is surfaced to the user.
    """

    stage = "pipeline"


class ConfigError(ReadmeGenError):
    """Raised when generation settings are missing or cannot be parsed."""

    stage = "config"


class InvalidInputError(ReadmeGenError):
    """Raised when the module root does not exist or is not a directory."""

    stage = "input"


class ManifestParseError(ReadmeGenError):
    """Raised when a module manifest is not valid YAML mapping data."""

    stage = "manifest"


class FileReadError(ReadmeGenError):
    """Raised when a classified file cannot be read during extraction."""

    stage = "scan"


class BackendTransportError(ReadmeGenError):
    """Raised when the generation backend cannot be reached or answers badly."""

    stage = "generation"


class MarkerNotFoundError(ReadmeGenError):
    """Raised when generated text lacks the required leading marker line."""

    stage = "sanitize"


class OutputWriteError(ReadmeGenError):
    """Raised when the generated README cannot be written to disk."""

    stage = "output"


__all__ = [
    "BackendTransportError",
    "ConfigError",
    "FileReadError",
    "InvalidInputError",
    "ManifestParseError",
    "MarkerNotFoundError",
    "OutputWriteError",
    "ReadmeGenError",
]
