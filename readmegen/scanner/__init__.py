"""Module tree scanning: classification, traversal and symbol extraction."""

from .aggregator import ModuleAggregator, resolve_module_root
from .classifier import FileClassifier
from .metadata import MetadataLoader
from .symbols import SymbolExtractor
from .walker import TreeWalker

__all__ = [
    "FileClassifier",
    "MetadataLoader",
    "ModuleAggregator",
    "SymbolExtractor",
    "TreeWalker",
    "resolve_module_root",
]
