"""Loading of ``*.info.yml`` module manifests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ..errors import FileReadError, ManifestParseError
from ..logging import get_logger
from ..models import NO_DESCRIPTION, ManifestInfo, SubmoduleInfo

MANIFEST_GLOB = "*.info.yml"
_MANIFEST_SUFFIX = ".info.yml"
_SUBMODULE_GLOB = f"modules/*/{MANIFEST_GLOB}"

logger = get_logger("scanner.metadata")


class MetadataLoader:
    """Reads declared name, description and dependencies for a module."""

    def load(self, root: Path) -> ManifestInfo:
        fallback_name = root.name
        manifests = sorted(root.glob(MANIFEST_GLOB))
        if not manifests:
            logger.debug("No manifest found in %s", root)
            return ManifestInfo(name=fallback_name)
        if len(manifests) > 1:
            logger.warning(
                "Multiple manifests found in %s; using %s",
                root,
                manifests[0].name,
            )

        data = _read_manifest(manifests[0])
        name = data.get("name")
        description = data.get("description")
        return ManifestInfo(
            name=str(name) if name is not None else fallback_name,
            description=str(description) if description is not None else NO_DESCRIPTION,
            dependencies=tuple(_as_str_list(data.get("dependencies"))),
        )

    def load_submodules(self, root: Path) -> Tuple[SubmoduleInfo, ...]:
        """Return nested module summaries found one level below ``modules/``."""
        submodules: List[SubmoduleInfo] = []
        for manifest in sorted(root.glob(_SUBMODULE_GLOB)):
            data = _read_manifest(manifest)
            description = data.get("description")
            submodules.append(
                SubmoduleInfo(
                    name=manifest.name[: -len(_MANIFEST_SUFFIX)],
                    description=str(description) if description is not None else NO_DESCRIPTION,
                )
            )
        return tuple(submodules)


def _read_manifest(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileReadError(f"Unable to read manifest {path}: {exc}") from exc

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"Failed to parse {path.name}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ManifestParseError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return []


__all__ = ["MANIFEST_GLOB", "MetadataLoader"]
