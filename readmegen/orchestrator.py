"""Pipeline orchestration from module scan to written README."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import GenerationConfig
from .errors import ConfigError, OutputWriteError, ReadmeGenError
from .llm.client import GenerationClient
from .logging import get_logger
from .models import ModuleDocument
from .postproc.sanitizer import ResponseSanitizer
from .prompting.builder import PromptBuilder
from .scanner import ModuleAggregator, resolve_module_root

README_FILENAME = "README.md"


@dataclass(frozen=True)
class PipelineResult:
    """Tagged outcome of a pipeline run.

    Exactly one of ``path``/``error`` is set for generation runs. Dry runs
    carry the rendered ``prompt`` and no path.
    """

    path: Optional[Path] = None
    prompt: Optional[str] = None
    error: Optional[ReadmeGenError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def stage(self) -> Optional[str]:
        return self.error.stage if self.error is not None else None


class Orchestrator:
    """Coordinates extraction, prompting, generation and sanitizing."""

    def __init__(
        self,
        aggregator: ModuleAggregator | None = None,
        prompt_builder: PromptBuilder | None = None,
        client: GenerationClient | None = None,
        sanitizer: ResponseSanitizer | None = None,
    ) -> None:
        self.aggregator = aggregator or ModuleAggregator()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.client = client
        self.sanitizer = sanitizer or ResponseSanitizer()
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_config(cls, config: GenerationConfig) -> "Orchestrator":
        return cls(client=GenerationClient(config))

    def scan(self, path: str | Path) -> ModuleDocument:
        """Run extraction only, raising on failure."""
        return self.aggregator.aggregate(path)

    def summarize(self, path: str | Path) -> str:
        """Return the JSON summary of the module at ``path``."""
        document = self.scan(path)
        return json.dumps(document.to_dict(), indent=2, ensure_ascii=False) + "\n"

    def run(
        self,
        path: str | Path,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        dry_run: bool = False,
    ) -> PipelineResult:
        """Generate ``README.md`` for the module at ``path``.

        Failures never escape as exceptions; they are reported through the
        returned result and leave any existing README untouched.
        """
        try:
            return self._run(path, model=model, max_tokens=max_tokens, dry_run=dry_run)
        except ReadmeGenError as exc:
            self.logger.error("%s stage failed: %s", exc.stage, exc)
            return PipelineResult(error=exc)

    def _run(
        self,
        path: str | Path,
        *,
        model: Optional[str],
        max_tokens: Optional[int],
        dry_run: bool,
    ) -> PipelineResult:
        module_root = resolve_module_root(path)
        document = self.aggregator.aggregate(module_root)
        self.logger.debug("Module %s summarised with %d files", document.name, len(document.files))

        prompt = self.prompt_builder.build(document)
        if dry_run:
            self.logger.info("Dry run: skipping generation for %s", module_root)
            return PipelineResult(prompt=prompt)

        if self.client is None:
            raise ConfigError("No generation client configured; only dry runs are possible")
        raw = self.client.generate(prompt, model=model, max_tokens=max_tokens)
        readme = self.sanitizer.sanitize(raw)

        readme_path = module_root / README_FILENAME
        try:
            _write_atomic(readme_path, readme + "\n")
        except OSError as exc:
            raise OutputWriteError(f"Unable to write {readme_path}: {exc}") from exc
        self.logger.info("README written to %s", readme_path)
        return PipelineResult(path=readme_path, prompt=prompt)


def _write_atomic(path: Path, content: str) -> None:
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.chmod(temp_name, 0o644)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


__all__ = ["Orchestrator", "PipelineResult", "README_FILENAME"]
