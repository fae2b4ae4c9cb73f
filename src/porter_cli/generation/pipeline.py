"""Linear scaffold pipeline.

Stages run strictly in order::

    IDLE -> ARGS_PARSED -> VALIDATED -> SKELETON_COPIED
         -> MANIFEST_REWRITTEN -> OPTIONS_APPLIED -> DONE

The first error moves the pipeline to FAILED and is re-raised. Nothing that
was already written is rolled back, and nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from enum import Enum
from pathlib import Path

from porter_cli.core.constants import MANIFEST_FILENAME
from porter_cli.core.validation import validate_module_name, validate_namespace
from porter_cli.generation.models import GenerationRequest, OptionalAsset
from porter_cli.template.manager import mirror
from porter_cli.template.manifest import rewrite_manifest
from porter_cli.template.options import apply_options, validate_flags
from porter_cli.template.resolver import get_asset_root, resolve_source_path, resolve_target_path

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class GenerationStage(Enum):
    IDLE = "idle"
    ARGS_PARSED = "args_parsed"
    VALIDATED = "validated"
    SKELETON_COPIED = "skeleton_copied"
    MANIFEST_REWRITTEN = "manifest_rewritten"
    OPTIONS_APPLIED = "options_applied"
    DONE = "done"
    FAILED = "failed"


def _discard(_line: str) -> None:
    return None


class ScaffoldPipeline:
    """Run one :class:`GenerationRequest` through every stage."""

    def __init__(self, request: GenerationRequest, reporter: Reporter | None = None):
        self.request = request
        self.reporter = reporter or _discard
        self.stage = GenerationStage.IDLE
        self.failed_at: GenerationStage | None = None
        self.applied_options: list[OptionalAsset] = []
        self._asset_root: Path | None = None

    @property
    def target_path(self) -> Path:
        return resolve_target_path(self.request.name, self.request.base_path)

    @property
    def manifest_path(self) -> Path:
        return self.target_path / MANIFEST_FILENAME

    @property
    def source_path(self) -> Path:
        return resolve_source_path(
            self.request.kind,
            self.request.framework_version,
            asset_root=self._asset_root,
        )

    def run(self) -> Path:
        """Generate the skeleton and return the target directory."""
        steps: list[tuple[GenerationStage, Callable[[], None]]] = [
            (GenerationStage.ARGS_PARSED, self._log_request),
            (GenerationStage.VALIDATED, self._validate),
            (GenerationStage.SKELETON_COPIED, self._copy_skeleton),
            (GenerationStage.MANIFEST_REWRITTEN, self._rewrite_manifest),
            (GenerationStage.OPTIONS_APPLIED, self._apply_options),
        ]
        for next_stage, step in steps:
            try:
                step()
            except Exception:
                self.failed_at = next_stage
                self.stage = GenerationStage.FAILED
                logger.debug("Generation failed during stage %s", next_stage.value)
                raise
            self.stage = next_stage

        self.stage = GenerationStage.DONE
        self.reporter(" - Done")
        return self.target_path

    def _log_request(self) -> None:
        logger.debug("Generation request: %s", self.request)

    def _validate(self) -> None:
        validate_module_name(self.request.name)
        validate_namespace(self.request.namespace)
        validate_flags(self.request.kind, self.request.flags)
        if self.target_path == Path(self.request.base_path):
            logger.warning(
                "Module name %s has no name after the owner; generating directly into %s",
                self.request.name,
                self.request.base_path,
            )
        self._asset_root = self.request.asset_root or get_asset_root()
        self.reporter(
            f"Creating SilverStripe {self.request.kind.label} named {self.request.name} "
            f"at {self.request.base_path}"
        )

    def _copy_skeleton(self) -> None:
        copied = mirror(self.source_path, self.target_path)
        logger.info("Copied %d skeleton file(s) from %s to %s", copied, self.source_path, self.target_path)
        self.reporter(" - Skeleton copied")

    def _rewrite_manifest(self) -> None:
        rewrite_manifest(self.manifest_path, self.request.manifest_patch)
        self.reporter(f" - {MANIFEST_FILENAME} updated")

    def _apply_options(self) -> None:
        request = self.request
        if request.asset_root is None:
            request = replace(request, asset_root=self._asset_root)
        self.applied_options = apply_options(request, self.target_path)
        self.reporter(" - Options copied")


def generate(request: GenerationRequest, reporter: Reporter | None = None) -> Path:
    """Convenience wrapper running a fresh :class:`ScaffoldPipeline`."""
    return ScaffoldPipeline(request, reporter).run()


__all__ = ["GenerationStage", "Reporter", "ScaffoldPipeline", "generate"]
