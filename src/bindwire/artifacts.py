from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """In-memory generated source module."""

    package: str
    module: str
    source: str
    fragment_branch_count: int = 0
    activity_branch_count: int = 0

    @property
    def relative_path(self) -> PurePosixPath:
        """Return the module path relative to the output directory."""
        filename = f"{self.module}.py"
        if not self.package:
            return PurePosixPath(filename)
        return PurePosixPath(*self.package.split("."), filename)

    @property
    def dotted_name(self) -> str:
        if not self.package:
            return self.module
        return f"{self.package}.{self.module}"


class ArtifactWriter(Protocol):
    def write(self, artifact: GeneratedArtifact, output_dir: Path) -> Path:
        """Persist ``artifact`` under ``output_dir`` and return the written path."""
        ...


class FileSystemArtifactWriter:
    """Write generated modules to the local file system."""

    def write(self, artifact: GeneratedArtifact, output_dir: Path) -> Path:
        target = Path(output_dir, artifact.relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.source, encoding="utf-8")
        logger.info("Wrote %s to %s", artifact.dotted_name, target)
        return target


__all__ = ["ArtifactWriter", "FileSystemArtifactWriter", "GeneratedArtifact"]
