"""Shared pytest fixtures for bindwire tests."""

import os
from pathlib import Path

import pytest

from bindwire.artifacts import GeneratedArtifact
from bindwire.settings import BindWireSettings


class RecordingWriter:
    """Artifact writer that keeps artifacts in memory."""

    def __init__(self) -> None:
        self.written: list[tuple[GeneratedArtifact, Path]] = []

    def write(self, artifact: GeneratedArtifact, output_dir: Path) -> Path:
        self.written.append((artifact, output_dir))
        return output_dir / artifact.relative_path


@pytest.fixture(autouse=True)
def _clean_bindwire_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``BINDWIRE_*`` variables of the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("BINDWIRE_"):
            monkeypatch.delenv(name)


@pytest.fixture()
def settings(tmp_path: Path) -> BindWireSettings:
    """Settings writing into a per-test directory."""
    return BindWireSettings(output_dir=tmp_path / "generated")


@pytest.fixture()
def recording_writer() -> RecordingWriter:
    return RecordingWriter()
