from __future__ import annotations

from pathlib import Path, PurePosixPath

from bindwire.artifacts import FileSystemArtifactWriter, GeneratedArtifact


def test_relative_path_follows_package() -> None:
    artifact = GeneratedArtifact(package="app.generated", module="binding_factory", source="")

    assert artifact.relative_path == PurePosixPath("app/generated/binding_factory.py")
    assert artifact.dotted_name == "app.generated.binding_factory"


def test_relative_path_without_package() -> None:
    artifact = GeneratedArtifact(package="", module="binding_factory", source="")

    assert artifact.relative_path == PurePosixPath("binding_factory.py")
    assert artifact.dotted_name == "binding_factory"


def test_file_system_writer_creates_directories(tmp_path: Path) -> None:
    artifact = GeneratedArtifact(package="factory", module="binding_factory", source="x = 1\n")

    written = FileSystemArtifactWriter().write(artifact, tmp_path / "out")

    assert written == tmp_path / "out" / "factory" / "binding_factory.py"
    assert written.read_text(encoding="utf-8") == "x = 1\n"


def test_file_system_writer_overwrites_previous_output(tmp_path: Path) -> None:
    writer = FileSystemArtifactWriter()
    writer.write(GeneratedArtifact(package="factory", module="m", source="old\n"), tmp_path)

    written = writer.write(GeneratedArtifact(package="factory", module="m", source="new\n"), tmp_path)

    assert written.read_text(encoding="utf-8") == "new\n"
