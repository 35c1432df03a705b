"""Declaration graphs from JSON manifests written by host compiler plugins.

A manifest lists every declaration of a compilation unit:

.. code-block:: json

    {
      "declarations": [
        {
          "module": "app.screens",
          "name": "ProfileFragment",
          "superclass": {
            "name": "app.base.BaseFragment",
            "arguments": [{"kind": "declared", "name": "app.bindings.ProfileBinding"}]
          },
          "markers": ["fragment_owner"]
        },
        {
          "module": "app.bindings",
          "name": "ProfileBinding",
          "interfaces": ["bindwire.contracts.ViewBinding"]
        }
      ]
    }

"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from bindwire.declarations import (
    Declaration,
    DeclarationGraph,
    SuperclassRef,
    TypeArgument,
    TypeArgumentKind,
)
from bindwire.exceptions import InvalidDeclarationManifestError
from bindwire.markers import MarkerKind


class TypeArgumentModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: TypeArgumentKind = TypeArgumentKind.DECLARED
    name: str | None = None

    @model_validator(mode="after")
    def require_name(self) -> TypeArgumentModel:
        if self.kind is not TypeArgumentKind.WILDCARD and not self.name:
            msg = f"Type argument of kind '{self.kind.value}' requires a name."
            raise ValueError(msg)
        return self

    def to_type_argument(self) -> TypeArgument:
        return TypeArgument(kind=self.kind, name=self.name)


class SuperclassModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    kind: TypeArgumentKind = TypeArgumentKind.DECLARED
    arguments: list[TypeArgumentModel] = Field(default_factory=list)

    def to_superclass_ref(self) -> SuperclassRef:
        return SuperclassRef(
            name=self.name,
            arguments=tuple(argument.to_type_argument() for argument in self.arguments),
            kind=self.kind,
        )


class DeclarationModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    module: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type_parameters: list[str] = Field(default_factory=list)
    superclass: SuperclassModel | None = None
    interfaces: list[str] = Field(default_factory=list)
    markers: list[MarkerKind] = Field(default_factory=list)

    def to_declaration(self) -> Declaration:
        return Declaration(
            module=self.module,
            name=self.name,
            type_parameters=tuple(self.type_parameters),
            superclass=None if self.superclass is None else self.superclass.to_superclass_ref(),
            interfaces=frozenset(self.interfaces),
            markers=frozenset(self.markers),
        )


class DeclarationManifest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    declarations: list[DeclarationModel] = Field(default_factory=list)

    def to_graph(self) -> DeclarationGraph:
        return DeclarationGraph(model.to_declaration() for model in self.declarations)


def parse_manifest(data: Mapping[str, Any] | str | bytes) -> DeclarationGraph:
    """Validate a manifest document and build its declaration graph.

    Args:
        data: Decoded JSON object, or the raw JSON text.

    Raises:
        InvalidDeclarationManifestError: If the document does not match the
            manifest schema.

    """
    try:
        if isinstance(data, (str, bytes)):
            manifest = DeclarationManifest.model_validate_json(data)
        else:
            manifest = DeclarationManifest.model_validate(data)
    except ValidationError as error:
        msg = f"Invalid declaration manifest: {error}"
        raise InvalidDeclarationManifestError(msg) from error
    return manifest.to_graph()


def load_manifest(path: str | Path) -> DeclarationGraph:
    """Read and validate the manifest stored at ``path``."""
    return parse_manifest(Path(path).read_bytes())


__all__ = [
    "DeclarationManifest",
    "DeclarationModel",
    "SuperclassModel",
    "TypeArgumentModel",
    "load_manifest",
    "parse_manifest",
]
