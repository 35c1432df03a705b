from bindwire.artifacts import ArtifactWriter, FileSystemArtifactWriter, GeneratedArtifact
from bindwire.contracts import ViewBinding
from bindwire.declarations import (
    Declaration,
    DeclarationGraph,
    SuperclassRef,
    TypeArgument,
    TypeArgumentKind,
)
from bindwire.exceptions import (
    BindingNotFoundAtRuntimeError,
    BindingNotFoundError,
    BindWireError,
    InvalidDeclarationManifestError,
    MissingOutputDirectoryError,
    OwnerTypeConflictError,
    UnknownDeclarationError,
)
from bindwire.markers import MarkerKind, bind_activity, bind_fragment
from bindwire.processor import BindingFactoryProcessor, generate_binding_factory
from bindwire.resolver import BindingResolver, build_association_map
from bindwire.scanner import OwnerType, ScannedOwner, owner_type_of, scan
from bindwire.settings import BindWireSettings
from bindwire.templates.renderer import FactoryTemplateRenderer, emit

__all__ = [
    "ArtifactWriter",
    "BindWireError",
    "BindWireSettings",
    "BindingFactoryProcessor",
    "BindingNotFoundAtRuntimeError",
    "BindingNotFoundError",
    "BindingResolver",
    "Declaration",
    "DeclarationGraph",
    "FactoryTemplateRenderer",
    "FileSystemArtifactWriter",
    "GeneratedArtifact",
    "InvalidDeclarationManifestError",
    "MarkerKind",
    "MissingOutputDirectoryError",
    "OwnerType",
    "OwnerTypeConflictError",
    "ScannedOwner",
    "SuperclassRef",
    "TypeArgument",
    "TypeArgumentKind",
    "UnknownDeclarationError",
    "ViewBinding",
    "bind_activity",
    "bind_fragment",
    "build_association_map",
    "emit",
    "generate_binding_factory",
    "owner_type_of",
    "scan",
]
