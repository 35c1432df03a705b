from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from bindwire.exceptions import UnknownDeclarationError
from bindwire.markers import MarkerKind


class TypeArgumentKind(Enum):
    """Structural kind of a type reference as reported by the host."""

    DECLARED = "declared"
    PRIMITIVE = "primitive"
    WILDCARD = "wildcard"
    TYPE_VARIABLE = "type_variable"


@dataclass(frozen=True, slots=True)
class TypeArgument:
    """One generic argument of a superclass reference.

    ``name`` holds the qualified declaration name for declared arguments, the
    primitive name for primitives, the variable name for type variables, and
    ``None`` for wildcards.
    """

    kind: TypeArgumentKind
    name: str | None = None

    @classmethod
    def declared(cls, name: str) -> TypeArgument:
        return cls(kind=TypeArgumentKind.DECLARED, name=name)

    @classmethod
    def primitive(cls, name: str) -> TypeArgument:
        return cls(kind=TypeArgumentKind.PRIMITIVE, name=name)

    @classmethod
    def wildcard(cls) -> TypeArgument:
        return cls(kind=TypeArgumentKind.WILDCARD)

    @classmethod
    def type_variable(cls, name: str) -> TypeArgument:
        return cls(kind=TypeArgumentKind.TYPE_VARIABLE, name=name)


@dataclass(frozen=True, slots=True)
class SuperclassRef:
    """Reference from a declaration to its direct superclass."""

    name: str
    arguments: tuple[TypeArgument, ...] = ()
    kind: TypeArgumentKind = TypeArgumentKind.DECLARED

    @property
    def is_declared(self) -> bool:
        return self.kind is TypeArgumentKind.DECLARED


@dataclass(frozen=True, slots=True)
class Declaration:
    """A named type of the scanned program together with its structural metadata.

    Attributes:
        module: Dotted module path the type is declared in.
        name: Qualified name of the type within ``module``.
        type_parameters: Ordered generic parameter names declared by the type.
        superclass: Direct superclass reference, if any.
        interfaces: Qualified names of directly implemented interfaces.
        markers: Owner markers attached to the declaration.

    """

    module: str
    name: str
    type_parameters: tuple[str, ...] = ()
    superclass: SuperclassRef | None = None
    interfaces: frozenset[str] = frozenset()
    markers: frozenset[MarkerKind] = frozenset()

    @property
    def qualified_name(self) -> str:
        if not self.module:
            return self.name
        return f"{self.module}.{self.name}"

    @property
    def arity(self) -> int:
        return len(self.type_parameters)

    def has_marker(self, kind: MarkerKind) -> bool:
        return kind in self.markers

    def implements(self, interface: str) -> bool:
        """Return whether ``interface`` is among the directly implemented interfaces."""
        return interface in self.interfaces


class DeclarationGraph:
    """Read-only set of declarations supplied by a host for one generation run.

    Declarations keep the order the host supplied them in. Lookups by qualified
    name return the first declaration registered under that name.
    """

    __slots__ = ("_by_name", "_declarations")

    def __init__(self, declarations: Iterable[Declaration] = ()) -> None:
        self._declarations = tuple(declarations)
        by_name: dict[str, Declaration] = {}
        for declaration in self._declarations:
            by_name.setdefault(declaration.qualified_name, declaration)
        self._by_name: Mapping[str, Declaration] = MappingProxyType(by_name)

    @property
    def declarations(self) -> tuple[Declaration, ...]:
        return self._declarations

    def get(self, name: str) -> Declaration | None:
        return self._by_name.get(name)

    def require(self, name: str) -> Declaration:
        """Return the declaration registered under ``name``.

        Raises:
            UnknownDeclarationError: If ``name`` is not declared in the graph.

        """
        declaration = self._by_name.get(name)
        if declaration is None:
            raise UnknownDeclarationError(name)
        return declaration

    def marked(self, kind: MarkerKind) -> tuple[Declaration, ...]:
        return tuple(
            declaration for declaration in self._declarations if declaration.has_marker(kind)
        )

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(declarations={len(self._declarations)})"


__all__ = [
    "Declaration",
    "DeclarationGraph",
    "SuperclassRef",
    "TypeArgument",
    "TypeArgumentKind",
]
