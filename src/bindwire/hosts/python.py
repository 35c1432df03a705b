from __future__ import annotations

import importlib
from collections import deque
from collections.abc import Iterable, Iterator
from types import ModuleType
from typing import Any, Generic, Protocol, TypeVar, get_args, get_origin

from bindwire._internal.type_checks import is_builtin_class, is_runtime_class
from bindwire.declarations import (
    Declaration,
    DeclarationGraph,
    SuperclassRef,
    TypeArgument,
    TypeArgumentKind,
)
from bindwire.markers import markers_of

_IGNORED_BASES: tuple[Any, ...] = (object, Generic, Protocol)


def collect_declarations(*modules: ModuleType | str) -> DeclarationGraph:
    """Build a declaration graph from the classes defined in ``modules``.

    Classes are taken in definition order, each followed by the classes
    nested in its body. Classes referenced by a superclass
    (the superclass itself and its generic arguments) are added after them
    even when they live in other modules, so bindings declared elsewhere can
    still be resolved.

    Args:
        modules: Modules or dotted module names to scan.

    Returns:
        The declaration graph for the scanned classes.

    """
    classes: list[type[Any]] = []
    for module in modules:
        loaded = importlib.import_module(module) if isinstance(module, str) else module
        classes.extend(_classes_defined_in(loaded))
    return declarations_from_classes(classes)


def declarations_from_classes(classes: Iterable[type[Any]]) -> DeclarationGraph:
    """Build a declaration graph from ``classes`` and the classes they reference."""
    collected: dict[str, type[Any]] = {}
    pending = deque(classes)
    while pending:
        cls = pending.popleft()
        name = qualified_name_of(cls)
        if name in collected:
            continue
        collected[name] = cls
        pending.extend(_referenced_classes(cls))
    return DeclarationGraph(declaration_from_class(cls) for cls in collected.values())


def declaration_from_class(cls: type[Any]) -> Declaration:
    """Describe a live class as a declaration.

    The direct superclass is the first base that is not ``object``,
    ``typing.Generic`` or ``typing.Protocol``. Every other direct base, and
    the superclass itself, counts as a directly implemented interface.

    Args:
        cls: Class to describe.

    """
    base = _direct_superclass(cls)
    return Declaration(
        module=cls.__module__,
        name=cls.__qualname__,
        type_parameters=tuple(
            getattr(parameter, "__name__", str(parameter))
            for parameter in vars(cls).get("__parameters__", ())
        ),
        superclass=None if base is None else _superclass_ref(base),
        interfaces=frozenset(
            qualified_name_of(interface)
            for interface in cls.__bases__
            if interface not in _IGNORED_BASES
        ),
        markers=markers_of(cls),
    )


def qualified_name_of(cls: type[Any]) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _classes_defined_in(module: ModuleType) -> Iterator[type[Any]]:
    for value in vars(module).values():
        if is_runtime_class(value) and value.__module__ == module.__name__:
            yield value
            yield from _nested_classes(value)


def _nested_classes(cls: type[Any]) -> Iterator[type[Any]]:
    for name, value in vars(cls).items():
        if is_runtime_class(value) and value.__qualname__ == f"{cls.__qualname__}.{name}":
            yield value
            yield from _nested_classes(value)


def _direct_superclass(cls: type[Any]) -> Any | None:
    for base in vars(cls).get("__orig_bases__", cls.__bases__):
        origin = get_origin(base) or base
        if origin in _IGNORED_BASES:
            continue
        return base
    return None


def _superclass_ref(base: Any) -> SuperclassRef:
    origin = get_origin(base) or base
    return SuperclassRef(
        name=qualified_name_of(origin),
        arguments=tuple(_type_argument(argument) for argument in get_args(base)),
        kind=TypeArgumentKind.PRIMITIVE if is_builtin_class(origin) else TypeArgumentKind.DECLARED,
    )


def _type_argument(argument: Any) -> TypeArgument:
    if argument is Any:
        return TypeArgument.wildcard()
    if isinstance(argument, TypeVar):
        return TypeArgument.type_variable(argument.__name__)

    origin = get_origin(argument) or argument
    if is_builtin_class(origin):
        return TypeArgument.primitive(origin.__name__)
    if is_runtime_class(origin):
        return TypeArgument.declared(qualified_name_of(origin))
    # Forward references and special forms carry no class to resolve.
    return TypeArgument.wildcard()


def _referenced_classes(cls: type[Any]) -> Iterator[type[Any]]:
    base = _direct_superclass(cls)
    if base is None:
        return
    for reference in (base, *get_args(base)):
        origin = get_origin(reference) or reference
        if is_runtime_class(origin) and not is_builtin_class(origin):
            yield origin


__all__ = [
    "collect_declarations",
    "declaration_from_class",
    "declarations_from_classes",
    "qualified_name_of",
]
