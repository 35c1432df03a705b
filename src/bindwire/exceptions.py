class BindWireError(Exception):
    """Represent a base class for all bindwire-specific failures.

    Catch this type when you want to handle any bindwire error path without
    matching each concrete exception class individually.
    """


class BindingNotFoundError(BindWireError):
    """Signal that a marked owner declaration has no resolvable binding type.

    Raised by ``BindingResolver.resolve`` when the owner has no direct
    superclass, when the superclass is not a declared type, or when none of the
    superclass generic arguments directly implements the binding contract.
    The error aborts the whole generation run.

    Typical fix is deriving the owner from a generic base such as
    ``BaseFragment[MyBinding]`` where ``MyBinding`` subclasses
    ``bindwire.contracts.ViewBinding`` directly.
    """

    def __init__(self, declaration_name: str, contract: str) -> None:
        self.declaration_name = declaration_name
        self.contract = contract
        super().__init__(
            f"{declaration_name} should have a parent class with a generic argument "
            f"implementing {contract}, for example Base[T] where T implements {contract}.",
        )


class MissingOutputDirectoryError(BindWireError):
    """Signal that the generated sources directory was not configured.

    Raised by ``BindWireSettings.require_output_dir`` before any declaration is
    scanned or resolved.

    Typical fixes include passing the ``bindwire.generated`` build option or
    setting the ``BINDWIRE_OUTPUT_DIR`` environment variable.
    """

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Output directory is not configured; set the '{option}' option.")


class OwnerTypeConflictError(BindWireError):
    """Signal that two marked declarations map to the same dispatch key.

    Raised while building an association map when two owner declarations
    normalize to the same owner type but resolve to different bindings, and
    overrides are not allowed.

    Typical fixes include removing the duplicate declaration or enabling
    ``allow_owner_overrides`` to keep the last association.
    """

    def __init__(self, owner_type: str, existing: str, incoming: str) -> None:
        self.owner_type = owner_type
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Owner type {owner_type} is already bound to {existing}; "
            f"refusing to rebind it to {incoming}.",
        )


class UnknownDeclarationError(BindWireError):
    """Signal a declaration graph lookup for a name that is not declared."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Declaration '{name}' is not part of the declaration graph.")


class InvalidDeclarationManifestError(BindWireError):
    """Signal a declaration manifest that fails validation.

    Raised by ``bindwire.hosts.manifest`` when the JSON document produced by a
    host compiler plugin is malformed or does not match the manifest schema.
    """


class BindingNotFoundAtRuntimeError(BindWireError):
    """Signal a generated factory call with an unregistered view owner.

    Raised by generated ``BindingFactory`` methods when the dynamic type of the
    owner argument matches none of the marked owner declarations.

    Typical fix is marking the owner class with ``@bind_fragment`` or
    ``@bind_activity`` and regenerating the factory.
    """
