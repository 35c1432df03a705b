from __future__ import annotations

import keyword
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bindwire.contracts import VIEW_BINDING_CONTRACT
from bindwire.exceptions import MissingOutputDirectoryError

OUTPUT_DIRECTORY_OPTION = "bindwire.generated"
DEFAULT_FACTORY_NAME = "BindingFactory"


class BindWireSettings(BaseSettings):
    """Configuration of a binding factory generation run.

    Values come from keyword arguments first, then from ``BINDWIRE_``-prefixed
    environment variables, e.g. ``BINDWIRE_OUTPUT_DIR``.

    Attributes:
        output_dir: Directory generated sources are written to.
        factory_package: Dotted package the generated module belongs to.
        factory_module: Name of the generated module.
        factory_name: Name of the generated factory class.
        binding_contract: Qualified name of the interface bindings implement.
        allow_owner_overrides: Let a later owner replace an earlier
            owner that normalizes to the same owner type.

    """

    model_config = SettingsConfigDict(env_prefix="BINDWIRE_", frozen=True, extra="ignore")

    output_dir: Path | None = None
    factory_package: str = "factory"
    factory_module: str = "binding_factory"
    factory_name: str = DEFAULT_FACTORY_NAME
    binding_contract: str = VIEW_BINDING_CONTRACT
    allow_owner_overrides: bool = False

    @field_validator("factory_module", "factory_name")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _is_identifier(value):
            msg = f"'{value}' is not a valid Python identifier."
            raise ValueError(msg)
        return value

    @field_validator("factory_package")
    @classmethod
    def validate_package(cls, value: str) -> str:
        if value and not all(_is_identifier(part) for part in value.split(".")):
            msg = f"'{value}' is not a valid dotted package name."
            raise ValueError(msg)
        return value

    @classmethod
    def from_options(cls, options: Mapping[str, str], **overrides: Any) -> BindWireSettings:
        """Build settings from a build-options mapping.

        The output directory is read from the ``bindwire.generated`` option when
        present; other values fall back to the environment and defaults.

        Args:
            options: Options supplied by the build integration.
            **overrides: Explicit setting values.

        """
        values = dict(overrides)
        output_dir = options.get(OUTPUT_DIRECTORY_OPTION)
        if output_dir is not None:
            values["output_dir"] = Path(output_dir)
        return cls(**values)

    def require_output_dir(self) -> Path:
        """Return the configured output directory.

        Raises:
            MissingOutputDirectoryError: If no output directory is configured.

        """
        if self.output_dir is None:
            raise MissingOutputDirectoryError(OUTPUT_DIRECTORY_OPTION)
        return self.output_dir


def _is_identifier(value: str) -> bool:
    return value.isidentifier() and not keyword.iskeyword(value)


__all__ = [
    "DEFAULT_FACTORY_NAME",
    "OUTPUT_DIRECTORY_OPTION",
    "BindWireSettings",
]
