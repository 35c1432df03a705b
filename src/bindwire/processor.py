from __future__ import annotations

import logging

from bindwire.artifacts import ArtifactWriter, FileSystemArtifactWriter, GeneratedArtifact
from bindwire.declarations import DeclarationGraph
from bindwire.exceptions import MissingOutputDirectoryError
from bindwire.markers import MarkerKind
from bindwire.resolver import BindingResolver, build_association_map
from bindwire.scanner import scan
from bindwire.settings import BindWireSettings
from bindwire.templates.renderer import FactoryTemplateRenderer

logger = logging.getLogger(__name__)


class BindingFactoryProcessor:
    """Run one binding factory generation pass over a declaration graph.

    The pass is all-or-nothing: configuration is validated before any
    resolution work, every marked owner must resolve, and the artifact is
    handed to the writer only after both association maps are complete.
    """

    def __init__(
        self,
        settings: BindWireSettings,
        *,
        writer: ArtifactWriter | None = None,
    ) -> None:
        self._settings = settings
        self._writer = writer if writer is not None else FileSystemArtifactWriter()
        self._renderer = FactoryTemplateRenderer(
            factory_name=settings.factory_name,
            package=settings.factory_package,
            module=settings.factory_module,
            binding_contract=settings.binding_contract,
        )

    def process(self, graph: DeclarationGraph) -> GeneratedArtifact | None:
        """Generate and write the binding factory for ``graph``.

        Args:
            graph: Declarations of the current compilation unit.

        Returns:
            The written artifact, or ``None`` when no declaration carries an
            owner marker and nothing was generated.

        Raises:
            MissingOutputDirectoryError: If no output directory is configured.
            BindingNotFoundError: If a marked owner has no resolvable binding.
            OwnerTypeConflictError: If two owners normalize to the same owner
                type and overrides are not allowed.

        """
        try:
            output_dir = self._settings.require_output_dir()
        except MissingOutputDirectoryError as error:
            logger.error("%s", error)
            raise

        fragment_owners = scan(graph, MarkerKind.FRAGMENT_OWNER)
        activity_owners = scan(graph, MarkerKind.ACTIVITY_OWNER)
        if not fragment_owners and not activity_owners:
            logger.info("No marked owner declarations; skipping binding factory generation")
            return None

        resolver = BindingResolver(graph, contract=self._settings.binding_contract)
        allow_overrides = self._settings.allow_owner_overrides
        fragment_map = build_association_map(
            fragment_owners,
            resolver,
            allow_overrides=allow_overrides,
        )
        activity_map = build_association_map(
            activity_owners,
            resolver,
            allow_overrides=allow_overrides,
        )

        artifact = self._renderer.render(fragment_map=fragment_map, activity_map=activity_map)
        self._writer.write(artifact, output_dir)
        return artifact


def generate_binding_factory(
    graph: DeclarationGraph,
    settings: BindWireSettings | None = None,
    *,
    writer: ArtifactWriter | None = None,
) -> GeneratedArtifact | None:
    """Run a single generation pass with ``settings`` or environment-derived settings."""
    processor = BindingFactoryProcessor(
        settings if settings is not None else BindWireSettings(),
        writer=writer,
    )
    return processor.process(graph)


__all__ = ["BindingFactoryProcessor", "generate_binding_factory"]
