"""
Uniform Type Identifiers adapter resolving extensions to content types on macOS.
"""

import logging
from typing import Any, Callable, Optional

from typing_extensions import override

from bindx.exceptions import TypeResolutionError
from bindx.ports.types.type_resolver_port import TypeResolverPort

# Identifiers macOS synthesizes for extensions it has no declared type for
DYNAMIC_TYPE_PREFIX = "dyn."


class UniformTypeResolver(TypeResolverPort):
    """Content type registry backed by UTType (pyobjc UniformTypeIdentifiers)."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        type_for_extension: Optional[Callable[[str], Any]] = None,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging
            type_for_extension: Callable returning a UTType-like object (or None)
                for an extension. Defaults to UTType.typeWithFilenameExtension_.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._type_for_extension = type_for_extension

    def _lookup(self, extension: str) -> Any:
        if self._type_for_extension is None:
            from UniformTypeIdentifiers import UTType

            self._type_for_extension = UTType.typeWithFilenameExtension_
        return self._type_for_extension(extension)

    @override
    def resolve(self, extension: str) -> Optional[str]:
        try:
            ut_type = self._lookup(extension)
            if ut_type is None or ut_type.isDynamic():
                self._logger.debug(f"No declared content type for .{extension}")
                return None
            identifier = str(ut_type.identifier())
        except Exception as e:
            self._logger.error(f"Content type lookup failed for .{extension}: {e}")
            raise TypeResolutionError(
                f"Failed to resolve content type for '.{extension}': {e}"
            )

        if not identifier or identifier.startswith(DYNAMIC_TYPE_PREFIX):
            return None
        self._logger.debug(f".{extension} -> {identifier}")
        return identifier
