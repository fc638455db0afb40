"""
Use case for resolving the default application of a single extension.
"""

import logging
from typing import Optional

from bindx.entities.Association import Association, ExtensionLookup
from bindx.exceptions import (
    BaseAppError,
    HandlerLookupError,
    InvalidInputError,
    TypeResolutionError,
)
from bindx.ports.handlers.handler_lookup_port import HandlerLookupPort
from bindx.ports.types.type_resolver_port import TypeResolverPort


def normalize_extension(raw: str) -> str:
    """
    Turn user input such as ".PDF" into the extension token "pdf".

    Raises:
        InvalidInputError: If nothing is left after normalization
    """
    extension = (raw or "").replace(".", "").strip().lower()
    if not extension:
        raise InvalidInputError(f"Invalid extension: {raw!r}")
    return extension


class LookupExtensionUseCase:
    """Use case resolving extension -> content type -> default handler -> path."""

    def __init__(
        self,
        type_resolver: TypeResolverPort,
        handler_lookup: HandlerLookupPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            type_resolver: Registry mapping extensions to content types
            handler_lookup: Registry of default handlers and installed apps
            logger: Logger instance to use for logging
        """
        self._type_resolver = type_resolver
        self._handler_lookup = handler_lookup
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, raw_extension: str) -> ExtensionLookup:
        """
        Resolve the default handler for a user-supplied extension.

        Args:
            raw_extension: Extension as typed, with or without dots

        Returns:
            ExtensionLookup; its association is None if the extension has no
            known content type

        Raises:
            InvalidInputError: If the extension is empty after normalization
            TypeResolutionError: If the content type registry fails
            HandlerLookupError: If the handler registry fails
        """
        extension = normalize_extension(raw_extension)
        try:
            self._logger.info(f"Looking up default handler for .{extension}")
            content_type = self._type_resolver.resolve(extension)
            if content_type is None:
                self._logger.info(f"No content type for .{extension}")
                return ExtensionLookup(extension=extension)
            association = self.associate(extension, content_type)
            return ExtensionLookup(
                extension=extension,
                content_type=content_type,
                association=association,
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error looking up .{extension}: {e}")
            raise TypeResolutionError(f"Failed to look up '.{extension}': {str(e)}")

    def resolve(
        self, extension: str, tolerate_locate_errors: bool = False
    ) -> Optional[Association]:
        """
        Resolve an extension exactly as given, without normalizing it.

        Args:
            extension: Extension token as declared
            tolerate_locate_errors: Keep the handler identifier without a path
                when locating the handler fails, instead of raising

        Returns:
            The association, or None if the extension has no known content type
        """
        content_type = self._type_resolver.resolve(extension)
        if content_type is None:
            return None
        return self.associate(extension, content_type, tolerate_locate_errors)

    def associate(
        self, extension: str, content_type: str, tolerate_locate_errors: bool = False
    ) -> Association:
        handler = self._handler_lookup.default_handler(content_type)
        if handler is None:
            return Association(extension=extension)
        try:
            path = self._handler_lookup.locate(handler)
        except HandlerLookupError as e:
            if not tolerate_locate_errors:
                raise
            self._logger.warning(f"Could not locate {handler} for .{extension}: {e}")
            path = None
        return Association(
            extension=extension,
            handler_identifier=handler,
            handler_path=path,
        )
