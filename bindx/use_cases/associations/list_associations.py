"""
Use case for enumerating every extension association on the system.
"""

import logging
from typing import Iterable, Optional

from bindx.entities.ApplicationBundle import ApplicationBundle
from bindx.entities.Association import Association
from bindx.exceptions import (
    ApplicationIndexError,
    BaseAppError,
    HandlerLookupError,
    TypeResolutionError,
)
from bindx.ports.applications.application_index_port import ApplicationIndexPort
from bindx.use_cases.associations.lookup_extension import LookupExtensionUseCase


def collect_extensions(bundles: Iterable[ApplicationBundle]) -> list[str]:
    """Union of declared extensions, deduplicated by exact string and sorted."""
    extensions: set[str] = set()
    for bundle in bundles:
        extensions.update(bundle.extensions)
    return sorted(extensions)


class ListAssociationsUseCase:
    """Use case scanning installed applications and resolving their extensions."""

    def __init__(
        self,
        application_index: ApplicationIndexPort,
        lookup: LookupExtensionUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            application_index: Source of installed application bundles
            lookup: Use case resolving one extension to its default handler
            logger: Logger instance to use for logging
        """
        self._application_index = application_index
        self._lookup = lookup
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, app_filter: Optional[str] = None) -> list[Association]:
        """
        Scan installed applications and list the associations of their extensions.

        Args:
            app_filter: Optional substring the handler path or identifier must contain

        Returns:
            Associations sorted by extension

        Raises:
            ScanTimeoutError: If the application scan misses its deadline
            ApplicationIndexError: If the application scan fails
        """
        try:
            self._logger.info("Scanning installed applications")
            bundles = self._application_index.scan_installed_applications()
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error scanning applications: {e}")
            raise ApplicationIndexError(f"Failed to scan applications: {str(e)}")
        return self.aggregate(bundles, app_filter)

    def aggregate(
        self,
        bundles: Iterable[ApplicationBundle],
        app_filter: Optional[str] = None,
    ) -> list[Association]:
        """
        Resolve the declared extensions of the given bundles.

        Extensions without a known content type are left out. With a filter,
        only associations whose handler path or identifier contains it
        (case-insensitively) are kept.

        Args:
            bundles: Application bundles to take extensions from
            app_filter: Optional handler filter; empty means no filter

        Returns:
            Associations sorted by extension, one per extension
        """
        extensions = collect_extensions(bundles)
        self._logger.info(f"Resolving {len(extensions)} declared extensions")

        associations: list[Association] = []
        for extension in extensions:
            association = self._resolve(extension)
            if association is None:
                continue
            if app_filter and not association.matches(app_filter):
                continue
            associations.append(association)

        self._logger.info(f"Found {len(associations)} associations")
        return associations

    def _resolve(self, extension: str) -> Optional[Association]:
        try:
            return self._lookup.resolve(extension, tolerate_locate_errors=True)
        except TypeResolutionError as e:
            self._logger.warning(f"Skipping .{extension}: {e}")
            return None
        except HandlerLookupError as e:
            self._logger.warning(f"No handler information for .{extension}: {e}")
            return Association(extension=extension)
