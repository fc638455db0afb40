"""
Handler lookup port interface for default applications and their locations.
"""

from abc import ABC, abstractmethod
from typing import Optional


class HandlerLookupPort(ABC):
    """Port interface for the default-handler and application registries."""

    @abstractmethod
    def default_handler(self, content_type: str) -> Optional[str]:
        """
        Find the application registered as default opener for a content type.

        Args:
            content_type: Canonical content type identifier (e.g. "com.adobe.pdf")

        Returns:
            Bundle identifier of the default handler, or None if there is none

        Raises:
            HandlerLookupError: If the registry lookup itself fails
        """
        pass

    @abstractmethod
    def locate(self, bundle_id: str) -> Optional[str]:
        """
        Find where an application is installed.

        Args:
            bundle_id: Bundle identifier of the application

        Returns:
            Filesystem path of the application bundle, or None if no installed
            bundle has this identifier

        Raises:
            HandlerLookupError: If the registry lookup itself fails
        """
        pass
