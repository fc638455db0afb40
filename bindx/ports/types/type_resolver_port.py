"""
Type resolver port interface mapping extensions to content type identifiers.
"""

from abc import ABC, abstractmethod
from typing import Optional


class TypeResolverPort(ABC):
    """Port interface for the system content type registry."""

    @abstractmethod
    def resolve(self, extension: str) -> Optional[str]:
        """
        Map a filename extension to its canonical content type identifier.

        Args:
            extension: Extension token without a leading dot (e.g. "pdf")

        Returns:
            The content type identifier, or None if the registry knows no type
            for this extension

        Raises:
            TypeResolutionError: If the registry lookup itself fails
        """
        pass
