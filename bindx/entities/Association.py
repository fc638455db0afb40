"""
Association domain entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HandlerStatus(str, Enum):
    """How far the default handler of an extension could be resolved."""

    NONE = "none"
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Association:
    """
    Link between a filename extension and the application macOS opens it with.

    Attributes:
        extension: Extension token, without a leading dot
        handler_identifier: Bundle identifier of the default handler, if any
        handler_path: Install location of that handler, if it could be found
    """

    extension: str
    handler_identifier: Optional[str] = None
    handler_path: Optional[str] = None

    def __post_init__(self):
        if not self.extension:
            raise ValueError("Association requires a non-empty extension")
        if self.handler_path is not None and self.handler_identifier is None:
            raise ValueError("handler_path requires a handler_identifier")

    @property
    def status(self) -> HandlerStatus:
        if self.handler_identifier is None:
            return HandlerStatus.NONE
        if self.handler_path is None:
            return HandlerStatus.UNRESOLVED
        return HandlerStatus.RESOLVED

    def matches(self, app_filter: str) -> bool:
        """
        Check whether the handler path or identifier contains the filter.

        Args:
            app_filter: Substring to look for, compared case-insensitively

        Returns:
            True if either handler field contains the filter, False otherwise
        """
        needle = app_filter.casefold()
        for field in (self.handler_path, self.handler_identifier):
            if field is not None and needle in field.casefold():
                return True
        return False

    def get_details(self) -> dict[str, Optional[str]]:
        """
        Get the association as a plain dictionary.

        Returns:
            A dictionary with explicit None for absent handler fields.
        """
        return {
            "extension": self.extension,
            "handler_identifier": self.handler_identifier,
            "handler_path": self.handler_path,
        }


@dataclass(frozen=True)
class ExtensionLookup:
    """Outcome of resolving a single extension.

    ``association`` is None exactly when the extension has no known content type.
    """

    extension: str
    content_type: Optional[str] = None
    association: Optional[Association] = None

    @property
    def found(self) -> bool:
        return self.association is not None
