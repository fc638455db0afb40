"""
Pytest configuration and shared fixtures.
"""

import plistlib
from typing import Optional
from unittest.mock import MagicMock

import pytest

from bindx.container import DependencyContainer
from bindx.ports.handlers.handler_lookup_port import HandlerLookupPort
from bindx.ports.types.type_resolver_port import TypeResolverPort


class FakeTypeResolver(TypeResolverPort):
    """Type registry backed by a dictionary of extension -> content type."""

    def __init__(self, types: dict[str, str]):
        self.types = types
        self.calls: list[str] = []

    def resolve(self, extension: str) -> Optional[str]:
        self.calls.append(extension)
        return self.types.get(extension)


class FakeHandlerLookup(HandlerLookupPort):
    """Handler registry backed by dictionaries."""

    def __init__(self, handlers: dict[str, str], locations: dict[str, str]):
        self.handlers = handlers
        self.locations = locations

    def default_handler(self, content_type: str) -> Optional[str]:
        return self.handlers.get(content_type)

    def locate(self, bundle_id: str) -> Optional[str]:
        return self.locations.get(bundle_id)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def type_resolver():
    """Registry knowing a handful of common extensions."""
    return FakeTypeResolver(
        {
            "pdf": "com.adobe.pdf",
            "txt": "public.plain-text",
            "md": "net.daringfireball.markdown",
            "rtf": "public.rtf",
            "psd": "com.adobe.photoshop-image",
            "PDF": "com.adobe.pdf",
        }
    )


@pytest.fixture
def handler_lookup():
    """
    Handler registry where markdown has no default handler and Photoshop
    files point at an application that is no longer installed.
    """
    return FakeHandlerLookup(
        handlers={
            "com.adobe.pdf": "com.apple.Preview",
            "public.plain-text": "com.apple.TextEdit",
            "public.rtf": "com.apple.TextEdit",
            "com.adobe.photoshop-image": "com.adobe.Photoshop",
        },
        locations={
            "com.apple.Preview": "/System/Applications/Preview.app",
            "com.apple.TextEdit": "/System/Applications/TextEdit.app",
        },
    )


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def make_bundle(tmp_path):
    """
    Factory writing a fake .app bundle with an Info.plist.

    Pass manifest=None to create a bundle without a manifest.
    """

    def _make(name: str, manifest: Optional[dict] = None, shallow: bool = False) -> str:
        bundle = tmp_path / f"{name}.app"
        plist_dir = bundle if shallow else bundle / "Contents"
        plist_dir.mkdir(parents=True)
        if manifest is not None:
            with open(plist_dir / "Info.plist", "wb") as f:
                plistlib.dump(manifest, f)
        return str(bundle)

    return _make
