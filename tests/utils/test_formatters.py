"""
Tests for the association formatters.
"""

import json

import pytest

from bindx.entities.Association import Association, ExtensionLookup
from bindx.utils.formatters import (
    OutputMode,
    format_associations,
    format_lookup,
    parse_structured,
    unknown_type_message,
)


@pytest.fixture
def associations():
    return [
        Association("md"),
        Association("pdf", "com.apple.Preview", "/Applications/Preview.app"),
        Association("psd", "com.adobe.Photoshop"),
    ]


class TestFormatAssociations:
    """Test cases for list and structured output."""

    def test_list_mode(self, associations):
        """List mode prints one extension per line, in order."""
        assert format_associations(associations, OutputMode.LIST) == "md\npdf\npsd"

    def test_list_mode_accepts_string(self, associations):
        assert format_associations(associations, "list") == "md\npdf\npsd"

    def test_structured_mode_explicit_nulls(self, associations):
        """Absent handler fields are serialized as null."""
        data = json.loads(format_associations(associations, OutputMode.STRUCTURED))

        assert data[0] == {
            "extensionName": "md",
            "bundleIdentifier": None,
            "applicationPath": None,
        }
        assert data[2]["bundleIdentifier"] == "com.adobe.Photoshop"
        assert data[2]["applicationPath"] is None

    def test_structured_mode_is_pretty(self, associations):
        """Structured output is indented for diffing."""
        text = format_associations(associations, OutputMode.STRUCTURED)
        assert text.startswith("[\n  {\n")

    def test_structured_empty(self):
        assert format_associations([], OutputMode.STRUCTURED) == "[]"

    def test_structured_parses_back(self, associations):
        """Parsing structured output gives back the same associations."""
        text = format_associations(associations, OutputMode.STRUCTURED)
        assert parse_structured(text) == associations

    @pytest.mark.parametrize("text", ['{"extensionName": "md"}', '[{"bundleIdentifier": null}]', "[1]"])
    def test_parse_rejects_other_shapes(self, text):
        with pytest.raises(ValueError):
            parse_structured(text)


class TestFormatLookup:
    """Test cases for single-extension output."""

    def test_resolved(self):
        """A located handler prints exactly the bundle ID and application lines."""
        lookup = ExtensionLookup(
            "pdf",
            "com.adobe.pdf",
            Association("pdf", "com.apple.Preview", "/Applications/Preview.app"),
        )

        assert format_lookup(lookup) == [
            "Bundle ID: com.apple.Preview",
            "Application: /Applications/Preview.app",
        ]

    def test_handler_not_located(self):
        lookup = ExtensionLookup(
            "psd", "com.adobe.photoshop-image", Association("psd", "com.adobe.Photoshop")
        )

        assert format_lookup(lookup) == [
            "Bundle ID: com.adobe.Photoshop",
            "Application path not found for bundle ID.",
        ]

    def test_no_default_handler(self):
        lookup = ExtensionLookup("md", "net.daringfireball.markdown", Association("md"))

        assert format_lookup(lookup) == ["No default handler found for extension '.md'"]

    def test_unknown_type_message(self):
        assert (
            unknown_type_message("xyz123")
            == "Error: Could not determine UTI for extension '.xyz123'"
        )
