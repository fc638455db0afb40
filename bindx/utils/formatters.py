"""
Plain-text and JSON renderings of association results.
"""

import json
from enum import Enum
from typing import Any, Iterable

from bindx.entities.Association import Association, ExtensionLookup

# Field names of the structured (JSON) output
EXTENSION_KEY = "extensionName"
IDENTIFIER_KEY = "bundleIdentifier"
PATH_KEY = "applicationPath"


class OutputMode(str, Enum):
    LIST = "list"
    STRUCTURED = "structured"


def to_record(association: Association) -> dict[str, Any]:
    return {
        EXTENSION_KEY: association.extension,
        IDENTIFIER_KEY: association.handler_identifier,
        PATH_KEY: association.handler_path,
    }


def format_associations(
    associations: Iterable[Association], mode: OutputMode = OutputMode.LIST
) -> str:
    """
    Render associations, keeping their order.

    Args:
        associations: Associations to render
        mode: LIST gives one extension per line; STRUCTURED gives a JSON array
            with null for absent handler fields

    Returns:
        The rendered text, without a trailing newline
    """
    if OutputMode(mode) is OutputMode.STRUCTURED:
        records = [to_record(a) for a in associations]
        return json.dumps(records, ensure_ascii=False, indent=2)
    return "\n".join(a.extension for a in associations)


def parse_structured(text: str) -> list[Association]:
    """
    Read STRUCTURED output back into associations.

    Raises:
        ValueError: If the text is not a JSON array of association records
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of associations")
    associations: list[Association] = []
    for record in data:
        if not isinstance(record, dict) or EXTENSION_KEY not in record:
            raise ValueError(f"Not an association record: {record!r}")
        associations.append(
            Association(
                extension=record[EXTENSION_KEY],
                handler_identifier=record.get(IDENTIFIER_KEY),
                handler_path=record.get(PATH_KEY),
            )
        )
    return associations


def format_lookup(lookup: ExtensionLookup) -> list[str]:
    """
    Lines reporting the default handler of a single extension.

    The lookup must have found a content type; the caller reports the
    unknown-type case itself since it is an error there.
    """
    association = lookup.association
    if association is None or association.handler_identifier is None:
        return [f"No default handler found for extension '.{lookup.extension}'"]
    lines = [f"Bundle ID: {association.handler_identifier}"]
    if association.handler_path is None:
        lines.append("Application path not found for bundle ID.")
    else:
        lines.append(f"Application: {association.handler_path}")
    return lines


def unknown_type_message(extension: str) -> str:
    return f"Error: Could not determine UTI for extension '.{extension}'"
