"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from bindx.entities.Association import Association, ExtensionLookup, HandlerStatus


class AssociationInfo(BaseModel):
    """Schema for one extension association."""

    extension: str = Field(..., description="Filename extension without a dot")
    handler_identifier: Optional[str] = Field(
        None, description="Bundle identifier of the default handler"
    )
    handler_path: Optional[str] = Field(
        None, description="Install location of the default handler"
    )
    status: HandlerStatus = Field(..., description="How far the handler resolved")

    @classmethod
    def from_entity(cls, association: Association):
        """Create an AssociationInfo schema from an Association entity."""
        details = association.get_details()
        return cls(
            extension=details["extension"],
            handler_identifier=details["handler_identifier"],
            handler_path=details["handler_path"],
            status=association.status,
        )


class ExtensionLookupResponse(BaseModel):
    """Schema for a single extension lookup."""

    extension: str = Field(..., description="Normalized extension")
    content_type: Optional[str] = Field(None, description="Content type identifier")
    association: Optional[AssociationInfo] = Field(
        None, description="Default handler association"
    )

    @classmethod
    def from_entity(cls, lookup: ExtensionLookup):
        return cls(
            extension=lookup.extension,
            content_type=lookup.content_type,
            association=(
                AssociationInfo.from_entity(lookup.association)
                if lookup.association is not None
                else None
            ),
        )


class AssociationListResponse(BaseModel):
    """Schema for association list response."""

    associations: List[AssociationInfo] = Field(
        ..., description="Associations sorted by extension"
    )


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
