"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from bindx.api.dependencies import get_list_associations_uc, get_lookup_extension_uc
from bindx.api.schemas import (
    AssociationInfo,
    AssociationListResponse,
    ErrorResponse,
    ExtensionLookupResponse,
)
from bindx.exceptions import BaseAppError, InvalidInputError, ScanTimeoutError

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get(
    "/associations",
    response_model=AssociationListResponse,
    responses={500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
def list_associations(
    app: Optional[str] = Query(
        None, description="Substring of the handler path or bundle ID to keep"
    ),
):
    """
    List the associations of every extension installed applications declare.

    Args:
        app: Optional case-insensitive filter on the handler path or bundle ID

    Returns:
        AssociationListResponse: Associations sorted by extension

    Raises:
        HTTPException: 504 if the application scan times out, 500 on other failures
    """
    try:
        associations = get_list_associations_uc().execute(app or None)
        return AssociationListResponse(
            associations=[AssociationInfo.from_entity(a) for a in associations]
        )
    except ScanTimeoutError as e:
        raise HTTPException(status_code=504, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/associations/{extension}",
    response_model=ExtensionLookupResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def lookup_extension(extension: str):
    """
    Look up the default application for one extension.

    Raises:
        HTTPException: 400 for an empty extension, 404 if the extension has no
            known content type, 500 if the registry lookup fails
    """
    try:
        lookup = get_lookup_extension_uc().execute(extension)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not lookup.found:
        raise HTTPException(
            status_code=404,
            detail=f"Could not determine UTI for extension '.{lookup.extension}'",
        )
    return ExtensionLookupResponse.from_entity(lookup)
