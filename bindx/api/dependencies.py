"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from bindx.container import container
from bindx.use_cases.associations.list_associations import ListAssociationsUseCase
from bindx.use_cases.associations.lookup_extension import LookupExtensionUseCase


def get_lookup_extension_uc() -> LookupExtensionUseCase:
    """
    Get the lookup extension use case from the container.

    Returns:
        LookupExtensionUseCase: The lookup extension use case instance
    """
    return container.get_lookup_extension_use_case()


def get_list_associations_uc() -> ListAssociationsUseCase:
    """
    Get the list associations use case from the container.

    Returns:
        ListAssociationsUseCase: The list associations use case instance
    """
    return container.get_list_associations_use_case()
