"""
Dependency injection container for managing application dependencies.
"""

import logging

from bindx.adapters.applications.spotlight_application_index import (
    SpotlightApplicationIndex,
)
from bindx.adapters.handlers.launch_services_handler_lookup import (
    LaunchServicesHandlerLookup,
)
from bindx.adapters.types.uniform_type_resolver import UniformTypeResolver
from bindx.config.settings import settings
from bindx.ports.applications.application_index_port import ApplicationIndexPort
from bindx.ports.handlers.handler_lookup_port import HandlerLookupPort
from bindx.ports.types.type_resolver_port import TypeResolverPort
from bindx.use_cases.associations.list_associations import ListAssociationsUseCase
from bindx.use_cases.associations.lookup_extension import LookupExtensionUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger("bindx")
        self.scan_timeout: float = settings.scan_timeout

    def get_type_resolver(self) -> TypeResolverPort:
        """
        Get type resolver adapter instance.

        Returns:
            TypeResolverPort implementation
        """
        if "type_resolver" not in self._instances:
            self._instances["type_resolver"] = UniformTypeResolver(self._logger)
        return self._instances["type_resolver"]

    def get_handler_lookup(self) -> HandlerLookupPort:
        """
        Get handler lookup adapter instance.

        Returns:
            HandlerLookupPort implementation
        """
        if "handler_lookup" not in self._instances:
            self._instances["handler_lookup"] = LaunchServicesHandlerLookup(
                self._logger
            )
        return self._instances["handler_lookup"]

    def get_application_index(self) -> ApplicationIndexPort:
        """
        Get application index adapter instance, using the current scan timeout.

        Returns:
            ApplicationIndexPort implementation
        """
        if "application_index" not in self._instances:
            self._instances["application_index"] = SpotlightApplicationIndex(
                self._logger,
                timeout=self.scan_timeout,
                mdfind_path=settings.mdfind_path,
            )
        return self._instances["application_index"]

    def get_lookup_extension_use_case(self) -> LookupExtensionUseCase:
        """
        Get lookup extension use case with injected dependencies.

        Returns:
            Configured LookupExtensionUseCase
        """
        if "lookup_extension_use_case" not in self._instances:
            self._instances["lookup_extension_use_case"] = LookupExtensionUseCase(
                self.get_type_resolver(), self.get_handler_lookup(), self._logger
            )
        return self._instances["lookup_extension_use_case"]

    def get_list_associations_use_case(self) -> ListAssociationsUseCase:
        """
        Get list associations use case with injected dependencies.

        Returns:
            Configured ListAssociationsUseCase
        """
        if "list_associations_use_case" not in self._instances:
            self._instances["list_associations_use_case"] = ListAssociationsUseCase(
                self.get_application_index(),
                self.get_lookup_extension_use_case(),
                self._logger,
            )
        return self._instances["list_associations_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
