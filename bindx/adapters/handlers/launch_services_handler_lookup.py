import logging
from typing import Any, Callable, Optional

from typing_extensions import override

from bindx.exceptions import HandlerLookupError
from bindx.ports.handlers.handler_lookup_port import HandlerLookupPort


class LaunchServicesHandlerLookup(HandlerLookupPort):
    """Default handlers from LaunchServices, install paths from NSWorkspace."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        copy_default_handler: Optional[Callable[[str], Optional[str]]] = None,
        workspace: Any = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._copy_default_handler = copy_default_handler
        self._workspace = workspace

    def _default_handler_fn(self) -> Callable[[str], Optional[str]]:
        if self._copy_default_handler is None:
            from CoreServices import LSCopyDefaultRoleHandlerForContentType, kLSRolesAll

            def copy_default_handler(content_type: str) -> Optional[str]:
                return LSCopyDefaultRoleHandlerForContentType(content_type, kLSRolesAll)

            self._copy_default_handler = copy_default_handler
        return self._copy_default_handler

    def _shared_workspace(self) -> Any:
        if self._workspace is None:
            from AppKit import NSWorkspace

            self._workspace = NSWorkspace.sharedWorkspace()
        return self._workspace

    @override
    def default_handler(self, content_type: str) -> Optional[str]:
        try:
            handler = self._default_handler_fn()(content_type)
        except Exception as e:
            self._logger.error(f"Default handler lookup failed for {content_type}: {e}")
            raise HandlerLookupError(
                f"Failed to look up default handler for {content_type}: {e}"
            )
        if not handler:
            self._logger.debug(f"No default handler registered for {content_type}")
            return None
        return str(handler)

    @override
    def locate(self, bundle_id: str) -> Optional[str]:
        try:
            url = self._shared_workspace().URLForApplicationWithBundleIdentifier_(
                bundle_id
            )
            path = url.path() if url is not None else None
        except Exception as e:
            self._logger.error(f"Application lookup failed for {bundle_id}: {e}")
            raise HandlerLookupError(f"Failed to locate application {bundle_id}: {e}")
        if not path:
            # Registered earlier but no longer installed
            self._logger.debug(f"No installed application for {bundle_id}")
            return None
        return str(path)
