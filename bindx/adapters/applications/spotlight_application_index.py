"""
Spotlight adapter enumerating installed application bundles on macOS.
"""

import logging
import os
import plistlib
import subprocess
from typing import Any, Optional
from xml.parsers.expat import ExpatError

from typing_extensions import override

from bindx.entities.ApplicationBundle import ApplicationBundle
from bindx.exceptions import (
    ApplicationIndexError,
    MalformedBundleError,
    ScanTimeoutError,
)
from bindx.ports.applications.application_index_port import ApplicationIndexPort

APPLICATION_BUNDLE_QUERY = "kMDItemContentType == 'com.apple.application-bundle'"

# Regular bundles keep the manifest under Contents/, shallow bundles at the root
MANIFEST_LOCATIONS = (
    os.path.join("Contents", "Info.plist"),
    "Info.plist",
)


class SpotlightApplicationIndex(ApplicationIndexPort):
    """Application index backed by an mdfind query over the local computer."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        timeout: float = 30.0,
        mdfind_path: str = "mdfind",
    ) -> None:
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging
            timeout: Seconds to wait for the Spotlight query before giving up
            mdfind_path: mdfind executable to run
        """
        self._logger = logger or logging.getLogger(__name__)
        self._timeout = timeout
        self._mdfind_path = mdfind_path

    @override
    def scan_installed_applications(self) -> list[ApplicationBundle]:
        bundles: list[ApplicationBundle] = []
        skipped = 0
        for path in self._query_bundle_paths():
            try:
                bundle = self.read_bundle(path)
            except MalformedBundleError as e:
                skipped += 1
                self._logger.debug(f"Skipping {path}: {e}")
                continue
            self._logger.debug(
                f"{bundle.name}: {len(bundle.extensions)} declared extensions"
            )
            bundles.append(bundle)
        self._logger.info(
            f"Indexed {len(bundles)} application bundles ({skipped} skipped)"
        )
        return bundles

    def _query_bundle_paths(self) -> list[str]:
        cmd = [self._mdfind_path, APPLICATION_BUNDLE_QUERY]
        self._logger.debug(f"Running {cmd} with a {self._timeout:g}s deadline")
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self._timeout
            )
        except subprocess.TimeoutExpired:
            self._logger.error(f"mdfind did not finish within {self._timeout:g}s")
            raise ScanTimeoutError(self._timeout)
        except OSError as e:
            self._logger.error(f"mdfind failed: {e}")
            raise ApplicationIndexError(f"Could not run {self._mdfind_path}: {e}")

        if result.returncode != 0:
            detail = (result.stderr or "").strip() or f"exit code {result.returncode}"
            self._logger.error(f"mdfind failed: {detail}")
            raise ApplicationIndexError(f"Application scan failed: {detail}")

        # Spotlight may report the same bundle twice across volumes
        paths = dict.fromkeys(line for line in result.stdout.splitlines() if line)
        return list(paths)

    def read_bundle(self, path: str) -> ApplicationBundle:
        """
        Read one bundle's manifest into an ApplicationBundle.

        Args:
            path: Path of the .app bundle

        Returns:
            The bundle with its declared extensions

        Raises:
            MalformedBundleError: If the manifest is missing, unreadable or
                declares no document types
        """
        manifest = self._load_manifest(path)
        bundle_id = manifest.get("CFBundleIdentifier")
        return ApplicationBundle(
            path=path,
            bundle_id=bundle_id if isinstance(bundle_id, str) and bundle_id else None,
            extensions=declared_extensions(manifest),
        )

    def _load_manifest(self, path: str) -> dict[str, Any]:
        for location in MANIFEST_LOCATIONS:
            manifest_path = os.path.join(path, location)
            if not os.path.isfile(manifest_path):
                continue
            try:
                with open(manifest_path, "rb") as f:
                    manifest = plistlib.load(f)
            except (OSError, ValueError, ExpatError) as e:
                raise MalformedBundleError(f"Unreadable manifest {manifest_path}: {e}")
            if not isinstance(manifest, dict):
                raise MalformedBundleError(f"Manifest is not a dictionary: {manifest_path}")
            return manifest
        raise MalformedBundleError("No Info.plist found")


def declared_extensions(manifest: dict[str, Any]) -> frozenset[str]:
    """Collect CFBundleTypeExtensions across all document types of a manifest."""
    doc_types = manifest.get("CFBundleDocumentTypes")
    if not isinstance(doc_types, list):
        raise MalformedBundleError("No CFBundleDocumentTypes declared")

    extensions: set[str] = set()
    for doc_type in doc_types:
        if not isinstance(doc_type, dict):
            continue
        declared = doc_type.get("CFBundleTypeExtensions")
        if not isinstance(declared, list):
            continue
        extensions.update(ext for ext in declared if isinstance(ext, str) and ext)
    return frozenset(extensions)
