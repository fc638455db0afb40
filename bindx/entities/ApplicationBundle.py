"""
Application bundle domain entity.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ApplicationBundle:
    """
    Installed application bundle discovered while scanning the system.

    Attributes:
        path: Filesystem path of the .app bundle
        bundle_id: CFBundleIdentifier from the manifest, if declared
        extensions: Filename extensions the bundle declares it can open
    """

    path: str
    bundle_id: Optional[str] = None
    extensions: frozenset[str] = field(default_factory=frozenset)

    @property
    def name(self) -> str:
        """Application name derived from the bundle directory."""
        base = os.path.basename(self.path.rstrip("/"))
        return base[: -len(".app")] if base.endswith(".app") else base

    def __str__(self) -> str:
        parts = [f"path='{self.path}'"]
        if self.bundle_id:
            parts.append(f"bundle_id='{self.bundle_id}'")
        parts.append(f"extensions={len(self.extensions)}")
        return f"ApplicationBundle({', '.join(parts)})"
