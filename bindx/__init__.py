"""bindx: look up which application macOS opens a file extension with.

Subpackages follow a ports/adapters layout; import them directly.
"""

__all__: list[str] = []
__version__ = "0.1.0"
