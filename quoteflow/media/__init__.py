# quoteflow/media/__init__.py
"""Media helpers: library layout planning and preview playback."""

from quoteflow.media.library import LibraryFile, LibraryLayout, build_library_layout
from quoteflow.media.preview import PreviewPlayer

__all__ = ["LibraryFile", "LibraryLayout", "build_library_layout", "PreviewPlayer"]
