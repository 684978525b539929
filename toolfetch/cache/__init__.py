"""On-disk cache of downloaded tool archives."""

from .artifact_cache import ArtifactCache, Download, binary_filename

__all__ = ["ArtifactCache", "Download", "binary_filename"]
