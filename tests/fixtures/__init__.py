"""Test fixtures for toolfetch tests.

- caches: Artifact cache directories, tool archives and settings

Import fixtures in your tests using:
    from tests.fixtures.caches import populated_cache, make_tar_gz
"""

__all__ = [
    "caches",
]
