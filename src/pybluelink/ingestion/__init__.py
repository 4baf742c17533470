"""Ingestion layer.

Pure mapping functions that turn vendor payloads (already fetched by the
caller) into normalized models.  Nothing in this package performs I/O.
"""

__all__: list[str] = []
