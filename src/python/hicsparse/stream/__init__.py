# hicsparse/stream/__init__.py
"""Advanced, high-level readers for per-matrix streaming."""
from .readers import MatrixReader
