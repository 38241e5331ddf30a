"""
Core utilities shared across the mobile storage package.

This package hosts configuration helpers (env vars, backend selection) and
logging setup. Repositories and services depend on these primitives instead
of reading os.environ directly.
"""
