"""
Use cases over stored mobiles.

Services orchestrate a repository and enforce the registry rules (no
duplicate records, deletes only of stored records). Callers should use these
instead of touching a repository directly.
"""
