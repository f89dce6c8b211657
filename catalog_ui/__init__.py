"""Incremental catalog browser: paged loading, accumulation and search."""
