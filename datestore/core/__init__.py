"""
Core utilities shared across the date store.

- configuration helpers (env vars, data file path, port)
- logging setup
"""
