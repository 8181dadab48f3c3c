"""
High-level use cases for the date store.

Routers call these services instead of manipulating the JSON document
directly.
"""
