"""Infrastructure Layer — asset loading and cross-cutting concerns (logging).

Invariants:
    - Only this layer touches package resources or logging handlers
    - Parsing is delegated to core.document_codec so failures stay typed
"""
