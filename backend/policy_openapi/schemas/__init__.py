"""Pydantic Schemas — typed views of the OpenAPI document served by the API.

Invariants:
    - Schemas validate at the system boundary (template parse)
    - Domain types from core/ used for discriminator tags
"""
