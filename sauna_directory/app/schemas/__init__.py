"""
Pydantic schema definitions for API payloads.

Schemas are separated from row store access so the API representation
can evolve independently of the table layout.
"""
