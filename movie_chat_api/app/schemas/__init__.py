"""
Pydantic schema definitions for API payloads.

Schemas are separated from the database layout to decouple the API
representation from persistence.
"""
