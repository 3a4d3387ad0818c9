"""
Pydantic schema definitions for API payloads.

Schemas are separated from the SQLAlchemy models to decouple the API
representation of an order from its persistence.
"""
