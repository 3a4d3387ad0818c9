"""
SQLAlchemy ORM models.

Models are kept apart from the Pydantic schemas in ``schemas`` so the
persisted shape of an order can evolve independently of its API
representation.
"""
