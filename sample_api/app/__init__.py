"""
Application package.

``main`` assembles the FastAPI application; ``core`` holds settings,
logging, the database engine and the business‑day calendar; the order
domain is split into ``models`` (persistence), ``schemas`` (API
payloads), ``repositories`` (queries), ``services`` (business rules)
and ``api`` (HTTP routes).
"""
