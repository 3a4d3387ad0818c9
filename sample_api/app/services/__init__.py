"""
Service layer abstraction.

Each service encapsulates the business logic of a domain and reports
its outcome through the values defined in ``results``.  API handlers
only translate those outcomes into HTTP responses.
"""
